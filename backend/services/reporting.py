"""Report service: run a volume report and turn it into a JSON-ready payload."""

import dataclasses
import logging
from typing import Any

from core.models import Building
from reports.volume import BuildingReport, VolumeReportVisitor

logger = logging.getLogger(__name__)


def generate_volume_report(building: Building) -> BuildingReport:
    """Walk ``building`` with a fresh visitor and return the finished report."""
    visitor = VolumeReportVisitor()
    building.accept(visitor)
    report = visitor.report
    if report is None:
        raise RuntimeError(f"Traversal of building {building.id!r} produced no report")

    logger.info(
        "Volume report for %s: %d levels, total_volume=%.2f m³",
        report.building_id,
        len(report.levels or []),
        report.total_volume or 0.0,
    )
    return report


def report_to_dict(report: Any) -> dict[str, Any]:
    """Convert a report dataclass tree to a dict, dropping fields that are None.

    Keys come from each field's ``json`` metadata, falling back to the field name.
    """
    payload: dict[str, Any] = {}
    for f in dataclasses.fields(report):
        value = getattr(report, f.name)
        if value is None:
            continue
        key = f.metadata.get("json", f.name)
        if isinstance(value, list):
            payload[key] = [report_to_dict(item) if dataclasses.is_dataclass(item) else item for item in value]
        elif dataclasses.is_dataclass(value):
            payload[key] = report_to_dict(value)
        else:
            payload[key] = value
    return payload
