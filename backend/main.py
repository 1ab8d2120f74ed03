"""FastAPI entry point - thin layer over the domain."""

import logging
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.schemas import BuildingIn
from core.config import DEFAULT as APP_CONFIG
from core.models import Building
from data import SAMPLE_BUILDING
from services.reporting import generate_volume_report, report_to_dict

logging.basicConfig(level=APP_CONFIG.log_level, format=APP_CONFIG.log_format)
logging.getLogger("services.reporting").setLevel(APP_CONFIG.reporting_log_level)

app = FastAPI(title=APP_CONFIG.title)

app.add_middleware(
    CORSMiddleware,
    allow_origins=APP_CONFIG.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
def get_health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/building")
def get_building() -> Building:
    return SAMPLE_BUILDING


@app.get("/building/report")
def get_building_report() -> dict[str, Any]:
    """Volume report for the sample building."""
    return report_to_dict(generate_volume_report(SAMPLE_BUILDING))


@app.post("/reports/volume")
def create_volume_report(body: BuildingIn) -> dict[str, Any]:
    """Volume report for a building posted by the client."""
    return report_to_dict(generate_volume_report(body.to_domain()))
