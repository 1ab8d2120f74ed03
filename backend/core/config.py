"""Centralised application tunables.

Create a custom ``AppConfig`` to tweak values for testing::

    cfg = AppConfig(log_level="DEBUG")
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class AppConfig:
    """All application tunables, grouped by category."""

    # --- API ---
    title: str = "Building Volume API"
    cors_origins: list[str] = field(default_factory=lambda: ["*"])

    # --- Logging ---
    log_level: str = "WARNING"  # root logger
    log_format: str = "%(name)s | %(message)s"
    reporting_log_level: str = "INFO"  # services.reporting


DEFAULT = AppConfig()
