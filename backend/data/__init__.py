"""Sample data and fixtures."""

from data.sample_building import SAMPLE_BUILDING

__all__ = ["SAMPLE_BUILDING"]
