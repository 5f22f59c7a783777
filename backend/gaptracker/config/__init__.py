"""Configuration package"""
from gaptracker.config.settings import settings, Settings, configure_logging
from gaptracker.config.similarity_config import SimilarityConfig, DEFAULT_CONFIG

__all__ = [
    "settings",
    "Settings",
    "configure_logging",
    "SimilarityConfig",
    "DEFAULT_CONFIG"
]
