"""Utilities package - Helper functions"""
from gaptracker.utils.validators import (
    SimilarityInputError,
    require_text,
    require_identifier,
    require_threshold
)

__all__ = [
    "SimilarityInputError",
    "require_text",
    "require_identifier",
    "require_threshold"
]
