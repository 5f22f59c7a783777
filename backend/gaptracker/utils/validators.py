"""
Input Validation Utilities

Precondition checks for the similarity engine. Invalid inputs fail fast with
SimilarityInputError instead of being coerced into NaN or empty scores.

Responsibilities:
- Validate text inputs
- Validate gap identifiers
- Validate similarity thresholds
"""

import math
from numbers import Real
from typing import Any


class SimilarityInputError(TypeError):
    """Raised when the similarity engine receives an input of the wrong type."""
    pass


def require_text(value: Any, field: str = "text") -> str:
    """
    Ensure a value is a string

    Args:
        value: Value to check
        field: Name used in the error message

    Returns:
        The value unchanged

    Raises:
        SimilarityInputError: If value is None or not a str
    """
    if not isinstance(value, str):
        raise SimilarityInputError(
            f"{field} must be a string, got {type(value).__name__}"
        )
    return value


def require_identifier(value: Any, field: str = "id") -> int:
    """
    Ensure a value is an integer identifier (bool is rejected)

    Raises:
        SimilarityInputError: If value is not an int
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise SimilarityInputError(
            f"{field} must be an integer, got {type(value).__name__}"
        )
    return value


def require_threshold(value: Any) -> float:
    """
    Ensure a threshold is a finite real number

    Values outside 0-1 are accepted: a negative threshold keeps every
    candidate and one above 1 keeps none.

    Raises:
        SimilarityInputError: If value is not a finite real number
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise SimilarityInputError(
            f"threshold must be a number, got {type(value).__name__}"
        )
    if not math.isfinite(value):
        raise SimilarityInputError(f"threshold must be finite, got {value}")
    return float(value)
