"""Data models package"""
from gaptracker.models.schemas import (
    GapStatus,
    GapRecord,
    SimilarGapPair,
    SimilarGapItem,
    SimilarGapsRequest,
    SimilarGapsResponse,
    SimilarityScoreRequest,
    SimilarityScoreResponse,
    HealthCheckResponse
)

__all__ = [
    "GapStatus",
    "GapRecord",
    "SimilarGapPair",
    "SimilarGapItem",
    "SimilarGapsRequest",
    "SimilarGapsResponse",
    "SimilarityScoreRequest",
    "SimilarityScoreResponse",
    "HealthCheckResponse"
]
