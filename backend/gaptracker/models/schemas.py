"""
Pydantic Models and Schemas

This module defines the data models and validation schemas used by the
similarity API and the gap record helpers.

Responsibilities:
- Gap record and status definitions
- Similar gap pair structure (as stored by the record store)
- Request/Response models
"""

from pydantic import BaseModel, Field, StrictInt, StrictStr
from typing import Optional, List, Dict
from datetime import datetime
from enum import Enum


class GapStatus(str, Enum):
    """Gap lifecycle status"""
    PENDING_AI = "PendingAI"
    NEEDS_REVIEW = "NeedsReview"
    ASSIGNED = "Assigned"
    IN_PROGRESS = "InProgress"
    OVERDUE = "Overdue"
    RESOLVED = "Resolved"
    CLOSED = "Closed"
    REOPENED = "Reopened"


class GapRecord(BaseModel):
    """
    A gap as held by the record store, reduced to the fields similarity needs

    Title and description must be real strings; None or numbers are rejected
    rather than coerced.
    """
    id: StrictInt = Field(..., description="Gap primary key")
    title: StrictStr = Field(..., description="Gap title")
    description: StrictStr = Field(..., description="Gap description")
    status: GapStatus = Field(default=GapStatus.PENDING_AI, description="Gap status")


class SimilarGapPair(BaseModel):
    """One directed similarity relation (gap -> similar gap)"""
    gap_id: int
    similar_gap_id: int
    similarity_score: int = Field(..., ge=0, le=100)


class SimilarGapItem(BaseModel):
    """Single ranked similar gap in an API response"""
    gap_id: int = Field(..., description="Identifier of the similar gap")
    score: int = Field(..., description="Similarity percentage", ge=0, le=100)


class SimilarGapsRequest(BaseModel):
    """
    Request body for similar gap lookup.

    The caller supplies the target and the gaps to compare against; no gap
    data is stored by the service.
    """
    target: GapRecord
    gaps: List[GapRecord] = Field(default_factory=list)
    threshold: Optional[float] = Field(
        default=None,
        description="Minimum similarity as a fraction (defaults to settings)",
        ge=0.0,
        le=1.0
    )
    excluded_statuses: Optional[List[GapStatus]] = Field(
        default=None,
        description="Statuses left out of the candidate corpus (defaults to settings)"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "target": {
                    "id": 12,
                    "title": "Refund confirmation email not sent",
                    "description": "Customer did not receive the refund confirmation",
                    "status": "PendingAI"
                },
                "gaps": [
                    {
                        "id": 3,
                        "title": "Refund email confirmation missing",
                        "description": "Customers report missing refund confirmation email",
                        "status": "InProgress"
                    }
                ],
                "threshold": 0.6
            }
        }


class SimilarGapsResponse(BaseModel):
    """Ranked similar gaps for a target gap"""
    gap_id: int
    threshold: float
    candidates_considered: int
    similar_gaps: List[SimilarGapItem]
    pairs: List[SimilarGapPair]


class SimilarityScoreRequest(BaseModel):
    """Request body for pairwise similarity"""
    text_a: StrictStr
    text_b: StrictStr
    corpus: List[StrictStr] = Field(default_factory=list)


class SimilarityScoreResponse(BaseModel):
    """Pairwise similarity result"""
    similarity: float = Field(..., description="Raw cosine similarity")
    percentage: int = Field(..., description="Rounded, clamped percentage", ge=0, le=100)


class HealthCheckResponse(BaseModel):
    """Health check response model"""
    status: str
    services: Dict[str, str]
    timestamp: datetime = Field(default_factory=datetime.utcnow)
