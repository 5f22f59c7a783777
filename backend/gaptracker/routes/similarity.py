"""
FastAPI routes for gap similarity.

Stateless endpoints wrapping the TF-IDF similarity engine. The caller posts
the gap records to compare; nothing is stored between requests.
"""

import logging
from fastapi import APIRouter, HTTPException, Depends, Body, status

from gaptracker.config.settings import settings
from gaptracker.models.schemas import (
    SimilarGapItem,
    SimilarGapsRequest,
    SimilarGapsResponse,
    SimilarityScoreRequest,
    SimilarityScoreResponse
)
from gaptracker.services.gap_similarity import (
    build_candidates,
    expand_bidirectional,
    to_document
)
from gaptracker.services.similarity_engine import GapSimilarityEngine, to_percentage
from gaptracker.services.tfidf import calculate_similarity
from gaptracker.utils.validators import SimilarityInputError

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["similarity"],
    responses={
        422: {"description": "Invalid input"}
    }
)


# ============================================================================
# Dependency Injection
# ============================================================================

def get_similarity_engine() -> GapSimilarityEngine:
    """
    Dependency to get a similarity engine.

    A fresh engine per request: the engine keeps no state worth sharing.
    """
    return GapSimilarityEngine()


# ============================================================================
# Routes
# ============================================================================

@router.post(
    "/gaps/similar",
    response_model=SimilarGapsResponse,
    status_code=status.HTTP_200_OK,
    summary="Find gaps similar to a target gap",
    description="""
    Rank the posted gaps by TF-IDF cosine similarity to the target gap.

    - The target itself and gaps in an excluded status (default: Closed) are
      left out of the corpus
    - Scores are percentages (0-100); only scores >= threshold * 100 are kept
    - At most 5 gaps are returned, highest score first
    - `pairs` lists every match in both directions, ready to store
    """
)
def find_similar_gaps_route(
    request: SimilarGapsRequest = Body(...),
    engine: GapSimilarityEngine = Depends(get_similarity_engine)
) -> SimilarGapsResponse:
    threshold = (
        request.threshold if request.threshold is not None
        else settings.SIMILARITY_THRESHOLD
    )

    logger.info(
        f"[API] Similarity request for gap {request.target.id} "
        f"against {len(request.gaps)} gaps (threshold {threshold})"
    )

    try:
        candidates = build_candidates(
            request.target,
            request.gaps,
            excluded_statuses=request.excluded_statuses
        )
        matches = engine.find_similar(to_document(request.target), candidates, threshold)
    except SimilarityInputError as e:
        logger.warning(f"[API] Invalid similarity input: {e}")
        raise HTTPException(
            status_code=422,
            detail=str(e)
        )

    return SimilarGapsResponse(
        gap_id=request.target.id,
        threshold=threshold,
        candidates_considered=len(candidates),
        similar_gaps=[SimilarGapItem(gap_id=m.id, score=m.score) for m in matches],
        pairs=expand_bidirectional(request.target.id, matches)
    )


@router.post(
    "/similarity/score",
    response_model=SimilarityScoreResponse,
    status_code=status.HTTP_200_OK,
    summary="Score two texts against a corpus"
)
def score_similarity_route(request: SimilarityScoreRequest = Body(...)) -> SimilarityScoreResponse:
    """Raw cosine similarity of two texts, IDF taken over the posted corpus."""
    similarity = calculate_similarity(request.text_a, request.text_b, request.corpus)

    return SimilarityScoreResponse(
        similarity=similarity,
        percentage=to_percentage(similarity)
    )
