"""
Gap Similarity Service

Caller-side glue between gap records and the similarity engine:
- Assembles the engine text of a gap (title + description)
- Builds the candidate corpus (target and excluded statuses removed)
- Expands matches into bidirectional pairs for the record store

The record store itself is external; this module only reads the records it
is handed and never writes anywhere.
"""

import logging
from typing import Iterable, List, Optional, Sequence

from gaptracker.config.settings import settings
from gaptracker.models.schemas import GapRecord, GapStatus, SimilarGapPair
from gaptracker.services.similarity_engine import (
    GapDocument,
    GapSimilarityEngine,
    SimilarityMatch
)

logger = logging.getLogger(__name__)


def gap_text(record: GapRecord) -> str:
    """Text used for similarity: title and description joined by a space."""
    return f"{record.title} {record.description}"


def to_document(record: GapRecord) -> GapDocument:
    """Reduce a gap record to an engine document."""
    return GapDocument(id=record.id, text=gap_text(record))


def build_candidates(
    target: GapRecord,
    records: Iterable[GapRecord],
    excluded_statuses: Optional[Iterable[str]] = None
) -> List[GapDocument]:
    """
    Build the candidate corpus for a target gap

    Args:
        target: Gap being compared
        records: All known gaps, in store order
        excluded_statuses: Statuses to leave out (defaults to settings)

    Returns:
        Candidate documents in the original order, without the target and
        without gaps in an excluded status
    """
    if excluded_statuses is None:
        excluded_statuses = settings.SIMILARITY_EXCLUDED_STATUSES
    # Normalise mixed str/enum inputs; unknown names raise ValueError
    excluded = {GapStatus(status).value for status in excluded_statuses}

    return [
        to_document(record)
        for record in records
        if record.id != target.id and GapStatus(record.status).value not in excluded
    ]


def expand_bidirectional(gap_id: int, matches: Sequence[SimilarityMatch]) -> List[SimilarGapPair]:
    """
    Expand matches into pairs stored in both directions

    Forward pairs (gap -> match) come first, then the reverse pairs, so a
    lookup from either gap finds the relation.
    """
    forward = [
        SimilarGapPair(gap_id=gap_id, similar_gap_id=match.id, similarity_score=match.score)
        for match in matches
    ]
    reverse = [
        SimilarGapPair(gap_id=match.id, similar_gap_id=gap_id, similarity_score=match.score)
        for match in matches
    ]
    return forward + reverse


def find_similar_gaps(
    target: GapRecord,
    records: Iterable[GapRecord],
    threshold: Optional[float] = None,
    excluded_statuses: Optional[Iterable[str]] = None,
    engine: Optional[GapSimilarityEngine] = None
) -> List[SimilarityMatch]:
    """
    Find gaps similar to a target gap record

    Args:
        target: Gap being compared
        records: All known gaps (target and excluded statuses are dropped)
        threshold: Minimum similarity fraction (defaults to settings)
        excluded_statuses: Statuses left out of the corpus (defaults to settings)
        engine: Similarity engine (a default engine is built if omitted)

    Returns:
        Ranked similarity matches
    """
    if threshold is None:
        threshold = settings.SIMILARITY_THRESHOLD
    engine = engine or GapSimilarityEngine()

    candidates = build_candidates(target, records, excluded_statuses)
    matches = engine.find_similar(to_document(target), candidates, threshold)

    logger.info(
        f"[gap {target.id}] {len(matches)} similar gaps "
        f"among {len(candidates)} candidates"
    )
    return matches
