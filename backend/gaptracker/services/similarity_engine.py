"""
Gap Similarity Engine

Ranks previously submitted gaps by TF-IDF cosine similarity to a target gap.

Pipeline (recomputed on every call, nothing is cached):
1. Tokenize target and candidate texts
2. Compute IDF once over the candidate corpus (target excluded)
3. Build TF-IDF vectors for the target and each candidate
4. Score each candidate against the target (cosine similarity)
5. Convert to a 0-100 percentage, apply the threshold
6. Sort by descending score (stable) and keep the top results

Example Usage:
    >>> engine = GapSimilarityEngine()
    >>> matches = engine.find_similar(
    ...     target=GapDocument(id=7, text="Refund email not sent"),
    ...     candidates=[GapDocument(id=1, text="Refund email missing")],
    ...     threshold=0.6
    ... )
    >>> [(m.id, m.score) for m in matches]
"""

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from gaptracker.config.similarity_config import SimilarityConfig, DEFAULT_CONFIG
from gaptracker.services.text_tokenizer import tokenize
from gaptracker.services.tfidf import (
    compute_term_frequency,
    compute_inverse_document_frequency,
    build_tfidf_vector,
    cosine_similarity
)
from gaptracker.utils.validators import (
    SimilarityInputError,
    require_text,
    require_identifier,
    require_threshold
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GapDocument:
    """
    A gap reduced to one text blob.

    Attributes:
        id: Gap identifier
        text: Caller-assembled text (title + description)
    """
    id: int
    text: str

    def __post_init__(self):
        require_identifier(self.id, "document id")
        require_text(self.text, f"text of document {self.id}")


@dataclass(frozen=True)
class SimilarityMatch:
    """
    One ranked similar gap.

    Attributes:
        id: Identifier of the similar gap
        score: Similarity percentage (0-100)
    """
    id: int
    score: int

    def to_dict(self) -> Dict[str, int]:
        return {"id": self.id, "score": self.score}


def to_percentage(similarity: float) -> int:
    """
    Convert a cosine similarity to an integer percentage in [0, 100]

    Halves round up (0.125 -> 13), then the result is clamped.
    """
    percentage = math.floor(similarity * 100 + 0.5)
    return max(0, min(100, int(percentage)))


def _as_document(value: Any, role: str) -> GapDocument:
    if isinstance(value, GapDocument):
        return value
    if isinstance(value, Mapping):
        if "id" not in value or "text" not in value:
            raise SimilarityInputError(f"{role} must have 'id' and 'text' keys")
        return GapDocument(id=value["id"], text=value["text"])
    raise SimilarityInputError(
        f"{role} must be a GapDocument or a mapping, got {type(value).__name__}"
    )


class GapSimilarityEngine:
    """
    Stateless TF-IDF similarity engine for gap deduplication.

    The engine holds only its configuration; every call builds its own IDF
    table from the corpus it is given, so concurrent calls never interact.

    Ties keep corpus order (Python's sort is stable). Callers should not rely
    on tie ordering as part of the API.
    """

    def __init__(self, config: Optional[SimilarityConfig] = None):
        """
        Initialize similarity engine.

        Args:
            config: Similarity configuration (defaults to DEFAULT_CONFIG)
        """
        self.config = config or DEFAULT_CONFIG

    def find_similar(
        self,
        target: Any,
        candidates: Sequence[Any],
        threshold: Optional[float] = None
    ) -> List[SimilarityMatch]:
        """
        Rank candidates by similarity to the target.

        Args:
            target: GapDocument (or mapping with 'id' and 'text')
            candidates: Candidate corpus, target already excluded
            threshold: Minimum similarity as a fraction (default 0.6)

        Returns:
            Up to max_results matches sorted by descending score. Empty when
            the corpus is empty or nothing reaches the threshold.

        Raises:
            SimilarityInputError: On non-string text, non-int ids or a
                non-numeric threshold
        """
        if threshold is None:
            threshold = self.config.default_threshold
        threshold = require_threshold(threshold)

        target_doc = _as_document(target, "target")
        if isinstance(candidates, (str, bytes)) or not isinstance(candidates, Sequence):
            raise SimilarityInputError(
                f"candidates must be a sequence, got {type(candidates).__name__}"
            )
        candidate_docs = [
            _as_document(candidate, f"candidate #{i}")
            for i, candidate in enumerate(candidates)
        ]

        min_length = self.config.min_token_length
        candidate_tokens = [tokenize(doc.text, min_length) for doc in candidate_docs]
        idf = compute_inverse_document_frequency(candidate_tokens)

        target_vector = build_tfidf_vector(
            compute_term_frequency(tokenize(target_doc.text, min_length)), idf
        )

        cutoff = threshold * 100
        matches = []
        for doc, tokens in zip(candidate_docs, candidate_tokens):
            vector = build_tfidf_vector(compute_term_frequency(tokens), idf)
            score = to_percentage(cosine_similarity(target_vector, vector))

            if score >= cutoff:
                matches.append(SimilarityMatch(id=doc.id, score=score))

        ranked = sorted(matches, key=lambda match: match.score, reverse=True)
        results = ranked[:self.config.max_results]

        logger.debug(
            f"[gap {target_doc.id}] scored {len(candidate_docs)} candidates, "
            f"{len(matches)} above {cutoff:.0f}%, returning {len(results)}"
        )
        return results


def find_similar(
    target: Any,
    candidates: Sequence[Any],
    threshold: float = DEFAULT_CONFIG.default_threshold
) -> List[SimilarityMatch]:
    """
    Module-level shortcut for GapSimilarityEngine().find_similar().

    Example:
        >>> find_similar({"id": 1, "text": "a"}, [], 0.6)
        []
    """
    return GapSimilarityEngine().find_similar(target, candidates, threshold)
