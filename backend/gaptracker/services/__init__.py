"""Services package - Business logic layer"""
from gaptracker.services.text_tokenizer import tokenize
from gaptracker.services.tfidf import (
    compute_term_frequency,
    compute_inverse_document_frequency,
    build_tfidf_vector,
    cosine_similarity,
    calculate_similarity
)
from gaptracker.services.similarity_engine import (
    GapDocument,
    SimilarityMatch,
    GapSimilarityEngine,
    find_similar
)
from gaptracker.services.gap_similarity import (
    gap_text,
    build_candidates,
    expand_bidirectional,
    find_similar_gaps
)

__all__ = [
    "tokenize",
    "compute_term_frequency",
    "compute_inverse_document_frequency",
    "build_tfidf_vector",
    "cosine_similarity",
    "calculate_similarity",
    "GapDocument",
    "SimilarityMatch",
    "GapSimilarityEngine",
    "find_similar",
    "gap_text",
    "build_candidates",
    "expand_bidirectional",
    "find_similar_gaps"
]
