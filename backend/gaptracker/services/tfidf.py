"""
TF-IDF Vector Space Model

Sparse term vectors and cosine scoring for gap text similarity.

Vectors are plain dicts {term: weight}. A term missing from a vector has
weight zero, so every lookup goes through dict.get(term, 0.0).

IDF uses add-one smoothing in the denominator only:

    idf(term) = ln(total_docs / (1 + docs_containing(term)))

A term present in most documents of a small corpus therefore gets a negative
weight (total_docs=1, docs_containing=1 gives ln(1/2)). These weights are kept
as they are.
"""

import math
from collections import Counter
from typing import Dict, Sequence

from gaptracker.services.text_tokenizer import tokenize

TermVector = Dict[str, float]


def compute_term_frequency(tokens: Sequence[str]) -> TermVector:
    """
    Normalized term counts for one document

    Args:
        tokens: Token sequence (possibly empty)

    Returns:
        {term: count / total_tokens}; empty dict for an empty sequence
    """
    total_terms = len(tokens)
    if total_terms == 0:
        return {}

    return {term: count / total_terms for term, count in Counter(tokens).items()}


def compute_inverse_document_frequency(documents: Sequence[Sequence[str]]) -> TermVector:
    """
    IDF weight for every term in the corpus

    Args:
        documents: One token sequence per corpus document

    Returns:
        {term: ln(total_docs / (1 + docs_containing(term)))}; empty for an
        empty corpus
    """
    total_docs = len(documents)

    # Count documents, not occurrences
    document_frequency = Counter()
    for doc in documents:
        document_frequency.update(set(doc))

    return {
        term: math.log(total_docs / (1 + docs_with_term))
        for term, docs_with_term in document_frequency.items()
    }


def build_tfidf_vector(tf: TermVector, idf: TermVector) -> TermVector:
    """Weight each TF entry by its IDF (zero when the term has no IDF)."""
    return {term: weight * idf.get(term, 0.0) for term, weight in tf.items()}


def cosine_similarity(vec1: TermVector, vec2: TermVector) -> float:
    """
    Cosine similarity between two sparse vectors

    Args:
        vec1: First vector {term: weight}
        vec2: Second vector {term: weight}

    Returns:
        dot / (|vec1| * |vec2|), or exactly 0.0 when either magnitude is zero
    """
    dot_product = 0.0
    magnitude1 = 0.0
    magnitude2 = 0.0

    for term in set(vec1) | set(vec2):
        val1 = vec1.get(term, 0.0)
        val2 = vec2.get(term, 0.0)

        dot_product += val1 * val2
        magnitude1 += val1 * val1
        magnitude2 += val2 * val2

    if magnitude1 == 0 or magnitude2 == 0:
        return 0.0

    return dot_product / (math.sqrt(magnitude1) * math.sqrt(magnitude2))


def calculate_similarity(text1: str, text2: str, corpus_texts: Sequence[str]) -> float:
    """
    Raw cosine similarity of two texts, weighted by IDF over corpus_texts

    Args:
        text1: First text
        text2: Second text
        corpus_texts: Texts used only for document frequencies

    Returns:
        Cosine similarity as a float (not rounded or clamped)

    Example:
        >>> corpus = ["refund email missing", "login page error", "refund delayed"]
        >>> calculate_similarity("refund email", "refund email missing", corpus) > 0
        True
    """
    idf = compute_inverse_document_frequency([tokenize(text) for text in corpus_texts])

    vec1 = build_tfidf_vector(compute_term_frequency(tokenize(text1)), idf)
    vec2 = build_tfidf_vector(compute_term_frequency(tokenize(text2)), idf)

    return cosine_similarity(vec1, vec2)
