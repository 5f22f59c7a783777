"""
Unit Tests for Tokenizer and TF-IDF Vector Space Model

Tests cover:
- Tokenization rules (case, punctuation, short tokens)
- Term frequency normalization
- Inverse document frequency, including negative weights
- TF-IDF vector construction
- Cosine similarity and zero-magnitude handling
"""

import math

import pytest

from gaptracker.services.text_tokenizer import tokenize
from gaptracker.services.tfidf import (
    compute_term_frequency,
    compute_inverse_document_frequency,
    build_tfidf_vector,
    cosine_similarity,
    calculate_similarity
)
from gaptracker.utils.validators import SimilarityInputError


class TestTokenizer:
    """Test text tokenization"""

    def test_lowercases_and_drops_short_tokens(self):
        tokens = tokenize("Refund confirmation email not sent to customer")
        assert tokens == ["refund", "confirmation", "email", "not", "sent", "customer"]

    def test_punctuation_becomes_separator(self):
        assert tokenize("Login-page: error!!") == ["login", "page", "error"]

    def test_keeps_underscores_and_digits(self):
        assert tokenize("user_id missing, Error 404 on page 12") == [
            "user_id", "missing", "error", "404", "page"
        ]

    def test_non_ascii_characters_are_separators(self):
        assert tokenize("café résumé") == ["caf", "sum"]
        assert tokenize("x²² ١٢٣") == []

    def test_three_character_tokens_are_kept(self):
        assert tokenize("a an the to of") == ["the"]

    def test_empty_and_blank_text(self):
        assert tokenize("") == []
        assert tokenize("   \n\t ") == []
        assert tokenize("?! -- ..") == []

    def test_deterministic(self):
        text = "Duplicate invoice generated; customer charged twice!"
        assert tokenize(text) == tokenize(text)

    def test_none_rejected(self):
        with pytest.raises(SimilarityInputError):
            tokenize(None)

    def test_error_is_a_type_error(self):
        with pytest.raises(TypeError):
            tokenize(42)


class TestTermFrequency:
    """Test TF builder"""

    def test_normalized_counts(self):
        tf = compute_term_frequency(["refund", "email", "refund", "sent"])
        assert tf == {"refund": 0.5, "email": 0.25, "sent": 0.25}

    def test_weights_sum_to_one(self):
        tf = compute_term_frequency(tokenize("one two three four five six seven three three"))
        assert sum(tf.values()) == pytest.approx(1.0)

    def test_empty_tokens(self):
        assert compute_term_frequency([]) == {}


class TestInverseDocumentFrequency:
    """Test IDF builder"""

    def test_formula(self):
        idf = compute_inverse_document_frequency([
            ["refund", "email"],
            ["refund", "login"],
            ["page"],
        ])
        assert idf["refund"] == pytest.approx(0.0)
        assert idf["email"] == pytest.approx(math.log(3 / 2))
        assert idf["login"] == pytest.approx(math.log(3 / 2))
        assert idf["page"] == pytest.approx(math.log(3 / 2))

    def test_counts_documents_not_occurrences(self):
        idf = compute_inverse_document_frequency([
            ["refund", "refund", "refund"],
            ["login"],
            ["page"],
        ])
        assert idf["refund"] == pytest.approx(math.log(3 / 2))

    def test_single_document_gives_negative_weight(self):
        idf = compute_inverse_document_frequency([["refund", "email"]])
        assert idf["refund"] == pytest.approx(math.log(0.5))
        assert idf["refund"] < 0

    def test_empty_corpus(self):
        assert compute_inverse_document_frequency([]) == {}


class TestVectorizer:
    """Test TF-IDF vector construction"""

    def test_multiplies_weights(self):
        vector = build_tfidf_vector({"refund": 0.5, "email": 0.5}, {"refund": 2.0, "email": -1.0})
        assert vector == {"refund": 1.0, "email": -0.5}

    def test_missing_idf_is_zero(self):
        vector = build_tfidf_vector({"refund": 0.5, "email": 0.5}, {"refund": 2.0})
        assert vector["email"] == 0.0

    def test_empty_idf(self):
        vector = build_tfidf_vector({"refund": 1.0}, {})
        assert vector == {"refund": 0.0}


class TestCosineSimilarity:
    """Test cosine similarity"""

    def test_identical_vectors(self):
        vec = {"refund": 0.3, "email": 0.1}
        assert cosine_similarity(vec, vec) == pytest.approx(1.0)

    def test_disjoint_vectors(self):
        assert cosine_similarity({"refund": 1.0}, {"login": 1.0}) == 0.0

    def test_known_angle(self):
        score = cosine_similarity({"a": 1.0}, {"a": 1.0, "b": 1.0})
        assert score == pytest.approx(1 / math.sqrt(2))

    def test_symmetric(self):
        vec1 = {"refund": 0.2, "email": 0.4, "sent": 0.1}
        vec2 = {"refund": 0.5, "login": 0.3}
        assert cosine_similarity(vec1, vec2) == pytest.approx(cosine_similarity(vec2, vec1))

    def test_zero_magnitude_is_zero(self):
        assert cosine_similarity({}, {"refund": 1.0}) == 0.0
        assert cosine_similarity({"refund": 1.0}, {}) == 0.0
        assert cosine_similarity({}, {}) == 0.0
        assert cosine_similarity({"refund": 0.0}, {"refund": 0.0}) == 0.0

    def test_negative_weights_are_scored(self):
        assert cosine_similarity({"a": -1.0}, {"a": -2.0}) == pytest.approx(1.0)
        assert cosine_similarity({"a": 1.0}, {"a": -1.0}) == pytest.approx(-1.0)


class TestCalculateSimilarity:
    """Test pairwise similarity over a corpus"""

    def test_related_texts_score_positive(self):
        corpus = ["refund email missing", "login page error", "refund delayed"]
        assert calculate_similarity("refund email", "refund email missing", corpus) > 0

    def test_empty_corpus_scores_zero(self):
        assert calculate_similarity("refund email", "refund email", []) == 0.0

    def test_single_document_corpus_with_negative_idf(self):
        text = "Refund email not sent"
        score = calculate_similarity(text, text, [text])
        assert math.isfinite(score)
        assert score == pytest.approx(1.0)

    def test_symmetric_for_fixed_corpus(self):
        corpus = [
            "Refund email confirmation missing for customers",
            "Login page throws error on submit",
            "Export button missing from reports page",
        ]
        a = "Refund confirmation email not sent to customer"
        b = "Refund email confirmation missing for customers"
        assert calculate_similarity(a, b, corpus) == pytest.approx(calculate_similarity(b, a, corpus))
