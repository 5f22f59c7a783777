"""
Gap Text Tokenizer

Turns free-form gap text into the normalized terms used for TF-IDF scoring.

Rules:
- Lower-case the text
- Replace every character that is not an ASCII letter, digit, underscore or
  whitespace with a space
- Split on runs of whitespace
- Drop tokens of 2 characters or fewer ("to", "on", "is", ...)

Pure function: identical input always yields identical output.
"""

import re
from typing import List

from gaptracker.config.similarity_config import DEFAULT_CONFIG
from gaptracker.utils.validators import require_text

# Anything that is neither an ASCII word character nor whitespace
NON_WORD_PATTERN = re.compile(r'[^A-Za-z0-9_\s]')


def tokenize(text: str, min_length: int = DEFAULT_CONFIG.min_token_length) -> List[str]:
    """
    Tokenize text into normalized terms

    Args:
        text: Raw text (may be empty)
        min_length: Shortest token kept

    Returns:
        Ordered list of tokens, possibly empty

    Raises:
        SimilarityInputError: If text is not a string

    Example:
        >>> tokenize("Refund e-mail not sent to customer!")
        ['refund', 'mail', 'not', 'sent', 'customer']
    """
    require_text(text)

    cleaned = NON_WORD_PATTERN.sub(' ', text.lower())
    return [token for token in cleaned.split() if len(token) >= min_length]
