"""
Similarity Engine Configuration

Parameters of the TF-IDF gap similarity engine. The engine is recomputed on
every call, so these values only describe how a single call behaves:

- min_token_length: shortest token kept by the tokenizer
- max_results: how many ranked matches a query returns
- default_threshold: fraction (0-1) a match must reach to be kept
"""

from pydantic import BaseModel, Field


class SimilarityConfig(BaseModel):
    """
    Configuration for TF-IDF similarity scoring.

    Frozen: a config instance is shared by every engine built from it.
    """

    min_token_length: int = Field(
        default=3,
        description="Tokens shorter than this are dropped (length <= 2 removed)",
        ge=1
    )

    max_results: int = Field(
        default=5,
        description="Maximum number of similar gaps returned per query",
        ge=1
    )

    default_threshold: float = Field(
        default=0.6,
        description="Minimum similarity (as a fraction) for a gap to be kept",
        ge=0.0,
        le=1.0
    )

    class Config:
        """Pydantic configuration"""
        frozen = True


# Default Configuration Instance
DEFAULT_CONFIG = SimilarityConfig()
