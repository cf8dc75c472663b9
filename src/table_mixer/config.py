"""Tunable options for table assignment."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Optional

# Common English function words ignored during keyword extraction.
STOP_WORDS: FrozenSet[str] = frozenset({
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of", "with", "by",
    "is", "are", "was", "were", "be", "been", "being", "have", "has", "had", "do", "does", "did",
    "will", "would", "could", "should", "may", "might", "can", "must", "shall", "this", "that",
    "these", "those", "i", "you", "he", "she", "it", "we", "they", "me", "him", "her", "us", "them",
})

DEFAULT_MAX_TABLE_SIZE = 10
DEFAULT_MAX_KEYWORDS = 10
DEFAULT_MIN_TOKEN_LENGTH = 3
DEFAULT_EVENNESS_BONUS = 0.1


@dataclass
class AssignmentOptions:
    """Options shared by the scorers and the table builder.

    max_table_size: capacity cap for every table.
    max_keywords: keywords kept per description, in order of appearance.
    min_token_length: shorter tokens are discarded.
    stop_words: tokens never treated as keywords.
    evenness_bonus: flat score added while the remaining people fit in one table.
    seed: seed for the builder's random source when none is injected.
    """

    max_table_size: int = DEFAULT_MAX_TABLE_SIZE
    max_keywords: int = DEFAULT_MAX_KEYWORDS
    min_token_length: int = DEFAULT_MIN_TOKEN_LENGTH
    stop_words: FrozenSet[str] = field(default_factory=lambda: STOP_WORDS)
    evenness_bonus: float = DEFAULT_EVENNESS_BONUS
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.max_table_size < 1:
            raise ValueError(f"max_table_size must be at least 1, got {self.max_table_size}")
        if self.max_keywords < 1:
            raise ValueError(f"max_keywords must be at least 1, got {self.max_keywords}")
        if self.min_token_length < 1:
            raise ValueError(f"min_token_length must be at least 1, got {self.min_token_length}")
        if self.evenness_bonus < 0:
            raise ValueError(f"evenness_bonus must not be negative, got {self.evenness_bonus}")
        self.stop_words = frozenset(w.lower() for w in self.stop_words)
