"""Data models for TableMixer."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List
import math


def clean_text(value: object) -> str:
    """Normalise a raw CSV cell into a stripped string.

    Empty values such as ``None`` return ``""``. ``pandas`` often provides
    ``float('nan')`` for missing values which is also treated as empty.
    """
    if value is None:
        return ""
    if isinstance(value, float) and math.isnan(value):
        return ""
    return str(value).strip()


@dataclass(frozen=True)
class Person:
    """An attendee with a short free text profile."""

    name: str
    description: str = ""


@dataclass
class Table:
    """A group of people seated together.

    ``members`` keeps insertion order. The first member is the random seed.
    """

    id: int
    members: List[Person] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.members)

    @property
    def names(self) -> List[str]:
        return [p.name for p in self.members]
