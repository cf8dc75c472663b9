"""
Diversity aware table solver.

People are compared by the keywords in their descriptions:
    similarity: Jaccard index of the two keyword sets, 0 when both are empty
    diversity: 1 - mean pairwise similarity, 0 for tables with fewer than two people
Tables are filled greedily from a random seed member, always adding the person
that leaves the table most diverse. Table diversity is graded A to F.
"""
from __future__ import annotations

import logging
import random
import re
from collections import Counter
from itertools import combinations
from typing import Dict, FrozenSet, List, Optional, Sequence

from .config import AssignmentOptions
from .models import Person, Table

logger = logging.getLogger(__name__)

_NON_WORD = re.compile(r"[^\w\s]+")

_DEFAULT_OPTIONS = AssignmentOptions()


# ----------------------------- scoring helpers -----------------------------
def extract_keywords(text: str, options: AssignmentOptions | None = None) -> List[str]:
    """Return up to ``max_keywords`` significant tokens in order of appearance.

    Text is lowercased and punctuation is replaced by spaces. Short tokens and
    stop words are dropped. Duplicates are kept and count toward the cap.
    """
    opts = options or _DEFAULT_OPTIONS
    words = _NON_WORD.sub(" ", (text or "").lower()).split()
    kept = [w for w in words if len(w) >= opts.min_token_length and w not in opts.stop_words]
    return kept[: opts.max_keywords]


def keyword_set(person: Person, options: AssignmentOptions | None = None) -> FrozenSet[str]:
    return frozenset(extract_keywords(person.description, options))


def jaccard(a: FrozenSet[str], b: FrozenSet[str]) -> float:
    union = a | b
    if not union:
        return 0.0
    return len(a & b) / len(union)


def similarity(a: Person, b: Person, options: AssignmentOptions | None = None) -> float:
    """Jaccard similarity of two people's keyword sets, in [0, 1]."""
    return jaccard(keyword_set(a, options), keyword_set(b, options))


def shared_keywords(a: Person, b: Person, options: AssignmentOptions | None = None) -> List[str]:
    return sorted(keyword_set(a, options) & keyword_set(b, options))


def _diversity_of_sets(sets: Sequence[FrozenSet[str]]) -> float:
    total = 0.0
    pairs = 0
    for x, y in combinations(sets, 2):
        total += jaccard(x, y)
        pairs += 1
    if pairs == 0:
        return 0.0
    return 1 - total / pairs


def table_diversity(people: Sequence[Person], options: AssignmentOptions | None = None) -> float:
    """One minus the mean pairwise similarity. Neutral 0 for fewer than two people."""
    return _diversity_of_sets([keyword_set(p, options) for p in people])


def compute_table_stats(members: Sequence[Person], options: AssignmentOptions | None = None) -> Dict[str, object]:
    """Pair count, mean similarity, diversity and overlapping keywords for a group."""
    sets = [keyword_set(p, options) for p in members]
    pairs = len(sets) * (len(sets) - 1) // 2
    diversity = _diversity_of_sets(sets)
    counts = Counter(k for s in sets for k in s)
    return {
        "size": len(sets),
        "pair_count": pairs,
        "mean_similarity": 1 - diversity if pairs else 0.0,
        "diversity": diversity,
        "shared_keywords": sorted(k for k, c in counts.items() if c > 1),
    }


def grade_tables(stats: List[Dict[str, object]]) -> List[Dict[str, object]]:
    """Assign A to F based on diversity thresholds."""
    graded = []
    for s in stats:
        d = s["diversity"]
        if d >= 0.95:
            g = "A"
        elif d >= 0.85:
            g = "B"
        elif d >= 0.7:
            g = "C"
        elif d >= 0.5:
            g = "D"
        else:
            g = "F"
        out = dict(s)
        out["grade"] = g
        graded.append(out)
    return graded


def summarize(tables: Sequence[Table], options: AssignmentOptions | None = None) -> Dict[str, int]:
    opts = options or _DEFAULT_OPTIONS
    return {
        "people": sum(len(t.members) for t in tables),
        "tables": len(tables),
        "undersized": sum(1 for t in tables if len(t.members) < opts.max_table_size),
    }


# ----------------------------- model -----------------------------
class DiversityModel:
    """Greedy table builder that maximises per table keyword diversity."""

    def __init__(
        self,
        options: AssignmentOptions | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.options = options or AssignmentOptions()
        if rng is None:
            rng = random.Random(self.options.seed)
        self.rng = rng
        # Inputs
        self.people: List[Person] = []
        # Keyword sets by input position
        self.keywords: List[FrozenSet[str]] = []

    def build(self, people: Sequence[Person]) -> None:
        """Store the attendee list and precompute keyword sets."""
        self.people = list(people)
        self.keywords = [keyword_set(p, self.options) for p in self.people]

    # ----------------------------- internals -----------------------------
    def _diversity(self, positions: List[int]) -> float:
        return _diversity_of_sets([self.keywords[i] for i in positions])

    def _pick_candidate(self, table: List[int], unassigned: List[int]) -> Optional[int]:
        """Return the index into ``unassigned`` of the best next member.

        The first candidate with a strictly higher score wins ties.
        """
        cap = self.options.max_table_size
        best_index: Optional[int] = None
        best_score = -1.0
        for i, candidate in enumerate(unassigned):
            score = self._diversity(table + [candidate])
            # Favour evening out the last tables
            if len(unassigned) <= cap and len(table) < cap:
                score += self.options.evenness_bonus
            if score > best_score:
                best_score = score
                best_index = i
        if best_index is not None:
            logger.debug("picked %r with score %.4f",
                         self.people[unassigned[best_index]].name, best_score)
        return best_index

    # ----------------------------- main solve -----------------------------
    def solve(self) -> List[Table]:
        """Partition the people into tables. Each call draws a fresh random seed member per table."""
        cap = self.options.max_table_size
        unassigned = list(range(len(self.people)))
        tables: List[Table] = []

        while unassigned:
            start = self.rng.randrange(len(unassigned))
            current = [unassigned.pop(start)]
            logger.debug("table %d seeded with %r", len(tables) + 1, self.people[current[0]].name)

            while len(current) < cap and unassigned:
                best = self._pick_candidate(current, unassigned)
                if best is None:
                    logger.warning("no candidate selectable for table %d, closing it at %d members",
                                   len(tables) + 1, len(current))
                    break
                current.append(unassigned.pop(best))

            tables.append(Table(id=len(tables) + 1, members=[self.people[i] for i in current]))

        logger.info("assigned %d people to %d tables", len(self.people), len(tables))
        return tables


def assign_people_to_tables(
    people: Sequence[Person],
    options: AssignmentOptions | None = None,
    rng: random.Random | None = None,
) -> List[Table]:
    """Convenience wrapper: build a model for ``people`` and solve it."""
    model = DiversityModel(options=options, rng=rng)
    model.build(people)
    return model.solve()
