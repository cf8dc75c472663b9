"""Keep the current arrangement in a UI session."""
from __future__ import annotations

from typing import Any, List, MutableMapping, Sequence

from .config import AssignmentOptions
from .models import Person, Table
from .solver import assign_people_to_tables


def current_tables(
    state: MutableMapping[str, Any],
    people: Sequence[Person],
    options: AssignmentOptions,
    reassign: bool = False,
) -> List[Table]:
    """Return the stored tables, rebuilding them on reassign or when people or options changed."""
    people = list(people)
    if (
        reassign
        or state.get("tables") is None
        or state.get("people") != people
        or state.get("options") != options
    ):
        state["tables"] = assign_people_to_tables(people, options)
        state["people"] = people
        state["options"] = options
    return state["tables"]
