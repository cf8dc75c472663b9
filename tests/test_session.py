import pytest

from table_mixer.config import AssignmentOptions
from table_mixer.models import Person
from table_mixer.session import current_tables

PEOPLE = [Person(f"P{i}", f"topic{i} hobby{i % 3}") for i in range(12)]


def test_first_call_builds_and_stores():
    state = {}
    tables = current_tables(state, PEOPLE, AssignmentOptions(seed=1))
    assert state["tables"] is tables
    assert [len(t) for t in tables] == [10, 2]


def test_unchanged_inputs_reuse_tables():
    state = {}
    opts = AssignmentOptions(seed=1)
    first = current_tables(state, PEOPLE, opts)
    assert current_tables(state, PEOPLE, AssignmentOptions(seed=1)) is first


def test_changed_table_size_rebuilds():
    state = {}
    current_tables(state, PEOPLE, AssignmentOptions(seed=1))
    tables = current_tables(state, PEOPLE, AssignmentOptions(max_table_size=4, seed=1))
    assert [len(t) for t in tables] == [4, 4, 4]
    assert state["options"].max_table_size == 4


@pytest.mark.parametrize("change", ["people", "seed", "reassign"])
def test_other_changes_rebuild(change):
    state = {}
    first = current_tables(state, PEOPLE, AssignmentOptions(seed=1))
    people, opts, reassign = PEOPLE, AssignmentOptions(seed=1), False
    if change == "people":
        people = PEOPLE[:5]
    elif change == "seed":
        opts = AssignmentOptions(seed=2)
    else:
        reassign = True
    assert current_tables(state, people, opts, reassign=reassign) is not first
