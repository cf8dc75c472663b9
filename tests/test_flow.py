import pathlib
import random
import sys

# Ensure src package is on path
sys.path.append(str(pathlib.Path(__file__).resolve().parents[1] / "src"))

from table_mixer import csv_loader, exporter, solver


def test_full_flow():
    data_dir = pathlib.Path(__file__).parent / "data"
    people = csv_loader.load_people(data_dir / "people.csv")
    assert len(people) == 25

    model = solver.DiversityModel(rng=random.Random(2024))
    model.build(people)
    tables = model.solve()

    # everyone seated exactly once
    seated = [p for t in tables for p in t.members]
    assert len(seated) == len(people)
    assert {id(p) for p in seated} == {id(p) for p in people}

    # capacity respected
    assert [len(t) for t in tables] == [10, 10, 5]

    # every table with pairs is reasonably mixed
    for t in tables:
        assert 0.0 <= solver.table_diversity(t.members) <= 1.0

    text = exporter.export_table_assignments(tables)
    rows = text.split("\n")
    assert rows[0] == "Table,Name,Description"
    assert len(rows) == 26
    assert sorted(r.split(",", 2)[1] for r in rows[1:]) == sorted(p.name for p in people)
