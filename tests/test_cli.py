import pathlib

import pytest

from table_mixer.cli import main

DATA = pathlib.Path(__file__).parent / "data" / "people.csv"


def test_cli_writes_outputs(tmp_path, capsys):
    assignments = tmp_path / "assignments.csv"
    report = tmp_path / "report.csv"
    main([
        "--people", str(DATA), "--seed", "3",
        "--out-assignments", str(assignments), "--out-report", str(report),
    ])
    out = capsys.readouterr().out
    assert out.count("[TABLE]") == 3
    assert "[SUMMARY] people=25 tables=3 undersized=1" in out

    lines = assignments.read_text(encoding="utf-8").split("\n")
    assert lines[0] == "Table,Name,Description"
    assert len(lines) == 26
    assert len(report.read_text(encoding="utf-8").strip().splitlines()) == 4


def test_cli_same_seed_same_output(capsys):
    main(["--people", str(DATA), "--seed", "9", "--max-table-size", "6"])
    first = capsys.readouterr().out
    main(["--people", str(DATA), "--seed", "9", "--max-table-size", "6"])
    assert capsys.readouterr().out == first
    assert first.count("[TABLE]") == 5


def test_cli_missing_file(tmp_path):
    with pytest.raises(SystemExit) as exc:
        main(["--people", str(tmp_path / "missing.csv")])
    assert exc.value.code == 2


def test_cli_rejects_bad_table_size():
    with pytest.raises(SystemExit) as exc:
        main(["--people", str(DATA), "--max-table-size", "0"])
    assert exc.value.code == 2
