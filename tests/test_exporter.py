import csv

from table_mixer.exporter import (
    HEADER,
    export_table_assignments,
    write_table_assignments,
    write_table_report,
)
from table_mixer.models import Person, Table


def naive_parse(text):
    rows = []
    for line in text.split("\n")[1:]:
        table_id, name, desc = line.split(",", 2)
        rows.append((int(table_id), name, desc[1:-1].replace('""', '"')))
    return rows


def test_quotes_are_doubled_in_description():
    tables = [Table(id=1, members=[Person("A", 'He said "hi"')])]
    assert export_table_assignments(tables) == 'Table,Name,Description\n1,A,"He said ""hi"""'


def test_no_tables_gives_header_only():
    assert export_table_assignments([]) == HEADER


def test_rows_follow_table_then_member_order():
    tables = [
        Table(id=1, members=[Person("Zed", "jazz, blues"), Person("Amy", "")]),
        Table(id=2, members=[Person("Bo", 'the "real" deal')]),
    ]
    text = export_table_assignments(tables)
    assert not text.endswith("\n")
    assert naive_parse(text) == [
        (1, "Zed", "jazz, blues"),
        (1, "Amy", ""),
        (2, "Bo", 'the "real" deal'),
    ]


def test_name_is_never_quoted():
    tables = [Table(id=3, members=[Person("Smith, Jo", "x")])]
    assert export_table_assignments(tables).split("\n")[1] == '3,Smith, Jo,"x"'


def test_write_table_assignments(tmp_path):
    tables = [Table(id=1, members=[Person("A", "chess")])]
    out = write_table_assignments(tables, tmp_path / "nested" / "out.csv")
    assert out.read_text(encoding="utf-8") == 'Table,Name,Description\n1,A,"chess"'


def test_write_table_report(tmp_path):
    stats = [{
        "table": 1, "grade": "B", "size": 2, "diversity": 0.9, "mean_similarity": 0.1,
        "pair_count": 1, "shared_keywords": ["chess", "club"], "members": "A|B",
    }]
    out = write_table_report(stats, tmp_path / "report.csv")
    with out.open(newline="") as f:
        rows = list(csv.DictReader(f))
    assert rows == [{
        "table": "1", "grade": "B", "size": "2", "diversity": "0.9000",
        "mean_similarity": "0.1000", "pair_count": "1",
        "shared_keywords": "chess|club", "members": "A|B",
    }]
