"""Serialise table assignments for download."""
from __future__ import annotations

import csv
from pathlib import Path
from typing import Dict, List, Sequence

from .models import Table

HEADER = "Table,Name,Description"


def _quote(value: str) -> str:
    return '"' + value.replace('"', '""') + '"'


def export_table_assignments(tables: Sequence[Table]) -> str:
    """Render one ``table,name,"description"`` row per member.

    Only the description is quoted. Names are written as is, so a comma in a
    name shifts the columns for that row.
    """
    rows = [HEADER]
    for table in tables:
        for person in table.members:
            rows.append(f"{table.id},{person.name},{_quote(person.description)}")
    return "\n".join(rows)


def write_table_assignments(tables: Sequence[Table], path: Path | str) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(export_table_assignments(tables), encoding="utf-8")
    return path


def write_table_report(stats: List[Dict[str, object]], path: Path | str) -> Path:
    """Write per table stats and grades as CSV."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=[
            "table", "grade", "size", "diversity", "mean_similarity",
            "pair_count", "shared_keywords", "members",
        ])
        w.writeheader()
        for s in stats:
            w.writerow({
                "table": s["table"],
                "grade": s["grade"],
                "size": s["size"],
                "diversity": f"{s['diversity']:.4f}",
                "mean_similarity": f"{s['mean_similarity']:.4f}",
                "pair_count": s["pair_count"],
                "shared_keywords": "|".join(s["shared_keywords"]),
                "members": s["members"],
            })
    return path
