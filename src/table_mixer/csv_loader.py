"""CSV loading utilities."""
from __future__ import annotations

from pathlib import Path
from typing import IO, Any, List, Optional

import pandas as pd

from .models import Person, clean_text


def _leading_fields(fields: List[str]) -> List[str]:
    # pandas drops the fields past the header width
    return fields


def _find_column(columns, needle: str) -> Optional[str]:
    for col in columns:
        if needle in str(col).lower():
            return col
    return None


def load_people(path: Path | str | IO[Any]) -> List[Person]:
    """Load attendees from a CSV with name and description columns.

    Any header containing ``name`` or ``description`` is accepted, so the
    usual ``Names,Description`` layout works. Rows missing either value are
    skipped. Unquoted commas in a row split off extra fields, which are
    ignored.
    """
    try:
        df = pd.read_csv(
            path,
            dtype=str,
            keep_default_na=False,
            skipinitialspace=True,
            index_col=False,
            engine="python",
            on_bad_lines=_leading_fields,
        )
    except pd.errors.EmptyDataError as exc:
        raise ValueError("CSV must have at least a header row and one data row") from exc

    name_col = _find_column(df.columns, "name")
    desc_col = _find_column(df.columns, "description")
    if name_col is None or desc_col is None:
        raise ValueError('CSV must have "Names" and "Description" columns')
    if df.empty:
        raise ValueError("CSV must have at least a header row and one data row")

    people: List[Person] = []
    for _, row in df.iterrows():
        name = clean_text(row.get(name_col))
        description = clean_text(row.get(desc_col))
        if not name or not description:
            continue
        people.append(Person(name=name, description=description))

    if not people:
        raise ValueError("No valid people found in CSV")
    return people
