"""Command line interface for TableMixer."""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from .config import AssignmentOptions, DEFAULT_MAX_TABLE_SIZE
from .csv_loader import load_people
from .exporter import write_table_assignments, write_table_report
from .solver import DiversityModel, compute_table_stats, grade_tables, summarize


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Diverse table assignment")
    parser.add_argument("--people", required=True, help="Path to a CSV with Names and Description columns")
    parser.add_argument("--max-table-size", type=int, default=DEFAULT_MAX_TABLE_SIZE,
                        help="Maximum people per table.")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed the random table starts for a reproducible arrangement.")
    parser.add_argument("--out-assignments", type=Path,
                        help="Write assignments CSV: Table,Name,Description.")
    parser.add_argument("--out-report", type=Path,
                        help="Write per-table report CSV with diversity and grades.")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging verbosity.")
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    """Entry point used by ``python -m table_mixer.cli``."""
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        options = AssignmentOptions(max_table_size=args.max_table_size, seed=args.seed)
        people = load_people(args.people)
    except (OSError, ValueError) as e:
        parser.error(str(e))

    model = DiversityModel(options=options)
    model.build(people)
    tables = model.solve()

    # Print simple assignments
    for table in tables:
        for person in table.members:
            print(f"{table.id},{person.name}")

    if args.out_assignments:
        write_table_assignments(tables, args.out_assignments)

    stats = []
    for table in tables:
        s = compute_table_stats(table.members, options)
        s["table"] = table.id
        s["members"] = "|".join(table.names)
        stats.append(s)

    graded = grade_tables(stats)

    # Print a compact table summary
    for s in graded:
        print(f"[TABLE] {s['table']} grade={s['grade']} size={s['size']} "
              f"diversity={s['diversity']:.2f} pairs={s['pair_count']}")
    summary = summarize(tables, options)
    print(f"[SUMMARY] people={summary['people']} tables={summary['tables']} "
          f"undersized={summary['undersized']}")

    if args.out_report:
        write_table_report(graded, args.out_report)


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    main()
