"""TableMixer package."""
from .models import Person, Table
from .config import AssignmentOptions, STOP_WORDS
from .csv_loader import load_people
from .exporter import export_table_assignments, write_table_assignments
from .solver import (
    DiversityModel,
    assign_people_to_tables,
    extract_keywords,
    similarity,
    table_diversity,
)

__all__ = [
    "Person",
    "Table",
    "AssignmentOptions",
    "STOP_WORDS",
    "load_people",
    "export_table_assignments",
    "write_table_assignments",
    "DiversityModel",
    "assign_people_to_tables",
    "extract_keywords",
    "similarity",
    "table_diversity",
]
