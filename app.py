"""Streamlit UI for TableMixer with CSV preview, reassign and export."""
from __future__ import annotations

# Add src to sys.path so table_mixer can be found
import sys
import os
import io
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "src"))

import pandas as pd
import streamlit as st
import streamlit.components.v1 as components

from table_mixer.config import AssignmentOptions
from table_mixer.csv_loader import load_people
from table_mixer.exporter import export_table_assignments
from table_mixer.session import current_tables
from table_mixer.solver import compute_table_stats, grade_tables, summarize

# -----------------------------
# Helpers
# -----------------------------

def uploadedfile_to_buffer(uploaded_file) -> io.StringIO:
    """Read a Streamlit UploadedFile into a StringIO positioned at start."""
    uploaded_file.seek(0)
    return io.StringIO(uploaded_file.read().decode("utf-8"))


def tables_to_df(tables, options: AssignmentOptions) -> pd.DataFrame:
    rows = []
    for t in tables:
        s = compute_table_stats(t.members, options)
        s["table"] = t.id
        s["members"] = ", ".join(t.names)
        rows.append(s)
    graded = grade_tables(rows)
    return pd.DataFrame(graded, columns=["table", "grade", "size", "diversity", "shared_keywords", "members"])

# -----------------------------
# Sidebar options
# -----------------------------

st.sidebar.header("Table Options")
max_table_size = st.sidebar.number_input(
    "People per table",
    min_value=1,
    max_value=50,
    value=10,
    help="Maximum number of people seated at one table.",
)
use_seed = st.sidebar.checkbox(
    "Reproducible arrangement",
    value=False,
    help="Use a fixed seed so the same file always gives the same tables.",
)
seed = st.sidebar.number_input("Seed", min_value=0, value=0, disabled=not use_seed)

options = AssignmentOptions(max_table_size=int(max_table_size), seed=int(seed) if use_seed else None)

# -----------------------------
# Main UI and preview
# -----------------------------

st.title("Table Mixer")
st.caption("Upload a CSV with Names and Description columns. People with different interests are seated together.")

_people_file = st.file_uploader("People CSV", type="csv")

if _people_file is None:
    for key in ("people", "tables", "options"):
        st.session_state.pop(key, None)
    st.stop()

try:
    people = load_people(uploadedfile_to_buffer(_people_file))
except ValueError as e:
    st.error(f"Error parsing CSV: {e}")
    st.stop()

st.subheader("People preview")
st.dataframe(
    pd.DataFrame({"name": [p.name for p in people], "description": [p.description for p in people]}),
    use_container_width=True,
)
st.success(f"Loaded {len(people)} people from CSV")

# -----------------------------
# Assign / reassign
# -----------------------------

# Sidebar changes rebuild the tables, the button draws a new arrangement
reassign = st.button("Reassign", key="assign_button")
tables = current_tables(st.session_state, people, options, reassign=reassign)
summary = summarize(tables, options)

st.subheader("Table Assignments")
st.write(f"{summary['people']} people, {summary['tables']} tables")
st.dataframe(tables_to_df(tables, options), use_container_width=True)

if summary["undersized"]:
    st.info(
        f"Some tables have fewer than {options.max_table_size} people. The algorithm optimizes "
        "for diversity while trying to balance table sizes."
    )

st.download_button(
    "Download assignments as CSV",
    export_table_assignments(tables).encode("utf-8"),
    file_name="table-assignments.csv",
    mime="text/csv",
)

# Mind map visualization
st.subheader("Assignment Mind Map")
from generate_assignment_mind_map import generate_assignment_mind_map
html = generate_assignment_mind_map(tables, options)
components.html(html, height=600, scrolling=True)
