"""
Streamlit entry point — Roster Table Explorer UI.

Loads the players workbook once, then renders a searchable, filterable,
sortable table:
  1. Sidebar: search box and one select box per facet (role, team, region)
  2. Sort controls: column picker and direction toggle
  3. Stats: total players and number of teams
  4. The table, with role badges and decoded birthday dates
  5. CSV download of the visible rows

Contains NO business logic — holds the UI state and calls analysis/processing
modules only.
"""

import html
import logging

import streamlit as st

from analysis.table_view import (
    TableView,
    build_table_view,
    load_dataset,
    render_cell,
    role_badge_class,
    to_dataframe,
)
from config.settings import DATA_FILE_PATH, FACET_LABELS
from processing.errors import EmptySheetError, RetrievalError
from processing.filter_engine import FilterState
from processing.ingestor import Dataset
from processing.sort_engine import SortState, toggle_sort

logger = logging.getLogger(__name__)

_UNSORTED_LABEL = "(unsorted)"


# ═══════════════════════════════════════════════════════════════════════════
# Page configuration
# ═══════════════════════════════════════════════════════════════════════════

st.set_page_config(
    page_title="Roster Table Explorer",
    page_icon="🎮",
    layout="wide",
)

st.markdown(
    """
    <style>
    .roster-table { width: 100%; border-collapse: collapse; }
    .roster-table th, .roster-table td { padding: 6px 10px; border-bottom: 1px solid #ddd; text-align: left; }
    .role-badge { padding: 2px 8px; border-radius: 10px; background: #eef; font-size: 0.85em; }
    .sort-asc::after { content: " ▲"; }
    .sort-desc::after { content: " ▼"; }
    </style>
    """,
    unsafe_allow_html=True,
)


# ═══════════════════════════════════════════════════════════════════════════
# Data loading
# ═══════════════════════════════════════════════════════════════════════════

@st.cache_data(show_spinner="Loading data...")
def _load(location: str) -> Dataset:
    """Load and ingest the workbook; cached per location."""
    return load_dataset(location)


def _init_session_state() -> None:
    """Ensure all required session state keys exist with sensible defaults."""
    defaults: dict = {
        "sort_state": SortState(),
    }
    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value


_init_session_state()


def _data_source() -> str:
    """Workbook location from .streamlit/secrets.toml, else the default."""
    try:
        return st.secrets.get("DATA_SOURCE", DATA_FILE_PATH)
    except FileNotFoundError:
        # No secrets file at all
        return DATA_FILE_PATH


data_source = _data_source()

st.title("🎮 Danish LoL Players")

try:
    dataset = _load(data_source)
except (RetrievalError, EmptySheetError) as exc:
    logger.error(f"Failed to load '{data_source}': {exc}")
    st.error(f"**Error loading file:** {exc}")
    st.markdown(
        f"**Tips:**\n"
        f"- Make sure the file exists at: `{data_source}`\n"
        f"- Set `DATA_SOURCE` in `.streamlit/secrets.toml` to a local path or URL"
    )
    st.stop()


# ═══════════════════════════════════════════════════════════════════════════
# Sidebar — Search & facet filters
# ═══════════════════════════════════════════════════════════════════════════

# Facet options depend on the Dataset only, so build them with an empty state
base_view = build_table_view(dataset, FilterState(), SortState())

st.sidebar.title("🔍 Filters")

query = st.sidebar.text_input("Search", placeholder="Search players, teams...")

selections: dict[str, str] = {}
for facet_name, facet in base_view.facets.items():
    if not facet.is_present:
        continue
    all_label = FACET_LABELS.get(facet_name, "All")
    choice = st.sidebar.selectbox(
        facet.header,
        options=[all_label] + base_view.facet_options[facet_name],
        key=f"facet_{facet_name}",
    )
    selections[facet_name] = "" if choice == all_label else choice

filter_state = FilterState(query=query, selections=selections)


# ═══════════════════════════════════════════════════════════════════════════
# Sort controls
# ═══════════════════════════════════════════════════════════════════════════

def _on_sort_column_change() -> None:
    """Picking a column always starts ascending; the unsorted entry resets."""
    label = st.session_state["sort_column_choice"]
    if label == _UNSORTED_LABEL:
        st.session_state["sort_state"] = SortState()
        return
    column = dataset.headers.index(label)
    st.session_state["sort_state"] = toggle_sort(SortState(), column)


def _on_sort_direction_toggle() -> None:
    state: SortState = st.session_state["sort_state"]
    if state.column is not None:
        st.session_state["sort_state"] = toggle_sort(state, state.column)


sort_col1, sort_col2 = st.columns([3, 1])

with sort_col1:
    st.selectbox(
        "Sort by",
        options=[_UNSORTED_LABEL] + list(dict.fromkeys(dataset.headers)),
        key="sort_column_choice",
        on_change=_on_sort_column_change,
    )

with sort_col2:
    sort_state: SortState = st.session_state["sort_state"]
    st.button(
        "▲ Ascending" if sort_state.ascending else "▼ Descending",
        on_click=_on_sort_direction_toggle,
        disabled=sort_state.column is None,
        use_container_width=True,
    )

view = build_table_view(dataset, filter_state, st.session_state["sort_state"])


# ═══════════════════════════════════════════════════════════════════════════
# Stats
# ═══════════════════════════════════════════════════════════════════════════

stat_col1, stat_col2, stat_col3 = st.columns(3)
stat_col1.metric("Total Players", view.total_rows)
stat_col2.metric("Teams", view.team_count)
stat_col3.metric("Showing", view.visible_rows)


# ═══════════════════════════════════════════════════════════════════════════
# Table
# ═══════════════════════════════════════════════════════════════════════════

def _render_table_html(table: TableView, state: SortState) -> str:
    """Build the roster table markup, with role badges and sort markers."""
    role_facet = table.facets.get("role")
    role_header = role_facet.header if role_facet is not None else None

    header_cells = []
    for index, header in enumerate(table.headers):
        css_class = ""
        if state.column == index:
            css_class = "sort-asc" if state.ascending else "sort-desc"
        header_cells.append(f'<th class="{css_class}">{html.escape(header)}</th>')

    if not table.rows:
        body = (
            f'<tr><td colspan="{len(table.headers)}">'
            "No matching records found</td></tr>"
        )
    else:
        body_rows = []
        for row in table.rows:
            cells = []
            for header in table.headers:
                value = row.get(header, "")
                if header == role_header and value:
                    cells.append(
                        f'<td><span class="role-badge {role_badge_class(value)}">'
                        f"{html.escape(value)}</span></td>"
                    )
                else:
                    cells.append(f"<td>{html.escape(render_cell(header, value))}</td>")
            body_rows.append("<tr>" + "".join(cells) + "</tr>")
        body = "".join(body_rows)

    return (
        '<table class="roster-table"><thead><tr>'
        + "".join(header_cells)
        + "</tr></thead><tbody>"
        + body
        + "</tbody></table>"
    )


st.markdown(_render_table_html(view, st.session_state["sort_state"]), unsafe_allow_html=True)


# ═══════════════════════════════════════════════════════════════════════════
# Download
# ═══════════════════════════════════════════════════════════════════════════

st.divider()

st.download_button(
    "📥 Download visible rows (CSV)",
    data=to_dataframe(view).to_csv(index=False).encode("utf-8"),
    file_name="players_filtered.csv",
    mime="text/csv",
)
