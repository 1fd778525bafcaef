"""
Application settings for the roster table explorer.

Defines where the workbook is loaded from, which columns act as filter
facets, which columns hold spreadsheet date serials, and network timeouts.
The Streamlit app may override DATA_FILE_PATH via st.secrets["DATA_SOURCE"].
"""

from datetime import date

# Default workbook location. May be a local path or an http(s) URL.
DATA_FILE_PATH: str = "data/players.xlsx"

# Seconds to wait for a remote workbook before giving up (no retries).
REQUEST_TIMEOUT_SECONDS: float = 10.0

# Facet name → substring searched for (lowercased) in the header labels.
# The first header containing the substring becomes the facet column.
FACET_TARGETS: dict[str, str] = {
    "role": "role",
    "team": "team",
    "region": "region",
}

# Labels shown in the facet select boxes for the "no selection" option.
FACET_LABELS: dict[str, str] = {
    "role": "All Roles",
    "team": "All Teams",
    "region": "All Regions",
}

# Headers (exact match) whose cells hold spreadsheet date serials.
DATE_COLUMNS: frozenset[str] = frozenset({"Birthday"})

# Day zero of the Google Sheets / Excel serial date system.
SPREADSHEET_EPOCH: date = date(1899, 12, 30)
