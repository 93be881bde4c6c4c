"""
Configuration constants for the airplane crash charts.
"""

import os
from pathlib import Path
from typing import Dict, List, Tuple

# ======================================================
#  DATA SOURCES / CONSTANTS
# ======================================================
DATA_DIR: Path = Path(__file__).resolve().parent.parent / "data"

# Path or URL of the incident CSV; the environment variable wins.
DATA_SOURCE: str = os.getenv(
    "CRASH_DATA_SOURCE", str(DATA_DIR / "airplane_crashes.csv")
)

DEFAULT_SEP: str = ","

# Source column -> normalized column
SOURCE_COLUMNS: Dict[str, str] = {
    "Date": "date",
    "Operator": "operator",
    "Fatalities": "fatalities",
    "Aboard": "aboard",
}
REQUIRED_COLUMNS: List[str] = list(SOURCE_COLUMNS)

# ======================================================
#  CANVAS / SCALES
# ======================================================
CANVAS_WIDTH: int = 1000
CANVAS_HEIGHT: int = 600
MARGIN: Dict[str, int] = {"top": 50, "right": 50, "bottom": 70, "left": 80}

BAND_PADDING: float = 0.1
# Distance between the pie's outer edge and the label arc, in pixels
LABEL_ARC_INSET: int = 40
LABEL_FONT_SIZE: int = 10

BAR_COLORS: Dict[str, str] = {
    "fatalities": "#d62728",
    "aboard": "#1f77b4",
}

X_LABEL: str = "Operator"
Y_LABEL: str = "Count"
TITLE: str = "Airplane Crashes by Operator and Count"

# ======================================================
#  UI DEFAULTS
# ======================================================
CHART_TYPE_OPTIONS: List[Tuple[str, str]] = [
    ("Bar chart", "bar"),
    ("Pie chart", "pie"),
]

DEFAULT_CHART_TYPE: str = "bar"
ALL_OPERATORS_LABEL: str = "All operators"
