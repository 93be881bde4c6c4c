"""
Pytest fixtures for the crash chart tests.

Provides small incident tables (in memory and as CSV files) and the
record stores built from them.
"""

import sys
from pathlib import Path

import pandas as pd
import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from crashviz import data_manager
from crashviz.records import RecordStore

CSV_TEXT = """Date,Time,Location,Operator,Flight #,Aboard,Fatalities
09/17/1908,17:18,"Fort Myer, Virginia",Military - U.S. Army,,2,1
1985,,Tokyo,Aeroflot,,12,10
1985,,Moscow,Aeroflot,,8,5
1986,,Atlanta,Delta,,4,2
12/31/1985,,Dallas,Delta Air Lines,,7,
"""


@pytest.fixture
def crash_frame():
    """Raw incident rows for 1985 plus one 1986 row."""
    return pd.DataFrame(
        {
            "Date": ["1985", "1985", "1986", "1985", "1985", "1985"],
            "Operator": [
                "Aeroflot",
                "Aeroflot",
                "Delta",
                "Delta Air Lines",
                "Military - U.S. Air Force",
                None,
            ],
            "Fatalities": ["10", "5", "2", "", "abc", "1"],
            "Aboard": ["12", "8", "4", "7", "3", "2"],
        }
    )


@pytest.fixture
def store(crash_frame):
    return RecordStore.from_frame(crash_frame)


@pytest.fixture
def crash_csv(tmp_path):
    path = tmp_path / "airplane_crashes.csv"
    path.write_text(CSV_TEXT, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def clear_store_cache():
    data_manager._load_cached.cache_clear()
    yield
    data_manager._load_cached.cache_clear()
