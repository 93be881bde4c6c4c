"""Record store: load the incident CSV once and keep it in memory.

The source file has one row per airplane incident.  Only four columns
are used (``Date``, ``Operator``, ``Fatalities`` and ``Aboard``); they are
normalized into a small DataFrame that the rest of the package reads
but never modifies:

* ``date``: the raw date text as found in the file.
* ``year``: calendar year (nullable integer), see :func:`extract_year`.
* ``operator``: operator text, blanks become ``""``.
* ``fatalities`` / ``aboard``: numeric counts, blank or non-numeric
  values become ``0``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

import pandas as pd

from .config import DEFAULT_SEP, REQUIRED_COLUMNS, SOURCE_COLUMNS

logger = logging.getLogger(__name__)

# Accepts both the source column names and the normalized ones
_FIELD_ALIASES = {**SOURCE_COLUMNS, "Year": "year"}


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def ensure_columns(df: pd.DataFrame, required: List[str]) -> None:
    """Raise an error if the DataFrame lacks any of the required columns."""
    missing = [col for col in required if col not in df.columns]
    if missing:
        raise KeyError(f"Missing expected columns: {missing}")


def extract_year(dates: pd.Series) -> pd.Series:
    """Return the calendar year of each date value.

    Whole numbers up to four digits (``1985``, ``"1985"``, ``"1985.0"``) are
    taken as the year itself; anything else is parsed as a date and its
    year is used.  Values that cannot be parsed become ``<NA>``.

    Parameters
    ----------
    dates : pd.Series
        Raw ``Date`` column.

    Returns
    -------
    pd.Series
        Nullable ``Int64`` series aligned with ``dates``.
    """
    text = dates.astype("string").str.strip()
    numeric = pd.to_numeric(text, errors="coerce").astype("float64")
    is_bare = (numeric % 1 == 0) & numeric.between(0, 9999)
    bare = numeric.where(is_bare)
    parsed = pd.to_datetime(
        text.where(~is_bare), errors="coerce", format="mixed"
    ).dt.year.astype("float64")
    return bare.fillna(parsed).astype("Int64")


def _to_count(series: pd.Series) -> pd.Series:
    """Coerce a count column to numbers; blanks and junk become 0."""
    values = pd.to_numeric(series, errors="coerce").fillna(0)
    if (values % 1 == 0).all():
        return values.astype("int64")
    return values


def normalize_records(raw: pd.DataFrame) -> pd.DataFrame:
    """Build the normalized record frame from a raw incident table."""
    ensure_columns(raw, REQUIRED_COLUMNS)
    return pd.DataFrame(
        {
            "date": raw["Date"].astype("string"),
            "year": extract_year(raw["Date"]),
            "operator": raw["Operator"].fillna("").astype(str),
            "fatalities": _to_count(raw["Fatalities"]),
            "aboard": _to_count(raw["Aboard"]),
        }
    ).reset_index(drop=True)


# ---------------------------------------------------------------------------
# Store
# ---------------------------------------------------------------------------


class RecordStore:
    """In-memory incident records, read-only after construction."""

    def __init__(self, records: pd.DataFrame):
        self._records = records

    @classmethod
    def from_frame(cls, raw: pd.DataFrame) -> "RecordStore":
        return cls(normalize_records(raw))

    @property
    def records(self) -> pd.DataFrame:
        return self._records

    def __len__(self) -> int:
        return len(self._records)

    def distinct_values(self, field: str) -> list:
        """Distinct values of ``field`` in first-seen order, missing values dropped.

        ``field`` may be a normalized column (``"year"``, ``"operator"``) or
        its source name (``"Date"`` maps to the year, ``"Operator"``).
        """
        column = _FIELD_ALIASES.get(field, field)
        if column == "date":
            column = "year"
        if column not in self._records.columns:
            raise KeyError(f"Unknown record field: {field!r}")
        return self._records[column].dropna().drop_duplicates().tolist()

    def count_incidents(self, operator: str, year: int) -> int:
        """Number of records for exactly ``operator`` in ``year``."""
        df = self._records
        mask = (df["operator"] == operator) & (df["year"] == year)
        return int(mask.fillna(False).sum())


def load_records(source: str | Path, sep: str = DEFAULT_SEP) -> RecordStore:
    """Read the incident CSV and return a :class:`RecordStore`.

    Parameters
    ----------
    source : str or Path
        Path or URL to the delimited file.
    sep : str, optional
        Column delimiter; defaults to ``","``.

    Raises
    ------
    OSError, pandas.errors.ParserError, KeyError
        When the file cannot be read or parsed, or lacks a required column.
        There is no partial load.
    """
    logger.info("Loading incident records from %s", source)
    raw = pd.read_csv(source, sep=sep, dtype=str, keep_default_na=True)
    store = RecordStore.from_frame(raw)
    logger.info("Loaded %d incident records", len(store))
    return store
