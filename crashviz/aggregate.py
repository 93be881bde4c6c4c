"""Filter the incident records and sum them per operator."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

import pandas as pd

from .records import RecordStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SeriesEntry:
    """Summed metrics for one operator in the filtered record set."""

    operator: str
    total_fatalities: int
    total_aboard: int

    @property
    def value(self) -> int:
        """Combined count used for pie slices."""
        return self.total_fatalities + self.total_aboard


def filter_records(
    records: pd.DataFrame, year: int, operator: str = ""
) -> pd.DataFrame:
    """Return the records of ``year`` whose operator contains ``operator``.

    The operator match is a plain, case-sensitive substring test; an empty
    ``operator`` keeps every record of the year.
    """
    mask = (records["year"] == year).fillna(False).astype(bool)
    if operator:
        mask &= records["operator"].str.contains(operator, regex=False)
    return records.loc[mask]


def aggregate(store: RecordStore, year: int, operator: str = "") -> List[SeriesEntry]:
    """Group the filtered records by operator and sum fatalities and aboard.

    Parameters
    ----------
    store : RecordStore
        Loaded incident records; not modified.
    year : int
        Calendar year to keep.
    operator : str, default ""
        Optional operator substring filter.

    Returns
    -------
    List[SeriesEntry]
        One entry per distinct operator, in order of first appearance.
        Empty when nothing matches.
    """
    filtered = filter_records(store.records, year, operator)
    grouped = filtered.groupby("operator", sort=False)[["fatalities", "aboard"]].sum()

    series = [
        SeriesEntry(operator=name, total_fatalities=fatalities, total_aboard=aboard)
        for name, fatalities, aboard in zip(
            grouped.index,
            grouped["fatalities"].tolist(),
            grouped["aboard"].tolist(),
        )
    ]
    logger.debug(
        "Aggregated %d records into %d operators (year=%s, operator=%r)",
        len(filtered),
        len(series),
        year,
        operator,
    )
    return series
