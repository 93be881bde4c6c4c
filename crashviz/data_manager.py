"""Data manager: the one-time load of the incident records.

The Shiny app calls :func:`load_store` once at startup, before any chart
is rendered.  The result is memoized so later calls in the same process
(other sessions, the CLI) reuse the records instead of re-reading the
file.  A failed load is logged and re-raised: there is no fallback
dataset and nothing to render without one.
"""

import logging
from functools import lru_cache
from pathlib import Path

from .config import DATA_SOURCE, DEFAULT_SEP
from .records import RecordStore, load_records

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def _load_cached(source: str, sep: str) -> RecordStore:
    return load_records(source, sep=sep)


def load_store(
    source: str | Path | None = None,
    sep: str = DEFAULT_SEP,
    force_reload: bool = False,
) -> RecordStore:
    """
    Load the incident records once and return the shared store.

    Parameters
    ----------
    source : str or Path, optional
        Path or URL of the CSV.  Defaults to ``config.DATA_SOURCE``.
    sep : str, optional
        Column delimiter.
    force_reload : bool, optional
        If ``True``, drop the memoized store and read the file again.

    Returns
    -------
    RecordStore
        The loaded records.
    """
    if force_reload:
        _load_cached.cache_clear()

    source = str(source or DATA_SOURCE)
    try:
        return _load_cached(source, sep)
    except Exception:
        logger.exception("Could not load incident records from %s", source)
        raise
