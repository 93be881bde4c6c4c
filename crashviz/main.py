"""
Command-line export: render one crash chart to a standalone HTML file.

    crash-charts --year 1985 --chart pie --out crashes_1985.html
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from .config import DATA_SOURCE, DEFAULT_CHART_TYPE, DEFAULT_SEP
from .data_manager import load_store
from .plotting import create_chart
from .selection import ChartType, Selection

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Render airplane crashes by operator for one year as an HTML chart."
    )
    parser.add_argument(
        "--source",
        default=DATA_SOURCE,
        help="Path or URL to the incident CSV (default: CRASH_DATA_SOURCE or data/).",
    )
    parser.add_argument(
        "--sep",
        default=DEFAULT_SEP,
        help=f"Delimiter used in the source file (default: '{DEFAULT_SEP}').",
    )
    parser.add_argument("--year", type=int, default=None, help="Year to chart.")
    parser.add_argument(
        "--operator",
        default="",
        help="Only keep operators containing this text (case-sensitive).",
    )
    parser.add_argument(
        "--chart",
        choices=[c.value for c in ChartType],
        default=DEFAULT_CHART_TYPE,
        help=f"Chart type (default: {DEFAULT_CHART_TYPE}).",
    )
    parser.add_argument(
        "--out",
        type=Path,
        default=Path("crash_chart.html"),
        help="Output HTML file (default: crash_chart.html).",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    selection = Selection.from_inputs(args.year, args.operator, args.chart)
    if selection is None:
        return 1

    store = load_store(args.source, sep=args.sep)
    fig = create_chart(store, selection)

    args.out.parent.mkdir(parents=True, exist_ok=True)
    fig.write_html(args.out, include_plotlyjs="cdn")
    logger.info(
        "Wrote %s chart (%s) to %s",
        selection.chart_type.value,
        selection.describe(),
        args.out,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
