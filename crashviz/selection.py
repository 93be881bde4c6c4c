"""Current selection of the three chart controls."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)


class ChartType(str, Enum):
    BAR = "bar"
    PIE = "pie"


@dataclass(frozen=True)
class Selection:
    """Year, operator substring (``""`` = all) and chart type."""

    year: int
    operator: str = ""
    chart_type: ChartType = ChartType.BAR

    @classmethod
    def from_inputs(
        cls,
        year: object,
        operator: Optional[str],
        chart_type: object,
    ) -> Optional["Selection"]:
        """Build a selection from raw widget values.

        Returns ``None`` (and logs an error) when the year control has no
        value yet; callers skip rendering in that case.
        """
        if year is None or str(year).strip() == "":
            logger.error("Year selection not available; skipping render.")
            return None
        return cls(
            year=int(year),
            operator=(operator or "").strip(),
            chart_type=ChartType(chart_type),
        )

    def describe(self) -> str:
        """Short filter context for chart titles."""
        if self.operator:
            return f"{self.year}, operator contains '{self.operator}'"
        return f"{self.year}, all operators"
