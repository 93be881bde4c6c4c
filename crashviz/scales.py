"""Scales and layouts derived from an aggregated series.

The chart renderers never compute positions themselves: bar positions come
from a :class:`BandScale`, the shared vertical domain and its ticks from a
:class:`LinearScale`, slice colors from an :class:`OrdinalColorScale` and
pie slice angles from :func:`pie_layout`.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from plotly.colors import qualitative

from .aggregate import SeriesEntry
from .config import BAND_PADDING


class BandScale:
    """Map categories to contiguous, uniformly padded bands.

    Inner and outer padding are both ``padding`` (a fraction of the step),
    and the bands are centered in ``range``.
    """

    def __init__(
        self,
        domain: Sequence[str],
        range: Tuple[float, float],
        padding: float = BAND_PADDING,
    ):
        self.domain = list(dict.fromkeys(domain))
        self.range = range
        self.padding = padding
        self._index = {value: i for i, value in enumerate(self.domain)}

        start, stop = range
        n = len(self.domain)
        self.step = (stop - start) / max(1.0, n - padding + padding * 2)
        self.bandwidth = self.step * (1 - padding)
        # Centre the bands, leaving equal outer space on both sides
        self._start = start + (stop - start - self.step * (n - padding)) / 2

    def __call__(self, value: str) -> float:
        """Start of the band for ``value``."""
        return self._start + self.step * self._index[value]

    def center(self, value: str) -> float:
        return self(value) + self.bandwidth / 2


class LinearScale:
    """Linear map from ``domain`` to ``range``, with round tick values."""

    def __init__(self, domain: Tuple[float, float], range: Tuple[float, float]):
        self.domain = domain
        self.range = range

    def __call__(self, value: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        if d1 == d0:
            return (r0 + r1) / 2
        return r0 + (value - d0) / (d1 - d0) * (r1 - r0)

    def tick_step(self, count: int = 10) -> float:
        """Round step (1, 2 or 5 times a power of ten) giving about ``count`` ticks."""
        d0, d1 = self.domain
        raw = (d1 - d0) / count
        if raw <= 0:
            return 0.0
        power = 10 ** math.floor(math.log10(raw))
        error = raw / power
        if error >= math.sqrt(50):
            factor = 10
        elif error >= math.sqrt(10):
            factor = 5
        elif error >= math.sqrt(2):
            factor = 2
        else:
            factor = 1
        return factor * power

    def ticks(self, count: int = 10) -> List[float]:
        """Multiples of :meth:`tick_step` inside the domain."""
        d0, d1 = self.domain
        step = self.tick_step(count)
        if step == 0:
            return [d0]
        first = math.ceil(d0 / step)
        last = math.floor(d1 / step)
        return [round(i * step, 12) for i in range(first, last + 1)]


class OrdinalColorScale:
    """Slice index -> color from a fixed palette, cycling when exhausted."""

    def __init__(self, palette: Sequence[str] | None = None):
        self.palette = list(palette or qualitative.D3)

    def __call__(self, index: int) -> str:
        return self.palette[index % len(self.palette)]


@dataclass(frozen=True)
class Scales:
    x: BandScale
    y: LinearScale
    color: OrdinalColorScale


def build_scales(series: Sequence[SeriesEntry], width: float, height: float) -> Scales:
    """Derive the chart scales from an aggregated series.

    The fatalities and aboard series share one vertical scale so their bars
    are comparable.
    """
    y_max = max(
        (max(e.total_fatalities, e.total_aboard) for e in series), default=0
    )
    return Scales(
        x=BandScale([e.operator for e in series], (0, width)),
        y=LinearScale((0, y_max), (height, 0)),
        color=OrdinalColorScale(),
    )


# ---------------------------------------------------------------------------
# Pie layout
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PieSlice:
    """One wedge: the entry's values plus its angular extent in radians.

    Angles start at twelve o'clock and grow clockwise.
    """

    index: int
    operator: str
    value: int
    total_fatalities: int
    total_aboard: int
    start_angle: float
    end_angle: float

    @property
    def mid_angle(self) -> float:
        return (self.start_angle + self.end_angle) / 2


def pie_layout(series: Sequence[SeriesEntry]) -> List[PieSlice]:
    """Lay out one slice per entry, in series order.

    Spans are proportional to ``value`` and add up to a full turn when the
    total is positive; an all-zero series gives zero-width slices.
    """
    total = sum(e.value for e in series)
    scale = 2 * math.pi / total if total > 0 else 0.0

    slices: List[PieSlice] = []
    angle = 0.0
    for i, entry in enumerate(series):
        end = angle + entry.value * scale
        slices.append(
            PieSlice(
                index=i,
                operator=entry.operator,
                value=entry.value,
                total_fatalities=entry.total_fatalities,
                total_aboard=entry.total_aboard,
                start_angle=angle,
                end_angle=end,
            )
        )
        angle = end
    return slices


def arc_centroid(pie_slice: PieSlice, radius: float) -> Tuple[float, float]:
    """Point at ``radius`` on the slice's bisector, as ``(dx, dy)`` with y up."""
    theta = pie_slice.mid_angle
    return radius * math.sin(theta), radius * math.cos(theta)
