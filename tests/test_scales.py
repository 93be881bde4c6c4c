"""Tests for band/linear/color scales and the pie layout."""

import math

import pytest
from plotly.colors import qualitative

from crashviz.aggregate import SeriesEntry
from crashviz.scales import (
    BandScale,
    LinearScale,
    OrdinalColorScale,
    arc_centroid,
    build_scales,
    pie_layout,
)

SERIES = [
    SeriesEntry("Aeroflot", 15, 20),
    SeriesEntry("Delta Air Lines", 0, 7),
    SeriesEntry("Military - U.S. Air Force", 0, 3),
]


def test_band_scale_padding_and_spacing():
    x = BandScale(["a", "b", "c"], (0, 300), padding=0.1)

    assert x.step == pytest.approx(300 / 3.1)
    assert x.bandwidth == pytest.approx(x.step * 0.9)
    assert x("a") == pytest.approx(x.step * 0.1)
    assert x("b") - x("a") == pytest.approx(x.step)
    # Outer padding is the same on both ends
    assert x("c") + x.bandwidth + x.step * 0.1 == pytest.approx(300)
    assert x.center("a") == pytest.approx(x("a") + x.bandwidth / 2)


def test_band_scale_unknown_value():
    with pytest.raises(KeyError):
        BandScale(["a"], (0, 10))("b")


def test_linear_scale_inverted_range():
    y = LinearScale((0, 10), (480, 0))
    assert y(0) == 480
    assert y(5) == 240
    assert y(10) == 0


def test_linear_scale_degenerate_domain():
    assert LinearScale((0, 0), (480, 0))(0) == 240


def test_color_scale_is_stable_and_cycles():
    color = OrdinalColorScale()
    assert color(0) == qualitative.D3[0]
    assert color(3) == color(3)
    assert color(len(qualitative.D3)) == color(0)


def test_build_scales_shares_vertical_domain():
    scales = build_scales(SERIES, 870, 480)

    assert scales.y.domain == (0, 20)
    assert scales.y.range == (480, 0)
    assert scales.x.domain == [e.operator for e in SERIES]


def test_build_scales_empty_series():
    scales = build_scales([], 870, 480)
    assert scales.x.domain == []
    assert scales.y.domain == (0, 0)


def test_pie_layout_spans_full_turn_proportionally():
    slices = pie_layout(SERIES)
    spans = [s.end_angle - s.start_angle for s in slices]

    assert sum(spans) == pytest.approx(2 * math.pi)
    assert spans[0] / spans[1] == pytest.approx(35 / 7)
    assert [s.value for s in slices] == [35, 7, 3]
    # Contiguous, in series order
    assert slices[0].start_angle == 0
    for prev, cur in zip(slices, slices[1:]):
        assert cur.start_angle == pytest.approx(prev.end_angle)


def test_pie_layout_all_zero_values():
    slices = pie_layout([SeriesEntry("A", 0, 0), SeriesEntry("B", 0, 0)])
    assert [s.end_angle - s.start_angle for s in slices] == [0, 0]


def test_arc_centroid_on_bisector():
    (whole,) = pie_layout([SeriesEntry("A", 1, 0)])
    dx, dy = arc_centroid(whole, 100)
    # Single slice covers the whole turn; its bisector points straight down
    assert dx == pytest.approx(0, abs=1e-9)
    assert dy == pytest.approx(-100)


def test_linear_scale_ticks_use_round_steps():
    assert LinearScale((0, 20), (480, 0)).ticks() == [0, 2, 4, 6, 8, 10, 12, 14, 16, 18, 20]
    assert LinearScale((0, 35), (480, 0)).ticks() == [0, 5, 10, 15, 20, 25, 30, 35]
    assert LinearScale((0, 1234), (480, 0)).tick_step() == 100
    assert LinearScale((0, 0), (480, 0)).ticks() == [0]
