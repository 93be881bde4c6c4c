"""Tests for turning widget values into a chart selection."""

import logging

import pytest

from crashviz.selection import ChartType, Selection


def test_from_inputs_parses_widget_values():
    selection = Selection.from_inputs("1985", "  Delta ", "pie")

    assert selection == Selection(year=1985, operator="Delta", chart_type=ChartType.PIE)


def test_from_inputs_empty_operator_means_all():
    selection = Selection.from_inputs(1985, None, "bar")
    assert selection.operator == ""
    assert selection.chart_type is ChartType.BAR


@pytest.mark.parametrize("year", [None, "", "  "])
def test_missing_year_aborts_with_error_log(caplog, year):
    with caplog.at_level(logging.ERROR, logger="crashviz.selection"):
        assert Selection.from_inputs(year, "", "bar") is None

    assert "Year selection not available" in caplog.text


def test_unknown_chart_type_raises():
    with pytest.raises(ValueError):
        Selection.from_inputs("1985", "", "line")


def test_describe():
    assert Selection(1985).describe() == "1985, all operators"
    assert Selection(1985, "Air").describe() == "1985, operator contains 'Air'"
