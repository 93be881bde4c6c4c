from shiny import reactive
from shiny.express import input, ui
from shinywidgets import render_plotly

# Import organized modules
from crashviz.config import (
    ALL_OPERATORS_LABEL,
    CHART_TYPE_OPTIONS,
    DEFAULT_CHART_TYPE,
)
from crashviz.data_manager import load_store
from crashviz.plotting import create_chart
from crashviz.selection import Selection

# ======================================================
#  REACTIVE STATE
# ======================================================
# Load once on startup; records stay in-memory until app restart.
record_store = reactive.Value(load_store())

# Helpers for UI mapping
YEAR_CHOICES = [str(y) for y in record_store.get().distinct_values("year")]
OPERATOR_CHOICES = {
    "": ALL_OPERATORS_LABEL,
    **{op: op for op in record_store.get().distinct_values("operator") if op},
}
CHART_TYPE_CHOICES = {value: label for label, value in CHART_TYPE_OPTIONS}

# Defaults for resetting filters
DEFAULT_YEAR = YEAR_CHOICES[0] if YEAR_CHOICES else None
DEFAULT_OPERATOR = ""


@reactive.calc
def current_selection():
    return Selection.from_inputs(input.year(), input.operator(), input.chart_type())


# ======================================================
#  UI LAYOUT
# ======================================================
ui.page_opts(
    title="Airplane Crashes by Operator",
    fillable=False,
    full_width=True,
    lang="en",
)

with ui.sidebar(open="always", position="right"):
    ui.input_select("year", "Year", YEAR_CHOICES, selected=DEFAULT_YEAR)
    ui.input_select(
        "operator", "Operator", OPERATOR_CHOICES, selected=DEFAULT_OPERATOR
    )
    ui.input_radio_buttons(
        "chart_type", "Chart type", CHART_TYPE_CHOICES, selected=DEFAULT_CHART_TYPE
    )
    ui.input_action_button("reset_filters", "Reset filters", class_="btn-primary mt-3")


@reactive.effect
@reactive.event(input.reset_filters)
def _reset_filters():
    ui.update_select("year", selected=DEFAULT_YEAR)
    ui.update_select("operator", selected=DEFAULT_OPERATOR)
    ui.update_radio_buttons("chart_type", selected=DEFAULT_CHART_TYPE)


with ui.div(style="display:flex; justify-content:center;"):
    @render_plotly
    def crash_chart():
        selection = current_selection()
        if selection is None:
            return None

        return create_chart(record_store.get(), selection)
