from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Tuple

import logging

import plotly.graph_objects as go

from .aggregate import SeriesEntry, aggregate
from .config import (
    BAR_COLORS,
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    LABEL_ARC_INSET,
    LABEL_FONT_SIZE,
    MARGIN,
    TITLE,
    X_LABEL,
    Y_LABEL,
)
from .records import RecordStore
from .scales import Scales, arc_centroid, build_scales, pie_layout
from .selection import ChartType, Selection

logger = logging.getLogger(__name__)


# ============================================================
# Configuration / constants
# ============================================================

HOVER_TEMPLATE_FATALITIES = (
    "Operator: %{customdata}<br>Fatalities: %{y:,}<extra></extra>"
)
HOVER_TEMPLATE_ABOARD = "Operator: %{customdata}<br>Aboard: %{y:,}<extra></extra>"

# Share of the plot width given to the pie; the legend sits to its right
PIE_DOMAIN_WIDTH = 0.7


@dataclass(frozen=True)
class Canvas:
    """Fixed-size drawing surface; the plot area is what the margins leave."""

    width: int = CANVAS_WIDTH
    height: int = CANVAS_HEIGHT
    margin: Dict[str, int] = field(default_factory=lambda: dict(MARGIN))

    @property
    def inner_width(self) -> int:
        return self.width - self.margin["left"] - self.margin["right"]

    @property
    def inner_height(self) -> int:
        return self.height - self.margin["top"] - self.margin["bottom"]


DEFAULT_CANVAS = Canvas()


@dataclass(frozen=True)
class RenderContext:
    store: RecordStore
    selection: Selection
    canvas: Canvas


# ============================================================
# Helper functions
# ============================================================


def new_figure(canvas: Canvas) -> go.Figure:
    """Blank figure sized to the canvas."""
    m = canvas.margin
    return go.Figure(
        layout=dict(
            width=canvas.width,
            height=canvas.height,
            margin=dict(t=m["top"], r=m["right"], b=m["bottom"], l=m["left"]),
            plot_bgcolor="#f5f7fb",
            showlegend=False,
        )
    )


def apply_axes(fig: go.Figure, scales: Scales, canvas: Canvas) -> None:
    """Bottom band axis with rotated operator labels, left count axis."""
    operators = scales.x.domain
    y_max = scales.y.domain[1]
    fig.update_layout(
        xaxis=dict(
            range=[0, canvas.inner_width],
            tickmode="array",
            tickvals=[scales.x.center(op) for op in operators],
            ticktext=operators,
            tickangle=-45,
            showgrid=False,
            zeroline=False,
        ),
        yaxis=dict(
            range=[0, y_max if y_max > 0 else 1],
            rangemode="tozero",
            tickmode="array" if y_max > 0 else "auto",
            tickvals=scales.y.ticks() if y_max > 0 else None,
        ),
    )


def add_labels(fig: go.Figure, canvas: Canvas, x_label: str, y_label: str) -> None:
    """Axis captions as paper annotations so both chart types get them."""
    fig.add_annotation(
        text=x_label,
        xref="paper",
        yref="paper",
        x=0.5,
        y=0,
        yanchor="top",
        yshift=-(canvas.margin["bottom"] - 20),
        showarrow=False,
    )
    fig.add_annotation(
        text=y_label,
        xref="paper",
        yref="paper",
        x=0,
        y=0.5,
        xanchor="right",
        xshift=-(canvas.margin["left"] - 30),
        textangle=-90,
        showarrow=False,
    )


def add_title(fig: go.Figure, selection: Selection) -> None:
    fig.update_layout(
        title=dict(text=f"{TITLE} ({selection.describe()})", x=0.5, xanchor="center")
    )


def _accident_label(operator: str, count: int) -> str:
    return f"{operator}<br>({count} accident{'s' if count != 1 else ''})"


def pie_geometry(canvas: Canvas) -> Tuple[float, float, float]:
    """Centre ``(x, y)`` and radius of the pie in plot-area pixels."""
    domain_width = canvas.inner_width * PIE_DOMAIN_WIDTH
    radius = min(domain_width, canvas.inner_height) / 2
    return domain_width / 2, canvas.inner_height / 2, radius


# ============================================================
# Renderers
# ============================================================


class ChartRenderer:
    """Draws an aggregated series into a figure."""

    def render(
        self,
        fig: go.Figure,
        series: Sequence[SeriesEntry],
        scales: Scales,
        context: RenderContext,
    ) -> None:
        raise NotImplementedError


class BarRenderer(ChartRenderer):
    """Fatalities and aboard bars side by side within each operator's band."""

    def render(self, fig, series, scales, context):
        apply_axes(fig, scales, context.canvas)
        if not series:
            return

        half = scales.x.bandwidth / 2
        operators = [e.operator for e in series]
        starts = [scales.x(op) for op in operators]

        fig.add_trace(
            go.Bar(
                x=[s + half / 2 for s in starts],
                y=[e.total_fatalities for e in series],
                width=half,
                name="Fatalities",
                marker_color=BAR_COLORS["fatalities"],
                customdata=operators,
                hovertemplate=HOVER_TEMPLATE_FATALITIES,
            )
        )
        fig.add_trace(
            go.Bar(
                x=[s + half + half / 2 for s in starts],
                y=[e.total_aboard for e in series],
                width=half,
                name="Aboard",
                marker_color=BAR_COLORS["aboard"],
                customdata=operators,
                hovertemplate=HOVER_TEMPLATE_ABOARD,
            )
        )
        # Positions are explicit; keep Plotly from offsetting the traces
        fig.update_layout(barmode="overlay", showlegend=True)


class PieRenderer(ChartRenderer):
    """One wedge per operator sized by fatalities + aboard, with a legend."""

    def render(self, fig, series, scales, context):
        if not series:
            return

        slices = pie_layout(series)
        fig.add_trace(
            go.Pie(
                labels=[f"{s.operator} - {s.value}" for s in slices],
                values=[s.value for s in slices],
                marker=dict(colors=[scales.color(s.index) for s in slices]),
                sort=False,
                direction="clockwise",
                rotation=0,
                textinfo="none",
                hoverinfo="text",
                hovertext=[
                    f"Operator: {s.operator}<br>Total: {s.value:,}<br>"
                    f"Fatalities: {s.total_fatalities:,}<br>Aboard: {s.total_aboard:,}"
                    for s in slices
                ],
                domain=dict(x=[0, PIE_DOMAIN_WIDTH], y=[0, 1]),
            )
        )

        # Operator labels with the number of accidents in the selected year
        canvas = context.canvas
        cx, cy, radius = pie_geometry(canvas)
        year = context.selection.year
        for s in slices:
            dx, dy = arc_centroid(s, radius - LABEL_ARC_INSET)
            count = context.store.count_incidents(s.operator, year)
            fig.add_annotation(
                text=_accident_label(s.operator, count),
                xref="paper",
                yref="paper",
                x=(cx + dx) / canvas.inner_width,
                y=(cy + dy) / canvas.inner_height,
                showarrow=False,
                font=dict(size=LABEL_FONT_SIZE),
            )

        fig.update_layout(
            showlegend=True,
            legend=dict(
                orientation="v",
                x=PIE_DOMAIN_WIDTH + 0.02,
                xanchor="left",
                y=1,
                yanchor="top",
                traceorder="normal",
            ),
        )


RENDERERS: Dict[ChartType, ChartRenderer] = {
    ChartType.BAR: BarRenderer(),
    ChartType.PIE: PieRenderer(),
}


# ============================================================
# Main plotting function
# ============================================================


def create_chart(
    store: RecordStore,
    selection: Selection,
    canvas: Canvas = DEFAULT_CANVAS,
) -> go.Figure:
    """
    Aggregate the records for ``selection`` and draw them as a new figure.

    Parameters
    ----------
    store : RecordStore
        Loaded incident records.
    selection : Selection
        Year, operator filter and chart type to draw.
    canvas : Canvas, default DEFAULT_CANVAS
        Figure size and margins.

    Returns
    -------
    go.Figure
        A fresh figure holding only this chart; nothing carries over from
        earlier renders.
    """
    series: List[SeriesEntry] = aggregate(store, selection.year, selection.operator)
    scales = build_scales(series, canvas.inner_width, canvas.inner_height)

    fig = new_figure(canvas)
    context = RenderContext(store=store, selection=selection, canvas=canvas)
    RENDERERS[selection.chart_type].render(fig, series, scales, context)

    add_labels(fig, canvas, X_LABEL, Y_LABEL)
    add_title(fig, selection)
    logger.debug(
        "Rendered %s chart with %d operators", selection.chart_type.value, len(series)
    )
    return fig
