"""Plotly figure for the two series."""

import math

import plotly.graph_objs as go

from .config import CHART_HEIGHT, F_COLOR, G_COLOR
from .series import ChartData, Series


def plottable(series: Series) -> list:
    # absent, NaN and inf points are all drawn as gaps
    return [v if v is not None and math.isfinite(v) else None for v in series.values]


def build_figure(data: ChartData) -> go.Figure:
    x = list(data.labels)
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=x, y=plottable(data.f), name=data.f.label, mode="lines",
        line=dict(color=F_COLOR), connectgaps=False,
    ))
    fig.add_trace(go.Scatter(
        x=x, y=plottable(data.cg), name=data.cg.label, mode="lines",
        line=dict(color=G_COLOR, dash="dash"), connectgaps=False,
    ))
    fig.update_layout(
        title="f(n) (solid) against c·g(n) (dashed)",
        xaxis_title="n",
        yaxis_title="value",
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1),
        height=CHART_HEIGHT,
    )
    return fig
