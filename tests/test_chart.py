"""Plotly figure tests.

Run: python -m pytest tests/test_chart.py -v
"""

import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from bigo import ParameterSet, build_figure, generate
from bigo.chart import plottable
from bigo.config import F_COLOR, G_COLOR
from bigo.series import Series


class TestPlottable:

    def test_gaps(self):
        s = Series("x", (None, float("nan"), float("inf"), 2.0))
        assert plottable(s) == [None, None, None, 2.0]


class TestFigure:

    def test_two_traces(self):
        fig = build_figure(generate(ParameterSet(n0=3, max_n=10, g_type="linear")))
        f_trace, cg_trace = fig.data
        assert f_trace.name == "f(n)"
        assert cg_trace.name == "c·g(n) (from n ≥ 3)"
        assert list(f_trace.x) == list(range(1, 11))

    def test_styles(self):
        f_trace, cg_trace = build_figure(generate(ParameterSet(max_n=10))).data
        assert f_trace.line.color == F_COLOR
        assert cg_trace.line.color == G_COLOR
        assert cg_trace.line.dash == "dash"
        assert cg_trace.connectgaps is False

    def test_absent_points_are_none(self):
        fig = build_figure(generate(ParameterSet(n0=3, max_n=10, g_type="linear")))
        y = list(fig.data[1].y)
        assert y[:2] == [None, None]
        assert y[2:] == [float(k) for k in range(3, 11)]

    def test_unevaluable_f_is_all_gaps(self):
        fig = build_figure(generate(ParameterSet(max_n=10, f_expr="nope")))
        assert list(fig.data[0].y) == [None] * 10
