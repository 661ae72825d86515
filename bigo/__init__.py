"""Big-O visualizer: compare f(n) with c·g(n) over n = 1..max n."""

from ._errors import BigOError, ExpressionError, ParameterError
from ._log import configure as configure_logging
from .analysis import Classification, WitnessReport, check_witness, classify
from .chart import build_figure
from .expression import compile_expression, evaluate, parse
from .growth import GROWTH_FUNCTIONS, GrowthFunction, reference, resolve
from .params import ParameterSet, ParameterStore, clamp_to_range
from .series import ChartData, Series, generate

__version__ = "0.1.0"

__all__ = [
    "BigOError",
    "ChartData",
    "Classification",
    "ExpressionError",
    "GROWTH_FUNCTIONS",
    "GrowthFunction",
    "ParameterError",
    "ParameterSet",
    "ParameterStore",
    "Series",
    "WitnessReport",
    "build_figure",
    "check_witness",
    "clamp_to_range",
    "classify",
    "compile_expression",
    "configure_logging",
    "evaluate",
    "generate",
    "parse",
    "reference",
    "resolve",
]
