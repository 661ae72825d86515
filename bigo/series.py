"""Derive the two plotted series from a ParameterSet.

The f(n) series holds floats, NaN marking an n where the expression could not
be evaluated. The c·g(n) series holds ``None`` before n0: the point is absent,
which is not the same thing as zero or NaN.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from ._log import log
from .expression import sample_expression
from .growth import resolve
from .params import ParameterSet

F_LABEL = "f(n)"
CG_LABEL = "c·g(n)"


@dataclass(frozen=True)
class Series:
    label: str
    values: Tuple[Optional[float], ...]

    def __len__(self):
        return len(self.values)

    def point(self, n: int) -> Optional[float]:
        if n < 1 or n > len(self.values):
            raise IndexError(f"n={n} outside 1..{len(self.values)}")
        return self.values[n - 1]


@dataclass(frozen=True)
class ChartData:
    labels: Tuple[int, ...]
    f: Series
    cg: Series


def input_sizes(max_n: int) -> np.ndarray:
    return np.arange(1, max_n + 1, dtype=float)


def cg_label(n0: int) -> str:
    return CG_LABEL + (f" (from n ≥ {n0})" if n0 > 1 else "")


def f_series(params: ParameterSet) -> Series:
    values = sample_expression(params.f_expr, input_sizes(params.max_n))
    return Series(F_LABEL, tuple(float(v) for v in values))


def cg_series(params: ParameterSet) -> Series:
    ns = input_sizes(params.max_n)
    scaled = params.c * resolve(params.g_type)(ns)
    values = tuple(
        float(v) if k >= params.n0 else None
        for k, v in zip(range(1, params.max_n + 1), scaled)
    )
    return Series(cg_label(params.n0), values)


def generate(params: ParameterSet) -> ChartData:
    log.debug("generating series for %s", params)
    return ChartData(
        labels=tuple(range(1, params.max_n + 1)),
        f=f_series(params),
        cg=cg_series(params),
    )
