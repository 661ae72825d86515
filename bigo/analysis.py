"""Big-O reasoning about the current f(n) and g(n).

Two independent views: the symbolic limit of f(n)/g(n) as n → ∞, and a
numeric check of the witness pair (c, n0) over the plotted range.
"""

import math
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

import sympy as sp

from ._errors import ExpressionError
from ._log import log
from .expression import n, parse
from .growth import resolve
from .series import ChartData


@dataclass(frozen=True)
class Classification:
    limit: Optional[str]
    O: Optional[bool] = None
    o: Optional[bool] = None
    Omega: Optional[bool] = None
    omega: Optional[bool] = None
    Theta: Optional[bool] = None
    error: Optional[str] = None

    @property
    def determined(self) -> bool:
        return self.O is not None


def compute_limit_symbolic(f_expr, g_expr):
    try:
        return sp.limit(sp.simplify(f_expr / g_expr), n, sp.oo)
    except Exception as e:
        log.debug("limit of (%s)/(%s) failed: %s", f_expr, g_expr, e)
        return None


def classify_limit(lim) -> Classification:
    if lim is None:
        return Classification(limit=None)
    text = str(lim)
    if lim == sp.oo:
        return Classification(text, O=False, o=False, Omega=True, omega=True, Theta=False)
    if lim == 0:
        return Classification(text, O=True, o=True, Omega=False, omega=False, Theta=False)
    if lim.is_real and lim.is_finite:
        if lim.is_positive:
            return Classification(text, O=True, o=False, Omega=True, omega=False, Theta=True)
        if lim.is_negative:
            # f is eventually negative, so below any positive c·g
            return Classification(text, O=True, o=False, Omega=False, omega=False, Theta=False)
    return Classification(text)


@lru_cache(maxsize=128)
def classify(f_text: str, g_type: str) -> Classification:
    """Compare f(n) with the selected g(n) through lim f(n)/g(n)."""
    try:
        f_expr = parse(f_text)
    except ExpressionError as e:
        return Classification(limit=None, error=str(e))
    return classify_limit(compute_limit_symbolic(f_expr, resolve(g_type).expr))


# --------------------------
# Witness check over the plotted range
# --------------------------
@dataclass(frozen=True)
class WitnessReport:
    holds: Optional[bool]
    first_violation: Optional[int]
    last_violation: Optional[int]
    checked: int
    skipped: int
    # smallest n0 from which the bound holds on the plotted range
    suggested_n0: Optional[int] = None


def exceeds(f_value: float, bound: float) -> bool:
    return f_value > bound and not math.isclose(f_value, bound, rel_tol=1e-9, abs_tol=1e-12)


def check_witness(data: ChartData) -> WitnessReport:
    """Does f(n) ≤ c·g(n) hold at every plotted n ≥ n0?

    Points where f(n) is NaN are skipped and counted; ``holds`` is None when no
    point could be checked.
    """
    first = last = None
    checked = skipped = 0
    for k, f_value, bound in zip(data.labels, data.f.values, data.cg.values):
        if bound is None:
            continue
        if math.isnan(f_value):
            skipped += 1
            continue
        checked += 1
        if exceeds(f_value, bound):
            if first is None:
                first = k
            last = k
    holds = None if checked == 0 else first is None
    suggested = None
    if last is not None:
        if last < data.labels[-1]:
            suggested = last + 1
        else:
            log.debug("bound still violated at n=%d, no n0 suggestion in range", last)
    return WitnessReport(holds, first, last, checked, skipped, suggested)
