"""Parameter set and the store the control panel writes into."""

from dataclasses import dataclass, replace
from typing import Callable, List, Optional

from ._errors import ParameterError
from ._log import log
from .config import C_RANGE, DEFAULTS, MAX_N_RANGE, N0_RANGE, Range


@dataclass(frozen=True)
class ParameterSet:
    c: float = DEFAULTS["c"]
    n0: int = DEFAULTS["n0"]
    max_n: int = DEFAULTS["max_n"]
    f_expr: str = DEFAULTS["f_expr"]
    g_type: str = DEFAULTS["g_type"]


def clamp_to_range(value: float, rng: Range) -> float:
    """Clamp ``value`` into ``rng`` and snap it to the nearest step."""
    value = min(max(float(value), rng.lo), rng.hi)
    steps = round((value - rng.lo) / rng.step)
    return min(rng.lo + steps * rng.step, rng.hi)


Listener = Callable[[ParameterSet], None]


class ParameterStore:
    """Holds the current ParameterSet; each change event sets exactly one field."""

    FIELDS = ("c", "n0", "max_n", "f_expr", "g_type")

    def __init__(self, initial: Optional[ParameterSet] = None):
        self._params = initial if initial is not None else ParameterSet()
        self._listeners: List[Listener] = []

    @property
    def params(self) -> ParameterSet:
        return self._params

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def set_c(self, value: float) -> ParameterSet:
        return self._apply(c=clamp_to_range(value, C_RANGE))

    def set_n0(self, value: int) -> ParameterSet:
        return self._apply(n0=int(clamp_to_range(value, N0_RANGE)))

    def set_max_n(self, value: int) -> ParameterSet:
        return self._apply(max_n=int(clamp_to_range(value, MAX_N_RANGE)))

    def set_f_expr(self, value: str) -> ParameterSet:
        return self._apply(f_expr=str(value))

    def set_g_type(self, value: str) -> ParameterSet:
        return self._apply(g_type=str(value))

    def update(self, name: str, value) -> ParameterSet:
        if name not in self.FIELDS:
            raise ParameterError(f"unknown parameter {name!r}")
        return getattr(self, f"set_{name}")(value)

    def _apply(self, **change) -> ParameterSet:
        new = replace(self._params, **change)
        if new == self._params:
            return new
        log.debug("parameter change %s", change)
        self._params = new
        for listener in self._listeners:
            listener(new)
        return new
