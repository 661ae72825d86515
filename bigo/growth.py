"""Reference growth functions g(n) offered in the selector."""

from dataclasses import dataclass, field
from typing import Callable, Dict, List

import numpy as np
import sympy as sp

from .config import FALLBACK_G_TYPE
from .expression import n


@dataclass(frozen=True)
class GrowthFunction:
    key: str
    label: str
    expr: sp.Expr
    func: Callable[[np.ndarray], np.ndarray]
    examples: List[str] = field(default_factory=list)

    def __call__(self, ns):
        with np.errstate(over="ignore"):
            return self.func(np.asarray(ns, dtype=float))


GROWTH_FUNCTIONS: Dict[str, GrowthFunction] = {
    g.key: g
    for g in (
        GrowthFunction(
            "linear", "g(n) = n", n, lambda x: x,
            ["Linear search", "Traversing linked list", "Single pass algorithms"],
        ),
        GrowthFunction(
            "logn", "g(n) = log₂n", sp.log(n, 2), np.log2,
            ["Binary Search", "Search in balanced BST (log n)", "Some divide-and-conquer steps"],
        ),
        GrowthFunction(
            "nlogn", "g(n) = n log₂n", n * sp.log(n, 2), lambda x: x * np.log2(x),
            ["Merge Sort", "Heap Sort", "Average-case Quick Sort"],
        ),
        GrowthFunction(
            "quadratic", "g(n) = n²", n ** 2, lambda x: x * x,
            ["Bubble Sort", "Insertion Sort", "Naive matrix multiply (O(n²) for built-in dims)"],
        ),
        GrowthFunction(
            "exponential", "g(n) = 2ⁿ", 2 ** n, lambda x: np.power(2.0, x),
            ["Subset generation", "Brute-force backtracking (TSP brute force)"],
        ),
    )
}


def resolve(g_type: str) -> GrowthFunction:
    """The growth function for ``g_type``; unknown selectors fall back to n log₂n."""
    return GROWTH_FUNCTIONS.get(g_type, GROWTH_FUNCTIONS[FALLBACK_G_TYPE])


def reference(g_type: str, value: int) -> float:
    return float(resolve(g_type)(value))
