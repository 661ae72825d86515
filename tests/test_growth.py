"""Reference growth function tests.

Run: python -m pytest tests/test_growth.py -v
"""

import os
import sys

import numpy as np
import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from bigo.growth import GROWTH_FUNCTIONS, reference, resolve


class TestReferenceTable:

    @pytest.mark.parametrize("g_type, value, expected", [
        ("linear", 4, 4),
        ("logn", 8, 3),
        ("nlogn", 8, 24),
        ("quadratic", 5, 25),
        ("exponential", 5, 32),
    ])
    def test_exact_values(self, g_type, value, expected):
        assert reference(g_type, value) == expected

    def test_log_of_one_is_zero(self):
        assert reference("logn", 1) == 0
        assert reference("nlogn", 1) == 0

    def test_exponential_at_max_range_is_finite(self):
        assert np.isfinite(200 * reference("exponential", 200))

    def test_vectorised(self):
        assert resolve("quadratic")(np.arange(1, 4)).tolist() == [1.0, 4.0, 9.0]


class TestResolve:

    def test_selector_order(self):
        assert list(GROWTH_FUNCTIONS) == ["linear", "logn", "nlogn", "quadratic", "exponential"]

    @pytest.mark.parametrize("g_type", ["cubic", "", "NLOGN"])
    def test_unknown_falls_back_to_nlogn(self, g_type):
        assert resolve(g_type) is GROWTH_FUNCTIONS["nlogn"]
        assert reference(g_type, 8) == 24

    def test_every_family_has_label_and_examples(self):
        for g in GROWTH_FUNCTIONS.values():
            assert g.label.startswith("g(n) = ")
            assert g.examples
