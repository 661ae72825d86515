"""Parameter store tests: defaults, clamping, change events.

Run: python -m pytest tests/test_params.py -v
"""

import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from bigo import ParameterError, ParameterSet, ParameterStore, clamp_to_range
from bigo.config import C_RANGE, MAX_N_RANGE, N0_RANGE


class TestDefaults:

    def test_parameter_set_defaults(self):
        p = ParameterSet()
        assert (p.c, p.n0, p.max_n, p.f_expr, p.g_type) == (1.0, 1, 100, "n", "nlogn")

    def test_store_starts_with_defaults(self):
        assert ParameterStore().params == ParameterSet()


class TestClamp:

    @pytest.mark.parametrize("value, rng, expected", [
        (1000, C_RANGE, 200.0),
        (0, C_RANGE, 0.5),
        (0.76, C_RANGE, 1.0),
        (42.5, C_RANGE, 42.5),
        (0, N0_RANGE, 1),
        (51, N0_RANGE, 50),
        (73, MAX_N_RANGE, 70),
        (5, MAX_N_RANGE, 10),
        (999, MAX_N_RANGE, 200),
    ])
    def test_clamp(self, value, rng, expected):
        assert clamp_to_range(value, rng) == expected


class TestStore:

    def test_setters_clamp(self):
        store = ParameterStore()
        store.set_c(1000)
        store.set_n0(0)
        store.set_max_n(73)
        assert store.params.c == 200.0
        assert store.params.n0 == 1
        assert store.params.max_n == 70
        assert isinstance(store.params.max_n, int)

    def test_text_fields_kept_verbatim(self):
        store = ParameterStore()
        store.set_f_expr("n*n + ")
        store.set_g_type("cubic")
        assert store.params.f_expr == "n*n + "
        assert store.params.g_type == "cubic"

    def test_update_changes_one_field(self):
        store = ParameterStore()
        before = store.params
        after = store.update("n0", 5)
        assert after.n0 == 5
        assert (after.c, after.max_n, after.f_expr, after.g_type) == (
            before.c, before.max_n, before.f_expr, before.g_type)

    def test_update_unknown_field(self):
        with pytest.raises(ParameterError):
            ParameterStore().update("k", 3)

    def test_listener_called_on_change_only(self):
        store = ParameterStore()
        seen = []
        store.subscribe(seen.append)
        store.set_c(2)
        store.set_c(2)
        store.set_g_type("nlogn")
        assert len(seen) == 1
        assert seen[0].c == 2.0

    def test_initial_set(self):
        initial = ParameterSet(c=4.0, n0=3, max_n=20, f_expr="n^2", g_type="quadratic")
        assert ParameterStore(initial).params is initial
