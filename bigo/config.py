"""Defaults, ranges and presentation constants for the visualizer."""

from typing import NamedTuple


class Range(NamedTuple):
    lo: float
    hi: float
    step: float


# --------------------------
# Parameter ranges (slider bounds)
# --------------------------
C_RANGE = Range(0.5, 200.0, 0.5)
N0_RANGE = Range(1, 50, 1)
MAX_N_RANGE = Range(10, 200, 10)

DEFAULTS = {
    "c": 1.0,
    "n0": 1,
    "max_n": 100,
    "f_expr": "n",
    "g_type": "nlogn",
}
FALLBACK_G_TYPE = "nlogn"

# --------------------------
# Chart styling
# --------------------------
F_COLOR = "#1f77b4"
G_COLOR = "#ff7f0e"
CHART_HEIGHT = 560

# --------------------------
# Page
# --------------------------
PAGE_TITLE = "Big-O Visualizer"
F_PLACEHOLDER = "e.g., n, n*n, n*log2(n)"
NOTES_URL = (
    "https://spangled-airport-56f.notion.site/"
    "Warm-up-Practice-Questions-on-Time-Complexity-Of-Algorithms-23876128a3ef80438078cfb416685265"
)
NOTES_TEXT = "📘 View Notes On Time Complexity And Asymptotic Notations"

# Logging
LOG_ENV_VAR = "BIGO_LOG"
