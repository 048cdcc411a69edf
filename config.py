# config.py
from __future__ import annotations

import os
from pathlib import Path

# =========================
# App meta
# =========================
APP_TITLE = "COVID Test-Case Ratio Map"
LOG_LEVEL = os.environ.get("RATIO_LOG_LEVEL", "INFO").upper()

# =========================
# Input records
# =========================
REQUIRED_COLUMNS = {"state", "date", "positive", "negative"}
COUNT_FIELDS = ["positive", "negative"]

# Trailing mean used by get_value(..., smoothed=True)
SMOOTHING_WINDOW_DAYS = 7

# =========================
# Color scale (blended log/power)
# =========================
RATIO_EXPONENT = 1.3
LOG_DOMAIN = (0.01, 1.0)
NO_DATA_COLOR = "#cccccc"

# =========================
# Legend
# =========================
LEGEND_CELLS = [1, 2, 5, 10, 20, 30, 50]
LEGEND_LABELS = ["1", "", "5", "", "20", "", "50"]
LEGEND_TITLE = "Number of tests per positive test result."

# Anchors for the framework's legend gradient
LOW_VAL_COLOR = (1, "#fff")
HIGH_VAL_COLOR = (20, "#005")

# =========================
# Small circle overlay
# =========================
CIRCLE_FILL = "#f47"
CIRCLE_STROKE = "#a04"

# =========================
# Paths
# =========================
ROOT = Path(__file__).resolve().parent
DEF_DATA = Path(os.environ.get("RATIO_DATA_PATH", ROOT / "data" / "states_daily.csv"))
