import math
from typing import List, Optional


def with_commas(value: float) -> str:
    """Thousands-separated count; whole numbers drop the decimal part."""
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,.1f}"


def safe_ratio(numerator: float, denominator: float) -> Optional[float]:
    if denominator == 0:
        return math.inf if numerator > 0 else None
    return numerator / denominator


def format_ratio(ratio: Optional[float]) -> str:
    if ratio is None or not math.isfinite(ratio):
        return "n/a"
    return f"{ratio:.1f}x"


def legend_bucket(value: float, cells: List[float], labels: List[str]) -> str:
    """Label of the largest legend tick not above ``value``.

    Ticks with blank labels fall back to their numeric value.
    """
    if value is None or math.isnan(value) or value < cells[0]:
        return ""
    bucket = ""
    for cell, label in zip(cells, labels):
        if value >= cell:
            bucket = label or f"{cell:g}"
    return bucket
