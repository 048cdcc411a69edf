import math

from config import LEGEND_CELLS, LEGEND_LABELS
from utils import format_ratio, legend_bucket, safe_ratio, with_commas


def test_with_commas():
    assert with_commas(0) == "0"
    assert with_commas(1234567.0) == "1,234,567"
    assert with_commas(1234.56) == "1,234.6"


def test_safe_ratio():
    assert safe_ratio(10, 4) == 2.5
    assert safe_ratio(10, 0) == math.inf
    assert safe_ratio(0, 0) is None


def test_format_ratio():
    assert format_ratio(3.333) == "3.3x"
    assert format_ratio(None) == "n/a"
    assert format_ratio(math.inf) == "n/a"


def test_legend_bucket():
    assert legend_bucket(0, LEGEND_CELLS, LEGEND_LABELS) == ""
    assert legend_bucket(1.5, LEGEND_CELLS, LEGEND_LABELS) == "1"
    assert legend_bucket(3, LEGEND_CELLS, LEGEND_LABELS) == "2"
    assert legend_bucket(25, LEGEND_CELLS, LEGEND_LABELS) == "20"
    assert legend_bucket(math.inf, LEGEND_CELLS, LEGEND_LABELS) == "50"
    assert legend_bucket(math.nan, LEGEND_CELLS, LEGEND_LABELS) == ""
