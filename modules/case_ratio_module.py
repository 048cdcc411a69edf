import logging
import math
from typing import List, Tuple

from config import (
    CIRCLE_FILL,
    CIRCLE_STROKE,
    HIGH_VAL_COLOR,
    LEGEND_CELLS,
    LEGEND_LABELS,
    LEGEND_TITLE,
    LOG_DOMAIN,
    LOW_VAL_COLOR,
    RATIO_EXPONENT,
)
from data_loader import Feature, get_value
from figures.color_scale import RatioColorScale
from modules.base_module import MapModule
from utils import format_ratio, safe_ratio, with_commas

logger = logging.getLogger(__name__)


class TestCaseRatioModule(MapModule):
    """Tests per positive result, i.e. how many tests it took to find a case."""

    variable_name = "Test-Case Ratio"
    legend_title = LEGEND_TITLE
    low_val_color = LOW_VAL_COLOR
    high_val_color = HIGH_VAL_COLOR
    circle_fill = CIRCLE_FILL
    circle_stroke = CIRCLE_STROKE

    def __init__(self):
        self._scale = RatioColorScale(exponent=RATIO_EXPONENT, log_domain=LOG_DOMAIN)

    def value_fcn(self, feature: Feature, date) -> float:
        cases = get_value(feature, date, "positive")
        tests = cases + get_value(feature, date, "negative")
        if tests == 0:
            return 0
        if cases == 0:
            logger.debug("%s on %s: %s tests without a positive result", feature.abbrev, date, tests)
            return math.inf
        return tests / cases

    def value_text_fcn(self, feature: Feature, date) -> str:
        cases = get_value(feature, date, "positive", smoothed=False)
        tests = cases + get_value(feature, date, "negative", smoothed=False)
        ratio = safe_ratio(tests, cases)
        msg = f"<p>Tests: {with_commas(tests)}</p>"
        msg += f"<p>Positive: {with_commas(cases)}</p>"
        msg += f"<p>Test/Case Ratio: {format_ratio(ratio)}</p>"
        return msg

    def color(self, value: float) -> str:
        return self._scale(value)

    def cells_and_labels_fcn(self, feature: Feature, date) -> Tuple[List[float], List[str]]:
        return list(LEGEND_CELLS), list(LEGEND_LABELS)