from __future__ import annotations

import math
from typing import List, Sequence, Tuple

import numpy as np
from plotly.colors import find_intermediate_color, sequential, unlabel_rgb

from config import LOG_DOMAIN, NO_DATA_COLOR, RATIO_EXPONENT


def _to_hex(rgb_label: str) -> str:
    r, g, b = (int(round(c)) for c in unlabel_rgb(rgb_label))
    return f"#{r:02x}{g:02x}{b:02x}"


class RatioColorScale:
    """Sequential color scale for ratios, blending a power and a log scale.

    A value ``v`` sits at ``1 - log_scale(1 / v**exponent)`` on the
    colorscale, where ``log_scale`` maps ``log_domain`` onto ``[0, 1]``.
    Larger ratios land further along the scale (darker for Blues).

    Colors are interpolated linearly in RGB between the colorscale stops.
    d3.interpolateBlues runs a B-spline through the same nine stops, so
    mid-scale shades differ slightly from d3 maps; the end points agree.
    """

    def __init__(
        self,
        exponent: float = RATIO_EXPONENT,
        log_domain: Tuple[float, float] = LOG_DOMAIN,
        colorscale: Sequence[str] = sequential.Blues,
        no_data_color: str = NO_DATA_COLOR,
    ):
        lo, hi = log_domain
        if lo <= 0 or hi <= 0 or lo == hi:
            raise ValueError(f"log_domain must be two distinct positive numbers, got {log_domain}")
        self.exponent = exponent
        self.log_domain = (float(lo), float(hi))
        self.colorscale = list(colorscale)
        self.no_data_color = no_data_color

    def _log_position(self, log_x: float) -> float:
        lo, hi = np.log(self.log_domain)
        return float((log_x - lo) / (hi - lo))

    def log_scale(self, x: float) -> float:
        return self._log_position(math.log(x))

    def position(self, value: float) -> float:
        """Unclamped position of ``value`` on the colorscale."""
        if value is None or math.isnan(value):
            return math.nan
        if value <= 0:
            return -math.inf
        if math.isinf(value):
            return math.inf
        # log(1 / v**e) == -e * log(v), without overflowing for large v
        return 1.0 - self._log_position(-self.exponent * math.log(value))

    def __call__(self, value: float) -> str:
        t = self.position(value)
        if math.isnan(t):
            return self.no_data_color
        t = float(np.clip(t, 0.0, 1.0))
        stops = np.linspace(0.0, 1.0, len(self.colorscale))
        i = min(int(np.searchsorted(stops, t, side="right")) - 1, len(stops) - 2)
        frac = (t - stops[i]) / (stops[i + 1] - stops[i])
        return _to_hex(find_intermediate_color(self.colorscale[i], self.colorscale[i + 1], frac, colortype="rgb"))

    def colors_for(self, values: Sequence[float]) -> List[str]:
        return [self(v) for v in values]
