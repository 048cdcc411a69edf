from abc import ABC, abstractmethod
from typing import Any, List, Optional, Tuple

from data_loader import Feature


class MapModule(ABC):
    """One variable the map can show.

    The framework lists modules by ``variable_name`` and, for each feature
    and date, asks for a value, a tooltip, a color and legend cells.
    """

    variable_name: str = ""
    legend_title: str = ""
    circle_fill: str = "#000"
    circle_stroke: str = "#000"
    low_val_color: Optional[Tuple[float, str]] = None
    high_val_color: Optional[Tuple[float, str]] = None

    def copy_data(self, root: Any, display: Any) -> None:
        return None

    @abstractmethod
    def value_fcn(self, feature: Feature, date) -> float:
        pass

    @abstractmethod
    def value_text_fcn(self, feature: Feature, date) -> str:
        pass

    @abstractmethod
    def color(self, value: float) -> str:
        pass

    @abstractmethod
    def cells_and_labels_fcn(self, feature: Feature, date) -> Tuple[List[float], List[str]]:
        pass

    def circle_radius_fcn(self, feature: Feature, date) -> float:
        return 0
