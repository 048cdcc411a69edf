from typing import Dict, Type

from modules.base_module import MapModule
from modules.case_ratio_module import TestCaseRatioModule

# Variable selector entries, keyed by display name
MODULES: Dict[str, Type[MapModule]] = {
    TestCaseRatioModule.variable_name: TestCaseRatioModule,
}


def get_module(name: str) -> MapModule:
    try:
        module_cls = MODULES[name]
    except KeyError:
        raise KeyError(f"Unknown module {name!r}; known: {sorted(MODULES)}") from None
    return module_cls()
