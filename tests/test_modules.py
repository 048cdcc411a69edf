import pytest

from modules import MODULES, get_module
from modules.base_module import MapModule
from modules.case_ratio_module import TestCaseRatioModule as RatioModule


def test_registry_lists_ratio_module():
    assert MODULES == {"Test-Case Ratio": RatioModule}


def test_get_module_instantiates():
    module = get_module("Test-Case Ratio")
    assert isinstance(module, RatioModule)
    assert isinstance(module, MapModule)


def test_get_module_unknown():
    with pytest.raises(KeyError, match="Test-Case Ratio"):
        get_module("Deaths")


def test_base_module_is_abstract():
    with pytest.raises(TypeError):
        MapModule()


def test_ratio_module_inherits_defaults():
    assert RatioModule.copy_data is MapModule.copy_data
    assert RatioModule.circle_radius_fcn is MapModule.circle_radius_fcn
    assert "__test__" not in vars(RatioModule)
