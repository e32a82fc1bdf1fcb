import importlib
import pkgutil

import audio_effects_config
import pytest


ALL_MODULES = sorted(
    module_info.name
    for module_info in pkgutil.walk_packages(
        audio_effects_config.__path__, prefix=f"{audio_effects_config.__name__}."
    )
)


@pytest.mark.parametrize("module_name", ALL_MODULES)
def test_import_module(module_name: str) -> None:
    importlib.import_module(module_name)
