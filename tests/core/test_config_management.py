# tests/core/test_config_management.py
import json

import pytest

from tomato.core.managers.config_manager import ConfigManager
from tomato.core.utils.path_utils import PathUtils
from tomato.model import GeneratorOptions

# A standard, predictable configuration for the tests
MOCK_SETTINGS_CONTENT = {
    "debug": {
        "level": "WARNING"
    },
    "generator": {
        "language": "ts",
        "view_base_class": "BaseView",
        "view_factory": "makeView",
        "force_debug_ids": False
    },
    "output": {
        "stylesheet_suffix": ".css"
    }
}


@pytest.fixture
def config_env(tmp_path, monkeypatch):
    """
    Sets up an isolated environment for the ConfigManager:
    - Creates a temporary package root with a fake 'settings.json'.
    - Monkeypatches PathUtils to point at that location.
    The singleton is reloaded from the real settings afterwards.
    """
    package_root = tmp_path / "tomato"
    package_root.mkdir()
    settings_file = package_root / "settings.json"
    settings_file.write_text(json.dumps(MOCK_SETTINGS_CONTENT))

    monkeypatch.setattr(PathUtils, 'get_package_root', lambda: package_root)

    manager = ConfigManager()
    manager.reset()  # Force a reload from the fake file
    yield manager

    monkeypatch.undo()
    manager.reset()


def test_config_manager_is_singleton():
    assert ConfigManager() is ConfigManager()


def test_config_manager_load(config_env):
    config = config_env.get_all()
    assert config["debug"]["level"] == "WARNING"
    assert config["generator"]["view_factory"] == "makeView"


def test_config_manager_get_nested(config_env):
    assert config_env.get_nested("output.stylesheet_suffix") == ".css"
    assert config_env.get_nested("non.existent.key", "default") == "default"
    assert config_env.get_nested("debug.level.deeper", "default") == "default"


def test_config_manager_set_nested(config_env):
    # Change an existing value
    config_env.set_nested("debug.level", "INFO")
    assert config_env.get_nested("debug.level") == "INFO"

    # Add a new key
    config_env.set_nested("paths.output_file", "out/views.ts")
    assert config_env.get_nested("paths.output_file") == "out/views.ts"

    # Booleans keep their type, also when given as text
    config_env.set_nested("generator.force_debug_ids", "true")
    assert config_env.get_nested("generator.force_debug_ids") is True
    config_env.set_nested("generator.force_debug_ids", False)
    assert config_env.get_nested("generator.force_debug_ids") is False


def test_config_manager_set_nested_through_a_value_fails(config_env):
    assert config_env.set_nested("debug.level.deeper", "x") is False


def test_config_manager_generator_options(config_env):
    options = config_env.generator_options()
    assert options == GeneratorOptions(
        view_base_class="BaseView", view_factory="makeView", import_location="../ts/util/q"
    )


def test_config_manager_reset(config_env):
    config_env.set_nested("debug.level", "DEBUG")
    assert config_env.get_nested("debug.level") == "DEBUG"

    config_env.reset()
    assert config_env.get_nested("debug.level") == "WARNING"


def test_config_manager_missing_file(config_env, tmp_path, monkeypatch):
    monkeypatch.setattr(PathUtils, 'get_package_root', lambda: tmp_path / "elsewhere")
    config_env.reset()
    assert config_env.get_all() == {}
    assert config_env.generator_options() == GeneratorOptions()


def test_shipped_settings_are_valid():
    settings = json.loads((PathUtils.get_package_root() / "settings.json").read_text(encoding="utf-8"))
    assert settings["generator"]["language"] == "ts"
    assert settings["output"]["stylesheet_suffix"] == ".scss"
