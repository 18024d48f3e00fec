# tests/core/test_generator_registry.py
import logging

import pytest

from tomato.core.utils.configure_logging import LogWithTqdm, configure_logger
from tomato.errors import ConfigurationError
from tomato.generator.registry import GeneratorRegistry
from tomato.generator.typescript_generator import TypeScriptGenerator
from tomato.model import GeneratorOptions, Language


def test_make_typescript_generator():
    options = GeneratorOptions(import_location="./runtime")
    generator = GeneratorRegistry.make_generator(Language.TYPESCRIPT, options)

    assert isinstance(generator, TypeScriptGenerator)
    assert generator.emit_preamble() == "import { View, createView } from './runtime';"
    assert generator.emit_postamble() == ""


def test_supported_languages():
    assert GeneratorRegistry.supported_languages() == ["ts"]


def test_unregistered_language_is_a_configuration_error(monkeypatch):
    monkeypatch.setattr(GeneratorRegistry, "_generators", {})
    with pytest.raises(ConfigurationError):
        GeneratorRegistry.make_generator(Language.TYPESCRIPT, GeneratorOptions())


def test_register_replaces_generator(monkeypatch):
    class BannerGenerator(TypeScriptGenerator):
        def emit_postamble(self) -> str:
            return "// end of generated views\n"

    monkeypatch.setattr(GeneratorRegistry, "_generators", dict(GeneratorRegistry._generators))
    GeneratorRegistry.register(Language.TYPESCRIPT, BannerGenerator)

    generator = GeneratorRegistry.make_generator(Language.TYPESCRIPT, GeneratorOptions())
    assert generator.emit_postamble() == "// end of generated views\n"


# --- Logging ---

@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_configure_logger(restore_root_logger):
    configure_logger("debug", module_specific_levels={"tomato.generator": "ERROR"})

    assert restore_root_logger.level == logging.DEBUG
    assert any(isinstance(h, LogWithTqdm) for h in restore_root_logger.handlers)
    assert logging.getLogger("tomato.generator").level == logging.ERROR
    assert logging.getLogger("html5lib").level == logging.WARNING
