# src/tomato/generator/registry.py
import logging
from typing import Dict, List, Type

from tomato.errors import ConfigurationError
from tomato.generator.base_generator import TomatoGenerator
from tomato.generator.typescript_generator import TypeScriptGenerator
from tomato.model import GeneratorOptions, Language

logger = logging.getLogger(__name__)


class GeneratorRegistry:
    """Central registry mapping a target language to its generator."""

    _generators: Dict[Language, Type[TomatoGenerator]] = {
        Language.TYPESCRIPT: TypeScriptGenerator,
    }

    @classmethod
    def register(cls, language: Language, generator_cls: Type[TomatoGenerator]) -> None:
        cls._generators[language] = generator_cls
        logger.debug("Registered generator %s for '%s'.", generator_cls.__name__, language.value)

    @classmethod
    def make_generator(cls, language: Language, options: GeneratorOptions) -> TomatoGenerator:
        """Factory method for obtaining the generator of a language."""
        generator_cls = cls._generators.get(language)
        if generator_cls is None:
            raise ConfigurationError(f"Language '{getattr(language, 'value', language)}' is not supported.")
        return generator_cls(options)

    @classmethod
    def supported_languages(cls) -> List[str]:
        return sorted(language.value for language in cls._generators)
