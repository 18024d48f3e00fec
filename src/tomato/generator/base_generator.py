from __future__ import annotations

import abc
import logging
from typing import Dict, Iterable, Optional, Type

from tqdm.auto import tqdm

from tomato.core.utils.path_utils import PathUtils
from tomato.errors import TomatoError
from tomato.generator.visitors.view_visitor import ViewVisitor, walk
from tomato.model import GeneratedUnit, GeneratorOptions
from tomato.parser.services.template_load_service import TemplateLoadService

logger = logging.getLogger(__name__)


class TomatoGenerator(metaclass=abc.ABCMeta):
    """
    Abstract base class for the per-language view generators.

    A generator compiles every template file into a GeneratedUnit and knows
    the shared text that opens and closes the combined output file.
    """
    visitor_class: Type[ViewVisitor]

    def __init__(self, options: GeneratorOptions, loader: Optional[TemplateLoadService] = None):
        self.options = options
        self.loader = loader or TemplateLoadService()

    @abc.abstractmethod
    def emit_preamble(self) -> str:
        """Text written once before all generated views (e.g. imports)."""
        raise NotImplementedError

    @abc.abstractmethod
    def emit_postamble(self) -> str:
        """Text written once after all generated views."""
        raise NotImplementedError

    def generate_views(
            self,
            files: Iterable[str],
            force_debug_ids: bool = False,
            show_progress: bool = False,
    ) -> Dict[str, GeneratedUnit]:
        """
        Compiles every template file. The first failing file aborts the
        whole batch, so callers never see partial results.
        """
        files = list(files)
        iterator = files if not show_progress else tqdm(files, desc="Generating views", unit="view", leave=False)

        views: Dict[str, GeneratedUnit] = {}
        for file_name in iterator:
            views[file_name] = self.generate_view(file_name, force_debug_ids)
        return views

    def generate_view(self, file_name: str, force_debug_ids: bool = False) -> GeneratedUnit:
        template = self.loader.load(file_name)

        visitor = self.visitor_class(self.options, PathUtils.get_view_name(file_name), force_debug_ids)
        visitor.set_css(template.style_text)
        try:
            walk(template.root, visitor)
        except TomatoError as e:
            if e.path is None:
                e.path = file_name
            raise

        logger.debug("Generated %s from %s.", visitor.view_name, file_name)
        return visitor.assemble()
