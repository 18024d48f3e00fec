from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Any, Dict, Optional, Union

from tomato.core.managers.output_manager import OutputManager
from tomato.core.utils.path_utils import PathUtils
from tomato.generator.registry import GeneratorRegistry
from tomato.model import GeneratorOptions, Language

logger = logging.getLogger(__name__)


class GenerateController:
    """
    Orchestrates one compiler run: discover templates, generate every view,
    aggregate and write the output pair once at the end.
    Nothing is written unless every template compiled.
    """

    def __init__(self, output_manager: Optional[OutputManager] = None) -> None:
        self.output_manager = output_manager or OutputManager()

    def generate(
            self,
            *,
            view_dir: Union[str, Path],
            out_file: Union[str, Path],
            language: Language,
            options: GeneratorOptions,
            force_debug_ids: bool = False,
            show_progress: bool = True,
    ) -> Dict[str, Any]:
        """Runs the compiler and returns a dictionary of run statistics."""
        start = time.perf_counter()

        files = PathUtils.collect_template_files(view_dir)
        generator = GeneratorRegistry.make_generator(language, options)
        logger.info("Generating %d views from %s.", len(files), view_dir)

        views = generator.generate_views(files, force_debug_ids=force_debug_ids, show_progress=show_progress)

        code, css = self.output_manager.aggregate(views, generator)
        written = self.output_manager.write(out_file, code, css)
        dur = time.perf_counter() - start

        return {
            "files_total": len(files),
            "views_generated": len(views),
            "stylesheets": sum(1 for unit in views.values() if unit.style_code),
            "written": written,
            "output_file": str(out_file),
            "stylesheet_file": str(self.output_manager.stylesheet_path(out_file)),
            "duration_s": round(dur, 3),
        }
