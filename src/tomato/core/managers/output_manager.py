# src/tomato/core/managers/output_manager.py
import logging
from pathlib import Path
from typing import Dict, Tuple, Union

from tomato.core.utils.path_utils import STYLESHEET_SUFFIX, PathUtils
from tomato.generator.base_generator import TomatoGenerator
from tomato.model import GeneratedUnit

logger = logging.getLogger(__name__)


class OutputManager:
    """
    Combines the generated views into one code file and one stylesheet.
    The output is a few thousand lines at most, so it is built in memory
    and written in one go.
    """

    def __init__(self, stylesheet_suffix: str = STYLESHEET_SUFFIX):
        self.stylesheet_suffix = stylesheet_suffix

    @staticmethod
    def aggregate(views: Dict[str, GeneratedUnit], generator: TomatoGenerator) -> Tuple[str, str]:
        """Returns (code, stylesheet), ordered by source path."""
        view_text = [generator.emit_preamble()]
        css_text = []

        # Stable order based on file name, not on discovery order
        for key in sorted(views):
            unit = views[key]
            view_text.append(unit.view_code)
            view_text.append("\n\n")

            if unit.style_code:
                css_text.append(unit.style_code)
                css_text.append("\n\n")

        view_text.append(generator.emit_postamble())
        return "".join(view_text), "".join(css_text)

    def stylesheet_path(self, out_file: Union[str, Path]) -> Path:
        return PathUtils.get_stylesheet_path(out_file, self.stylesheet_suffix)

    def write(self, out_file: Union[str, Path], code: str, css: str) -> bool:
        """
        Writes the code file and its stylesheet when either of them changed.
        Unchanged files keep their modification times. Returns True if written.
        """
        code_path = Path(out_file)
        css_path = self.stylesheet_path(code_path)
        code_bytes = code.encode("utf-8")
        css_bytes = css.encode("utf-8")

        if not (self.content_differs(code_path, code_bytes) or self.content_differs(css_path, css_bytes)):
            logger.info("Generated views are up to date: %s", code_path)
            return False

        code_path.parent.mkdir(parents=True, exist_ok=True)
        css_path.write_bytes(css_bytes)
        code_path.write_bytes(code_bytes)
        logger.info("Wrote %s (%d bytes) and %s (%d bytes).",
                    code_path, len(code_bytes), css_path, len(css_bytes))
        return True

    @staticmethod
    def content_differs(path: Path, data: bytes) -> bool:
        """Compares by size first and only reads the file when sizes match."""
        if not path.is_file():
            return True
        if path.stat().st_size != len(data):
            return True
        return path.read_bytes() != data
