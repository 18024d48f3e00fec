# src/tomato/core/utils/path_utils.py
import logging
import re
from pathlib import Path
from typing import List, Union

from tomato.errors import LoadError

logger = logging.getLogger(__name__)

TEMPLATE_FILE_EXTENSION = ".htmto"
STYLESHEET_SUFFIX = ".scss"
VIEW_NAME_SUFFIX = "View"


class PathUtils:
    """
    A central utility for template discovery and for the names derived
    from template paths.
    """

    # --- Package paths ---

    @staticmethod
    def get_package_root() -> Path:
        """Returns the directory of the installed 'tomato' package (home of settings.json)."""
        return Path(__file__).resolve().parent.parent.parent

    # --- Template discovery ---

    @staticmethod
    def collect_template_files(root: Union[str, Path]) -> List[str]:
        """
        Recursively lists every template file below `root`.
        The result is sorted so discovery order never leaks into the output.
        """
        root_path = Path(root)
        if not root_path.is_dir():
            raise LoadError("Template input directory does not exist.", path=str(root_path))

        files = sorted(
            str(path) for path in root_path.rglob(f"*{TEMPLATE_FILE_EXTENSION}")
            if path.is_file()
        )
        logger.debug("Found %d template files under %s.", len(files), root_path)
        return files

    # --- Output paths ---

    @staticmethod
    def get_stylesheet_path(out_file: Union[str, Path], suffix: str = STYLESHEET_SUFFIX) -> Path:
        """
        Returns the stylesheet written next to the generated code file.
        (e.g., gen/views.ts -> gen/views.scss)
        """
        return Path(out_file).with_suffix(suffix)

    # --- Naming ---

    @staticmethod
    def get_view_name(file_name: str) -> str:
        """
        Maps a template file name (or a <tomato src> value) to the name of its
        generated class: 'widgets/button.htmto' -> 'ButtonView'.
        """
        base_name = re.split(r"[\\/]", file_name)[-1]
        if base_name.endswith(TEMPLATE_FILE_EXTENSION):
            base_name = base_name[:-len(TEMPLATE_FILE_EXTENSION)]
        view_name = base_name + VIEW_NAME_SUFFIX
        return view_name[:1].upper() + view_name[1:]

    @staticmethod
    def get_debug_id(view_name: str) -> str:
        """Strips the class suffix again: 'ButtonView' -> 'Button'."""
        if view_name.endswith(VIEW_NAME_SUFFIX):
            return view_name[:-len(VIEW_NAME_SUFFIX)]
        return view_name
