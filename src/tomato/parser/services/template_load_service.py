from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Tuple, Union

from bs4 import BeautifulSoup, Tag

from tomato.errors import LoadError
from tomato.model import LoadedTemplate

logger = logging.getLogger(__name__)

STYLE_OPEN = "<style>"
STYLE_CLOSE = "</style>"

# Marks a wrapper element that only exists to get its child past the HTML
# parser (e.g. a <tr> root has to be written inside a <table>).
STRIP_ME_ATTR = "_stripme"


class TemplateLoadService:
    """
    Reads a template file and narrows the parsed document down to the single
    element the view is generated from.
    Note: This is a stateless service; the generator owns the traversal.
    """

    def __init__(self, features: str = "html5lib"):
        # html5lib builds the same normalized HTML5 document a browser does
        # (implied <html>/<body>, <tbody> inside tables).
        self.features = features

    def load(self, path: Union[str, Path]) -> LoadedTemplate:
        """Loads one template file; raises LoadError when no root element can be found."""
        file_name = str(path)
        try:
            contents = Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise LoadError(f"Could not read template: {e}", path=file_name) from e

        markup, style_text = self.split_stylesheet(contents)
        soup = self.parse(markup, file_name)

        root = self.strip_wrapper(self.find_root(soup))
        if root is None:
            raise LoadError("Template cannot be empty.", path=file_name)

        logger.debug("Loaded %s with root <%s>.", file_name, root.name)
        return LoadedTemplate(path=file_name, root=root, style_text=style_text)

    @staticmethod
    def split_stylesheet(contents: str) -> Tuple[str, str]:
        """
        Slices the trailing <style> block off the raw text.
        Only the last open/close pair counts; everything from the opening
        delimiter on is removed from the markup.
        """
        start = contents.rfind(STYLE_OPEN)
        end = contents.rfind(STYLE_CLOSE)

        if start < 0 or end < 0 or end < start + len(STYLE_OPEN):
            return contents, ""

        return contents[:start], contents[start + len(STYLE_OPEN):end]

    def parse(self, markup: str, file_name: str = "") -> BeautifulSoup:
        try:
            return BeautifulSoup(markup, self.features, multi_valued_attributes=None)
        except Exception as e:
            raise LoadError(f"Could not parse template markup: {e}", path=file_name or None) from e

    @staticmethod
    def find_root(soup: BeautifulSoup) -> Optional[Tag]:
        """Returns the first element inside <body>, where the parser puts the template."""
        body = soup.body
        if body is None:
            return None
        return first_element_child(body, default=None)

    @staticmethod
    def strip_wrapper(root: Optional[Tag]) -> Optional[Tag]:
        """
        Removes a wrapper marked with _stripme: <table _stripme><tr> becomes <tr>.
        The parser always puts rows into a <tbody>, so that is unwrapped too.
        """
        if root is None or not root.has_attr(STRIP_ME_ATTR):
            return root

        child = first_element_child(root, default=root)
        if child.name == "tbody":
            child = first_element_child(child, default=child)
        return child


def first_element_child(node: Tag, default: Optional[Tag]) -> Optional[Tag]:
    for child in node.children:
        if isinstance(child, Tag):
            return child
    return default
