from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Tuple

from bs4.element import NavigableString, PageElement, PreformattedString, Tag

from tomato.model import GeneratedUnit, GeneratorOptions

logger = logging.getLogger(__name__)


@dataclass
class TraversalState:
    """Everything one file's compilation mutates while the tree is walked."""
    output: List[str] = field(default_factory=list)
    dom_construction: List[str] = field(default_factory=list)
    ignore_subtree: bool = False
    append_stack: List[PageElement] = field(default_factory=list)
    refs: List[Tuple[str, str]] = field(default_factory=list)

    def append_closes(self, node: PageElement) -> bool:
        """True when `node` is the element whose append call is innermost open."""
        return bool(self.append_stack) and self.append_stack[-1] is node


def is_text(node: PageElement) -> bool:
    """Plain text nodes only; comments, doctypes and CDATA are never emitted."""
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


def walk(root: Tag, visitor: "ViewVisitor") -> None:
    """
    Depth first traversal: head() going down, tail() popping back up.
    Iterative, with an explicit stack of (node, depth, leaving) entries.
    """
    stack: List[Tuple[PageElement, int, bool]] = [(root, 0, False)]
    while stack:
        node, depth, leaving = stack.pop()
        if leaving:
            visitor.tail(node, depth)
            continue

        visitor.head(node, depth)
        stack.append((node, depth, True))
        if isinstance(node, Tag):
            for child in reversed(node.contents):
                stack.append((child, depth + 1, False))


class ViewVisitor(ABC):
    """
    Builds the source of one generated view class while a template is walked.
    Subclasses provide the language specific emitting.
    """

    def __init__(self, options: GeneratorOptions, view_name: str, force_debug_ids: bool = False):
        self.options = options
        self.view_name = view_name
        self.force_debug_ids = force_debug_ids
        self.state = TraversalState()
        self.css_text = ""

    # Visitor to build up the construction code
    @abstractmethod
    def head(self, node: PageElement, depth: int) -> None:
        ...

    @abstractmethod
    def tail(self, node: PageElement, depth: int) -> None:
        ...

    # View emitting
    @abstractmethod
    def emit_preamble(self) -> None:
        ...

    @abstractmethod
    def emit_element_refs(self) -> None:
        ...

    @abstractmethod
    def emit_dom_construction(self) -> None:
        ...

    @abstractmethod
    def emit_postamble(self) -> None:
        ...

    def set_css(self, css_text: str) -> None:
        self.css_text = css_text

    def get_view(self) -> str:
        return "".join(self.state.output)

    def add_ref(self, field_name: str, type_name: str) -> None:
        if any(name == field_name for name, _ in self.state.refs):
            logger.warning("%s declares field '%s' more than once.", self.view_name, field_name)
        self.state.refs.append((field_name, type_name))

    def assemble(self) -> GeneratedUnit:
        """Wraps the construction code into the complete class."""
        self.emit_preamble()
        self.emit_element_refs()
        self.emit_dom_construction()
        self.emit_postamble()
        return GeneratedUnit(view_code=self.get_view(), style_code=self.css_text)
