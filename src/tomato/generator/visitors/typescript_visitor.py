from __future__ import annotations

from bs4.element import PageElement, Tag

from tomato.core.utils.path_utils import PathUtils
from tomato.errors import TemplateReferenceError
from tomato.generator.services.attribute_service import (
    DEBUG_ID_ATTR,
    FIELD_REF_ATTR,
    SRC_ATTR,
    escape_text,
    get_attr,
    has_attr,
    is_nested_template,
    transfer_attributes,
)
from tomato.generator.visitors.view_visitor import ViewVisitor, is_text

NBSP = "\u00a0"


def indent(depth: int) -> str:
    return "\n    " + "  " * depth


def is_blank(text: str) -> bool:
    """Whitespace-only text is dropped, but a non-breaking space is content."""
    return all(ch.isspace() and ch != NBSP for ch in text)


def set_attr_call(key: str, escaped_value: str) -> str:
    return f".setAttr('{key}', '{escaped_value}')"


class TypeScriptVisitor(ViewVisitor):
    """Emits a TypeScript class whose constructor rebuilds the template's DOM."""

    # DF going down the stack.
    def head(self, node: PageElement, depth: int) -> None:
        state = self.state
        if state.ignore_subtree:
            return

        out = state.dom_construction
        if isinstance(node, Tag):
            tag_name = node.name.lower()
            out.append(indent(depth))

            if depth == 0:
                # The view's own element goes to the base class constructor.
                out.append(f"super(doc.createElement('{tag_name}'));")
                out.append(indent(depth))
                out.append("this")

                if self.force_debug_ids and not has_attr(node, DEBUG_ID_ATTR):
                    debug_id = PathUtils.get_debug_id(self.view_name)
                    out.append(set_attr_call(DEBUG_ID_ATTR, escape_text(debug_id)))
            else:
                # A sub-element. Lets start a call to append.
                state.append_stack.append(node)
                out.append(".append(")

                field_name = get_attr(node, FIELD_REF_ATTR)
                if field_name:
                    out.append(f"this.{field_name} = ")

                if is_nested_template(node):
                    # Nested templates can't have children.
                    state.ignore_subtree = True

                    src = get_attr(node, SRC_ATTR)
                    if not src:
                        raise TemplateReferenceError("Tomato element with no 'src' attribute!")
                    view_name = PathUtils.get_view_name(src)
                    out.append(f"<{view_name}>new {view_name}(doc)")
                    if field_name:
                        self.add_ref(field_name, view_name)
                else:
                    out.append(f"{self.options.view_factory}('{tag_name}', doc)")
                    if field_name:
                        self.add_ref(field_name, self.options.view_base_class)

            # For all elements, we transfer any attributes set in the template
            for key, value in transfer_attributes(node):
                out.append(set_attr_call(key, value))

        elif is_text(node):
            text = str(node)
            if not is_blank(text):
                literal = escape_text(text.replace("\n", ""))
                out.append(f".appendText('{literal}')")

    # DF popping back up the stack.
    def tail(self, node: PageElement, depth: int) -> None:
        state = self.state
        if state.append_closes(node):
            state.append_stack.pop()
            state.dom_construction.append(")")
            state.ignore_subtree = False

    def emit_preamble(self) -> None:
        self.state.output.append(
            f"\nexport class {self.view_name} extends {self.options.view_base_class} {{"
        )

    def emit_element_refs(self) -> None:
        refs = self.state.refs
        for field_name, type_name in refs:
            self.state.output.append(f"\n  {field_name}: {type_name};")
        if refs:
            self.state.output.append("\n")

    def emit_dom_construction(self) -> None:
        output = self.state.output
        output.append("\n  constructor(doc: Document = document) {")
        output.append("".join(self.state.dom_construction))
        output.append(";\n  }")

    def emit_postamble(self) -> None:
        self.state.output.append("\n}\n")
