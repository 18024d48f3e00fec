from __future__ import annotations

from typing import List, Optional, Tuple

from bs4 import Tag

# Special attributes on tomato template elements. The HTML parser lowercases
# attribute names, so authors may write _ignoreContent or _stripMe.
FIELD_REF_ATTR = "_ref"
MOCK_ATTR = "_ignorecontent"
TUNNELLED_ID_ATTR = "_id"
ID_ATTR = "id"
DEBUG_ID_ATTR = "debug-id"
SRC_ATTR = "src"

# A <tomato src="..."> element instantiates another generated view.
NESTED_TEMPLATE_TAG = "tomato"

# Attributes never forwarded into the generated view.
BLOCKED_ATTRS = frozenset({FIELD_REF_ATTR, MOCK_ATTR})


def escape_text(text: str) -> str:
    """Escapes text for use inside a single-quoted string literal."""
    return text.replace("'", "\\'")


def get_attr(node: Tag, attr: str) -> str:
    """Returns the attribute value, or '' when it is missing."""
    value = node.attrs.get(attr)
    return value if isinstance(value, str) else ""


def has_attr(node: Tag, attr: str) -> bool:
    return get_attr(node, attr) != ""


def is_nested_template(node: Tag) -> bool:
    return (node.name or "").lower() == NESTED_TEMPLATE_TAG


def qualified_key(key: str) -> str:
    """Prefixes namespaced attributes (xlink:href) with their namespace."""
    prefix: Optional[str] = getattr(key, "prefix", None)
    name: Optional[str] = getattr(key, "name", None)
    if prefix and name:
        return f"{prefix}:{name}"
    return str(key)


def transfer_attributes(node: Tag) -> List[Tuple[str, str]]:
    """
    Picks the attributes of a template element that end up as setAttr calls,
    in the order they were written.

    - _ref and _ignorecontent are compiler markers and are dropped.
    - src on a <tomato> element only names the nested template.
    - _id is forwarded as id.
    """
    nested = is_nested_template(node)
    out: List[Tuple[str, str]] = []

    for key, value in node.attrs.items():
        if key in BLOCKED_ATTRS or (nested and key == SRC_ATTR):
            continue

        name = ID_ATTR if key == TUNNELLED_ID_ATTR else qualified_key(key)
        if value is None:
            value = ""
        elif not isinstance(value, str):
            value = " ".join(value)
        out.append((name, escape_text(value)))

    return out
