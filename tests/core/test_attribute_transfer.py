# tests/core/test_attribute_transfer.py
import pytest
from bs4.element import NamespacedAttribute

from tomato.generator.services.attribute_service import (
    escape_text,
    get_attr,
    has_attr,
    qualified_key,
    transfer_attributes,
)
from tomato.parser.services.template_load_service import TemplateLoadService


@pytest.fixture
def element():
    """Parses markup and returns the first element inside <body>."""
    service = TemplateLoadService()

    def _element(markup):
        return service.find_root(service.parse(markup))
    return _element


def test_attributes_keep_template_order(element):
    node = element('<div data-b="1" data-a="2" class="x y"></div>')
    assert transfer_attributes(node) == [("data-b", "1"), ("data-a", "2"), ("class", "x y")]


def test_compiler_markers_are_blocked(element):
    node = element('<div _ref="panel" _ignoreContent class="a"></div>')
    assert transfer_attributes(node) == [("class", "a")]


def test_tunnelled_id_becomes_id(element):
    node = element('<div _id="main" title="t"></div>')
    assert transfer_attributes(node) == [("id", "main"), ("title", "t")]


def test_src_dropped_only_on_nested_templates(element):
    nested = element('<tomato src="button.htmto" class="c"></tomato>')
    assert transfer_attributes(nested) == [("class", "c")]

    image = element('<img src="logo.png" alt="">')
    assert transfer_attributes(image) == [("src", "logo.png"), ("alt", "")]


def test_values_are_escaped_for_single_quotes(element):
    node = element("<div title=\"it's\"></div>")
    assert transfer_attributes(node) == [("title", "it\\'s")]


def test_namespaced_keys_are_prefixed(element):
    svg = element('<svg><use xlink:href="#icon"></use></svg>')
    use = svg.find("use")
    assert transfer_attributes(use) == [("xlink:href", "#icon")]


def test_qualified_key():
    assert qualified_key(NamespacedAttribute("xlink", "href", "http://www.w3.org/1999/xlink")) == "xlink:href"
    assert qualified_key("class") == "class"


def test_get_attr_treats_empty_as_missing(element):
    node = element('<div _ref="" debug-id="x"></div>')
    assert get_attr(node, "_ref") == ""
    assert not has_attr(node, "_ref")
    assert has_attr(node, "debug-id")
    assert get_attr(node, "missing") == ""


def test_escape_text():
    assert escape_text("don't 'quote'") == "don\\'t \\'quote\\'"
    assert escape_text("plain") == "plain"
