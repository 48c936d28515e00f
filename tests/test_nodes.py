import io

import pytest

from markupkit.nodes import (
    Attribute,
    Context,
    DynamicValueKey,
    Element,
    NodeType,
    comment,
    doctype,
    new_attribute,
    new_boolean_attribute,
    new_delimited_attribute,
    new_element,
    new_void_element,
    pi,
    render,
    text,
)


class _FailingWriter:
    def write(self, data):
        raise OSError("error")


def test_text():
    assert render(text("foo")) == "foo"


def test_comment():
    assert render(comment("foo")) == "<!--foo-->"


def test_pi():
    assert render(pi("foo", "bar")) == "<!foo bar>\n"


def test_text_dynamic():
    def dn(ctx):
        return b"bar"

    def dn2(ctx):
        return b"baz"

    node = text(DynamicValueKey("foo"), " ", dn, " ", dn2)
    assert render(node, {"foo": "foo value"}) == "foo value bar baz"


def test_render_via_context():
    buffer = io.StringIO()
    text("foo").render(Context(writer=buffer))
    assert buffer.getvalue() == "foo"


def test_dynamic_key_missing_renders_nothing():
    assert render(text("a", DynamicValueKey("missing"), "b")) == "ab"


def test_doctype():
    node = doctype()
    assert node.node_type is NodeType.DOCTYPE
    assert render(node) == "<!DOCTYPE html>\n"


def test_text_is_escaped():
    assert render(text("<a & b>")) == "&lt;a &amp; b&gt;"


def test_attribute_value_formats():
    assert render(new_attribute("id", 1)) == ' id="1"'
    assert render(new_attribute("x", True)) == ' x="true"'
    assert render(new_attribute("x", "a", "b")) == ' x="ab"'


def test_attribute_value_escaped():
    assert render(new_attribute("title", 'say "hi"')) == ' title="say &quot;hi&quot;"'


def test_boolean_attribute():
    attr = new_boolean_attribute("hidden")
    assert attr.node_type is NodeType.ATTRIBUTE
    assert attr.name == "hidden"
    assert render(attr) == " hidden"


def test_delimited_attribute():
    assert render(new_delimited_attribute("class", " ", "foo", "bar")) == ' class="foo bar"'


def test_element_with_attribute_and_text():
    el = new_element("div", new_attribute("id", 1), text("foo"))
    assert el.node_type is NodeType.ELEMENT
    assert el.name == "div"
    assert render(el) == '<div id="1">foo</div>'


def test_void_element_ignores_children():
    el = new_void_element("br", new_attribute("id", 1), text("foo"))
    assert render(el) == '<br id="1">'


def test_element_merges_delimited_attributes():
    el = new_element(
        "p",
        new_delimited_attribute("class", " ", "a"),
        new_attribute("id", "x"),
        new_delimited_attribute("class", " ", "b", "c"),
    )
    assert render(el) == '<p class="a b c" id="x"></p>'


def test_merge_does_not_change_original():
    first = new_delimited_attribute("style", "; ", "a")
    new_element("p", first, new_delimited_attribute("style", "; ", "b"))
    assert render(first) == ' style="a"'


def test_element_flattens_and_skips_none():
    el = new_element("ul", None, [new_element("li", "x"), (new_element("li", "y"),)])
    assert render(el) == "<ul><li>x</li><li>y</li></ul>"


def test_element_plain_values_become_text():
    assert render(new_element("b", "1 < 2")) == "<b>1 &lt; 2</b>"


def test_dynamic_attribute_value():
    el = new_element("a", new_attribute("href", DynamicValueKey("url")))
    assert el.to_html({"url": "/home"}) == '<a href="/home"></a>'


def test_writer_error_propagates():
    with pytest.raises(OSError):
        new_element("p", "x").render(Context(writer=_FailingWriter()))


def test_attribute_class_direct():
    attr = Attribute("data-x", ("1", "2"), delimiter=",")
    assert render(attr) == ' data-x="1,2"'
    assert render(Element("span", attr)) == '<span data-x="1,2"></span>'