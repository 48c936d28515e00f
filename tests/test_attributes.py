import pytest

from markupkit import attributes as at
from markupkit.nodes import DynamicValueKey, NodeType, new_element

SIMPLE = [
    (at.crossorigin, "crossorigin"),
    (at.datetime, "datetime"),
    (at.download, "download"),
    (at.draggable, "draggable"),
    (at.accept, "accept"),
    (at.action, "action"),
    (at.alt, "alt"),
    (at.as_, "as"),
    (at.autocomplete, "autocomplete"),
    (at.charset, "charset"),
    (at.cite_attr, "cite"),
    (at.cols, "cols"),
    (at.colspan, "colspan"),
    (at.content, "content"),
    (at.dir_, "dir"),
    (at.enctype, "enctype"),
    (at.for_, "for"),
    (at.form_attr, "form"),
    (at.height, "height"),
    (at.href, "href"),
    (at.id_, "id"),
    (at.integrity, "integrity"),
    (at.lang, "lang"),
    (at.list_, "list"),
    (at.loading, "loading"),
    (at.max_, "max"),
    (at.maxlength, "maxlength"),
    (at.method, "method"),
    (at.min_, "min"),
    (at.minlength, "minlength"),
    (at.name, "name"),
    (at.pattern, "pattern"),
    (at.placeholder, "placeholder"),
    (at.popover, "popover"),
    (at.popovertarget, "popovertarget"),
    (at.popovertargetaction, "popovertargetaction"),
    (at.poster, "poster"),
    (at.preload, "preload"),
    (at.referrerpolicy, "referrerpolicy"),
    (at.rel, "rel"),
    (at.role, "role"),
    (at.rows, "rows"),
    (at.rowspan, "rowspan"),
    (at.slot_attr, "slot"),
    (at.src, "src"),
    (at.srcset, "srcset"),
    (at.step, "step"),
    (at.tabindex, "tabindex"),
    (at.target, "target"),
    (at.title, "title"),
    (at.type_, "type"),
    (at.value, "value"),
    (at.width, "width"),
    (at.accesskey, "accesskey"),
    (at.autocapitalize, "autocapitalize"),
    (at.autocorrect, "autocorrect"),
    (at.enterkeyhint, "enterkeyhint"),
    (at.exportparts, "exportparts"),
    (at.inputmode, "inputmode"),
    (at.is_, "is"),
    (at.itemid, "itemid"),
    (at.itemprop, "itemprop"),
    (at.itemref, "itemref"),
    (at.itemtype, "itemtype"),
    (at.nonce, "nonce"),
    (at.part, "part"),
    (at.writingsuggestions, "writingsuggestions"),
]


@pytest.mark.parametrize("factory, expected_name", SIMPLE)
def test_valued_attribute(factory, expected_name):
    attr = factory("foo")
    assert attr.node_type is NodeType.ATTRIBUTE
    assert attr.name == expected_name
    assert attr.to_html() == f' {expected_name}="foo"'
    wrapped = new_element("x", attr)
    assert wrapped.to_html() == f'<x {expected_name}="foo"></x>'


def test_aria():
    attr = at.aria("foo", "foo")
    assert attr.node_type is NodeType.ATTRIBUTE
    assert attr.name == "aria-foo"
    assert attr.to_html() == ' aria-foo="foo"'


def test_data():
    attr = at.data("foo", "foo")
    assert attr.node_type is NodeType.ATTRIBUTE
    assert attr.name == "data-foo"
    assert attr.to_html() == ' data-foo="foo"'


def test_class():
    attr = at.class_("foo", "bar")
    assert attr.node_type is NodeType.ATTRIBUTE
    assert attr.name == "class"
    assert attr.to_html() == ' class="foo bar"'


def test_style():
    attr = at.style("foo", "bar")
    assert attr.node_type is NodeType.ATTRIBUTE
    assert attr.name == "style"
    assert attr.to_html() == ' style="foo; bar"'


def test_contenteditable_bool():
    attr = at.contenteditable(True)
    assert attr.name == "contenteditable"
    assert attr.to_html() == ' contenteditable="true"'


def test_id_integer():
    assert at.id_(1).to_html() == ' id="1"'


def test_plain_values_concatenate():
    assert at.title("foo", "bar").to_html() == ' title="foobar"'


def test_value_is_escaped():
    assert at.title('a"b<c').to_html() == ' title="a&quot;b&lt;c"'


def test_dynamic_key_value():
    attr = at.href(DynamicValueKey("url"))
    assert attr.to_html({"url": "/home"}) == ' href="/home"'


def test_dynamic_callable_value():
    attr = at.value(lambda ctx: "computed")
    assert attr.to_html() == ' value="computed"'


def test_class_attributes_merge_on_element():
    el = new_element("div", at.class_("a"), at.id_("x"), at.class_("b", "c"))
    assert el.to_html() == '<div class="a b c" id="x"></div>'


def test_style_attributes_merge_on_element():
    el = new_element("span", at.style("color: red"), at.style("margin: 0"))
    assert el.to_html() == '<span style="color: red; margin: 0"></span>'


def test_plain_attributes_do_not_merge():
    el = new_element("p", at.title("a"), at.title("b"))
    assert el.to_html() == '<p title="a" title="b"></p>'