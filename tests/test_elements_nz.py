import pytest

from markupkit import elements_nz as el
from markupkit.attributes import class_, id_
from markupkit.nodes import NodeType, text

NORMAL = [
    (el.nav, "nav"),
    (el.noscript, "noscript"),
    (el.object_, "object"),
    (el.ol, "ol"),
    (el.optgroup, "optgroup"),
    (el.option, "option"),
    (el.p, "p"),
    (el.para, "p"),
    (el.picture, "picture"),
    (el.pre, "pre"),
    (el.progress, "progress"),
    (el.q, "q"),
    (el.s, "s"),
    (el.samp, "samp"),
    (el.script, "script"),
    (el.section, "section"),
    (el.select, "select"),
    (el.slot, "slot"),
    (el.small, "small"),
    (el.span, "span"),
    (el.strong, "strong"),
    (el.style_element, "style"),
    (el.sub, "sub"),
    (el.sup, "sup"),
    (el.summary, "summary"),
    (el.table, "table"),
    (el.tbody, "tbody"),
    (el.td, "td"),
    (el.template, "template"),
    (el.textarea, "textarea"),
    (el.tfoot, "tfoot"),
    (el.th, "th"),
    (el.thead, "thead"),
    (el.time, "time"),
    (el.title_element, "title"),
    (el.tr, "tr"),
    (el.ul, "ul"),
    (el.u, "u"),
    (el.var, "var"),
    (el.video, "video"),
    (el.output, "output"),
    (el.rp, "rp"),
    (el.rt, "rt"),
    (el.ruby, "ruby"),
    (el.search, "search"),
    (el.track, "track"),
]

VOID = [
    (el.param, "param"),
    (el.source, "source"),
    (el.wbr, "wbr"),
]


@pytest.mark.parametrize("factory, tag", NORMAL)
def test_element(factory, tag):
    node = factory(id_(1), text("foo"))
    assert node.node_type == NodeType.ELEMENT
    assert node.name == tag
    assert node.to_html() == f'<{tag} id="1">foo</{tag}>'


@pytest.mark.parametrize("factory, tag", VOID)
def test_void_element(factory, tag):
    node = factory(id_(1), text("foo"))
    assert node.node_type == NodeType.ELEMENT
    assert node.name == tag
    assert node.to_html() == f'<{tag} id="1">'


def test_nested_elements():
    node = el.ul(el.span("a"), el.span("b"))
    assert node.to_html() == "<ul><span>a</span><span>b</span></ul>"


def test_class_attributes_merge():
    node = el.span(class_("foo"), class_("bar"))
    assert node.to_html() == '<span class="foo bar"></span>'


def test_text_is_escaped():
    node = el.p("a < b & c")
    assert node.to_html() == "<p>a &lt; b &amp; c</p>"


def test_empty_element():
    assert el.p().to_html() == "<p></p>"