import pytest

from markupkit import aria
from markupkit.nodes import DynamicValueKey, NodeType, new_element

CASES = [
    (aria.aria_atomic, "aria-atomic"),
    (aria.aria_busy, "aria-busy"),
    (aria.aria_checked, "aria-checked"),
    (aria.aria_controls, "aria-controls"),
    (aria.aria_describedby, "aria-describedby"),
    (aria.aria_disabled, "aria-disabled"),
    (aria.aria_expanded, "aria-expanded"),
    (aria.aria_flowto, "aria-flowto"),
    (aria.aria_hidden, "aria-hidden"),
    (aria.aria_invalid, "aria-invalid"),
    (aria.aria_label, "aria-label"),
    (aria.aria_labelledby, "aria-labelledby"),
    (aria.aria_live, "aria-live"),
    (aria.aria_owns, "aria-owns"),
    (aria.aria_placeholder, "aria-placeholder"),
    (aria.aria_posinset, "aria-posinset"),
    (aria.aria_pressed, "aria-pressed"),
    (aria.aria_readonly, "aria-readonly"),
    (aria.aria_relevant, "aria-relevant"),
    (aria.aria_required, "aria-required"),
    (aria.aria_selected, "aria-selected"),
    (aria.aria_setsize, "aria-setsize"),
    (aria.aria_valuemax, "aria-valuemax"),
    (aria.aria_valuemin, "aria-valuemin"),
    (aria.aria_valuenow, "aria-valuenow"),
    (aria.aria_valuetext, "aria-valuetext"),
]


@pytest.mark.parametrize("factory, expected_name", CASES)
def test_aria_attribute(factory, expected_name):
    attr = factory("foo")
    assert attr.node_type == NodeType.ATTRIBUTE
    assert attr.name == expected_name
    assert attr.to_html() == f' {expected_name}="foo"'
    wrapped = new_element("x", attr)
    assert wrapped.to_html() == f'<x {expected_name}="foo"></x>'


def test_boolean_value_rendered_as_true():
    assert aria.aria_hidden(True).to_html() == ' aria-hidden="true"'


def test_number_value():
    assert aria.aria_valuenow(42).to_html() == ' aria-valuenow="42"'


def test_value_is_escaped():
    assert aria.aria_label('a "b" & c').to_html() == (
        ' aria-label="a &quot;b&quot; &amp; c"'
    )


def test_dynamic_value_from_data():
    attr = aria.aria_label(DynamicValueKey("label"))
    assert attr.to_html({"label": "Close"}) == ' aria-label="Close"'


def test_on_element():
    el = new_element("button", aria.aria_pressed("false"), "Go")
    assert el.to_html() == '<button aria-pressed="false">Go</button>'