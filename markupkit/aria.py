"""ARIA attributes that carry a value."""

from __future__ import annotations

from typing import Any

from markupkit.nodes import Attribute, new_attribute


def aria_atomic(*args: Any) -> Attribute:
    """The ``aria-atomic`` attribute."""
    return new_attribute("aria-atomic", *args)


def aria_busy(*args: Any) -> Attribute:
    """The ``aria-busy`` attribute."""
    return new_attribute("aria-busy", *args)


def aria_checked(*args: Any) -> Attribute:
    """The ``aria-checked`` attribute."""
    return new_attribute("aria-checked", *args)


def aria_controls(*args: Any) -> Attribute:
    """The ``aria-controls`` attribute."""
    return new_attribute("aria-controls", *args)


def aria_describedby(*args: Any) -> Attribute:
    """The ``aria-describedby`` attribute."""
    return new_attribute("aria-describedby", *args)


def aria_disabled(*args: Any) -> Attribute:
    """The ``aria-disabled`` attribute."""
    return new_attribute("aria-disabled", *args)


def aria_expanded(*args: Any) -> Attribute:
    """The ``aria-expanded`` attribute."""
    return new_attribute("aria-expanded", *args)


def aria_flowto(*args: Any) -> Attribute:
    """The ``aria-flowto`` attribute."""
    return new_attribute("aria-flowto", *args)


def aria_hidden(*args: Any) -> Attribute:
    """The ``aria-hidden`` attribute."""
    return new_attribute("aria-hidden", *args)


def aria_invalid(*args: Any) -> Attribute:
    """The ``aria-invalid`` attribute."""
    return new_attribute("aria-invalid", *args)


def aria_label(*args: Any) -> Attribute:
    """The ``aria-label`` attribute."""
    return new_attribute("aria-label", *args)


def aria_labelledby(*args: Any) -> Attribute:
    """The ``aria-labelledby`` attribute."""
    return new_attribute("aria-labelledby", *args)


def aria_live(*args: Any) -> Attribute:
    """The ``aria-live`` attribute."""
    return new_attribute("aria-live", *args)


def aria_owns(*args: Any) -> Attribute:
    """The ``aria-owns`` attribute."""
    return new_attribute("aria-owns", *args)


def aria_placeholder(*args: Any) -> Attribute:
    """The ``aria-placeholder`` attribute."""
    return new_attribute("aria-placeholder", *args)


def aria_posinset(*args: Any) -> Attribute:
    """The ``aria-posinset`` attribute."""
    return new_attribute("aria-posinset", *args)


def aria_pressed(*args: Any) -> Attribute:
    """The ``aria-pressed`` attribute."""
    return new_attribute("aria-pressed", *args)


def aria_readonly(*args: Any) -> Attribute:
    """The ``aria-readonly`` attribute."""
    return new_attribute("aria-readonly", *args)


def aria_relevant(*args: Any) -> Attribute:
    """The ``aria-relevant`` attribute."""
    return new_attribute("aria-relevant", *args)


def aria_required(*args: Any) -> Attribute:
    """The ``aria-required`` attribute."""
    return new_attribute("aria-required", *args)


def aria_selected(*args: Any) -> Attribute:
    """The ``aria-selected`` attribute."""
    return new_attribute("aria-selected", *args)


def aria_setsize(*args: Any) -> Attribute:
    """The ``aria-setsize`` attribute."""
    return new_attribute("aria-setsize", *args)


def aria_valuemax(*args: Any) -> Attribute:
    """The ``aria-valuemax`` attribute."""
    return new_attribute("aria-valuemax", *args)


def aria_valuemin(*args: Any) -> Attribute:
    """The ``aria-valuemin`` attribute."""
    return new_attribute("aria-valuemin", *args)


def aria_valuenow(*args: Any) -> Attribute:
    """The ``aria-valuenow`` attribute."""
    return new_attribute("aria-valuenow", *args)


def aria_valuetext(*args: Any) -> Attribute:
    """The ``aria-valuetext`` attribute."""
    return new_attribute("aria-valuetext", *args)