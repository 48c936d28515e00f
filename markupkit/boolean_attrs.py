"""Boolean HTML attributes, rendered by name alone."""

from __future__ import annotations

from markupkit.nodes import Attribute, new_boolean_attribute


def async_() -> Attribute:
    """The ``async`` attribute of ``<script>``."""
    return new_boolean_attribute("async")


def autofocus() -> Attribute:
    """The global ``autofocus`` attribute."""
    return new_boolean_attribute("autofocus")


def autoplay() -> Attribute:
    """The ``autoplay`` attribute of ``<audio>`` and ``<video>``."""
    return new_boolean_attribute("autoplay")


def checked() -> Attribute:
    """The ``checked`` attribute of ``<input>``."""
    return new_boolean_attribute("checked")


def controls() -> Attribute:
    """The ``controls`` attribute of ``<audio>`` and ``<video>``."""
    return new_boolean_attribute("controls")


def defer() -> Attribute:
    """The ``defer`` attribute of ``<script>``."""
    return new_boolean_attribute("defer")


def disabled() -> Attribute:
    """The ``disabled`` attribute of form controls."""
    return new_boolean_attribute("disabled")


def loop() -> Attribute:
    """The ``loop`` attribute of ``<audio>`` and ``<video>``."""
    return new_boolean_attribute("loop")


def multiple() -> Attribute:
    """The ``multiple`` attribute of ``<input>`` and ``<select>``."""
    return new_boolean_attribute("multiple")


def muted() -> Attribute:
    """The ``muted`` attribute of ``<audio>`` and ``<video>``."""
    return new_boolean_attribute("muted")


def playsinline() -> Attribute:
    """The ``playsinline`` attribute of ``<video>``."""
    return new_boolean_attribute("playsinline")


def readonly() -> Attribute:
    """The ``readonly`` attribute of ``<input>`` and ``<textarea>``."""
    return new_boolean_attribute("readonly")


def required() -> Attribute:
    """The ``required`` attribute of form controls."""
    return new_boolean_attribute("required")


def selected() -> Attribute:
    """The ``selected`` attribute of ``<option>``."""
    return new_boolean_attribute("selected")


def novalidate() -> Attribute:
    """The ``novalidate`` attribute of ``<form>``."""
    return new_boolean_attribute("novalidate")


def formnovalidate() -> Attribute:
    """The ``formnovalidate`` attribute of ``<button>`` and ``<input>``."""
    return new_boolean_attribute("formnovalidate")


def hidden() -> Attribute:
    """The global ``hidden`` attribute."""
    return new_boolean_attribute("hidden")


def allowfullscreen() -> Attribute:
    """The ``allowfullscreen`` attribute of ``<iframe>``."""
    return new_boolean_attribute("allowfullscreen")


def default() -> Attribute:
    """The ``default`` attribute of ``<option>`` and ``<track>``."""
    return new_boolean_attribute("default")


def inert() -> Attribute:
    """The global ``inert`` attribute."""
    return new_boolean_attribute("inert")


def ismap() -> Attribute:
    """The ``ismap`` attribute of ``<img>``."""
    return new_boolean_attribute("ismap")


def itemscope() -> Attribute:
    """The ``itemscope`` attribute."""
    return new_boolean_attribute("itemscope")


def nomodule() -> Attribute:
    """The ``nomodule`` attribute of ``<script>``."""
    return new_boolean_attribute("nomodule")


def open_() -> Attribute:
    """The ``open`` attribute of ``<details>``."""
    return new_boolean_attribute("open")


def reversed_() -> Attribute:
    """The ``reversed`` attribute of ``<ol>``."""
    return new_boolean_attribute("reversed")


def spellcheck() -> Attribute:
    """The global ``spellcheck`` attribute."""
    return new_boolean_attribute("spellcheck")


def translate() -> Attribute:
    """The global ``translate`` attribute."""
    return new_boolean_attribute("translate")