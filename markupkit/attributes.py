"""HTML attributes that carry a value."""

from __future__ import annotations

from typing import Any

from markupkit.nodes import Attribute, new_attribute, new_delimited_attribute

_SPACE = " "
_STYLES_DELIMITER = "; "


def crossorigin(*args: Any) -> Attribute:
    """The ``crossorigin`` attribute."""
    return new_attribute("crossorigin", *args)


def datetime(*args: Any) -> Attribute:
    """The ``datetime`` attribute of ``<time>``."""
    return new_attribute("datetime", *args)


def download(*args: Any) -> Attribute:
    """The ``download`` attribute of ``<a>``."""
    return new_attribute("download", *args)


def draggable(*args: Any) -> Attribute:
    """The global ``draggable`` attribute."""
    return new_attribute("draggable", *args)


def accept(*args: Any) -> Attribute:
    """The ``accept`` attribute of ``<input>``."""
    return new_attribute("accept", *args)


def action(*args: Any) -> Attribute:
    """The ``action`` attribute of ``<form>``."""
    return new_attribute("action", *args)


def alt(*args: Any) -> Attribute:
    """The ``alt`` attribute."""
    return new_attribute("alt", *args)


def aria(name: str, *args: Any) -> Attribute:
    """A custom ``aria-*`` attribute with the given name suffix."""
    return new_attribute("aria-" + name, *args)


def as_(*args: Any) -> Attribute:
    """The ``as`` attribute of ``<link>``."""
    return new_attribute("as", *args)


def autocomplete(*args: Any) -> Attribute:
    """The ``autocomplete`` attribute."""
    return new_attribute("autocomplete", *args)


def charset(*args: Any) -> Attribute:
    """The ``charset`` attribute of ``<meta>`` and ``<script>``."""
    return new_attribute("charset", *args)


def cite_attr(*args: Any) -> Attribute:
    """The ``cite`` attribute."""
    return new_attribute("cite", *args)


def class_(*args: Any) -> Attribute:
    """The global ``class`` attribute; values are joined with spaces.

    Several ``class`` attributes on one element are merged into one.
    """
    return new_delimited_attribute("class", _SPACE, *args)


def cols(*args: Any) -> Attribute:
    """The ``cols`` attribute of ``<textarea>``."""
    return new_attribute("cols", *args)


def colspan(*args: Any) -> Attribute:
    """The ``colspan`` attribute of ``<td>`` and ``<th>``."""
    return new_attribute("colspan", *args)


def content(*args: Any) -> Attribute:
    """The ``content`` attribute of ``<meta>``."""
    return new_attribute("content", *args)


def contenteditable(*args: Any) -> Attribute:
    """The global ``contenteditable`` attribute."""
    return new_attribute("contenteditable", *args)


def dir_(*args: Any) -> Attribute:
    """The global ``dir`` attribute."""
    return new_attribute("dir", *args)


def data(name: str, *args: Any) -> Attribute:
    """A ``data-*`` attribute with the given name suffix."""
    return new_attribute("data-" + name, *args)


def enctype(*args: Any) -> Attribute:
    """The ``enctype`` attribute of ``<form>``."""
    return new_attribute("enctype", *args)


def for_(*args: Any) -> Attribute:
    """The ``for`` attribute of ``<label>`` and ``<output>``."""
    return new_attribute("for", *args)


def form_attr(*args: Any) -> Attribute:
    """The ``form`` attribute of form-associated elements."""
    return new_attribute("form", *args)


def height(*args: Any) -> Attribute:
    """The ``height`` attribute."""
    return new_attribute("height", *args)


def href(*args: Any) -> Attribute:
    """The ``href`` attribute."""
    return new_attribute("href", *args)


def id_(*args: Any) -> Attribute:
    """The global ``id`` attribute."""
    return new_attribute("id", *args)


def integrity(*args: Any) -> Attribute:
    """The ``integrity`` attribute of ``<link>`` and ``<script>``."""
    return new_attribute("integrity", *args)


def lang(*args: Any) -> Attribute:
    """The global ``lang`` attribute."""
    return new_attribute("lang", *args)


def list_(*args: Any) -> Attribute:
    """The ``list`` attribute of ``<input>``."""
    return new_attribute("list", *args)


def loading(*args: Any) -> Attribute:
    """The ``loading`` attribute of ``<img>`` and ``<iframe>``."""
    return new_attribute("loading", *args)


def max_(*args: Any) -> Attribute:
    """The ``max`` attribute."""
    return new_attribute("max", *args)


def maxlength(*args: Any) -> Attribute:
    """The ``maxlength`` attribute."""
    return new_attribute("maxlength", *args)


def method(*args: Any) -> Attribute:
    """The ``method`` attribute of ``<form>``."""
    return new_attribute("method", *args)


def min_(*args: Any) -> Attribute:
    """The ``min`` attribute."""
    return new_attribute("min", *args)


def minlength(*args: Any) -> Attribute:
    """The ``minlength`` attribute."""
    return new_attribute("minlength", *args)


def name(*args: Any) -> Attribute:
    """The ``name`` attribute."""
    return new_attribute("name", *args)


def pattern(*args: Any) -> Attribute:
    """The ``pattern`` attribute of ``<input>``."""
    return new_attribute("pattern", *args)


def placeholder(*args: Any) -> Attribute:
    """The ``placeholder`` attribute."""
    return new_attribute("placeholder", *args)


def popover(*args: Any) -> Attribute:
    """The global ``popover`` attribute."""
    return new_attribute("popover", *args)


def popovertarget(*args: Any) -> Attribute:
    """The ``popovertarget`` attribute."""
    return new_attribute("popovertarget", *args)


def popovertargetaction(*args: Any) -> Attribute:
    """The ``popovertargetaction`` attribute."""
    return new_attribute("popovertargetaction", *args)


def poster(*args: Any) -> Attribute:
    """The ``poster`` attribute of ``<video>``."""
    return new_attribute("poster", *args)


def preload(*args: Any) -> Attribute:
    """The ``preload`` attribute of ``<audio>`` and ``<video>``."""
    return new_attribute("preload", *args)


def referrerpolicy(*args: Any) -> Attribute:
    """The ``referrerpolicy`` attribute."""
    return new_attribute("referrerpolicy", *args)


def rel(*args: Any) -> Attribute:
    """The ``rel`` attribute."""
    return new_attribute("rel", *args)


def role(*args: Any) -> Attribute:
    """The ``role`` attribute."""
    return new_attribute("role", *args)


def rows(*args: Any) -> Attribute:
    """The ``rows`` attribute of ``<textarea>``."""
    return new_attribute("rows", *args)


def rowspan(*args: Any) -> Attribute:
    """The ``rowspan`` attribute of ``<td>`` and ``<th>``."""
    return new_attribute("rowspan", *args)


def slot_attr(*args: Any) -> Attribute:
    """The global ``slot`` attribute."""
    return new_attribute("slot", *args)


def src(*args: Any) -> Attribute:
    """The ``src`` attribute."""
    return new_attribute("src", *args)


def srcset(*args: Any) -> Attribute:
    """The ``srcset`` attribute of ``<img>``."""
    return new_attribute("srcset", *args)


def step(*args: Any) -> Attribute:
    """The ``step`` attribute of ``<input>``."""
    return new_attribute("step", *args)


def style(*args: Any) -> Attribute:
    """The global ``style`` attribute; values are joined with ``"; "``.

    Several ``style`` attributes on one element are merged into one.
    """
    return new_delimited_attribute("style", _STYLES_DELIMITER, *args)


def tabindex(*args: Any) -> Attribute:
    """The global ``tabindex`` attribute."""
    return new_attribute("tabindex", *args)


def target(*args: Any) -> Attribute:
    """The ``target`` attribute of ``<a>`` and ``<form>``."""
    return new_attribute("target", *args)


def title(*args: Any) -> Attribute:
    """The global ``title`` attribute."""
    return new_attribute("title", *args)


def type_(*args: Any) -> Attribute:
    """The ``type`` attribute."""
    return new_attribute("type", *args)


def value(*args: Any) -> Attribute:
    """The ``value`` attribute."""
    return new_attribute("value", *args)


def width(*args: Any) -> Attribute:
    """The ``width`` attribute."""
    return new_attribute("width", *args)


def accesskey(*args: Any) -> Attribute:
    """The global ``accesskey`` attribute."""
    return new_attribute("accesskey", *args)


def autocapitalize(*args: Any) -> Attribute:
    """The global ``autocapitalize`` attribute."""
    return new_attribute("autocapitalize", *args)


def autocorrect(*args: Any) -> Attribute:
    """The global ``autocorrect`` attribute."""
    return new_attribute("autocorrect", *args)


def enterkeyhint(*args: Any) -> Attribute:
    """The global ``enterkeyhint`` attribute."""
    return new_attribute("enterkeyhint", *args)


def exportparts(*args: Any) -> Attribute:
    """The global ``exportparts`` attribute."""
    return new_attribute("exportparts", *args)


def inputmode(*args: Any) -> Attribute:
    """The global ``inputmode`` attribute."""
    return new_attribute("inputmode", *args)


def is_(*args: Any) -> Attribute:
    """The global ``is`` attribute."""
    return new_attribute("is", *args)


def itemid(*args: Any) -> Attribute:
    """The global ``itemid`` attribute."""
    return new_attribute("itemid", *args)


def itemprop(*args: Any) -> Attribute:
    """The global ``itemprop`` attribute."""
    return new_attribute("itemprop", *args)


def itemref(*args: Any) -> Attribute:
    """The global ``itemref`` attribute."""
    return new_attribute("itemref", *args)


def itemtype(*args: Any) -> Attribute:
    """The global ``itemtype`` attribute."""
    return new_attribute("itemtype", *args)


def nonce(*args: Any) -> Attribute:
    """The global ``nonce`` attribute."""
    return new_attribute("nonce", *args)


def part(*args: Any) -> Attribute:
    """The global ``part`` attribute."""
    return new_attribute("part", *args)


def writingsuggestions(*args: Any) -> Attribute:
    """The global ``writingsuggestions`` attribute."""
    return new_attribute("writingsuggestions", *args)