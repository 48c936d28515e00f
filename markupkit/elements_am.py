"""HTML element constructors, ``<a>`` through ``<meter>``, plus ``<bdi>``, ``<bdo>`` and ``<map>``."""

from __future__ import annotations

from typing import Any

from markupkit.nodes import Element, new_element, new_void_element


def a(*args: Any) -> Element:
    """An ``<a>`` element."""
    return new_element("a", *args)


def abbr(*args: Any) -> Element:
    """An ``<abbr>`` element."""
    return new_element("abbr", *args)


def address(*args: Any) -> Element:
    """An ``<address>`` element."""
    return new_element("address", *args)


def area(*args: Any) -> Element:
    """An ``<area>`` void element; non-attribute contents are ignored."""
    return new_void_element("area", *args)


def article(*args: Any) -> Element:
    """An ``<article>`` element."""
    return new_element("article", *args)


def aside(*args: Any) -> Element:
    """An ``<aside>`` element."""
    return new_element("aside", *args)


def audio(*args: Any) -> Element:
    """An ``<audio>`` element."""
    return new_element("audio", *args)


def b(*args: Any) -> Element:
    """A ``<b>`` element."""
    return new_element("b", *args)


def base(*args: Any) -> Element:
    """A ``<base>`` void element; non-attribute contents are ignored."""
    return new_void_element("base", *args)


def blockquote(*args: Any) -> Element:
    """A ``<blockquote>`` element."""
    return new_element("blockquote", *args)


def body(*args: Any) -> Element:
    """A ``<body>`` element."""
    return new_element("body", *args)


def br(*args: Any) -> Element:
    """A ``<br>`` void element; non-attribute contents are ignored."""
    return new_void_element("br", *args)


def button(*args: Any) -> Element:
    """A ``<button>`` element."""
    return new_element("button", *args)


def canvas(*args: Any) -> Element:
    """A ``<canvas>`` element."""
    return new_element("canvas", *args)


def caption(*args: Any) -> Element:
    """A ``<caption>`` element."""
    return new_element("caption", *args)


def cite(*args: Any) -> Element:
    """A ``<cite>`` element."""
    return new_element("cite", *args)


def code(*args: Any) -> Element:
    """A ``<code>`` element."""
    return new_element("code", *args)


def col(*args: Any) -> Element:
    """A ``<col>`` void element; non-attribute contents are ignored."""
    return new_void_element("col", *args)


def colgroup(*args: Any) -> Element:
    """A ``<colgroup>`` element."""
    return new_element("colgroup", *args)


def data_element(*args: Any) -> Element:
    """A ``<data>`` element."""
    return new_element("data", *args)


def datalist(*args: Any) -> Element:
    """A ``<datalist>`` element."""
    return new_element("datalist", *args)


def dd(*args: Any) -> Element:
    """A ``<dd>`` element."""
    return new_element("dd", *args)


def del_(*args: Any) -> Element:
    """A ``<del>`` element."""
    return new_element("del", *args)


def dfn(*args: Any) -> Element:
    """A ``<dfn>`` element."""
    return new_element("dfn", *args)


def dt(*args: Any) -> Element:
    """A ``<dt>`` element."""
    return new_element("dt", *args)


def details(*args: Any) -> Element:
    """A ``<details>`` element."""
    return new_element("details", *args)


def dialog(*args: Any) -> Element:
    """A ``<dialog>`` element."""
    return new_element("dialog", *args)


def div(*args: Any) -> Element:
    """A ``<div>`` element."""
    return new_element("div", *args)


def dl(*args: Any) -> Element:
    """A ``<dl>`` element."""
    return new_element("dl", *args)


def em(*args: Any) -> Element:
    """An ``<em>`` element."""
    return new_element("em", *args)


def embed(*args: Any) -> Element:
    """An ``<embed>`` void element; non-attribute contents are ignored."""
    return new_void_element("embed", *args)


def form(*args: Any) -> Element:
    """A ``<form>`` element."""
    return new_element("form", *args)


def fieldset(*args: Any) -> Element:
    """A ``<fieldset>`` element."""
    return new_element("fieldset", *args)


def figcaption(*args: Any) -> Element:
    """A ``<figcaption>`` element."""
    return new_element("figcaption", *args)


def figure(*args: Any) -> Element:
    """A ``<figure>`` element."""
    return new_element("figure", *args)


def footer(*args: Any) -> Element:
    """A ``<footer>`` element."""
    return new_element("footer", *args)


def h1(*args: Any) -> Element:
    """An ``<h1>`` element."""
    return new_element("h1", *args)


def h2(*args: Any) -> Element:
    """An ``<h2>`` element."""
    return new_element("h2", *args)


def h3(*args: Any) -> Element:
    """An ``<h3>`` element."""
    return new_element("h3", *args)


def h4(*args: Any) -> Element:
    """An ``<h4>`` element."""
    return new_element("h4", *args)


def h5(*args: Any) -> Element:
    """An ``<h5>`` element."""
    return new_element("h5", *args)


def h6(*args: Any) -> Element:
    """An ``<h6>`` element."""
    return new_element("h6", *args)


def head(*args: Any) -> Element:
    """A ``<head>`` element."""
    return new_element("head", *args)


def header(*args: Any) -> Element:
    """A ``<header>`` element."""
    return new_element("header", *args)


def hgroup(*args: Any) -> Element:
    """An ``<hgroup>`` element."""
    return new_element("hgroup", *args)


def hr(*args: Any) -> Element:
    """An ``<hr>`` void element; non-attribute contents are ignored."""
    return new_void_element("hr", *args)


def html(*args: Any) -> Element:
    """An ``<html>`` element."""
    return new_element("html", *args)


def i(*args: Any) -> Element:
    """An ``<i>`` element."""
    return new_element("i", *args)


def iframe(*args: Any) -> Element:
    """An ``<iframe>`` element."""
    return new_element("iframe", *args)


def img(*args: Any) -> Element:
    """An ``<img>`` void element; non-attribute contents are ignored."""
    return new_void_element("img", *args)


def input_(*args: Any) -> Element:
    """An ``<input>`` void element; non-attribute contents are ignored."""
    return new_void_element("input", *args)


def ins(*args: Any) -> Element:
    """An ``<ins>`` element."""
    return new_element("ins", *args)


def kbd(*args: Any) -> Element:
    """A ``<kbd>`` element."""
    return new_element("kbd", *args)


def label(*args: Any) -> Element:
    """A ``<label>`` element."""
    return new_element("label", *args)


def legend(*args: Any) -> Element:
    """A ``<legend>`` element."""
    return new_element("legend", *args)


def li(*args: Any) -> Element:
    """An ``<li>`` element."""
    return new_element("li", *args)


def link(*args: Any) -> Element:
    """A ``<link>`` void element; non-attribute contents are ignored."""
    return new_void_element("link", *args)


def main(*args: Any) -> Element:
    """A ``<main>`` element."""
    return new_element("main", *args)


def mark(*args: Any) -> Element:
    """A ``<mark>`` element."""
    return new_element("mark", *args)


def menu(*args: Any) -> Element:
    """A ``<menu>`` element."""
    return new_element("menu", *args)


def meta(*args: Any) -> Element:
    """A ``<meta>`` void element; non-attribute contents are ignored."""
    return new_void_element("meta", *args)


def meter(*args: Any) -> Element:
    """A ``<meter>`` element."""
    return new_element("meter", *args)


def bdi(*args: Any) -> Element:
    """A ``<bdi>`` element."""
    return new_element("bdi", *args)


def bdo(*args: Any) -> Element:
    """A ``<bdo>`` element."""
    return new_element("bdo", *args)


def map_(*args: Any) -> Element:
    """A ``<map>`` element."""
    return new_element("map", *args)