"""HTML element constructors, ``<nav>`` through ``<wbr>``, plus ``<output>`` to ``<track>``."""

from __future__ import annotations

from typing import Any

from markupkit.nodes import Element, new_element, new_void_element


def nav(*args: Any) -> Element:
    """A ``<nav>`` element."""
    return new_element("nav", *args)


def noscript(*args: Any) -> Element:
    """A ``<noscript>`` element."""
    return new_element("noscript", *args)


def object_(*args: Any) -> Element:
    """An ``<object>`` element."""
    return new_element("object", *args)


def ol(*args: Any) -> Element:
    """An ``<ol>`` element."""
    return new_element("ol", *args)


def optgroup(*args: Any) -> Element:
    """An ``<optgroup>`` element."""
    return new_element("optgroup", *args)


def option(*args: Any) -> Element:
    """An ``<option>`` element."""
    return new_element("option", *args)


def p(*args: Any) -> Element:
    """A ``<p>`` element."""
    return new_element("p", *args)


def para(*args: Any) -> Element:
    """A ``<p>`` element; the same as :func:`p`."""
    return new_element("p", *args)


def param(*args: Any) -> Element:
    """A ``<param>`` void element; non-attribute contents are ignored."""
    return new_void_element("param", *args)


def picture(*args: Any) -> Element:
    """A ``<picture>`` element."""
    return new_element("picture", *args)


def pre(*args: Any) -> Element:
    """A ``<pre>`` element."""
    return new_element("pre", *args)


def progress(*args: Any) -> Element:
    """A ``<progress>`` element."""
    return new_element("progress", *args)


def q(*args: Any) -> Element:
    """A ``<q>`` element (inline quotation)."""
    return new_element("q", *args)


def s(*args: Any) -> Element:
    """An ``<s>`` element (strikethrough)."""
    return new_element("s", *args)


def samp(*args: Any) -> Element:
    """A ``<samp>`` element."""
    return new_element("samp", *args)


def script(*args: Any) -> Element:
    """A ``<script>`` element."""
    return new_element("script", *args)


def section(*args: Any) -> Element:
    """A ``<section>`` element."""
    return new_element("section", *args)


def select(*args: Any) -> Element:
    """A ``<select>`` element."""
    return new_element("select", *args)


def slot(*args: Any) -> Element:
    """A ``<slot>`` element."""
    return new_element("slot", *args)


def small(*args: Any) -> Element:
    """A ``<small>`` element."""
    return new_element("small", *args)


def source(*args: Any) -> Element:
    """A ``<source>`` void element; non-attribute contents are ignored."""
    return new_void_element("source", *args)


def span(*args: Any) -> Element:
    """A ``<span>`` element."""
    return new_element("span", *args)


def strong(*args: Any) -> Element:
    """A ``<strong>`` element."""
    return new_element("strong", *args)


def style_element(*args: Any) -> Element:
    """A ``<style>`` element."""
    return new_element("style", *args)


def sub(*args: Any) -> Element:
    """A ``<sub>`` element."""
    return new_element("sub", *args)


def sup(*args: Any) -> Element:
    """A ``<sup>`` element."""
    return new_element("sup", *args)


def summary(*args: Any) -> Element:
    """A ``<summary>`` element."""
    return new_element("summary", *args)


def table(*args: Any) -> Element:
    """A ``<table>`` element."""
    return new_element("table", *args)


def tbody(*args: Any) -> Element:
    """A ``<tbody>`` element."""
    return new_element("tbody", *args)


def td(*args: Any) -> Element:
    """A ``<td>`` element."""
    return new_element("td", *args)


def template(*args: Any) -> Element:
    """A ``<template>`` element."""
    return new_element("template", *args)


def textarea(*args: Any) -> Element:
    """A ``<textarea>`` element."""
    return new_element("textarea", *args)


def tfoot(*args: Any) -> Element:
    """A ``<tfoot>`` element."""
    return new_element("tfoot", *args)


def th(*args: Any) -> Element:
    """A ``<th>`` element."""
    return new_element("th", *args)


def thead(*args: Any) -> Element:
    """A ``<thead>`` element."""
    return new_element("thead", *args)


def time(*args: Any) -> Element:
    """A ``<time>`` element."""
    return new_element("time", *args)


def title_element(*args: Any) -> Element:
    """A ``<title>`` element."""
    return new_element("title", *args)


def tr(*args: Any) -> Element:
    """A ``<tr>`` element."""
    return new_element("tr", *args)


def ul(*args: Any) -> Element:
    """A ``<ul>`` element."""
    return new_element("ul", *args)


def u(*args: Any) -> Element:
    """A ``<u>`` element (underline)."""
    return new_element("u", *args)


def var(*args: Any) -> Element:
    """A ``<var>`` element."""
    return new_element("var", *args)


def video(*args: Any) -> Element:
    """A ``<video>`` element."""
    return new_element("video", *args)


def wbr(*args: Any) -> Element:
    """A ``<wbr>`` void element; non-attribute contents are ignored."""
    return new_void_element("wbr", *args)


def output(*args: Any) -> Element:
    """An ``<output>`` element."""
    return new_element("output", *args)


def rp(*args: Any) -> Element:
    """An ``<rp>`` element."""
    return new_element("rp", *args)


def rt(*args: Any) -> Element:
    """An ``<rt>`` element."""
    return new_element("rt", *args)


def ruby(*args: Any) -> Element:
    """A ``<ruby>`` element."""
    return new_element("ruby", *args)


def search(*args: Any) -> Element:
    """A ``<search>`` element."""
    return new_element("search", *args)


def track(*args: Any) -> Element:
    """A ``<track>`` element."""
    return new_element("track", *args)