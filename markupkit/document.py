"""A complete HTML document: doctype followed by the ``<html>`` element."""

from __future__ import annotations

from typing import Any, Sequence

from markupkit.attributes import lang as _lang
from markupkit.elements_am import body as _body
from markupkit.elements_am import head as _head
from markupkit.elements_am import html as _html
from markupkit.nodes import Context, Node, NodeType, doctype


class Document(Node):
    """A document node holding a prologue and top-level contents."""

    node_type = NodeType.DOCUMENT
    name = "#document"

    def __init__(self, prologue: Node | None, contents: Sequence[Node]) -> None:
        self.prologue = prologue
        self.contents = list(contents)

    def render(self, ctx: Context) -> None:
        if self.prologue is not None:
            self.prologue.render(ctx)
        for node in self.contents:
            node.render(ctx)


def document(
    lang: Any, head: Sequence[Any] | None, body: Sequence[Any] | None
) -> Document:
    """Build an HTML document with an optional language, head contents and body contents.

    The ``<head>`` element is left out when ``head`` is empty; ``<body>`` is always present.
    """
    lang_attribute = _lang(lang) if lang is not None else None
    head_node = _head(*head) if head else None
    body_node = _body(*(body or ()))
    return Document(doctype(), [_html(lang_attribute, head_node, body_node)])