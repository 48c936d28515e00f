"""Core node types for building and rendering HTML trees."""

from __future__ import annotations

import html as _html
import io
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Iterator, TextIO


class NodeType(Enum):
    """The kind of a node in a markup tree."""

    ELEMENT = "element"
    ATTRIBUTE = "attribute"
    TEXT = "text"
    COMMENT = "comment"
    PROCESSING_INSTRUCTION = "processing-instruction"
    DOCTYPE = "doctype"
    DOCUMENT = "document"


class DynamicValueKey(str):
    """A key whose value is looked up in the render context's data at render time."""


@dataclass
class Context:
    """Rendering state: the output stream and data for dynamic values."""

    writer: TextIO
    data: dict[str, Any] = field(default_factory=dict)

    def write(self, data: str) -> None:
        """Write a piece of output; errors from the writer propagate."""
        if data:
            self.writer.write(data)


def _resolve(value: Any, ctx: Context) -> str | None:
    """Turn a content value into text, evaluating dynamic values against ``ctx``."""
    if value is None:
        return None
    if isinstance(value, DynamicValueKey):
        return _plain(ctx.data.get(str(value)))
    if callable(value) and not isinstance(value, Node):
        return _plain(value(ctx))
    return _plain(value)


def _plain(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8")
    return str(value)


def _resolved(values: Iterable[Any], ctx: Context) -> Iterator[str]:
    for value in values:
        text = _resolve(value, ctx)
        if text is not None:
            yield text


class Node(ABC):
    """Base class of everything that can be rendered."""

    node_type: NodeType
    name: str

    @abstractmethod
    def render(self, ctx: Context) -> None:
        """Write this node's markup to the context."""

    def to_html(self, data: dict[str, Any] | None = None) -> str:
        """Render this node to a string, using ``data`` for dynamic values."""
        buffer = io.StringIO()
        self.render(Context(writer=buffer, data=dict(data or {})))
        return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"


class Attribute(Node):
    """An attribute of an element: plain, boolean or with delimited values."""

    node_type = NodeType.ATTRIBUTE

    def __init__(
        self,
        name: str,
        values: Iterable[Any] = (),
        *,
        delimiter: str | None = None,
        boolean: bool = False,
    ) -> None:
        self.name = name
        self.values = tuple(values)
        self.delimiter = delimiter
        self.boolean = boolean

    def merge(self, other: Attribute) -> Attribute:
        """Return a new attribute holding this attribute's values followed by ``other``'s."""
        return Attribute(
            self.name,
            self.values + other.values,
            delimiter=self.delimiter,
            boolean=self.boolean,
        )

    def render(self, ctx: Context) -> None:
        ctx.write(" " + self.name)
        if self.boolean:
            return
        joiner = self.delimiter if self.delimiter is not None else ""
        value = joiner.join(_resolved(self.values, ctx))
        ctx.write('="' + _html.escape(value, quote=True) + '"')


class TextNode(Node):
    """Escaped text content."""

    node_type = NodeType.TEXT
    name = "#text"

    def __init__(self, *contents: Any) -> None:
        self.contents = contents

    def render(self, ctx: Context) -> None:
        for piece in _resolved(self.contents, ctx):
            ctx.write(_html.escape(piece, quote=False))


class CommentNode(Node):
    """An HTML comment."""

    node_type = NodeType.COMMENT
    name = "#comment"

    def __init__(self, *contents: Any) -> None:
        self.contents = contents

    def render(self, ctx: Context) -> None:
        ctx.write("<!--")
        for piece in _resolved(self.contents, ctx):
            ctx.write(piece)
        ctx.write("-->")


class ProcessingInstruction(Node):
    """A markup declaration such as ``<!name contents>`` followed by a newline."""

    node_type = NodeType.PROCESSING_INSTRUCTION

    def __init__(self, name: str, *contents: Any) -> None:
        self.name = name
        self.contents = contents

    def render(self, ctx: Context) -> None:
        body = "".join(_resolved(self.contents, ctx))
        ctx.write("<!" + self.name + (" " + body if body else "") + ">\n")


class DocTypeNode(Node):
    """The HTML5 document type declaration."""

    node_type = NodeType.DOCTYPE
    name = "html"

    def render(self, ctx: Context) -> None:
        ctx.write("<!DOCTYPE html>\n")


def _flatten(items: Iterable[Any]) -> Iterator[Any]:
    for item in items:
        if isinstance(item, (list, tuple)):
            yield from _flatten(item)
        elif item is not None:
            yield item


class Element(Node):
    """An HTML element with attributes and, unless void, child nodes."""

    node_type = NodeType.ELEMENT

    def __init__(self, tag: str, *contents: Any, void: bool = False) -> None:
        self.name = tag
        self.void = void
        self.attributes: list[Attribute] = []
        self.children: list[Node] = []
        delimited: dict[str, int] = {}
        for item in _flatten(contents):
            if isinstance(item, Attribute):
                if item.delimiter is not None and item.name in delimited:
                    index = delimited[item.name]
                    self.attributes[index] = self.attributes[index].merge(item)
                    continue
                if item.delimiter is not None:
                    delimited[item.name] = len(self.attributes)
                self.attributes.append(item)
            elif void:
                continue
            elif isinstance(item, Node):
                self.children.append(item)
            else:
                self.children.append(TextNode(item))

    def render(self, ctx: Context) -> None:
        ctx.write("<" + self.name)
        for attribute in self.attributes:
            attribute.render(ctx)
        ctx.write(">")
        if self.void:
            return
        for child in self.children:
            child.render(ctx)
        ctx.write("</" + self.name + ">")


def new_attribute(name: str, *args: Any) -> Attribute:
    """Create an attribute whose values are concatenated."""
    return Attribute(name, args)


def new_boolean_attribute(name: str) -> Attribute:
    """Create a boolean attribute, rendered without a value."""
    return Attribute(name, boolean=True)


def new_delimited_attribute(name: str, delimiter: str, *args: Any) -> Attribute:
    """Create an attribute whose values are joined with ``delimiter``.

    Several such attributes of the same name on one element are merged.
    """
    return Attribute(name, args, delimiter=delimiter)


def new_element(tag: str, *args: Any) -> Element:
    """Create an element with attributes and children."""
    return Element(tag, *args)


def new_void_element(tag: str, *args: Any) -> Element:
    """Create a void element; anything other than attributes is ignored."""
    return Element(tag, *args, void=True)


def text(*args: Any) -> TextNode:
    """Create a text node."""
    return TextNode(*args)


def comment(*args: Any) -> CommentNode:
    """Create a comment node."""
    return CommentNode(*args)


def pi(name: str, *args: Any) -> ProcessingInstruction:
    """Create a processing instruction node."""
    return ProcessingInstruction(name, *args)


def doctype() -> DocTypeNode:
    """Create the HTML5 doctype node."""
    return DocTypeNode()


def render(node: Node, data: dict[str, Any] | None = None) -> str:
    """Render ``node`` to a string, using ``data`` for dynamic values."""
    return node.to_html(data)