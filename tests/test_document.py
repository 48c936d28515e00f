import io

import pytest

from markupkit.attributes import charset
from markupkit.document import Document, document
from markupkit.elements_am import meta
from markupkit.elements_nz import p
from markupkit.nodes import Context, NodeType


class _ErrorWriter:
    def write(self, data):
        raise OSError("error")


def test_document_structure():
    doc = document("en", [meta(charset("utf-8"))], None)
    assert doc.node_type == NodeType.DOCUMENT
    assert doc.name == "#document"
    assert isinstance(doc, Document)
    assert len(doc.contents) == 1
    outer = doc.contents[0]
    assert outer.name == "html"
    assert outer.node_type == NodeType.ELEMENT


def test_document_render():
    doc = document("en", [meta(charset("utf-8"))], [p()])
    assert doc.to_html() == (
        "<!DOCTYPE html>\n"
        '<html lang="en"><head><meta charset="utf-8"></head><body><p></p></body></html>'
    )


def test_document_render_error_propagates():
    doc = document("en", [meta(charset("utf-8"))], [p()])
    with pytest.raises(OSError):
        doc.render(Context(writer=_ErrorWriter()))


def test_document_without_lang_or_head():
    doc = document(None, [], [p("hi")])
    assert doc.to_html() == "<!DOCTYPE html>\n<html><body><p>hi</p></body></html>"


def test_document_render_to_context():
    buffer = io.StringIO()
    document(None, None, None).render(Context(writer=buffer))
    assert buffer.getvalue() == "<!DOCTYPE html>\n<html><body></body></html>"


def test_document_without_prologue():
    doc = Document(None, [p("x")])
    assert doc.to_html() == "<p>x</p>"