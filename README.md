# markupkit

Compose HTML from ordinary Python calls. Every HTML element and attribute has
a function; you nest them to describe a page and render the tree to a string
or to any text stream.

## Install

From the project directory:

    pip install .

## Building markup

Element functions take any mix of attributes, child nodes and plain values.
Attributes go into the start tag; everything else goes between the tags.
Plain values (strings, numbers, ...) become text nodes, lists and tuples are
flattened, and `None` is skipped.

```python
from markupkit.nodes import text, render
from markupkit.elements_am import div
from markupkit.attributes import id_, class_

page = div(id_(1), class_("card", "wide"), text("hello"))
print(render(page, {}))
# <div id="1" class="card wide">hello</div>
```

Void elements such as `br`, `img`, `input_`, `meta` and `link` render only
their start tag and ignore any non-attribute contents.

Attribute functions come in four modules:

- `markupkit.attributes` – valued attributes (`href`, `src`, `title`,
  `style`, `data(name, ...)`, `aria(name, ...)` and many more). Values given
  to one attribute are concatenated, except for `class_`, whose values are
  joined with a space, and `style`, whose values are joined with `"; "`.
  Several `class_` (or `style`) attributes on one element are merged into a
  single attribute.
- `markupkit.boolean_attrs` – attributes that have no value (`disabled`,
  `checked`, `hidden`, `required`, ...).
- `markupkit.aria` – the standard `aria-*` attributes.
- `markupkit.events` – `on*` event handler attributes (`on_click`,
  `on_submit`, ...).

Elements live in `markupkit.elements_am` (`a` to `meter`, plus `bdi`, `bdo`,
`map_`) and `markupkit.elements_nz` (`nav` to `wbr`, plus `output`, `rp`,
`rt`, `ruby`, `search`, `track`). Names that would clash with Python keywords
or builtins carry a trailing underscore (`input_`, `del_`, `object_`, `id_`,
`for_`, `class_`, ...).

Booleans given as values render as `true` / `false`, and bytes are decoded as
UTF-8. Text content is HTML-escaped, and attribute values are escaped
including quotes; comment contents are written as given.

For custom tags and attributes, `markupkit.nodes` offers `new_element`,
`new_void_element`, `new_attribute`, `new_boolean_attribute` and
`new_delimited_attribute`.

## Text, comments and processing instructions

```python
from markupkit.nodes import text, comment, pi, doctype, render

render(text("foo"), {})        # 'foo'
render(comment("foo"), {})     # '<!--foo-->'
render(pi("foo", "bar"), {})   # '<!foo bar>\n'
render(doctype(), {})          # '<!DOCTYPE html>\n'
```

## Dynamic values

Contents can be filled in at render time. A `DynamicValueKey` is replaced by
the matching entry of the data passed when rendering, and any callable is
called with the render `Context` and its result used:

```python
from markupkit.nodes import DynamicValueKey, text, render

greeting = text(DynamicValueKey("name"), " ", lambda ctx: "!")
render(greeting, {"name": "world"})   # 'world !'
```

The same tree can be rendered again with different data.

## Rendering to a stream

`render(node, data)` and `node.to_html(data)` return a string. To write to a
stream instead, pass a `Context`:

```python
import sys
from markupkit.nodes import Context, text

text("hello").render(Context(writer=sys.stdout, data={}))
```

Errors raised by the writer propagate out of `render`.

## Whole documents

`document(lang, head, body)` in `markupkit.document` produces a doctype
followed by an `<html>` element holding the head and body contents:

```python
from markupkit.document import document
from markupkit.elements_am import meta
from markupkit.elements_nz import p
from markupkit.attributes import charset
from markupkit.nodes import render

doc = document("en", [meta(charset("utf-8"))], [p()])
print(render(doc, {}))
# <!DOCTYPE html>
# <html lang="en"><head><meta charset="utf-8"></head><body><p></p></body></html>
```

Pass `None` as `lang` to leave out the `lang` attribute, and an empty list as
`head` to leave out the `<head>` element. The `<body>` element is always
present.

## What it does not do

markupkit only builds and renders markup. It does not parse HTML, does not
check which attributes belong on which elements, does not pretty-print its
output, and has no command-line tool.

## Running the tests

    pip install .[test]
    pytest