"""Markup node tree and its indented HTML serializer.

Every render object produced by :mod:`form_printer.printer` is a
:class:`MarkupNode`. Serialization keeps simple nodes on one line and puts
the children of complex nodes on their own, indented lines:

>>> from form_printer.markup import MarkupNode
>>> node = MarkupNode("p", {"class": "text"}, [MarkupNode("label", {}, ["Name"])])
>>> print(node.render())
<p class="text"><label>Name</label></p>
>>> node.push(MarkupNode("input", {"type": "text", "name": "n"}))
>>> print(node.render())
<p class="text">
  <label>Name</label>
  <input type="text" name="n">
</p>

Plain strings are escaped on output; :class:`markupsafe.Markup` content is
inserted verbatim.
"""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from markupsafe import escape

VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "keygen",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)
ATTRIBUTE_ORDER = ("type", "name", "id", "class", "value")

Content = typ.Union["MarkupNode", str]


class MarkupNode:
    """A tag with attributes and an ordered list of node/text content."""

    def __init__(
        self,
        tag: str,
        attrs: cabc.Mapping[str, typ.Any] | None = None,
        content: typ.Any = None,
    ) -> None:
        self.tag = tag
        self.attrs: dict[str, typ.Any] = dict(attrs or {})
        self.content: list[Content] = []
        self.skip_ws = False
        if content is None:
            return
        if isinstance(content, (str, MarkupNode)):
            content = [content]
        for item in content:
            self.push(item)

    def is_complex(self) -> bool:
        """Return ``True`` when the node holds more than one content item."""
        return len(self.content) > 1

    def push(self, item: typ.Any) -> None:
        """Append a node, a text item or a ``(tag, attrs, content)`` tuple."""
        self.content.append(self._coerce(item))

    def unshift(self, item: typ.Any) -> None:
        """Prepend a node, a text item or a ``(tag, attrs, content)`` tuple."""
        self.content.insert(0, self._coerce(item))

    def render(self, indent: int = 0, shift: int = 2) -> str:
        """Serialize the node as HTML starting at ``indent`` spaces."""
        pad = " " * indent
        result = f"{pad}<{self.tag}{_format_attributes(self.attrs)}>"
        if self.tag in VOID_ELEMENTS:
            return result
        if self.content:
            first = self.content[0]
            if len(self.content) == 1 and not isinstance(first, MarkupNode):
                result += _render_text(first)
            elif len(self.content) == 1 and not first.is_complex():
                result += first.render(0, shift)
            elif self.skip_ws:
                result += "".join(render_content(item, 0, 0) for item in self.content)
            else:
                child_pad = " " * (indent + shift)
                lines = [
                    item.render(indent + shift, shift)
                    if isinstance(item, MarkupNode)
                    else child_pad + _render_text(item)
                    for item in self.content
                ]
                result += "\n" + "\n".join(lines) + "\n" + pad
        return f"{result}</{self.tag}>"

    def __str__(self) -> str:
        return self.render()

    def __html__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.tag!r}, {self.attrs!r})"

    def _coerce(self, item: typ.Any) -> Content:
        match item:
            case MarkupNode() | str():
                return item
            case (tag, *rest) if isinstance(tag, str) and len(rest) <= 2:
                attrs = rest[0] if rest else None
                content = rest[1] if len(rest) > 1 else None
                return MarkupNode(tag, attrs, content)
            case _:
                return str(item)


def render(node: MarkupNode, indent: int = 0, shift: int = 2) -> str:
    """Serialize ``node`` (and its subtree) as indented HTML."""
    return node.render(indent, shift)


def render_content(item: Content, indent: int, shift: int) -> str:
    if isinstance(item, MarkupNode):
        return item.render(indent, shift)
    return _render_text(item)


def _render_text(text: str) -> str:
    return str(escape(text))


def _format_attributes(attrs: cabc.Mapping[str, typ.Any]) -> str:
    ordered = [key for key in ATTRIBUTE_ORDER if key in attrs]
    ordered.extend(key for key in attrs if key not in ATTRIBUTE_ORDER)
    parts: list[str] = []
    for key in ordered:
        value = attrs[key]
        if value is True:
            parts.append(key)
        elif value is False or value is None:
            continue
        else:
            parts.append(f'{key}="{escape(value)}"')
    return "".join(f" {part}" for part in parts)


__all__ = [
    "ATTRIBUTE_ORDER",
    "VOID_ELEMENTS",
    "Content",
    "MarkupNode",
    "render",
    "render_content",
]
