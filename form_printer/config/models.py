"""Mutable, searchable configuration tree consumed by the form printer.

A form is described by :class:`ConfigurationNode` records (attribute maps with
an ordered list of children) collected in :class:`ConfigurationList`
containers. Lists can be searched and edited anywhere in the tree through
:class:`PositionHandle` cursors:

>>> from form_printer.config import ConfigurationList
>>> tree = ConfigurationList(
...     [{"type": "fieldset", "name": "address", "content": [{"type": "text", "name": "city"}]}]
... )
>>> handle = tree.find("city")
>>> handle.current()["type"]
'text'
>>> tree.add({"type": "text", "name": "zip"}, after="city").current().name
'zip'
"""

from __future__ import annotations

import collections.abc as cabc
import copy
import typing as typ

from ..errors import InvalidPositionError, MalformedConfigError, NodeNotFoundError
from ..markup import MarkupNode

ConfigItem = typ.Union["ConfigurationNode", "HtmlItem", "TextItem"]


def _is_numeric_key(key: object) -> bool:
    if isinstance(key, bool):
        return False
    return isinstance(key, int) or (isinstance(key, str) and key.isdigit())


class ConfigurationNode(cabc.MutableMapping[str, typ.Any]):
    """Attribute map describing one form entry, plus its nested content."""

    __slots__ = ("_attributes", "_content")

    def __init__(self, cfg: cabc.Mapping[str, typ.Any] | None = None) -> None:
        if cfg is None:
            cfg = {}
        if not isinstance(cfg, cabc.Mapping):
            msg = f"Configuration node must be built from a mapping, got {type(cfg).__name__}."
            raise MalformedConfigError(msg)
        if any(_is_numeric_key(key) for key in cfg):
            msg = "Attempt to create a configuration node from a numerically indexed structure."
            raise MalformedConfigError(msg)
        attributes = dict(cfg)
        self._content = ConfigurationList(attributes.pop("content", None))
        self._attributes = attributes

    @property
    def name(self) -> str | None:
        """Return the ``name`` attribute used to identify the node in searches."""
        return self._attributes.get("name")

    def children(self) -> ConfigurationList:
        """Return the (mutable) list of nested configuration items."""
        return self._content

    def detach(self) -> ConfigurationList:
        """Hand over the children to the caller and leave the node empty."""
        return self._content.detach()

    def copy(self) -> ConfigurationNode:
        """Return a copy of the node whose configuration subtree is independent."""
        duplicate = ConfigurationNode(self._attributes)
        duplicate._content = ConfigurationList([item.copy() for item in self._content])
        return duplicate

    def __getitem__(self, key: str) -> typ.Any:
        return self._attributes[key]

    def __setitem__(self, key: str, value: typ.Any) -> None:
        self._attributes[key] = value

    def __delitem__(self, key: str) -> None:
        del self._attributes[key]

    def __iter__(self) -> cabc.Iterator[str]:
        return iter(self._attributes)

    def __len__(self) -> int:
        return len(self._attributes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConfigurationNode):
            return NotImplemented
        return (
            self._attributes == other._attributes
            and self._content.content() == other._content.content()
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ConfigurationNode({self._attributes!r}, content={len(self._content)})"


class _OpaqueItem:
    """Configuration list entry that carries pre-rendered output."""

    __slots__ = ()

    name: str | None = None

    def get(self, key: str, default: typ.Any = None) -> typ.Any:
        return default

    def __contains__(self, key: object) -> bool:
        return False

    def children(self) -> ConfigurationList:
        return ConfigurationList()

    def detach(self) -> ConfigurationList:
        return ConfigurationList()


class HtmlItem(_OpaqueItem):
    """Wrap an already built :class:`MarkupNode` as a configuration item."""

    __slots__ = ("element",)

    def __init__(self, element: MarkupNode) -> None:
        self.element = element

    def copy(self) -> HtmlItem:
        return HtmlItem(copy.deepcopy(self.element))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HtmlItem):
            return NotImplemented
        return self.element is other.element

    __hash__ = None  # type: ignore[assignment]


class TextItem(_OpaqueItem):
    """Wrap a plain (or :class:`markupsafe.Markup`) string as a configuration item."""

    __slots__ = ("text",)

    def __init__(self, text: str) -> None:
        self.text = text

    def copy(self) -> TextItem:
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TextItem):
            return NotImplemented
        return self.text == other.text

    __hash__ = None  # type: ignore[assignment]


class PositionHandle:
    """Cursor addressing one item of a :class:`ConfigurationList`."""

    __slots__ = ("container", "index")

    def __init__(self, container: ConfigurationList, index: int = 0) -> None:
        self.container = container
        self.index = index

    def valid(self) -> bool:
        return 0 <= self.index < len(self.container)

    def current(self) -> ConfigItem:
        if not self.valid():
            msg = f"Position {self.index} is outside of the configuration list."
            raise InvalidPositionError(msg)
        return self.container[self.index]

    def key(self) -> int | None:
        return self.index if self.valid() else None

    def next(self) -> None:
        self.index += 1

    def rewind(self) -> None:
        self.index = 0

    def seek(self, position: int) -> None:
        if not 0 <= position < len(self.container):
            msg = f"Invalid configuration list position {position}."
            raise InvalidPositionError(msg)
        self.index = position

    def has_children(self) -> bool:
        return self.valid() and len(self.current().children()) > 0

    def get_children(self) -> PositionHandle:
        if self.valid():
            return PositionHandle(self.current().children())
        return PositionHandle(ConfigurationList())

    def __repr__(self) -> str:
        return f"PositionHandle(index={self.index}, size={len(self.container)})"


class ConfigurationList(cabc.MutableSequence[ConfigItem]):
    """Ordered list of configuration items with tree-wide search and edits."""

    __slots__ = ("_items",)

    def __init__(self, items: typ.Any = None) -> None:
        self._items: list[ConfigItem] = _validate_list(items)

    def content(self) -> list[ConfigItem]:
        """Return the underlying list for in-place bulk rewrites."""
        return self._items

    def detach(self) -> ConfigurationList:
        """Move every item into a new list and reset this one to empty."""
        detached = ConfigurationList()
        detached._items, self._items = self._items, []
        return detached

    def front(self) -> ConfigItem:
        return self._items[0]

    def back(self) -> ConfigItem:
        return self._items[-1]

    def find(self, name: str) -> PositionHandle:
        """Locate the first node called ``name`` in depth-first pre-order.

        The returned handle is not valid when no node matches.
        """
        stack = [PositionHandle(self)]
        while stack[-1].valid() and stack[-1].current().name != name:
            if stack[-1].has_children():
                stack.append(stack[-1].get_children())
            else:
                stack[-1].next()
            while len(stack) > 1 and not stack[-1].valid():
                stack.pop()
                stack[-1].next()
        return stack[-1]

    def add(
        self, cfg: typ.Any, after: str | int | PositionHandle | None = None
    ) -> PositionHandle:
        """Insert ``cfg`` and return a handle to the last inserted item.

        Without ``after`` the items are appended; an integer splices them at
        that index of this list; a name or handle inserts them right behind
        the target, inside the target's own list.
        """
        to_add = _validate_list(cfg)
        if after is None:
            self._items.extend(to_add)
            return PositionHandle(self, len(self._items) - 1)
        if isinstance(after, int) and not isinstance(after, bool):
            if after < 0:
                msg = f"Cannot insert at negative position {after}."
                raise InvalidPositionError(msg)
            self._items[after:after] = to_add
            return PositionHandle(self, after + len(to_add) - 1)
        target = self._check_and_find(after)
        position = target.index + 1
        target.container.content()[position:position] = to_add
        return PositionHandle(target.container, target.index + len(to_add))

    def remove(  # type: ignore[override]
        self, target: str | PositionHandle, count: int | None = None
    ) -> ConfigItem | ConfigurationList:
        """Cut one item (returned as is) or ``count`` items (as a list)."""
        handle = self._check_and_find(target)
        items = handle.container.content()
        stop = handle.index + (1 if count is None else count)
        cut = items[handle.index : stop]
        del items[handle.index : stop]
        if count is None:
            return cut[0]
        return ConfigurationList(cut)

    def replace(
        self, target: str | PositionHandle, replacement: typ.Any, count: int = 1
    ) -> PositionHandle:
        """Replace ``count`` items starting at ``target`` with ``replacement``."""
        handle = self._check_and_find(target)
        repl = _validate_list(replacement)
        items = handle.container.content()
        items[handle.index : handle.index + count] = repl
        return PositionHandle(handle.container, handle.index + len(repl) - 1)

    def _check_and_find(self, key: str | PositionHandle) -> PositionHandle:
        match key:
            case str():
                handle = self.find(key)
                if not handle.valid():
                    msg = f"Element '{key}' not found."
                    raise NodeNotFoundError(msg)
                return handle
            case PositionHandle():
                if not key.valid():
                    msg = "Provided position handle is not valid."
                    raise InvalidPositionError(msg)
                return key
            case _:
                msg = f"Invalid position reference {key!r}."
                raise InvalidPositionError(msg)

    def __getitem__(self, index):  # type: ignore[override]
        return self._items[index]

    def __setitem__(self, index, value) -> None:  # type: ignore[override]
        if isinstance(index, slice):
            self._items[index] = _validate_list(list(value))
        else:
            self._items[index] = _validate_value(value)

    def __delitem__(self, index) -> None:  # type: ignore[override]
        del self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def insert(self, index: int, value: typ.Any) -> None:
        self._items.insert(index, _validate_value(value))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConfigurationList):
            return NotImplemented
        return self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ConfigurationList({self._items!r})"


def _validate_value(value: typ.Any) -> ConfigItem:
    """Turn a single input value into a configuration item."""
    match value:
        case ConfigurationNode() | HtmlItem() | TextItem():
            return value
        case cabc.Mapping():
            return ConfigurationNode(value)
        case MarkupNode():
            return HtmlItem(value)
        case str():
            return TextItem(value)
        case _:
            msg = f"Invalid form configuration input of type {type(value).__name__}."
            raise MalformedConfigError(msg)


def _validate_list(items: typ.Any) -> list[ConfigItem]:
    """Turn a single item or a sequence of items into a list of configuration items."""
    match items:
        case None:
            return []
        case ConfigurationList():
            return list(items.content())
        case ConfigurationNode() | HtmlItem() | TextItem() | MarkupNode() | str():
            return [_validate_value(items)]
        case cabc.Mapping():
            return [_validate_value(items)] if items else []
        case list() | tuple():
            return [_validate_value(item) for item in items]
        case _:
            msg = f"Invalid form configuration input of type {type(items).__name__}."
            raise MalformedConfigError(msg)


__all__ = [
    "ConfigItem",
    "ConfigurationList",
    "ConfigurationNode",
    "HtmlItem",
    "PositionHandle",
    "TextItem",
]
