"""Repeating row groups bound to parallel value arrays.

An :class:`ArrayGroup` renders its field templates once per row. The bound
values of the fields are parallel lists (one entry per stored row), so a
group over ``{"qty": ["1", "2"], "item": ["nut", "bolt"]}`` renders two rows
plus, by default, one blank row for new input. Fields whose lists are shorter
than the longest one are padded with empty strings first, so every row
describes the same set of fields.

Checkbox fields take no part in the length alignment: every row receives
the complete list of checked values and each checkbox decides on its own
whether its ``value`` is among them.
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import typing as typ

from ..config.models import ConfigurationNode
from ..errors import MissingTypeError
from ..markup import MarkupNode
from . import registry
from .atomic import Atomic
from .base import Base, ChildBuilderMixin, ObjectInfo, as_config, canonical_name
from .registry import register

if typ.TYPE_CHECKING:
    from ..config.models import ConfigItem
    from .registry import RendererFactory

    ConfigInput = ConfigurationNode | cabc.Mapping[str, typ.Any]

VALUE_KEYS = ("values", "invalid", "errmsg")


def _is_array(value: typ.Any) -> bool:
    return isinstance(value, (list, tuple))


def _is_checkbox(node: cabc.Mapping[str, typ.Any]) -> bool:
    return str(node.get("type")).lower() == "checkbox"


@dc.dataclass(slots=True)
class _FieldNames:
    """Canonical names of every named field below a group."""

    names: dict[str, None] = dc.field(default_factory=dict)
    aligned: dict[str, None] = dc.field(default_factory=dict)

    def collect(self, items: cabc.Iterable[ConfigItem]) -> None:
        for item in items:
            if not isinstance(item, ConfigurationNode):
                continue
            if item.get("name") is not None:
                name = canonical_name(str(item["name"]))
                self.names[name] = None
                if not _is_checkbox(item):
                    self.aligned[name] = None
            self.collect(item.children())


@dc.dataclass(slots=True)
class _RowTemplate:
    """A field template with its per-row properties pulled out."""

    node: ConfigurationNode
    factory: RendererFactory
    split: dict[str, list[typ.Any]]


@register("ArrayGroup")
class ArrayGroup(ChildBuilderMixin, Base):
    """Unordered list with one ``li`` per row of bound values."""

    split_keys: typ.ClassVar[tuple[str, ...]] = ("value", "text")

    def __init__(self, config: ConfigInput, *, add_empty: bool | None = None) -> None:
        config = as_config(config)
        configured_add_empty = config.pop("addempty", True)
        if add_empty is None:
            add_empty = bool(configured_add_empty)
        templates = config.detach()
        config.setdefault("name", None)

        super().__init__(config)

        fields = _FieldNames()
        fields.collect(templates)
        length = self._align_lengths(fields)
        prepared = [self._prepare(item) for item in templates]

        for index in range(length + (1 if add_empty else 0)):
            row = [
                node
                for node in (self._build_entry(item, fields, index) for item in prepared)
                if node is not None
            ]
            self.push(self._wrap_row(row))

    def object_info(self) -> ObjectInfo:
        return {"tag": "ul", "prefix": "Group"}

    def _align_lengths(self, fields: _FieldNames) -> int:
        """Pad the bound arrays of all aligned fields to a common length.

        The padded lookups replace the group's own parameters, so the
        caller's mappings are left untouched.
        """
        lookups: list[dict[str, typ.Any]] = []
        for key in VALUE_KEYS:
            lookup = self.params.get(key)
            if isinstance(lookup, cabc.Mapping):
                self.params[key] = dict(lookup)
                lookups.append(self.params[key])

        length = 0
        for lookup in lookups:
            for name in fields.aligned:
                if _is_array(lookup.get(name)):
                    length = max(length, len(lookup[name]))

        for lookup in lookups:
            for name in fields.aligned:
                entries = lookup.get(name)
                if _is_array(entries) and len(entries) < length:
                    lookup[name] = [*entries, *[""] * (length - len(entries))]
        return length

    def _prepare(self, item: ConfigItem) -> _RowTemplate:
        if not isinstance(item, ConfigurationNode):
            msg = f"Type is missing in array group entry {item!r}."
            raise MissingTypeError(msg)
        factory = registry.resolve(registry.require_type(item))
        split = {
            key: list(item.pop(key))
            for key in self.split_keys
            if _is_array(item.get(key))
        }
        return _RowTemplate(node=item, factory=factory, split=split)

    def _build_entry(
        self, template: _RowTemplate, fields: _FieldNames, index: int
    ) -> Base | None:
        """Instantiate one field for row ``index``, or ``None`` to skip it."""
        node = template.node.copy()
        for key, entries in template.split.items():
            if index >= len(entries):
                return None
            node[key] = entries[index]

        whole = _is_checkbox(node)
        for key in self.inherit:
            param = self.params.get(key)
            if not isinstance(param, cabc.Mapping):
                node[key] = param
                continue
            node[key] = {
                name: _row_value(param, name, index, whole=whole) for name in fields.names
            }
        return template.factory(node)

    def _wrap_row(self, row: list[Base]) -> Atomic:
        return Atomic(
            {
                "tag": "li",
                "name": f"{self.params.get('name') or ''}[]",
                "prefix": "Entry",
                "idmanager": self.params.get("idmanager"),
                "fscollect": self.params.get("fscollect"),
                "content": row,
            }
        )


def _row_value(
    lookup: cabc.Mapping[str, typ.Any], name: str, index: int, *, whole: bool
) -> typ.Any:
    value = lookup.get(name)
    if value is None:
        return None
    if not _is_array(value) or whole:
        return value
    if index >= len(value):
        return ""
    return value[index]


@register("Table")
class Table(ArrayGroup):
    """Array group laid out as a table with a header row of field labels."""

    def __init__(self, config: ConfigInput) -> None:
        config = as_config(config)
        headers = [
            MarkupNode("th", {}, _header_caption(item)) for item in config.children()
        ]
        config.pop("addempty", None)

        super().__init__(config, add_empty=False)

        for row in self.content:
            if isinstance(row, MarkupNode):
                row.tag = "tr"
        self.content = [MarkupNode("tbody", {}, self.content)]
        self.unshift(MarkupNode("thead", {}, [MarkupNode("tr", {}, headers)]))

    def object_info(self) -> ObjectInfo:
        return {"tag": "table", "prefix": "view"}


def _header_caption(item: ConfigItem) -> str | None:
    if not isinstance(item, ConfigurationNode):
        return None
    label = item.get("label")
    if label is not None:
        return label if isinstance(label, str) else str(label)
    return canonical_name(item.name)


__all__ = ["VALUE_KEYS", "ArrayGroup", "Table"]
