"""Shared construction protocol for every render variant.

:class:`Base` turns one :class:`~form_printer.config.ConfigurationNode` into a
:class:`~form_printer.markup.MarkupNode`: recognized parameters are split off
into :attr:`Base.params`, everything else becomes a markup attribute, and
named nodes receive a unique DOM id and a default label.
"""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from .._constants import ARRAY_SUFFIX
from ..config.models import ConfigurationNode, HtmlItem, TextItem
from ..errors import MalformedConfigError, MissingObjectInfoError
from ..markup import Content, MarkupNode
from . import registry

if typ.TYPE_CHECKING:
    from ..config.models import ConfigItem

PARAMETER_KEYS = frozenset(
    {
        "name",
        "type",
        "values",
        "invalid",
        "errmsg",
        "label",
        "idmanager",
        "fscollect",
        "labels",
        "tag",
        "prefix",
        "fixed",
    }
)
CONTEXT_KEYS = ("values", "invalid", "errmsg", "idmanager", "fscollect", "labels")
OBJECT_INFO_KEYS = ("prefix", "tag")

ObjectInfo = cabc.Mapping[str, typ.Any]


def as_config(data: ConfigurationNode | cabc.Mapping[str, typ.Any]) -> ConfigurationNode:
    """Return ``data`` as a configuration node, wrapping plain mappings."""
    if isinstance(data, ConfigurationNode):
        return data
    return ConfigurationNode(data)


def canonical_name(name: str | None) -> str | None:
    """Strip the array marker from a field name."""
    if name is not None and name.endswith(ARRAY_SUFFIX):
        return name[: -len(ARRAY_SUFFIX)]
    return name


class Base(MarkupNode):
    """Render node built from a configuration node.

    Subclasses provide :meth:`object_info`, returning the markup ``tag`` and
    the id ``prefix`` (``None`` when the variant never gets an id).
    """

    param_keys: typ.ClassVar[frozenset[str]] = PARAMETER_KEYS

    def __init__(
        self,
        config: ConfigurationNode | cabc.Mapping[str, typ.Any],
        html_attr: cabc.Mapping[str, typ.Any] | None = None,
    ) -> None:
        config = as_config(config)
        super().__init__("", html_attr)
        for item in config.children():
            self.push(_unwrap(item))

        self.params: dict[str, typ.Any] = {}
        for key, value in config.items():
            if key in self.param_keys:
                self.params[key] = value
            else:
                self.attrs[key] = value

        info = self.object_info()
        missing = [key for key in OBJECT_INFO_KEYS if key not in info]
        if missing or info["tag"] is None:
            msg = (
                f"{type(self).__name__} is missing object information: "
                f"{', '.join(missing) or 'tag'}."
            )
            raise MissingObjectInfoError(msg)
        self.tag = info["tag"]

        if self.params.get("name") is not None:
            ids = self.params.get("idmanager")
            prefix = info["prefix"]
            if ids is not None and prefix is not None and "id" not in self.attrs:
                self.attrs["id"] = ids.create_id(f"{prefix}{self.params['name']}")
            if "label" not in self.params:
                self.params["label"] = self.display_label()

    def object_info(self) -> ObjectInfo:
        """Return the ``tag`` and id ``prefix`` of this variant.

        Variants that do not override this end up without either key and are
        rejected at construction.
        """
        return {}

    @property
    def name(self) -> str | None:
        """Canonical field name, without a trailing ``[]``."""
        return canonical_name(self.params.get("name"))

    @property
    def element_id(self) -> str | None:
        return self.attrs.get("id")

    def display_label(self) -> str | None:
        """Return the caption for this field, resolved through the label lookup."""
        labels = self.params.get("labels")
        if labels is None or self.name is None:
            return self.name
        return labels.get(self.name)

    def get_value(self, key: str = "values") -> typ.Any:
        """Return the bound entry of lookup ``key`` for this field.

        Single element lists are unwrapped to their only item.
        """
        lookup = self.params.get(key)
        value = None
        if isinstance(lookup, cabc.Mapping) and self.name in lookup:
            value = lookup[self.name]
        if isinstance(value, (list, tuple)) and len(value) == 1:
            value = value[0]
        return value


class ChildBuilderMixin:
    """Build render nodes for nested configuration items."""

    inherit: typ.ClassVar[tuple[str, ...]] = CONTEXT_KEYS
    params: dict[str, typ.Any]

    def build_child(self, item: ConfigItem) -> Content:
        """Return the render node (or text) for one configuration item.

        Configuration nodes inherit the shared context parameters unless they
        define them already.
        """
        match item:
            case HtmlItem():
                return item.element
            case TextItem():
                return item.text
            case ConfigurationNode():
                registry.require_type(item)
                for key in self.inherit:
                    if key not in item:
                        item[key] = self.params.get(key)
                return registry.build(item)
            case _:
                msg = f"Cannot build a render node from {item!r}."
                raise MalformedConfigError(msg)


def _unwrap(item: ConfigItem) -> Content:
    match item:
        case HtmlItem():
            return item.element
        case TextItem():
            return item.text
        case _:
            msg = "Leaf content must be pre-built markup or text, not a configuration node."
            raise MalformedConfigError(msg)


__all__ = [
    "CONTEXT_KEYS",
    "PARAMETER_KEYS",
    "Base",
    "ChildBuilderMixin",
    "ObjectInfo",
    "as_config",
    "canonical_name",
]
