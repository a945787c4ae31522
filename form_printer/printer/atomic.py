"""Leaf variants: single form controls and their option lists.

:class:`Atomic` renders one control (``input``, ``textarea``, ``option``,
``label`` …) and binds its value; :class:`AtomicContainer` adds ``option``
children for selection controls. The remaining classes are thin variants
that the container dispatch picks for specific type tags.
"""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from .base import Base, ObjectInfo, as_config
from .registry import register

if typ.TYPE_CHECKING:
    from ..config.models import ConfigurationNode

    ConfigInput = ConfigurationNode | cabc.Mapping[str, typ.Any]

PREFIXES: dict[str, str] = {
    "text": "Input",
    "checkbox": "Check",
    "submit": "Button",
    "reset": "Button",
    "textarea": "Input",
    "file": "File",
    "select": "Sel",
}
TYPES_AS_TAG = frozenset({"textarea"})
HTML_PARAMS: dict[str, tuple[str, ...]] = {
    "input": ("type", "name"),
    "textarea": ("name",),
    "select": ("name",),
}
HTML_DEFAULTS: dict[str, dict[str, str]] = {
    "input": {"value": ""},
    "hidden": {"value": ""},
    "password": {},
    "textarea": {"cols": "30", "rows": "5"},
    "file": {},
    "select": {"size": "1"},
}
TEXT_CONTAINERS = frozenset({"textarea", "p", "td", "th"})


def _as_text(value: typ.Any) -> str:
    return "" if value is None else str(value)


@register("Atomic")
class Atomic(Base):
    """A single form control with its bound value."""

    def __init__(self, data: ConfigInput) -> None:
        data = as_config(data)
        type_name = data.get("type")
        if data.get("tag") is None:
            data["tag"] = type_name if type_name in TYPES_AS_TAG else "input"
        defaults = HTML_DEFAULTS.get(type_name, HTML_DEFAULTS.get(data["tag"], {}))

        super().__init__(data, dict(defaults))

        for key in HTML_PARAMS.get(self.tag, ()):
            if self.params.get(key) is not None:
                self.attrs[key] = self.params[key]

        value = self.get_value()
        if value is None:
            if self.tag in TEXT_CONTAINERS:
                self.push("")
            return

        if self.tag in TEXT_CONTAINERS:
            self.push(_as_text(value))
        elif "value" in self.attrs and not isinstance(value, (list, tuple)):
            self.attrs["value"] = value

        if self.params.get("fixed") and value:
            self.attrs["disabled"] = True
            css_class = self.attrs.get("class")
            self.attrs["class"] = f"{css_class} fixed" if css_class else "fixed"

    def object_info(self) -> ObjectInfo:
        if self.params.get("prefix") is not None:
            prefix = self.params["prefix"]
        else:
            prefix = PREFIXES.get(self.params.get("type"))
        return {"tag": self.params["tag"], "prefix": prefix}


@register("AtomicContainer")
class AtomicContainer(Atomic):
    """Selection control (``select``) with one ``option`` per selection entry.

    Options listed in ``disabled_keys``, and every option of a disabled
    control, are left out unless they hold the currently bound value.
    """

    def __init__(self, data: ConfigInput) -> None:
        data = as_config(data)
        selection = data.pop("selection", None) or {}
        disabled_keys = {_as_text(key) for key in data.pop("disabled_keys", None) or ()}
        data["tag"] = data.get("type")

        super().__init__(data)

        selected = _as_text(self.get_value())
        entries = (
            selection.items()
            if isinstance(selection, cabc.Mapping)
            else enumerate(selection)
        )
        for key, caption in entries:
            option: dict[str, typ.Any] = {
                "tag": "option",
                "value": key,
                "content": [_as_text(caption)],
            }
            is_selected = _as_text(key) == selected
            if is_selected:
                option["selected"] = True
            excluded = bool(self.attrs.get("disabled")) or _as_text(key) in disabled_keys
            if is_selected or not excluded:
                self.push(Atomic(option))


@register("Hidden")
class Hidden(Atomic):
    """Hidden input, placed directly without label/wrapper."""

    def __init__(self, data: ConfigInput) -> None:
        data = as_config(data)
        data["type"] = "hidden"
        super().__init__(data)


@register("Submit", "Reset")
class Submit(Atomic):
    """Form button; its caption comes from the configuration, never from bound values."""

    def get_value(self, key: str = "values") -> typ.Any:
        if key == "values":
            return None
        return super().get_value(key)


@register("Label")
class Label(Atomic):
    """Static text paragraph, optionally preceded by a ``span.label`` caption."""

    param_keys = Atomic.param_keys | {"text"}

    def __init__(self, data: ConfigInput) -> None:
        data = as_config(data)
        data.setdefault("tag", "p")
        caption = data.get("label")
        super().__init__(data)
        if caption is not None:
            self.unshift(Atomic({"tag": "span", "class": "label", "content": f"{caption}: "}))
        if self.params.get("text") is not None:
            self.push(_as_text(self.params["text"]))
        # the empty placeholder is only needed while there is no other content
        if len(self.content) > 1:
            self.content = [item for item in self.content if item != ""]

    def object_info(self) -> ObjectInfo:
        return {"tag": self.params.get("tag") or "p", "prefix": "Lbl"}


@register("Cell")
class Cell(Atomic):
    """Table cell (``td``) showing the bound value as text."""

    def __init__(self, data: ConfigInput) -> None:
        data = as_config(data)
        data["tag"] = "td"
        super().__init__(data)


__all__ = [
    "HTML_DEFAULTS",
    "HTML_PARAMS",
    "PREFIXES",
    "TEXT_CONTAINERS",
    "Atomic",
    "AtomicContainer",
    "Cell",
    "Hidden",
    "Label",
    "Submit",
]
