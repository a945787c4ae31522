"""Composite form entries: control, label and error message in one wrapper.

Every field type without a dedicated variant is rendered by :class:`Element`
as::

    <p id="Boxcity" class="text">
      <label for="Inputcity">City</label>
      <input type="text" name="city" id="Inputcity" value="">
    </p>
"""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from .._constants import ARRAY_SUFFIX
from .atomic import Atomic, AtomicContainer, Hidden
from .base import Base, ObjectInfo, as_config, canonical_name
from .registry import FALLBACK_TYPE, register

if typ.TYPE_CHECKING:
    from ..config.models import ConfigurationNode

    ConfigInput = ConfigurationNode | cabc.Mapping[str, typ.Any]


def _text_content(value: typ.Any) -> str | None:
    if value is None or isinstance(value, str):
        return value
    return str(value)


@register(FALLBACK_TYPE)
class Element(Base):
    """Wrap a leaf control together with its label and error message."""

    inherit: typ.ClassVar[tuple[str, ...]] = (
        "values",
        "invalid",
        "errmsg",
        "idmanager",
        "fscollect",
        "labels",
        "type",
        "name",
        "fixed",
    )

    def __init__(
        self,
        data: ConfigInput,
        html_attr: cabc.Mapping[str, typ.Any] | None = None,
    ) -> None:
        data = as_config(data)
        selection = data.pop("selection", None) or {}

        super().__init__(data, html_attr)

        params = {
            key: self.params[key]
            for key in self.inherit
            if self.params.get(key) is not None
        }
        factory: type[Atomic] = Atomic
        if selection:
            params["selection"] = selection
            factory = AtomicContainer
        passthrough = {key: value for key, value in self.attrs.items() if key != "id"}
        control = factory({**passthrough, **params})

        caption = self.params.get("label")
        label = Atomic(
            {
                "tag": "label",
                "name": self.params.get("name"),
                "for": control.element_id,
                "content": _text_content(caption),
            }
        )

        css_classes = [self.params.get("type"), self.attrs.get("class")]
        self.attrs = {
            "id": self.element_id,
            "class": " ".join(str(item) for item in css_classes if item) or None,
        }

        self.push(label)
        if self.get_value("invalid"):
            message = self.get_value("errmsg")
            self.push(
                Atomic(
                    {
                        "tag": "span",
                        "class": "error",
                        "content": _text_content(message),
                    }
                )
            )
        self.push(control)

        # browsers do not submit disabled controls, keep the value in a hidden one
        if control.attrs.get("disabled"):
            self.push(
                Hidden({"name": params.get("name"), "values": params.get("values")})
            )

    def object_info(self) -> ObjectInfo:
        return {"tag": self.params.get("tag") or "p", "prefix": "Box"}

    def render(self, indent: int = 0, shift: int = 2) -> str:
        if not self.content:
            return ""
        return super().render(indent, shift)


@register("File")
class File(Element):
    """File upload field that carries an already stored path as hidden value."""

    param_keys = Element.param_keys | {"display"}

    def __init__(self, data: ConfigInput) -> None:
        data = as_config(data)
        values = data.pop("values", None) or {}
        data["type"] = "file"

        super().__init__(data)

        raw_name = self.params.get("name") or ""
        name = canonical_name(raw_name)
        hidden_name = f"{name}{ARRAY_SUFFIX}" if raw_name.endswith(ARRAY_SUFFIX) else name
        current = values.get(name) if isinstance(values, cabc.Mapping) else None
        if isinstance(current, (list, tuple)):
            current = current[0] if current else None

        if self.params.get("fixed") and current:
            self.content = [Hidden({"name": hidden_name, "value": current})]
        elif current is not None:
            self.push(Hidden({"name": hidden_name, "value": current}))

        for item in self.params.get("display") or ():
            self.push(item)


@register("Checkbox")
class Checkbox(Element):
    """Checkbox that is checked when its ``value`` is among the bound values."""

    def __init__(self, data: ConfigInput) -> None:
        data = as_config(data)
        name = canonical_name(data.get("name"))
        values = data.get("values")
        bound = values.get(name) if isinstance(values, cabc.Mapping) else None
        own_value = data.get("value")
        if own_value is not None and bound is not None:
            candidates = bound if isinstance(bound, (list, tuple)) else [bound]
            if str(own_value) in {str(item) for item in candidates}:
                data["checked"] = "checked"
        data["values"] = {}
        super().__init__(data)


__all__ = ["Checkbox", "Element", "File"]
