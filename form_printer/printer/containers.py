"""Grouping variants with arbitrarily deep configured content."""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from ..errors import MalformedConfigError
from ..markup import render_content
from .atomic import Atomic
from .base import Base, ChildBuilderMixin, ObjectInfo, as_config
from .registry import register

if typ.TYPE_CHECKING:
    from ..config.models import ConfigurationNode

    ConfigInput = ConfigurationNode | cabc.Mapping[str, typ.Any]


@register("Container")
class Container(ChildBuilderMixin, Base):
    """Render node whose children are built from the configured ``content``.

    The children are detached from ``config`` first, so each configuration
    item is consumed exactly once. The generic variant takes its tag from the
    ``tag`` parameter.
    """

    def __init__(
        self,
        config: ConfigInput,
        html_attr: cabc.Mapping[str, typ.Any] | None = None,
    ) -> None:
        config = as_config(config)
        children = config.detach()
        super().__init__(config, html_attr)
        for item in children:
            self.push(self.build_child(item))

    def object_info(self) -> ObjectInfo:
        tag = self.params.get("tag")
        return {"tag": tag, "prefix": tag}


@register("Fieldset")
class Fieldset(Container):
    """``fieldset`` with a legend, registered in the navigation menu."""

    def __init__(self, config: ConfigInput) -> None:
        super().__init__(config)
        caption = self.params.get("label")
        self.unshift(
            Atomic({"tag": "legend", "content": None if caption is None else str(caption)})
        )
        ids = self.params.get("idmanager")
        if self.element_id is None and caption is not None and ids is not None:
            self.attrs["id"] = ids.create_id(f"Fs{caption}")
        collector = self.params.get("fscollect")
        if collector is not None and caption is not None and self.element_id is not None:
            collector.add(str(caption), self.element_id)

    def object_info(self) -> ObjectInfo:
        return {"tag": "fieldset", "prefix": "Fs"}


@register("Div")
class Div(Container):
    """``div`` container; with ``transparent`` set only its content is rendered."""

    param_keys = Container.param_keys | {"transparent"}

    def object_info(self) -> ObjectInfo:
        return {"tag": "div", "prefix": "div"}

    def render(self, indent: int = 0, shift: int = 2) -> str:
        if not self.params.get("transparent"):
            return super().render(indent, shift)
        return "".join(render_content(item, indent, shift) for item in self.content)


@register("Buttonbox")
class Buttonbox(Base):
    """Row of form buttons rendered without whitespace between them.

    ``buttons`` maps a button type to either its caption or a mapping of
    button names to captions::

        {"submit": "Save", "reset": "Reset"}
        {"submit": {"save": "Save", "delete": "Delete"}}
    """

    def __init__(self, data: ConfigInput) -> None:
        data = as_config(data)
        buttons = data.pop("buttons", None) or {}

        super().__init__(data)

        for button_type, definition in buttons.items():
            match definition:
                case str():
                    self.push(Atomic({"type": button_type, "value": definition}))
                case cabc.Mapping():
                    for name, caption in definition.items():
                        self.push(
                            Atomic({"type": button_type, "name": name, "value": caption})
                        )
                case _:
                    msg = f"Invalid value in button box: {definition!r}."
                    raise MalformedConfigError(msg)

        self.skip_ws = True

    def object_info(self) -> ObjectInfo:
        return {"tag": "div", "prefix": "Box"}


__all__ = ["Buttonbox", "Container", "Div", "Fieldset"]
