"""Type tag → render variant registry.

Variants register themselves with :func:`register` when
:mod:`form_printer.printer` is imported. Lookups use the capitalized type
tag (``"fieldset"`` and ``"FIELDSET"`` both resolve ``"Fieldset"``); unknown
tags fall back to the generic ``Element`` composite.
"""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from ..errors import MissingTypeError

if typ.TYPE_CHECKING:
    from ..config.models import ConfigurationNode
    from .base import Base

    RendererFactory = cabc.Callable[[ConfigurationNode], Base]

FALLBACK_TYPE = "Element"

_REGISTRY: dict[str, RendererFactory] = {}


def type_key(type_name: str) -> str:
    """Return the registry key for ``type_name``."""
    return str(type_name).capitalize()


def register(*type_names: str) -> cabc.Callable[[type], type]:
    """Class decorator registering a variant under one or more type tags."""

    def _decorator(cls: type) -> type:
        for type_name in type_names:
            _REGISTRY[type_key(type_name)] = cls
        return cls

    return _decorator


def resolve(type_name: str) -> RendererFactory:
    """Return the factory registered for ``type_name`` or the fallback."""
    factory = _REGISTRY.get(type_key(type_name))
    if factory is None:
        factory = _REGISTRY[FALLBACK_TYPE]
    return factory


def registered_types() -> dict[str, RendererFactory]:
    """Return a snapshot of the registered variants."""
    return dict(_REGISTRY)


def require_type(config: ConfigurationNode) -> str:
    """Return the node's ``type`` or raise :class:`MissingTypeError`."""
    type_name = config.get("type")
    if type_name is None:
        msg = f"Type is missing in element description {config!r}."
        raise MissingTypeError(msg)
    return type_name


def build(config: ConfigurationNode) -> Base:
    """Instantiate the render variant matching ``config['type']``."""
    return resolve(require_type(config))(config)


__all__ = [
    "FALLBACK_TYPE",
    "build",
    "register",
    "registered_types",
    "require_type",
    "resolve",
    "type_key",
]
