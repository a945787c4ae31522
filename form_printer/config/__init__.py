"""Configuration trees describing forms, and their YAML loader.

This subpackage holds the mutable configuration tree the printer consumes
(:class:`ConfigurationNode`, :class:`ConfigurationList` and the
:class:`PositionHandle` cursor) and :func:`load_form_config`, which reads a
YAML form document into that tree.

Examples
--------
>>> from form_printer.config import ConfigurationList
>>> fields = ConfigurationList([{"type": "text", "name": "city"}])
>>> fields.replace("city", [{"type": "text", "name": "zip"}]).current().name
'zip'
"""

from .loader import FormDocument, load_form_config, load_form_state
from .models import (
    ConfigItem,
    ConfigurationList,
    ConfigurationNode,
    HtmlItem,
    PositionHandle,
    TextItem,
)

__all__ = [
    "ConfigItem",
    "ConfigurationList",
    "ConfigurationNode",
    "FormDocument",
    "HtmlItem",
    "PositionHandle",
    "TextItem",
    "load_form_config",
    "load_form_state",
]
