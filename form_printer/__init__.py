"""Render HTML forms from declarative configuration trees.

A form is described as nested mappings (usually loaded from YAML); the
:class:`~form_printer.printer.Printer` turns that tree into a ``<form>``
markup node bound to submitted values, validity flags and error messages.

>>> from form_printer import Printer
>>> print(Printer({"name": "search", "content": [{"type": "submit", "value": "Go"}]}))
<form id="Formsearch" method="post"><input type="submit" value="Go"></form>
"""

from .cli import app, main
from .config import (
    ConfigurationList,
    ConfigurationNode,
    FormDocument,
    PositionHandle,
    load_form_config,
    load_form_state,
)
from .errors import FormPrinterError
from .labels import DummyLabelHandler, MappingLabelHandler
from .markup import MarkupNode, render
from .page import FormPageBuilder
from .printer import Printer
from .validation import FormState

__all__ = [
    "ConfigurationList",
    "ConfigurationNode",
    "DummyLabelHandler",
    "FormDocument",
    "FormPageBuilder",
    "FormPrinterError",
    "FormState",
    "MappingLabelHandler",
    "MarkupNode",
    "PositionHandle",
    "Printer",
    "app",
    "load_form_config",
    "load_form_state",
    "main",
    "render",
]
