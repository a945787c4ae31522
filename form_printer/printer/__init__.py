"""Render variants turning configuration trees into form markup.

Importing this package registers every variant with
:mod:`form_printer.printer.registry`; :class:`Printer` is the entry point
that builds a whole ``<form>``.
"""

from .array_group import ArrayGroup, Table
from .atomic import Atomic, AtomicContainer, Cell, Hidden, Label, Submit
from .base import Base, ChildBuilderMixin
from .containers import Buttonbox, Container, Div, Fieldset
from .element import Checkbox, Element, File
from .ids import IdManager, NavCollector, NavEntry
from .registry import build, registered_types, resolve
from .root import Printer

__all__ = [
    "ArrayGroup",
    "Atomic",
    "AtomicContainer",
    "Base",
    "Buttonbox",
    "Cell",
    "Checkbox",
    "ChildBuilderMixin",
    "Container",
    "Div",
    "Element",
    "Fieldset",
    "File",
    "Hidden",
    "IdManager",
    "Label",
    "NavCollector",
    "NavEntry",
    "Printer",
    "Submit",
    "Table",
    "build",
    "registered_types",
    "resolve",
]
