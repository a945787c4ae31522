"""Exception types raised while building and rendering form configurations."""

from __future__ import annotations


class FormPrinterError(ValueError):
    """Base class for every error raised by form_printer."""


class MalformedConfigError(FormPrinterError):
    """Raised when configuration input has an unsupported shape."""


class MissingTypeError(FormPrinterError):
    """Raised when a content node does not declare its ``type``."""


class MissingObjectInfoError(FormPrinterError):
    """Raised when a render variant does not provide its tag/prefix metadata."""


class NodeNotFoundError(FormPrinterError, LookupError):
    """Raised when a named node cannot be located in a configuration tree."""


class InvalidPositionError(FormPrinterError, LookupError):
    """Raised when a position handle does not point at an existing node."""


class FormConfigError(FormPrinterError):
    """Raised when a YAML form document is invalid or incomplete."""


__all__ = [
    "FormConfigError",
    "FormPrinterError",
    "InvalidPositionError",
    "MalformedConfigError",
    "MissingObjectInfoError",
    "MissingTypeError",
    "NodeNotFoundError",
]
