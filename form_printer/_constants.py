"""Common literal values used across form_printer.

These constants keep the markers and defaults shared by the configuration
tree, the render variants and the CLI in one place.

Examples
--------
>>> from form_printer import _constants
>>> "rows[]".endswith(_constants.ARRAY_SUFFIX)
True
>>> _constants.DEFAULT_NAV_THRESHOLD
5
"""

ARRAY_SUFFIX = "[]"
DEFAULT_NAV_THRESHOLD = 5
DEFAULT_INDENT_SHIFT = 2
