"""Validator-like field state consumed by the form printer.

The printer never validates input itself. It reads the submitted values,
validity flags and error messages from any object shaped like
:class:`FieldStateSource`, for example the :class:`FormState` dataclass.
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import typing as typ


@typ.runtime_checkable
class FieldStateSource(typ.Protocol):
    """Per-field values, validity flags and error messages."""

    data: cabc.Mapping[str, typ.Any]
    msg: cabc.Mapping[str, typ.Any]
    is_valid: cabc.Mapping[str, typ.Any]


@dc.dataclass(slots=True)
class FormState:
    """Plain container implementing :class:`FieldStateSource`.

    Attributes
    ----------
    data : dict[str, Any]
        Field values keyed by canonical field name; array fields map to lists.
    msg : dict[str, Any]
        Error messages for invalid fields.
    is_valid : dict[str, Any]
        Validity flag per checked field; fields not listed count as valid.
    """

    data: dict[str, typ.Any] = dc.field(default_factory=dict)
    msg: dict[str, typ.Any] = dc.field(default_factory=dict)
    is_valid: dict[str, typ.Any] = dc.field(default_factory=dict)

    def invalidate(self, field: str, message: str) -> None:
        """Mark ``field`` invalid with ``message``."""
        self.is_valid[field] = False
        self.msg[field] = message


def invert_validity(flags: cabc.Mapping[str, typ.Any]) -> dict[str, typ.Any]:
    """Turn a validity mapping into the ``invalid`` lookup used by render nodes.

    >>> invert_validity({"a": True, "b": False, "rows": [True, False]})
    {'a': False, 'b': True, 'rows': [False, True]}
    """
    inverted: dict[str, typ.Any] = {}
    for field, flag in flags.items():
        if isinstance(flag, (list, tuple)):
            inverted[field] = [not item for item in flag]
        else:
            inverted[field] = not flag
    return inverted


__all__ = ["FieldStateSource", "FormState", "invert_validity"]
