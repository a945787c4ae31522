"""Label lookup used wherever a human readable caption is needed.

Translation itself happens elsewhere; the printer only calls
:meth:`LabelHandler.get`. :class:`DummyLabelHandler` returns keys unchanged
and :class:`MappingLabelHandler` resolves them from a dictionary, optionally
loaded from YAML:

>>> labels = MappingLabelHandler({"form.city": "City", "zip": "Postcode"})
>>> labels.get("city", "form"), labels.get("zip"), labels.get("street")
('City', 'Postcode', 'street')
"""

from __future__ import annotations

import collections.abc as cabc
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML


@typ.runtime_checkable
class LabelHandler(typ.Protocol):
    """Resolve a caption for ``key`` within an optional ``category``."""

    def get(self, key: str, category: str = "") -> str: ...


class DummyLabelHandler:
    """Label handler that uses the lookup key as caption."""

    def get(self, key: str, category: str = "") -> str:
        return key


class MappingLabelHandler:
    """Label handler backed by a flat ``"category.key" -> caption`` mapping."""

    def __init__(
        self,
        labels: cabc.Mapping[str, str] | None = None,
        *,
        not_found_template: str = "{key}",
    ) -> None:
        self.labels: dict[str, str] = dict(labels or {})
        self.not_found_template = not_found_template
        self.missing: dict[str, int] = {}

    @classmethod
    def from_path(cls, path: Path, **kwargs: typ.Any) -> MappingLabelHandler:
        """Load labels from a YAML file.

        Nested mappings are flattened, so ``{"form": {"city": "City"}}`` is
        looked up as ``form.city``.

        Raises
        ------
        FileNotFoundError
            If ``path`` does not exist.
        TypeError
            If the document is not a mapping.
        """
        if not path.exists():
            msg = f"Label file '{path}' not found."
            raise FileNotFoundError(msg)
        loader = YAML(typ="safe")
        loader.version = (1, 2)
        with path.open("r", encoding="utf-8") as handle:
            loaded = loader.load(handle) or {}
        if not isinstance(loaded, dict):
            msg = "Top-level YAML structure of a label file must be a mapping."
            raise TypeError(msg)
        return cls(_flatten(loaded), **kwargs)

    def get(self, key: str, category: str = "") -> str:
        lookup = f"{category}.{key}" if category else key
        if lookup in self.labels:
            return self.labels[lookup]
        if key in self.labels:
            return self.labels[key]
        self.missing[lookup] = self.missing.get(lookup, 0) + 1
        return self.not_found_template.format(key=key)


def _flatten(payload: cabc.Mapping[str, typ.Any], prefix: str = "") -> dict[str, str]:
    result: dict[str, str] = {}
    for key, value in payload.items():
        full_key = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, cabc.Mapping):
            result.update(_flatten(value, full_key))
        elif value is not None:
            result[full_key] = str(value)
    return result


__all__ = ["DummyLabelHandler", "LabelHandler", "MappingLabelHandler"]
