"""Load form documents and field state from YAML into typed structures."""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from ..errors import FormConfigError
from ..validation import FormState
from .models import ConfigurationNode

STATE_SECTIONS = (("data", "values"), ("msg", "errors"), ("is_valid", "validity"))


@dc.dataclass(slots=True)
class FormDocument:
    """A form configuration together with its page-level settings."""

    title: str
    form: ConfigurationNode
    state: FormState | None = None
    request_path: str | None = None


def _load_mapping(path: Path, what: str) -> dict[str, typ.Any]:
    if not path.exists():
        msg = f"{what} file '{path}' not found."
        raise FileNotFoundError(msg)
    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    return dict(loaded)


def load_form_config(path: Path) -> FormDocument:
    """Load a YAML form document.

    Parameters
    ----------
    path : Path
        YAML file with a ``form`` section (the root configuration node) and
        optional ``title``, ``request_path`` and inline ``state`` sections.

    Returns
    -------
    FormDocument
        The parsed document; ``form`` is ready to be passed to
        :class:`~form_printer.printer.Printer`.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    TypeError
        If the top-level YAML structure is not a mapping.
    FormConfigError
        If the ``form`` section is missing or not a mapping.
    MalformedConfigError
        If a node of the form tree has an unsupported shape.

    Examples
    --------
    >>> from pathlib import Path
    >>> document = load_form_config(Path("forms/contact.yaml"))  # doctest: +SKIP
    >>> document.form.children().front()["type"]  # doctest: +SKIP
    'fieldset'
    """
    raw = _load_mapping(path, "Form configuration")
    form_raw = raw.get("form")
    if not isinstance(form_raw, cabc.Mapping):
        msg = f"Form configuration '{path}' has no 'form' mapping."
        raise FormConfigError(msg)

    state_raw = raw.get("state")
    state = _build_state(state_raw) if state_raw else None
    title = raw.get("title") or str(form_raw.get("name") or path.stem)

    return FormDocument(
        title=str(title),
        form=ConfigurationNode(form_raw),
        state=state,
        request_path=raw.get("request_path"),
    )


def load_form_state(path: Path) -> FormState:
    """Load submitted values, validity flags and messages from YAML.

    The document may use either the validator names (``data``, ``msg``,
    ``is_valid``) or the aliases ``values``, ``errors`` and ``validity``.
    """
    return _build_state(_load_mapping(path, "Form state"))


def _build_state(payload: cabc.Mapping[str, typ.Any]) -> FormState:
    if not isinstance(payload, cabc.Mapping):
        msg = "Form state must be a mapping."
        raise FormConfigError(msg)
    sections: dict[str, dict[str, typ.Any]] = {}
    for key, alias in STATE_SECTIONS:
        section = payload.get(key, payload.get(alias)) or {}
        if not isinstance(section, cabc.Mapping):
            msg = f"Form state section '{key}' must be a mapping."
            raise FormConfigError(msg)
        sections[key] = dict(section)
    return FormState(**sections)


__all__ = ["FormDocument", "load_form_config", "load_form_state"]
