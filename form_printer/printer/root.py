"""Root render node producing the ``<form>`` element.

Typical usage:

>>> from form_printer.printer import Printer
>>> from form_printer.validation import FormState
>>> form = Printer(
...     {
...         "name": "contact",
...         "content": [{"type": "text", "name": "city", "label": "City"}],
...     },
...     validator=FormState(data={"city": "Berlin"}),
... )
>>> print(form.render())
<form id="Formcontact" method="post">
  <p id="Boxcity" class="text">
    <label for="Inputcity">City</label>
    <input type="text" name="city" id="Inputcity" value="Berlin">
  </p>
</form>
"""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from .._constants import DEFAULT_NAV_THRESHOLD
from ..markup import MarkupNode
from ..validation import invert_validity
from .base import ObjectInfo, as_config
from .containers import Container
from .ids import IdManager, NavCollector

if typ.TYPE_CHECKING:
    from ..config.models import ConfigurationNode
    from ..labels import LabelHandler
    from ..validation import FieldStateSource

    PrintHook = cabc.Callable[["Printer"], None]

VALIDATOR_KEYS = (("data", "values"), ("msg", "errmsg"))


class Printer(Container):
    """Build a complete form from its configuration.

    Parameters
    ----------
    config : ConfigurationNode or Mapping
        Root configuration; ``content`` holds the form entries, other
        non-parameter keys become ``<form>`` attributes.
    validator : FieldStateSource, optional
        Submitted values, validity flags and messages merged over the
        ``values``/``invalid``/``errmsg`` given in ``config``.
    labels : LabelHandler, optional
        Caption lookup for default labels.
    request_path : str, optional
        Path used as ``action`` when the navigation menu is shown, so the form
        posts back without the anchor of the current URL.
    hooks : sequence of callables, optional
        Called with the constructed printer, in order, before it is returned
        to the caller.
    """

    param_keys = Container.param_keys | {"nav_threshold"}
    html_def: typ.ClassVar[cabc.Mapping[str, str]] = {"method": "post"}

    def __init__(
        self,
        config: ConfigurationNode | cabc.Mapping[str, typ.Any],
        *,
        validator: FieldStateSource | None = None,
        labels: LabelHandler | None = None,
        request_path: str | None = None,
        hooks: cabc.Sequence[PrintHook] = (),
    ) -> None:
        config = as_config(config)
        self.ids = IdManager()
        self.nav = NavCollector()
        config["idmanager"] = self.ids
        config["fscollect"] = self.nav
        if labels is not None:
            config["labels"] = labels

        for source_key, key in VALIDATOR_KEYS:
            merged = dict(config.get(key) or {})
            if validator is not None:
                merged.update(getattr(validator, source_key))
            config[key] = merged
        invalid = dict(config.get("invalid") or {})
        if validator is not None:
            invalid.update(invert_validity(validator.is_valid))
        config["invalid"] = invalid

        for key in self.inherit:
            config.setdefault(key, None)

        super().__init__(config, self.html_def)

        threshold = self.params.get("nav_threshold")
        if threshold is None:
            threshold = DEFAULT_NAV_THRESHOLD
        entries = self.nav.entries()
        if threshold > 0 and len(entries) >= threshold:
            menu = MarkupNode("ul", {"class": "nav"})
            for entry in entries:
                menu.push(("li", {}, [("a", {"href": f"#{entry.anchor}"}, entry.caption)]))
            self.unshift(menu)
            if request_path is not None:
                self.attrs["action"] = request_path

        for hook in hooks:
            hook(self)

    def object_info(self) -> ObjectInfo:
        return {"tag": "form", "prefix": "Form"}


__all__ = ["Printer"]
