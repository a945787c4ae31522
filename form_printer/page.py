"""Wrap rendered forms into standalone HTML pages.

A Jinja2 environment with autoescape enabled renders ``form_page.jinja``
from ``form_printer/templates`` with the serialized form passed in as
trusted markup.

>>> from form_printer.page import FormPageBuilder
>>> from form_printer.printer import Printer
>>> html = FormPageBuilder().render("Contact", Printer({"name": "contact"}))
>>> "<h1>Contact</h1>" in html
True
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

from ._constants import DEFAULT_INDENT_SHIFT

if typ.TYPE_CHECKING:
    from .markup import MarkupNode


class FormPageBuilder:
    """Render a form inside the page template."""

    def __init__(self, *, templates_dir: Path | None = None) -> None:
        """Initialize the Jinja environment.

        Parameters
        ----------
        templates_dir : Path, optional
            Directory containing ``form_page.jinja``. Defaults to the
            ``form_printer/templates`` directory shipped with the package.
        """
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template("form_page.jinja")

    def render(
        self, title: str, form: MarkupNode, *, shift: int = DEFAULT_INDENT_SHIFT
    ) -> str:
        """Return the complete page for ``form``."""
        markup = Markup(form.render(0, shift))  # noqa: S704 - serializer escapes its content
        return self.template.render(title=title, form=markup)

    def run(
        self,
        title: str,
        form: MarkupNode,
        output_path: Path,
        *,
        shift: int = DEFAULT_INDENT_SHIFT,
    ) -> Path:
        """Render the page and write it to ``output_path``."""
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.render(title, form, shift=shift), encoding="utf-8")
        return output_path


__all__ = ["FormPageBuilder"]
