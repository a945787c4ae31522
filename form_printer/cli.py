"""Cyclopts CLI entrypoint for rendering form configurations to HTML.

The ``forms`` console script loads a YAML form document, optionally merges
submitted values and validation results from a state file, and prints the
rendered ``<form>`` markup or writes it (optionally wrapped in a full HTML
page) to disk.

Examples
--------
Print the markup of a form:

>>> from form_printer.cli import main
>>> main()  # doctest: +SKIP

Render a page with bound values into a file:

>>> from form_printer.cli import app
>>> app(
...     ["render", "forms/contact.yaml", "--state", "state.yaml",
...      "--output", "public/contact.html", "--page"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from ._constants import DEFAULT_INDENT_SHIFT
from .config import load_form_config, load_form_state
from .labels import MappingLabelHandler
from .page import FormPageBuilder
from .printer import Printer, registered_types

app = App(name="forms", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.command(help="Render a YAML form configuration to HTML.")
def render(
    config: typ.Annotated[Path, Parameter(help="Path to the form configuration")],
    *,
    state: typ.Annotated[
        Path | None,
        Parameter(help="YAML file with values, messages and validity", env_var="INPUT_STATE"),
    ] = None,
    labels: typ.Annotated[
        Path | None,
        Parameter(help="YAML file with field captions", env_var="INPUT_LABELS"),
    ] = None,
    output: typ.Annotated[
        Path | None,
        Parameter(help="Write the markup here instead of stdout", env_var="INPUT_OUTPUT"),
    ] = None,
    page: typ.Annotated[
        bool, Parameter(help="Wrap the form into a complete HTML page")
    ] = False,
    request_path: typ.Annotated[
        str | None,
        Parameter(help="Form action used together with the navigation menu"),
    ] = None,
    shift: typ.Annotated[
        int, Parameter(help="Indentation step of the generated markup")
    ] = DEFAULT_INDENT_SHIFT,
) -> None:
    """Render a form configuration.

    Parameters
    ----------
    config : Path
        YAML form document (see :func:`form_printer.config.load_form_config`).
    state : Path or None, optional
        State file overriding the document's inline ``state`` section.
    labels : Path or None, optional
        Label file used to resolve default field captions.
    output : Path or None, optional
        Destination file; when ``None`` the markup is printed to stdout.
    page : bool, optional
        Render a standalone page through the Jinja template instead of the
        bare form.
    request_path : str or None, optional
        Overrides the document's ``request_path``.
    shift : int, optional
        Number of spaces per nesting level.

    Raises
    ------
    FormPrinterError
        If the configuration cannot be rendered.
    """
    document = load_form_config(config)
    form_state = load_form_state(state) if state else document.state
    label_handler = MappingLabelHandler.from_path(labels) if labels else None

    form = Printer(
        document.form,
        validator=form_state,
        labels=label_handler,
        request_path=request_path or document.request_path,
    )

    if page:
        builder = FormPageBuilder()
        if output:
            written = builder.run(document.title, form, output, shift=shift)
            print(f"wrote {_format_path(written)}")
            return
        print(builder.render(document.title, form, shift=shift))
        return

    markup = form.render(0, shift)
    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(markup + "\n", encoding="utf-8")
        print(f"wrote {_format_path(output)}")
    else:
        print(markup)


@app.command(help="List the field types with a dedicated renderer.")
def types() -> None:
    """Print the registered type tags; other tags render as ``Element``."""
    for type_name in sorted(registered_types()):
        print(type_name)


def main() -> None:
    """Invoke the Cyclopts application that powers the ``forms`` console command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
