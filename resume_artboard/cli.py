"""Cyclopts CLI entrypoint for rendering resume documents to HTML.

The ``artboard`` console script defined here loads an ``artboard.yaml`` build
configuration, renders the referenced resume document with the two-column
template, and writes a standalone HTML page. Typical usage involves running
``artboard render`` locally or in CI after exporting the resume JSON.

Examples
--------
Render with the default configuration:

>>> from resume_artboard.cli import main
>>> main()  # doctest: +SKIP

Render a different document into a custom location:

>>> from resume_artboard.cli import app
>>> app(
...     ["render", "--resume", "exports/cv.json", "--output", "dist/cv.html"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .builder import ResumePageBuilder
from .config import load_artboard_config

DEFAULT_CONFIG = Path("config/artboard.yaml")

app = App(name="artboard", config=cyclopts.config.Env("ARTBOARD_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:
            return str(path)
    return str(path)


@app.command(help="Render a resume document into a standalone HTML page.")
def render(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to artboard config", env_var="ARTBOARD_CONFIG")
    ] = DEFAULT_CONFIG,
    resume: typ.Annotated[
        Path | None,
        Parameter(help="Override the resume document", env_var="ARTBOARD_RESUME"),
    ] = None,
    output: typ.Annotated[
        Path | None,
        Parameter(help="Override the output file", env_var="ARTBOARD_OUTPUT"),
    ] = None,
) -> None:
    """Render the configured resume document.

    Parameters
    ----------
    config : Path, optional
        Path to the ``artboard.yaml`` configuration file (overridable via
        ``ARTBOARD_CONFIG``).
    resume : Path or None, optional
        Resume JSON to render instead of the configured document.
    output : Path or None, optional
        Destination HTML file instead of the configured output.

    Returns
    -------
    None
        Writes the rendered page and prints its path.

    Raises
    ------
    FileNotFoundError
        If the configuration or the resume document does not exist.
    ArtboardConfigError
        If the configuration is malformed.
    ResumeDocumentError
        If the resume document cannot be decoded.
    """
    artboard_config = load_artboard_config(config)
    if resume is not None:
        artboard_config = dc.replace(artboard_config, resume=resume)
    if output is not None:
        artboard_config = dc.replace(artboard_config, output=output)

    written = ResumePageBuilder(artboard_config).run()
    print(f"wrote {_format_path(written)}")


def main() -> None:
    """Invoke the Cyclopts application that powers the `artboard` console command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
