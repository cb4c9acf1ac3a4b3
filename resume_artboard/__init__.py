"""Render structured resume documents into HTML.

This package exposes the CLI entry point used by the ``artboard`` console
script together with the pure rendering entry point for library callers.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.
- ``render_resume``: Render a decoded resume with a layout into markup.

Examples
--------
>>> from resume_artboard import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main
from .render import render_resume

__all__ = ["app", "main", "render_resume"]
