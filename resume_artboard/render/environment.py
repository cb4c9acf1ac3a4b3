"""Jinja environment shared by every resume renderer."""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from resume_artboard.color import _format_number, hex_to_rgb, hue_from_hex
from resume_artboard.links import is_renderable_link, resolve_label

DEFAULT_TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"


def build_environment(templates_dir: Path | None = None) -> Environment:
    """Return a Jinja environment wired with the artboard filters and tests.

    Parameters
    ----------
    templates_dir : Path, optional
        Directory containing the Jinja templates. Defaults to the
        ``resume_artboard/templates`` directory when ``None``.

    Notes
    -----
    Autoescaping is enabled for every template, so pre-rendered fragments must
    be passed in as :class:`markupsafe.Markup`. Registered helpers:

    * ``rgb`` filter: :func:`~resume_artboard.color.hex_to_rgb`.
    * ``hue`` filter: :func:`~resume_artboard.color.hue_from_hex`.
    * ``number`` filter: shortest CSS rendering of a number.
    * ``link_label`` filter: :func:`~resume_artboard.links.resolve_label`.
    * ``renderable_link`` test: :func:`~resume_artboard.links.is_renderable_link`.
    """
    env = Environment(
        loader=FileSystemLoader(str(templates_dir or DEFAULT_TEMPLATES_DIR)),
        autoescape=select_autoescape(default=True, default_for_string=True),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["rgb"] = hex_to_rgb
    env.filters["hue"] = hue_from_hex
    env.filters["number"] = _format_number
    env.filters["link_label"] = resolve_label
    env.tests["renderable_link"] = is_renderable_link
    return env


__all__ = ["DEFAULT_TEMPLATES_DIR", "build_environment"]
