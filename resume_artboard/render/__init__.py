"""Render resume documents into HTML element trees.

The rendering pipeline is a pure projection from a decoded
:class:`~resume_artboard.schema.Resume` and a
:class:`~resume_artboard.config.LayoutConfig` to :class:`markupsafe.Markup`.
:func:`render_resume` is the convenience entry point; the pieces are exposed
for callers that want to reuse a Jinja environment across renders.

Examples
--------
>>> from resume_artboard.config import LayoutConfig
>>> from resume_artboard.render import render_resume
>>> from resume_artboard.schema import parse_resume
>>> resume = parse_resume(b'{"basics": {"name": "Ada"}}')
>>> html = render_resume(resume, LayoutConfig(main=("experience",)))
>>> "Ada" in html
True
"""

from __future__ import annotations

import typing as typ

from resume_artboard.config import layout_from_metadata

from .dispatcher import (
    CUSTOM_SECTION_SPEC,
    SECTION_SPECS,
    SectionDispatcher,
    SectionSpec,
    custom_section_id,
)
from .environment import DEFAULT_TEMPLATES_DIR, build_environment
from .header import HeaderRenderer
from .section import ItemCell, SectionRenderer, SectionStyle, is_blank_html
from .template import ResumeTemplate

if typ.TYPE_CHECKING:
    from pathlib import Path

    from markupsafe import Markup

    from resume_artboard.config import LayoutConfig, RenderOptions
    from resume_artboard.schema import Resume


def render_resume(
    resume: Resume,
    layout: LayoutConfig | None = None,
    *,
    options: RenderOptions | None = None,
    templates_dir: Path | None = None,
    first_page: bool = True,
) -> Markup:
    """Render ``resume`` into markup.

    When ``layout`` is omitted the layout stored in the document metadata is
    used, flattened into a single main column and sidebar.
    """
    env = build_environment(templates_dir)
    resolved = layout if layout is not None else layout_from_metadata(resume.metadata)
    return ResumeTemplate(env, options).render(
        resume, resolved, first_page=first_page
    )


__all__ = [
    "CUSTOM_SECTION_SPEC",
    "DEFAULT_TEMPLATES_DIR",
    "SECTION_SPECS",
    "HeaderRenderer",
    "ItemCell",
    "ResumeTemplate",
    "SectionDispatcher",
    "SectionRenderer",
    "SectionSpec",
    "SectionStyle",
    "build_environment",
    "custom_section_id",
    "is_blank_html",
    "render_resume",
]
