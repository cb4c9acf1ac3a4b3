"""Two-column resume template.

The template draws the header (on the first page) and then a grid with a wide
main column and a narrower sidebar. Each column lists the sections named by the
layout, in order, through :class:`~resume_artboard.render.dispatcher.SectionDispatcher`.
"""

from __future__ import annotations

import typing as typ

from markupsafe import Markup

from .dispatcher import SectionDispatcher
from .header import HeaderRenderer

if typ.TYPE_CHECKING:
    from jinja2 import Environment

    from resume_artboard.config import LayoutConfig, RenderOptions
    from resume_artboard.schema import Resume


class ResumeTemplate:
    """Assemble the header and both layout columns into one element tree."""

    def __init__(self, env: Environment, options: RenderOptions | None = None) -> None:
        self.env = env
        self.header = HeaderRenderer(env, options)
        self.dispatcher = SectionDispatcher(env, options)
        self.template = env.get_template("leafish.jinja")

    def render(
        self, resume: Resume, layout: LayoutConfig, *, first_page: bool = True
    ) -> Markup:
        """Render ``resume`` with the sections placed as ``layout`` describes."""
        main, sidebar = (
            self._render_column(resume, keys) for keys in layout.columns
        )
        html = self.template.render(
            header=self.header.render(resume) if first_page else None,
            main=main,
            sidebar=sidebar,
        )
        return Markup(html)

    def _render_column(self, resume: Resume, keys: typ.Iterable[str]) -> list[Markup]:
        blocks: list[Markup] = []
        for key in keys:
            block = self.dispatcher.render(key, resume)
            if block is not None:
                blocks.append(block)
        return blocks


__all__ = ["ResumeTemplate"]
