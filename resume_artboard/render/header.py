"""Header block: identity, contact details, bio and profile links."""

from __future__ import annotations

import typing as typ

from markupsafe import Markup

from .section import SectionRenderer, is_blank_html

if typ.TYPE_CHECKING:
    from jinja2 import Environment

    from resume_artboard.config import RenderOptions
    from resume_artboard.schema import Profile, Resume


class HeaderRenderer:
    """Render the resume header drawn above the columns on the first page."""

    def __init__(self, env: Environment, options: RenderOptions | None = None) -> None:
        self.env = env
        self.fragments = SectionRenderer(env, options)
        self.template = env.get_template("header.jinja")

    def render(self, resume: Resume) -> Markup:
        """Render the header for ``resume``.

        The summary section's HTML content is drawn when the section is
        visible and non-empty. Profiles are drawn only when their section is
        visible and has items; hidden profiles are skipped.
        """
        summary = resume.sections.summary
        summary_html = None
        if summary.visible and not is_blank_html(summary.content):
            summary_html = self.fragments.fragment(summary.content)
        html = self.template.render(
            basics=resume.basics,
            summary=summary,
            summary_html=summary_html,
            profiles=self._visible_profiles(resume),
            font_size=resume.metadata.typography.font.size,
        )
        return Markup(html)

    @staticmethod
    def _visible_profiles(resume: Resume) -> list[Profile]:
        profiles = resume.sections.profiles
        if not profiles.visible or not profiles.items:
            return []
        return [item for item in profiles.items if item.visible]


__all__ = ["HeaderRenderer"]
