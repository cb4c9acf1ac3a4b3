"""Map layout section keys onto the generic section renderer.

Every built-in section type is described by one :class:`SectionSpec` in the
static :data:`SECTION_SPECS` table: the template that draws an item's primary
content, the optional fields that apply, and the per-type class names.
User-defined sections are addressed as ``custom.<id>`` and share
:data:`CUSTOM_SECTION_SPEC`.

Examples
--------
>>> from resume_artboard.render.dispatcher import custom_section_id
>>> custom_section_id("custom.abc123")
'abc123'
>>> custom_section_id("experience") is None
True
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from markupsafe import Markup

from resume_artboard._constants import CUSTOM_SECTION_PREFIX
from resume_artboard.fields import FieldConfig

from .section import SectionRenderer, SectionStyle

if typ.TYPE_CHECKING:
    from jinja2 import Environment

    from resume_artboard.config import RenderOptions
    from resume_artboard.schema import Resume, Section

    from .section import PrimaryRenderer


@dc.dataclass(frozen=True, slots=True)
class SectionSpec:
    """How one section type is drawn."""

    template: str
    fields: FieldConfig
    style: SectionStyle = dc.field(default_factory=SectionStyle)


_LINKED_SUMMARY = FieldConfig(url_key="url", summary_key="summary")

SECTION_SPECS: dict[str, SectionSpec] = {
    "experience": SectionSpec(
        "items/experience.jinja",
        _LINKED_SUMMARY,
        SectionStyle(grid_class="section__grid--roomy", item_class="item--roomy"),
    ),
    "education": SectionSpec("items/education.jinja", _LINKED_SUMMARY),
    "awards": SectionSpec("items/awards.jinja", _LINKED_SUMMARY),
    "certifications": SectionSpec("items/certifications.jinja", _LINKED_SUMMARY),
    "skills": SectionSpec(
        "items/skills.jinja", FieldConfig(level_key="level", keywords_key="keywords")
    ),
    "interests": SectionSpec(
        "items/interests.jinja",
        FieldConfig(keywords_key="keywords"),
        SectionStyle(item_class="item--tight"),
    ),
    "publications": SectionSpec("items/publications.jinja", _LINKED_SUMMARY),
    "volunteer": SectionSpec("items/volunteer.jinja", _LINKED_SUMMARY),
    "languages": SectionSpec(
        "items/languages.jinja",
        FieldConfig(level_key="level"),
        SectionStyle(
            container_class="section--pulled", grid_class="section__grid--flush"
        ),
    ),
    "projects": SectionSpec(
        "items/projects.jinja",
        FieldConfig(url_key="url", summary_key="summary", keywords_key="keywords"),
    ),
    "references": SectionSpec("items/references.jinja", _LINKED_SUMMARY),
}

CUSTOM_SECTION_SPEC = SectionSpec(
    "items/custom.jinja",
    FieldConfig(url_key="url", summary_key="summary", keywords_key="keywords"),
)


def custom_section_id(key: str) -> str | None:
    """Return the identifier embedded in a ``custom.<id>`` key, else None."""
    if not key.startswith(CUSTOM_SECTION_PREFIX):
        return None
    return key.split(".")[1]


class SectionDispatcher:
    """Resolve a layout key to its section and draw it."""

    def __init__(self, env: Environment, options: RenderOptions | None = None) -> None:
        self.env = env
        self.renderer = SectionRenderer(env, options)

    def render(self, key: str, resume: Resume) -> Markup | None:
        """Render the section addressed by ``key``.

        Unknown keys, and custom keys whose section does not exist, render as
        nothing so documents written against newer or older schemas still
        draw.
        """
        resolved = self.resolve(key, resume)
        if resolved is None:
            return None
        section, spec = resolved
        primary = self.primary_renderer(spec, resume)
        return self.renderer.render_section(
            section, spec.fields, primary, style=spec.style
        )

    def resolve(
        self, key: str, resume: Resume
    ) -> tuple[Section[typ.Any], SectionSpec] | None:
        """Return the section and spec addressed by ``key``, if any."""
        spec = SECTION_SPECS.get(key)
        if spec is not None:
            return getattr(resume.sections, key), spec
        custom_id = custom_section_id(key)
        if custom_id is None:
            return None
        section = resume.sections.custom.get(custom_id)
        if section is None:
            return None
        return section, CUSTOM_SECTION_SPEC

    def primary_renderer(self, spec: SectionSpec, resume: Resume) -> PrimaryRenderer:
        """Return a callable drawing an item's primary content with ``spec``."""
        template = self.env.get_template(spec.template)
        font_size = resume.metadata.typography.font.size

        def _render(item: typ.Any) -> Markup:
            return Markup(
                template.render(
                    item=item, link=spec.fields.link(item), font_size=font_size
                )
            )

        return _render


__all__ = [
    "CUSTOM_SECTION_SPEC",
    "SECTION_SPECS",
    "SectionDispatcher",
    "SectionSpec",
    "custom_section_id",
]
