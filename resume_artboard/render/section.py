"""Generic renderer shared by every resume section type.

A single :class:`SectionRenderer` draws all sections. The differences between
section types are supplied by the caller as data: a
:class:`~resume_artboard.fields.FieldConfig` naming which optional sub-blocks
apply, a primary-content callable producing the type-specific part of each
item, and a :class:`SectionStyle` carrying per-type class names.
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import typing as typ

from markupsafe import Markup

from resume_artboard.config import RenderOptions
from resume_artboard.rating import rating_cells
from resume_artboard.sanitize import sanitize_html

if typ.TYPE_CHECKING:
    from jinja2 import Environment

    from resume_artboard.fields import FieldConfig
    from resume_artboard.schema import Item, Section

PrimaryRenderer = cabc.Callable[[typ.Any], Markup]

EMPTY_PARAGRAPH = "<p></p>"


def is_blank_html(text: str | None) -> bool:
    """Return True for missing, whitespace-only, or empty-paragraph HTML."""
    if text is None:
        return True
    return text == EMPTY_PARAGRAPH or not text.strip()


@dc.dataclass(frozen=True, slots=True)
class SectionStyle:
    """Class names applied to a section's container, grid and item cells."""

    container_class: str = ""
    grid_class: str = ""
    item_class: str = ""


@dc.dataclass(frozen=True, slots=True)
class ItemCell:
    """Rendered pieces of one visible item, in display order."""

    id: str
    primary: Markup
    summary: Markup | None = None
    rating: tuple[bool, ...] | None = None
    keywords: str | None = None


class SectionRenderer:
    """Render a section block: title, grid and one cell per visible item."""

    def __init__(self, env: Environment, options: RenderOptions | None = None) -> None:
        self.env = env
        self.options = options or RenderOptions()
        self.template = env.get_template("section.jinja")

    def render_section(
        self,
        section: Section[typ.Any],
        fields: FieldConfig,
        primary: PrimaryRenderer,
        *,
        style: SectionStyle | None = None,
    ) -> Markup | None:
        """Render ``section`` or return ``None`` when it has nothing to show.

        Parameters
        ----------
        section : Section
            Section whose visible items are drawn in their stored order.
        fields : FieldConfig
            Optional sub-blocks that apply to this section type. A sub-block
            is drawn only when configured here and non-empty on the item.
        primary : Callable
            Produces the type-specific content at the top of each cell.
        style : SectionStyle, optional
            Per-type class names.

        Returns
        -------
        Markup or None
            ``None`` when the section is hidden or has no items. Emptiness is
            judged on the raw item count unless
            ``RenderOptions.hide_sections_without_visible_items`` is set.
        """
        if not section.visible or not section.items:
            return None
        visible = [item for item in section.items if item.visible]
        if not visible and self.options.hide_sections_without_visible_items:
            return None

        cells = [self._build_cell(item, fields, primary) for item in visible]
        html = self.template.render(
            section=section,
            cells=cells,
            style=style or SectionStyle(),
        )
        return Markup(html)

    def fragment(self, html: str) -> Markup:
        """Wrap an embedded HTML fragment, cleaning it first when configured."""
        if self.options.sanitize_html:
            return Markup(sanitize_html(html))
        return Markup(html)

    def _build_cell(
        self, item: Item, fields: FieldConfig, primary: PrimaryRenderer
    ) -> ItemCell:
        summary = fields.summary(item)
        level = fields.level(item)
        keywords = fields.keywords(item)
        return ItemCell(
            id=item.id,
            primary=primary(item),
            summary=None if is_blank_html(summary) else self.fragment(summary),
            rating=rating_cells(level) if level is not None and level > 0 else None,
            keywords=", ".join(keywords) if keywords else None,
        )


__all__ = [
    "ItemCell",
    "PrimaryRenderer",
    "SectionRenderer",
    "SectionStyle",
    "is_blank_html",
]
