"""Typed dataclasses describing the artboard build configuration."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path


class ArtboardConfigError(ValueError):
    """Raised when the artboard configuration is invalid or incomplete."""


@dc.dataclass(frozen=True, slots=True)
class LayoutConfig:
    """Ordered section keys for the main column and the sidebar."""

    main: tuple[str, ...] = ()
    sidebar: tuple[str, ...] = ()

    @property
    def columns(self) -> tuple[tuple[str, ...], tuple[str, ...]]:
        """Return both columns in display order."""
        return self.main, self.sidebar


@dc.dataclass(frozen=True, slots=True)
class RenderOptions:
    """Policies applied while rendering sections.

    Attributes
    ----------
    sanitize_html : bool
        Clean embedded summary and bio HTML through an allow-list before
        emitting it. When False the fragments pass through verbatim.
    hide_sections_without_visible_items : bool
        Skip a section whose items are all hidden. When False a section is
        skipped only when it has no items at all, so a section of hidden
        items still draws its title and an empty grid.
    """

    sanitize_html: bool = False
    hide_sections_without_visible_items: bool = False


@dc.dataclass(slots=True)
class ArtboardConfig:
    """A fully resolved build definition sourced from YAML config."""

    resume: Path
    output: Path = Path("public/resume.html")
    title: str | None = None
    layout: LayoutConfig | None = None
    options: RenderOptions = dc.field(default_factory=RenderOptions)


__all__ = [
    "ArtboardConfig",
    "ArtboardConfigError",
    "LayoutConfig",
    "RenderOptions",
]
