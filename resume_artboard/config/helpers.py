"""Utility helpers shared by the artboard configuration loader."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from .models import ArtboardConfigError, LayoutConfig, RenderOptions

if typ.TYPE_CHECKING:
    from resume_artboard.schema import Metadata

LAYOUT_COLUMNS = ("main", "sidebar")


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _resolve_path(value: object, base_dir: Path) -> Path:
    """Return ``value`` as a path, anchoring relative paths at ``base_dir``."""
    path = Path(str(value)).expanduser()
    if path.is_absolute():
        return path
    return base_dir / path


def _normalize_keys(value: object, *, column: str) -> tuple[str, ...]:
    """Normalize a column definition into a tuple of non-empty section keys."""
    match value:
        case None:
            return ()
        case list() | tuple() as entries:
            pass
        case _:
            msg = f"Layout column '{column}' must be a list of section keys."
            raise ArtboardConfigError(msg)
    keys: list[str] = []
    for entry in entries:
        if not isinstance(entry, str):
            msg = f"Layout column '{column}' contains a non-string key: {entry!r}"
            raise ArtboardConfigError(msg)
        text = entry.strip()
        if text:
            keys.append(text)
    return tuple(keys)


def _check_exclusive(layout: LayoutConfig) -> LayoutConfig:
    """Ensure no section key is placed in more than one column."""
    duplicated = sorted(set(layout.main) & set(layout.sidebar))
    if duplicated:
        joined = ", ".join(duplicated)
        msg = f"Section keys appear in both layout columns: {joined}"
        raise ArtboardConfigError(msg)
    return layout


def _build_layout_config(payload: object | None) -> LayoutConfig | None:
    """Build the layout from the ``layout`` mapping, if one is configured."""
    match payload:
        case None:
            return None
        case dict() as data:
            pass
        case _:
            msg = "Layout configuration must be a mapping of columns."
            raise ArtboardConfigError(msg)
    unknown = sorted(set(data) - set(LAYOUT_COLUMNS))
    if unknown:
        msg = f"Unknown layout columns: {', '.join(map(str, unknown))}"
        raise ArtboardConfigError(msg)
    layout = LayoutConfig(
        main=_normalize_keys(data.get("main"), column="main"),
        sidebar=_normalize_keys(data.get("sidebar"), column="sidebar"),
    )
    return _check_exclusive(layout)


def _build_render_options(payload: object | None) -> RenderOptions:
    """Build render policies from the ``options`` mapping."""
    base = RenderOptions()
    match payload:
        case None:
            return base
        case dict() as data:
            pass
        case _:
            msg = "Render options must be a mapping."
            raise ArtboardConfigError(msg)
    values: dict[str, bool] = {}
    for key in ("sanitize_html", "hide_sections_without_visible_items"):
        value = data.get(key, getattr(base, key))
        if not isinstance(value, bool):
            msg = f"Render option '{key}' must be a boolean."
            raise ArtboardConfigError(msg)
        values[key] = value
    return RenderOptions(**values)


def layout_from_metadata(metadata: Metadata) -> LayoutConfig:
    """Flatten the document's page layouts into a single two-column layout.

    Every page's first column joins ``main`` and its second column joins
    ``sidebar``, in page order. Keys already placed are not repeated.
    """
    main: list[str] = []
    sidebar: list[str] = []
    seen: set[str] = set()
    for page in metadata.layout:
        for target, column in zip((main, sidebar), page, strict=False):
            for key in column:
                if key in seen:
                    continue
                seen.add(key)
                target.append(key)
    return LayoutConfig(main=tuple(main), sidebar=tuple(sidebar))


__all__ = [
    "LAYOUT_COLUMNS",
    "_build_layout_config",
    "_build_render_options",
    "_check_exclusive",
    "_normalize_keys",
    "_optional_str",
    "_resolve_path",
    "layout_from_metadata",
]
