"""Typed accessors for the optional sub-blocks of section items.

Each section type declares which optional fields apply to its items through a
:class:`FieldConfig`. The accessors return ``None`` when a field is not
configured for the section type, and a type-appropriate default when the
field is configured but the item does not carry a value.

Examples
--------
>>> from resume_artboard.fields import FieldConfig, extract
>>> extract({"url": {"href": "https://example.com"}}, "url.href", "")
'https://example.com'
>>> extract({}, "level", 0)
0
>>> extract({"level": 3}, None, 0) is None
True
>>> FieldConfig(level_key="level").summary({"summary": "<p>x</p>"}) is None
True
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import typing as typ

from .links import is_renderable_link

if typ.TYPE_CHECKING:
    from .schema import URL

_MISSING = object()


def extract(item: object, path: str | None, default: typ.Any) -> typ.Any:
    """Resolve the dotted ``path`` on ``item``.

    Parameters
    ----------
    item : object
        Record to read from. Attributes, mapping keys and sequence indices
        are all traversed.
    path : str or None
        Dotted field path. ``None`` means the field does not apply, and the
        function returns ``None`` without touching ``item``.
    default : Any
        Value returned when the path does not resolve or resolves to
        ``None``.

    Returns
    -------
    Any
        The resolved value, ``default``, or ``None`` for an absent path.
    """
    if path is None:
        return None
    current: object = item
    for segment in path.split("."):
        current = _lookup(current, segment)
        if current is _MISSING or current is None:
            return default
    return current


def _lookup(container: object, segment: str) -> object:
    """Return ``segment`` of ``container`` or the missing sentinel."""
    match container:
        case cabc.Mapping():
            return container.get(segment, _MISSING)
        case str():
            return _MISSING
        case cabc.Sequence() if segment.isdigit():
            index = int(segment)
            return container[index] if index < len(container) else _MISSING
        case _:
            return getattr(container, segment, _MISSING)


@dc.dataclass(frozen=True, slots=True)
class FieldConfig:
    """Declare which optional fields a section type renders.

    Attributes
    ----------
    url_key : str | None
        Path to the item's ``URL`` record.
    level_key : str | None
        Path to the item's 0-5 proficiency level.
    summary_key : str | None
        Path to the item's HTML summary.
    keywords_key : str | None
        Path to the item's keyword list.
    """

    url_key: str | None = None
    level_key: str | None = None
    summary_key: str | None = None
    keywords_key: str | None = None

    def level(self, item: object) -> int | None:
        """Return the item level, ``0`` when missing, ``None`` if unconfigured."""
        return extract(item, self.level_key, 0)

    def summary(self, item: object) -> str | None:
        """Return the item summary, ``""`` when missing, ``None`` if unconfigured."""
        return extract(item, self.summary_key, "")

    def keywords(self, item: object) -> list[str] | None:
        """Return the item keywords, ``[]`` when missing, ``None`` if unconfigured."""
        value = extract(item, self.keywords_key, [])
        if value is None:
            return None
        return [str(keyword) for keyword in value]

    def url(self, item: object) -> URL | None:
        """Return the item URL record, or ``None`` when absent or unconfigured."""
        return extract(item, self.url_key, None)

    def link(self, item: object) -> URL | None:
        """Return the item URL only when it passes link validation."""
        url = self.url(item)
        return url if is_renderable_link(url) else None


__all__ = ["FieldConfig", "extract"]
