"""Decide whether item URLs are drawable and how they are labelled."""

from __future__ import annotations

import typing as typ
from urllib.parse import urlsplit

if typ.TYPE_CHECKING:
    from .schema import URL

WEB_SCHEMES = frozenset({"http", "https"})


def is_url(value: str | None) -> bool:
    """Return True when ``value`` is an absolute http(s) URL with a host."""
    if not value or not value.strip():
        return False
    try:
        parts = urlsplit(value.strip())
    except ValueError:
        return False
    return parts.scheme.lower() in WEB_SCHEMES and bool(parts.netloc)


def is_renderable_link(url: URL | None) -> bool:
    """Return True when ``url`` should be emitted as an anchor."""
    if url is None:
        return False
    return is_url(url.href)


def resolve_label(url: URL, label: str | None = None) -> str:
    """Return the display text for ``url``.

    An explicit ``label`` always wins, even when empty; otherwise the URL's own
    label is used when set, falling back to the raw ``href``.
    """
    if label is not None:
        return label
    return url.label or url.href


__all__ = ["is_renderable_link", "is_url", "resolve_label"]
