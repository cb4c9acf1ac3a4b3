"""Allow-list cleaning for HTML fragments embedded in resume documents.

Summaries and the header bio arrive as rich-text HTML produced by the resume
editor. By default the renderer passes them through verbatim; when
``RenderOptions.sanitize_html`` is set they are cleaned here first. Unknown
tags are unwrapped so their text survives, active content is dropped with its
children, and only a small set of attributes is kept.
"""

from __future__ import annotations

from bs4 import BeautifulSoup, Comment, Tag

from .links import is_url

ALLOWED_TAGS = frozenset(
    {
        "a",
        "b",
        "blockquote",
        "br",
        "code",
        "em",
        "h1",
        "h2",
        "h3",
        "h4",
        "h5",
        "h6",
        "hr",
        "i",
        "li",
        "mark",
        "ol",
        "p",
        "pre",
        "s",
        "span",
        "strong",
        "sub",
        "sup",
        "u",
        "ul",
    }
)
DROPPED_TAGS = frozenset(
    {"embed", "form", "iframe", "object", "script", "style", "template"}
)
ALLOWED_ATTRIBUTES: dict[str, frozenset[str]] = {
    "a": frozenset({"href", "title"}),
    "*": frozenset({"class"}),
}
SAFE_LINK_SCHEMES = ("mailto:", "tel:")
LINK_REL = "noreferrer noopener nofollow"


def sanitize_html(fragment: str) -> str:
    """Return ``fragment`` reduced to the allowed tags and attributes.

    Examples
    --------
    >>> sanitize_html('<p onclick="x()">Hi<script>alert(1)</script></p>')
    '<p>Hi</p>'
    >>> sanitize_html('<a href="javascript:alert(1)">x</a>')
    '<a>x</a>'
    """
    soup = BeautifulSoup(fragment, "html.parser")
    for comment in soup.find_all(string=lambda text: isinstance(text, Comment)):
        comment.extract()
    for tag in soup.find_all(True):
        if tag.decomposed:
            continue
        if tag.name in DROPPED_TAGS:
            tag.decompose()
        elif tag.name not in ALLOWED_TAGS:
            tag.unwrap()
        else:
            _clean_attributes(tag)
    return str(soup)


def _clean_attributes(tag: Tag) -> None:
    """Strip every attribute of ``tag`` outside the allow-list."""
    allowed = ALLOWED_ATTRIBUTES.get(tag.name, frozenset()) | ALLOWED_ATTRIBUTES["*"]
    for name in list(tag.attrs):
        if name not in allowed:
            del tag.attrs[name]
    if tag.name != "a" or "href" not in tag.attrs:
        return
    href = str(tag.attrs["href"]).strip()
    if _is_safe_href(href):
        tag.attrs["rel"] = LINK_REL
    else:
        del tag.attrs["href"]


def _is_safe_href(href: str) -> bool:
    lowered = href.lower()
    if lowered.startswith(SAFE_LINK_SCHEMES):
        return True
    return is_url(href)


__all__ = ["ALLOWED_TAGS", "sanitize_html"]
