"""Tests for the header block and the two-column resume template."""

from __future__ import annotations

import typing as typ

import pytest
from bs4 import BeautifulSoup

from resume_artboard.config import LayoutConfig, RenderOptions
from resume_artboard.render import HeaderRenderer, ResumeTemplate, render_resume
from resume_artboard.schema import parse_resume

if typ.TYPE_CHECKING:
    from jinja2 import Environment


def _soup(markup: str) -> BeautifulSoup:
    return BeautifulSoup(markup, "html.parser")


def _column_ids(soup: BeautifulSoup, column: str) -> list[str]:
    container = soup.select_one(f".artboard__column--{column}")
    return [section["id"] for section in container.select("section")]


@pytest.fixture
def header_soup(env: Environment, resume_payload: dict[str, typ.Any]) -> BeautifulSoup:
    return _soup(HeaderRenderer(env).render(parse_resume(resume_payload)))


def test_header_draws_identity(header_soup: BeautifulSoup) -> None:
    assert header_soup.select_one(".header__name").get_text() == "Ada Lovelace"
    headline = header_soup.select_one(".header__headline").get_text()
    assert headline == "Analytical Engine Programmer"


def test_header_draws_contact_links(header_soup: BeautifulSoup) -> None:
    phone = header_soup.select_one(".contact--phone a")
    assert phone["href"] == "tel:+44 20 7946 0000"
    email = header_soup.select_one(".contact--email a")
    assert email["href"] == "mailto:ada@example.com"
    location = header_soup.select_one(".contact--location").get_text(strip=True)
    assert location == "London"
    portfolio = header_soup.select_one(".header__contacts > .link a")
    assert portfolio["href"] == "https://example.com/ada"
    assert portfolio.get_text() == "Portfolio"


def test_header_custom_fields_skip_empty_names(header_soup: BeautifulSoup) -> None:
    fields = [
        node.get_text(strip=True)
        for node in header_soup.select(".contact--custom span")
    ]
    assert fields == ["Pronouns: she/her", "Open to work"]


def test_header_lists_only_visible_profiles(header_soup: BeautifulSoup) -> None:
    profiles = header_soup.select(".profile")
    assert [profile["data-item-id"] for profile in profiles] == ["p1"]
    anchor = profiles[0].select_one("a.profile__link")
    assert anchor["href"] == "https://github.com/ada"
    assert anchor.get_text() == "ada"
    icon = profiles[0].select_one("img")
    assert icon["src"] == "https://cdn.simpleicons.org/github"
    assert "hidden-ada" not in header_soup.get_text()


def test_header_draws_summary_html(header_soup: BeautifulSoup) -> None:
    summary = header_soup.select_one(".header__summary")
    assert summary["id"] == "summary"
    assert summary.select_one("p").get_text() == "First published algorithm."


def test_header_skips_hidden_summary(
    env: Environment, resume_payload: dict[str, typ.Any]
) -> None:
    resume_payload["sections"]["summary"]["visible"] = False
    soup = _soup(HeaderRenderer(env).render(parse_resume(resume_payload)))
    assert soup.select_one(".header__summary") is None


def test_header_skips_empty_summary(
    env: Environment, resume_payload: dict[str, typ.Any]
) -> None:
    resume_payload["sections"]["summary"]["content"] = "<p></p>"
    soup = _soup(HeaderRenderer(env).render(parse_resume(resume_payload)))
    assert soup.select_one(".header__summary") is None


def test_header_skips_hidden_profiles_section(
    env: Environment, resume_payload: dict[str, typ.Any]
) -> None:
    resume_payload["sections"]["profiles"]["visible"] = False
    soup = _soup(HeaderRenderer(env).render(parse_resume(resume_payload)))
    assert soup.select_one(".header__profiles") is None


def test_template_places_sections_in_columns(
    env: Environment, resume_payload: dict[str, typ.Any]
) -> None:
    layout = LayoutConfig(
        main=("experience", "custom.abc123", "not-a-section"),
        sidebar=("skills", "summary", "languages"),
    )
    markup = ResumeTemplate(env).render(parse_resume(resume_payload), layout)
    soup = _soup(markup)
    assert _column_ids(soup, "main") == ["experience", "abc123"]
    assert _column_ids(soup, "sidebar") == ["skills", "languages"]
    assert soup.select_one(".header") is not None


def test_template_omits_header_after_first_page(
    env: Environment, resume_payload: dict[str, typ.Any]
) -> None:
    layout = LayoutConfig(main=("experience",))
    markup = ResumeTemplate(env).render(
        parse_resume(resume_payload), layout, first_page=False
    )
    soup = _soup(markup)
    assert soup.select_one(".header") is None
    assert _column_ids(soup, "main") == ["experience"]


def test_render_resume_falls_back_to_document_layout(
    resume_payload: dict[str, typ.Any],
) -> None:
    soup = _soup(render_resume(parse_resume(resume_payload)))
    assert _column_ids(soup, "main") == ["experience", "education", "projects"]
    assert _column_ids(soup, "sidebar") == ["skills", "languages"]


def test_render_resume_is_idempotent(resume_payload: dict[str, typ.Any]) -> None:
    resume = parse_resume(resume_payload)
    assert render_resume(resume) == render_resume(resume)


def test_render_resume_sanitizes_when_enabled(
    resume_payload: dict[str, typ.Any],
) -> None:
    resume_payload["sections"]["summary"]["content"] = (
        "<p>Bio<script>alert(1)</script></p>"
    )
    resume = parse_resume(resume_payload)
    unsafe = _soup(render_resume(resume))
    assert unsafe.select_one(".header__summary script") is not None
    safe = _soup(render_resume(resume, options=RenderOptions(sanitize_html=True)))
    assert safe.select_one(".header__summary script") is None
    assert safe.select_one(".header__summary").get_text() == "Bio"


def test_header_drops_script_links(
    env: Environment, resume_payload: dict[str, typ.Any]
) -> None:
    script = "javascript://example.com/%0Aalert(1)"
    resume_payload["basics"]["url"]["href"] = script
    resume_payload["sections"]["profiles"]["items"][0]["url"]["href"] = script
    markup = HeaderRenderer(env).render(parse_resume(resume_payload))
    assert "javascript:" not in str(markup)
    soup = _soup(markup)
    assert soup.select_one(".header__contacts > .link") is None
    assert soup.select_one(".profile a") is None
