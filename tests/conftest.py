"""Shared fixtures for resume_artboard tests.

The fixtures build a small but complete resume document covering every
built-in section type plus one custom section, so renderer tests can tweak a
single field and assert on the resulting HTML.
"""

from __future__ import annotations

import copy
import typing as typ

import pytest
from jinja2 import Environment

from resume_artboard.render import build_environment

_RESUME_PAYLOAD: dict[str, typ.Any] = {
    "basics": {
        "name": "Ada Lovelace",
        "headline": "Analytical Engine Programmer",
        "email": "ada@example.com",
        "phone": "+44 20 7946 0000",
        "location": "London",
        "url": {"label": "Portfolio", "href": "https://example.com/ada"},
        "customFields": [
            {"id": "cf1", "icon": "translate", "name": "Pronouns", "value": "she/her"},
            {"id": "cf2", "icon": "star", "name": "", "value": "Open to work"},
        ],
    },
    "sections": {
        "summary": {
            "id": "summary",
            "name": "Summary",
            "columns": 1,
            "visible": True,
            "content": "<p>First published algorithm.</p>",
        },
        "profiles": {
            "id": "profiles",
            "name": "Profiles",
            "visible": True,
            "items": [
                {
                    "id": "p1",
                    "network": "GitHub",
                    "username": "ada",
                    "icon": "github",
                    "url": {"label": "", "href": "https://github.com/ada"},
                },
                {
                    "id": "p2",
                    "visible": False,
                    "network": "Mastodon",
                    "username": "hidden-ada",
                    "icon": "mastodon",
                    "url": {"label": "", "href": "https://mastodon.social/@ada"},
                },
            ],
        },
        "experience": {
            "id": "experience",
            "name": "Experience",
            "items": [
                {
                    "id": "e1",
                    "company": "Analytical Engine",
                    "position": "Programmer",
                    "location": "London",
                    "date": "1842",
                    "summary": "<p>Wrote Note G.</p>",
                    "url": {"label": "", "href": "https://example.com/engine"},
                },
                {
                    "id": "e2",
                    "company": "Difference Engine",
                    "position": "Assistant",
                    "summary": "<p></p>",
                    "url": {"label": "", "href": ""},
                },
            ],
        },
        "education": {
            "id": "education",
            "name": "Education",
            "items": [
                {
                    "id": "ed1",
                    "institution": "Private Tutoring",
                    "studyType": "Mathematics",
                    "area": "Calculus",
                    "url": {"label": "Tutor", "href": "https://example.com/tutor"},
                }
            ],
        },
        "awards": {
            "id": "awards",
            "name": "Awards",
            "items": [{"id": "a1", "title": "Honorary Fellow", "awarder": "RS"}],
        },
        "certifications": {
            "id": "certifications",
            "name": "Certifications",
            "items": [{"id": "c1", "name": "Calculus", "issuer": "De Morgan"}],
        },
        "skills": {
            "id": "skills",
            "name": "Skills",
            "columns": 2,
            "items": [
                {
                    "id": "s1",
                    "name": "Mathematics",
                    "description": "Expert",
                    "level": 3,
                    "keywords": ["Calculus", "Bernoulli numbers"],
                },
                {"id": "s2", "name": "Poetry", "level": 0, "keywords": []},
            ],
        },
        "interests": {
            "id": "interests",
            "name": "Interests",
            "items": [{"id": "i1", "name": "Flight", "keywords": ["Birds", "Steam"]}],
        },
        "publications": {
            "id": "publications",
            "name": "Publications",
            "items": [{"id": "pub1", "name": "Notes", "publisher": "Taylor"}],
        },
        "volunteer": {
            "id": "volunteer",
            "name": "Volunteering",
            "items": [{"id": "v1", "organization": "RS", "position": "Reader"}],
        },
        "languages": {
            "id": "languages",
            "name": "Languages",
            "items": [
                {"id": "l1", "name": "French", "description": "Fluent", "level": 4}
            ],
        },
        "projects": {
            "id": "projects",
            "name": "Projects",
            "items": [
                {
                    "id": "pr1",
                    "name": "Note G",
                    "description": "Bernoulli program",
                    "keywords": ["algorithms"],
                    "url": {"label": "", "href": "https://example.com/note-g"},
                    "url2": {"label": "", "href": "https://github.com/ada/note-g"},
                }
            ],
        },
        "references": {
            "id": "references",
            "name": "References",
            "items": [{"id": "r1", "name": "Charles Babbage", "description": "Mentor"}],
        },
        "custom": {
            "abc123": {
                "id": "abc123",
                "name": "Talks",
                "items": [
                    {
                        "id": "t1",
                        "name": "Sketch of the Engine",
                        "summary": "<p>Translation with notes.</p>",
                        "keywords": ["engines"],
                        "url": {"label": "", "href": "https://example.com/sketch"},
                    }
                ],
            }
        },
    },
    "metadata": {
        "layout": [
            [["experience", "education"], ["skills"]],
            [["projects"], ["languages", "skills"]],
        ],
        "theme": {"background": "#ffffff", "text": "#000000", "primary": "#112233"},
        "typography": {"font": {"family": "Serif", "size": 14}, "lineHeight": 1.5},
    },
}


@pytest.fixture
def resume_payload() -> dict[str, typ.Any]:
    """Return a fresh, mutable copy of the sample resume document."""
    return copy.deepcopy(_RESUME_PAYLOAD)


@pytest.fixture
def env() -> Environment:
    """Return the default Jinja environment used by the renderers."""
    return build_environment()
