"""Typed, immutable records describing a resume document.

The records mirror the JSON document produced by the resume editor: keys are
camelCase on the wire and snake_case in Python, unknown keys are ignored, and
every field has a default so partially filled documents still decode.
"""

from __future__ import annotations

import typing as typ

import msgspec


class ResumeDocumentError(ValueError):
    """Raised when a resume document cannot be decoded or validated."""


class _Record(msgspec.Struct, frozen=True, kw_only=True, rename="camel"):
    """Base for every document record."""


class URL(_Record):
    """Hyperlink with an optional display label."""

    label: str = ""
    href: str = ""


class CustomField(_Record):
    """Free-form key/value pair shown in the header."""

    id: str = ""
    icon: str = ""
    name: str = ""
    value: str = ""


class Basics(_Record):
    """Identity and contact details."""

    name: str = ""
    headline: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    url: URL = msgspec.field(default_factory=URL)
    custom_fields: list[CustomField] = msgspec.field(default_factory=list)


class Item(_Record):
    """Fields shared by every section item."""

    id: str = ""
    visible: bool = True


class Experience(Item):
    company: str = ""
    position: str = ""
    location: str = ""
    date: str = ""
    summary: str = ""
    url: URL = msgspec.field(default_factory=URL)


class Education(Item):
    institution: str = ""
    study_type: str = ""
    area: str = ""
    score: str = ""
    date: str = ""
    summary: str = ""
    url: URL = msgspec.field(default_factory=URL)


class Award(Item):
    title: str = ""
    awarder: str = ""
    date: str = ""
    summary: str = ""
    url: URL = msgspec.field(default_factory=URL)


class Certification(Item):
    name: str = ""
    issuer: str = ""
    date: str = ""
    summary: str = ""
    url: URL = msgspec.field(default_factory=URL)


class Skill(Item):
    name: str = ""
    description: str = ""
    level: int = 0
    keywords: list[str] = msgspec.field(default_factory=list)


class Interest(Item):
    name: str = ""
    keywords: list[str] = msgspec.field(default_factory=list)


class Publication(Item):
    name: str = ""
    publisher: str = ""
    date: str = ""
    summary: str = ""
    url: URL = msgspec.field(default_factory=URL)


class Volunteer(Item):
    organization: str = ""
    position: str = ""
    location: str = ""
    date: str = ""
    summary: str = ""
    url: URL = msgspec.field(default_factory=URL)


class Language(Item):
    name: str = ""
    description: str = ""
    level: int = 0


class Project(Item):
    """Project entry; ``url2`` holds an optional source-repository link."""

    name: str = ""
    description: str = ""
    date: str = ""
    summary: str = ""
    keywords: list[str] = msgspec.field(default_factory=list)
    url: URL = msgspec.field(default_factory=URL)
    url2: URL | None = None


class Reference(Item):
    name: str = ""
    description: str = ""
    summary: str = ""
    url: URL = msgspec.field(default_factory=URL)


class Profile(Item):
    network: str = ""
    username: str = ""
    icon: str = ""
    url: URL = msgspec.field(default_factory=URL)


class CustomItem(Item):
    name: str = ""
    description: str = ""
    date: str = ""
    location: str = ""
    summary: str = ""
    keywords: list[str] = msgspec.field(default_factory=list)
    url: URL = msgspec.field(default_factory=URL)


ItemT = typ.TypeVar("ItemT", bound=Item)


class Section(_Record, typ.Generic[ItemT]):
    """Ordered, independently visible group of same-typed items."""

    id: str = ""
    name: str = ""
    columns: typ.Annotated[int, msgspec.Meta(ge=1)] = 1
    separate_links: bool = True
    visible: bool = True
    items: list[ItemT] = msgspec.field(default_factory=list)


class SummarySection(_Record):
    """Free-text introduction drawn in the header."""

    id: str = "summary"
    name: str = "Summary"
    columns: typ.Annotated[int, msgspec.Meta(ge=1)] = 1
    separate_links: bool = True
    visible: bool = True
    content: str = ""


def _section(key: str, name: str) -> typ.Any:
    """Return a field whose default is an empty section named ``name``."""
    return msgspec.field(default_factory=lambda: Section(id=key, name=name))


class Sections(_Record):
    """Every built-in section plus user-defined custom sections."""

    summary: SummarySection = msgspec.field(default_factory=SummarySection)
    awards: Section[Award] = _section("awards", "Awards")
    certifications: Section[Certification] = _section(
        "certifications", "Certifications"
    )
    education: Section[Education] = _section("education", "Education")
    experience: Section[Experience] = _section("experience", "Experience")
    volunteer: Section[Volunteer] = _section("volunteer", "Volunteering")
    interests: Section[Interest] = _section("interests", "Interests")
    languages: Section[Language] = _section("languages", "Languages")
    profiles: Section[Profile] = _section("profiles", "Profiles")
    projects: Section[Project] = _section("projects", "Projects")
    publications: Section[Publication] = _section("publications", "Publications")
    references: Section[Reference] = _section("references", "References")
    skills: Section[Skill] = _section("skills", "Skills")
    custom: dict[str, Section[CustomItem]] = msgspec.field(default_factory=dict)


class Theme(_Record):
    background: str = "#ffffff"
    text: str = "#000000"
    primary: str = "#dc2626"


class Font(_Record):
    family: str = "IBM Plex Serif"
    size: float = 14


class Typography(_Record):
    font: Font = msgspec.field(default_factory=Font)
    line_height: float = 1.5


class Metadata(_Record):
    """Presentation settings stored alongside the document.

    ``layout`` is indexed as pages, then columns, then section keys.
    """

    template: str = "leafish"
    layout: list[list[list[str]]] = msgspec.field(default_factory=list)
    theme: Theme = msgspec.field(default_factory=Theme)
    typography: Typography = msgspec.field(default_factory=Typography)


class Resume(_Record):
    """Top-level resume document."""

    basics: Basics = msgspec.field(default_factory=Basics)
    sections: Sections = msgspec.field(default_factory=Sections)
    metadata: Metadata = msgspec.field(default_factory=Metadata)


__all__ = [
    "URL",
    "Award",
    "Basics",
    "Certification",
    "CustomField",
    "CustomItem",
    "Education",
    "Experience",
    "Font",
    "Interest",
    "Item",
    "Language",
    "Metadata",
    "Profile",
    "Project",
    "Publication",
    "Reference",
    "Resume",
    "ResumeDocumentError",
    "Section",
    "Sections",
    "Skill",
    "SummarySection",
    "Theme",
    "Typography",
    "Volunteer",
]
