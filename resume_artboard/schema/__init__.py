"""Resume document schema and JSON decoding.

The records in :mod:`resume_artboard.schema.models` describe the resume
document consumed by the renderer: identity fields in ``basics``, typed
sections of heterogeneous items in ``sections``, and presentation settings in
``metadata``. :func:`load_resume` decodes an exported JSON file into an
immutable :class:`Resume` snapshot.

Examples
--------
>>> from resume_artboard.schema import parse_resume
>>> resume = parse_resume(b'{"basics": {"name": "Ada"}}')
>>> resume.basics.name
'Ada'
>>> resume.sections.experience.items
[]
"""

from .loader import load_resume, parse_resume
from .models import (
    URL,
    Award,
    Basics,
    Certification,
    CustomField,
    CustomItem,
    Education,
    Experience,
    Font,
    Interest,
    Item,
    Language,
    Metadata,
    Profile,
    Project,
    Publication,
    Reference,
    Resume,
    ResumeDocumentError,
    Section,
    Sections,
    Skill,
    SummarySection,
    Theme,
    Typography,
    Volunteer,
)

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
    "load_resume",
    "parse_resume",
]
