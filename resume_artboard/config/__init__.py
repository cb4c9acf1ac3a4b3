"""Load and validate artboard build configuration YAML.

This subpackage parses the project's ``artboard.yaml`` file, resolves the
resume source and output paths, validates the optional two-column layout, and
produces strongly typed dataclasses (:class:`ArtboardConfig`,
:class:`LayoutConfig`, :class:`RenderOptions`) that the page builder consumes.
The primary entry point is :func:`load_artboard_config`.

Examples
--------
>>> from pathlib import Path
>>> from resume_artboard.config import load_artboard_config
>>> config = load_artboard_config(Path("config/artboard.yaml"))  # doctest: +SKIP
>>> config.layout.main  # doctest: +SKIP
('experience', 'education', 'projects')
"""

from .helpers import layout_from_metadata
from .loader import load_artboard_config
from .models import ArtboardConfig, ArtboardConfigError, LayoutConfig, RenderOptions

__all__ = [
    "ArtboardConfig",
    "ArtboardConfigError",
    "LayoutConfig",
    "RenderOptions",
    "layout_from_metadata",
    "load_artboard_config",
]
