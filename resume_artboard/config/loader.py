"""Load artboard configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ

from loguru import logger
from ruamel.yaml import YAML

from .helpers import (
    _build_layout_config,
    _build_render_options,
    _optional_str,
    _resolve_path,
)
from .models import ArtboardConfig, ArtboardConfigError

if typ.TYPE_CHECKING:
    from pathlib import Path

DEFAULT_OUTPUT = "public/resume.html"


def load_artboard_config(path: Path) -> ArtboardConfig:
    """Load the YAML configuration describing a resume build.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/artboard.yaml``).

    Returns
    -------
    ArtboardConfig
        Parsed configuration with the resume source, output path, optional
        layout override and render options. Relative paths are resolved
        against the directory holding the configuration file.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    ArtboardConfigError
        If the top-level YAML structure is not a mapping, the ``resume`` entry
        is missing, or the layout or options blocks are malformed.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from resume_artboard.config import load_artboard_config
    >>> config = load_artboard_config(Path("config/artboard.yaml"))  # doctest: +SKIP
    >>> config.output.name  # doctest: +SKIP
    'resume.html'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise ArtboardConfigError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    base_dir = path.resolve().parent

    resume = _optional_str(raw.get("resume"))
    if not resume:
        msg = "Artboard configuration requires a 'resume' document path."
        raise ArtboardConfigError(msg)

    config = ArtboardConfig(
        resume=_resolve_path(resume, base_dir),
        output=_resolve_path(raw.get("output") or DEFAULT_OUTPUT, base_dir),
        title=_optional_str(raw.get("title")),
        layout=_build_layout_config(raw.get("layout")),
        options=_build_render_options(raw.get("options")),
    )
    logger.debug("Loaded artboard config from {}", path)
    return config


__all__ = ["load_artboard_config"]
