from __future__ import annotations

from pathlib import Path

import pytest

from resume_artboard.config import (
    ArtboardConfigError,
    LayoutConfig,
    RenderOptions,
    layout_from_metadata,
    load_artboard_config,
)
from resume_artboard.schema import Metadata


def _write(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "artboard.yaml"
    path.write_text(body.strip() + "\n", encoding="utf-8")
    return path


def test_load_resolves_paths_relative_to_config(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        """
resume: data/resume.json
output: out/cv.html
title: My CV
layout:
  main: [experience, " education ", ""]
  sidebar: [skills]
options:
  sanitize_html: true
""",
    )
    config = load_artboard_config(path)
    assert config.resume == tmp_path.resolve() / "data" / "resume.json"
    assert config.output == tmp_path.resolve() / "out" / "cv.html"
    assert config.title == "My CV"
    assert config.layout == LayoutConfig(
        main=("experience", "education"), sidebar=("skills",)
    )
    assert config.options == RenderOptions(sanitize_html=True)


def test_load_applies_defaults(tmp_path: Path) -> None:
    path = _write(tmp_path, "resume: resume.json")
    config = load_artboard_config(path)
    assert config.output == tmp_path.resolve() / "public" / "resume.html"
    assert config.title is None
    assert config.layout is None
    assert config.options == RenderOptions()


def test_absolute_paths_are_kept(tmp_path: Path) -> None:
    target = tmp_path / "elsewhere" / "resume.json"
    path = _write(tmp_path, f"resume: {target}")
    assert load_artboard_config(path).resume == target


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match="not found"):
        load_artboard_config(tmp_path / "missing.yaml")


@pytest.mark.parametrize(
    ("body", "message"),
    [
        ("- resume.json", "must be a mapping"),
        ("title: CV", "requires a 'resume'"),
        ("resume: r.json\nlayout: [experience]", "mapping of columns"),
        ("resume: r.json\nlayout:\n  footer: [skills]", "Unknown layout columns"),
        ("resume: r.json\nlayout:\n  main: experience", "must be a list"),
        ("resume: r.json\nlayout:\n  main: [1]", "non-string key"),
        (
            "resume: r.json\nlayout:\n  main: [skills]\n  sidebar: [skills]",
            "both layout columns: skills",
        ),
        ("resume: r.json\noptions: [sanitize_html]", "must be a mapping"),
        ("resume: r.json\noptions:\n  sanitize_html: 'yes'", "must be a boolean"),
    ],
)
def test_invalid_configs_raise(tmp_path: Path, body: str, message: str) -> None:
    path = _write(tmp_path, body)
    with pytest.raises(ArtboardConfigError, match=message):
        load_artboard_config(path)


def test_empty_file_reports_missing_resume(tmp_path: Path) -> None:
    path = tmp_path / "artboard.yaml"
    path.write_text("", encoding="utf-8")
    with pytest.raises(ArtboardConfigError, match="requires a 'resume'"):
        load_artboard_config(path)


def test_layout_from_metadata_flattens_pages() -> None:
    metadata = Metadata(
        layout=[
            [["experience", "education"], ["skills"]],
            [["projects"], ["languages", "skills"]],
            [["awards"]],
        ]
    )
    layout = layout_from_metadata(metadata)
    assert layout.main == ("experience", "education", "projects", "awards")
    assert layout.sidebar == ("skills", "languages")


def test_layout_from_metadata_handles_empty_layout() -> None:
    assert layout_from_metadata(Metadata()) == LayoutConfig()
