"""Resume page rendering pipeline.

This module turns an :class:`~resume_artboard.config.ArtboardConfig` into a
standalone HTML file. It wires the document loader, the Jinja environment and
the resume template, wraps the rendered element tree in ``page.jinja`` (which
derives CSS custom properties from the document theme), and writes the result
to disk.

Typical usage mirrors the build pipeline:

>>> from pathlib import Path
>>> from resume_artboard.config import load_artboard_config
>>> builder = ResumePageBuilder(load_artboard_config(Path("config/artboard.yaml")))  # doctest: +SKIP
>>> output_path = builder.run()  # doctest: +SKIP

The builder expects templates to reside under ``resume_artboard/templates``
unless a custom directory is provided. Side effects are limited to reading the
resume document and writing the rendered HTML.
"""

from __future__ import annotations

import typing as typ

from loguru import logger

from .config import layout_from_metadata
from .render import ResumeTemplate, build_environment
from .schema import load_resume

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .config import ArtboardConfig, LayoutConfig
    from .schema import Resume


class ResumePageBuilder:
    """Render a resume document into an HTML page."""

    def __init__(
        self, config: ArtboardConfig, *, templates_dir: Path | None = None
    ) -> None:
        """Initialize the builder and Jinja environment.

        Parameters
        ----------
        config : ArtboardConfig
            Parsed build configuration: resume source, output path, optional
            layout override and render options.
        templates_dir : Path, optional
            Directory containing Jinja templates. Defaults to
            ``resume_artboard/templates`` when not supplied.
        """
        self.config = config
        self.env = build_environment(templates_dir)
        self.resume_template = ResumeTemplate(self.env, config.options)
        self.page_template = self.env.get_template("page.jinja")

    def render(self, resume: Resume) -> str:
        """Return the full HTML page for ``resume``."""
        layout = self.resolve_layout(resume)
        logger.debug(
            "Rendering {} main and {} sidebar sections",
            len(layout.main),
            len(layout.sidebar),
        )
        body = self.resume_template.render(resume, layout)
        html = self.page_template.render(
            title=self.config.title or resume.basics.name or "Resume",
            theme=resume.metadata.theme,
            typography=resume.metadata.typography,
            body=body,
        )
        if not html.endswith("\n"):
            html += "\n"
        return html

    def resolve_layout(self, resume: Resume) -> LayoutConfig:
        """Return the configured layout, else the one stored in the document."""
        if self.config.layout is not None:
            return self.config.layout
        return layout_from_metadata(resume.metadata)

    def run(self) -> Path:
        """Render and write the resume HTML, returning the output path.

        Notes
        -----
        Parent directories are created as needed and the page is written as
        UTF-8. Errors raised while loading the document or writing the file
        propagate to the caller.
        """
        resume = load_resume(self.config.resume)
        html = self.render(resume)
        output_path = self.config.output
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(html, encoding="utf-8")
        logger.info("Rendered {} to {}", self.config.resume, output_path)
        return output_path


__all__ = ["ResumePageBuilder"]
