"""Builds the licenses Markdown document from Jinja templates."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

from jinja2 import Environment, FileSystemLoader

from ..models import RenderedDependency

DOCUMENT_TEMPLATE = "licenses.md.j2"


class DocumentBuilder:
    """Renders the boilerplate header followed by one block per dependency."""

    def __init__(self, templates_dir: Path | None = None) -> None:
        self.templates_dir = templates_dir
        self._env = self._create_env(templates_dir)

    def build(self, dependencies: Iterable[RenderedDependency]) -> str:
        """Return the full document text, preserving the order of ``dependencies``."""
        template = self._env.get_template(DOCUMENT_TEMPLATE)
        return template.render(dependencies=list(dependencies))

    @staticmethod
    def _create_env(templates_dir: Path | None) -> Environment:
        directories: List[str] = []
        if templates_dir:
            directories.append(str(templates_dir))
        default_dir = str(Path(__file__).with_name("templates"))
        if default_dir not in directories:
            directories.append(default_dir)
        loader = FileSystemLoader(directories)
        return Environment(
            loader=loader,
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )


__all__ = ["DOCUMENT_TEMPLATE", "DocumentBuilder"]
