"""Pipeline orchestration for the generate command."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List

from .config import ConfigError, LicensesConfig, load_config
from .errors import OutputWriteError
from .logging import get_logger
from .manifest import ManifestParser, verify_manifest_present
from .models import DependencyRecord, RenderedDependency
from .rendering import DocumentBuilder
from .resolver import LicenseResolver


@dataclass
class GenerateOutcome:
    """Result of a generate run."""

    path: Path
    dependency_count: int


class Orchestrator:
    """Runs the precondition check, parse, resolve and assemble stages in order."""

    def __init__(
        self,
        parser: ManifestParser | None = None,
        resolver: LicenseResolver | None = None,
        builder: DocumentBuilder | None = None,
    ) -> None:
        self.parser = parser or ManifestParser()
        self.resolver = resolver or LicenseResolver()
        self.builder = builder
        self.logger = get_logger("orchestrator")

    def run_generate(
        self,
        path: str = ".",
        *,
        output: str | None = None,
        include_dev: bool | None = None,
    ) -> GenerateOutcome:
        """Generate the licenses document for the project rooted at ``path``."""
        root = Path(path).expanduser().resolve()
        manifest_path = verify_manifest_present(root)
        self.logger.info("Starting generate run for %s", root)

        config = self._load_config(root)
        if output:
            config.output = output
        if include_dev is not None:
            config.include_dev = include_dev

        document = self.parser.parse(manifest_path)
        records = self.parser.records(
            document,
            config.vendor_path,
            include_dev=config.include_dev,
        )
        self.logger.debug("Manifest lists %d dependencies", len(records))

        self.logger.info("Generating Licenses file...")
        rendered = self._resolve_licenses(records)
        builder = self._resolve_builder(config)
        text = builder.build(rendered)

        output_path = config.output_path
        try:
            output_path.write_text(text, encoding="utf-8")
        except OSError as exc:
            self._log_exception(f"Failed to write {output_path}", exc)
            raise OutputWriteError(f"Unable to write {output_path}: {exc}") from exc
        self.logger.info("Licenses written to %s", output_path)
        return GenerateOutcome(path=output_path, dependency_count=len(rendered))

    def _resolve_licenses(self, records: List[DependencyRecord]) -> List[RenderedDependency]:
        rendered: List[RenderedDependency] = []
        for record in records:
            self.logger.debug("Resolving license for %s %s", record.name, record.version)
            text = self.resolver.resolve(record.install_path)
            rendered.append(RenderedDependency(record=record, license_text=text))
        return rendered

    def _resolve_builder(self, config: LicensesConfig) -> DocumentBuilder:
        if self.builder is not None:
            return self.builder
        return DocumentBuilder(templates_dir=config.templates_dir)

    def _load_config(self, root: Path) -> LicensesConfig:
        try:
            return load_config(root)
        except ConfigError as exc:
            self.logger.warning("Ignoring invalid configuration: %s", exc)
            return LicensesConfig(root=root)

    def _log_exception(self, message: str, exc: Exception) -> None:
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.exception("%s: %s", message, exc)
        else:
            self.logger.error("%s: %s", message, exc)


__all__ = ["GenerateOutcome", "Orchestrator"]
