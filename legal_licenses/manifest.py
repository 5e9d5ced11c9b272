"""Locate and decode composer.lock manifests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from .errors import ManifestFormatError, ManifestReadError, MissingManifestError
from .logging import get_logger
from .models import NOT_CONFIGURED, DependencyRecord, ManifestDocument

MANIFEST_FILENAME = "composer.lock"

logger = get_logger("manifest")


def verify_manifest_present(root: Path, filename: str = MANIFEST_FILENAME) -> Path:
    """Return the manifest path, raising when the project has not been installed."""
    path = Path(root) / filename
    if path.is_file():
        return path
    raise MissingManifestError(
        "Composer Lock file missing! Please run composer install and try again."
    )


class ManifestParser:
    """Reads composer.lock and turns its package entries into dependency records."""

    def parse(self, path: Path) -> ManifestDocument:
        try:
            contents = Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ManifestReadError(f"Unable to read {path}: {exc}") from exc

        try:
            data = json.loads(contents)
        except json.JSONDecodeError as exc:
            raise ManifestFormatError(f"{Path(path).name} is not valid JSON: {exc}") from exc

        if not isinstance(data, dict):
            raise ManifestFormatError(f"{Path(path).name} must contain a JSON object at the root")

        packages = self._package_list(data, "packages")
        dev_packages = self._package_list(data, "packages-dev")
        logger.debug(
            "Parsed %s: %d packages, %d dev packages", path, len(packages), len(dev_packages)
        )
        return ManifestDocument(path=Path(path), packages=packages, dev_packages=dev_packages)

    def records(
        self,
        document: ManifestDocument,
        vendor_path: Path,
        *,
        include_dev: bool = False,
    ) -> List[DependencyRecord]:
        """Return records in manifest order, optionally followed by dev packages."""
        entries = list(document.packages)
        if include_dev:
            entries.extend(document.dev_packages)
        return [self.to_record(entry, vendor_path, index=index) for index, entry in enumerate(entries)]

    def to_record(
        self,
        entry: Mapping[str, Any],
        vendor_path: Path,
        *,
        index: int = 0,
    ) -> DependencyRecord:
        label = self._entry_label(entry, index)
        name = self._required_str(entry, "name", label)
        version = self._required_str(entry, "version", label)

        source = entry.get("source")
        if not isinstance(source, Mapping):
            raise ManifestFormatError(f"{label} is missing required field 'source.reference'")
        reference = source.get("reference")
        if not isinstance(reference, str):
            raise ManifestFormatError(f"{label} is missing required field 'source.reference'")

        return DependencyRecord(
            name=name,
            version=version,
            commit_reference=reference,
            install_path=Path(vendor_path) / name,
            description=self._optional_str(entry, "description", label),
            homepage=self._optional_str(entry, "homepage", label),
            license_names=self._license_names(entry, label),
        )

    @staticmethod
    def _package_list(data: Dict[str, Any], key: str) -> List[Dict[str, Any]]:
        value = data.get(key)
        if value is None:
            return []
        if not isinstance(value, list):
            raise ManifestFormatError(f"'{key}' must be a list of package objects")
        for position, item in enumerate(value):
            if not isinstance(item, dict):
                raise ManifestFormatError(f"'{key}' entry #{position} must be an object")
        return value

    @staticmethod
    def _entry_label(entry: Mapping[str, Any], index: int) -> str:
        name = entry.get("name")
        if isinstance(name, str) and name:
            return f"Package '{name}'"
        return f"Package entry #{index}"

    @staticmethod
    def _required_str(entry: Mapping[str, Any], key: str, label: str) -> str:
        value = entry.get(key)
        if not isinstance(value, str):
            raise ManifestFormatError(f"{label} is missing required field '{key}'")
        return value

    @staticmethod
    def _optional_str(entry: Mapping[str, Any], key: str, label: str) -> str:
        value = entry.get(key)
        if value is None:
            return NOT_CONFIGURED
        if not isinstance(value, str):
            raise ManifestFormatError(f"{label} has a non-string '{key}' field")
        return value

    @staticmethod
    def _license_names(entry: Mapping[str, Any], label: str) -> Optional[List[str]]:
        value = entry.get("license")
        if value is None:
            return None
        if isinstance(value, str):
            return [value]
        if isinstance(value, list) and all(isinstance(item, str) for item in value):
            return list(value)
        raise ManifestFormatError(f"{label} has a 'license' field that is not a list of strings")


__all__ = ["MANIFEST_FILENAME", "ManifestParser", "verify_manifest_present"]
