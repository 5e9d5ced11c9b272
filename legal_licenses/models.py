"""Core data models shared across legal_licenses components."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

NOT_CONFIGURED = "Not configured."
SHORT_REFERENCE_LENGTH = 7


@dataclass(frozen=True)
class ManifestDocument:
    """Decoded composer.lock contents."""

    path: Path
    packages: List[Dict[str, Any]]
    dev_packages: List[Dict[str, Any]] = field(default_factory=list)


@dataclass(frozen=True)
class DependencyRecord:
    """Metadata for one installed dependency."""

    name: str
    version: str
    commit_reference: str
    install_path: Path
    description: str = NOT_CONFIGURED
    homepage: str = NOT_CONFIGURED
    license_names: Optional[List[str]] = None

    @property
    def short_reference(self) -> str:
        return self.commit_reference[:SHORT_REFERENCE_LENGTH]

    @property
    def license_summary(self) -> str:
        """Comma-joined license names, or the placeholder when none were declared."""
        if self.license_names is None:
            return NOT_CONFIGURED
        return ", ".join(self.license_names)


@dataclass(frozen=True)
class RenderedDependency:
    """A dependency paired with its resolved license text."""

    record: DependencyRecord
    license_text: str
