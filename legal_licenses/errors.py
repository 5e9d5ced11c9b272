"""Exception hierarchy for licenses report generation."""

from __future__ import annotations


class LegalLicensesError(RuntimeError):
    """Base class for fatal errors that abort a generate run."""


class MissingManifestError(LegalLicensesError):
    """Raised when composer.lock is absent from the project root."""


class ManifestReadError(LegalLicensesError):
    """Raised when composer.lock exists but cannot be read."""


class ManifestFormatError(LegalLicensesError):
    """Raised when composer.lock is not valid JSON or an entry has the wrong shape."""


class OutputWriteError(LegalLicensesError):
    """Raised when the licenses document cannot be written."""


__all__ = [
    "LegalLicensesError",
    "ManifestFormatError",
    "ManifestReadError",
    "MissingManifestError",
    "OutputWriteError",
]
