"""Locate bundled license text inside installed dependency directories."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from .logging import get_logger

LICENSE_NOT_FOUND = "Full license text not found in dependency source."

# Probed in order; the first readable, non-empty file wins.
CANDIDATE_FILENAMES = (
    "LICENSE.txt",
    "LICENSE.md",
    "LICENSE",
    "license.txt",
    "license.md",
    "license",
    "LICENSE-2.0.txt",
)


class LicenseResolver:
    """Returns the full license text for a dependency, or a fixed placeholder."""

    def __init__(self, candidates: Sequence[str] = CANDIDATE_FILENAMES) -> None:
        self.candidates = tuple(candidates)
        self.logger = get_logger("resolver")

    def resolve(self, install_path: Path) -> str:
        for filename in self.candidates:
            candidate = Path(install_path) / filename
            try:
                data = candidate.read_bytes()
            except OSError as exc:
                self.logger.debug("Skipping %s: %s", candidate, exc.strerror or exc)
                continue
            if not data:
                self.logger.debug("Skipping %s: empty file", candidate)
                continue
            return data.decode("utf-8", errors="replace")

        self.logger.debug("No license file found under %s", install_path)
        return LICENSE_NOT_FOUND


__all__ = ["CANDIDATE_FILENAMES", "LICENSE_NOT_FOUND", "LicenseResolver"]
