"""Tests for license file discovery."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from legal_licenses.resolver import CANDIDATE_FILENAMES, LICENSE_NOT_FOUND, LicenseResolver


def _write(directory: Path, filename: str, content: str) -> None:
    directory.mkdir(parents=True, exist_ok=True)
    (directory / filename).write_text(content, encoding="utf-8")


def _case_sensitive_fs(directory: Path) -> bool:
    directory.mkdir(parents=True, exist_ok=True)
    probe = directory / "CaseProbe"
    probe.write_text("x", encoding="utf-8")
    try:
        return not (directory / "caseprobe").exists()
    finally:
        probe.unlink()


def test_candidate_order_is_fixed() -> None:
    assert CANDIDATE_FILENAMES == (
        "LICENSE.txt",
        "LICENSE.md",
        "LICENSE",
        "license.txt",
        "license.md",
        "license",
        "LICENSE-2.0.txt",
    )


def test_resolve_returns_sentinel_when_directory_missing(tmp_path: Path) -> None:
    assert LicenseResolver().resolve(tmp_path / "vendor" / "acme" / "widget") == LICENSE_NOT_FOUND


def test_resolve_returns_sentinel_when_no_candidate_present(tmp_path: Path) -> None:
    package = tmp_path / "acme" / "widget"
    _write(package, "COPYING", "GPL text")
    _write(package, "README.md", "readme")

    assert LicenseResolver().resolve(package) == LICENSE_NOT_FOUND


@pytest.mark.parametrize("filename", CANDIDATE_FILENAMES)
def test_resolve_reads_each_candidate(tmp_path: Path, filename: str) -> None:
    package = tmp_path / "acme" / "widget"
    _write(package, filename, f"text from {filename}\n")

    assert LicenseResolver().resolve(package) == f"text from {filename}\n"


@pytest.mark.parametrize("winner_index", range(len(CANDIDATE_FILENAMES)))
def test_resolve_prefers_earliest_candidate(tmp_path: Path, winner_index: int) -> None:
    package = tmp_path / "acme" / "widget"
    if not _case_sensitive_fs(package):
        pytest.skip("precedence between case variants needs a case-sensitive filesystem")
    for filename in CANDIDATE_FILENAMES[winner_index:]:
        _write(package, filename, f"text from {filename}")

    expected = CANDIDATE_FILENAMES[winner_index]
    assert LicenseResolver().resolve(package) == f"text from {expected}"


def test_resolve_prefers_license_txt_over_license(tmp_path: Path) -> None:
    package = tmp_path / "acme" / "widget"
    _write(package, "LICENSE", "plain")
    _write(package, "LICENSE.txt", "txt")

    assert LicenseResolver().resolve(package) == "txt"


def test_resolve_skips_empty_candidates(tmp_path: Path) -> None:
    package = tmp_path / "acme" / "widget"
    _write(package, "LICENSE.txt", "")
    _write(package, "LICENSE.md", "markdown license")

    assert LicenseResolver().resolve(package) == "markdown license"


def test_resolve_skips_directories_named_like_candidates(tmp_path: Path) -> None:
    package = tmp_path / "acme" / "widget"
    (package / "LICENSE.txt").mkdir(parents=True)
    _write(package, "LICENSE-2.0.txt", "Apache License")

    assert LicenseResolver().resolve(package) == "Apache License"


@pytest.mark.skipif(
    not hasattr(os, "geteuid") or os.geteuid() == 0,
    reason="permission bits are not enforced for root",
)
def test_resolve_skips_unreadable_candidates(tmp_path: Path) -> None:
    package = tmp_path / "acme" / "widget"
    _write(package, "LICENSE.txt", "locked")
    _write(package, "LICENSE", "open")
    locked = package / "LICENSE.txt"
    locked.chmod(0)
    try:
        assert LicenseResolver().resolve(package) == "open"
    finally:
        locked.chmod(0o644)


def test_resolve_replaces_undecodable_bytes(tmp_path: Path) -> None:
    package = tmp_path / "acme" / "widget"
    package.mkdir(parents=True)
    (package / "LICENSE").write_bytes("Copyright © Zoë".encode("latin-1"))

    text = LicenseResolver().resolve(package)

    assert text.startswith("Copyright ")
    assert "�" in text


def test_resolve_uses_custom_candidates(tmp_path: Path) -> None:
    package = tmp_path / "acme" / "widget"
    _write(package, "COPYING", "GPL")

    assert LicenseResolver(candidates=["COPYING"]).resolve(package) == "GPL"
