"""Configuration loading for legal-licenses (.legal-licenses.yml)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from .errors import LegalLicensesError

CONFIG_FILENAME = ".legal-licenses.yml"
DEFAULT_OUTPUT = "licenses.md"
DEFAULT_VENDOR_DIR = "vendor"


class ConfigError(LegalLicensesError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class LicensesConfig:
    """Represents the settings defined in .legal-licenses.yml."""

    root: Path
    output: str = DEFAULT_OUTPUT
    vendor_dir: str = DEFAULT_VENDOR_DIR
    include_dev: bool = False
    templates_dir: Optional[Path] = None

    @property
    def output_path(self) -> Path:
        return self.root / self.output

    @property
    def vendor_path(self) -> Path:
        return self.root / self.vendor_dir


def load_config(config_path: Path) -> LicensesConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return LicensesConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    config = LicensesConfig(root=root)
    output = _as_str(data.get("output"))
    if output:
        config.output = output
    vendor_dir = _as_str(data.get("vendor_dir"))
    if vendor_dir:
        config.vendor_dir = vendor_dir
    include_dev = _as_bool(data.get("include_dev"))
    if include_dev is not None:
        config.include_dev = include_dev
    templates_dir = _as_str(data.get("templates_dir"))
    if templates_dir:
        config.templates_dir = root / templates_dir
    return config


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read {path.name}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


__all__ = ["CONFIG_FILENAME", "ConfigError", "LicensesConfig", "load_config"]
