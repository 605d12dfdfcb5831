"""Configuration loading for codeowner (.codeowner.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .scanning.annotations import DEFAULT_PREFIX
from .scanning.markers import DEFAULT_MARKER_FILENAME

CONFIG_FILENAME = ".codeowner.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be read or parsed."""


@dataclass
class CodeOwnerConfig:
    """Settings read from .codeowner.yml; None means "not configured"."""

    root: Path
    prefix: Optional[str] = None
    dirowner: Optional[str] = None
    protect: Optional[str] = None
    exclude_dirs: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class ScanOptions:
    """Effective settings for one run after defaults and overrides apply."""

    prefix: str = DEFAULT_PREFIX
    marker_filename: str = DEFAULT_MARKER_FILENAME
    protect: Optional[str] = None
    exclude_dirs: tuple[str, ...] = ()


def load_config(config_path: Path) -> CodeOwnerConfig:
    """Load configuration from a directory or an explicit file path."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return CodeOwnerConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{config_file.name} must contain a mapping at the root")

    return CodeOwnerConfig(
        root=root,
        prefix=_as_non_empty_str(data.get("prefix"), "prefix"),
        dirowner=_as_non_empty_str(data.get("dirowner"), "dirowner"),
        protect=_as_owner_string(data.get("protect")),
        exclude_dirs=_as_str_list(data.get("exclude_dirs")),
    )


def resolve_options(
    config: CodeOwnerConfig,
    *,
    prefix: Optional[str] = None,
    dirowner: Optional[str] = None,
    protect: Optional[str] = None,
) -> ScanOptions:
    """Merge explicit overrides over config values over built-in defaults."""
    effective_prefix = _first_set(prefix, config.prefix, DEFAULT_PREFIX)
    effective_dirowner = _first_set(dirowner, config.dirowner, DEFAULT_MARKER_FILENAME)
    if not effective_prefix:
        raise ConfigError("prefix must not be empty")
    if not effective_dirowner:
        raise ConfigError("dirowner must not be empty")
    return ScanOptions(
        prefix=effective_prefix,
        marker_filename=effective_dirowner,
        protect=protect if protect is not None else config.protect,
        exclude_dirs=tuple(config.exclude_dirs),
    )


def _first_set(*values: Optional[str]) -> str:
    for value in values:
        if value is not None:
            return value
    return ""


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Failed to read {path.name}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_non_empty_str(value: Any, key: str) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigError(f"{key} must be a string")
    if not value:
        raise ConfigError(f"{key} must not be empty")
    return value


def _as_owner_string(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, Sequence):
        return " ".join(str(item) for item in value)
    raise ConfigError("protect must be a string or a list of owners")


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []


__all__ = ["CONFIG_FILENAME", "CodeOwnerConfig", "ConfigError", "ScanOptions", "load_config", "resolve_options"]
