"""Load and merge configuration from .gitgrove.toml and env vars."""

from __future__ import annotations

import dataclasses
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from gitgrove.config.defaults import CONFIG_FILENAME
from gitgrove.config.schema import (
    LOG_FORMATS,
    LOG_LEVELS,
    OUTPUT_FORMATS,
    GitConfig,
    GroveConfig,
    LogConfig,
    LoggingConfig,
    OutputConfig,
)


class ConfigError(Exception):
    """Raised when config is malformed or unreadable."""


def find_config_file(repo_root: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = repo_root / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, ValueError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    raw = data.get(section, {})
    if not isinstance(raw, dict):
        raise ConfigError(f"[{section}] must be a table")
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    return cls(**{k: v for k, v in raw.items() if k in valid_fields})


def _env_int(name: str) -> Optional[int]:
    val = os.environ.get(name)
    if not val:
        return None
    try:
        return int(val)
    except ValueError:
        return None


def _merge_env_overrides(cfg: GroveConfig) -> None:
    """Apply GITGROVE_* environment variable overrides."""
    if (val := os.environ.get("GITGROVE_FORMAT")) in OUTPUT_FORMATS:
        cfg.output.format = val  # type: ignore[assignment]
    if (val := os.environ.get("GITGROVE_LOG_LEVEL", "").upper()) in LOG_LEVELS:
        cfg.logging.level = val
    if (val := os.environ.get("GITGROVE_LOG_FORMAT")) in LOG_FORMATS:
        cfg.logging.format = val  # type: ignore[assignment]
    if (timeout := _env_int("GITGROVE_GIT_TIMEOUT")) is not None and timeout > 0:
        cfg.git.timeout = timeout
    if (limit := _env_int("GITGROVE_LOG_LIMIT")) is not None and limit > 0:
        cfg.log.limit = limit


def load_config(
    repo_root: Path,
    config_override: Optional[str] = None,
) -> GroveConfig:
    """Load, validate, and return a GroveConfig."""
    config_path = find_config_file(repo_root, config_override)

    if config_path is None:
        cfg = GroveConfig()
    else:
        raw = _parse_toml(config_path)
        cfg = GroveConfig(
            version=raw.get("version", "1.0"),
            git=_build_section(raw, GitConfig, "git"),
            log=_build_section(raw, LogConfig, "log"),
            output=_build_section(raw, OutputConfig, "output"),
            logging=_build_section(raw, LoggingConfig, "logging"),
        )

    if cfg.output.format not in OUTPUT_FORMATS:
        raise ConfigError(f"Invalid output format: {cfg.output.format}")

    _merge_env_overrides(cfg)
    return cfg
