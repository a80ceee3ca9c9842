"""Load and merge configuration from .giturl.toml and env vars."""

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

from giturl.config.schema import (
    OUTPUT_FORMATS,
    PORT_POLICIES,
    TARGETS,
    ConvertConfig,
    GitURLConfig,
    OutputConfig,
)

CONFIG_FILENAME = ".giturl.toml"

_TRUE = ("1", "true", "yes")
_FALSE = ("0", "false", "no")


class ConfigError(Exception):
    """Raised when config is malformed or unreadable."""


def find_config_file(base_dir: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = base_dir / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    section_data = data.get(section, {})
    if not isinstance(section_data, dict):
        raise ConfigError(f"[{section}] must be a table")
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {k: v for k, v in section_data.items() if k in valid_fields}
    return cls(**filtered)


def _validate(cfg: GitURLConfig) -> None:
    if cfg.convert.target not in TARGETS:
        raise ConfigError(f"Invalid convert.target: {cfg.convert.target!r}")
    if cfg.convert.port_policy not in PORT_POLICIES:
        raise ConfigError(f"Invalid convert.port_policy: {cfg.convert.port_policy!r}")
    if cfg.output.format not in OUTPUT_FORMATS:
        raise ConfigError(f"Invalid output.format: {cfg.output.format!r}")
    if not isinstance(cfg.convert.with_suffix, bool):
        raise ConfigError("convert.with_suffix must be true or false")
    if cfg.convert.user is not None and not isinstance(cfg.convert.user, str):
        raise ConfigError("convert.user must be a string")


def _merge_env_overrides(cfg: GitURLConfig) -> None:
    """Apply GITURL_* environment variable overrides."""
    if val := os.environ.get("GITURL_FORMAT"):
        if val in OUTPUT_FORMATS:
            cfg.output.format = val  # type: ignore[assignment]
    if val := os.environ.get("GITURL_TARGET"):
        if val.lower() in TARGETS:
            cfg.convert.target = val.lower()
    if val := os.environ.get("GITURL_PORT_POLICY"):
        if val in PORT_POLICIES:
            cfg.convert.port_policy = val  # type: ignore[assignment]
    if (val := os.environ.get("GITURL_USER")) is not None:
        cfg.convert.user = val
    if val := os.environ.get("GITURL_WITH_SUFFIX"):
        if val.lower() in _TRUE:
            cfg.convert.with_suffix = True
        elif val.lower() in _FALSE:
            cfg.convert.with_suffix = False


def load_config(
    base_dir: Path,
    config_override: Optional[str] = None,
) -> GitURLConfig:
    """Load, validate, and return a GitURLConfig."""
    config_path = find_config_file(base_dir, config_override)

    if config_path is None:
        cfg = GitURLConfig()
    else:
        raw = _parse_toml(config_path)
        try:
            cfg = GitURLConfig(
                version=str(raw.get("version", "1.0")),
                convert=_build_section(raw, ConvertConfig, "convert"),
                output=_build_section(raw, OutputConfig, "output"),
            )
        except TypeError as exc:
            raise ConfigError(f"Invalid config in {config_path}: {exc}") from exc
        _validate(cfg)

    _merge_env_overrides(cfg)
    return cfg
