"""Configuration loading: shorthand table, jq location and display options."""

from __future__ import annotations

import os
import shutil
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

import yaml

from jqlive.core.errors import ConfigError

DEFAULT_JQ = "jq"
DEFAULT_THEME = "monokai"

DEFAULT_SHORTHANDS: dict[str, str] = {
    "keys": "keys[]",
    "values": ".[]",
    "length": "length",
    "types": "map_values(type)",
    "paths": '[paths | map(tostring) | join(".")]',
    "leaves": '[leaf_paths | map(tostring) | join(".")]',
}


@dataclass(frozen=True)
class Config:
    jq_path: str
    shorthands: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType(dict(DEFAULT_SHORTHANDS))
    )
    theme: str = DEFAULT_THEME
    log_file: str | None = None


@dataclass(frozen=True)
class RawConfig:
    """Values read from the config file before the executable is resolved."""

    jq: str = DEFAULT_JQ
    shorthands: dict[str, str] = field(default_factory=dict)
    theme: str | None = None
    log_file: str | None = None


def get_user_config_path() -> Path:
    """Get platform-appropriate user config file."""
    env = os.environ.get("JQLIVE_CONFIG")
    if env:
        return Path(env).expanduser()
    if os.name == "nt":  # Windows
        base = os.environ.get("APPDATA", os.path.expanduser("~"))
        return Path(base) / "jqlive" / "config.yaml"
    else:  # macOS, Linux
        return Path.home() / ".config" / "jqlive" / "config.yaml"


def parse_config(text: str) -> RawConfig:
    try:
        data = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise ConfigError([f"YAML parse error: {e}"]) from None

    if not isinstance(data, dict):
        raise ConfigError(["Top-level YAML must be a mapping."])

    errors: list[str] = []
    jq = data.get("jq", DEFAULT_JQ)
    if not isinstance(jq, str) or not jq.strip():
        errors.append("jq must be a non-empty string")

    raw_shorthands = data.get("shorthands") or {}
    shorthands: dict[str, str] = {}
    if not isinstance(raw_shorthands, dict):
        errors.append("shorthands must be a mapping of name to filter")
    else:
        for name, expr in raw_shorthands.items():
            if not isinstance(name, str) or not isinstance(expr, str):
                errors.append(f"shorthand {name!r} must map a string to a string")
                continue
            if not expr.strip():
                errors.append(f"shorthand {name!r} must not expand to an empty filter")
                continue
            shorthands[name] = expr

    theme = data.get("theme")
    if theme is not None and not isinstance(theme, str):
        errors.append("theme must be a string")
    log_file = data.get("log_file")
    if log_file is not None and not isinstance(log_file, str):
        errors.append("log_file must be a string")

    if errors:
        raise ConfigError(errors)
    return RawConfig(jq=jq, shorthands=shorthands, theme=theme, log_file=log_file)


def read_config(path: Path | None = None) -> RawConfig:
    """Read the config file; a missing default file yields the defaults."""
    explicit = path is not None
    target = path if path is not None else get_user_config_path()
    if not target.exists():
        if explicit:
            raise ConfigError([f"config file not found: {target}"])
        return RawConfig()
    try:
        text = target.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError([f"cannot read {target}: {e}"]) from None
    return parse_config(text)


def resolve_jq(candidate: str) -> str:
    """Resolve the jq executable to an absolute path or raise ConfigError."""
    resolved = shutil.which(os.path.expanduser(candidate))
    if resolved is None:
        raise ConfigError([f"jq executable not found: {candidate}"])
    return resolved


def build_shorthands(overrides: Mapping[str, str]) -> Mapping[str, str]:
    """Defaults first, then user entries; user entries replace same-named defaults in place."""
    merged = dict(DEFAULT_SHORTHANDS)
    merged.update(overrides)
    return MappingProxyType(merged)


def load_config(
    path: Path | None = None,
    *,
    jq: str | None = None,
    theme: str | None = None,
    log_file: str | None = None,
) -> Config:
    """Build the session configuration. Explicit arguments override the file."""
    raw = read_config(path)
    return Config(
        jq_path=resolve_jq(jq or raw.jq),
        shorthands=build_shorthands(raw.shorthands),
        theme=theme or raw.theme or DEFAULT_THEME,
        log_file=log_file or raw.log_file,
    )
