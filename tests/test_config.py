"""Tests for config loading and jq resolution."""

from __future__ import annotations

import os
import stat
from pathlib import Path

import pytest

from jqlive.core.config import (
    DEFAULT_SHORTHANDS,
    DEFAULT_THEME,
    build_shorthands,
    get_user_config_path,
    load_config,
    parse_config,
    read_config,
    resolve_jq,
)
from jqlive.core.errors import ConfigError


def _fake_jq(tmp_path: Path) -> Path:
    exe = tmp_path / "jq"
    exe.write_text("#!/bin/sh\ncat\n")
    exe.chmod(exe.stat().st_mode | stat.S_IXUSR)
    return exe


def test_parse_config_full() -> None:
    raw = parse_config(
        """
jq: /opt/jq
theme: dracula
log_file: /tmp/jqlive.log
shorthands:
  names: "[.[].name]"
  keys: "keys"
"""
    )
    assert raw.jq == "/opt/jq"
    assert raw.theme == "dracula"
    assert raw.log_file == "/tmp/jqlive.log"
    assert list(raw.shorthands) == ["names", "keys"]


def test_parse_config_empty_gives_defaults() -> None:
    raw = parse_config("")
    assert raw.jq == "jq"
    assert raw.shorthands == {}
    assert raw.theme is None


def test_parse_config_rejects_bad_types() -> None:
    with pytest.raises(ConfigError) as info:
        parse_config("jq: 3\nshorthands: [a, b]\n")
    assert len(info.value.errors) == 2


def test_parse_config_rejects_blank_shorthand() -> None:
    with pytest.raises(ConfigError) as info:
        parse_config('shorthands:\n  blank: ""\n  spaces: "   "\n  ok: ".a"\n')
    assert len(info.value.errors) == 2
    assert "blank" in str(info.value)


def test_parse_config_rejects_non_mapping() -> None:
    with pytest.raises(ConfigError):
        parse_config("- just\n- a list\n")


def test_parse_config_reports_yaml_errors() -> None:
    with pytest.raises(ConfigError) as info:
        parse_config("shorthands: {unclosed")
    assert "YAML parse error" in str(info.value)


def test_user_entries_override_defaults_in_place() -> None:
    table = build_shorthands({"keys": "keys", "names": "[.[].name]"})
    names = list(table)
    assert names[: len(DEFAULT_SHORTHANDS)] == list(DEFAULT_SHORTHANDS)
    assert names[-1] == "names"
    assert table["keys"] == "keys"
    with pytest.raises(TypeError):
        table["new"] = "."  # type: ignore[index]


def test_config_path_from_env(monkeypatch, tmp_path: Path) -> None:
    target = tmp_path / "custom.yaml"
    monkeypatch.setenv("JQLIVE_CONFIG", str(target))
    assert get_user_config_path() == target


def test_missing_default_config_is_fine(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("JQLIVE_CONFIG", str(tmp_path / "absent.yaml"))
    assert read_config().shorthands == {}


def test_missing_explicit_config_is_an_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        read_config(tmp_path / "absent.yaml")


def test_resolve_jq_missing(tmp_path: Path) -> None:
    with pytest.raises(ConfigError) as info:
        resolve_jq(str(tmp_path / "nope"))
    assert "jq executable not found" in str(info.value)


@pytest.mark.skipif(os.name == "nt", reason="POSIX executable bit")
def test_load_config_resolves_and_overrides(tmp_path: Path) -> None:
    exe = _fake_jq(tmp_path)
    cfg_file = tmp_path / "config.yaml"
    cfg_file.write_text(f"jq: {exe}\ntheme: dracula\nshorthands:\n  first: .[0]\n")

    cfg = load_config(cfg_file)
    assert cfg.jq_path == str(exe)
    assert cfg.theme == "dracula"
    assert cfg.shorthands["first"] == ".[0]"

    cfg = load_config(cfg_file, theme="monokai", log_file="x.log")
    assert cfg.theme == "monokai"
    assert cfg.log_file == "x.log"


@pytest.mark.skipif(os.name == "nt", reason="POSIX executable bit")
def test_load_config_defaults(monkeypatch, tmp_path: Path) -> None:
    exe = _fake_jq(tmp_path)
    monkeypatch.setenv("JQLIVE_CONFIG", str(tmp_path / "absent.yaml"))
    cfg = load_config(jq=str(exe))
    assert cfg.theme == DEFAULT_THEME
    assert dict(cfg.shorthands) == DEFAULT_SHORTHANDS
    assert cfg.log_file is None
