# tests/test_config_loader.py
from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from suitetime.clock import MonotonicClock, WallClock
from suitetime.config.loader import load_config
from suitetime.config.types import AggregatorConfig, ConfigError, UnsupportedConfigFormatError


# -------------------------
# Helpers
# -------------------------


def write_text(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def write_json(path: Path, obj: object) -> Path:
    path.write_text(json.dumps(obj), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("SUITETIME_CLOCK", "SUITETIME_STRICT_END", "SUITETIME_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


# -------------------------
# Basic file/path errors
# -------------------------


def test_missing_file_raises_config_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_config(tmp_path / "missing.yaml")


def test_path_is_dir_raises_config_error(tmp_path: Path) -> None:
    d = tmp_path / "dir"
    d.mkdir()
    with pytest.raises(ConfigError):
        load_config(d)


def test_unsupported_extension_raises_unsupported_format(tmp_path: Path) -> None:
    p = write_text(tmp_path / "config.txt", "clock: wall")
    with pytest.raises(UnsupportedConfigFormatError):
        load_config(p)


# -------------------------
# Parse errors are wrapped
# -------------------------


@pytest.mark.parametrize(
    "name, content",
    [
        ("config.yaml", "clock: [\n"),
        ("config.toml", "clock = {"),
        ("config.json", '{"clock": '),
    ],
)
def test_invalid_file_is_wrapped_as_config_error(tmp_path: Path, name: str, content: str) -> None:
    p = write_text(tmp_path / name, content)
    with pytest.raises(ConfigError):
        load_config(p)


@pytest.mark.parametrize(
    "ext, content",
    [
        (".yaml", "[]\n"),
        (".json", "[]"),
        (".json", "null"),
    ],
)
def test_top_level_not_mapping_raises(tmp_path: Path, ext: str, content: str) -> None:
    p = write_text(tmp_path / f"config{ext}", content)
    with pytest.raises(ConfigError):
        load_config(p)


# -------------------------
# Defaults and values
# -------------------------


def test_no_path_gives_defaults() -> None:
    config = load_config()

    assert config == AggregatorConfig()
    assert isinstance(config.make_clock(), MonotonicClock)
    assert config.logging_level() == logging.INFO


@pytest.mark.parametrize(
    "content",
    [
        "",
        "# nothing configured yet\n",
        "\n# clock: wall\n\n",
        "null\n",
    ],
)
def test_empty_yaml_gives_defaults(tmp_path: Path, content: str) -> None:
    p = write_text(tmp_path / "suitetime.yml", content)
    assert load_config(p) == AggregatorConfig()


@pytest.mark.parametrize(
    "name, content",
    [
        ("suitetime.yaml", "clock: wall\nstrict_end: true\nlog_level: debug\n"),
        ("suitetime.toml", 'clock = "wall"\nstrict_end = true\nlog_level = "debug"\n'),
        ("suitetime.json", '{"clock": "wall", "strict_end": true, "log_level": "debug"}'),
    ],
)
def test_all_formats_load_the_same_config(tmp_path: Path, name: str, content: str) -> None:
    config = load_config(write_text(tmp_path / name, content))

    assert config == AggregatorConfig(clock="wall", strict_end=True, log_level="debug")
    assert isinstance(config.make_clock(), WallClock)
    assert config.logging_level() == logging.DEBUG


def test_values_are_normalized(tmp_path: Path) -> None:
    p = write_json(tmp_path / "c.json", {"clock": " Monotonic ", "log_level": "WARNING"})
    assert load_config(p) == AggregatorConfig(clock="monotonic", log_level="warning")


# -------------------------
# Field validation
# -------------------------


@pytest.mark.parametrize(
    "obj",
    [
        {"nope": 1},
        {"clock": 3},
        {"clock": "sundial"},
        {"strict_end": "true"},
        {"strict_end": 1},
        {"log_level": 10},
        {"log_level": "verbose"},
    ],
)
def test_bad_fields_raise(tmp_path: Path, obj: dict) -> None:
    p = write_json(tmp_path / "c.json", obj)
    with pytest.raises(ConfigError):
        load_config(p)


# -------------------------
# Environment overrides
# -------------------------


def test_env_fills_missing_keys(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SUITETIME_CLOCK", "wall")
    monkeypatch.setenv("SUITETIME_STRICT_END", "yes")
    monkeypatch.setenv("SUITETIME_LOG_LEVEL", "error")

    assert load_config() == AggregatorConfig(clock="wall", strict_end=True, log_level="error")


def test_file_wins_over_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SUITETIME_CLOCK", "wall")
    monkeypatch.setenv("SUITETIME_STRICT_END", "true")
    p = write_text(tmp_path / "c.yaml", "clock: monotonic\n")

    assert load_config(p) == AggregatorConfig(clock="monotonic", strict_end=True)


@pytest.mark.parametrize(
    "name, value",
    [
        ("SUITETIME_STRICT_END", "maybe"),
        ("SUITETIME_CLOCK", "sundial"),
        ("SUITETIME_LOG_LEVEL", "loud"),
    ],
)
def test_bad_env_values_raise(monkeypatch: pytest.MonkeyPatch, name: str, value: str) -> None:
    monkeypatch.setenv(name, value)
    with pytest.raises(ConfigError):
        load_config()
