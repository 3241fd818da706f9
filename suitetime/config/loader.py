import json
import os
import tomllib
from pathlib import Path
from typing import Any, Mapping

import structlog
import yaml

from .types import CLOCKS, LOG_LEVELS, AggregatorConfig, ConfigError, UnsupportedConfigFormatError

logger = structlog.get_logger(__name__)

ENV_PREFIX = "SUITETIME_"


def load_config(path: str | Path | None = None) -> AggregatorConfig:
    raw_file: Mapping[str, Any] = {}

    if path is not None:
        pure_path = Path(path).expanduser().resolve()

        if not pure_path.exists():
            raise ConfigError(f"Config file not found: {pure_path}")

        if not pure_path.is_file():
            raise ConfigError(f"Config path is not a file: {pure_path}")

        fmt = _detect_format(pure_path)
        raw_file = _parse_file(pure_path, fmt)
        logger.debug("config_loaded", path=str(pure_path), format=fmt)

    return _build_config({**_env_overrides(raw_file), **raw_file})


def _detect_format(path: Path) -> str:
    fmt = path.suffix
    match fmt:
        case ".yaml" | ".yml":
            return "yaml"
        case ".toml":
            return "toml"
        case ".json":
            return "json"
        case _:
            raise UnsupportedConfigFormatError(
                f"Non supported file extension: {fmt}\n Expected format: .yml/.yaml, .toml, .json"
            )


def _parse_file(path: Path, fmt: str) -> Mapping[str, Any]:
    text = path.read_text(encoding="utf-8")
    match fmt:
        case "yaml":
            try:
                raw_file = yaml.safe_load(text)
            except yaml.YAMLError as exc:
                raise ConfigError(f"{path}: invalid YAML") from exc
            # An empty or comment-only YAML file means "all defaults"
            if raw_file is None:
                raw_file = {}
        case "toml":
            try:
                raw_file = tomllib.loads(text)
            except tomllib.TOMLDecodeError as exc:
                raise ConfigError(f"{path}: invalid TOML") from exc
        case "json":
            try:
                raw_file = json.loads(text)
            except json.JSONDecodeError as exc:
                raise ConfigError(f"{path}: invalid JSON") from exc
        case _:
            raise AssertionError("Unreachable")

    if not isinstance(raw_file, Mapping):
        raise ConfigError(
            f"{path}: {fmt.upper()} parsed successfully but top-level value is not an object: {type(raw_file)}"
        )

    return raw_file


def _env_overrides(present: Mapping[str, Any]) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    for key in ("clock", "strict_end", "log_level"):
        value = os.environ.get(ENV_PREFIX + key.upper())
        if key in present or value is None:
            continue
        if key == "strict_end":
            match value.strip().lower():
                case "true" | "1" | "yes":
                    overrides[key] = True
                case "false" | "0" | "no":
                    overrides[key] = False
                case _:
                    raise ConfigError(f"{ENV_PREFIX}STRICT_END must be true or false, got {value!r}")
        else:
            overrides[key] = value
    return overrides


def _build_config(raw: Mapping[str, Any]) -> AggregatorConfig:
    keys = {"clock", "strict_end", "log_level"}
    fields: dict[str, Any] = {}

    for field in raw.keys():
        if field not in keys:
            raise ConfigError(f"Can't process: {field}")

    if "clock" in raw:
        if not isinstance(raw["clock"], str):
            raise ConfigError("'clock' should be a string")

        clock = raw["clock"].strip().lower()

        if clock not in CLOCKS:
            raise ConfigError(f"Unknown clock '{clock}', expected one of: {', '.join(sorted(CLOCKS))}")

        fields["clock"] = clock

    if "strict_end" in raw:
        if not isinstance(raw["strict_end"], bool):
            raise ConfigError(f"'strict_end' should be a boolean, got {type(raw['strict_end'])}")

        fields["strict_end"] = raw["strict_end"]

    if "log_level" in raw:
        if not isinstance(raw["log_level"], str):
            raise ConfigError("'log_level' should be a string")

        level = raw["log_level"].strip().lower()

        if level not in LOG_LEVELS:
            raise ConfigError(f"Unknown log level '{level}', expected one of: {', '.join(LOG_LEVELS)}")

        fields["log_level"] = level

    return AggregatorConfig(**fields)
