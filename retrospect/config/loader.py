import json
import tomllib
from pathlib import Path
from typing import Any, Mapping

import yaml

from .types import ConfigError, RetrospectConfig, UnsupportedConfigFormatError


def load_config(path: str | Path) -> RetrospectConfig:
    pure_path = Path(path).expanduser().resolve()

    if not pure_path.exists():
        raise ConfigError(f"Config file not found: {pure_path}")

    if not pure_path.is_file():
        raise ConfigError(f"Config path is not a file: {pure_path}")

    fmt = _detect_format(pure_path)
    raw_file = _parse_file(pure_path, fmt)
    return _build_config(raw_file)


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
    match fmt:
        case "yaml":
            return _parse_yaml(path)
        case "toml":
            return _parse_toml(path)
        case "json":
            return _parse_json(path)
        case _:
            raise AssertionError("Unreachable")


def _parse_yaml(path: Path) -> Mapping[str, Any]:
    try:
        raw_file = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"{path}: invalid YAML") from exc

    # An empty YAML document means "all defaults"
    if raw_file is None:
        return {}

    if not isinstance(raw_file, Mapping):
        raise ConfigError(
            f"{path}: YAML parsed successfully but top-level value is not an object: {type(raw_file)}"
        )

    return raw_file


def _parse_toml(path: Path) -> Mapping[str, Any]:
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"{path}: invalid TOML") from exc


def _parse_json(path: Path) -> Mapping[str, Any]:
    try:
        raw_file = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigError(f"{path}: invalid JSON") from exc

    if not isinstance(raw_file, Mapping):
        raise ConfigError(
            f"{path}: JSON parsed successfully but top-level value is not an object: {type(raw_file)}"
        )

    return raw_file


def _build_config(raw: Mapping[str, Any]) -> RetrospectConfig:
    keys = {"cache_dir", "report_files", "summary_title", "summary_intro"}
    values: dict[str, Any] = {}

    for field in raw.keys():
        if field not in keys:
            raise ConfigError(f"Can't process: {field}")

    for field in ("cache_dir", "summary_title", "summary_intro"):
        if field not in raw:
            continue

        if not isinstance(raw[field], str):
            raise ConfigError(f"'{field}' should be a string")

        values[field] = raw[field].strip()

    if "cache_dir" in values and len(values["cache_dir"]) < 1:
        raise ConfigError("'cache_dir' can't be empty")

    if "report_files" in raw:
        values["report_files"] = _build_report_files(raw["report_files"])

    return RetrospectConfig(**values)


def _build_report_files(raw: Any) -> tuple[str, ...]:
    if not isinstance(raw, list):
        raise ConfigError("Report files should be in a list.")

    files: list[str] = []

    for item in raw:
        if not isinstance(item, str):
            raise ConfigError(f"{item} should be a string in the report file list")

        name = item.strip()

        if len(name) < 1:
            raise ConfigError("A report file name is empty")

        # Allows to ignore duplicate file names, first one keeps its priority
        if name in files:
            continue

        files.append(name)

    if len(files) < 1:
        raise ConfigError("There must be at least one report file name")

    return tuple(files)
