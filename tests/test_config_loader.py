# tests/test_config_loader.py
from __future__ import annotations

import json
from pathlib import Path

import pytest

from retrospect.config.loader import load_config
from retrospect.config.types import (
    ConfigError,
    RetrospectConfig,
    Settings,
    UnsupportedConfigFormatError,
)


# -------------------------
# Helpers
# -------------------------


def write_text(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def write_json(path: Path, obj: object) -> Path:
    path.write_text(json.dumps(obj), encoding="utf-8")
    return path


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
    p = write_text(tmp_path / "config.txt", "cache_dir: .moon/cache")
    with pytest.raises(UnsupportedConfigFormatError):
        load_config(p)


# -------------------------
# Parse errors are wrapped
# -------------------------


@pytest.mark.parametrize(
    "name, content",
    [
        ("config.yaml", "report_files: [\n"),
        ("config.toml", "cache_dir = {"),
        ("config.json", '{"cache_dir": '),
    ],
)
def test_invalid_content_is_wrapped_as_config_error(
    tmp_path: Path, name: str, content: str
) -> None:
    p = write_text(tmp_path / name, content)
    with pytest.raises(ConfigError):
        load_config(p)


@pytest.mark.parametrize(
    "ext, content",
    [
        (".yaml", "[]\n"),
        (".yml", "- a\n- b\n"),
        (".json", "[]"),
        (".json", "null"),
    ],
)
def test_top_level_not_mapping_raises(tmp_path: Path, ext: str, content: str) -> None:
    p = write_text(tmp_path / f"config{ext}", content)
    with pytest.raises(ConfigError):
        load_config(p)


def test_empty_yaml_gives_defaults(tmp_path: Path) -> None:
    p = write_text(tmp_path / "config.yaml", "")
    assert load_config(p) == RetrospectConfig()


# -------------------------
# Field validation
# -------------------------


def test_unknown_field_raises(tmp_path: Path) -> None:
    p = write_text(tmp_path / "config.yaml", "cache_dir: .moon/cache\nnope: 1\n")
    with pytest.raises(ConfigError):
        load_config(p)


@pytest.mark.parametrize("field", ["cache_dir", "summary_title", "summary_intro"])
def test_string_fields_reject_other_types(tmp_path: Path, field: str) -> None:
    p = write_json(tmp_path / "config.json", {field: 1})
    with pytest.raises(ConfigError):
        load_config(p)


def test_cache_dir_empty_after_strip_raises(tmp_path: Path) -> None:
    p = write_text(tmp_path / "config.yaml", 'cache_dir: "   "\n')
    with pytest.raises(ConfigError):
        load_config(p)


@pytest.mark.parametrize(
    "content",
    [
        "report_files: ciReport.json\n",
        "report_files: []\n",
        "report_files: [1]\n",
        'report_files: ["   "]\n',
    ],
)
def test_bad_report_files_raise(tmp_path: Path, content: str) -> None:
    p = write_text(tmp_path / "config.yaml", content)
    with pytest.raises(ConfigError):
        load_config(p)


def test_duplicate_report_files_are_ignored_and_preserve_order(tmp_path: Path) -> None:
    p = write_text(
        tmp_path / "config.yaml",
        'report_files: [runReport.json, " runReport.json ", ciReport.json]\n',
    )
    cfg = load_config(p)
    assert cfg.report_files == ("runReport.json", "ciReport.json")


# -------------------------
# Happy paths (all formats)
# -------------------------


def test_valid_yaml_loads(tmp_path: Path) -> None:
    p = write_text(
        tmp_path / "retrospect.yml",
        "cache_dir: build/.moon/cache\n"
        "summary_title: Nightly\n"
        "summary_intro: Results of the nightly run.\n",
    )
    cfg = load_config(p)
    assert cfg.cache_dir == "build/.moon/cache"
    assert cfg.summary_title == "Nightly"
    assert cfg.summary_intro == "Results of the nightly run."
    assert cfg.report_files == ("ciReport.json", "runReport.json")


def test_valid_json_loads(tmp_path: Path) -> None:
    p = write_json(tmp_path / "retrospect.json", {"report_files": ["runReport.json"]})
    cfg = load_config(p)
    assert cfg.report_files == ("runReport.json",)
    assert cfg.cache_dir == ".moon/cache"


def test_valid_toml_loads(tmp_path: Path) -> None:
    p = write_text(
        tmp_path / "retrospect.toml",
        'cache_dir = ".cache/moon"\n' 'report_files = ["ciReport.json"]\n',
    )
    cfg = load_config(p)
    assert cfg.cache_dir == ".cache/moon"
    assert cfg.report_files == ("ciReport.json",)


# -------------------------
# Settings from the environment
# -------------------------


def test_settings_detect_github_actions(tmp_path: Path) -> None:
    settings = Settings.from_env(
        tmp_path,
        environ={"GITHUB_ACTIONS": "true", "GITHUB_STEP_SUMMARY": "/tmp/summary.md"},
    )
    assert settings.is_host_ci is True
    assert settings.summary_path == "/tmp/summary.md"
    assert settings.config == RetrospectConfig()


@pytest.mark.parametrize("value", [None, "false", "1", ""])
def test_settings_not_host_ci_unless_exactly_true(tmp_path: Path, value) -> None:
    environ = {} if value is None else {"GITHUB_ACTIONS": value}
    settings = Settings.from_env(tmp_path, environ=environ)
    assert settings.is_host_ci is False
    assert settings.summary_path is None


def test_without_summary_keeps_everything_else(tmp_path: Path) -> None:
    settings = Settings.from_env(tmp_path, environ={"GITHUB_ACTIONS": "true"})
    quiet = settings.without_summary()
    assert quiet.summary_enabled is False
    assert quiet.is_host_ci is True
    assert quiet.workspace_root == tmp_path
