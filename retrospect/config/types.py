from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Mapping

DEFAULT_CACHE_DIR = ".moon/cache"
DEFAULT_REPORT_FILES = ("ciReport.json", "runReport.json")
DEFAULT_SUMMARY_TITLE = "Moon CI Retrospect Results"
DEFAULT_SUMMARY_INTRO = "This report shows the results of Moon CI task executions."


@dataclass(frozen=True)
class RetrospectConfig:
    cache_dir: str = DEFAULT_CACHE_DIR
    report_files: tuple[str, ...] = DEFAULT_REPORT_FILES
    summary_title: str = DEFAULT_SUMMARY_TITLE
    summary_intro: str = DEFAULT_SUMMARY_INTRO


@dataclass(frozen=True)
class Settings:
    """Everything one invocation needs, resolved up front.

    ``is_host_ci`` and ``summary_path`` come from the environment; the rest
    from the command line and the optional config file.
    """

    workspace_root: Path
    config: RetrospectConfig = field(default_factory=RetrospectConfig)
    is_host_ci: bool = False
    summary_path: str | None = None
    summary_enabled: bool = True

    @classmethod
    def from_env(
        cls,
        workspace_root: str | Path,
        config: RetrospectConfig | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> Settings:
        env = os.environ if environ is None else environ
        return cls(
            workspace_root=Path(workspace_root),
            config=config or RetrospectConfig(),
            is_host_ci=env.get("GITHUB_ACTIONS") == "true",
            summary_path=env.get("GITHUB_STEP_SUMMARY") or None,
        )

    def without_summary(self) -> Settings:
        return replace(self, summary_enabled=False)


class ConfigError(Exception):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)


class UnsupportedConfigFormatError(ConfigError):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)
