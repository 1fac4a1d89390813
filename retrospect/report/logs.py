from pathlib import Path

from retrospect.config import RetrospectConfig

from .types import TargetIdentity, TaskLogs

STDOUT_FILE = "stdout.log"
STDERR_FILE = "stderr.log"


def sanitize_project_name(project: str) -> str:
    # Keeps nested project ids a single directory segment
    return project.replace("/", "-")


def task_state_dir(
    workspace_root: str | Path,
    identity: TargetIdentity,
    config: RetrospectConfig | None = None,
) -> Path:
    config = config or RetrospectConfig()
    return (
        Path(workspace_root)
        / config.cache_dir
        / "states"
        / sanitize_project_name(identity.project)
        / identity.task
    )


def read_task_logs(
    workspace_root: str | Path,
    identity: TargetIdentity,
    config: RetrospectConfig | None = None,
) -> TaskLogs:
    state_dir = task_state_dir(workspace_root, identity, config)
    return TaskLogs(
        stdout=_read_optional(state_dir / STDOUT_FILE),
        stderr=_read_optional(state_dir / STDERR_FILE),
    )


def _read_optional(path: Path) -> str:
    if not path.is_file():
        return ""
    return path.read_text(encoding="utf-8")
