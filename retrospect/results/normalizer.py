from pathlib import Path
from typing import Iterator

from loguru import logger

from retrospect.config import RetrospectConfig
from retrospect.report import read_task_logs
from retrospect.report.types import (
    TASK_EXECUTION,
    Action,
    ActionStatus,
    RunReport,
    TargetIdentity,
)

from .types import TaskResult

UNKNOWN = "unknown"


def parse_target(target: str) -> TargetIdentity:
    project, _, task = target.partition(":")
    return TargetIdentity(project=project or UNKNOWN, task=task or UNKNOWN)


def command_of(action: Action) -> str | None:
    for operation in action.operations:
        if operation.type == TASK_EXECUTION:
            command = operation.meta.get("command")
            return command if isinstance(command, str) else None
    return None


def _captured(text: str) -> str | None:
    # Whitespace-only output counts as no output; content is kept as written
    return text if text.strip() else None


def build_task_result(
    action: Action, workspace_root: str | Path, config: RetrospectConfig
) -> TaskResult:
    identity = parse_target(action.node.target)
    logs = read_task_logs(workspace_root, identity, config)

    return TaskResult(
        target=str(identity),
        status=action.status,
        command=command_of(action),
        stdout=_captured(logs.stdout),
        stderr=_captured(logs.stderr),
    )


def iter_task_results(
    report: RunReport,
    workspace_root: str | Path,
    config: RetrospectConfig | None = None,
) -> Iterator[TaskResult]:
    """Yield one result per task execution, in report order.

    Results are produced lazily so that callers can render each one as soon
    as it exists.
    """
    config = config or RetrospectConfig()

    for action in report:
        if not action.is_task_execution:
            continue

        result = build_task_result(action, workspace_root, config)

        if ActionStatus.parse(result.status) is None:
            logger.debug(f"Unrecognized status '{result.status}' for {result.target}")

        yield result
