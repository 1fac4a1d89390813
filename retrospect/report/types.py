from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping

RUN_TASK = "run-task"
TASK_EXECUTION = "task-execution"


class ActionStatus(str, Enum):
    RUNNING = "running"
    PASSED = "passed"
    FAILED = "failed"
    TIMED_OUT = "timed-out"
    ABORTED = "aborted"
    INVALID = "invalid"
    FAILED_AND_ABORT = "failed-and-abort"
    SKIPPED = "skipped"
    CACHED = "cached"
    CACHED_FROM_REMOTE = "cached-from-remote"

    @classmethod
    def parse(cls, value: object) -> ActionStatus | None:
        """Return the matching member, or None for a status this tool doesn't know."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except (ValueError, TypeError):
            return None


@dataclass(frozen=True)
class TargetIdentity:
    project: str
    task: str

    def __str__(self) -> str:
        return f"{self.project}:{self.task}"


@dataclass(frozen=True)
class ActionNode:
    action: str
    target: str = ""


@dataclass(frozen=True)
class Operation:
    meta: Mapping[str, Any] = field(default_factory=dict)

    @property
    def type(self) -> str | None:
        value = self.meta.get("type")
        return value if isinstance(value, str) else None


@dataclass(frozen=True)
class Action:
    node: ActionNode
    status: str
    operations: tuple[Operation, ...] = ()

    @property
    def is_task_execution(self) -> bool:
        return self.node.action == RUN_TASK


@dataclass(frozen=True)
class RunReport:
    actions: tuple[Action, ...]

    def __iter__(self):
        return iter(self.actions)

    def __len__(self):
        return len(self.actions)


@dataclass(frozen=True)
class TaskLogs:
    stdout: str = ""
    stderr: str = ""


class ReportError(Exception):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)
