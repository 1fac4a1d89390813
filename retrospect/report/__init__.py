from .locator import find_report, load_report, parse_report
from .logs import read_task_logs, sanitize_project_name, task_state_dir
from .types import (
    Action,
    ActionNode,
    ActionStatus,
    Operation,
    ReportError,
    RunReport,
    TargetIdentity,
    TaskLogs,
)

__all__ = [
    "find_report",
    "load_report",
    "parse_report",
    "read_task_logs",
    "sanitize_project_name",
    "task_state_dir",
    "Action",
    "ActionNode",
    "ActionStatus",
    "Operation",
    "ReportError",
    "RunReport",
    "TargetIdentity",
    "TaskLogs",
]
