from .normalizer import build_task_result, command_of, iter_task_results, parse_target
from .status import classify, status_badge, status_emoji, status_label
from .types import StatusClass, TaskResult

__all__ = [
    "build_task_result",
    "command_of",
    "iter_task_results",
    "parse_target",
    "classify",
    "status_badge",
    "status_emoji",
    "status_label",
    "StatusClass",
    "TaskResult",
]
