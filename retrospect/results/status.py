"""Status classification shared by the console and summary renderers.

Both renderers go through :func:`classify` so the terminal badge and the
summary emoji always agree on which family a status belongs to.
"""

from __future__ import annotations

from rich.text import Text

from retrospect.report.types import ActionStatus

from .types import StatusClass

_CLASSES: dict[ActionStatus, StatusClass] = {
    ActionStatus.RUNNING: StatusClass.RUNNING,
    ActionStatus.PASSED: StatusClass.OK,
    ActionStatus.FAILED: StatusClass.FAILURE,
    ActionStatus.TIMED_OUT: StatusClass.FAILURE,
    ActionStatus.ABORTED: StatusClass.FAILURE,
    ActionStatus.INVALID: StatusClass.FAILURE,
    ActionStatus.FAILED_AND_ABORT: StatusClass.FAILURE,
    ActionStatus.SKIPPED: StatusClass.SKIPPED,
    ActionStatus.CACHED: StatusClass.CACHED,
    ActionStatus.CACHED_FROM_REMOTE: StatusClass.CACHED,
}

_LABELS: dict[ActionStatus, str] = {
    ActionStatus.RUNNING: "RUNNING",
    ActionStatus.PASSED: "PASS",
    ActionStatus.FAILED: "FAIL",
    ActionStatus.TIMED_OUT: "TIMED OUT",
    ActionStatus.ABORTED: "ABORTED",
    ActionStatus.INVALID: "INVALID",
    ActionStatus.FAILED_AND_ABORT: "FAILED AND ABORT",
    ActionStatus.SKIPPED: "SKIP",
    ActionStatus.CACHED: "CACHED",
    ActionStatus.CACHED_FROM_REMOTE: "REMOTE CACHED",
}

_BADGE_STYLES: dict[StatusClass, str] = {
    StatusClass.RUNNING: "on green",
    StatusClass.OK: "on green",
    StatusClass.FAILURE: "on red",
    StatusClass.SKIPPED: "on blue",
    StatusClass.CACHED: "on blue",
    StatusClass.UNKNOWN: "on grey30",
}

_EMOJIS: dict[StatusClass, str] = {
    StatusClass.OK: "✅",
    StatusClass.FAILURE: "❌",
    StatusClass.SKIPPED: "⏭️",
    StatusClass.CACHED: "💾",
    StatusClass.RUNNING: "🏃",
    StatusClass.UNKNOWN: "❓",
}

UNKNOWN_LABEL = "UNKNOWN"


def check_tables() -> None:
    """Every status needs a class and a label, every class a badge and an emoji."""
    if not set(_CLASSES) == set(ActionStatus) == set(_LABELS):
        raise AssertionError("Unmapped ActionStatus member")

    if not set(_BADGE_STYLES) == set(StatusClass) == set(_EMOJIS):
        raise AssertionError("Unmapped StatusClass member")


check_tables()


def classify(status: object) -> StatusClass:
    parsed = ActionStatus.parse(status)
    if parsed is None:
        return StatusClass.UNKNOWN
    return _CLASSES[parsed]


def status_label(status: object) -> str:
    parsed = ActionStatus.parse(status)
    if parsed is None:
        return UNKNOWN_LABEL
    return _LABELS[parsed]


def status_badge(status: object) -> Text:
    """Short label on a colored background, e.g. `` PASS `` on green."""
    return Text(f" {status_label(status)} ", style=_BADGE_STYLES[classify(status)])


def status_emoji(status: object) -> str:
    return _EMOJIS[classify(status)]
