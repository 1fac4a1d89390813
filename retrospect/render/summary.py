from __future__ import annotations

import re
from pathlib import Path
from typing import Sequence

from loguru import logger

from retrospect.config import Settings
from retrospect.results import TaskResult, status_emoji

TABLE_HEADER = ("Task", "Status", "Command", "Outputs")
OUTPUT_LABELS = {"stdout": "📤 stdout", "stderr": "📥 stderr"}
PLACEHOLDER = "-"


class SummaryError(Exception):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)


class Summary:
    """Markdown buffer for the GitHub Actions job summary.

    Calls chain, and nothing touches the disk until :meth:`write`. The buffer
    is cleared once it has been written.
    """

    def __init__(self, path: str | Path | None = None):
        self.path = Path(path) if path else None
        self._buffer = ""

    def add_raw(self, text: str, add_eol: bool = False) -> Summary:
        self._buffer += text
        if add_eol:
            self.add_eol()
        return self

    def add_eol(self) -> Summary:
        return self.add_raw("\n")

    def add_heading(self, text: str, level: int = 1) -> Summary:
        level = min(max(level, 1), 6)
        return self.add_raw(f"{'#' * level} {text}\n\n")

    def add_code_block(self, code: str, lang: str | None = None) -> Summary:
        fence = _fence_for(code)
        body = code if code.endswith("\n") else code + "\n"
        return self.add_raw(f"{fence}{lang or ''}\n{body}{fence}\n\n")

    def add_table(self, rows: Sequence[Sequence[str]]) -> Summary:
        """First row is the header."""
        if not rows:
            return self

        header, *body = rows
        lines = [_table_row(header), _table_row(["---"] * len(header))]
        lines.extend(_table_row(row) for row in body)
        return self.add_raw("\n".join(lines) + "\n\n")

    def add_break(self) -> Summary:
        return self.add_raw("<br>\n\n")

    def stringify(self) -> str:
        return self._buffer

    def is_empty(self) -> bool:
        return len(self._buffer) == 0

    def clear(self) -> Summary:
        self._buffer = ""
        return self

    def write(self, overwrite: bool = False) -> Summary:
        if self.path is None:
            raise SummaryError(
                "Unable to find environment variable for $GITHUB_STEP_SUMMARY. "
                "Check if your runtime environment supports job summaries."
            )

        mode = "w" if overwrite else "a"
        with self.path.open(mode, encoding="utf-8") as handle:
            handle.write(self._buffer)

        return self.clear()


def _fence_for(code: str) -> str:
    longest = max((len(run) for run in re.findall(r"`+", code)), default=0)
    return "`" * max(3, longest + 1)


def _table_row(cells: Sequence[str]) -> str:
    escaped = [_table_cell(cell) for cell in cells]
    return "| " + " | ".join(escaped) + " |"


def _table_cell(cell: str) -> str:
    return cell.replace("|", "\\|").replace("\r\n", "\n").replace("\n", "<br>")


def summary_row(result: TaskResult) -> list[str]:
    outputs = ", ".join(OUTPUT_LABELS[stream] for stream in result.outputs())
    return [
        result.target,
        f"{status_emoji(result.status)} {result.status}",
        result.command or PLACEHOLDER,
        outputs or PLACEHOLDER,
    ]


def build_summary(results: Sequence[TaskResult], settings: Settings) -> Summary:
    config = settings.config
    summary = Summary(settings.summary_path)

    summary.add_heading(config.summary_title).add_raw(config.summary_intro, add_eol=True)
    summary.add_eol()

    summary.add_table([list(TABLE_HEADER), *(summary_row(r) for r in results)])
    summary.add_break()

    for result in results:
        summary.add_heading(f"Task: {result.target}", 3)

        if result.command:
            summary.add_code_block(result.command, "bash")

        if result.stdout is not None:
            summary.add_heading("STDOUT", 4)
            summary.add_code_block(result.stdout, "text")

        if result.stderr is not None:
            summary.add_heading("STDERR", 4)
            summary.add_code_block(result.stderr, "text")

        summary.add_break()

    return summary


def render_summary(results: Sequence[TaskResult], settings: Settings) -> bool:
    """Publish the job summary; returns False when there was nothing to do."""
    if not settings.is_host_ci or not settings.summary_enabled:
        return False

    if len(results) == 0:
        logger.debug("No task executions, skipping job summary")
        return False

    build_summary(results, settings).write()
    logger.debug(f"Wrote job summary for {len(results)} task(s)")
    return True
