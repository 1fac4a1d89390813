from __future__ import annotations

import re
from contextlib import contextmanager
from typing import Iterator, TextIO

from rich.console import Console
from rich.text import Text

from retrospect.results import TaskResult, status_badge

STDOUT_MARKER = Text.assemble(
    ("　", "on color(236)"),
    ("⏺", "green on color(236)"),
    (" STDOUT　", "on color(236)"),
)
STDERR_MARKER = Text.assemble(
    ("　", "on color(236)"),
    ("⏺", "red on color(236)"),
    (" STDERR　", "on color(236)"),
)

ANSI_ESCAPE = re.compile(r"\x1b\[[0-?]*[ -/]*[@-~]")


def make_console(file: TextIO | None = None, *, host_ci: bool = False) -> Console:
    # Job logs aren't a TTY but do render ANSI colors
    return Console(
        file=file,
        force_terminal=True if host_ci else None,
        color_system="256" if host_ci else "auto",
        highlight=False,
        soft_wrap=True,
        emoji=False,
        markup=False,
    )


class ConsoleRenderer:
    """Streams task results as collapsible log groups."""

    def __init__(self, console: Console | None = None, *, host_ci: bool = False):
        self.console = console or make_console(host_ci=host_ci)
        self.host_ci = host_ci

    @contextmanager
    def group(self, title: Text) -> Iterator[None]:
        if self.host_ci:
            self.console.print(Text.assemble("::group::", title))
        else:
            self.console.print(title)
        try:
            yield
        finally:
            if self.host_ci:
                self.console.print("::endgroup::")

    def render(self, result: TaskResult) -> None:
        title = Text.assemble(status_badge(result.status), " ", (result.target, "bold"))

        with self.group(title):
            if result.command is not None:
                self.console.print(Text(f"$ {result.command}", style="blue"))

            if result.stdout is not None:
                self.console.print(STDOUT_MARKER)
                self.write_captured(result.stdout)

            if result.stderr is not None:
                self.console.print(STDERR_MARKER)
                self.write_captured(result.stderr)

    def write_captured(self, text: str) -> None:
        """Write task output as captured, tabs and carriage returns included.

        Color codes are only dropped when the console renders no colors.
        """
        if not self.console.is_terminal or self.console.color_system is None:
            text = ANSI_ESCAPE.sub("", text)
        if not text.endswith("\n"):
            text += "\n"
        self.console.file.write(text)
        self.console.file.flush()
