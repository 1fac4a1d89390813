from .console import ConsoleRenderer, make_console
from .summary import Summary, SummaryError, build_summary, render_summary

__all__ = [
    "ConsoleRenderer",
    "make_console",
    "Summary",
    "SummaryError",
    "build_summary",
    "render_summary",
]
