"""Logging setup for moon-retrospect.

Outside CI, records go to stderr through loguru's colorized console format.
Inside GitHub Actions they become workflow commands (``::warning::...``) so
the runner files them as annotations and debug lines.
"""

import sys

from loguru import logger

_WORKFLOW_COMMANDS = {
    "TRACE": "debug",
    "DEBUG": "debug",
    "INFO": "notice",
    "SUCCESS": "notice",
    "WARNING": "warning",
    "ERROR": "error",
    "CRITICAL": "error",
}


def escape_workflow_data(text: str) -> str:
    return text.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def _workflow_command_sink(message) -> None:
    record = message.record
    command = _WORKFLOW_COMMANDS.get(record["level"].name, "notice")
    text = str(message).rstrip("\n")
    sys.stdout.write(f"::{command}::{escape_workflow_data(text)}\n")
    sys.stdout.flush()


def _console_format(verbose: bool) -> str:
    if verbose:
        return (
            "<green>{time:HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
            "<level>{message}</level>"
        )
    return "<level>{level: <8}</level> | <level>{message}</level>"


def setup_logging(verbose: bool = False, host_ci: bool = False) -> None:
    logger.remove()

    if host_ci:
        # The runner hides ::debug:: lines unless step debugging is enabled
        logger.add(_workflow_command_sink, level="DEBUG", format="{message}")
        return

    logger.add(
        sys.stderr,
        level="DEBUG" if verbose else "INFO",
        format=_console_format(verbose),
        colorize=True,
    )
