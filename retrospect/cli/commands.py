from __future__ import annotations

import argparse
import os
from typing import Callable

from loguru import logger

from retrospect.config import RetrospectConfig, Settings, load_config
from retrospect.logger import setup_logging
from retrospect.pipeline import run_retrospect

from .args import build_parser


def contain_failures(step: Callable[[], object]) -> int:
    """Run a reporting step and always report success.

    A broken report must never fail the CI job it is reporting on, so any
    error is logged and swallowed here and nowhere else.
    """
    try:
        step()
    except KeyboardInterrupt:
        return 130
    except Exception:
        logger.exception("moon-retrospect failed")
    return 0


def run_cli(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    host_ci = os.environ.get("GITHUB_ACTIONS") == "true"
    setup_logging(verbose=args.verbose, host_ci=host_ci)

    return contain_failures(lambda: cmd_retrospect(args))


def cmd_retrospect(args: argparse.Namespace) -> None:
    settings = _settings_from(args)
    results = run_retrospect(settings)
    logger.debug(f"Rendered {len(results)} task result(s)")


def _settings_from(args: argparse.Namespace) -> Settings:
    config = load_config(args.config) if args.config else RetrospectConfig()
    settings = Settings.from_env(args.root, config)

    if args.no_summary:
        return settings.without_summary()
    return settings


def main() -> None:
    raise SystemExit(run_cli())
