from __future__ import annotations

import argparse


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="moon-retrospect",
        description="Print the task results of the last moon run and publish a job summary",
    )

    parser.add_argument(
        "--root",
        default=".",
        help="Workspace root containing the .moon directory",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to an optional config file (.yml/.yaml, .toml, .json)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show debug logs",
    )
    parser.add_argument(
        "--no-summary",
        action="store_true",
        help="Never write the GitHub Actions job summary",
    )

    return parser
