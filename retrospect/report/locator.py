import json
from pathlib import Path
from typing import Any, Mapping

from loguru import logger

from retrospect.config import RetrospectConfig

from .types import Action, ActionNode, Operation, ReportError, RunReport


def report_candidates(config: RetrospectConfig) -> list[Path]:
    """Relative report paths, highest priority first."""
    return [Path(config.cache_dir) / name for name in config.report_files]


def find_report(
    workspace_root: str | Path, config: RetrospectConfig | None = None
) -> RunReport | None:
    config = config or RetrospectConfig()
    root = Path(workspace_root)

    for local_path in report_candidates(config):
        report_path = root / local_path

        logger.debug(f"Finding run report at {local_path.as_posix()}")

        if report_path.exists():
            logger.debug("Found!")
            return load_report(report_path)

    return None


def load_report(path: str | Path) -> RunReport:
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ReportError(f"{path}: invalid JSON") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise ReportError(f"{path}: unreadable report") from exc

    if not isinstance(raw, Mapping):
        raise ReportError(
            f"{path}: top-level value is not an object: {type(raw)}"
        )

    return parse_report(raw, source=str(path))


def parse_report(raw: Mapping[str, Any], source: str = "<report>") -> RunReport:
    raw_actions = raw.get("actions", [])

    if not isinstance(raw_actions, list):
        raise ReportError(f"{source}: 'actions' must be a list, got {type(raw_actions)}")

    actions = []
    for index, raw_action in enumerate(raw_actions):
        if not isinstance(raw_action, Mapping):
            raise ReportError(f"{source}: action #{index} must be an object")
        actions.append(_build_action(raw_action))

    return RunReport(actions=tuple(actions))


def _build_action(raw: Mapping[str, Any]) -> Action:
    node = raw.get("node")
    if not isinstance(node, Mapping):
        node = {}

    params = node.get("params")
    if not isinstance(params, Mapping):
        params = {}

    target = params.get("target", node.get("target", ""))
    status = raw.get("status", "")

    operations = []
    for raw_op in raw.get("operations") or []:
        if not isinstance(raw_op, Mapping):
            continue
        meta = raw_op.get("meta")
        operations.append(Operation(meta=meta if isinstance(meta, Mapping) else {}))

    return Action(
        node=ActionNode(
            action=str(node.get("action", "")),
            target=target if isinstance(target, str) else "",
        ),
        status=status if isinstance(status, str) else str(status),
        operations=tuple(operations),
    )
