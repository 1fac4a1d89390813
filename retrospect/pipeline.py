from loguru import logger

from retrospect.config import Settings
from retrospect.render import ConsoleRenderer, render_summary
from retrospect.report import find_report
from retrospect.results import TaskResult, iter_task_results

MISSING_REPORT_WARNING = "Run report does not exist, has `moon ci` or `moon run` ran?"


def run_retrospect(
    settings: Settings, renderer: ConsoleRenderer | None = None
) -> list[TaskResult]:
    """Render the task results of the last moon run.

    Each result is printed as soon as it is built; the job summary is written
    once at the end from the collected list.
    """
    report = find_report(settings.workspace_root, settings.config)

    if report is None:
        logger.warning(MISSING_REPORT_WARNING)
        return []

    renderer = renderer or ConsoleRenderer(host_ci=settings.is_host_ci)
    results: list[TaskResult] = []

    for result in iter_task_results(report, settings.workspace_root, settings.config):
        renderer.render(result)
        results.append(result)

    render_summary(results, settings)
    return results
