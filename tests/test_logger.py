import pytest
from loguru import logger

from retrospect.logger import escape_workflow_data, setup_logging


def test_escape_workflow_data() -> None:
    assert escape_workflow_data("50% done\r\nnext") == "50%25 done%0D%0Anext"


def test_workflow_commands_inside_github_actions(capsys: pytest.CaptureFixture[str]) -> None:
    setup_logging(host_ci=True)

    logger.debug("Finding run report")
    logger.info("hello")
    logger.warning("two\nlines")
    logger.error("bad")

    assert capsys.readouterr().out.splitlines() == [
        "::debug::Finding run report",
        "::notice::hello",
        "::warning::two%0Alines",
        "::error::bad",
    ]


def test_debug_hidden_locally_unless_verbose(capsys: pytest.CaptureFixture[str]) -> None:
    setup_logging(verbose=False)
    logger.debug("quiet")
    logger.warning("loud")
    err = capsys.readouterr().err
    assert "quiet" not in err
    assert "loud" in err

    setup_logging(verbose=True)
    logger.debug("quiet")
    assert "quiet" in capsys.readouterr().err
