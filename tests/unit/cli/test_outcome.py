import click
import pytest

from sonarbreak.cli.outcome import GATE_FAILURE_EXIT_CODE, process_result
from sonarbreak.errors import UnknownStatusError
from sonarbreak.gate.models import AnalysisResult


def test_success_continues(capsys):
    process_result(AnalysisResult.success())
    assert capsys.readouterr().out.strip() == "Build ok."


def test_warn_continues_with_message(capsys):
    process_result(AnalysisResult.warn("3 new MINOR issues"))
    assert capsys.readouterr().out.strip() == "Build with warnings. 3 new MINOR issues"


def test_info_continues_with_message(capsys):
    process_result(AnalysisResult.info("nothing to check"))
    assert capsys.readouterr().out.strip() == "Build with some info messages. nothing to check"


def test_error_stops_the_build(capsys):
    with pytest.raises(click.exceptions.Exit) as exc_info:
        process_result(AnalysisResult.error("Number of BLOCKER severity is greater than 0. Actual number is 1"))

    assert exc_info.value.exit_code == GATE_FAILURE_EXIT_CODE
    assert "Build does not passed on sonar analysis. Number of BLOCKER" in capsys.readouterr().err


def test_unknown_status_aborts():
    bogus = AnalysisResult.model_construct(status="BOGUS", message=None)

    with pytest.raises(UnknownStatusError, match="Unknown result state encountered: BOGUS"):
        process_result(bogus)
