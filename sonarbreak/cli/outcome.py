import click

from sonarbreak.errors import UnknownStatusError
from sonarbreak.gate.models import AnalysisResult, AnalysisStatus
from sonarbreak.utils.logging import get_logger

logger = get_logger(__name__)

GATE_FAILURE_EXIT_CODE = 1


def process_result(result: AnalysisResult) -> None:
    """
    Maps an analysis result onto the build outcome.

    ERROR stops the build with a non-zero exit code, WARN and INFO only
    report their message and SUCCESS reports that the build is fine.
    """
    status = result.status
    if status == AnalysisStatus.ERROR:
        logger.error("Quality gate failed", reason=result.message)
        click.echo(f"Build does not passed on sonar analysis. {result.message}", err=True)
        raise click.exceptions.Exit(GATE_FAILURE_EXIT_CODE)
    elif status == AnalysisStatus.WARN:
        click.echo(f"Build with warnings. {result.message}")
    elif status == AnalysisStatus.INFO:
        click.echo(f"Build with some info messages. {result.message}")
    elif status == AnalysisStatus.SUCCESS:
        click.echo("Build ok.")
    else:
        raise UnknownStatusError(f"Unknown result state encountered: {status}")
