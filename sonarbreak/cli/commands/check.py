from __future__ import annotations
import click
from typing import Optional, Tuple

from pydantic import ValidationError

from sonarbreak.cli.formatter import console, format_counts_table, render_result_json
from sonarbreak.cli.outcome import process_result
from sonarbreak.config.gate import GateConfig
from sonarbreak.errors import LoadError, UnknownStatusError
from sonarbreak.gate.executor import AnalysisExecutor
from sonarbreak.gate.models import QueryAnalysis
from sonarbreak.utils.logging import get_logger

logger = get_logger(__name__)

LOAD_FAILURE_EXIT_CODE = 2


def build_query(
    gate_config: GateConfig,
    report_path: Optional[str],
    max_blockers: Optional[int],
    max_vulnerabilities: Optional[int],
    max_majors: Optional[int],
    max_minors: Optional[int],
    search_paths: Tuple[str, ...],
) -> QueryAnalysis:
    """Combines command line values with the gate config; command line values win."""

    def pick(cli_value, config_value):
        return cli_value if cli_value is not None else config_value

    return QueryAnalysis(
        report_path=pick(report_path, gate_config.report_path) or "",
        max_blockers=pick(max_blockers, gate_config.max_blockers),
        max_vulnerabilities=pick(max_vulnerabilities, gate_config.max_vulnerabilities),
        max_majors=pick(max_majors, gate_config.max_majors),
        max_minors=pick(max_minors, gate_config.max_minors),
        search_paths=list(search_paths) if search_paths else list(gate_config.search_paths),
    )


@click.command('check', help='Break the build when a Sonar preview report has too many new issues.')
@click.option('--report', 'report_path', envvar='SONAR_REPORT_EXPORT_PATH', help='Path of the preview report (sonar.report.export.path).')
@click.option('--max-blockers', type=click.IntRange(min=0), envvar='SONAR_PREVIEW_BREAK_MAX_BLOCKERS', help='Maximum number of new BLOCKER issues.')
@click.option('--max-vulnerabilities', type=click.IntRange(min=0), envvar='SONAR_PREVIEW_BREAK_MAX_VULNERABILITIES', help='Maximum number of new CRITICAL issues.')
@click.option('--max-majors', type=click.IntRange(min=0), envvar='SONAR_PREVIEW_BREAK_MAX_MAJORS', help='Maximum number of new MAJOR issues.')
@click.option('--max-minors', type=click.IntRange(min=0), envvar='SONAR_PREVIEW_BREAK_MAX_MINORS', help='Maximum number of new MINOR issues.')
@click.option('--search-path', 'search_paths', multiple=True, type=click.Path(file_okay=False), help='Directory searched for a relative report path. Repeatable.')
@click.option('--summary', is_flag=True, help='Print a table of new issues per severity.')
@click.option('--out-json', 'out_json_path', type=click.Path(dir_okay=False), help='Path to save the analysis result as JSON.')
@click.pass_context
def check(ctx, report_path, max_blockers, max_vulnerabilities, max_majors, max_minors, search_paths, summary, out_json_path):
    gate_config = GateConfig(**(ctx.obj.config.get('gate') or {}))

    try:
        query = build_query(
            gate_config, report_path, max_blockers, max_vulnerabilities, max_majors, max_minors, search_paths
        )
    except ValidationError:
        raise click.UsageError("A report path is required: pass --report or set gate.report_path.")

    executor = AnalysisExecutor()
    try:
        result = executor.process_analysis(query)
    except LoadError as e:
        click.echo("Problems to process the analysis.", err=True)
        click.echo(f"Cause: {e}", err=True)
        raise click.exceptions.Exit(LOAD_FAILURE_EXIT_CODE)

    if summary and executor.last_counts is not None:
        console.print(format_counts_table(executor.last_counts, query))

    if out_json_path:
        with open(out_json_path, 'w') as f:
            f.write(render_result_json(result, executor.last_counts))
        click.echo(f"Analysis result saved to {out_json_path}")

    try:
        process_result(result)
    except UnknownStatusError as e:
        raise click.ClickException(str(e))
