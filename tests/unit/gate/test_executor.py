from pathlib import Path
from unittest.mock import patch

import pytest

from sonarbreak.errors import LoadError
from sonarbreak.gate.evaluator import evaluate_quality_gate
from sonarbreak.gate.executor import AnalysisExecutor
from sonarbreak.gate.models import AnalysisResult, AnalysisStatus, QueryAnalysis
from sonarbreak.preview.models import Severity


def test_blocker_scenario(write_report, make_issue):
    report = write_report([make_issue("BLOCKER") for _ in range(3)])
    query = QueryAnalysis(report_path=str(report), max_blockers=2)

    result = AnalysisExecutor().process_analysis(query)

    assert result == AnalysisResult.error("Number of BLOCKER severity is greater than 2. Actual number is 3")


def test_majors_within_limit(write_report, make_issue):
    report = write_report([make_issue("MAJOR"), make_issue("MAJOR")])
    query = QueryAnalysis(report_path=str(report), max_majors=5)

    assert AnalysisExecutor().process_analysis(query) == AnalysisResult.success()


def test_old_issues_only(write_report, make_issue):
    report = write_report([make_issue("BLOCKER", is_new=False), make_issue("CRITICAL", is_new=False)])
    query = QueryAnalysis(report_path=str(report), max_blockers=0, max_vulnerabilities=0)

    assert AnalysisExecutor().process_analysis(query).status == AnalysisStatus.SUCCESS


def test_empty_report(write_report):
    report = write_report([])
    query = QueryAnalysis(report_path=str(report), max_blockers=0)

    executor = AnalysisExecutor()
    assert executor.process_analysis(query).status == AnalysisStatus.SUCCESS
    assert sum(executor.last_counts.values()) == 0


def test_missing_report_propagates(tmp_path: Path):
    query = QueryAnalysis(report_path=str(tmp_path / "absent.json"), max_blockers=0)
    executor = AnalysisExecutor()

    with pytest.raises(LoadError):
        executor.process_analysis(query)
    assert executor.last_counts is None


def test_critical_scenario(write_report, make_issue):
    report = write_report([make_issue("CRITICAL")])
    query = QueryAnalysis(report_path=str(report), max_vulnerabilities=0)

    result = AnalysisExecutor().process_analysis(query)

    assert result.status == AnalysisStatus.ERROR
    assert "CRITICAL" in result.message
    assert "greater than 0" in result.message
    assert result.message.endswith("Actual number is 1")


def test_relative_report_uses_search_paths(tmp_path: Path, write_report, make_issue):
    write_report([make_issue("MINOR")], name="preview.json")
    query = QueryAnalysis(report_path="preview.json", max_minors=0, search_paths=[str(tmp_path)])

    result = AnalysisExecutor().process_analysis(query)

    assert result.message == "Number of MINOR severity is greater than 0. Actual number is 1"


def test_realistic_report_counts(sonar_report: Path):
    executor = AnalysisExecutor()
    result = executor.process_analysis(QueryAnalysis(report_path=str(sonar_report), max_minors=0))

    assert result.status == AnalysisStatus.SUCCESS
    assert executor.last_counts[Severity.BLOCKER] == 1
    assert executor.last_counts[Severity.CRITICAL] == 1
    assert executor.last_counts[Severity.MAJOR] == 1
    assert executor.last_counts[Severity.MINOR] == 0


def test_gate_decision_is_delegated_to_evaluator(write_report, make_issue):
    report = write_report([make_issue("BLOCKER")])
    query = QueryAnalysis(report_path=str(report), max_blockers=0)

    with patch("sonarbreak.gate.executor.evaluate_quality_gate", wraps=evaluate_quality_gate) as evaluate:
        result = AnalysisExecutor().process_analysis(query)

    evaluate.assert_called_once()
    assert evaluate.call_args.args[1] == query
    assert result.status == AnalysisStatus.ERROR
