"""
Runs the gate against a preview report.

The report is the JSON file written by ``sonar:sonar`` with
``sonar.analysis.mode=preview`` and ``sonar.report.export.path=<file>``.
Loading failures are fatal and propagate as LoadError; an exceeded
threshold is an ordinary outcome and comes back as an ERROR result.
"""
from __future__ import annotations
from typing import Dict, Optional

from sonarbreak.preview.filters import count_by_severity, new_issues
from sonarbreak.preview.loader import load_preview
from sonarbreak.preview.models import Severity
from sonarbreak.utils.logging import get_logger
from .evaluator import evaluate_quality_gate
from .models import AnalysisResult, QueryAnalysis

logger = get_logger(__name__)


class AnalysisExecutor:
    def __init__(self) -> None:
        self.last_counts: Optional[Dict[Severity, int]] = None

    def process_analysis(self, query: QueryAnalysis) -> AnalysisResult:
        """
        Loads the report, keeps the new issues and evaluates the thresholds.

        Raises:
            LoadError: If the report cannot be located, read or parsed.
        """
        log = logger.bind(report_path=query.report_path)

        preview = load_preview(query.report_path, query.search_paths or None)
        log.debug("Report loaded", total_issues=len(preview.issues))

        issues = new_issues(preview)
        self.last_counts = count_by_severity(issues)
        log.info("New issues found", new_issues=len(issues))

        return evaluate_quality_gate(issues, query)
