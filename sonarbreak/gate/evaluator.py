from __future__ import annotations
from typing import List, Optional, Sequence

from sonarbreak.preview.filters import count_by_severity
from sonarbreak.preview.models import Issue, Severity
from sonarbreak.utils.logging import get_logger
from .models import AnalysisResult, GateViolation, QueryAnalysis

logger = get_logger(__name__)

# Highest priority first; only the first exceeded threshold is reported.
GATE_ORDER = (Severity.BLOCKER, Severity.CRITICAL, Severity.MAJOR, Severity.MINOR)


def find_violation(issues: Sequence[Issue], query: QueryAnalysis) -> Optional[GateViolation]:
    """Returns the first severity, in GATE_ORDER, whose new issue count exceeds its limit."""
    counts = count_by_severity(issues)
    for severity in GATE_ORDER:
        threshold = query.threshold_for(severity)
        if threshold is None:
            continue
        if counts[severity] > threshold:
            return GateViolation(severity=severity, threshold=threshold, actual=counts[severity])
    return None


def evaluate_quality_gate(issues: List[Issue], query: QueryAnalysis) -> AnalysisResult:
    violation = find_violation(issues, query)
    if violation is None:
        return AnalysisResult.success()
    logger.debug(
        "Quality gate violated",
        report_path=query.report_path,
        severity=violation.severity.value,
        threshold=violation.threshold,
        actual=violation.actual,
    )
    return AnalysisResult.error(violation.message)
