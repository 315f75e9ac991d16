from __future__ import annotations
from typing import Dict, Iterable, List, Optional

from .models import Issue, Preview, Severity


def new_issues(preview: Optional[Preview]) -> List[Issue]:
    """Returns the distinct issues flagged as new, in report order."""
    if preview is None or not preview.issues:
        return []

    seen = set()
    result: List[Issue] = []
    for issue in preview.issues:
        if not issue.is_new or issue in seen:
            continue
        seen.add(issue)
        result.append(issue)
    return result


def count_by_severity(issues: Iterable[Issue]) -> Dict[Severity, int]:
    counts = {severity: 0 for severity in Severity}
    for issue in issues:
        counts[issue.severity] += 1
    return counts
