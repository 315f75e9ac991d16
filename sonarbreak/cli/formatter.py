import json
from typing import Dict, Optional

from rich.console import Console
from rich.table import Table

from sonarbreak.gate.models import AnalysisResult, QueryAnalysis
from sonarbreak.preview.models import Severity

console = Console()


def format_counts_table(counts: Dict[Severity, int], query: QueryAnalysis) -> Table:
    """Builds a table of new issues per severity next to the allowed maximum."""
    table = Table(title="New issues")
    table.add_column("Severity")
    table.add_column("New", justify="right")
    table.add_column("Allowed", justify="right")
    for severity in Severity:
        threshold = query.threshold_for(severity)
        count = counts.get(severity, 0)
        allowed = "-" if threshold is None else str(threshold)
        if threshold is not None and count > threshold:
            row_count = f"[red]{count}[/red]"
        else:
            row_count = str(count)
        table.add_row(severity.value, row_count, allowed)
    return table


def render_result_json(result: AnalysisResult, counts: Optional[Dict[Severity, int]] = None) -> str:
    data = result.model_dump(mode="json")
    data["new_issues"] = {
        severity.value: count for severity, count in (counts or {}).items()
    }
    return json.dumps(data, indent=2)
