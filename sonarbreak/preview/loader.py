import json
from pathlib import Path
from typing import Optional, Sequence

from pydantic import ValidationError

from sonarbreak.errors import LoadError
from sonarbreak.utils.logging import get_logger
from .models import Preview

logger = get_logger(__name__)

# Maven's Sonar scanner exports preview reports relative to its working directory.
DEFAULT_SEARCH_PATHS = (".", "target/sonar")


def resolve_report_path(location: str, search_paths: Optional[Sequence[str]] = None) -> Path:
    """
    Resolves a report location to an existing file.

    Absolute locations are used as they are. Relative ones are looked up in
    each search path in order, and the first regular file found wins.
    """
    if not location:
        raise LoadError("Report location must not be empty.")

    candidate = Path(location)
    if candidate.is_absolute():
        if candidate.is_file():
            return candidate
        raise LoadError(f"Report file not found at: {candidate}")

    roots = search_paths if search_paths else DEFAULT_SEARCH_PATHS
    for root in roots:
        path = Path(root) / candidate
        if path.is_file():
            return path

    raise LoadError(
        f"Report file '{location}' not found in any of: {', '.join(str(r) for r in roots)}"
    )


def load_preview(location: str, search_paths: Optional[Sequence[str]] = None) -> Preview:
    """Locates the preview report and parses it into a Preview."""
    try:
        path = resolve_report_path(location, search_paths)
    except LoadError as e:
        logger.error("Report not found", report_path=location, error=str(e))
        raise
    log = logger.bind(report_path=str(path))

    try:
        with open(path, "r", encoding="utf-8") as f:
            raw_data = json.load(f)
        preview = Preview.model_validate(raw_data)
    except (OSError, ValueError, RecursionError, ValidationError) as e:
        log.error("Failed to convert report to Preview", error=str(e))
        raise LoadError(f"Failed to convert report '{path}' to Preview: {e}") from e

    log.debug("Preview loaded", issues=len(preview.issues), version=preview.version)
    return preview
