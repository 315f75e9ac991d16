from __future__ import annotations

import re
from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

# yyyy-MM-dd'T'HH:mm:ss, optionally followed by the UTC offset SonarQube appends.
REPORT_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"
_REPORT_DATE_RE = re.compile(
    r"^(\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2})(?:Z|[+-]\d{2}:?\d{2})?$"
)


def parse_report_date(value: str) -> datetime:
    """Parses a report timestamp, ignoring any trailing zone designator."""
    match = _REPORT_DATE_RE.match(value)
    if not match:
        raise ValueError(
            f"Invalid date '{value}', expected format yyyy-MM-dd'T'HH:mm:ss"
        )
    return datetime.strptime(match.group(1), REPORT_DATE_FORMAT)


class Severity(str, Enum):
    BLOCKER = "BLOCKER"
    CRITICAL = "CRITICAL"
    MAJOR = "MAJOR"
    MINOR = "MINOR"
    INFO = "INFO"


class Issue(BaseModel):
    """One finding of the preview report.

    Instances are frozen and compare by value over every field, so two
    identical entries of the report are the same issue.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    key: Optional[str] = Field(None, description="The Sonar issue key.")
    component: Optional[str] = Field(None, description="The component (file) key the issue belongs to.")
    line: Optional[int] = Field(None, description="The line of the issue.")
    start_line: Optional[int] = Field(None, alias="startLine", description="First line of the issue range.")
    start_offset: Optional[int] = Field(None, alias="startOffset", description="Offset in the first line.")
    end_line: Optional[int] = Field(None, alias="endLine", description="Last line of the issue range.")
    end_offset: Optional[int] = Field(None, alias="endOffset", description="Offset in the last line.")
    message: Optional[str] = Field(None, description="A human-readable description of the issue.")
    severity: Severity = Field(..., description="The severity of the issue.")
    rule: Optional[str] = Field(None, description="The rule that raised the issue, e.g. 'squid:S1166'.")
    status: Optional[str] = Field(None, description="The issue status, e.g. 'OPEN'.")
    resolution: Optional[str] = Field(None, description="The issue resolution, if resolved.")
    is_new: bool = Field(False, alias="isNew", description="Whether the issue was introduced by the current change.")
    assignee: Optional[str] = Field(None, description="The login of the assignee.")
    creation_date: Optional[datetime] = Field(None, alias="creationDate", description="When the issue was created.")
    update_date: Optional[datetime] = Field(None, alias="updateDate", description="When the issue was last updated.")

    @field_validator("creation_date", "update_date", mode="before")
    @classmethod
    def parse_dates(cls, v):
        if v is None or isinstance(v, datetime):
            return v
        if not isinstance(v, str):
            raise ValueError(f"Expected a date string, got {type(v).__name__}")
        return parse_report_date(v)


class Component(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    key: str
    path: Optional[str] = None
    module_key: Optional[str] = Field(None, alias="moduleKey")
    status: Optional[str] = None


class Rule(BaseModel):
    model_config = ConfigDict(extra="ignore")

    key: str
    rule: Optional[str] = None
    repository: Optional[str] = None
    name: Optional[str] = None


class User(BaseModel):
    model_config = ConfigDict(extra="ignore")

    login: str
    name: Optional[str] = None


class Preview(BaseModel):
    """The parsed preview report."""
    model_config = ConfigDict(extra="ignore")

    version: Optional[str] = Field(None, description="The SonarQube version that produced the report.")
    issues: List[Issue] = Field(default_factory=list, description="All issues, new and pre-existing.")
    components: List[Component] = Field(default_factory=list, description="Analysed components.")
    rules: List[Rule] = Field(default_factory=list, description="Rules referenced by the issues.")
    users: List[User] = Field(default_factory=list, description="Users referenced by the issues.")
