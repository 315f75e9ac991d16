from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from sonarbreak.preview.models import Severity

ERROR_MESSAGE_QUALITY_GATES = "Number of {severity} severity is greater than {threshold}. Actual number is {actual}"


class AnalysisStatus(str, Enum):
    SUCCESS = "SUCCESS"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"


class QueryAnalysis(BaseModel):
    """Input of one gate run: where the report is and how many new issues are allowed."""
    model_config = ConfigDict(frozen=True)

    report_path: str = Field(..., min_length=1, description="Location of the preview report.")
    max_blockers: Optional[int] = Field(None, ge=0, description="Maximum number of new BLOCKER issues.")
    max_vulnerabilities: Optional[int] = Field(None, ge=0, description="Maximum number of new CRITICAL issues.")
    max_majors: Optional[int] = Field(None, ge=0, description="Maximum number of new MAJOR issues.")
    max_minors: Optional[int] = Field(None, ge=0, description="Maximum number of new MINOR issues.")
    search_paths: List[str] = Field(default_factory=list, description="Directories used to resolve a relative report path.")

    def threshold_for(self, severity: Severity) -> Optional[int]:
        return {
            Severity.BLOCKER: self.max_blockers,
            Severity.CRITICAL: self.max_vulnerabilities,
            Severity.MAJOR: self.max_majors,
            Severity.MINOR: self.max_minors,
        }.get(severity)


class GateViolation(BaseModel):
    """The first threshold exceeded during a gate run."""
    model_config = ConfigDict(frozen=True)

    severity: Severity
    threshold: int
    actual: int

    @property
    def message(self) -> str:
        return ERROR_MESSAGE_QUALITY_GATES.format(
            severity=self.severity.value, threshold=self.threshold, actual=self.actual
        )


class AnalysisResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: AnalysisStatus = Field(..., description="The outcome of the gate.")
    message: Optional[str] = Field(None, description="Explanation of the outcome.")

    @model_validator(mode="after")
    def check_message(self):
        if self.status == AnalysisStatus.ERROR and not self.message:
            raise ValueError("An ERROR result must carry a message.")
        if self.status == AnalysisStatus.SUCCESS and self.message is not None:
            raise ValueError("A SUCCESS result carries no message.")
        return self

    @classmethod
    def success(cls) -> "AnalysisResult":
        return cls(status=AnalysisStatus.SUCCESS)

    @classmethod
    def info(cls, message: str) -> "AnalysisResult":
        return cls(status=AnalysisStatus.INFO, message=message)

    @classmethod
    def warn(cls, message: str) -> "AnalysisResult":
        return cls(status=AnalysisStatus.WARN, message=message)

    @classmethod
    def error(cls, message: str) -> "AnalysisResult":
        return cls(status=AnalysisStatus.ERROR, message=message)
