from __future__ import annotations
from typing import List, Optional

from pydantic import BaseModel, Field


class GateConfig(BaseModel):
    report_path: Optional[str] = Field(None, description="Location of the Sonar preview report (sonar.report.export.path).")
    max_blockers: Optional[int] = Field(None, ge=0, description="Maximum number of new BLOCKER issues. Unset means no limit.")
    max_vulnerabilities: Optional[int] = Field(None, ge=0, description="Maximum number of new CRITICAL issues. Unset means no limit.")
    max_majors: Optional[int] = Field(None, ge=0, description="Maximum number of new MAJOR issues. Unset means no limit.")
    max_minors: Optional[int] = Field(None, ge=0, description="Maximum number of new MINOR issues. Unset means no limit.")
    search_paths: List[str] = Field(
        default_factory=lambda: [".", "target/sonar"],
        description="Directories searched, in order, for a relative report path.",
    )

    @classmethod
    def default(cls):
        return cls()
