from typing import Literal

from pydantic import BaseModel, Field


class LoggingConfig(BaseModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field("WARNING", description="Log level of the command line.")
    json_logs: bool = Field(False, description="Render log lines as JSON instead of console output.")
