"""Configuration models."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

MIN_TIMESTAMP = 0
MAX_TIMESTAMP = 2**63 - 1


class TimeRange(BaseModel):
    """Inclusive interval of epoch seconds.

    ``since <= until`` is not enforced: an inverted range simply matches
    nothing.
    """

    model_config = ConfigDict(frozen=True)

    since: int = Field(MIN_TIMESTAMP, description="Lower bound, inclusive")
    until: int = Field(MAX_TIMESTAMP, description="Upper bound, inclusive")

    def contains(self, timestamp: int) -> bool:
        return self.since <= timestamp <= self.until


class ReportConfig(BaseModel):
    """Everything needed to produce one report."""

    repositories: List[str] = Field(..., min_length=1, description="Repository paths, in processing order")
    time_range: TimeRange = Field(default_factory=TimeRange, description="Commit time window")
    author: Optional[str] = Field(None, description="Case-sensitive author substring filter")
    output_format: str = Field("flat", description="Report layout: flat or daily")
    jobs: int = Field(1, ge=1, description="Number of repositories walked concurrently")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "repositories": ["/path/to/repo", "/path/to/other"],
                "time_range": {"since": 1704067200, "until": 1706745599},
                "author": "Alice",
                "output_format": "daily",
                "jobs": 1,
            }
        }
    )
