"""Data model for a commit visited during a repository walk."""

from datetime import date, datetime, time, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

NO_BRANCH = "No branch"
NO_SUMMARY = "No summary"
NO_MESSAGE = "No message"

# Commit times datetime can represent: 0001-01-01 to 9999-12-31 23:59:59 UTC.
MIN_COMMIT_TIMESTAMP = -62135596800
MAX_COMMIT_TIMESTAMP = 253402300799


class CommitRecord(BaseModel):
    """One commit as seen from one branch of one repository.

    The same commit appears once per branch it is reachable from, and once
    per repository it exists in. Missing branch names, summaries and messages
    are replaced by sentinels when the record is built.
    """

    model_config = ConfigDict(frozen=True)

    repository: str = Field(..., description="Repository path as given by the user")
    branch: str = Field(NO_BRANCH, description="Local branch the commit was reached from")
    commit_id: str = Field(..., description="Full commit SHA hash")
    author: str = Field(..., description="Author identifier, 'Name <email>'")
    summary: str = Field(NO_SUMMARY, description="First paragraph of the commit message, on one line")
    message: str = Field(NO_MESSAGE, description="Full commit message")
    timestamp: int = Field(
        ...,
        ge=MIN_COMMIT_TIMESTAMP,
        le=MAX_COMMIT_TIMESTAMP,
        description="Commit time in seconds since the epoch",
    )

    @field_validator("branch", mode="before")
    @classmethod
    def _default_branch(cls, value: Optional[str]) -> str:
        return value or NO_BRANCH

    @field_validator("summary", mode="before")
    @classmethod
    def _default_summary(cls, value: Optional[str]) -> str:
        return value or NO_SUMMARY

    @field_validator("message", mode="before")
    @classmethod
    def _default_message(cls, value: Optional[str]) -> str:
        return value or NO_MESSAGE

    @property
    def committed_at(self) -> datetime:
        """Commit time as an aware UTC datetime."""
        return datetime.fromtimestamp(self.timestamp, tz=timezone.utc)

    @property
    def day(self) -> date:
        return self.committed_at.date()

    @property
    def time_of_day(self) -> time:
        return self.committed_at.time()
