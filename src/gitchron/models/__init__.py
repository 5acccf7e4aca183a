"""Data models for commit reports."""

from gitchron.models.commit import (
    MAX_COMMIT_TIMESTAMP,
    MIN_COMMIT_TIMESTAMP,
    NO_BRANCH,
    NO_MESSAGE,
    NO_SUMMARY,
    CommitRecord,
)
from gitchron.models.config import MAX_TIMESTAMP, MIN_TIMESTAMP, ReportConfig, TimeRange

__all__ = [
    "CommitRecord",
    "TimeRange",
    "ReportConfig",
    "NO_BRANCH",
    "NO_SUMMARY",
    "NO_MESSAGE",
    "MIN_TIMESTAMP",
    "MAX_TIMESTAMP",
    "MIN_COMMIT_TIMESTAMP",
    "MAX_COMMIT_TIMESTAMP",
]
