"""Error types raised by the report pipeline.

Every error is fatal to the whole run. The CLI catches ``GitChronError``
and reports the message; nothing in the pipeline retries or skips.
"""

from typing import Optional


class GitChronError(Exception):
    """Base class for all gitchron errors."""


class RepositoryOpenError(GitChronError):
    """The path does not resolve to a readable Git repository."""

    def __init__(self, path: str, reason: Optional[str] = None) -> None:
        self.path = path
        message = f"Cannot open repository: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class BranchEnumerationError(GitChronError):
    """The local branch references of a repository could not be read."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Cannot list local branches of repository: {path}")


class BranchResolutionError(GitChronError):
    """A branch tip cannot be peeled to a commit."""

    def __init__(self, path: str, branch: str) -> None:
        self.path = path
        self.branch = branch
        super().__init__(f"Branch {branch!r} in {path} does not point to a commit")


class AncestryWalkError(GitChronError):
    """The ancestry walk of a branch failed part way through."""

    def __init__(self, path: str, branch: str) -> None:
        self.path = path
        self.branch = branch
        super().__init__(f"Failed to walk history of branch {branch!r} in {path}")


class InvalidDateFormat(GitChronError):
    """A date string matched neither RFC 3339 nor YYYY-MM-DD."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(
            f"Invalid date format: {value!r} (expected RFC 3339 or YYYY-MM-DD)"
        )


class UnknownFormatError(GitChronError):
    """The requested output format is not supported."""

    def __init__(self, mode: str) -> None:
        self.mode = mode
        super().__init__(f"Unknown format: {mode!r}")


class CommitDateError(GitChronError):
    """A commit carries a time that cannot be shown as a calendar date."""

    def __init__(self, path: str, commit_id: str, timestamp: int) -> None:
        self.path = path
        self.commit_id = commit_id
        self.timestamp = timestamp
        super().__init__(
            f"Commit {commit_id} in {path} has an unrepresentable date ({timestamp})"
        )
