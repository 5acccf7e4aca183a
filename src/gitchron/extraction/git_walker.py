"""Walking every local branch of a Git repository."""

from pathlib import Path
from typing import Iterator, Optional, Tuple

import git
import structlog
from git import Commit, Head, Repo

from gitchron.exceptions import (
    AncestryWalkError,
    BranchEnumerationError,
    BranchResolutionError,
    CommitDateError,
    RepositoryOpenError,
)
from gitchron.extraction.filters import CommitFilter
from gitchron.models import MAX_COMMIT_TIMESTAMP, MIN_COMMIT_TIMESTAMP, NO_BRANCH, CommitRecord

logger = structlog.get_logger(__name__)

# Everything GitPython (and gitdb underneath it) raises for unreadable refs
# and objects.
_GIT_ERRORS = (
    git.exc.GitError,
    git.exc.ODBError,
    OSError,
    ValueError,
    TypeError,
)


def summarize(message: str) -> str:
    """First paragraph of a commit message on one line.

    Leading blank lines are skipped and the lines of the first paragraph are
    joined with spaces. Returns an empty string for a blank message.
    """
    lines = []
    for line in message.lstrip().splitlines():
        if not line.strip():
            break
        lines.append(line)
    return " ".join(lines).rstrip()


class RepositoryWalker:
    """Walks the full ancestry of every local branch in one repository."""

    def __init__(self, path: str) -> None:
        """Open the repository at ``path``.

        Args:
            path: Repository path, kept verbatim as the repository identifier

        Raises:
            RepositoryOpenError: If the path is missing or not a Git repository
        """
        self.path = path
        if not Path(path).exists():
            raise RepositoryOpenError(path, "path does not exist")

        try:
            self.repo = Repo(path)
        except git.exc.InvalidGitRepositoryError as e:
            raise RepositoryOpenError(path, "not a Git repository") from e
        except _GIT_ERRORS as e:
            raise RepositoryOpenError(path, str(e)) from e

        logger.debug("repository_opened", repository=path, git_dir=self.repo.git_dir)

    def close(self) -> None:
        """Release the git processes held by the repository handle."""
        self.repo.close()

    def iter_branches(self) -> Iterator[Tuple[Optional[str], Head]]:
        """List local branches as ``(name, head)`` pairs.

        Remote-tracking references are not included. A branch whose name
        cannot be decoded is reported with a name of ``None``.

        Raises:
            BranchEnumerationError: If the branch references cannot be read
        """
        try:
            heads = list(self.repo.heads)
        except _GIT_ERRORS as e:
            raise BranchEnumerationError(self.path) from e

        for head in heads:
            yield self._branch_name(head), head

    def walk(self) -> Iterator[Tuple[Optional[str], Commit]]:
        """Yield ``(branch_name, commit)`` for every commit of every branch.

        Commits reachable from several branches are yielded once per branch.
        Within a branch, commits come in the order ``git rev-list`` gives.

        Raises:
            BranchResolutionError: If a branch tip is not a commit
            AncestryWalkError: If reading the history fails part way
        """
        for name, head in self.iter_branches():
            label = name or NO_BRANCH
            try:
                tip = head.commit
            except _GIT_ERRORS as e:
                raise BranchResolutionError(self.path, label) from e

            visited = 0
            try:
                for commit in self.repo.iter_commits(tip):
                    visited += 1
                    yield name, commit
            except _GIT_ERRORS as e:
                raise AncestryWalkError(self.path, label) from e

            logger.debug("branch_walked", repository=self.path, branch=label, visited=visited)

    def iter_records(self, commit_filter: Optional[CommitFilter] = None) -> Iterator[CommitRecord]:
        """Yield a CommitRecord for each walked commit that passes the filter.

        Filtering happens as commits are visited, so dropped commits are
        never kept in memory.
        """
        commit_filter = commit_filter or CommitFilter()
        kept = 0

        for name, commit in self.walk():
            try:
                timestamp = commit.committed_date
                author = f"{commit.author.name} <{commit.author.email}>"
            except _GIT_ERRORS as e:
                raise AncestryWalkError(self.path, name or NO_BRANCH) from e

            if not commit_filter.matches(timestamp, author):
                continue

            kept += 1
            yield self._build_record(name, commit, author, timestamp)

        logger.debug("repository_walked", repository=self.path, kept=kept)

    def _build_record(
        self, branch: Optional[str], commit: Commit, author: str, timestamp: int
    ) -> CommitRecord:
        # GitPython leaves undecodable messages as bytes.
        message = commit.message if isinstance(commit.message, str) else None
        summary = summarize(message) if message is not None else None

        if not MIN_COMMIT_TIMESTAMP <= timestamp <= MAX_COMMIT_TIMESTAMP:
            raise CommitDateError(self.path, commit.hexsha, timestamp)

        return CommitRecord(
            repository=self.path,
            branch=branch,
            commit_id=commit.hexsha,
            author=author,
            summary=summary,
            message=message,
            timestamp=timestamp,
        )

    @staticmethod
    def _branch_name(head: Head) -> Optional[str]:
        try:
            return head.name or None
        except (UnicodeDecodeError, ValueError):
            return None


def walk_repository(path: str) -> Iterator[Tuple[str, Commit]]:
    """Yield ``(branch_name, commit)`` for every local branch of ``path``.

    Unnamed branches are reported as ``"No branch"``.
    """
    walker = RepositoryWalker(path)
    try:
        for name, commit in walker.walk():
            yield name or NO_BRANCH, commit
    finally:
        walker.close()
