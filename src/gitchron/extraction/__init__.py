"""Commit extraction from local Git repositories."""

from gitchron.extraction.filters import CommitFilter
from gitchron.extraction.git_walker import RepositoryWalker, walk_repository

__all__ = ["CommitFilter", "RepositoryWalker", "walk_repository"]
