"""Shared fixtures: throwaway Git repositories with controlled commit times."""

import tempfile
from pathlib import Path

import git
import pytest
import structlog

ALICE = git.Actor("Alice", "a@x.com")


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo any logging configuration done by a CLI invocation."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def workdir():
    """Temporary directory holding the test repositories."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def make_repo(workdir):
    """Factory creating an empty Git repository under the work directory."""

    def _make(name: str = "repo") -> git.Repo:
        path = workdir / name
        repo = git.Repo.init(path)
        repo.config_writer().set_value("user", "name", "Test User").release()
        repo.config_writer().set_value("user", "email", "test@example.com").release()
        return repo

    return _make


@pytest.fixture
def commit_at():
    """Factory adding a commit with a fixed author, committer and time.

    With ``parents`` given, the commit is created off to the side without
    moving HEAD, ready to be pointed at by a new branch.
    """
    counter = {"n": 0}

    def _commit(repo, message, timestamp, author=ALICE, parents=None):
        counter["n"] += 1
        path = Path(repo.working_tree_dir) / f"file{counter['n']}.txt"
        path.write_text(f"{message}\n")
        repo.index.add([str(path)])

        date = f"{timestamp} +0000"
        kwargs = {}
        if parents is not None:
            kwargs = {"parent_commits": parents, "head": False}
        return repo.index.commit(
            message,
            author=author,
            committer=author,
            author_date=date,
            commit_date=date,
            **kwargs,
        )

    return _commit
