"""Per-commit keep/drop decision."""

from typing import Optional

from gitchron.models import TimeRange


class CommitFilter:
    """Keeps commits inside a time range and, optionally, by one author.

    The author test is a literal, case-sensitive substring match against
    the ``Name <email>`` identifier. An empty or missing filter keeps every
    author.
    """

    def __init__(self, time_range: Optional[TimeRange] = None, author: Optional[str] = None) -> None:
        self.time_range = time_range or TimeRange()
        self.author = author

    def matches(self, timestamp: int, author: str) -> bool:
        if not self.time_range.contains(timestamp):
            return False
        if self.author is not None and self.author not in author:
            return False
        return True

    def __repr__(self) -> str:
        return f"CommitFilter(time_range={self.time_range!r}, author={self.author!r})"
