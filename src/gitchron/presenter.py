"""Text layouts for a time-ordered list of commit records."""

from itertools import groupby
from operator import attrgetter
from typing import Callable, Dict, Iterable, List

from gitchron.exceptions import UnknownFormatError
from gitchron.models import CommitRecord

DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"
DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M:%S"

Renderer = Callable[[Iterable[CommitRecord]], List[str]]


def render_flat(records: Iterable[CommitRecord]) -> List[str]:
    """One tab-separated line per record.

    Columns: date-time, repository, branch, commit id, summary, author.
    """
    return [
        "\t".join(
            (
                record.committed_at.strftime(DATETIME_FORMAT),
                record.repository,
                record.branch,
                record.commit_id,
                record.summary,
                record.author,
            )
        )
        for record in records
    ]


def render_daily(records: Iterable[CommitRecord]) -> List[str]:
    """A date header followed by that day's records.

    Records must already be sorted by time; each run of records sharing a
    calendar date becomes one group.
    """
    lines: List[str] = []
    for day, group in groupby(records, key=attrgetter("day")):
        lines.append(day.strftime(DATE_FORMAT))
        for record in group:
            fields = (
                record.time_of_day.strftime(TIME_FORMAT),
                record.repository,
                record.branch,
                record.summary,
                record.author,
            )
            lines.append("\t\t" + "\t".join(fields))
    return lines


RENDERERS: Dict[str, Renderer] = {
    "flat": render_flat,
    "daily": render_daily,
}

FORMATS = tuple(RENDERERS)


def get_renderer(mode: str) -> Renderer:
    """Look up the renderer for ``mode``.

    Raises:
        UnknownFormatError: If ``mode`` is not one of FORMATS
    """
    try:
        return RENDERERS[mode]
    except KeyError:
        raise UnknownFormatError(mode) from None


def render(records: Iterable[CommitRecord], mode: str) -> str:
    """Render records as text in the given layout.

    The mode is checked before anything is rendered, so an unknown mode
    produces no output at all.
    """
    renderer = get_renderer(mode)
    lines = renderer(records)
    if not lines:
        return ""
    return "\n".join(lines) + "\n"
