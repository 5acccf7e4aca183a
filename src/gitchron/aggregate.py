"""Merging commit records from several repositories into one timeline."""

from concurrent.futures import ThreadPoolExecutor
from operator import attrgetter
from typing import Iterable, List, Optional, Sequence, Tuple

import structlog

from gitchron.extraction import CommitFilter, RepositoryWalker
from gitchron.models import CommitRecord

logger = structlog.get_logger(__name__)


def aggregate(per_repository_results: Iterable[Tuple[str, Iterable[CommitRecord]]]) -> List[CommitRecord]:
    """Concatenate per-repository records and sort them by timestamp.

    The sort is stable, so records with equal timestamps keep the order in
    which they were produced: repository order, then branch order, then
    walk order.
    """
    records: List[CommitRecord] = []
    for repository, repository_records in per_repository_results:
        before = len(records)
        records.extend(repository_records)
        logger.debug("records_collected", repository=repository, count=len(records) - before)

    records.sort(key=attrgetter("timestamp"))
    logger.info("records_aggregated", count=len(records))
    return records


def _walk(path: str, commit_filter: CommitFilter) -> List[CommitRecord]:
    walker = RepositoryWalker(path)
    try:
        return list(walker.iter_records(commit_filter))
    finally:
        walker.close()


def collect_records(
    repositories: Sequence[str],
    commit_filter: Optional[CommitFilter] = None,
    jobs: int = 1,
) -> List[CommitRecord]:
    """Walk every repository and return the merged, time-ordered records.

    Args:
        repositories: Repository paths, in processing order
        commit_filter: Filter applied to each commit as it is visited
        jobs: Number of repositories walked at the same time

    Returns:
        Records from all repositories sorted by timestamp

    Raises:
        GitChronError: The first failure of any repository; no partial result
    """
    commit_filter = commit_filter or CommitFilter()

    if jobs <= 1 or len(repositories) <= 1:
        return aggregate((path, _walk(path, commit_filter)) for path in repositories)

    # Each worker opens its own Repo; results are merged in repository order
    # once every walk has finished.
    with ThreadPoolExecutor(max_workers=min(jobs, len(repositories))) as executor:
        futures = [executor.submit(_walk, path, commit_filter) for path in repositories]
        results = [future.result() for future in futures]

    return aggregate(zip(repositories, results))
