"""End-to-end report generation."""

import structlog

from gitchron.aggregate import collect_records
from gitchron.extraction import CommitFilter
from gitchron.models import ReportConfig
from gitchron.presenter import get_renderer, render

logger = structlog.get_logger(__name__)


def generate_report(config: ReportConfig) -> str:
    """Walk, filter, merge and render according to ``config``.

    The output format is validated before any repository is opened.
    """
    get_renderer(config.output_format)

    commit_filter = CommitFilter(config.time_range, config.author)
    logger.debug(
        "report_started",
        repositories=len(config.repositories),
        filter=repr(commit_filter),
        format=config.output_format,
        jobs=config.jobs,
    )

    records = collect_records(config.repositories, commit_filter, jobs=config.jobs)
    return render(records, config.output_format)
