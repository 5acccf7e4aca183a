"""structlog setup for the command line."""

import logging
import sys

import structlog


def configure_logging(verbose: bool = False) -> None:
    """Send key/value log lines to stderr so stdout only carries the report.

    Only warnings are shown unless ``verbose`` is set.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
