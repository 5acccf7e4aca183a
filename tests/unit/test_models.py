"""Tests for commit record and configuration models."""

from datetime import date, datetime, time, timezone

import pytest
from pydantic import ValidationError

from gitchron.models import (
    MAX_COMMIT_TIMESTAMP,
    MAX_TIMESTAMP,
    MIN_COMMIT_TIMESTAMP,
    NO_BRANCH,
    NO_MESSAGE,
    NO_SUMMARY,
    CommitRecord,
    ReportConfig,
    TimeRange,
)

T1 = 1705314600  # 2024-01-15 10:30:00 UTC


def _record(**overrides):
    fields = {
        "repository": "/repos/app",
        "branch": "main",
        "commit_id": "a" * 40,
        "author": "Alice <a@x.com>",
        "summary": "Fix login",
        "message": "Fix login\n\nDetails\n",
        "timestamp": T1,
    }
    fields.update(overrides)
    return CommitRecord(**fields)


class TestCommitRecord:
    """Tests for CommitRecord."""

    def test_fields(self):
        """Test that values are stored as given."""
        record = _record()

        assert record.repository == "/repos/app"
        assert record.branch == "main"
        assert record.summary == "Fix login"
        assert record.message == "Fix login\n\nDetails\n"
        assert record.timestamp == T1

    @pytest.mark.parametrize("missing", [None, ""])
    def test_sentinels(self, missing):
        """Test that missing branch, summary and message get sentinels."""
        record = _record(branch=missing, summary=missing, message=missing)

        assert record.branch == NO_BRANCH == "No branch"
        assert record.summary == NO_SUMMARY == "No summary"
        assert record.message == NO_MESSAGE == "No message"

    def test_sentinels_when_omitted(self):
        """Test defaults when the optional fields are not passed at all."""
        record = CommitRecord(repository="r", commit_id="c", author="A <a@x>", timestamp=0)

        assert record.branch == NO_BRANCH
        assert record.summary == NO_SUMMARY
        assert record.message == NO_MESSAGE

    def test_timestamp_required(self):
        """Test that a record cannot exist without a timestamp."""
        with pytest.raises(ValidationError):
            CommitRecord(repository="r", commit_id="c", author="A <a@x>")

    def test_immutable(self):
        """Test that records are frozen."""
        record = _record()

        with pytest.raises(ValidationError):
            record.summary = "changed"

    def test_derived_times_are_utc(self):
        """Test the datetime views of the timestamp."""
        record = _record()

        assert record.committed_at == datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)
        assert record.day == date(2024, 1, 15)
        assert record.time_of_day == time(10, 30)

    @pytest.mark.parametrize("timestamp", [253402300800, -62135596801])
    def test_timestamp_must_fit_a_calendar_date(self, timestamp):
        """Test that times datetime cannot represent are rejected."""
        with pytest.raises(ValidationError):
            _record(timestamp=timestamp)

    def test_timestamp_limits(self):
        """Test the first and last representable seconds."""
        assert _record(timestamp=MAX_COMMIT_TIMESTAMP).day == date(9999, 12, 31)
        assert _record(timestamp=MIN_COMMIT_TIMESTAMP).day == date(1, 1, 1)

    def test_negative_timestamp(self):
        """Test commits dated before the epoch."""
        record = _record(timestamp=-86400)

        assert record.day == date(1969, 12, 31)


class TestTimeRange:
    """Tests for TimeRange."""

    def test_defaults(self):
        """Test that the default range is unbounded."""
        time_range = TimeRange()

        assert time_range.since == 0
        assert time_range.until == MAX_TIMESTAMP

    def test_bounds_are_inclusive(self):
        """Test that both bounds are kept."""
        time_range = TimeRange(since=100, until=200)

        assert not time_range.contains(99)
        assert time_range.contains(100)
        assert time_range.contains(150)
        assert time_range.contains(200)
        assert not time_range.contains(201)

    def test_single_instant(self):
        """Test a range where since equals until."""
        assert TimeRange(since=T1, until=T1).contains(T1)


class TestReportConfig:
    """Tests for ReportConfig."""

    def test_defaults(self):
        """Test default configuration values."""
        config = ReportConfig(repositories=["/repos/app"])

        assert config.time_range == TimeRange()
        assert config.author is None
        assert config.output_format == "flat"
        assert config.jobs == 1

    def test_requires_a_repository(self):
        """Test that an empty repository list is rejected."""
        with pytest.raises(ValidationError):
            ReportConfig(repositories=[])

    def test_jobs_must_be_positive(self):
        """Test that zero workers is rejected."""
        with pytest.raises(ValidationError):
            ReportConfig(repositories=["/repos/app"], jobs=0)
