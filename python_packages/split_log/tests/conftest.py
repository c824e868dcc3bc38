"""
Shared fixtures for the split_log tests.
"""

import io
from datetime import datetime, timezone

import pytest

from split_log.reporters import ProgressReporter


@pytest.fixture
def iso_lines():
    """Two days of fail2ban lines with an undated continuation."""
    return [
        "2020-05-12 10:00:00,001 fail2ban.filter [1]: INFO Found 1.2.3.4",
        "2020-05-12 23:59:59,999 fail2ban.filter [1]: INFO Found 1.2.3.5",
        "    continuation line without a date",
        "2020-05-13 00:00:01,000 fail2ban.actions [1]: NOTICE Ban 1.2.3.4",
    ]


@pytest.fixture
def fixed_now():
    """A processing time inside 2024, used for year-less syslog lines."""
    return datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def captured_reporter():
    """A reporter writing to in-memory buffers instead of the terminal."""
    out = io.StringIO()
    err = io.StringIO()
    reporter = ProgressReporter(file=out, error_file=err, width=1000)
    return reporter, out, err
