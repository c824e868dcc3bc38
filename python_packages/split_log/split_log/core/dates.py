# split_log/split_log/core/dates.py
from datetime import date, datetime, timezone
from typing import Optional

from .formats import DATE_TEMPLATES, FORMAT_PATTERNS, LogFormat

SENTINEL = date(1, 1, 1)
SENTINEL_DATE = SENTINEL.isoformat()


def current_year(now: Optional[datetime] = None) -> int:
    if now is None:
        now = datetime.now(timezone.utc)
    return now.year


def parse_date(log_format: LogFormat, matched: str, now: Optional[datetime] = None) -> date:
    """
    Parse a matched date substring into a calendar date.

    Syslog lines carry no year, so the current (UTC) year is appended
    before parsing. Lines written around New Year can therefore land in
    the wrong year.

    Any substring that fails to parse, including impossible calendar
    dates, falls back to SENTINEL.
    """
    if log_format is LogFormat.SYSLOG:
        matched = f"{matched} {current_year(now)}"

    try:
        return datetime.strptime(matched, DATE_TEMPLATES[log_format]).date()
    except ValueError:
        return SENTINEL


def determine_date(
    log_format: LogFormat, line: str, now: Optional[datetime] = None
) -> Optional[str]:
    """Return the line's date as YYYY-MM-DD, or None if it carries no date"""
    match = FORMAT_PATTERNS[log_format].search(line)
    if match is None:
        return None

    # isoformat() keeps the four digit year that strftime drops for year 1
    return parse_date(log_format, match.group(0), now).isoformat()
