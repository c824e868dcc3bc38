# split_log/split_log/core/formats.py
import re
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional

from split_log.config import TEXT_ENCODING, TEXT_ERRORS

_MONTHS = "Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec"
_WEEKDAYS = "Mon|Tue|Wed|Thu|Fri|Sat|Sun"


class LogFormat(Enum):
    """
    Line formats recognised by the splitter.

    SYSLOG:        "May 16 02:07:16 host ..." - no year in the line
    ISO:           "2020-05-16 02:07:16,123 ..." (fail2ban and friends)
    APACHE_ACCESS: '1.2.3.4 - - [17/May/2020:10:00:00 +0200] "GET ...'
    APACHE_ERROR:  "[Sat May 16 02:07:16.656808 2020] [core:error] ..."
    GRAFANA_LOGS:  "t=2020-05-12T18:14:21+0200 lvl=info ..."
    """
    SYSLOG = "syslog"
    ISO = "iso"
    APACHE_ACCESS = "apache_access"
    APACHE_ERROR = "apache_error"
    GRAFANA_LOGS = "grafana_logs"


# Detection order, first match wins
DETECTION_ORDER: List[LogFormat] = [
    LogFormat.SYSLOG,
    LogFormat.ISO,
    LogFormat.APACHE_ACCESS,
    LogFormat.APACHE_ERROR,
    LogFormat.GRAFANA_LOGS,
]

# The same pattern classifies a file's first line and locates the date
# substring of every other line.
FORMAT_PATTERNS: Dict[LogFormat, re.Pattern] = {
    LogFormat.SYSLOG: re.compile(rf"^({_MONTHS}) ([012 ]\d|3[01]|[1-9](?!\d))"),
    LogFormat.ISO: re.compile(r"^\d{4}-\d{2}-\d{2}"),
    LogFormat.APACHE_ACCESS: re.compile(rf"\[\d{{2}}/({_MONTHS})/\d{{4}}:"),
    LogFormat.APACHE_ERROR: re.compile(
        rf"\[({_WEEKDAYS}) ({_MONTHS}) \d{{2}} "
        r"\d{2}:\d{2}:\d{2}\.\d{6} \d{4}\]"
    ),
    LogFormat.GRAFANA_LOGS: re.compile(
        r"^t=\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\+|-)\d{4} lvl="
    ),
}

# strptime templates applied to the matched substring
DATE_TEMPLATES: Dict[LogFormat, str] = {
    LogFormat.SYSLOG: "%b %d %Y",
    LogFormat.ISO: "%Y-%m-%d",
    LogFormat.APACHE_ACCESS: "[%d/%b/%Y:",
    LogFormat.APACHE_ERROR: "[%a %b %d %H:%M:%S.%f %Y]",
    LogFormat.GRAFANA_LOGS: "t=%Y-%m-%dT%H:%M:%S%z lvl=",
}


def classify(first_line: str) -> Optional[LogFormat]:
    """Return the first format whose pattern matches, or None"""
    if not first_line:
        return None

    for log_format in DETECTION_ORDER:
        if FORMAT_PATTERNS[log_format].search(first_line):
            return log_format

    return None


def classify_file(path: Path) -> Optional[LogFormat]:
    """Classify a file from its first line

    Raises:
        OSError: If the file cannot be opened or read
    """
    with open(path, "r", encoding=TEXT_ENCODING, errors=TEXT_ERRORS, newline="") as f:
        first_line = f.readline()
    return classify(first_line)
