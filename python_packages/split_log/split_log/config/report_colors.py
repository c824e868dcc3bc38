"""Colour theme for the progress reporter"""

TITLE = "magenta"
PATH = "cyan"
OK = "green"
SKIPPED = "yellow"
ERROR = "red"
TARGET = "bright_black"
COUNT = "white"

REPORT_COLORS = {
    "title": TITLE,
    "path": PATH,
    "ok": OK,
    "skipped": SKIPPED,
    "error": ERROR,
    "target": TARGET,
    "count": COUNT,
}
