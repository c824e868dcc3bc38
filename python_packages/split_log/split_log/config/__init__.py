from split_log.config.defaults import (
    COMPRESSED_SUFFIX,
    DATED_OUTPUT_PATTERN,
    DEFAULT_OUTPUT_DIR,
    ROTATION_SUFFIX_PATTERN,
    TEXT_ENCODING,
    TEXT_ERRORS,
)
from split_log.config.report_colors import REPORT_COLORS

__all__ = [
    "COMPRESSED_SUFFIX",
    "DATED_OUTPUT_PATTERN",
    "DEFAULT_OUTPUT_DIR",
    "ROTATION_SUFFIX_PATTERN",
    "TEXT_ENCODING",
    "TEXT_ERRORS",
    "REPORT_COLORS",
]
