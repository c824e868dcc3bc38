"""Default settings shared by the CLI and the filesystem helpers"""
import re

DEFAULT_OUTPUT_DIR = "output"

COMPRESSED_SUFFIX = ".gz"

# Rotated files carry a purely numeric extension, e.g. ".1" or ".12"
ROTATION_SUFFIX_PATTERN = re.compile(r"^\.\d+$")

# Split outputs end with "-YYYY-MM-DD"
DATED_OUTPUT_PATTERN = re.compile(r"-\d{4}-\d{2}-\d{2}$")

TEXT_ENCODING = "utf-8"
TEXT_ERRORS = "surrogateescape"
