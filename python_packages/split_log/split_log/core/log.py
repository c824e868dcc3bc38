# split_log/split_log/core/log.py
from pathlib import Path
from typing import Iterator

from split_log.config import TEXT_ENCODING, TEXT_ERRORS


class LogReader:
    """Common line reader for classified files"""

    @staticmethod
    def iter_lines(file_path: Path) -> Iterator[str]:
        """Yield lines without their "\\n" or "\\r\\n" terminator

        Only "\\n" ends a line; undecodable bytes are kept through
        surrogateescape so they are written back unchanged.
        """
        with open(file_path, "rb") as f:
            for raw in f:
                if raw.endswith(b"\n"):
                    raw = raw[:-1]
                    if raw.endswith(b"\r"):
                        raw = raw[:-1]
                yield raw.decode(TEXT_ENCODING, TEXT_ERRORS)
