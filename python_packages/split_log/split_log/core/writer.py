# split_log/split_log/core/writer.py
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, TextIO, Tuple, Union

from split_log.config import TEXT_ENCODING, TEXT_ERRORS


@dataclass
class SplitState:
    """Date of the currently open output file and its handle"""
    current_date: str = ""
    handle: Optional[TextIO] = None

    @property
    def is_open(self) -> bool:
        return self.handle is not None


def dated_path(prefix: Union[str, Path], date: str) -> Path:
    return Path(f"{prefix}-{date}")


class SplitWriter:
    """
    Stream lines into one output file per date.

    Only one writer is open at a time. It is swapped (closed, then a new
    one opened in append mode) each time the incoming date differs from
    the open one, so a D1 D1 D2 D1 sequence reopens D1's file rather than
    grouping in memory. Files are never truncated: running twice over the
    same input duplicates its lines.
    """

    def __init__(self, prefix: Union[str, Path]):
        self.prefix = prefix
        self.state = SplitState()
        self.lines_written = 0

    def __enter__(self) -> "SplitWriter":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _open(self, date: str) -> None:
        self.close()
        self.state.handle = open(
            dated_path(self.prefix, date),
            "a",
            encoding=TEXT_ENCODING,
            errors=TEXT_ERRORS,
            newline="",
        )
        self.state.current_date = date

    def write(self, date: Optional[str], line: str) -> bool:
        """Append a line to its date's file; undated lines are dropped

        Returns:
            True if the line was written
        """
        if date is None:
            return False

        if not self.state.is_open or date != self.state.current_date:
            self._open(date)

        self.state.handle.write(line)
        self.state.handle.write("\n")
        self.lines_written += 1
        return True

    def close(self) -> None:
        if self.state.handle is not None:
            handle = self.state.handle
            self.state = SplitState()
            handle.close()


def split_lines(
    prefix: Union[str, Path], pairs: Iterable[Tuple[Optional[str], str]]
) -> int:
    """Write (date, line) pairs under prefix, returns the number of lines written"""
    with SplitWriter(prefix) as writer:
        for date, line in pairs:
            writer.write(date, line)
        return writer.lines_written
