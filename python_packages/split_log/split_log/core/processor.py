# split_log/split_log/core/processor.py
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import List, Optional, Tuple

from .dates import determine_date
from .errors import FileProcessingError
from .formats import LogFormat, classify_file
from .log import LogReader
from .writer import split_lines


class ProcessOutcome(Enum):
    SPLIT = "split"
    SKIPPED = "skipped"


@dataclass
class FileTask:
    """One rotated input file and where its split output goes"""
    path: Path
    output_prefix: Path
    log_format: Optional[LogFormat] = None
    lines_written: int = 0


@dataclass
class BatchSummary:
    """Counters for a whole run"""
    decompressed: int = 0
    compressed: int = 0
    split: int = 0
    skipped: int = 0
    lines_written: int = 0
    failed: List[Tuple[Path, str]] = field(default_factory=list)

    def add_failure(self, path: Path, error: Exception) -> None:
        self.failed.append((Path(path), str(error)))


class FileProcessor:
    """
    Split one file into per-date files under its output prefix.

    The format is determined once, from the first line, then every line is
    dated with that format and routed to "<prefix>-<YYYY-MM-DD>". The
    source is deleted only once all lines have been written.
    """

    def __init__(self, task: FileTask, now: Optional[datetime] = None):
        self.task = task
        self.now = now

    def determine_type(self) -> Optional[LogFormat]:
        """Classify the file, leaves task.log_format at None when unknown

        Raises:
            OSError: If the file cannot be read
        """
        self.task.log_format = classify_file(self.task.path)
        return self.task.log_format

    def process(self) -> ProcessOutcome:
        """Split the file and delete the source

        Raises:
            OSError: On any read, write, mkdir or delete failure
        """
        if self.task.log_format is None:
            return ProcessOutcome.SKIPPED

        log_format = self.task.log_format
        self.task.output_prefix.parent.mkdir(parents=True, exist_ok=True)

        pairs = (
            (determine_date(log_format, line, self.now), line)
            for line in LogReader.iter_lines(self.task.path)
        )
        self.task.lines_written = split_lines(self.task.output_prefix, pairs)

        self.task.path.unlink()
        return ProcessOutcome.SPLIT


def one_file(
    path: Path, output_prefix: Path, now: Optional[datetime] = None
) -> Tuple[FileTask, ProcessOutcome]:
    """Classify and split exactly one file

    Raises:
        FileProcessingError: If any I/O operation fails; the source is kept
    """
    task = FileTask(path=Path(path), output_prefix=Path(output_prefix))
    processor = FileProcessor(task, now=now)
    try:
        processor.determine_type()
        outcome = processor.process()
    except OSError as e:
        raise FileProcessingError(task.path, e) from e
    return task, outcome
