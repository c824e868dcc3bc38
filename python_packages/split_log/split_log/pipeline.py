# split_log/split_log/pipeline.py
from datetime import datetime
from pathlib import Path
from typing import Optional

from split_log.core import (
    BatchSummary,
    FileProcessingError,
    InputRootError,
    ProcessOutcome,
    one_file,
)
from split_log.filesystem import (
    compress_tree,
    decompress_tree,
    ensure_output_root,
    find_rotated_files,
    output_prefix_for,
)
from split_log.reporters import ProgressReporter


def all_files(
    input_root: Path,
    output_root: Path,
    reporter: Optional[ProgressReporter] = None,
    summary: Optional[BatchSummary] = None,
    now: Optional[datetime] = None,
) -> BatchSummary:
    """Split every rotated file under input_root into output_root

    A file that fails is reported and left in place; the batch moves on
    to the next one.
    """
    reporter = reporter or ProgressReporter()
    summary = summary or BatchSummary()
    input_root = Path(input_root)
    output_root = Path(output_root)

    for path in find_rotated_files(input_root):
        output_prefix = output_prefix_for(path, input_root, output_root)
        try:
            task, outcome = one_file(path, output_prefix, now=now)
        except FileProcessingError as e:
            reporter.failed(path, e)
            summary.add_failure(path, e)
            continue

        if outcome is ProcessOutcome.SKIPPED:
            reporter.skipped(path)
            summary.skipped += 1
        else:
            reporter.split(path, output_prefix)
            summary.split += 1
            summary.lines_written += task.lines_written

    return summary


def run(
    input_root: Path,
    output_root: Path,
    decompress: bool = True,
    compress: bool = True,
    reporter: Optional[ProgressReporter] = None,
    now: Optional[datetime] = None,
) -> BatchSummary:
    """Decompress, split, then compress, in that order

    Raises:
        InputRootError: If input_root is not a directory
        OutputRootError: If output_root cannot be used
    """
    reporter = reporter or ProgressReporter()
    summary = BatchSummary()
    input_root = Path(input_root)
    output_root = Path(output_root)

    if not input_root.is_dir():
        raise InputRootError(input_root)
    ensure_output_root(output_root)

    if decompress:
        reporter.phase("Decompressing input files")
        decompress_tree(input_root, reporter, summary)

    reporter.phase("Splitting rotated files")
    all_files(input_root, output_root, reporter, summary, now=now)

    if compress:
        reporter.phase("Compressing dated output files")
        compress_tree(output_root, reporter, summary)

    reporter.summary(summary)
    return summary
