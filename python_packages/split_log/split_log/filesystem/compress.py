# split_log/split_log/filesystem/compress.py
import gzip
import os
import zlib
from pathlib import Path
from typing import Optional

from split_log.config import COMPRESSED_SUFFIX
from split_log.core.processor import BatchSummary
from split_log.reporters import ProgressReporter

from .walker import add_extension, find_compressed_files, find_dated_outputs

# gzip raises EOFError on truncated archives and zlib.error on bad data
GZIP_ERRORS = (OSError, EOFError, zlib.error)


def decompress(path: Path) -> Path:
    """Replace a .gz file with its decompressed sibling

    Raises:
        OSError, EOFError, zlib.error: If the archive cannot be read. No
            partial sibling is left behind in that case.
    """
    path = Path(path)
    destination = path.with_suffix("")
    data = gzip.decompress(path.read_bytes())
    try:
        destination.write_bytes(data)
    except OSError:
        destination.unlink(missing_ok=True)
        raise
    path.unlink()
    return destination


def compress(path: Path) -> Path:
    """Gzip a file into "<path>.gz" and delete it

    An existing archive gets a new gzip member appended, so dated outputs
    from several runs accumulate instead of replacing each other. A failed
    write is cut back off the archive and the source file is kept.
    """
    path = Path(path)
    destination = add_extension(path, COMPRESSED_SUFFIX)
    payload = gzip.compress(path.read_bytes())
    existed = destination.exists()
    size = destination.stat().st_size if existed else 0
    try:
        with open(destination, "ab") as f:
            f.write(payload)
    except OSError:
        # Drop the partial member, earlier runs must stay readable
        if not existed:
            destination.unlink(missing_ok=True)
        elif destination.stat().st_size > size:
            os.truncate(destination, size)
        raise
    path.unlink()
    return destination


def decompress_tree(
    root: Path,
    reporter: Optional[ProgressReporter] = None,
    summary: Optional[BatchSummary] = None,
) -> BatchSummary:
    """Decompress every .gz file under root, reporting each one"""
    reporter = reporter or ProgressReporter()
    summary = summary or BatchSummary()

    for path in find_compressed_files(root):
        try:
            decompress(path)
        except GZIP_ERRORS as e:
            reporter.failed(path, e)
            summary.add_failure(path, e)
            continue
        reporter.decompressed(path)
        summary.decompressed += 1

    return summary


def compress_tree(
    root: Path,
    reporter: Optional[ProgressReporter] = None,
    summary: Optional[BatchSummary] = None,
) -> BatchSummary:
    """Compress every dated split output under root"""
    reporter = reporter or ProgressReporter()
    summary = summary or BatchSummary()

    for path in find_dated_outputs(root):
        try:
            destination = compress(path)
        except OSError as e:
            reporter.failed(path, e)
            summary.add_failure(path, e)
            continue
        reporter.compressed(path, destination)
        summary.compressed += 1

    return summary
