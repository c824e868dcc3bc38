# split_log/split_log/filesystem/walker.py
from pathlib import Path
from typing import List, Union

from split_log.config import (
    COMPRESSED_SUFFIX,
    DATED_OUTPUT_PATTERN,
    ROTATION_SUFFIX_PATTERN,
)
from split_log.core.errors import OutputRootError


def _files_under(root: Path) -> List[Path]:
    # Collected up front, the passes rename and delete files as they go
    return sorted(p for p in Path(root).rglob("*") if p.is_file())


def is_rotated(path: Path) -> bool:
    """True for files whose extension is a rotation index (".1", ".12")"""
    return bool(ROTATION_SUFFIX_PATTERN.match(Path(path).suffix))


def is_dated_output(path: Path) -> bool:
    return DATED_OUTPUT_PATTERN.search(str(path)) is not None


def rotation_index(path: Path) -> int:
    return int(Path(path).suffix[1:])


def find_rotated_files(root: Path) -> List[Path]:
    """Rotated files, oldest rotation first within each log

    app.10, app.2, app.1: a day spanning two rotations is then written in
    chronological order.
    """
    rotated = [p for p in _files_under(root) if is_rotated(p)]
    return sorted(rotated, key=lambda p: (str(p.with_suffix("")), -rotation_index(p)))


def find_compressed_files(root: Path) -> List[Path]:
    return [p for p in _files_under(root) if p.suffix == COMPRESSED_SUFFIX]


def find_dated_outputs(root: Path) -> List[Path]:
    return [p for p in _files_under(root) if is_dated_output(p)]


def output_prefix_for(path: Path, input_root: Path, output_root: Path) -> Path:
    """Mirror path under output_root, dropping its rotation index

    var/log/syslog.1 with roots var/ and out/ gives out/log/syslog
    """
    relative = Path(path).relative_to(input_root)
    return (Path(output_root) / relative).with_suffix("")


def add_extension(path: Path, extension: str) -> Path:
    """Append an extension, keeping any existing one (a.log -> a.log.gz)"""
    path = Path(path)
    return path.with_name(f"{path.name}.{extension.lstrip('.')}")


def ensure_output_root(path: Union[str, Path]) -> Path:
    """Create the output root if needed

    Raises:
        OutputRootError: If it exists and is not a directory, or cannot be created
    """
    path = Path(path)
    if path.is_dir():
        return path
    if path.exists():
        raise OutputRootError(path, "exists and is not a directory")
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputRootError(path, f"could not be created : {e}") from e
    return path
