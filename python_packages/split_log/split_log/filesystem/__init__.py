# split_log/split_log/filesystem/__init__.py
from .walker import (
    add_extension,
    ensure_output_root,
    find_compressed_files,
    find_dated_outputs,
    find_rotated_files,
    is_dated_output,
    is_rotated,
    rotation_index,
    output_prefix_for,
)
from .compress import compress, compress_tree, decompress, decompress_tree

__all__ = [
    'add_extension',
    'ensure_output_root',
    'find_compressed_files',
    'find_dated_outputs',
    'find_rotated_files',
    'is_dated_output',
    'is_rotated',
    'rotation_index',
    'output_prefix_for',
    'compress',
    'compress_tree',
    'decompress',
    'decompress_tree',
]
