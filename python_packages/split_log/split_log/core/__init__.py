# split_log/split_log/core/__init__.py
from .errors import FileProcessingError, InputRootError, OutputRootError, SplitLogError
from .formats import LogFormat, classify, classify_file
from .dates import SENTINEL_DATE, determine_date
from .writer import SplitState, SplitWriter, split_lines
from .log import LogReader
from .processor import BatchSummary, FileProcessor, FileTask, ProcessOutcome, one_file

__all__ = [
    'FileProcessingError',
    'InputRootError',
    'OutputRootError',
    'SplitLogError',
    'LogFormat',
    'classify',
    'classify_file',
    'SENTINEL_DATE',
    'determine_date',
    'SplitState',
    'SplitWriter',
    'split_lines',
    'LogReader',
    'BatchSummary',
    'FileProcessor',
    'FileTask',
    'ProcessOutcome',
    'one_file',
]
