# split_log/split_log/core/errors.py
from pathlib import Path


class SplitLogError(Exception):
    """Base class for all split_log errors"""


class InputRootError(SplitLogError):
    """The input root is missing or is not a directory"""

    def __init__(self, path: Path):
        self.path = Path(path)
        super().__init__(f'input path ("{self.path}") is not a directory')


class OutputRootError(SplitLogError):
    """The output root cannot be used, aborts the whole run"""

    def __init__(self, path: Path, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f'output path ("{self.path}") {reason}')


class FileProcessingError(SplitLogError):
    """An I/O failure while splitting one file

    Only the file at `path` is affected; its source is left in place.
    """

    def __init__(self, path: Path, cause: Exception):
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"Error while processing {self.path} : {cause}")
