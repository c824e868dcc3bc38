from split_log.reporters.progress import ProgressReporter

__all__ = ["ProgressReporter"]
