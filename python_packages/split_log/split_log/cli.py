# split_log/split_log/cli.py
import argparse
import sys
from pathlib import Path

from split_log.config import DEFAULT_OUTPUT_DIR
from split_log.core import SplitLogError
from split_log.pipeline import run
from split_log.reporters import ProgressReporter


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="split-log",
        description="Split rotated log files into one file per day",
    )
    parser.add_argument("input_path", type=Path, help="Folder holding the rotated logs")
    parser.add_argument(
        "output_path",
        type=Path,
        nargs="?",
        default=Path(DEFAULT_OUTPUT_DIR),
        help=f"Folder receiving the dated files (default: {DEFAULT_OUTPUT_DIR})",
    )
    parser.add_argument(
        "--no-decompress",
        action="store_true",
        help="Skip decompressing .gz files in the input folder",
    )
    parser.add_argument(
        "--no-compress",
        action="store_true",
        help="Leave the dated output files uncompressed",
    )
    parser.add_argument(
        "-q", "--quiet", action="store_true", help="Only print errors and the summary"
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    reporter = ProgressReporter(quiet=args.quiet)

    try:
        run(
            args.input_path,
            args.output_path,
            decompress=not args.no_decompress,
            compress=not args.no_compress,
            reporter=reporter,
        )
    except SplitLogError as e:
        reporter.fatal(e)
        return 1
    except KeyboardInterrupt:
        reporter.fatal("stopped by user")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
