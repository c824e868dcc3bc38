# split_log/split_log/reporters/progress.py
from pathlib import Path
from typing import Optional, TextIO

from rich.box import ROUNDED
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.theme import Theme

from split_log.config import REPORT_COLORS
from split_log.core.errors import FileProcessingError

CHECK = "✓"


class ProgressReporter:
    """Reports each file's outcome as the passes run

    Per-file lines go to stdout and are silenced by `quiet`; errors go to
    stderr and are always shown.
    """

    def __init__(
        self,
        file: Optional[TextIO] = None,
        error_file: Optional[TextIO] = None,
        quiet: bool = False,
        width: Optional[int] = None,
    ):
        theme = Theme(REPORT_COLORS)
        self.console = Console(file=file, theme=theme, highlight=False, width=width)
        self.error_console = Console(
            file=error_file, stderr=True, theme=theme, highlight=False, width=width
        )
        self.quiet = quiet

    def phase(self, title: str) -> None:
        if self.quiet:
            return
        title_panel = Panel(
            title, box=ROUNDED, style="title", padding=(0, 1), expand=False
        )
        self.console.print(title_panel)

    def _file_line(self, path: Path, mark: str, style: str, target: Optional[Path] = None) -> None:
        if self.quiet:
            return
        self.console.print(f"{path} ", style="path", end="", markup=False, soft_wrap=True)
        self.console.print(mark, style=style, end="")
        if target is not None:
            self.console.print(f" -> {target}", style="target", markup=False, soft_wrap=True)
        else:
            self.console.print("")

    def split(self, path: Path, output_prefix: Path) -> None:
        self._file_line(path, CHECK, "ok", output_prefix)

    def skipped(self, path: Path) -> None:
        self._file_line(path, "?", "skipped")

    def decompressed(self, path: Path) -> None:
        self._file_line(path, CHECK, "ok")

    def compressed(self, path: Path, destination: Path) -> None:
        self._file_line(path, CHECK, "ok", destination)

    def failed(self, path: Path, error: Exception) -> None:
        if isinstance(error, FileProcessingError):
            message = str(error)
        else:
            message = f"Error while processing {path} : {error}"
        self.error_console.print(message, style="error", markup=False, soft_wrap=True)

    def fatal(self, error) -> None:
        self.error_console.print(f"split-log : {error}", style="error", markup=False, soft_wrap=True)

    def summary(self, summary) -> None:
        """Print the batch counters as a table"""
        table = Table(title="Summary", box=ROUNDED, show_header=False)
        table.add_column("Item", style="title")
        table.add_column("Count", justify="right", style="count")

        table.add_row("Decompressed", str(summary.decompressed))
        table.add_row("Split", str(summary.split))
        table.add_row("Skipped (unknown format)", str(summary.skipped))
        table.add_row("Lines written", str(summary.lines_written))
        table.add_row("Compressed", str(summary.compressed))
        table.add_row("Failed", f"[error]{len(summary.failed)}[/error]")

        self.console.print(table)
