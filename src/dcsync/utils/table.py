"""Row-at-a-time table output."""

from __future__ import annotations

from typing import Optional, Protocol, Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from .console import console as default_console


class RowSink(Protocol):
    def write(self, row: Sequence[str]) -> None: ...


class TableStream:
    """Print each row as soon as it is written, with fixed column widths.

    The first row written is treated as the header and rendered bold.
    """

    def __init__(
        self,
        widths: Sequence[int] = (26, 36, 12),
        console: Optional[Console] = None,
    ) -> None:
        self.widths = list(widths)
        self.console = console or default_console
        self.rows_written = 0

    def write(self, row: Sequence[str]) -> None:
        table = Table(show_header=False, box=None, padding=(0, 1), pad_edge=False)
        for width in self.widths:
            table.add_column(width=width, overflow="fold")
        style = "bold" if self.rows_written == 0 else None
        table.add_row(*[Text(str(cell)) for cell in row], style=style)
        self.console.print(table)
        self.rows_written += 1

