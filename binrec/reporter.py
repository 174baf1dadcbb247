from __future__ import annotations

from typing import List, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from binrec.domain.models import Record
from binrec.scanner import ScanResult

FOUND_MESSAGE = "Record Updated Successfully."
NOT_FOUND_MESSAGE = "Record not found."


def format_record(record: Record) -> str:
    return f"Name: {record.name}, ID: {record.id}, Score: {record.score:.2f}"


def summary_line(result: ScanResult) -> str:
    return FOUND_MESSAGE if result.found else NOT_FOUND_MESSAGE


def report_lines(result: ScanResult) -> List[str]:
    """
    Plain-text report: one line per scanned record, then the found/not-found
    summary.
    """
    lines = [format_record(r) for r in result.records]
    lines.append(summary_line(result))
    return lines


def print_table(result: ScanResult, source: str = "", console: Optional[Console] = None) -> None:
    """
    Render a scan result as a rich table.

    Rows rewritten by the update rule are flagged in the "Updated" column.
    """
    console = console or Console()

    if not result.records:
        console.print("[yellow]No records to display.[/yellow]")
        console.print(summary_line(result), markup=False)
        return

    title = "Records"
    if source:
        title = f"{title}\n[dim]{escape(source)}[/dim]"

    table = Table(
        title=title,
        box=box.ROUNDED,
        caption=summary_line(result),
    )

    table.add_column("#", justify="right", style="dim")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("ID", justify="right", style="magenta")
    table.add_column("Score", justify="right", style="green")
    table.add_column("Updated", justify="center", style="bold yellow")

    matched = set(result.matched)
    for index, record in enumerate(result.records):
        table.add_row(
            str(index),
            escape(record.name),
            str(record.id),
            f"{record.score:.2f}",
            "yes" if index in matched else "",
        )

    console.print(table)


__all__ = [
    "FOUND_MESSAGE",
    "NOT_FOUND_MESSAGE",
    "format_record",
    "print_table",
    "report_lines",
    "summary_line",
]
