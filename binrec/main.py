from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import typer

from binrec.config import Settings, get_settings
from binrec.domain.models import SAMPLE_RECORDS
from binrec.layout import RECORD_SIZE
from binrec.reporter import print_table, report_lines
from binrec.rules.score_override import ScoreOverrideRule
from binrec.scanner import read_and_scan
from binrec.storage.reader import count_records
from binrec.storage.writer import write_records
from binrec.utils.logging import configure_logging

app = typer.Typer(help="Write and read fixed-size binary record files.")

PathOption = typer.Option(
    None,
    "--path",
    "-p",
    help="Data file to use (default from settings).",
)
TableOption = typer.Option(
    False,
    "--table",
    "-t",
    help="Render results as a table instead of plain lines.",
)


def _setup(path: Optional[Path]) -> tuple[Settings, Path]:
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)
    return settings, path or settings.data_file


def _write_sample(path: Path) -> None:
    written = write_records(path, SAMPLE_RECORDS)
    if written is not None:
        typer.echo(f"Wrote {written} records to {path}.")


def _read_and_report(path: Path, count: int, settings: Settings, table: bool) -> None:
    rule = ScoreOverrideRule(target_id=settings.match_id, score=settings.override_score)
    result = read_and_scan(path, count, rule)
    if result is None:
        return
    if table:
        print_table(result, source=str(path))
        return
    for line in report_lines(result):
        typer.echo(line)


@app.command()
def info(path: Optional[Path] = PathOption) -> None:
    """
    Show effective configuration values.
    """
    settings, target = _setup(path)
    typer.echo(
        f"file={target} | count={settings.record_count} "
        f"match_id={settings.match_id} override_score={settings.override_score} "
        f"record_size={RECORD_SIZE}"
    )
    if target.is_file():
        size = target.stat().st_size
        typer.echo(f"{target}: {size} bytes, {count_records(target)} records")


@app.command()
def write(path: Optional[Path] = PathOption) -> None:
    """
    Write the sample records, replacing the file's contents.
    """
    _, target = _setup(path)
    _write_sample(target)


@app.command()
def read(
    path: Optional[Path] = PathOption,
    count: Optional[int] = typer.Option(
        None,
        "--count",
        "-n",
        min=0,
        help="Number of records to read (default from settings).",
    ),
    table: bool = TableOption,
) -> None:
    """
    Read records, override the score of the matching id in memory, and print them.
    """
    settings, target = _setup(path)
    _read_and_report(target, settings.record_count if count is None else count, settings, table)


@app.command()
def run(path: Optional[Path] = PathOption, table: bool = TableOption) -> None:
    """
    Write the sample records, then read them back.
    """
    settings, target = _setup(path)
    _write_sample(target)
    _read_and_report(target, len(SAMPLE_RECORDS), settings, table)


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
