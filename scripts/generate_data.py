"""
Sample data generator for binrec.

Implements deterministic pseudo-random record generation and writes the
result with the regular record writer, so generated files share the exact
on-disk layout the reader expects.
"""

from __future__ import annotations

import random
import sys
import time
from pathlib import Path

import typer

from binrec.domain.models import Record
from binrec.storage.writer import write_records
from binrec.utils.logging import configure_logging

app = typer.Typer(help="Generate a binary record file with synthetic records.")

_SYLLABLES = ["an", "bo", "cy", "di", "el", "fa", "gu", "ha", "is", "jo", "ka", "lu"]


def _generate_records(rows: int, seed: int) -> list[Record]:
    rng = random.Random(seed)
    records: list[Record] = []
    for i in range(rows):
        name = "".join(rng.choice(_SYLLABLES) for _ in range(rng.randint(1, 4))).title()
        records.append(Record(name=name, id=i + 1, score=round(rng.uniform(0, 100), 2)))
    return records


@app.command()
def main(
    rows: int = typer.Option(
        1_000,
        "--rows",
        "-r",
        min=0,
        help="Number of records to generate.",
    ),
    seed: int = typer.Option(
        42,
        "--seed",
        help="Deterministic RNG seed.",
    ),
    output: Path = typer.Option(
        Path("data.bin"),
        "--output",
        "-o",
        help="Record file to write (replaced if it exists).",
    ),
) -> None:
    """
    Generate synthetic records and write them to a record file.
    """
    configure_logging(level="INFO")
    start = time.perf_counter()
    output.parent.mkdir(parents=True, exist_ok=True)

    typer.echo(f"Generating {rows:,} records -> {output} (seed={seed})")
    records = _generate_records(rows, seed)
    written = write_records(output, records)
    if written is None:
        return

    duration = time.perf_counter() - start
    typer.echo(f"Wrote {written:,} records in {duration:.2f}s")


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
