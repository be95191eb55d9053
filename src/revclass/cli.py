"""RevClass CLI - Command Line Interface.

This module provides the command-line interface for the RevClass framework,
allowing users to classify reversible gates read from truth table streams.

The CLI is built using Typer and uses Rich for formatted output.

Typical usage example:

  $ revclass classify gates.txt
  $ cat gates.txt | revclass classify --json
  $ revclass inspect gates.txt.gz
"""

import io
import logging
import sys
from collections.abc import Iterator
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .exceptions import RevClassError
from .log_utils import setup_logging
from .models.gate import Gate

app = typer.Typer(
    name="revclass",
    help="RevClass: Reversible Gate Classification Framework",
    no_args_is_help=True,
)
console = Console()

STDIN_PATH = Path("-")


@app.callback(invoke_without_command=False)
def main(
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Suppress debug logs (show warnings/errors only)"
    ),
):
    """RevClass: Reversible Gate Classification Framework."""
    setup_logging(quiet=quiet)


def _check_files(files: Optional[list[Path]]) -> None:
    for f in files or []:
        if f != STDIN_PATH and not f.exists():
            console.print(f"[red]Error:[/red] File not found: {escape(str(f))}")
            raise typer.Exit(1)


def _iter_gates(files: Optional[list[Path]]) -> Iterator[Gate]:
    """Yields gates from each file in turn, or from stdin if no file is given."""
    from .parsers.truth_table import TruthTableParser

    parser = TruthTableParser()
    for f in files or [STDIN_PATH]:
        if f == STDIN_PATH:
            logging.getLogger("revclass.cli").info("Reading truth tables from stdin")
            if isinstance(sys.stdin, io.TextIOWrapper):
                # Undecodable bytes become U+FFFD, as they do for files
                sys.stdin.reconfigure(errors="replace")
            yield from parser.iter_gates(sys.stdin)
        else:
            yield from parser.iter_file(f)


@app.command()
def classify(
    files: Optional[list[Path]] = typer.Argument(
        None, help="Truth table file(s), optionally gzipped; '-' or none reads stdin"
    ),
    json_output: bool = typer.Option(
        False, "--json", help="Emit one JSON object per gate instead of the class name"
    ),
):
    """Classifies every gate in the input and prints one class name per line.

    Gates are classified and printed as soon as they are complete. Any format
    error or non-reversible gate aborts with exit status 1; gates already
    printed remain valid.

    Args:
        files: Truth table files to read in order. Reads stdin if omitted.
        json_output: Optional. Emit JSON Lines (index, n, name, flags, modulus).

    Raises:
        typer.Exit: If a file is missing or the input is malformed.
    """
    _check_files(files)

    from .classifiers.classifier import analyze_gate
    from .models.export import ExportedClassification

    try:
        for index, gate in enumerate(_iter_gates(files)):
            result = analyze_gate(gate)
            if json_output:
                typer.echo(ExportedClassification.from_result(index, result).model_dump_json())
            else:
                typer.echo(result.name)
    except RevClassError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)


@app.command()
def inspect(
    files: Optional[list[Path]] = typer.Argument(
        None, help="Truth table file(s), optionally gzipped; '-' or none reads stdin"
    ),
):
    """Shows the algebraic fingerprint behind each gate's classification.

    For every gate, displays its width, invariant flags, Hamming-weight
    spectrum and modulus and, for affine gates, the columns of the matrix of
    its linear part.

    Args:
        files: Truth table files to read in order. Reads stdin if omitted.

    Raises:
        typer.Exit: If a file is missing or the input is malformed.
    """
    _check_files(files)

    from .classifiers.classifier import analyze_gate

    try:
        for index, gate in enumerate(_iter_gates(files)):
            result = analyze_gate(gate)
            spectrum = ", ".join(str(d) for d in sorted(result.hw_spectrum))

            console.print(
                Panel.fit(
                    f"[bold green]Class:[/] {result.name}\n"
                    f"[bold]Width:[/] {result.n} bits\n"
                    f"[bold]Flags:[/] {' '.join(result.flags.names) or 'none'}\n"
                    f"[bold]Hamming Spectrum:[/] {spectrum}\n"
                    f"[bold]Modulus:[/] {result.modulus}",
                    title=f"Gate {index}",
                )
            )

            if result.columns is not None:
                table = Table(title="Linear Part")
                table.add_column("Column", justify="right")
                table.add_column("Vector")
                table.add_column("Weight", justify="right")

                for i, column in enumerate(result.columns):
                    table.add_row(str(i), format(column, f"0{result.n}b"), str(column.bit_count()))

                console.print(table)
                console.print(f"[bold]Column Modulus:[/] {result.inf_modulus}")
    except RevClassError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
