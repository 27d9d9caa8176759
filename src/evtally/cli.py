from pathlib import Path
import sys
from typing import Optional

import typer

from .config import Settings
from .ledger import (
    CapacityExceeded,
    DuplicateId,
    InputUnavailable,
    LedgerError,
    MalformedInput,
    UnknownId,
)
from .logging import get_logger
from .pipeline import load_ledger, parse_stream
from .report import write_report, write_summary_json

app = typer.Typer(help="evtally - effort value tally sheets", no_args_is_help=False)

EXIT_CODES = {
    InputUnavailable: 2,
    MalformedInput: 3,
    DuplicateId: 4,
    UnknownId: 5,
    CapacityExceeded: 6,
}


def exit_code_for(error: LedgerError) -> int:
    return EXIT_CODES.get(type(error), 1)


@app.command()
def tally(
    input_path: Path = typer.Argument(Path("evlist.txt"), help="Path to the ev list file"),
    out: Path = typer.Option(Path("evsheet.txt"), "--out", "-o", help="Output file for the ev sheet ('-' for stdout)"),
    report_format: str = typer.Option("text", "--format", "-f", help="Report format: 'text' or 'json'"),
    capacity: Optional[int] = typer.Option(None, min=0, help="Maximum number of pokemon to accept"),
    encoding: str = typer.Option("utf-8", help="Text encoding of the input and output files"),
    stdin: bool = typer.Option(False, "--stdin", help="Read the ev list from standard input instead of INPUT_PATH"),
) -> None:
    """
    Tally the effort values in an ev list and write an ev sheet.

    The ev list starts with a declaration line of ' id name' pairs. Everything
    after it is a stream of pokemon ids and stat codes (h, a, d, p, q, s).
    """
    logger = get_logger(__name__)

    try:
        settings = Settings(
            input_path=input_path,
            output_path=out,
            encoding=encoding,
            capacity=capacity,
            report_format=report_format,
        )
    except ValueError as exc:
        logger.error(str(exc))
        raise typer.Exit(code=1) from exc

    if stdin:
        outcome = parse_stream(sys.stdin, settings)
    else:
        outcome = load_ledger(settings.input_path, settings)
    if outcome.error is not None:
        logger.error(outcome.error.describe())
        raise typer.Exit(code=exit_code_for(outcome.error))

    ledger = outcome.ledger
    try:
        if settings.report_format == "json":
            written = write_summary_json(ledger, settings.output_path, encoding=settings.encoding)
        else:
            written = write_report(ledger, settings.output_path, indent=settings.indent, encoding=settings.encoding)
    except OSError as exc:
        logger.error(f"Failed to write {settings.output_path}: {exc}")
        raise typer.Exit(code=1) from exc

    if str(written) != "-":
        source = "standard input" if stdin else settings.input_path
        typer.echo(f"Tallied {len(ledger)} pokemon from {source} into {written}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
