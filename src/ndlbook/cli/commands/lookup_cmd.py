# ABOUTME: The `ndlbook lookup` command for fetching book metadata by ISBN.
# ABOUTME: Queries the NDL and prints the record as a table or JSON.

import json as json_lib
import logging

import click
from rich.console import Console
from rich.table import Table

from ndlbook.cli.options import timeout_option, verbose_option
from ndlbook.metadata.http import NdlHttpClient, TransportError
from ndlbook.metadata.ndl import NdlScraper
from ndlbook.metadata.types import BookRecord

EXIT_NOT_FOUND = 1
EXIT_TRANSPORT_ERROR = 2


def _create_http_client(timeout: float) -> NdlHttpClient:
    """Create the HTTP client used for NDL requests."""
    return NdlHttpClient(timeout=timeout)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _print_record(console: Console, record: BookRecord) -> None:
    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column("Field", style="bold", width=12)
    table.add_column("Value")

    table.add_row("ISBN", record.identifier)
    table.add_row("Title", record.title)
    if record.description:
        table.add_row("Description", record.description)
    table.add_row("Cover", record.cover_uri if record.has_cover else "[dim]none[/dim]")

    console.print(table)


@click.command("lookup")
@click.argument("isbn")
@click.option(
    "--json",
    "json_output",
    is_flag=True,
    default=False,
    help="Print the record as JSON.",
)
@timeout_option
@verbose_option
def lookup(isbn: str, json_output: bool, timeout: float, verbose: bool) -> None:
    """Look up a book in the National Diet Library by ISBN."""
    _configure_logging(verbose)
    console = Console()
    err_console = Console(stderr=True)

    with _create_http_client(timeout) as http_client:
        scraper = NdlScraper(http_client=http_client, request_factory=http_client)
        if not scraper.supports(isbn):
            err_console.print(f"[yellow]Warning: {isbn} is not a valid ISBN.[/yellow]")

        try:
            record = scraper.lookup(isbn)
        except TransportError as exc:
            err_console.print(f"[red]Error: {exc}[/red]")
            raise SystemExit(EXIT_TRANSPORT_ERROR) from exc

    if record is None:
        if json_output:
            click.echo("null")
        else:
            console.print(f"[yellow]No NDL record found for {isbn}.[/yellow]")
        raise SystemExit(EXIT_NOT_FOUND)

    if json_output:
        click.echo(json_lib.dumps(record.to_dict(), indent=2, ensure_ascii=False))
        return

    _print_record(console, record)
