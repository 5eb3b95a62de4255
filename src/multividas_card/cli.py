# src/multividas_card/cli.py
"""
multividas-card Command Line Interface (CLI).

Builds a card from command-line options and prints it, using `typer` for
argument parsing and `rich` for human-facing output.

Commands
--------
- **render**  : print the `<meta>` markup (HTML by default, `--xml` for XHTML).
- **inspect** : show the serialized fields and whether the card is complete.
- **version** : print the library version.

Usage
-----
    $ multividas-card render -s @multividas -d "A page" -i https://example.com/a.png
    $ multividas-card render --xml -d "A page" -i https://example.com/a.png
    $ multividas-card inspect -t "Title only"
"""

from __future__ import annotations

from typing import Annotated

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from multividas_card import __version__
from multividas_card.core.contracts.card import CardRecord
from multividas_card.core.settings import get_logger

load_dotenv()

app = typer.Typer(
    help="multividas-card: build and render Multividas sharing cards.",
    rich_markup_mode="markdown",
)
console = Console()
logger = get_logger("multividas_card.cli")

CardOpt = Annotated[str, typer.Option("--card", "-c", help="Card type (only 'summary').")]
UrlOpt = Annotated[str | None, typer.Option("--url", "-u", help="Canonical page URL.")]
SiteOpt = Annotated[str | None, typer.Option("--site", "-s", help="Publisher username.")]
TitleOpt = Annotated[str | None, typer.Option("--title", "-t", help="Page title.")]
DescOpt = Annotated[str | None, typer.Option("--description", "-d", help="Page description.")]
ImageOpt = Annotated[str | None, typer.Option("--image", "-i", help="Image URL.")]


# --------------------------------------------------------------------------- #
# Helpers
# --------------------------------------------------------------------------- #


def _build_card(
    card: str,
    url: str | None,
    site: str | None,
    title: str | None,
    description: str | None,
    image: str | None,
) -> CardRecord:
    """Helper: Feed every provided option through the record's setters."""
    record = CardRecord(card)
    if url is not None:
        record.set_url(url)
    if site is not None:
        record.set_site(site)
    if title is not None:
        record.set_title(title)
    if description is not None:
        record.set_description(description)
    if image is not None:
        record.set_image(image)
    return record


# --------------------------------------------------------------------------- #
# Commands
# --------------------------------------------------------------------------- #


@app.command()  # type: ignore[misc]
def render(
    card: CardOpt = "summary",
    url: UrlOpt = None,
    site: SiteOpt = None,
    title: TitleOpt = None,
    description: DescOpt = None,
    image: ImageOpt = None,
    xml: Annotated[
        bool,
        typer.Option("--xml/--html", help="Emit XHTML-style self-closing elements."),
    ] = False,
) -> None:
    """
    Print the card as `<meta>` elements.

    Exits with code 1 when a required field is missing or was rejected.
    """
    record = _build_card(card, url, site, title, description, image)

    checked = record.check()
    if checked.is_err():
        problem = checked.unwrap_err()
        logger.debug("Render refused: %s", problem)
        console.print(f"[bold red]❌ Card incomplete:[/bold red] {problem}")
        raise typer.Exit(code=1)

    typer.echo(record.as_xml() if xml else record.as_html())


@app.command()  # type: ignore[misc]
def inspect(
    card: CardOpt = "summary",
    url: UrlOpt = None,
    site: SiteOpt = None,
    title: TitleOpt = None,
    description: DescOpt = None,
    image: ImageOpt = None,
) -> None:
    """Show the stored fields and the completeness verdict."""
    record = _build_card(card, url, site, title, description, image)

    table = Table(title=f"{record.card.value} card")
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    for name, value in record.model_dump(mode="json").items():
        table.add_row(name, "" if value is None else str(value))
    console.print(table)

    missing = record.missing_fields()
    if missing:
        console.print(f"[yellow]Incomplete[/yellow] (missing: {', '.join(missing)})")
    else:
        console.print("[green]Complete[/green]")


@app.command()  # type: ignore[misc]
def version() -> None:
    """Print the library version."""
    typer.echo(__version__)


if __name__ == "__main__":
    app()
