"""Command-line interface for cellgrid."""

import logging
import sys

import click

from .config import MAX_INDENT, TableConfig, resolve_style
from .exceptions import CellGridError
from .styles import TableStyle
from .table import Table

STYLE_CHOICES = [s.value for s in TableStyle]


@click.group()
@click.version_option(package_name="cellgrid")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """cellgrid aligned ASCII table CLI."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )


@cli.command()
@click.argument("cells", nargs=-1, required=True)
@click.option(
    "--columns",
    "-c",
    type=click.IntRange(min=1),
    required=True,
    help="Number of table columns",
)
@click.option(
    "--style",
    "-s",
    type=click.Choice(STYLE_CHOICES),
    default=None,
    help="Table style (default: $CELLGRID_STYLE or regular-head-on)",
)
@click.option(
    "--indent",
    "-i",
    type=click.IntRange(0, MAX_INDENT),
    default=0,
    help=f"Left shift of the table (0-{MAX_INDENT})",
)
@click.option(
    "--padding",
    "-p",
    type=click.IntRange(min=0),
    default=None,
    help="Spaces between border and text (default: $CELLGRID_PADDING or 1)",
)
def render(
    cells: tuple[str, ...],
    columns: int,
    style: str | None,
    indent: int,
    padding: int | None,
) -> None:
    """Render CELLS as a table.

    Cells fill the table row by row. A literal \\n inside a cell starts a
    new line within that cell.
    """
    try:
        config = TableConfig.from_env()
        if padding is not None:
            config.padding = padding
        table = Table(config)
        for cell in cells:
            table.append(None, "%s", cell.replace("\\n", "\n"))
        table.render(click.echo, resolve_style(style), indent, columns)
    except CellGridError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@cli.command()
def demo() -> None:
    """Show the sample table in every style."""
    table = Table()
    table.append(None, "Headline1")
    table.append(None, "Headline2")
    table.append(None, "Headline3")
    table.append(None, "Headline4")
    table.append(None, "Headline n")

    table.append(None, "Row2 Column1")
    table.append(None, "Row2 Column2")
    table.append(None, "Row2 Column3")
    table.append(None, "Row2 Column4")
    table.append(None, "Row2 Column n")

    table.append(None, "Row3.1 Column1")
    table.append(None, "Row3.1 Column2\nRow3.2 Column2 '%s'\nRow3.n Column2 ...", "some text")
    table.append(None, "Row3.1 Column3 '%s'", "some text")
    table.append(None, "Row3.1 Column4 int: '%d'", 4711)
    table.append(None, "Row3.1 Column n")

    table.append(None, "Row n Column1")
    table.append(None, "Row n Column2")
    table.append(None, "Row n Column3")
    table.append(None, "Row n Column4")
    table.append(None, "Row n Column n")

    for indent, style in enumerate(TableStyle):
        click.echo(f"\n {style.name}")
        table.render(click.echo, style, indent, 5)
    table.teardown()

    click.echo(f"\n {TableStyle.REGULAR_HEAD_ON.name} - using escape sequences")
    table.append("\x1b[4m", "Head1 underlined")
    table.append("\x1b[4m", "Head2 underlined")
    table.append("\x1b[4m", "Head3 underlined")
    table.append("\x1b[0;34m", "Row2 Column1 blue")
    table.append(None, "Row2.1 Column2\nRow2.2 Columns2 %s", "test")
    table.append("\x1b[46;37m", "Row2 Column3 %d\ncyan", 4711)
    table.append(None, "Row3 Column1")
    table.append("\x1b[0;33m", "Row3 Column2 yellow")
    table.append(None, "Row3 Column3")
    table.render(click.echo, TableStyle.REGULAR_HEAD_ON, 0, 3)
    table.teardown()


def _color_table(codes: range, text: str) -> Table:
    table = Table(TableConfig(padding=0))
    for code in codes:
        table.append(f"\x1b[48;5;{code}m", text)
    return table


@cli.command()
def palette() -> None:
    """Show the 256-color terminal palette as compact tables."""
    click.echo("\n16 standard and high intensity colors")
    _color_table(range(16), "    \n").render(click.echo, TableStyle.COMPACT, 0, 16)

    click.echo("216 colors")
    _color_table(range(16, 232), "  ").render(click.echo, TableStyle.COMPACT, 0, 36)

    click.echo("Grayscale colors")
    _color_table(range(232, 256), "   ").render(click.echo, TableStyle.COMPACT, 0, 24)


if __name__ == "__main__":
    cli()
