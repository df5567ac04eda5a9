import logging
from pathlib import Path

import click

from bookstore.infrastructure.bootstrap import DEFAULT_DATA_DIR
from bookstore.infrastructure.cli.book_commands import (
    book_add,
    book_find,
    book_price,
    book_remove,
    book_show,
    book_update,
)


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=DEFAULT_DATA_DIR,
    envvar="BOOKSTORE_DATA_DIR",
    show_default=True,
    help="Directory holding the book store files.",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, data_dir: Path, verbose: bool) -> None:
    """Bookstore — inventory management"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = {"data_dir": data_dir}


@cli.group()
def book() -> None:
    """Manage stocked books."""


# Register subcommands
book.add_command(book_add)
book.add_command(book_find)
book.add_command(book_price)
book.add_command(book_remove)
book.add_command(book_show)
book.add_command(book_update)
