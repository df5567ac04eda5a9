"""CLI commands for the Book aggregate."""

from __future__ import annotations

import click

from bookstore.application.add_book import AddBookHandler
from bookstore.application.dto import BookDTO, BookPageDTO, to_book_dto, to_page_dto
from bookstore.application.find_books import (
    FindBooksByAttributeHandler,
    FindBooksByPriceHandler,
)
from bookstore.application.remove_book import RemoveBookHandler
from bookstore.application.show_book import ShowBookHandler
from bookstore.application.update_book import UpdateBookHandler
from bookstore.domain.exceptions import DomainException
from bookstore.domain.model.book import Book
from bookstore.domain.model.genre import Genre
from bookstore.infrastructure.bootstrap import DEFAULT_DATA_DIR, book_repository
from bookstore.infrastructure.persistence.json_book_repository import (
    JsonBookRepository,
)

DEFAULT_PAGE_SIZE = 10

_GENRE_CHOICE = click.Choice([g.name for g in Genre], case_sensitive=False)


def _repository() -> JsonBookRepository:
    obj = click.get_current_context().obj or {}
    try:
        return book_repository(obj.get("data_dir", DEFAULT_DATA_DIR))
    except DomainException as exc:
        raise click.ClickException(str(exc))


def _display_book(dto: BookDTO) -> None:
    click.echo(f"ISBN:     {dto.isbn}")
    click.echo(f"Title:    {dto.title}")
    click.echo(f"Author:   {dto.author}")
    click.echo(f"Genre:    {dto.genre}")
    click.echo(f"Price:    {dto.price}")
    click.echo(f"Quantity: {dto.quantity}")


def _display_page(dto: BookPageDTO) -> None:
    """Shared formatting for paged listings."""
    if not dto.items:
        click.echo("No books found.")
        return

    click.echo(
        f"{'ISBN':<15} {'Title':<25} {'Author':<20} {'Genre':<16} {'Price':>9} {'Qty':>5}"
    )
    click.echo("-" * 95)
    for item in dto.items:
        click.echo(
            f"{item.isbn:<15} {item.title:<25} {item.author:<20} "
            f"{item.genre:<16} {item.price:>9} {item.quantity:>5}"
        )
    click.echo("-" * 95)
    click.echo(
        f"Page {dto.page + 1} of {max(dto.total_pages, 1)}  "
        f"({dto.total_elements} books)"
    )


@click.command("add")
@click.option("--isbn", required=True, help="ISBN of the book.")
@click.option("--title", required=True, help="Book title.")
@click.option("--author", required=True, help="Book author.")
@click.option("--genre", required=True, type=_GENRE_CHOICE, help="Book genre.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--quantity", required=True, type=int, help="Copies to stock.")
def book_add(
    isbn: str, title: str, author: str, genre: str, price: str, quantity: int
) -> None:
    """Stock a book, or add copies if the ISBN is already stocked."""
    handler = AddBookHandler(book_repo=_repository())

    try:
        candidate = Book(
            isbn=isbn,
            title=title,
            author=author,
            genre=genre,
            price=price,
            quantity=quantity,
        )
        book = handler.handle(candidate)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Book {book.isbn} '{book.title}' now has {book.quantity} in stock")


@click.command("remove")
@click.option("--isbn", required=True, help="ISBN of the book.")
@click.option("--quantity", required=True, type=int, help="Copies to remove.")
def book_remove(isbn: str, quantity: int) -> None:
    """Remove copies of a book (deletes it when none are left)."""
    handler = RemoveBookHandler(book_repo=_repository())

    try:
        remaining = handler.handle(isbn, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if remaining is None:
        click.echo(f"Book {isbn} fully removed, no copies left.")
    else:
        click.echo(f"Book {isbn}: {remaining.quantity} remaining")


@click.command("update")
@click.option("--isbn", required=True, help="ISBN of the book to update.")
@click.option("--title", required=True, help="New title.")
@click.option("--author", required=True, help="New author.")
@click.option("--genre", required=True, type=_GENRE_CHOICE, help="New genre.")
@click.option("--price", required=True, help="New price (e.g. 29.99).")
def book_update(isbn: str, title: str, author: str, genre: str, price: str) -> None:
    """Update a book's title, author, genre and price."""
    handler = UpdateBookHandler(book_repo=_repository())

    try:
        # Quantity is required to build a Book but ignored by the update.
        updated = Book(
            isbn=isbn,
            title=title,
            author=author,
            genre=genre,
            price=price,
            quantity=1,
        )
        book = handler.handle(isbn, updated)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Book {isbn} updated")
    _display_book(to_book_dto(book))


@click.command("show")
@click.option("--isbn", required=True, help="ISBN of the book to display.")
def book_show(isbn: str) -> None:
    """Show details of a stocked book."""
    handler = ShowBookHandler(book_repo=_repository())

    try:
        book = handler.handle(isbn)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_book(to_book_dto(book))


@click.command("find")
@click.option("--by", "filter_type", required=True, help="genre, title or author.")
@click.option("--value", "filter_value", required=True, help="Value to match.")
@click.option("--page", default=0, show_default=True, type=int, help="Zero-based page.")
@click.option("--size", default=DEFAULT_PAGE_SIZE, show_default=True, type=int, help="Page size.")
def book_find(filter_type: str, filter_value: str, page: int, size: int) -> None:
    """List books matching a genre, title or author."""
    handler = FindBooksByAttributeHandler(book_repo=_repository())

    try:
        result = handler.handle(filter_type, filter_value, page, size)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_page(to_page_dto(result))


@click.command("price")
@click.option("--min", "min_price", required=True, help="Lowest price, inclusive.")
@click.option("--max", "max_price", required=True, help="Highest price, inclusive.")
@click.option("--page", default=0, show_default=True, type=int, help="Zero-based page.")
@click.option("--size", default=DEFAULT_PAGE_SIZE, show_default=True, type=int, help="Page size.")
def book_price(min_price: str, max_price: str, page: int, size: int) -> None:
    """List books within a price range."""
    handler = FindBooksByPriceHandler(book_repo=_repository())

    try:
        result = handler.handle(min_price, max_price, page, size)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_page(to_page_dto(result))
