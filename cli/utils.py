import click
from typing import List
from core.sa.models import Book

RULE_WIDTH = 70


def print_banner(title: str) -> None:
    """Print a title between two full-width rules"""
    click.echo("\n" + "=" * RULE_WIDTH)
    click.echo(click.style(title, fg='blue', bold=True))
    click.echo("=" * RULE_WIDTH)


def print_section(title: str) -> None:
    click.echo(click.style(f"[{title}]", fg='blue'))


def print_success(message: str) -> None:
    click.echo(click.style("✓ ", fg='green') + message)


def print_warning(message: str) -> None:
    click.echo(click.style(f"⚠ {message}", fg='yellow'))


def print_error(message: str) -> None:
    click.echo(click.style(f"Error: {message}", fg='red'), err=True)


def format_year(year) -> str:
    return f"({year})" if year is not None else ""


def print_book_list(books: List[Book]) -> None:
    """Print all books in the boxed listing format"""
    if not books:
        click.echo(click.style("No books are registered in the database", fg='yellow'))
        return

    print_banner("Registered books")
    for book in books:
        click.echo(click.style(f"ID: {book.id}", fg='cyan') + f" | {book.title} {format_year(book.year)}".rstrip())
        click.echo(f"       Author: {book.author} | Registered: {book.created_at}")
        click.echo("-" * RULE_WIDTH)
    click.echo()


def print_book_detail(book: Book) -> None:
    click.echo(click.style("\nBook found:", fg='blue'))
    click.echo(f"   ID: {book.id}")
    click.echo(f"   Title: {book.title}")
    click.echo(f"   Author: {book.author}")
    if book.year is not None:
        click.echo(f"   Year: {book.year}")
    click.echo(f"   Registered: {book.created_at}\n")


def print_not_found(book_id: int) -> None:
    print_warning(f"No book with ID {book_id} was found")


def print_count(count: int) -> None:
    click.echo(click.style("Total books registered: ", fg='blue') + click.style(str(count), fg='cyan'))
