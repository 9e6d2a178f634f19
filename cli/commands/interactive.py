import click
from typing import Optional
from core.exceptions import BookManagerError, InvalidInput
from core.services.book_manager import BookManager, parse_int, parse_optional_int
from cli.utils import (
    print_success, print_warning, print_error, print_book_list,
    print_book_detail, print_not_found, print_count
)
from .store import close_store

MENU = """Commands:
  1: add a book
  2: show all books
  3: find a book
  4: update a book
  5: delete a book
  6: show statistics
  q: quit
"""

CLEAR_YEAR = "-"


def ask(text: str) -> str:
    """Prompt for one line; an empty answer is allowed"""
    return click.prompt(text, default="", show_default=False).strip()


def optional_text(value: str) -> Optional[str]:
    return value or None


def add_book(manager: BookManager) -> None:
    title = ask("Title")
    author = ask("Author")
    year = parse_optional_int(ask("Year (optional)"), "year")
    manager.add(title, author, year)
    print_success(f"Added book: {title} by {author}")


def find_book(manager: BookManager) -> None:
    book_id = parse_int(ask("ID to find"), "id")
    book = manager.find(book_id)
    if book is None:
        print_not_found(book_id)
    else:
        print_book_detail(book)


def update_book(manager: BookManager) -> None:
    book_id = parse_int(ask("ID to update"), "id")
    click.echo(f"(Leave a field blank to keep it, enter '{CLEAR_YEAR}' as the year to remove it)")
    title = optional_text(ask("New title"))
    author = optional_text(ask("New author"))
    year_text = ask("New year")
    clear_year = year_text == CLEAR_YEAR
    year = None if clear_year else parse_optional_int(year_text, "year")
    if manager.update(book_id, title=title, author=author, year=year, clear_year=clear_year) is None:
        print_not_found(book_id)
    else:
        print_success(f"Updated book ID {book_id}")


def delete_book(manager: BookManager) -> None:
    book_id = parse_int(ask("ID to delete"), "id")
    if manager.delete(book_id):
        print_success(f"Deleted book ID {book_id}")
    else:
        print_not_found(book_id)


COMMANDS = {
    '1': add_book,
    '2': lambda manager: print_book_list(manager.list_all()),
    '3': find_book,
    '4': update_book,
    '5': delete_book,
    '6': lambda manager: print_count(manager.count()),
}


def run_interactive(manager: BookManager) -> None:
    """Read commands from stdin until 'q' or end of input, then close the store"""
    click.echo(click.style("\nBook manager - interactive mode", fg='blue', bold=True))
    click.echo(MENU)

    while True:
        try:
            command = click.prompt("Command", default="", show_default=False, prompt_suffix=" > ").strip()
        except click.Abort:
            click.echo()
            break
        click.echo()

        if command == 'q':
            break

        handler = COMMANDS.get(command)
        if handler is None:
            print_warning("Invalid command")
            click.echo()
            continue

        try:
            handler(manager)
        except InvalidInput as e:
            print_warning(f"Invalid input: {e}")
        except click.Abort:
            click.echo()
            break
        except BookManagerError as e:
            print_error(str(e))
        click.echo()

    close_store(manager)
    click.echo("Goodbye!\n")
