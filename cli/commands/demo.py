import click
from core.services.book_manager import BookManager
from cli.utils import (
    print_banner, print_section, print_success, print_book_list,
    print_book_detail, print_not_found, print_count
)
from .store import close_store

DEMO_BOOKS = [
    ("吾輩は猫である", "夏目漱石", 1905),
    ("人間失格", "太宰治", 1948),
    ("雪国", "川端康成", 1935),
]
FIND_ID = 2
UPDATE_ID = 2
UPDATED_TITLE = "人間失格（改訂版）"
DELETE_ID = 3


def run_demo(manager: BookManager) -> None:
    """Walk through create, read, update and delete with fixed data.

    The store must already be open and initialized; it is closed at the end.
    """
    print_section("1. CREATE - adding books")
    for title, author, year in DEMO_BOOKS:
        manager.add(title, author, year)
        print_success(f"Added book: {title} by {author}")
    click.echo()

    print_section("2. READ - all books")
    print_book_list(manager.list_all())

    print_section("3. READ - find one book")
    book = manager.find(FIND_ID)
    if book is not None:
        print_book_detail(book)
    else:
        print_not_found(FIND_ID)

    print_section("4. UPDATE - change a book")
    if manager.update(UPDATE_ID, title=UPDATED_TITLE) is not None:
        print_success(f"Updated book ID {UPDATE_ID}")
    else:
        print_not_found(UPDATE_ID)
    print_book_list(manager.list_all())

    print_section("5. DELETE - remove a book")
    if manager.delete(DELETE_ID):
        print_success(f"Deleted book ID {DELETE_ID}")
    else:
        print_not_found(DELETE_ID)
    print_book_list(manager.list_all())

    print_section("6. Statistics")
    print_count(manager.count())
    click.echo()

    close_store(manager)
    print_banner("Demonstration complete!")
    click.echo()
