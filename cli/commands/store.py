from core.services.book_manager import BookManager
from cli.utils import print_success


def open_store(manager: BookManager) -> None:
    """Connect to the store and make sure the books table exists"""
    manager.connect()
    manager.initialize()
    print_success(f"Connected to database '{manager.database.name}'")
    print_success("Table 'books' is ready")


def close_store(manager: BookManager) -> None:
    if manager.is_open:
        manager.close()
        print_success("Database connection closed")
