# core/services/book_manager.py
import logging
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.exceptions import InvalidInput, StorageUnavailable
from core.sa.database import Database
from core.sa.models import Book
from core.sa.repositories import BookRepository

logger = logging.getLogger(__name__)

# SQLite INTEGER is a signed 64-bit value
INT_MIN = -2**63
INT_MAX = 2**63 - 1


def parse_int(value, field: str) -> int:
    """Convert user input to an int or raise InvalidInput"""
    if isinstance(value, bool):
        raise InvalidInput(f"{field} must be an integer, got {value!r}")
    if isinstance(value, int):
        number = value
    else:
        try:
            number = int(str(value).strip())
        except ValueError:
            raise InvalidInput(f"{field} must be an integer, got {value!r}") from None
    if not INT_MIN <= number <= INT_MAX:
        raise InvalidInput(f"{field} is out of range: {number}")
    return number


def parse_optional_int(value, field: str) -> Optional[int]:
    """Like parse_int, but None and blank strings mean no value"""
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return parse_int(value, field)


def _required_text(value: Optional[str], field: str) -> str:
    if value is None or not str(value).strip():
        raise InvalidInput(f"{field} must not be empty")
    return str(value).strip()


class BookManager:
    """CRUD facade over the books table.

    Owns a single session for its lifetime. Use it as a context manager so
    the session is released exactly once:

        with BookManager(Database(db_path="books.db")) as manager:
            manager.initialize()
            manager.add("Snow Country", "Yasunari Kawabata", 1935)

    Every storage failure surfaces as StorageUnavailable. A missing id is not
    an error: find/update return None and delete returns False.
    """

    def __init__(self, database: Database):
        self.database = database
        self._session: Optional[Session] = None
        self._closed = False

    def __enter__(self) -> "BookManager":
        self.connect()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def is_open(self) -> bool:
        return self._session is not None

    def connect(self) -> None:
        if self._closed:
            raise StorageUnavailable("book store has been closed")
        if self._session is None:
            self._session = self.database.get_session()
            logger.info("Opened book store %s", self.database.name)

    def close(self) -> None:
        """Release the session; further operations raise StorageUnavailable"""
        if self._session is not None:
            self._session.close()
            self.database.dispose()
            self._session = None
            logger.info("Closed book store %s", self.database.name)
        self._closed = True

    def _repository(self) -> BookRepository:
        if self._session is None:
            raise StorageUnavailable("book store is not open")
        return BookRepository(self._session)

    def _storage_error(self, action: str, exc: SQLAlchemyError) -> StorageUnavailable:
        logger.exception("Failed to %s in %s", action, self.database.name)
        if self._session is not None:
            self._session.rollback()
        return StorageUnavailable(f"could not {action}: {exc}")

    def initialize(self) -> None:
        """Create the books table if it does not exist yet"""
        if self._session is None:
            raise StorageUnavailable("book store is not open")
        try:
            self.database.init_db()
        except SQLAlchemyError as e:
            raise self._storage_error("create table 'books'", e) from e

    def add(self, title: str, author: str, year: Optional[int] = None) -> Book:
        title = _required_text(title, "title")
        author = _required_text(author, "author")
        year = parse_optional_int(year, "year")
        repo = self._repository()
        try:
            book = repo.create(title, author, year)
        except SQLAlchemyError as e:
            raise self._storage_error("add book", e) from e
        logger.info("Added book %s: %s / %s", book.id, title, author)
        return book

    def list_all(self) -> List[Book]:
        repo = self._repository()
        try:
            return repo.get_all()
        except SQLAlchemyError as e:
            raise self._storage_error("list books", e) from e

    def find(self, book_id: int) -> Optional[Book]:
        book_id = parse_int(book_id, "id")
        repo = self._repository()
        try:
            return repo.get_by_id(book_id)
        except SQLAlchemyError as e:
            raise self._storage_error(f"find book {book_id}", e) from e

    def update(
        self,
        book_id: int,
        title: Optional[str] = None,
        author: Optional[str] = None,
        year: Optional[int] = None,
        clear_year: bool = False
    ) -> Optional[Book]:
        """Merge new values into an existing book.

        Args:
            book_id: Id of the book to change
            title: New title, None keeps the current one
            author: New author, None keeps the current one
            year: New year, None keeps the current one
            clear_year: Remove the stored year (cannot be combined with year)

        Returns:
            The updated book, or None if no book has that id
        """
        book_id = parse_int(book_id, "id")
        if title is not None:
            title = _required_text(title, "title")
        if author is not None:
            author = _required_text(author, "author")
        year = parse_optional_int(year, "year")
        if clear_year and year is not None:
            raise InvalidInput("year cannot be both set and cleared")

        book = self.find(book_id)
        if book is None:
            logger.info("Book %s not found, nothing updated", book_id)
            return None

        new_year = None if clear_year else (year if year is not None else book.year)
        repo = self._repository()
        try:
            book = repo.update(
                book,
                title if title is not None else book.title,
                author if author is not None else book.author,
                new_year
            )
        except SQLAlchemyError as e:
            raise self._storage_error(f"update book {book_id}", e) from e
        logger.info("Updated book %s", book_id)
        return book

    def delete(self, book_id: int) -> bool:
        """Delete a book; returns False if no book has that id"""
        book_id = parse_int(book_id, "id")
        book = self.find(book_id)
        if book is None:
            logger.info("Book %s not found, nothing deleted", book_id)
            return False
        repo = self._repository()
        try:
            repo.delete(book)
        except SQLAlchemyError as e:
            raise self._storage_error(f"delete book {book_id}", e) from e
        logger.info("Deleted book %s", book_id)
        return True

    def count(self) -> int:
        repo = self._repository()
        try:
            return repo.count()
        except SQLAlchemyError as e:
            raise self._storage_error("count books", e) from e
