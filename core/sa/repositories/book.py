# core/sa/repositories/book.py
from typing import Optional, List
from sqlalchemy import select, func
from sqlalchemy.orm import Session
from ..models import Book


class BookRepository:
    def __init__(self, session: Session):
        self.session = session

    def create(self, title: str, author: str, year: Optional[int] = None) -> Book:
        """Insert a book and return it with its assigned id"""
        book = Book(title=title, author=author, year=year)
        self.session.add(book)
        self.session.commit()
        return book

    def get_all(self) -> List[Book]:
        """Get all books ordered by id"""
        return list(self.session.scalars(select(Book).order_by(Book.id)))

    def get_by_id(self, book_id: int) -> Optional[Book]:
        """Get a book by its id"""
        return self.session.get(Book, book_id)

    def update(self, book: Book, title: str, author: str, year: Optional[int]) -> Book:
        """Overwrite the mutable fields of a book

        Args:
            book: Book loaded through this repository's session
            title: New title
            author: New author
            year: New publication year, None stores no year

        Returns:
            The updated book
        """
        book.title = title
        book.author = author
        book.year = year
        self.session.commit()
        return book

    def delete(self, book: Book) -> None:
        self.session.delete(book)
        self.session.commit()

    def count(self) -> int:
        """Count all books"""
        return self.session.scalar(select(func.count(Book.id))) or 0
