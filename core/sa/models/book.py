# core/sa/models/book.py
from typing import Any, Dict
from sqlalchemy import String, Integer
from sqlalchemy.orm import Mapped, mapped_column
from .base import Base, CreatedAtMixin


class Book(Base, CreatedAtMixin):
    __tablename__ = 'books'
    __table_args__ = {'sqlite_autoincrement': True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String, nullable=False)
    author: Mapped[str] = mapped_column(String, nullable=False)
    year: Mapped[int | None] = mapped_column(Integer, nullable=True)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'title': self.title,
            'author': self.author,
            'year': self.year,
            'created_at': self.created_at,
        }

    def __repr__(self) -> str:
        return f"<Book id={self.id} title={self.title!r}>"
