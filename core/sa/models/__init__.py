# core/sa/models/__init__.py
from .base import Base, CreatedAtMixin, TIMESTAMP_FORMAT, utc_timestamp
from .book import Book

__all__ = [
    'Base',
    'CreatedAtMixin',
    'TIMESTAMP_FORMAT',
    'utc_timestamp',
    'Book',
]
