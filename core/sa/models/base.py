# core/sa/models/base.py
from datetime import datetime, UTC
from sqlalchemy.orm import DeclarativeBase, mapped_column, Mapped
from sqlalchemy import String

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def utc_timestamp() -> str:
    """Current UTC time as 'YYYY-MM-DD HH:MM:SS'"""
    return datetime.now(UTC).strftime(TIMESTAMP_FORMAT)


class Base(DeclarativeBase):
    """Base class for all models"""
    pass


class CreatedAtMixin:
    """Mixin to add an immutable created_at text column"""
    created_at: Mapped[str] = mapped_column(String(19), nullable=False, default=utc_timestamp)
