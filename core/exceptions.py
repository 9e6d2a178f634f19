# core/exceptions.py


class BookManagerError(Exception):
    """Base class for errors reported by the book manager"""


class StorageUnavailable(BookManagerError):
    """The database file or engine could not be used"""


class InvalidInput(BookManagerError):
    """A value could not be accepted (blank title, non-numeric id, ...)"""
