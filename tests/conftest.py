# tests/conftest.py
import sys
import pytest
from pathlib import Path

# Add project root to Python path
project_root = str(Path(__file__).parent.parent)
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from core.sa.database import Database
from core.sa.repositories import BookRepository
from core.services.book_manager import BookManager


@pytest.fixture
def test_db_path(tmp_path):
    """Path of a fresh SQLite file for each test"""
    return str(tmp_path / "test_books.db")


@pytest.fixture
def database(test_db_path):
    """Create a test database instance with the schema in place"""
    db = Database(db_path=test_db_path)
    db.init_db()
    yield db
    db.dispose()


@pytest.fixture
def db_session(database):
    """Create a new database session for a test"""
    session = database.get_session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def book_repo(db_session):
    return BookRepository(db_session)


@pytest.fixture
def manager(database):
    """An open, initialized BookManager"""
    with BookManager(database) as manager:
        manager.initialize()
        yield manager
