# tests/test_cli/test_interactive.py
import pytest
from click.testing import CliRunner
from cli.main import cli
from sqlalchemy.exc import OperationalError
from core.sa.database import Database
from core.sa.repositories import BookRepository
from core.services.book_manager import BookManager


@pytest.fixture
def run(test_db_path):
    """Run interactive mode with the given lines on stdin"""
    def _run(*lines):
        stdin = "\n".join(lines) + "\n"
        return CliRunner().invoke(cli, ['-i', '--db', test_db_path], input=stdin)
    return _run


@pytest.fixture
def stored_books(test_db_path):
    def _books():
        with BookManager(Database(db_path=test_db_path)) as manager:
            return [b.to_dict() for b in manager.list_all()]
    return _books


def test_quit_immediately(run):
    result = run("q")
    assert result.exit_code == 0, result.output
    assert "Commands:" in result.output
    assert "Database connection closed" in result.output
    assert "Goodbye!" in result.output


def test_add_and_list(run, stored_books):
    result = run("1", "Kokoro", "Natsume Soseki", "1914", "1", "Botchan", "Natsume Soseki", "", "2", "q")

    assert result.exit_code == 0, result.output
    assert "Added book: Kokoro by Natsume Soseki" in result.output
    assert "Kokoro (1914)" in result.output
    books = stored_books()
    assert [(b['title'], b['year']) for b in books] == [("Kokoro", 1914), ("Botchan", None)]


def test_find(run):
    result = run("1", "Kokoro", "Natsume Soseki", "", "3", "1", "3", "42", "q")
    assert "Book found:" in result.output
    assert "No book with ID 42 was found" in result.output


def test_update_keeps_blank_fields(run, stored_books):
    run("1", "Kokoro", "Natsume Soseki", "1914", "q")
    result = run("4", "1", "Kokoro (new edition)", "", "", "q")

    assert "Updated book ID 1" in result.output
    book = stored_books()[0]
    assert book['title'] == "Kokoro (new edition)"
    assert book['author'] == "Natsume Soseki"
    assert book['year'] == 1914


def test_update_clears_year(run, stored_books):
    run("1", "Kokoro", "Natsume Soseki", "1914", "q")
    run("4", "1", "", "", "-", "q")
    assert stored_books()[0]['year'] is None


def test_update_missing_book(run):
    result = run("4", "7", "", "", "", "q")
    assert "No book with ID 7 was found" in result.output


def test_delete_and_count(run, stored_books):
    run("1", "A", "X", "", "1", "B", "Y", "", "q")
    result = run("5", "1", "5", "1", "6", "q")

    assert "Deleted book ID 1" in result.output
    assert "No book with ID 1 was found" in result.output
    assert "Total books registered: 1" in result.output
    assert [b['title'] for b in stored_books()] == ["B"]


def test_invalid_command(run, stored_books):
    result = run("9", "hello", "q")
    assert result.output.count("Invalid command") == 2
    assert stored_books() == []


def test_invalid_numbers_abort_command(run, stored_books):
    result = run("3", "abc", "1", "Kokoro", "Soseki", "soon", "q")
    assert result.exit_code == 0, result.output
    assert result.output.count("Invalid input") == 2
    assert stored_books() == []


def test_blank_title_rejected(run, stored_books):
    result = run("1", "", "Soseki", "", "q")
    assert "Invalid input" in result.output
    assert stored_books() == []


def test_end_of_input_quits(run):
    result = run("6")
    assert result.exit_code == 0, result.output
    assert "Total books registered: 0" in result.output
    assert "Database connection closed" in result.output


def test_huge_numbers_are_invalid_input(run, stored_books):
    result = run("3", "99999999999999999999", "1", "A", "B", "99999999999999999999", "6", "q")

    assert result.exit_code == 0, result.output
    assert result.output.count("Invalid input") == 2
    assert "Total books registered: 0" in result.output
    assert "Database connection closed" in result.output
    assert stored_books() == []


def test_storage_error_keeps_loop_running(run, monkeypatch):
    calls = []
    original_count = BookRepository.count

    def failing_count(self):
        calls.append(1)
        if len(calls) == 1:
            raise OperationalError("SELECT count(books.id)", {}, Exception("disk I/O error"))
        return original_count(self)

    monkeypatch.setattr(BookRepository, "count", failing_count)
    result = run("6", "6", "q")

    assert result.exit_code == 0, result.output
    assert "Error: could not count books" in result.output
    assert "Total books registered: 0" in result.output
    assert "Goodbye!" in result.output
