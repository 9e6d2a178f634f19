# cli/main.py
import logging
import click
from core.exceptions import BookManagerError
from core.sa.database import Database
from core.services.book_manager import BookManager
from .commands import open_store, run_demo, run_interactive
from .utils import print_banner, print_error


@click.command()
@click.option('-i', '--interactive', is_flag=True, help='Read commands from stdin instead of running the demo')
@click.option('--db', 'db_path', type=click.Path(dir_okay=False), default=None,
              help='SQLite database file (default: $DATABASE_URL or books.db)')
@click.option('-v', '--verbose', is_flag=True, help='Log database activity to stderr')
def cli(interactive: bool, db_path: str, verbose: bool):
    """Book manager: CRUD operations on a SQLite database

    Example:
        book-manager              # run the scripted demonstration
        book-manager -i           # interactive mode
        book-manager -i --db my_books.db
    """
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    try:
        with BookManager(Database(db_path=db_path)) as manager:
            if not interactive:
                print_banner("Database demo - book manager")
                click.echo()
            open_store(manager)
            click.echo()
            if interactive:
                run_interactive(manager)
            else:
                run_demo(manager)
    except BookManagerError as e:
        print_error(str(e))
        raise click.Abort()


def main():
    """Entry point for the CLI"""
    cli()


if __name__ == '__main__':
    main()
