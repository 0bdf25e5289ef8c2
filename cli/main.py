# cli/main.py
import click
from core.config import get_settings
from core.utils.logging import configure_logging
from .commands.db import db
from .commands.books import books
from .commands.serve import serve

@click.group()
@click.option('--log-level', default=None, help='Override the LOG_LEVEL setting')
def cli(log_level):
    """Bookshelf CLI"""
    configure_logging(log_level or get_settings().log_level)

cli.add_command(db)
cli.add_command(books)
cli.add_command(serve)

def main():
    """Entry point for the CLI"""
    cli()

if __name__ == '__main__':
    main()
