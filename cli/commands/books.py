import json
import click
from typing import List, Optional
from pydantic import ValidationError as SchemaError

from core.models import Book, BookCreate
from core.sa.database import Database
from core.sa.repositories import BookRepository
from core.services import BookService

def print_books(books: List[Book]):
    """Print books in a readable format."""
    if not books:
        click.echo("No books found")
        return
    for book in books:
        click.echo(click.style(book.id, fg='cyan') + f"  {book.title} - {book.author}")

def read_books_file(path: str) -> List[tuple[Optional[str], BookCreate]]:
    """Read books from a JSON array of objects.

    Keys may be camelCase or snake_case. An ``id`` key is kept as the book ID.
    """
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, list) or not all(isinstance(entry, dict) for entry in data):
        raise click.BadParameter("expected a JSON array of books", param_hint="FILE")
    try:
        return [(entry.get("id"), BookCreate.model_validate(entry)) for entry in data]
    except SchemaError as e:
        raise click.BadParameter(str(e), param_hint="FILE")

@click.group()
def books():
    """Book related commands"""
    pass

@books.command()
@click.option('--title', required=True, help='Book title')
@click.option('--author', required=True, help='Book author')
@click.option('--cover-image-url', default=None, help='URL of the cover image')
@click.option('--page-count', default=None, type=int, help='Number of pages')
@click.option('--publisher', default=None, help='Publisher name')
@click.option('--synopsis', default=None, help='Short description of the book')
def add(title: str, author: str, cover_image_url: Optional[str], page_count: Optional[int],
        publisher: Optional[str], synopsis: Optional[str]):
    """Add a single book and print its ID

    Example:
        bookshelf books add --title "Project Hail Mary" --author "Andy Weir"
    """
    database = Database()
    database.init_db()
    with database.get_db() as session:
        book = BookService(BookRepository(session)).add_book(BookCreate(
            title=title,
            author=author,
            cover_image_url=cover_image_url,
            page_count=page_count,
            publisher=publisher,
            synopsis=synopsis,
        ))
        click.echo(book.id)

@books.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
def load(file: str):
    """Add every book from a JSON file"""
    entries = read_books_file(file)
    database = Database()
    database.init_db()
    with database.get_db() as session:
        repo = BookRepository(session)
        for book_id, book in entries:
            repo.insert(book, book_id=book_id)
    click.echo(click.style(f"Loaded {len(entries)} books", fg='green'))

@books.command(name='list')
@click.option('--query', default='', help='Filter by title or author')
def list_books(query: str):
    """List books matching a query"""
    database = Database()
    database.init_db()
    with database.get_db() as session:
        print_books(BookService(BookRepository(session)).search_books(query))
