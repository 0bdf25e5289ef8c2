import click
import uvicorn
from typing import Optional

from core.repositories import InMemoryBookStore, InMemoryListItemStore, InMemoryUserStore

@click.command()
@click.option('--host', default='127.0.0.1', help='Interface to bind')
@click.option('--port', default=8000, type=int, help='Port to listen on')
@click.option('--reload/--no-reload', default=False, help='Restart on code changes')
@click.option('--memory', is_flag=True, help='Keep everything in memory instead of the database')
@click.option('--books', 'books_file', default=None, type=click.Path(exists=True, dir_okay=False),
              help='JSON file of books to start with (with --memory)')
def serve(host: str, port: int, reload: bool, memory: bool, books_file: Optional[str]):
    """Run the API server"""
    if not memory:
        uvicorn.run("api.main:app", host=host, port=port, reload=reload)
        return

    if reload:
        raise click.UsageError("--reload cannot be combined with --memory")

    from api.dependencies import Stores, get_stores
    from api.main import app
    from core.models import Book, new_id
    from .books import read_books_file

    books = []
    if books_file:
        books = [Book(id=book_id or new_id(), **book.model_dump()) for book_id, book in read_books_file(books_file)]
    stores = Stores(
        books=InMemoryBookStore(books),
        list_items=InMemoryListItemStore(),
        users=InMemoryUserStore(),
    )
    app.dependency_overrides[get_stores] = lambda: stores
    click.echo(click.style(f"Serving from memory with {len(books)} books", fg='yellow'))
    uvicorn.run(app, host=host, port=port)
