# core/services/book_service.py

import logging
from typing import List, Optional

from core.errors import NotFoundError
from core.models import Book, BookCreate
from core.repositories.base import BookStore

logger = logging.getLogger(__name__)

class BookService:
    def __init__(self, books: BookStore):
        self.books = books

    def get_book(self, book_id: str) -> Book:
        book = self.books.read_by_id(book_id)
        if book is None:
            logger.warning("Book %s not found", book_id)
            raise NotFoundError(f"No book was found with the id of {book_id}")
        return book

    def search_books(self, query: Optional[str] = None) -> List[Book]:
        return self.books.query(query or "")

    def add_book(self, book: BookCreate) -> Book:
        created = self.books.insert(book)
        logger.info("Added book %s (%s)", created.id, created.title)
        return created
