# core/sa/repositories/book.py
from typing import Iterable, List, Optional
from sqlalchemy import or_
from sqlalchemy.orm import Session

from core import models
from core.repositories.base import BookStore
from ..models import Book

class BookRepository(BookStore):
    """Repository for managing Book entities."""

    def __init__(self, session: Session):
        self.session = session

    def read_by_id(self, book_id: str) -> Optional[models.Book]:
        """Get a book by its ID"""
        book = self.session.query(Book).filter(Book.id == book_id).one_or_none()
        return models.Book.model_validate(book) if book else None

    def read_many_by_id(self, book_ids: Iterable[str]) -> List[models.Book]:
        """Get several books in one query.

        Args:
            book_ids: IDs of the books to fetch

        Returns:
            The books that exist, ordered like ``book_ids``
        """
        book_ids = list(book_ids)
        if not book_ids:
            return []
        found = {
            book.id: book
            for book in self.session.query(Book).filter(Book.id.in_(book_ids)).all()
        }
        return [models.Book.model_validate(found[i]) for i in book_ids if i in found]

    def query(self, text: str = "") -> List[models.Book]:
        """Search books by title or author.

        Args:
            text: Case-insensitive search string, empty for all books

        Returns:
            Matching books ordered by title
        """
        base_query = self.session.query(Book)
        if text:
            pattern = f"%{text}%"
            base_query = base_query.filter(or_(Book.title.ilike(pattern), Book.author.ilike(pattern)))
        return [models.Book.model_validate(book) for book in base_query.order_by(Book.title).all()]

    def insert(self, book: models.BookCreate, book_id: Optional[str] = None) -> models.Book:
        row = Book(id=book_id or models.new_id(), **book.model_dump())
        self.session.add(row)
        self.session.commit()
        return models.Book.model_validate(row)
