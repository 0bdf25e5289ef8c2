# core/repositories/base.py
"""Data access interfaces injected into the services.

Two implementations exist: SQLAlchemy stores in ``core.sa.repositories``
and in-memory stores in ``core.repositories.memory``.
"""

import abc
from typing import Iterable, List, Optional

from core.models import Book, BookCreate, ListItem, User


def duplicate_list_item_message(owner_id: str, book_id: str) -> str:
    return f"User {owner_id} already has a list item for the book with the ID {book_id}"


class BookStore(abc.ABC):
    """Read access to books, plus insertion for seeding."""

    @abc.abstractmethod
    def read_by_id(self, book_id: str) -> Optional[Book]:
        """Get a book by its ID, or None if it does not exist."""

    @abc.abstractmethod
    def read_many_by_id(self, book_ids: Iterable[str]) -> List[Book]:
        """Get the books that exist among ``book_ids``, in the order given."""

    @abc.abstractmethod
    def query(self, text: str = "") -> List[Book]:
        """Search books by a case-insensitive substring of title or author.

        An empty ``text`` returns every book.
        """

    @abc.abstractmethod
    def insert(self, book: BookCreate, book_id: Optional[str] = None) -> Book:
        """Store a new book and return it with its ID."""


class ListItemStore(abc.ABC):

    @abc.abstractmethod
    def query(self, owner_id: Optional[str] = None, book_id: Optional[str] = None) -> List[ListItem]:
        """Get list items matching every filter given, in insertion order."""

    @abc.abstractmethod
    def read_by_id(self, list_item_id: str) -> Optional[ListItem]:
        """Get a list item by its ID, or None if it does not exist."""

    @abc.abstractmethod
    def create(self, owner_id: str, book_id: str) -> ListItem:
        """Create a list item with default notes, rating and dates.

        Raises:
            ValidationError: If the owner already has a list item for the book
        """

    @abc.abstractmethod
    def update(self, list_item_id: str, updates: dict) -> Optional[ListItem]:
        """Merge ``updates`` into the list item and return the result.

        Returns None if the list item does not exist.
        """

    @abc.abstractmethod
    def remove(self, list_item_id: str) -> None:
        """Delete a list item. Removing an unknown ID is a no-op."""


class UserStore(abc.ABC):

    @abc.abstractmethod
    def read_by_id(self, user_id: str) -> Optional[User]:
        """Get a user by ID."""

    @abc.abstractmethod
    def read_by_username(self, username: str) -> Optional[User]:
        """Get a user by their exact username."""

    @abc.abstractmethod
    def insert(self, username: str, hash: str, salt: str) -> User:
        """Store a new user.

        Raises:
            ValidationError: If the username is already taken
        """
