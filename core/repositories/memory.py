# core/repositories/memory.py
from typing import Dict, Iterable, List, Optional

from core.errors import ValidationError
from core.models import Book, BookCreate, ListItem, User, new_id
from .base import BookStore, ListItemStore, UserStore, duplicate_list_item_message


class InMemoryBookStore(BookStore):
    """Books held in an insertion-ordered dict."""

    def __init__(self, books: Optional[Iterable[Book]] = None):
        self._books: Dict[str, Book] = {book.id: book.model_copy() for book in books or []}

    def read_by_id(self, book_id: str) -> Optional[Book]:
        book = self._books.get(book_id)
        return book.model_copy() if book else None

    def read_many_by_id(self, book_ids: Iterable[str]) -> List[Book]:
        return [self._books[i].model_copy() for i in book_ids if i in self._books]

    def query(self, text: str = "") -> List[Book]:
        needle = (text or "").lower()
        return [
            book.model_copy()
            for book in self._books.values()
            if needle in book.title.lower() or needle in book.author.lower()
        ]

    def insert(self, book: BookCreate, book_id: Optional[str] = None) -> Book:
        stored = Book(id=book_id or new_id(), **book.model_dump())
        self._books[stored.id] = stored
        return stored.model_copy()


class InMemoryListItemStore(ListItemStore):
    """List items held in an insertion-ordered dict."""

    def __init__(self, list_items: Optional[Iterable[ListItem]] = None):
        self._items: Dict[str, ListItem] = {item.id: item.model_copy() for item in list_items or []}

    def query(self, owner_id: Optional[str] = None, book_id: Optional[str] = None) -> List[ListItem]:
        return [
            item.model_copy()
            for item in self._items.values()
            if (owner_id is None or item.owner_id == owner_id)
            and (book_id is None or item.book_id == book_id)
        ]

    def read_by_id(self, list_item_id: str) -> Optional[ListItem]:
        item = self._items.get(list_item_id)
        return item.model_copy() if item else None

    def create(self, owner_id: str, book_id: str) -> ListItem:
        if self.query(owner_id=owner_id, book_id=book_id):
            raise ValidationError(duplicate_list_item_message(owner_id, book_id))
        item = ListItem(id=new_id(), owner_id=owner_id, book_id=book_id)
        self._items[item.id] = item
        return item.model_copy()

    def update(self, list_item_id: str, updates: dict) -> Optional[ListItem]:
        item = self._items.get(list_item_id)
        if item is None:
            return None
        updated = ListItem.model_validate({**item.model_dump(), **updates})
        self._items[list_item_id] = updated
        return updated.model_copy()

    def remove(self, list_item_id: str) -> None:
        self._items.pop(list_item_id, None)


class InMemoryUserStore(UserStore):

    def __init__(self):
        self._users: Dict[str, User] = {}

    def read_by_id(self, user_id: str) -> Optional[User]:
        user = self._users.get(user_id)
        return user.model_copy() if user else None

    def read_by_username(self, username: str) -> Optional[User]:
        return next(
            (user.model_copy() for user in self._users.values() if user.username == username),
            None,
        )

    def insert(self, username: str, hash: str, salt: str) -> User:
        if self.read_by_username(username):
            raise ValidationError("username taken")
        user = User(id=new_id(), username=username, hash=hash, salt=salt)
        self._users[user.id] = user
        return user.model_copy()
