# core/services/list_item_service.py

import logging
from typing import Dict, List, Optional

from core.errors import ForbiddenError, NotFoundError, ValidationError
from core.models import Book, ExpandedListItem, ListItem, User, expand
from core.repositories.base import BookStore, ListItemStore, duplicate_list_item_message

logger = logging.getLogger(__name__)

class ListItemService:
    """List item operations for an authenticated user.

    Every operation that acts on a single list item takes the item already
    loaded and authorized by ``set_list_item``.
    """

    def __init__(self, books: BookStore, list_items: ListItemStore):
        self.books = books
        self.list_items = list_items

    def set_list_item(self, user: User, list_item_id: Optional[str]) -> ListItem:
        """Load a list item and check that ``user`` owns it.

        Raises:
            NotFoundError: If no list item has the ID
            ForbiddenError: If the list item belongs to another user
        """
        list_item = self.list_items.read_by_id(list_item_id)
        if list_item is None:
            logger.warning("List item %s not found", list_item_id)
            raise NotFoundError(f"No list item was found with the id of {list_item_id}")
        if list_item.owner_id != user.id:
            logger.warning("User %s denied access to list item %s", user.id, list_item.id)
            raise ForbiddenError(
                f"User with id {user.id} is not authorized to access the list item {list_item.id}"
            )
        return list_item

    def get_list_items(self, user: User) -> List[ExpandedListItem]:
        list_items = self.list_items.query(owner_id=user.id)
        # dict keeps first-seen order while dropping repeats
        book_ids = list(dict.fromkeys(item.book_id for item in list_items))
        books: Dict[str, Book] = {book.id: book for book in self.books.read_many_by_id(book_ids)}
        return [expand(item, books.get(item.book_id)) for item in list_items]

    def get_list_item(self, list_item: ListItem) -> ExpandedListItem:
        return expand(list_item, self.books.read_by_id(list_item.book_id))

    def create_list_item(self, user: User, book_id: Optional[str]) -> ExpandedListItem:
        if not book_id:
            raise ValidationError("No bookId provided")

        if self.list_items.query(owner_id=user.id, book_id=book_id):
            logger.warning("User %s already tracks book %s", user.id, book_id)
            raise ValidationError(duplicate_list_item_message(user.id, book_id))

        list_item = self.list_items.create(owner_id=user.id, book_id=book_id)
        logger.info("Created list item %s for user %s", list_item.id, user.id)
        return self.get_list_item(list_item)

    def update_list_item(self, list_item: ListItem, updates: dict) -> ExpandedListItem:
        """Merge ``updates`` into the list item.

        The book is fetched again afterwards and is None when it has been
        deleted in the meantime.
        """
        updated = self.list_items.update(list_item.id, updates)
        if updated is None:
            raise NotFoundError(f"No list item was found with the id of {list_item.id}")
        logger.info("Updated list item %s (%s)", updated.id, ", ".join(sorted(updates)) or "no changes")
        return self.get_list_item(updated)

    def delete_list_item(self, list_item: ListItem) -> dict:
        self.list_items.remove(list_item.id)
        logger.info("Deleted list item %s", list_item.id)
        return {"success": True}
