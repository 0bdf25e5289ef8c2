# core/sa/repositories/list_item.py
import logging
from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from core import models
from core.errors import ValidationError
from core.repositories.base import ListItemStore, duplicate_list_item_message
from ..models import ListItem

logger = logging.getLogger(__name__)

class ListItemRepository(ListItemStore):
    """Repository for managing ListItem entities."""

    def __init__(self, session: Session):
        """Initialize the repository with a database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self.session = session

    def _get(self, list_item_id: str) -> Optional[ListItem]:
        return self.session.query(ListItem).filter(ListItem.id == list_item_id).one_or_none()

    def query(self, owner_id: Optional[str] = None, book_id: Optional[str] = None) -> List[models.ListItem]:
        base_query = self.session.query(ListItem)
        if owner_id is not None:
            base_query = base_query.filter(ListItem.owner_id == owner_id)
        if book_id is not None:
            base_query = base_query.filter(ListItem.book_id == book_id)
        rows = base_query.order_by(ListItem.created_at, ListItem.id).all()
        return [models.ListItem.model_validate(row) for row in rows]

    def read_by_id(self, list_item_id: str) -> Optional[models.ListItem]:
        row = self._get(list_item_id)
        return models.ListItem.model_validate(row) if row else None

    def create(self, owner_id: str, book_id: str) -> models.ListItem:
        """Create a new list item.

        Args:
            owner_id: The ID of the user tracking the book
            book_id: The ID of the tracked book

        Returns:
            The created list item

        Raises:
            ValidationError: If the user already has a list item for the book
        """
        row = ListItem(id=models.new_id(), owner_id=owner_id, book_id=book_id)
        self.session.add(row)
        try:
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            logger.warning("Duplicate list item rejected for user %s and book %s", owner_id, book_id)
            raise ValidationError(duplicate_list_item_message(owner_id, book_id))
        return models.ListItem.model_validate(row)

    def update(self, list_item_id: str, updates: dict) -> Optional[models.ListItem]:
        row = self._get(list_item_id)
        if row is None:
            return None
        for field, value in updates.items():
            setattr(row, field, value)
        self.session.commit()
        return models.ListItem.model_validate(row)

    def remove(self, list_item_id: str) -> None:
        self.session.query(ListItem).filter(ListItem.id == list_item_id).delete()
        self.session.commit()
