# core/sa/models/__init__.py
from .base import Base, TimestampMixin, UTCDateTime
from .book import Book
from .user import User
from .list_item import ListItem

__all__ = [
    'Base',
    'TimestampMixin',
    'UTCDateTime',
    'Book',
    'User',
    'ListItem',
]
