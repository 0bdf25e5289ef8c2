# core/models/__init__.py
from .base import CamelModel, new_id
from .book import Book, BookCreate
from .list_item import ListItem, ExpandedListItem, ListItemCreate, ListItemUpdate, UNRATED, expand
from .user import User, UserWithToken, Credentials

__all__ = [
    'CamelModel',
    'new_id',
    'Book',
    'BookCreate',
    'ListItem',
    'ExpandedListItem',
    'ListItemCreate',
    'ListItemUpdate',
    'UNRATED',
    'expand',
    'User',
    'UserWithToken',
    'Credentials',
]
