# core/sa/__init__.py
from .database import Database, get_database, get_db
from .models import Base, Book, User, ListItem
from .repositories import BookRepository, ListItemRepository, UserRepository

__all__ = [
    'Database',
    'get_database',
    'get_db',
    'Base',
    'Book',
    'User',
    'ListItem',
    'BookRepository',
    'ListItemRepository',
    'UserRepository',
]
