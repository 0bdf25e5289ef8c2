# core/sa/repositories/__init__.py
from .book import BookRepository
from .list_item import ListItemRepository
from .user import UserRepository

__all__ = ['BookRepository', 'ListItemRepository', 'UserRepository']
