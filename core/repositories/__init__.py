# core/repositories/__init__.py
from .base import BookStore, ListItemStore, UserStore
from .memory import InMemoryBookStore, InMemoryListItemStore, InMemoryUserStore

__all__ = [
    'BookStore',
    'ListItemStore',
    'UserStore',
    'InMemoryBookStore',
    'InMemoryListItemStore',
    'InMemoryUserStore',
]
