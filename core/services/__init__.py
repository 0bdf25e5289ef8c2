# core/services/__init__.py
from .auth_service import AuthService
from .book_service import BookService
from .list_item_service import ListItemService

__all__ = ['AuthService', 'BookService', 'ListItemService']
