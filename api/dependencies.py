# api/dependencies.py
from dataclasses import dataclass
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from core.auth import decode_token
from core.errors import AuthenticationError
from core.models import ListItem, User
from core.repositories.base import BookStore, ListItemStore, UserStore
from core.sa.database import get_db
from core.sa.repositories import BookRepository, ListItemRepository, UserRepository
from core.services import AuthService, BookService, ListItemService

bearer_scheme = HTTPBearer(auto_error=False)


@dataclass
class Stores:
    books: BookStore
    list_items: ListItemStore
    users: UserStore


@dataclass(frozen=True)
class AuthContext:
    """The authenticated user of a request and the token they presented."""
    user: User
    token: str


def get_stores(db: Session = Depends(get_db)) -> Stores:
    return Stores(
        books=BookRepository(db),
        list_items=ListItemRepository(db),
        users=UserRepository(db),
    )


def get_auth_service(stores: Stores = Depends(get_stores)) -> AuthService:
    return AuthService(stores.users)


def get_book_service(stores: Stores = Depends(get_stores)) -> BookService:
    return BookService(stores.books)


def get_list_item_service(stores: Stores = Depends(get_stores)) -> ListItemService:
    return ListItemService(stores.books, stores.list_items)


def get_auth_context(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    stores: Stores = Depends(get_stores),
) -> AuthContext:
    """Resolve the bearer token of the request to a user.

    Raises:
        AuthenticationError: If the token is missing, invalid or its user is gone
    """
    if credentials is None:
        raise AuthenticationError("credentials_required", "No authorization token was found")
    user_id = decode_token(credentials.credentials)
    user = stores.users.read_by_id(user_id)
    if user is None:
        raise AuthenticationError("invalid_token", "The user for this token no longer exists")
    return AuthContext(user=user, token=credentials.credentials)


def load_list_item(
    list_item_id: str,
    context: AuthContext = Depends(get_auth_context),
    service: ListItemService = Depends(get_list_item_service),
) -> ListItem:
    """Load the list item named in the path, if the user owns it."""
    return service.set_list_item(context.user, list_item_id)
