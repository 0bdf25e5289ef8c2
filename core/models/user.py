# core/models/user.py

from typing import Optional
from .base import CamelModel

class User(CamelModel):
    """A stored user. ``hash`` and ``salt`` never leave the server."""
    id: str
    username: str
    hash: str
    salt: str

class UserWithToken(CamelModel):
    id: str
    username: str
    token: str

class Credentials(CamelModel):
    # Optional so blank fields get our own 400 messages instead of a 422
    username: Optional[str] = None
    password: Optional[str] = None
