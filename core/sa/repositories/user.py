# core/sa/repositories/user.py
from typing import Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from core import models
from core.errors import ValidationError
from core.repositories.base import UserStore
from ..models import User

class UserRepository(UserStore):
    """Repository for managing User entities."""

    def __init__(self, session: Session):
        """Initialize the repository with a database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self.session = session

    def read_by_id(self, user_id: str) -> Optional[models.User]:
        """Get a user by their ID.

        Args:
            user_id: The ID of the user to retrieve

        Returns:
            The User if found, None otherwise
        """
        user = self.session.query(User).filter(User.id == user_id).one_or_none()
        return models.User.model_validate(user) if user else None

    def read_by_username(self, username: str) -> Optional[models.User]:
        user = self.session.query(User).filter(User.username == username).one_or_none()
        return models.User.model_validate(user) if user else None

    def insert(self, username: str, hash: str, salt: str) -> models.User:
        """Create a new user.

        Args:
            username: The unique name the user logs in with
            hash: Hex encoded password hash
            salt: Hex encoded salt used for the hash

        Returns:
            The created User

        Raises:
            ValidationError: If a user with the given name already exists
        """
        # Check if user already exists
        existing = self.session.query(User).filter(User.username == username).first()
        if existing:
            raise ValidationError("username taken")

        user = User(id=models.new_id(), username=username, hash=hash, salt=salt)
        self.session.add(user)
        try:
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            raise ValidationError("username taken")
        return models.User.model_validate(user)
