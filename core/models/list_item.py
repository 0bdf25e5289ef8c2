# core/models/list_item.py

from datetime import datetime, UTC
from typing import Optional
from pydantic import Field, field_validator
from .base import CamelModel
from .book import Book

UNRATED = -1

class ListItem(CamelModel):
    """A book tracked by a user."""
    id: str
    owner_id: str
    book_id: str
    rating: int = UNRATED
    notes: str = ""
    start_date: datetime = Field(default_factory=lambda: datetime.now(UTC))
    finish_date: Optional[datetime] = None

class ExpandedListItem(ListItem):
    """A list item joined with its book at response time.

    ``book`` is None when the book no longer exists.
    """
    book: Optional[Book] = None

class ListItemCreate(CamelModel):
    # Optional so a missing bookId is answered with our own 400 message
    book_id: Optional[str] = None

class ListItemUpdate(CamelModel):
    """Fields a user may change on a list item.

    Only the fields present in the request are merged. ``finishDate`` may be
    cleared with null, the other fields may not.
    """
    notes: Optional[str] = None
    rating: Optional[int] = Field(default=None, ge=UNRATED, le=5)
    start_date: Optional[datetime] = None
    finish_date: Optional[datetime] = None

    @field_validator("notes", "rating", "start_date", mode="before")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("may not be null")
        return value

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)

def expand(list_item: ListItem, book: Optional[Book]) -> ExpandedListItem:
    return ExpandedListItem(**list_item.model_dump(), book=book)
