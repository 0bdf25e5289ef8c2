# core/models/book.py

from typing import Optional
from .base import CamelModel

class Book(CamelModel):
    id: str
    title: str
    author: str
    cover_image_url: Optional[str] = None
    page_count: Optional[int] = None
    publisher: Optional[str] = None
    synopsis: Optional[str] = None

class BookCreate(CamelModel):
    title: str
    author: str
    cover_image_url: Optional[str] = None
    page_count: Optional[int] = None
    publisher: Optional[str] = None
    synopsis: Optional[str] = None
