# api/schemas/responses.py
from typing import List
from core.models import Book, CamelModel, ExpandedListItem, UserWithToken

class UserResponse(CamelModel):
    user: UserWithToken

class BookResponse(CamelModel):
    book: Book

class BookList(CamelModel):
    books: List[Book]

class ListItemResponse(CamelModel):
    list_item: ExpandedListItem

class ListItemList(CamelModel):
    list_items: List[ExpandedListItem]

class SuccessResponse(CamelModel):
    success: bool

class MessageResponse(CamelModel):
    message: str
