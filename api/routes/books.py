# api/routes/books.py

from typing import Optional
from fastapi import APIRouter, Depends, Query

from api.dependencies import get_auth_context, get_book_service
from api.schemas.responses import BookList, BookResponse, MessageResponse
from core.services import BookService

router = APIRouter(
    prefix="/books",
    tags=["books"],
    dependencies=[Depends(get_auth_context)],
)

@router.get("", response_model=BookList)
def search_books(
    query: Optional[str] = Query(None, description="Search books by title or author"),
    service: BookService = Depends(get_book_service)
):
    return BookList(books=service.search_books(query))

@router.get("/{book_id}", response_model=BookResponse, responses={404: {"model": MessageResponse}})
def get_book(book_id: str, service: BookService = Depends(get_book_service)):
    return BookResponse(book=service.get_book(book_id))
