# api/routes/list_items.py

from typing import Optional
from fastapi import APIRouter, Depends

from api.dependencies import AuthContext, get_auth_context, get_list_item_service, load_list_item
from api.schemas.responses import ListItemList, ListItemResponse, MessageResponse, SuccessResponse
from core.models import ListItem, ListItemCreate, ListItemUpdate
from core.services import ListItemService

router = APIRouter(prefix="/list-items", tags=["list-items"])

_item_errors = {
    403: {"model": MessageResponse},
    404: {"model": MessageResponse},
}

@router.get("", response_model=ListItemList)
def get_list_items(
    context: AuthContext = Depends(get_auth_context),
    service: ListItemService = Depends(get_list_item_service)
):
    """
    Get every list item of the authenticated user, each with its book.
    """
    return ListItemList(list_items=service.get_list_items(context.user))

@router.get("/{list_item_id}", response_model=ListItemResponse, responses=_item_errors)
def get_list_item(
    list_item: ListItem = Depends(load_list_item),
    service: ListItemService = Depends(get_list_item_service)
):
    return ListItemResponse(list_item=service.get_list_item(list_item))

@router.post("", response_model=ListItemResponse, responses={400: {"model": MessageResponse}})
def create_list_item(
    body: Optional[ListItemCreate] = None,
    context: AuthContext = Depends(get_auth_context),
    service: ListItemService = Depends(get_list_item_service)
):
    """
    Start tracking a book. A user can track each book only once.
    """
    book_id = body.book_id if body else None
    return ListItemResponse(list_item=service.create_list_item(context.user, book_id))

@router.put("/{list_item_id}", response_model=ListItemResponse, responses=_item_errors)
def update_list_item(
    updates: ListItemUpdate,
    list_item: ListItem = Depends(load_list_item),
    service: ListItemService = Depends(get_list_item_service)
):
    return ListItemResponse(list_item=service.update_list_item(list_item, updates.changes()))

@router.delete("/{list_item_id}", response_model=SuccessResponse, responses=_item_errors)
def delete_list_item(
    list_item: ListItem = Depends(load_list_item),
    service: ListItemService = Depends(get_list_item_service)
):
    return service.delete_list_item(list_item)
