# tests/test_services/test_list_item_service.py

import pytest
from unittest.mock import create_autospec

from core.errors import ForbiddenError, NotFoundError, ValidationError
from core.models import ExpandedListItem, expand
from core.repositories.base import BookStore, ListItemStore
from core.services import ListItemService
from utils import build_book, build_list_item, build_user, notes

@pytest.fixture
def books():
    return create_autospec(BookStore, instance=True)

@pytest.fixture
def list_items():
    return create_autospec(ListItemStore, instance=True)

@pytest.fixture
def service(books, list_items):
    return ListItemService(books, list_items)

def test_get_list_items_returns_users_items_with_books(service, books, list_items):
    user = build_user()
    user_books = [build_book(), build_book()]
    user_list_items = [
        build_list_item(owner_id=user.id, book_id=user_books[0].id),
        build_list_item(owner_id=user.id, book_id=user_books[1].id),
    ]
    books.read_many_by_id.return_value = user_books
    list_items.query.return_value = user_list_items

    result = service.get_list_items(user)

    list_items.query.assert_called_once_with(owner_id=user.id)
    books.read_many_by_id.assert_called_once_with([user_books[0].id, user_books[1].id])
    assert result == [
        expand(user_list_items[0], user_books[0]),
        expand(user_list_items[1], user_books[1]),
    ]

def test_get_list_items_fetches_each_book_once(service, books, list_items):
    """Books shared by several items are requested once, in first-seen order."""
    user = build_user()
    first, second = build_book(), build_book()
    list_items.query.return_value = [
        build_list_item(owner_id=user.id, book_id=second.id),
        build_list_item(owner_id=user.id, book_id=first.id),
        build_list_item(owner_id=user.id, book_id=second.id),
    ]
    books.read_many_by_id.return_value = [second, first]

    result = service.get_list_items(user)

    books.read_many_by_id.assert_called_once_with([second.id, first.id])
    assert [item.book for item in result] == [second, first, second]

def test_get_list_items_keeps_items_whose_book_is_gone(service, books, list_items):
    user = build_user()
    list_items.query.return_value = [build_list_item(owner_id=user.id)]
    books.read_many_by_id.return_value = []

    result = service.get_list_items(user)

    assert len(result) == 1
    assert result[0].book is None

def test_get_list_item_returns_item_with_book(service, books):
    book = build_book()
    list_item = build_list_item(book_id=book.id)
    books.read_by_id.return_value = book

    result = service.get_list_item(list_item)

    books.read_by_id.assert_called_once_with(book.id)
    assert isinstance(result, ExpandedListItem)
    assert result == expand(list_item, book)

def test_delete_list_item_removes_item(service, list_items):
    list_item = build_list_item()

    assert service.delete_list_item(list_item) == {"success": True}
    list_items.remove.assert_called_once_with(list_item.id)

class TestSetListItem:
    def test_returns_owned_list_item(self, service, list_items):
        user = build_user()
        list_item = build_list_item(owner_id=user.id)
        list_items.read_by_id.return_value = list_item

        assert service.set_list_item(user, list_item.id) is list_item
        list_items.read_by_id.assert_called_once_with(list_item.id)

    def test_not_found(self, service, list_items):
        list_items.read_by_id.return_value = None

        with pytest.raises(NotFoundError) as excinfo:
            service.set_list_item(build_user(), None)

        list_items.read_by_id.assert_called_once_with(None)
        assert excinfo.value.message == "No list item was found with the id of None"
        assert excinfo.value.status_code == 404

    def test_forbidden_for_other_owner(self, service, list_items):
        user = build_user(id="FAKE_USER_ID")
        list_item = build_list_item(owner_id="ANOTHER_FAKE_USER_ID", id="FAKE_LIST_ITEM_ID")
        list_items.read_by_id.return_value = list_item

        with pytest.raises(ForbiddenError) as excinfo:
            service.set_list_item(user, list_item.id)

        assert excinfo.value.message == (
            "User with id FAKE_USER_ID is not authorized to access the list item FAKE_LIST_ITEM_ID"
        )
        assert excinfo.value.status_code == 403

class TestCreateListItem:
    def test_creates_and_returns_list_item(self, service, books, list_items):
        user = build_user()
        book = build_book()
        list_item = build_list_item(owner_id=user.id, book_id=book.id)
        list_items.query.return_value = []
        list_items.create.return_value = list_item
        books.read_by_id.return_value = book

        result = service.create_list_item(user, book.id)

        list_items.query.assert_called_once_with(owner_id=user.id, book_id=book.id)
        list_items.create.assert_called_once_with(owner_id=user.id, book_id=book.id)
        assert result == expand(list_item, book)

    @pytest.mark.parametrize("book_id", [None, ""])
    def test_requires_book_id(self, service, list_items, book_id):
        with pytest.raises(ValidationError, match="No bookId provided") as excinfo:
            service.create_list_item(build_user(), book_id)

        assert excinfo.value.status_code == 400
        list_items.create.assert_not_called()

    def test_rejects_second_item_for_same_book(self, service, list_items):
        user = build_user(id="USER_ID")
        book = build_book(id="BOOK_ID")
        list_items.query.return_value = [build_list_item(owner_id=user.id, book_id=book.id)]

        with pytest.raises(ValidationError) as excinfo:
            service.create_list_item(user, book.id)

        assert excinfo.value.message == "User USER_ID already has a list item for the book with the ID BOOK_ID"
        assert excinfo.value.status_code == 400
        list_items.create.assert_not_called()

class TestUpdateListItem:
    def test_updates_and_returns_list_item(self, service, books, list_items):
        book = build_book()
        created = build_list_item(book_id=book.id)
        updates = {"notes": notes()}
        updated = created.model_copy(update=updates)
        list_items.update.return_value = updated
        books.read_by_id.return_value = book

        result = service.update_list_item(created, updates)

        list_items.update.assert_called_once_with(created.id, updates)
        assert result == expand(updated, book)
        assert result.notes == updates["notes"]

    def test_book_is_none_when_book_was_deleted(self, service, books, list_items):
        created = build_list_item()
        list_items.update.return_value = created.model_copy(update={"notes": "gone"})
        books.read_by_id.return_value = None

        result = service.update_list_item(created, {"notes": "gone"})

        assert result.book is None
        assert result.notes == "gone"

    def test_not_found_when_item_was_deleted(self, service, list_items):
        created = build_list_item()
        list_items.update.return_value = None

        with pytest.raises(NotFoundError):
            service.update_list_item(created, {"notes": "too late"})
