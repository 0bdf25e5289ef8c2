# tests/test_sa/test_repositories/test_book_repository.py

import pytest
from core.models import BookCreate
from core.sa.repositories import BookRepository

@pytest.fixture
def book_repo(db_session):
    """Fixture to create a BookRepository instance."""
    return BookRepository(db_session)

@pytest.fixture
def books(book_repo):
    return [
        book_repo.insert(BookCreate(title="Piranesi", author="Susanna Clarke")),
        book_repo.insert(BookCreate(title="Kindred", author="Octavia E. Butler")),
        book_repo.insert(BookCreate(title="Parable of the Sower", author="Octavia E. Butler")),
    ]

def test_insert_with_given_id(book_repo):
    book = book_repo.insert(BookCreate(title="Kindred", author="Octavia E. Butler"), book_id="kindred")

    assert book.id == "kindred"
    assert book_repo.read_by_id("kindred") == book

def test_read_by_nonexistent_id(book_repo):
    assert book_repo.read_by_id("missing") is None

def test_read_many_by_id_keeps_requested_order(book_repo, books):
    piranesi, kindred, parable = books

    result = book_repo.read_many_by_id([parable.id, "missing", piranesi.id])

    assert [b.id for b in result] == [parable.id, piranesi.id]
    assert book_repo.read_many_by_id([]) == []

def test_query_matches_title_or_author(book_repo, books):
    assert [b.title for b in book_repo.query("butler")] == ["Kindred", "Parable of the Sower"]
    assert [b.title for b in book_repo.query("PIRA")] == ["Piranesi"]
    assert len(book_repo.query("")) == 3
