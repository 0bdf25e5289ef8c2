# tests/conftest.py
import sys
import pytest
from pathlib import Path

# Add project root to Python path
project_root = str(Path(__file__).parent.parent)
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from api.dependencies import Stores, get_stores
from api.main import app
from core.models import BookCreate
from core.repositories import InMemoryBookStore, InMemoryListItemStore, InMemoryUserStore
from core.sa.database import Database, get_db
from core.sa.repositories import BookRepository

@pytest.fixture
def database(tmp_path):
    """Create a test database in a temporary directory"""
    db = Database(f"sqlite:///{tmp_path / 'test_bookshelf.db'}")
    db.init_db()
    yield db
    db.engine.dispose()

@pytest.fixture
def db_session(database):
    """Create a new database session for a test"""
    session: Session = database.get_session()
    try:
        yield session
    finally:
        session.close()

@pytest.fixture
def client(database):
    """API client whose requests use the test database"""
    def override_get_db():
        session = database.get_session()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()

@pytest.fixture
def memory_stores():
    return Stores(
        books=InMemoryBookStore(),
        list_items=InMemoryListItemStore(),
        users=InMemoryUserStore(),
    )

@pytest.fixture
def memory_client(memory_stores):
    """API client whose requests use in-memory stores"""
    app.dependency_overrides[get_stores] = lambda: memory_stores
    yield TestClient(app)
    app.dependency_overrides.clear()

@pytest.fixture
def sample_book(db_session):
    """Create a sample book for testing."""
    return BookRepository(db_session).insert(BookCreate(
        title="The Left Hand of Darkness",
        author="Ursula K. Le Guin",
        page_count=304,
        publisher="Ace Books",
        synopsis="An envoy visits the planet Gethen.",
    ))
