# tests/utils.py
import random
import uuid
from datetime import datetime, UTC
from typing import Dict, Tuple

from core.models import Book, ListItem, User

_WORDS = [
    "amber", "quiet", "harbor", "lantern", "meadow", "orbit", "paper",
    "river", "signal", "thistle", "velvet", "winter", "ember", "falcon",
]

def _id() -> str:
    return uuid.uuid4().hex

def words(count: int) -> str:
    return " ".join(random.choice(_WORDS) for _ in range(count))

def notes() -> str:
    return words(12).capitalize() + "."

def username() -> str:
    return f"reader_{uuid.uuid4().hex[:8]}"

def password() -> str:
    return f"Secure-{random.randint(1000, 9999)}-Pass"

def login_form(**overrides) -> Dict[str, str]:
    return {"username": username(), "password": password(), **overrides}

def build_user(**overrides) -> User:
    data = {"id": _id(), "username": username(), "hash": "0" * 128, "salt": "0" * 32}
    data.update(overrides)
    return User(**data)

def build_book(**overrides) -> Book:
    data = {
        "id": _id(),
        "title": words(3).title(),
        "author": words(2).title(),
        "cover_image_url": "http://example.com/cover.jpg",
        "page_count": random.randint(100, 900),
        "publisher": words(1).title() + " Press",
        "synopsis": words(20),
    }
    data.update(overrides)
    return Book(**data)

def build_list_item(**overrides) -> ListItem:
    data = {
        "id": _id(),
        "owner_id": _id(),
        "book_id": _id(),
        "rating": -1,
        "notes": "",
        "start_date": datetime.now(UTC),
        "finish_date": None,
    }
    data.update(overrides)
    return ListItem(**data)

def register(client, **overrides) -> Tuple[dict, Dict[str, str]]:
    """Register a user through the API and return it with auth headers."""
    response = client.post("/api/auth/register", json=login_form(**overrides))
    assert response.status_code == 200, response.text
    user = response.json()["user"]
    return user, {"Authorization": f"Bearer {user['token']}"}
