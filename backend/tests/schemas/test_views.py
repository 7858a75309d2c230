"""View Schemas — presenter views over ORM rows and plain mappings.

Tests:
    - summary is the default list view, full exposes every column
    - Unknown views are rejected with the available names
    - Datetimes serialize to ISO strings
"""

from datetime import datetime, timezone

import pytest

from crudkit.core.errors import InvalidInputError
from crudkit.models.user import User
from crudkit.presenters.order import OrderEntity
from crudkit.presenters.user import UserEntity


def _user():
    return User(
        id=1, name="Ada", email="ada@example.com", active=True,
        created_at=datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc),
    )


def test_default_view_is_summary():
    assert UserEntity().represent(_user()) == {"id": 1, "name": "Ada"}


def test_full_view():
    out = UserEntity().represent(_user(), "full")
    assert out["email"] == "ada@example.com"
    assert out["active"] is True
    assert out["created_at"].startswith("2024-05-01T12:00:00")


def test_mapping_payload():
    out = OrderEntity().represent(
        {"id": 2, "reference": "R-2", "status": "paid", "total_cents": 5},
    )
    assert out == {"id": 2, "reference": "R-2", "status": "paid", "total_cents": 5}


def test_unknown_view_lists_available():
    with pytest.raises(InvalidInputError) as exc:
        UserEntity().represent(_user(), "compact")
    assert exc.value.message == (
        "Unknown view 'compact' for UserEntity. Available: full, summary"
    )
    assert exc.value.http_status == 400
