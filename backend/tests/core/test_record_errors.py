"""Record Errors and Inflection — how field errors read to a client.

Tests:
    - Full messages humanize attributes; base errors are verbatim
    - to_sentence joins zero, one, two, and many items
    - underscore/humanize cover model and column names
"""

import pytest

from crudkit.core.inflection import humanize, to_sentence, underscore
from crudkit.core.record_errors import BASE, RecordErrors


@pytest.mark.parametrize("items, expected", [
    ([], ""),
    (["a"], "a"),
    (["a", "b"], "a and b"),
    (["a", "b", "c"], "a, b, and c"),
])
def test_to_sentence(items, expected):
    assert to_sentence(items) == expected


def test_humanize():
    assert humanize("total_cents") == "Total cents"
    assert humanize("user_id") == "User"
    assert humanize("name") == "Name"


def test_underscore():
    assert underscore("OrderItem") == "order_item"
    assert underscore("User") == "user"


def test_errors_keep_insertion_order():
    errors = RecordErrors()
    errors.add("email", "is invalid")
    errors.add("name", "can't be blank")
    errors.add(BASE, "Record is locked")
    assert errors.full_messages() == [
        "Email is invalid", "Name can't be blank", "Record is locked",
    ]
    assert errors.to_sentence() == (
        "Email is invalid, Name can't be blank, and Record is locked"
    )


def test_errors_container_behaviour():
    errors = RecordErrors()
    assert not errors
    errors.add("name", "can't be blank")
    errors.add("name", "is too long")
    assert len(errors) == 2
    assert "name" in errors
    assert "email" not in errors
    assert errors["name"] == ["can't be blank", "is too long"]
    assert errors.to_dict() == {"name": ["can't be blank", "is too long"]}
    errors.clear()
    assert not errors
