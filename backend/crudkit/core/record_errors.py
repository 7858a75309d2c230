"""Record Errors — accumulated field-level validation messages for one record.

Invariants:
    - Messages keep insertion order (first rule violated is reported first)
    - "base" errors belong to the record as a whole: full message is the message itself
    - to_sentence() is the single string rendered to clients on validation failure
"""

from crudkit.core.inflection import humanize, to_sentence

BASE = "base"


class RecordErrors:
    """Per-attribute error messages, filled by a record's validate() hook."""

    def __init__(self) -> None:
        self._messages: dict[str, list[str]] = {}

    def add(self, attribute: str, message: str) -> None:
        self._messages.setdefault(attribute, []).append(message)

    def clear(self) -> None:
        self._messages.clear()

    def __getitem__(self, attribute: str) -> list[str]:
        return list(self._messages.get(attribute, []))

    def __contains__(self, attribute: str) -> bool:
        return bool(self._messages.get(attribute))

    def __len__(self) -> int:
        return sum(len(m) for m in self._messages.values())

    def __bool__(self) -> bool:
        return len(self) > 0

    def full_messages(self) -> list[str]:
        return [
            full_message(attribute, message)
            for attribute, messages in self._messages.items()
            for message in messages
        ]

    def to_sentence(self) -> str:
        return to_sentence(self.full_messages())

    def to_dict(self) -> dict[str, list[str]]:
        return {k: list(v) for k, v in self._messages.items() if v}


def full_message(attribute: str, message: str) -> str:
    """'name', "can't be blank" -> "Name can't be blank"."""
    if attribute == BASE:
        return message
    return f"{humanize(attribute)} {message}"
