"""Inflection — pure string helpers for model names and error sentences."""

import re

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def underscore(name: str) -> str:
    """'OrderItem' -> 'order_item'."""
    return _CAMEL_BOUNDARY.sub("_", name).lower()


def humanize(attribute: str) -> str:
    """'first_name' -> 'First name', 'user_id' -> 'User'."""
    text = attribute
    if text.endswith("_id") and text != "_id":
        text = text[:-3]
    text = text.replace("_", " ").strip()
    return text[:1].upper() + text[1:]


def to_sentence(items: list[str]) -> str:
    """Join items as English prose: 'a', 'a and b', 'a, b, and c'."""
    if not items:
        return ""
    if len(items) == 1:
        return items[0]
    if len(items) == 2:
        return f"{items[0]} and {items[1]}"
    return f"{', '.join(items[:-1])}, and {items[-1]}"
