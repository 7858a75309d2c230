"""Result — tagged success/failure outcome returned by every operation.

Invariants:
    - A Result is exactly one of Success or Failure
    - Every variant carries an explicit PayloadKind; renderers branch on the kind,
      never on isinstance checks of the payload
    - Failure payloads are either a MESSAGE or a RECORD carrying field errors

Design Decisions:
    - Frozen dataclasses over a Result class with flags: structural pattern
      matching works on them directly (match/case in the executor)
    - success()/failure() classify bare values once, at the operation boundary,
      for operations that do not use the explicit constructors
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, TypeVar

from crudkit.core.presenter_naming import model_name_of

T = TypeVar("T")
R = TypeVar("R")


class PayloadKind(str, Enum):
    """What a Result payload is, for rendering purposes."""
    MESSAGE = "message"        # plain text
    STRUCTURE = "structure"    # dict / list rendered as raw JSON
    RECORD = "record"          # record or collection of records


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T
    kind: PayloadKind

    @classmethod
    def message(cls, text: str) -> "Success[str]":
        return cls(text, PayloadKind.MESSAGE)

    @classmethod
    def structure(cls, value: dict | list) -> "Success":
        return cls(value, PayloadKind.STRUCTURE)

    @classmethod
    def record(cls, record: Any) -> "Success":
        return cls(record, PayloadKind.RECORD)

    @property
    def ok(self) -> bool:
        return True

    def either(self, on_success: Callable[[T], R], on_failure: Callable[[Any], R]) -> R:
        return on_success(self.value)


@dataclass(frozen=True)
class Failure(Generic[T]):
    error: T
    kind: PayloadKind

    def __post_init__(self):
        if self.kind is PayloadKind.STRUCTURE:
            raise ValueError("Failure payload must be a message or a record")

    @classmethod
    def message(cls, text: str) -> "Failure[str]":
        return cls(text, PayloadKind.MESSAGE)

    @classmethod
    def invalid(cls, record: Any) -> "Failure":
        """Failure carrying a record whose errors explain the rejection."""
        return cls(record, PayloadKind.RECORD)

    @property
    def ok(self) -> bool:
        return False

    def either(self, on_success: Callable[[Any], R], on_failure: Callable[[T], R]) -> R:
        return on_failure(self.error)


Result = Success | Failure


def classify_payload(value: Any) -> PayloadKind:
    """Tag a bare value: str -> MESSAGE, dict/list/tuple -> STRUCTURE, else RECORD.

    A non-empty list or tuple whose first element is a record (has a
    model_name) is a record collection, so it is tagged RECORD.
    """
    if isinstance(value, str):
        return PayloadKind.MESSAGE
    if isinstance(value, (list, tuple)) and value and model_name_of(value[0]):
        return PayloadKind.RECORD
    if isinstance(value, (dict, list, tuple)):
        return PayloadKind.STRUCTURE
    return PayloadKind.RECORD


def success(value: Any) -> Success:
    return Success(value, classify_payload(value))


def failure(error: Any) -> Failure:
    kind = PayloadKind.MESSAGE if isinstance(error, str) else PayloadKind.RECORD
    return Failure(error, kind)
