"""Presenter Naming — derive the registry key of a payload's default presenter.

Fallback chain (first match wins):
    1. model name of the resource resolved from routing context
    2. the payload's own model_name (single record)
    3. first element of a non-empty sequence: its model_name, else its type name
    4. the payload's runtime type name

Invariants:
    - Heterogeneous collections are presented by their FIRST element's presenter
    - Empty collections without routing context fall through to step 4
      ("listEntity"), which is never registered: the resolver fails loudly
"""

from collections.abc import Sequence
from typing import Any

PRESENTER_SUFFIX = "Entity"


def is_collection(payload: Any) -> bool:
    return isinstance(payload, Sequence) and not isinstance(payload, (str, bytes))


def model_name_of(obj: Any) -> str | None:
    name = getattr(obj, "model_name", None)
    if callable(name):
        name = name()
    return name if isinstance(name, str) and name else None


def derive_class_name(payload: Any, context_model_name: str | None = None) -> str:
    if context_model_name:
        return context_model_name
    own = model_name_of(payload)
    if own:
        return own
    if is_collection(payload) and len(payload) > 0:
        first = payload[0]
        return model_name_of(first) or type(first).__name__
    return type(payload).__name__


def presenter_name_for(class_name: str) -> str:
    return f"{class_name}{PRESENTER_SUFFIX}"
