"""Domain Types — shared names and enums for the action layer.

Invariants:
    - ROUTING_KEYS never reach business logic (stripped by extract_action_params)
    - All valid input shapes encoded as an Enum — no raw string matching

Design Decisions:
    - NewType over wrapper classes: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON and log lines without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity / Value Types ─────────────────────────────────────

ResourceName = NewType("ResourceName", str)     # routing segment, e.g. "users"
ViewType = NewType("ViewType", str)             # presenter view, e.g. "full"
OperationName = NewType("OperationName", str)


FULL_VIEW = ViewType("full")

# Transport keys that describe routing, not business input.
ROUTING_KEYS = frozenset({"controller", "action", "format", "type"})

# Param that selects a presenter view.
VIEW_PARAM = "type"

ID_PARAM = "id"
NESTED_PARAMS_KEY = "params"


# ─── Enums ───────────────────────────────────────────────────────

class InputShape(str, Enum):
    """How an operation expects its keyword input to be laid out.

    AUTO reproduces the dual-shape convention: flat params when no id is
    given, ``{<element>: record}`` when only an id is given, and
    ``{<element>: record, "params": {...}}`` otherwise.
    RECORD_OPTIONAL_PARAMS lays out input like AUTO but requires the record.
    """
    AUTO = "auto"
    PARAMS = "params"
    RECORD = "record"
    RECORD_WITH_PARAMS = "record_with_params"
    RECORD_OPTIONAL_PARAMS = "record_optional_params"
