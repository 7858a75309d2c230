"""SQLAlchemy Declarative Base — shared base class and record behaviour for all ORM models.

Invariants:
    - All models inherit from Base
    - Base is the single source of truth for table metadata
    - errors is per-instance, lazily created (loaded rows bypass __init__)
    - assign_attributes() only accepts mapped columns; anything else is a 400

Design Decisions:
    - Separate file for Base: avoids circular imports between models (ADR: SQLAlchemy best practice)
    - Validation rules live on the model (validate hook); the action layer only
      reads the pass/fail outcome and the accumulated errors
    - build_query() is the model's filter contract: the action layer passes the
      full param mapping through untouched
"""

from typing import Any

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import DeclarativeBase

from crudkit.core.errors import InvalidInputError
from crudkit.core.inflection import underscore
from crudkit.core.record_errors import RecordErrors

# Query params with meaning for build_query() beyond equality filtering
SORT_PARAM = "sort"
LIMIT_PARAM = "limit"
OFFSET_PARAM = "offset"

_TRUE = {"true", "1", "yes"}
_FALSE = {"false", "0", "no"}


class Base(DeclarativeBase):
    """Base class for all crudkit ORM models."""

    # ─── Naming ─────────────────────────────────────────────────

    @classmethod
    def model_name(cls) -> str:
        return cls.__name__

    @classmethod
    def element(cls) -> str:
        """Singular key used when injecting a record into operation input."""
        return underscore(cls.__name__)

    @classmethod
    def column_names(cls) -> list[str]:
        return [c.key for c in cls.__mapper__.column_attrs]

    # ─── Errors / validation ────────────────────────────────────

    @property
    def errors(self) -> RecordErrors:
        errors = self.__dict__.get("_errors")
        if errors is None:
            errors = RecordErrors()
            self.__dict__["_errors"] = errors
        return errors

    def validate(self) -> None:
        """Override to add messages to self.errors."""

    def is_valid(self) -> bool:
        self.errors.clear()
        self.validate()
        return not self.errors

    async def before_destroy(self, db: AsyncSession) -> None:
        """Override to block destruction by adding errors."""

    # ─── Attribute assignment ───────────────────────────────────

    def assign_attributes(self, attributes: dict[str, Any]) -> None:
        columns = set(self.column_names())
        for key, value in attributes.items():
            if key not in columns:
                raise InvalidInputError(
                    f"unknown attribute '{key}' for {self.model_name()}.",
                )
            setattr(self, key, value)

    # ─── Querying ───────────────────────────────────────────────

    @classmethod
    def coerce_value(cls, column_name: str, value: Any) -> Any:
        """Coerce a query-string value to the column's Python type."""
        if not isinstance(value, str):
            return value
        column = cls.__table__.columns[column_name]
        try:
            python_type = column.type.python_type
        except NotImplementedError:
            return value
        if python_type is bool:
            lowered = value.lower()
            if lowered in _TRUE:
                return True
            if lowered in _FALSE:
                return False
            raise InvalidInputError(f"invalid boolean '{value}' for {column_name}")
        if python_type in (int, float):
            try:
                return python_type(value)
            except ValueError:
                raise InvalidInputError(
                    f"invalid value '{value}' for {column_name}",
                ) from None
        return value

    @classmethod
    def coerce_id(cls, record_id: Any) -> Any | None:
        """Coerce a path id to the primary key type; None when impossible."""
        try:
            return cls.coerce_value("id", record_id)
        except InvalidInputError:
            return None

    @classmethod
    def build_query(cls, criteria: dict[str, Any]) -> Select:
        """Equality filters on known columns, plus sort/limit/offset.

        Unknown keys are ignored. Default order is by primary key so that
        repeated queries return rows in the same order.
        """
        columns = set(cls.column_names())
        stmt = select(cls)
        for key, value in criteria.items():
            if key in columns:
                stmt = stmt.where(
                    getattr(cls, key) == cls.coerce_value(key, value),
                )

        sort = criteria.get(SORT_PARAM)
        if sort:
            sort = str(sort)
            descending = sort.startswith("-")
            name = sort.lstrip("-")
            if name not in columns:
                raise InvalidInputError(f"cannot sort by '{name}'")
            column = getattr(cls, name)
            stmt = stmt.order_by(column.desc() if descending else column.asc())
        stmt = stmt.order_by(cls.id.asc())

        if LIMIT_PARAM in criteria:
            stmt = stmt.limit(_non_negative_int(LIMIT_PARAM, criteria[LIMIT_PARAM]))
        if OFFSET_PARAM in criteria:
            stmt = stmt.offset(_non_negative_int(OFFSET_PARAM, criteria[OFFSET_PARAM]))
        return stmt


def _non_negative_int(name: str, value: Any) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise InvalidInputError(f"{name} must be an integer") from None
    if number < 0:
        raise InvalidInputError(f"{name} must be >= 0")
    return number


def is_blank(value: Any) -> bool:
    """None, empty, or whitespace-only strings are blank."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False
