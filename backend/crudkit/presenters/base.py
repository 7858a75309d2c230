"""Presenter Base — (payload, view) -> JSON-serializable structure.

Invariants:
    - represent() is pure: same payload + view -> same output
    - Collections are presented element-wise with the same view
    - view=None selects the presenter's default_view
    - Unknown view names are rejected (InvalidInputError), never silently defaulted
"""

from typing import Any, ClassVar

from pydantic import BaseModel

from crudkit.core.errors import InvalidInputError
from crudkit.core.presenter_naming import is_collection


class Presenter:
    """Base class; subclasses declare `views` and `default_view`."""

    views: ClassVar[dict[str, type[BaseModel]]] = {}
    default_view: ClassVar[str] = ""

    @property
    def name(self) -> str:
        return type(self).__name__

    def schema_for(self, view: str | None) -> type[BaseModel]:
        view = view or self.default_view
        schema = self.views.get(view)
        if schema is None:
            raise InvalidInputError(
                f"Unknown view '{view}' for {self.name}. "
                f"Available: {', '.join(sorted(self.views))}",
            )
        return schema

    def represent(self, payload: Any, view: str | None = None) -> Any:
        schema = self.schema_for(view)
        if is_collection(payload):
            return [self._dump(schema, item) for item in payload]
        return self._dump(schema, payload)

    def _dump(self, schema: type[BaseModel], item: Any) -> dict:
        return schema.model_validate(item).model_dump(mode="json")
