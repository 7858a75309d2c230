"""Operation Registry — explicit name -> operation class mapping.

Invariants:
    - Every name -> operation mapping is visible here; no import-by-string
    - Unknown names, and operations requested under the wrong resource,
      raise UnknownOperationError (404)
"""

from collections.abc import Iterable

from crudkit.core.errors import ErrorContext, UnknownOperationError
from crudkit.operations.base import Operation
from crudkit.operations.orders import CancelOrder
from crudkit.operations.users import (
    DeactivateUser, PurgeUser, RenameUser, UserStats,
)


class OperationRegistry:
    """Operation name -> Operation class."""

    def __init__(self, operations: Iterable[type[Operation]] = ()):
        self._operations: dict[str, type[Operation]] = {}
        for operation in operations:
            self.register(operation)

    def register(self, operation: type[Operation]) -> None:
        if operation.name in self._operations:
            raise ValueError(f"Operation '{operation.name}' registered twice")
        self._operations[operation.name] = operation

    def get(self, name: str) -> type[Operation]:
        operation = self._operations.get(name)
        if operation is None:
            raise UnknownOperationError(name, ErrorContext(operation=name))
        return operation

    def for_resource(self, name: str, resource: str) -> type[Operation]:
        operation = self.get(name)
        if operation.resource is not None and operation.resource != resource:
            raise UnknownOperationError(
                name, ErrorContext(operation=name, resource=resource),
            )
        return operation

    def names(self) -> list[str]:
        return sorted(self._operations)


def build_operation_registry() -> OperationRegistry:
    # ADR: every mapping explicit; adding an operation requires editing this list
    return OperationRegistry([
        DeactivateUser,
        RenameUser,
        UserStats,
        PurgeUser,
        CancelOrder,
    ])
