"""Presenter Resolver — payload (+ optional explicit presenter) -> presenter -> JSON.

Invariants:
    - An explicit presenter always wins (instance, class, or registered name)
    - Otherwise the name is derived by core/presenter_naming.derive_class_name
      with the routing context's model name taking precedence
    - A missing presenter raises PresenterNotFoundError (configuration error)
"""

import logging
from typing import Any

from crudkit.core.errors import PresenterNotFoundError
from crudkit.core.presenter_naming import derive_class_name, presenter_name_for
from crudkit.presenters.base import Presenter
from crudkit.presenters.registry import PresenterRegistry
from crudkit.services.resource_registry import ResourceType

logger = logging.getLogger(__name__)

PresenterRef = Presenter | type[Presenter] | str


class PresenterResolver:
    def __init__(
        self, registry: PresenterRegistry, resource: ResourceType | None = None,
    ):
        self._registry = registry
        self._resource = resource

    def resolve(self, payload: Any, explicit: PresenterRef | None = None) -> Presenter:
        if isinstance(explicit, Presenter):
            return explicit
        if isinstance(explicit, type) and issubclass(explicit, Presenter):
            return explicit()
        if isinstance(explicit, str):
            return self._get(explicit)

        context_name = self._resource.model_name if self._resource else None
        return self._get(presenter_name_for(derive_class_name(payload, context_name)))

    def present(
        self,
        payload: Any,
        explicit: PresenterRef | None = None,
        view: str | None = None,
    ) -> Any:
        return self.resolve(payload, explicit).represent(payload, view)

    def _get(self, name: str) -> Presenter:
        try:
            return self._registry.get(name)
        except PresenterNotFoundError:
            logger.error(
                f"Presenter resolution failed: {name}",
                extra={
                    "error_code": "PRESENTER_NOT_FOUND",
                    "resource": self._resource.name if self._resource else None,
                },
            )
            raise
