"""Presenter Registry — explicit mapping from presenter name to presenter.

Invariants:
    - Every registered resource has a "<ModelName>Entity" presenter
      (validate_complete, called once at startup)
    - get() of an unknown name raises PresenterNotFoundError: configuration
      errors fail loudly instead of falling back to a generic serializer

Design Decisions:
    - Explicit dict over importing "<Name>Entity" by string at request time
      (ADR: no convention-over-config; every mapping visible in one place)
"""

import logging
from collections.abc import Iterable

from crudkit.core.errors import PresenterNotFoundError
from crudkit.core.presenter_naming import presenter_name_for
from crudkit.presenters.base import Presenter
from crudkit.presenters.order import OrderEntity
from crudkit.presenters.user import UserEntity

logger = logging.getLogger(__name__)


class PresenterRegistry:
    """Presenter name -> presenter instance."""

    def __init__(self, presenters: Iterable[Presenter] = ()):
        self._presenters: dict[str, Presenter] = {}
        for presenter in presenters:
            self.register(presenter)

    def register(self, presenter: Presenter) -> None:
        if presenter.name in self._presenters:
            raise ValueError(f"Presenter '{presenter.name}' registered twice")
        self._presenters[presenter.name] = presenter

    def get(self, name: str) -> Presenter:
        presenter = self._presenters.get(name)
        if presenter is None:
            raise PresenterNotFoundError(name)
        return presenter

    def __contains__(self, name: str) -> bool:
        return name in self._presenters

    def names(self) -> list[str]:
        return sorted(self._presenters)

    def validate_complete(self, model_names: Iterable[str]) -> None:
        """Raise PresenterNotFoundError for the first model without a presenter."""
        for model_name in model_names:
            expected = presenter_name_for(model_name)
            if expected not in self._presenters:
                logger.error(
                    f"Missing presenter {expected}",
                    extra={"error_code": "PRESENTER_NOT_FOUND"},
                )
                raise PresenterNotFoundError(expected)


def build_presenter_registry() -> PresenterRegistry:
    # ADR: every presenter explicit; adding a resource requires editing this list
    return PresenterRegistry([
        UserEntity(),
        OrderEntity(),
    ])
