"""Action Templates — the five standard CRUD flows for any registered resource.

Invariants:
    - create: 201 + presenter body on save; 400 + error sentence otherwise
    - update: 404 when absent; 200 on save; 400 + error sentence otherwise
    - destroy: {"message": "destroyed"} on success; 400 when the record blocks it
    - index: full action params are the query criteria; `type` selects the view,
      otherwise the presenter's default list view
    - show: `type` selects the view, otherwise the configured show view ("full")
    - Statement-level failures propagate as exceptions to the global handler

Design Decisions:
    - No per-call try/except: not-found and statement errors are converted once,
      at the outermost boundary (api/error_handlers.py)
"""

import logging
from typing import Any

from fastapi import status
from fastapi.responses import JSONResponse

from crudkit.core.domain_types import ID_PARAM, FULL_VIEW
from crudkit.services.record_lookup import RecordLookup
from crudkit.services.record_store import RecordStore
from crudkit.services.request_context import RequestContext
from crudkit.services.result_renderer import ResultRenderer

logger = logging.getLogger(__name__)

DESTROYED_MESSAGE = "destroyed"


class ActionTemplates:
    def __init__(
        self,
        context: RequestContext,
        lookup: RecordLookup,
        store: RecordStore,
        renderer: ResultRenderer,
        show_view: str = FULL_VIEW,
    ):
        self._context = context
        self._lookup = lookup
        self._store = store
        self._renderer = renderer
        self._show_view = show_view

    async def create(
        self, attributes: dict[str, Any] | None = None, view: str | None = None,
    ) -> JSONResponse:
        if attributes is None:
            attributes = self._context.action_params()
        record = self._context.resource.model()
        record.assign_attributes(attributes)

        if not await self._store.save(record):
            return self._renderer.render_validation_errors(record)
        self._log("created", record)
        return self._renderer.render_record(
            record, view=view or self._context.view,
            status_code=status.HTTP_201_CREATED,
        )

    async def update(self, view: str | None = None) -> JSONResponse:
        record = await self._lookup.find_record(self._context)
        attributes = self._context.action_params()
        attributes.pop(ID_PARAM, None)

        if not await self._store.update(record, attributes):
            return self._renderer.render_validation_errors(record)
        self._log("updated", record)
        return self._renderer.render_record(record, view=view or self._context.view)

    async def destroy(self) -> JSONResponse:
        record = await self._lookup.find_record(self._context)
        record_id = record.id

        if not await self._store.destroy(record):
            return self._renderer.render_validation_errors(record)
        logger.info(
            f"{self._context.resource.model_name} {record_id} destroyed",
            extra={"resource": self._context.resource.name, "record_id": record_id},
        )
        return self._renderer.render_message(DESTROYED_MESSAGE)

    async def index(self) -> JSONResponse:
        records = await self._lookup.query(
            self._context.resource, self._context.action_params(),
        )
        return self._renderer.render_record(records, view=self._context.view)

    async def show(self) -> JSONResponse:
        record = await self._lookup.find_record(self._context)
        return self._renderer.render_record(
            record, view=self._context.view or self._show_view,
        )

    def _log(self, verb: str, record: Any) -> None:
        logger.info(
            f"{self._context.resource.model_name} {record.id} {verb}",
            extra={"resource": self._context.resource.name, "record_id": record.id},
        )
