"""Result Renderer — turns records, messages and errors into JSON responses.

Invariants:
    - Message bodies are {"message": text}; error bodies are {"error": text}
    - Errors default to 400; not-found is 404
    - Validation failures render every field message joined into one sentence
"""

from typing import Any

from fastapi import status
from fastapi.responses import JSONResponse

from crudkit.services.presenter_resolver import PresenterRef, PresenterResolver


class ResultRenderer:
    def __init__(self, resolver: PresenterResolver):
        self._resolver = resolver

    def render_json(self, value: Any, status_code: int = status.HTTP_200_OK) -> JSONResponse:
        return JSONResponse(status_code=status_code, content=value)

    def present(
        self, record: Any, presenter: PresenterRef | None = None, view: str | None = None,
    ) -> Any:
        return self._resolver.present(record, presenter, view)

    def render_record(
        self,
        record: Any,
        presenter: PresenterRef | None = None,
        view: str | None = None,
        status_code: int = status.HTTP_200_OK,
    ) -> JSONResponse:
        return self.render_json(self.present(record, presenter, view), status_code)

    def render_message(
        self, message: str, status_code: int = status.HTTP_200_OK,
    ) -> JSONResponse:
        return self.render_json({"message": message}, status_code)

    def render_error(
        self, error: str, status_code: int = status.HTTP_400_BAD_REQUEST,
    ) -> JSONResponse:
        return self.render_json({"error": error}, status_code)

    def render_validation_errors(self, record: Any) -> JSONResponse:
        return self.render_error(record.errors.to_sentence())

    def render_not_found(self, message: str) -> JSONResponse:
        return self.render_error(message, status.HTTP_404_NOT_FOUND)
