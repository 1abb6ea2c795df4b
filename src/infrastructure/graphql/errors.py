from __future__ import annotations

from typing import Any

from domain.todo.exceptions.todo_exceptions import TodoBackendError


class GraphQLClientError(TodoBackendError):
    """Raised for transport failures and for responses carrying ``errors``."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []
