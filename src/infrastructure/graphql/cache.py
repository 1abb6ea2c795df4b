from __future__ import annotations

import json
import logging
from collections.abc import Callable
from typing import Any


logger = logging.getLogger(__name__)

REF_KEY = "__ref"

Listener = Callable[[], None]
QueryKey = tuple[str, str]


def _query_key(document: str, variables: dict[str, Any] | None) -> QueryKey:
    return (" ".join(document.split()), json.dumps(variables or {}, sort_keys=True))


def entity_id(value: dict[str, Any]) -> str | None:
    typename = value.get("__typename")
    ident = value.get("id")
    if typename is None or ident is None:
        return None
    return f"{typename}:{ident}"


class NormalizedCache:
    """In-memory result cache.

    Objects carrying both ``__typename`` and ``id`` are stored once under
    ``<typename>:<id>``; query results keep references to them, so writing a
    mutation result that contains an entity updates every cached query that
    points at it. Every write notifies the subscribed listeners.
    """

    def __init__(self) -> None:
        self._entities: dict[str, dict[str, Any]] = {}
        self._queries: dict[QueryKey, dict[str, Any]] = {}
        self._listeners: list[Listener] = []

    def read_query(self, document: str, variables: dict[str, Any] | None = None) -> dict[str, Any] | None:
        stored = self._queries.get(_query_key(document, variables))
        if stored is None:
            return None
        return self._denormalize(stored)

    def write_query(
        self,
        document: str,
        data: dict[str, Any],
        variables: dict[str, Any] | None = None,
    ) -> None:
        self._queries[_query_key(document, variables)] = self._normalize(data)
        self._broadcast()

    def write_result(self, data: dict[str, Any]) -> None:
        self._normalize(data)
        self._broadcast()

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _broadcast(self) -> None:
        for listener in list(self._listeners):
            listener()

    def _normalize(self, value: Any) -> Any:
        if isinstance(value, list):
            return [self._normalize(item) for item in value]
        if not isinstance(value, dict):
            return value
        fields = {name: self._normalize(item) for name, item in value.items()}
        key = entity_id(value)
        if key is None:
            return fields
        existing = self._entities.setdefault(key, {})
        existing.update(fields)
        logger.debug("Cache entity written: %s", key)
        return {REF_KEY: key}

    def _denormalize(self, value: Any) -> Any:
        if isinstance(value, list):
            return [self._denormalize(item) for item in value]
        if not isinstance(value, dict):
            return value
        if REF_KEY in value:
            entity = self._entities.get(value[REF_KEY])
            if entity is None:
                return None
            return self._denormalize(entity)
        return {name: self._denormalize(item) for name, item in value.items()}
