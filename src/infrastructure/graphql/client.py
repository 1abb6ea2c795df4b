from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

import httpx
from pydantic import ValidationError

from infrastructure.graphql.cache import NormalizedCache
from infrastructure.graphql.errors import GraphQLClientError
from infrastructure.graphql.models import GraphQLResponse


logger = logging.getLogger(__name__)

CACHE_FIRST = "cache-first"
NETWORK_ONLY = "network-only"

CacheUpdate = Callable[[NormalizedCache, dict[str, Any]], None]


class GraphQLClient:
    """Sends queries and mutations to one endpoint and keeps results in a normalized cache.

    No retry or reconnection is attempted; the httpx defaults apply.
    """

    def __init__(
        self,
        endpoint: str,
        headers: dict[str, str] | None = None,
        cache: NormalizedCache | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.endpoint = endpoint
        self.cache = cache or NormalizedCache()
        self._http = httpx.AsyncClient(headers=headers or {}, transport=transport)

    async def query(
        self,
        document: str,
        variables: dict[str, Any] | None = None,
        fetch_policy: str = CACHE_FIRST,
    ) -> dict[str, Any]:
        if fetch_policy == CACHE_FIRST:
            cached = self.cache.read_query(document, variables)
            if cached is not None:
                return cached
        elif fetch_policy != NETWORK_ONLY:
            raise ValueError(f"Unsupported fetch policy: {fetch_policy}")

        data = await self._post(document, variables)
        self.cache.write_query(document, data, variables)
        return data

    async def mutate(
        self,
        document: str,
        variables: dict[str, Any] | None = None,
        refetch_queries: Sequence[str] = (),
        update: CacheUpdate | None = None,
    ) -> dict[str, Any]:
        data = await self._post(document, variables)
        self.cache.write_result(data)
        if update is not None:
            update(self.cache, data)
        # The mutation already succeeded; a failed refetch leaves the cached list stale.
        for refetch_document in refetch_queries:
            try:
                await self.query(refetch_document, fetch_policy=NETWORK_ONLY)
            except GraphQLClientError as exc:
                logger.warning("Refetch after mutation failed: %s", exc.message)
        return data

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _post(self, document: str, variables: dict[str, Any] | None) -> dict[str, Any]:
        payload = {"query": document, "variables": variables or {}}
        try:
            response = await self._http.post(self.endpoint, json=payload)
            response.raise_for_status()
            body = GraphQLResponse.model_validate(response.json())
        except httpx.HTTPStatusError as exc:
            logger.warning("GraphQL request failed with HTTP %s", exc.response.status_code)
            raise GraphQLClientError(f"Response not successful: Received status code {exc.response.status_code}") from exc
        except httpx.HTTPError as exc:
            logger.warning("GraphQL transport error: %s", exc)
            raise GraphQLClientError(str(exc) or exc.__class__.__name__) from exc
        except (ValueError, ValidationError) as exc:
            raise GraphQLClientError(f"Invalid GraphQL response: {exc}") from exc

        if body.errors:
            raise GraphQLClientError(body.error_message, [error.model_dump() for error in body.errors])
        if body.data is None:
            raise GraphQLClientError("GraphQL response contained no data")
        return body.data
