from __future__ import annotations

import logging

from infrastructure.graphql.cache import NormalizedCache
from infrastructure.graphql.documents import GET_TODOS


logger = logging.getLogger(__name__)


def prune_todo_from_list(cache: NormalizedCache, todo_id: str) -> bool:
    """Drop ``todo_id`` from the cached todo list after a confirmed delete.

    Deleting an entity does not remove it from list results already cached,
    so the list is rewritten locally instead of re-fetched.
    """
    previous = cache.read_query(GET_TODOS)
    if previous is None:
        return False
    todos = [item for item in previous.get("todos") or [] if item is not None and str(item["id"]) != todo_id]
    cache.write_query(GET_TODOS, {"todos": todos})
    logger.debug("Pruned todo %s from cached list", todo_id)
    return True
