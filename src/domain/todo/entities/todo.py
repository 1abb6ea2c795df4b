from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Todo:
    """A todo as the backend returns it. The id is backend-assigned and opaque."""

    id: str
    text: str
    done: bool = False

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> Todo:
        return cls(id=str(payload["id"]), text=payload["text"], done=bool(payload.get("done")))
