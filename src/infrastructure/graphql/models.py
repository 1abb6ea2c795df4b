from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel


class GraphQLErrorDetail(BaseModel):
    message: str
    path: Optional[List[Any]] = None
    extensions: Optional[Dict[str, Any]] = None


class GraphQLResponse(BaseModel):
    data: Optional[Dict[str, Any]] = None
    errors: Optional[List[GraphQLErrorDetail]] = None

    @property
    def error_message(self) -> str:
        return "; ".join(error.message for error in self.errors or [])
