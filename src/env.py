from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv


DEFAULT_GRAPHQL_URL = "https://inspired-osprey-80.hasura.app/v1/graphql"
ADMIN_SECRET_HEADER = "x-hasura-admin-secret"

_LOADED = False


@dataclass(frozen=True)
class Settings:
    graphql_url: str
    admin_secret: str | None
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False

    def request_headers(self) -> dict[str, str]:
        if not self.admin_secret:
            return {}
        return {ADMIN_SECRET_HEADER: self.admin_secret}


def load_env() -> None:
    global _LOADED
    if _LOADED:
        return
    _LOADED = True

    base_dir = Path(__file__).resolve().parent
    # Project root .env first, then src/.env.
    candidates = [
        base_dir.parent / ".env",
        base_dir / ".env",
    ]
    for path in candidates:
        if path.exists():
            # Real environment variables win over .env values.
            load_dotenv(dotenv_path=path, override=False)


def load_settings(environ: dict[str, str] | None = None) -> Settings:
    environ = os.environ if environ is None else environ
    port_raw = (environ.get("CHECKLIST_PORT") or "").strip()
    return Settings(
        graphql_url=(environ.get("CHECKLIST_GRAPHQL_URL") or DEFAULT_GRAPHQL_URL).strip(),
        admin_secret=(environ.get("CHECKLIST_ADMIN_SECRET") or "").strip() or None,
        host=(environ.get("CHECKLIST_HOST") or "0.0.0.0").strip(),
        port=int(port_raw) if port_raw else 8000,
        debug=(environ.get("CHECKLIST_DEBUG") or "").strip() == "1",
    )
