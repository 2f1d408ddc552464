from __future__ import annotations

import uuid
from contextvars import ContextVar
from typing import Optional

MAX_REQUEST_ID_LEN = 64

# Correlation id of the request being served; read by JsonFormatter
request_id: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


def get_request_id() -> Optional[str]:
    return request_id.get()


def pick_request_id(incoming: Optional[str]) -> str:
    """Client-supplied id when usable (printable, bounded), else a fresh uuid4 hex."""
    rid = (incoming or "").strip()
    if rid and rid.isprintable() and len(rid) <= MAX_REQUEST_ID_LEN:
        return rid
    return uuid.uuid4().hex
