from typing import Any

from pydantic import BaseModel


class Envelope(BaseModel):
    """Body shape of every non-204 response (documented in OpenAPI)."""

    message: str
    data: Any = None
