"""Typed service results and their rendering as `{message, data}` envelopes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from starlette.responses import Response


@dataclass(frozen=True)
class Success:
    message: str
    status_code: int = 200
    data: Any = None

    @property
    def is_success(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    message: str
    status_code: int = 400
    data: Any = None

    @property
    def is_success(self) -> bool:
        return False


ServiceResult = Union[Success, Failure]


def success(message: str, status_code: int = 200, data: Any = None) -> Success:
    return Success(message=message, status_code=status_code, data=data)


def failure(message: str, status_code: int = 400, data: Any = None) -> Failure:
    return Failure(message=message, status_code=status_code, data=data)


def envelope(message: str, data: Any = None) -> dict:
    return {"message": message, "data": data}


def to_response(result: ServiceResult) -> Response:
    """Render a result; 204 carries no body since HTTP forbids one."""
    if result.status_code == 204:
        return Response(status_code=204)
    return JSONResponse(
        status_code=result.status_code,
        content=jsonable_encoder(envelope(result.message, result.data)),
    )
