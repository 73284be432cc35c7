"""Explicit handler results and their translation to HTTP responses."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, Response


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    NOT_FOUND = "not_found"


STATUS_BY_KIND = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.AUTHENTICATION: 401,
    ErrorKind.AUTHORIZATION: 403,
    ErrorKind.NOT_FOUND: 404,
}

ACCESS_DENIED = "Access Denied"


@dataclass(frozen=True)
class Ok:
    payload: Any = None
    status_code: int = 200
    headers: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class Err:
    kind: ErrorKind
    # list[str] for VALIDATION, str otherwise
    detail: Any


Result = Ok | Err


def error_body(err: Err) -> dict:
    if err.kind is ErrorKind.VALIDATION:
        return {"errors": list(err.detail)}
    if err.kind is ErrorKind.AUTHENTICATION:
        # the rejection reason stays server-side
        return {"message": ACCESS_DENIED}
    return {"message": err.detail}


def to_response(result: Result) -> Response:
    if isinstance(result, Err):
        return JSONResponse(error_body(result), status_code=STATUS_BY_KIND[result.kind])
    if result.payload is None:
        return Response(status_code=result.status_code, headers=result.headers)
    return JSONResponse(
        jsonable_encoder(result.payload, by_alias=True),
        status_code=result.status_code,
        headers=result.headers,
    )
