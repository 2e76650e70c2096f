# mockstore/errors.py
from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .logging import safe_extra
from .responses import utc_timestamp

logger = logging.getLogger("mockstore.errors")


class ErrorKind(str, Enum):
    UNDOCUMENTED_FIELDS_DETECTED = "UNDOCUMENTED_FIELDS_DETECTED"
    MISSING_REQUIRED_FIELDS = "MISSING_REQUIRED_FIELDS"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    INVALID_METHOD = "INVALID_METHOD"
    INVALID_CONFIGURATION = "INVALID_CONFIGURATION"
    MISSING_QUERY_PARAMETER = "MISSING_QUERY_PARAMETER"
    CLIENT_ORDER_DATE_REJECTED = "CLIENT_ORDER_DATE_REJECTED"
    MISSING_CREDENTIALS = "MISSING_CREDENTIALS"
    AUTHENTICATION_REQUIRED = "AUTHENTICATION_REQUIRED"
    ACCESS_DENIED = "ACCESS_DENIED"
    INVALID_REQUEST = "INVALID_REQUEST"
    VALUE_OUT_OF_RANGE = "VALUE_OUT_OF_RANGE"
    RESERVED_ID = "RESERVED_ID"
    DISCOVERY_RUN_FAILED = "DISCOVERY_RUN_FAILED"


class ApiError(Exception):
    """An error answered at the route boundary as ``{error, message, ..., timestamp}``."""

    def __init__(
        self,
        status_code: int,
        kind: ErrorKind,
        message: str,
        *,
        headers: Optional[Dict[str, str]] = None,
        **extra: Any,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.kind = kind
        self.message = message
        self.headers = headers
        self.extra = extra

    def to_payload(self) -> Dict[str, Any]:
        return {
            "error": self.kind.value,
            "message": self.message,
            **self.extra,
            "timestamp": utc_timestamp(),
        }


async def _api_error_handler(request: Request, exc: ApiError) -> ORJSONResponse:
    if exc.status_code >= 500:
        logger.error(
            "api_error",
            extra=safe_extra({"method": request.method, "path": request.url.path, "kind": exc.kind.value, "error": exc.message}),
        )
    return ORJSONResponse(exc.to_payload(), status_code=exc.status_code, headers=exc.headers)


async def _http_error_handler(request: Request, exc: StarletteHTTPException) -> ORJSONResponse:
    message = "API endpoint not found" if exc.status_code == 404 else str(exc.detail)
    return ORJSONResponse(
        {"status": "fail", "message": message, "timestamp": utc_timestamp()},
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> ORJSONResponse:
    err = ApiError(422, ErrorKind.INVALID_REQUEST, "Request validation failed", details=jsonable_encoder(exc.errors()))
    return ORJSONResponse(err.to_payload(), status_code=422)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, _api_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, _http_error_handler)
