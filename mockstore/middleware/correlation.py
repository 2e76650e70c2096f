"""Request/correlation id propagation.

Incoming ``x-request-id`` / ``x-correlation-id`` headers are reused when
present, generated otherwise, exposed through context vars for the duration
of the request and echoed back on the response.
"""

from __future__ import annotations

import logging
import uuid
from contextvars import ContextVar
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

REQUEST_ID_HEADER = "x-request-id"
CORRELATION_ID_HEADER = "x-correlation-id"

request_id_var: ContextVar[str | None] = ContextVar("request_id", default=None)
correlation_id_var: ContextVar[str | None] = ContextVar("correlation_id", default=None)


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        # A correlation id spans several requests; default to this request's id
        correlation_id = request.headers.get(CORRELATION_ID_HEADER) or request_id

        rid_token = request_id_var.set(request_id)
        cid_token = correlation_id_var.set(correlation_id)
        request.state.request_id = request_id
        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(rid_token)
            correlation_id_var.reset(cid_token)

        response.headers[REQUEST_ID_HEADER] = request_id
        response.headers[CORRELATION_ID_HEADER] = correlation_id
        return response


class CorrelationIdFilter(logging.Filter):
    """Stamps request_id / correlation_id on every record ("-" outside a request)."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get() or "-"
        record.correlation_id = correlation_id_var.get() or "-"
        return True
