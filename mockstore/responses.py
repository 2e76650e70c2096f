from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict

from fastapi.responses import ORJSONResponse


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def iso_utc(dt: datetime) -> str:
    """ISO-8601 with a trailing Z, the same shape pydantic emits for UTC datetimes."""
    return dt.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def utc_timestamp() -> str:
    return iso_utc(utc_now())


def envelope(payload: Dict[str, Any], status_code: int = 200) -> ORJSONResponse:
    """Every JSON body leaves the service with a ``timestamp``."""
    return ORJSONResponse({**payload, "timestamp": utc_timestamp()}, status_code=status_code)
