# mockstore/routers/perf_routes.py
"""Load-test targets: fixed latency, echo, bulk payloads, CPU burn, arbitrary status."""
from __future__ import annotations

import asyncio
import logging
import math
import random
import re
import string
import time
from typing import Any, Dict, List

from fastapi import APIRouter, Body, Response
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import ORJSONResponse

from ..config import settings
from ..errors import ApiError, ErrorKind
from ..logging import safe_extra
from ..responses import envelope

logger = logging.getLogger("mockstore.routes.perf")

router = APIRouter(prefix=f"{settings.API_PREFIX}/basic", tags=["Performance"], default_response_class=ORJSONResponse)

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")
_ALPHABET = string.ascii_lowercase + string.digits


def leading_int(raw: str, default: int) -> int:
    """Leading integer of ``raw``; ``default`` when there is none or it is 0."""
    m = _LEADING_INT.match(raw)
    value = int(m.group(1)) if m else 0
    return value or default


def random_items(size: int) -> List[Dict[str, Any]]:
    return [
        {"id": i, "value": "".join(random.choices(_ALPHABET, k=11)), "number": random.randrange(1000)}
        for i in range(size)
    ]


def burn_cpu(load: int) -> float:
    total = 0.0
    for i in range(load * 1_000_000):
        total += math.sqrt(i)
    return total


def _cap(name: str, value: int, limit: int) -> int:
    if value < 0 or value > limit:
        raise ApiError(400, ErrorKind.VALUE_OUT_OF_RANGE, f"{name} must be between 0 and {limit}", limit=limit)
    return value


@router.get("/simple")
async def simple():
    return envelope({"message": "OK"})


@router.get("/delay/{ms}")
async def delayed(ms: str):
    delay = _cap("delay", leading_int(ms, 1000), settings.PERF_MAX_DELAY_MS)
    await asyncio.sleep(delay / 1000)
    return envelope({"message": f"Response after {delay}ms delay", "delay": delay})


@router.post("/echo")
async def echo(body: Any = Body(default=None)):
    return envelope({"message": "Echo response", "data": body})


@router.get("/largepayload/{size}")
async def large_payload(size: str):
    count = _cap("size", leading_int(size, 1000), settings.PERF_MAX_PAYLOAD_ITEMS)
    data = random_items(count)
    return envelope({"message": f"Generated {count} items", "count": len(data), "data": data})


@router.get("/cpu/{load}")
async def cpu(load: str):
    amount = _cap("load", leading_int(load, 100), settings.PERF_MAX_CPU_LOAD)
    started = time.perf_counter()
    # off the event loop so other requests keep flowing
    await run_in_threadpool(burn_cpu, amount)
    elapsed_ms = round((time.perf_counter() - started) * 1000)
    logger.info("perf.cpu.completed", extra=safe_extra({"load": amount, "execution_ms": elapsed_ms}))
    return envelope({"message": "Completed CPU-intensive operation", "executionTime": elapsed_ms, "load": amount})


@router.get("/status/{code}")
async def status_code(code: str):
    value = leading_int(code, 200)
    if not 100 <= value <= 599:
        raise ApiError(400, ErrorKind.VALUE_OUT_OF_RANGE, f"Unsupported status code: {value}", limit=599)
    if value < 200 or value in (204, 304):
        # these statuses must not carry a body
        return Response(status_code=value)
    return envelope({"message": f"Responding with status code {value}", "status": value}, status_code=value)
