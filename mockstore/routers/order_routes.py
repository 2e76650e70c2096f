# mockstore/routers/order_routes.py
from __future__ import annotations

import asyncio
import random
from email.utils import formatdate

from fastapi import APIRouter
from fastapi.responses import ORJSONResponse

from ..config import settings
from ..errors import ApiError, ErrorKind
from ..models.store import OrderCreate
from ..responses import utc_timestamp

router = APIRouter(
    prefix=f"{settings.API_PREFIX}/foodstore",
    tags=["Foodstore"],
    default_response_class=ORJSONResponse,
)


@router.post("/order")
async def create_order(body: OrderCreate):
    """
    Mock order with deliberately unstable cost:
      - orderDate is always stamped server-side; a client-provided one is rejected
      - calculatedCost = quantity * basePrice * (1 + random)
      - answers after a random delay (0..ORDER_MAX_DELAY_MS)
    """
    if body.order_date:
        raise ApiError(
            400,
            ErrorKind.CLIENT_ORDER_DATE_REJECTED,
            "Client-provided orderDate is not allowed. Server will generate the timestamp.",
            status=400,
            statusText="Bad Request",
        )

    order = {
        "id": body.id if body.id is not None else random.randint(0, 999),
        "foodId": body.food_id,
        "quantity": body.quantity or 1,
        "orderDate": None,
        "status": body.status or "pending",
        "complete": body.complete or False,
        "basePrice": body.base_price or 10.00,
    }
    elevated_cost = order["quantity"] * order["basePrice"] * (1 + random.random())

    if settings.ORDER_MAX_DELAY_MS > 0:
        await asyncio.sleep(random.randint(0, settings.ORDER_MAX_DELAY_MS) / 1000)

    order["orderDate"] = utc_timestamp()
    return ORJSONResponse({
        "status": 200,
        "statusText": "OK",
        "headers": {
            "date": formatdate(usegmt=True),
            "content-type": "application/json",
            "connection": "keep-alive",
            "access-control-allow-origin": "*",
            "access-control-allow-methods": "GET, POST, DELETE, PUT",
            "access-control-allow-headers": "Content-Type, api_key, Authorization",
            "server": "TestEndpoints/1.0",
        },
        "data": {
            **order,
            "calculatedCost": f"{elevated_cost:.2f}",
            "processingTime": random.randint(0, 999),
            "costElevationFactor": f"{elevated_cost / (order['quantity'] * order['basePrice']):.2f}",
        },
        "timestamp": utc_timestamp(),
    })
