# mockstore/routers/sorting_routes.py
"""Read-only list endpoints with differing sort contracts.

- /tasks     accepts ?order=asc|desc but always sorts by title ascending
- /users     sorts with ?sort=+field / -field
- /products  sorts with ?sortBy=field:asc|desc
- /orders    accepts ?sortField / ?sortOrder and ignores both
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body
from fastapi.responses import ORJSONResponse

from ..config import settings
from ..errors import ApiError, ErrorKind
from ..responses import envelope
from ..seeds.catalog import ORDERS, PRODUCT_SORT_FIELDS, PRODUCTS, TASKS, USER_SORT_FIELDS, USERS
from ..services.field_policy import find_missing_fields

tasks_router = APIRouter(prefix=f"{settings.API_PREFIX}/tasks", tags=["Tasks"], default_response_class=ORJSONResponse)
users_router = APIRouter(prefix=f"{settings.API_PREFIX}/users", tags=["Users"], default_response_class=ORJSONResponse)
products_router = APIRouter(
    prefix=f"{settings.API_PREFIX}/products", tags=["Products"], default_response_class=ORJSONResponse
)
orders_router = APIRouter(prefix=f"{settings.API_PREFIX}/orders", tags=["Orders"], default_response_class=ORJSONResponse)

PRODUCT_REQUIRED_FIELDS = ["name", "price", "category"]


def _listing(data: List[Dict[str, Any]], **extra: Any):
    return envelope({"status": "success", "count": len(data), "data": data, **extra})


@tasks_router.get("")
async def list_tasks(order: Optional[str] = None):
    tasks = list(TASKS)
    # Any order value triggers a sort, and it is always ascending
    if order:
        tasks.sort(key=lambda t: t["title"].casefold())
    return _listing(tasks, requestedOrder=order or "none")


@users_router.get("")
async def list_users(sort: Optional[str] = None):
    users = list(USERS)
    if sort:
        # A literal "+" arrives as a space once the query string is decoded
        direction, field = sort[0], sort[1:]
        if direction == " ":
            direction = "+"
        if field in USER_SORT_FIELDS and direction in ("+", "-"):
            users.sort(key=lambda u: u[field], reverse=direction == "-")
    return _listing(users)


@products_router.get("")
async def list_products(sortBy: Optional[str] = None):
    products = list(PRODUCTS)
    if sortBy:
        field, _, direction = sortBy.partition(":")
        if field in PRODUCT_SORT_FIELDS and direction in ("asc", "desc"):
            products.sort(key=lambda p: p[field], reverse=direction == "desc")
    return _listing(products)


@products_router.put("/{product_id}")
async def update_product(product_id: str, body: Dict[str, Any] = Body(default={})):
    """Echoes the updated product; nothing is persisted."""
    missing = find_missing_fields(body, PRODUCT_REQUIRED_FIELDS)
    if missing:
        raise ApiError(
            400,
            ErrorKind.MISSING_REQUIRED_FIELDS,
            "Missing required fields: name, price, and category are all required",
            status="fail",
            missingFields=missing,
        )
    product = {"id": product_id, **{f: body[f] for f in PRODUCT_REQUIRED_FIELDS}}
    return envelope({"status": "success", "data": product})


@orders_router.get("")
async def list_orders(sortField: Optional[str] = None, sortOrder: Optional[str] = None):
    # sort parameters are echoed back but never applied
    return _listing(
        list(ORDERS),
        requestedSort={"sortField": sortField or "none", "sortOrder": sortOrder or "none"},
    )
