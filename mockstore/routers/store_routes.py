# mockstore/routers/store_routes.py
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Query, status
from fastapi.responses import ORJSONResponse

from ..auth.basic import current_user
from ..config import settings
from ..errors import ApiError, ErrorKind
from ..logging import safe_extra
from ..models.discovery import FieldDiscoveryResult
from ..responses import envelope
from ..services.field_policy import find_missing_fields, find_undocumented_fields
from ..services.store import StoreContext

logger = logging.getLogger("mockstore.routes.store")

STATUS_REPORT_PATHS = ("findByStatus", "inventory")


def _test_summary(result: FieldDiscoveryResult) -> List[Dict[str, Any]]:
    return [
        {
            "phase": t.phase,
            "description": t.description,
            "success": t.backend_result.success,
            "error": t.backend_result.error,
        }
        for t in result.test_sequence
    ]


def _analysis(result: FieldDiscoveryResult, **extra: Any) -> Dict[str, Any]:
    return {
        "totalTestsPerformed": len(result.test_sequence),
        "discoveredUndocumentedRequired": list(result.discovered_undocumented_required),
        "discoveredUndocumentedOptional": list(result.discovered_undocumented_optional),
        **extra,
    }


def run_write_pipeline(ctx: StoreContext, method: str, body: Dict[str, Any]) -> FieldDiscoveryResult:
    """Discovery first, then undocumented-field check, then missing-field check.

    Raises ApiError (400) when the body is rejected; returns the discovery
    result when the write may proceed.
    """
    result = ctx.engine.discover(method, body)
    config = ctx.discovery.config(method)

    undocumented = find_undocumented_fields(body, config.allowed_fields)
    if undocumented:
        raise ApiError(
            400,
            ErrorKind.UNDOCUMENTED_FIELDS_DETECTED,
            f"The following fields are not documented in the API specification: {', '.join(undocumented)}",
            undocumentedFields=undocumented,
            fieldDiscoveryResults=result.to_json(),
            detailedAnalysis=_analysis(result, testSummary=_test_summary(result)),
        )

    missing = find_missing_fields(body, config.actual_required)
    if missing:
        extra: Dict[str, Any] = {"testSummary": _test_summary(result)}
        still_missing = [f for f in result.discovered_undocumented_required if f in missing]
        if still_missing:
            extra["recommendedAction"] = f"Add these undocumented required fields: {', '.join(still_missing)}"
        raise ApiError(
            400,
            ErrorKind.MISSING_REQUIRED_FIELDS,
            f"The following required fields are missing: {', '.join(missing)}",
            missingFields=missing,
            fieldDiscoveryResults=result.to_json(),
            detailedAnalysis=_analysis(result, **extra),
        )
    return result


def _not_found(ctx: StoreContext, rid: str) -> ApiError:
    return ApiError(404, ErrorKind.RESOURCE_NOT_FOUND, f"{ctx.profile.label}: Item not found", id=rid)


def _check_item_id(ctx: StoreContext, rid: str) -> None:
    # Path segments owned by static GET routes would be unreachable as record ids
    if ctx.profile.status_reports and rid in STATUS_REPORT_PATHS:
        raise ApiError(400, ErrorKind.RESERVED_ID, f"'{rid}' is a reserved path and cannot be used as an id", id=rid)


def _mount_status_reports(router: APIRouter, ctx: StoreContext) -> None:
    records = ctx.records

    @router.get("/findByStatus")
    async def find_by_status(status_: Optional[List[str]] = Query(default=None, alias="status")):
        if not status_:
            raise ApiError(400, ErrorKind.MISSING_QUERY_PARAMETER, "Status parameter is required")
        items = [doc for doc in records.list() if doc.get("status") in status_]
        return envelope({"count": len(items), "items": items})

    @router.get("/inventory")
    async def inventory():
        counts: Dict[str, float] = {}
        for doc in records.list():
            key = doc.get("status") or "available"
            stock = doc.get("stock")
            counts[key] = counts.get(key, 0) + (stock if isinstance(stock, (int, float)) else 0)
        return envelope({"inventory": counts})


def build_store_router(ctx: StoreContext) -> APIRouter:
    label = ctx.profile.label
    records = ctx.records

    router = APIRouter(
        prefix=f"{settings.API_PREFIX}/{ctx.profile.key}",
        tags=ctx.profile.tags,
        default_response_class=ORJSONResponse,
    )

    # ─────────────────────────────────────────────────────────────
    # Reads
    # ─────────────────────────────────────────────────────────────
    @router.get("", dependencies=[Depends(current_user)])
    async def list_items():
        items = records.list()
        return envelope({"message": f"{label}: Retrieved all items", "count": len(items), "items": items})

    if ctx.profile.status_reports:
        _mount_status_reports(router, ctx)

    @router.get("/{item_id}")
    async def get_item(item_id: str):
        doc = records.get(item_id)
        if doc is None:
            raise _not_found(ctx, item_id)
        return envelope({"message": f"{label}: Retrieved item by ID", "id": item_id, "data": doc})

    # ─────────────────────────────────────────────────────────────
    # Writes (discovery + policy pipeline)
    # ─────────────────────────────────────────────────────────────
    @router.post("")
    async def create_item(body: Dict[str, Any] = Body(default={})):
        result = run_write_pipeline(ctx, "post", body)
        rid = records.insert(body)
        logger.info("store.record.created", extra=safe_extra({"store": ctx.profile.key, "id": rid}))
        return envelope(
            {
                "id": rid,
                "message": f"{label}: Created successfully",
                "data": records.get(rid),
                "fieldDiscoveryResults": result.to_json(),
                "detailedAnalysis": _analysis(
                    result,
                    conclusion="Request succeeded with all required fields (including undocumented ones)",
                ),
            },
            status_code=status.HTTP_201_CREATED,
        )

    @router.put("/{item_id}")
    async def replace_item(item_id: str, body: Dict[str, Any] = Body(default={})):
        _check_item_id(ctx, item_id)
        result = run_write_pipeline(ctx, "put", body)
        doc = records.replace(item_id, body)
        logger.info("store.record.replaced", extra=safe_extra({"store": ctx.profile.key, "id": item_id}))
        return envelope(
            {
                "message": f"{label}: Updated successfully with PUT",
                "id": item_id,
                "data": doc,
                "fieldDiscoveryResults": result.to_json(),
                "detailedAnalysis": _analysis(
                    result,
                    conclusion="Request succeeded with all required fields (including undocumented ones)",
                ),
            }
        )

    @router.patch("/{item_id}")
    async def patch_item(item_id: str, body: Dict[str, Any] = Body(default={})):
        _check_item_id(ctx, item_id)
        allowed = ctx.discovery.config("put").documented_fields
        undocumented = find_undocumented_fields(body, allowed)
        if undocumented:
            raise ApiError(
                400,
                ErrorKind.UNDOCUMENTED_FIELDS_DETECTED,
                f"The following fields are not documented in the API specification: {', '.join(undocumented)}",
                undocumentedFields=undocumented,
            )
        doc = records.merge(item_id, body, create=ctx.profile.patch_creates_missing)
        if doc is None:
            raise _not_found(ctx, item_id)
        return envelope({"message": f"{label}: Updated successfully with PATCH", "id": item_id, "data": doc})

    @router.delete("/{item_id}")
    async def delete_item(item_id: str):
        if not records.delete(item_id):
            raise _not_found(ctx, item_id)
        logger.info("store.record.deleted", extra=safe_extra({"store": ctx.profile.key, "id": item_id}))
        return envelope({"message": f"{label}: Deleted successfully", "id": item_id})

    return router
