# mockstore/routers/discovery_routes.py
"""Inspection/configuration endpoints for a store's field-discovery engine."""
from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import ORJSONResponse
from pydantic import ValidationError

from ..auth.basic import require_role
from ..config import settings
from ..dal.discovery_state import UnknownMethodError
from ..errors import ApiError, ErrorKind
from ..logging import safe_extra
from ..models.discovery import (
    ConfigUpdateRequest,
    ResetRequest,
    RunDiscoveryRequest,
    SimulateBackendRequest,
)
from ..responses import envelope, iso_utc
from ..services.field_policy import find_missing_fields
from ..services.store import StoreContext

logger = logging.getLogger("mockstore.routes.discovery")

FIELD_DESCRIPTIONS = {
    "documentedRequired": "Fields that are documented as required in the API specification",
    "documentedOptional": "Fields that are documented as optional in the API specification",
    "potentialUndocumented": "Fields that might exist but are not documented in the API spec",
    "actualRequired": "Fields that are actually required by the backend (including undocumented ones)",
}

TESTING_PHASES = {
    "phase1": "Test with only documented required fields",
    "phase2": "Add documented optional fields one by one",
    "phase3": "Test potential undocumented fields",
    "phase4": "Test minimum required undocumented field combinations",
    "phase5": "Test remaining fields as optional",
}


def build_discovery_router(ctx: StoreContext) -> APIRouter:
    state = ctx.discovery

    router = APIRouter(
        prefix=f"{settings.API_PREFIX}/{ctx.profile.key}/test",
        tags=[*ctx.profile.tags, "field-discovery"],
        default_response_class=ORJSONResponse,
    )

    def _method_or_400(method: Optional[str], *, allow_all: bool = False) -> str:
        try:
            return state.normalize(method)
        except UnknownMethodError:
            available = [*state.methods, "all"] if allow_all else state.methods
            message = (
                f"Method '{method}' not found. Available methods: {', '.join(available)}"
                if method
                else f"Please specify a valid method ({' or '.join(state.methods)}) in the request body"
            )
            raise ApiError(400, ErrorKind.INVALID_METHOD, message, availableMethods=available)

    def _configs_json():
        return {m: c.to_json() for m, c in state.configs.items()}

    @router.get("/field-discovery")
    async def discovery_overview():
        return envelope({
            "message": "Comprehensive field discovery test results",
            "results": {m: r.to_json() for m, r in state.results.items()},
            "configuration": _configs_json(),
            "summary": {m: r.summary() for m, r in state.results.items()},
        })

    @router.get("/field-discovery/config")
    async def get_config():
        return envelope({
            "message": "Field discovery configuration",
            "configuration": _configs_json(),
            "description": FIELD_DESCRIPTIONS,
            "testingPhases": TESTING_PHASES,
        })

    @router.put("/field-discovery/config", dependencies=[Depends(require_role("admin"))])
    async def update_config(payload: Optional[ConfigUpdateRequest] = None):
        payload = payload or ConfigUpdateRequest()
        method = _method_or_400(payload.method)
        try:
            updated = state.update_config(method, payload.config)
        except ValidationError as e:
            raise ApiError(
                400,
                ErrorKind.INVALID_CONFIGURATION,
                "; ".join(err["msg"] for err in e.errors()),
                method=method.upper(),
            )
        logger.info("field_discovery.config.updated", extra=safe_extra({"store": ctx.profile.key, "method": method}))
        return envelope({
            "message": f"Field discovery configuration updated for {method.upper()}",
            "method": method.upper(),
            "updatedConfig": updated.to_json(),
        })

    @router.get("/field-discovery/{method}")
    async def discovery_detail(method: str):
        key = _method_or_400(method)
        result = state.results[key]
        return envelope({
            "message": f"Detailed field discovery results for {key.upper()}",
            "method": key.upper(),
            "status": result.status,
            "totalTests": len(result.test_sequence),
            "discoveredUndocumentedRequired": result.discovered_undocumented_required,
            "discoveredUndocumentedOptional": result.discovered_undocumented_optional,
            "completedAt": iso_utc(result.completed_at) if result.completed_at else None,
            "testSequence": [t.to_json() for t in result.test_sequence],
            "phaseBreakdown": result.phase_breakdown(),
        })

    @router.post("/field-discovery/reset")
    async def reset_results(payload: Optional[ResetRequest] = None):
        requested = (payload.method if payload else None) or "all"
        if requested.lower() == "all":
            keys = state.reset()
            return envelope({
                "message": "All field discovery test results reset successfully",
                "resetMethods": keys,
            })
        key = _method_or_400(requested, allow_all=True)
        state.reset(key)
        return envelope({
            "message": f"Field discovery test results for {key.upper()} reset successfully",
            "resetMethod": key.upper(),
        })

    @router.post("/field-discovery/run")
    async def run_discovery(payload: Optional[RunDiscoveryRequest] = None):
        payload = payload or RunDiscoveryRequest()
        method = _method_or_400(payload.method)
        try:
            result = ctx.engine.discover(method, payload.test_data)
        except Exception as e:
            logger.exception("field_discovery.run_failed", extra=safe_extra({"store": ctx.profile.key, "method": method}))
            raise ApiError(500, ErrorKind.DISCOVERY_RUN_FAILED, str(e) or e.__class__.__name__)

        summary = result.summary()
        summary.pop("lastTestResult")
        return envelope({
            "message": f"Field discovery testing completed for {method.upper()}",
            "method": method.upper(),
            "results": result.to_json(),
            "summary": summary,
        })

    @router.post("/simulate-backend")
    async def simulate_backend(payload: Optional[SimulateBackendRequest] = None):
        payload = payload or SimulateBackendRequest()
        method = _method_or_400(payload.method)
        config = state.config(method)
        body = payload.request_body
        backend_result = ctx.engine.simulator.validate(method, body)
        return envelope({
            "message": f"Backend simulation for {method.upper()}",
            "method": method.upper(),
            "requestBody": body,
            "backendResult": backend_result.to_json(),
            "configuration": config.to_json(),
            "analysis": {
                "providedFields": list(body.keys()),
                "requiredFields": config.actual_required,
                "missingFields": find_missing_fields(body, config.actual_required),
                "extraFields": [f for f in body if f not in config.actual_required],
            },
        })

    return router
