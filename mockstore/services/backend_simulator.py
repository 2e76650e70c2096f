# mockstore/services/backend_simulator.py
from __future__ import annotations

from typing import Any, Mapping

from ..dal.discovery_state import DiscoveryState
from ..models.discovery import BackendValidationResult
from .field_policy import find_missing_fields


class BackendSimulator:
    """Stands in for the real backend: enforces ``actualRequired`` of the live config."""

    def __init__(self, state: DiscoveryState):
        self.state = state

    def validate(self, method: str, request_body: Mapping[str, Any]) -> BackendValidationResult:
        config = self.state.config(method)
        missing = find_missing_fields(request_body, config.actual_required)
        if missing:
            return BackendValidationResult(
                success=False,
                error="MISSING_REQUIRED_FIELDS",
                missing_fields=missing,
                message=f"Missing required fields: {', '.join(missing)}",
            )
        return BackendValidationResult(success=True, message="Request would succeed")
