# mockstore/services/field_discovery.py
"""Five-phase probe that finds which fields the mock backend really requires.

Phases (field order is always the config's declaration order):

1. documented required fields only
2. add documented optional fields one at a time
3. probe each potential undocumented field on top of the running body; a
   probe that succeeds records the field as undocumented-required and keeps
   it in the running body
4. when more than one field was discovered, drop each one again (diagnostic)
5. probe the remaining potential fields as optional

Phase 3 adds a single field per probe, so two undocumented fields that are
only sufficient together are never found. Once one probe succeeds, every
later probe succeeds too and gets recorded as required.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

from ..dal.discovery_state import DiscoveryState
from ..logging import safe_extra
from ..models.discovery import FieldDiscoveryResult, TestAttempt
from ..responses import utc_now
from .backend_simulator import BackendSimulator
from .field_policy import is_missing

logger = logging.getLogger("mockstore.field_discovery")


class FieldDiscovery:
    def __init__(
        self,
        state: DiscoveryState,
        sample_values: Mapping[str, Any],
        simulator: Optional[BackendSimulator] = None,
    ):
        self.state = state
        self.sample_values = dict(sample_values)
        self.simulator = simulator or BackendSimulator(state)

    def _value_for(self, field: str, original: Mapping[str, Any]) -> Any:
        value = original.get(field)
        if is_missing(value):
            value = self.sample_values.get(field)
        return value

    def _attempt(self, result: FieldDiscoveryResult, method: str, phase: int, description: str,
                 body: Dict[str, Any]) -> TestAttempt:
        attempt = TestAttempt(
            phase=phase,
            description=description,
            request_body=dict(body),
            backend_result=self.simulator.validate(method, body),
        )
        result.test_sequence.append(attempt)
        logger.debug(
            "field_discovery.attempt",
            extra=safe_extra({
                "method": method,
                "phase": phase,
                "description": description,
                "success": attempt.backend_result.success,
            }),
        )
        return attempt

    def discover(self, method: str, original_request_body: Optional[Mapping[str, Any]] = None) -> FieldDiscoveryResult:
        key = self.state.normalize(method)
        config = self.state.config(key)
        original = original_request_body or {}

        result = self.state.results[key]
        result.test_sequence = []
        result.discovered_undocumented_required = []
        result.discovered_undocumented_optional = []
        result.completed_at = None
        result.status = "RUNNING"

        # Phase 1
        body: Dict[str, Any] = {}
        for field in config.documented_required:
            value = self._value_for(field, original)
            if value is not None:
                body[field] = value
        self._attempt(result, key, 1, "Documented required fields only", body)

        # Phase 2
        for field in config.documented_optional:
            value = self._value_for(field, original)
            if is_missing(value):
                continue
            body[field] = value
            self._attempt(result, key, 2, f"Added documented optional field: {field}", body)

        # Phase 3
        discovered = result.discovered_undocumented_required
        for field in config.potential_undocumented:
            probe = dict(body)
            value = self._value_for(field, original)
            if value is not None:
                probe[field] = value
            attempt = self._attempt(result, key, 3, f"Testing undocumented field: {field}", probe)
            if attempt.backend_result.success and field not in discovered:
                discovered.append(field)
                if field in probe:
                    body[field] = probe[field]
                logger.info("field_discovery.discovered_required", extra=safe_extra({"method": key, "field": field}))

        # Phase 4
        if len(discovered) > 1:
            for field in discovered:
                without = {k: v for k, v in body.items() if k != field}
                self._attempt(result, key, 4, f"Testing without discovered field: {field}", without)

        # Phase 5
        optional = result.discovered_undocumented_optional
        for field in config.potential_undocumented:
            if field in discovered:
                continue
            probe = dict(body)
            value = self._value_for(field, original)
            if value is not None:
                probe[field] = value
            attempt = self._attempt(result, key, 5, f"Testing potential optional undocumented field: {field}", probe)
            if attempt.backend_result.success and field not in optional:
                optional.append(field)

        result.completed_at = utc_now()
        result.status = "COMPLETED"

        logger.info(
            "field_discovery.completed",
            extra=safe_extra({
                "method": key,
                "total_tests": len(result.test_sequence),
                "undocumented_required": list(discovered),
                "undocumented_optional": list(optional),
            }),
        )
        return result
