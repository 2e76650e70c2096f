# mockstore/dal/discovery_state.py
from __future__ import annotations

import logging
from typing import Dict, List, Mapping, Optional

from ..logging import safe_extra
from ..models.discovery import (
    SUPPORTED_METHODS,
    FieldDiscoveryConfig,
    FieldDiscoveryConfigPatch,
    FieldDiscoveryResult,
)

log = logging.getLogger(__name__)


class UnknownMethodError(KeyError):
    """Raised for a method key that has no discovery config/result."""


class DiscoveryState:
    """Config + latest result per write method for one store.

    Shared by every request of the store. A discovery run resets and refills
    the result record in place, so concurrent runs for the same method
    overwrite each other (last writer wins).
    """

    def __init__(self, configs: Mapping[str, FieldDiscoveryConfig]):
        self.configs: Dict[str, FieldDiscoveryConfig] = {
            m: configs[m].model_copy(deep=True) for m in SUPPORTED_METHODS
        }
        self.results: Dict[str, FieldDiscoveryResult] = {m: FieldDiscoveryResult() for m in SUPPORTED_METHODS}

    @property
    def methods(self) -> List[str]:
        return list(self.results.keys())

    def normalize(self, method: Optional[str]) -> str:
        key = (method or "").lower()
        if key not in self.configs:
            raise UnknownMethodError(method)
        return key

    def config(self, method: str) -> FieldDiscoveryConfig:
        return self.configs[self.normalize(method)]

    def result(self, method: str) -> FieldDiscoveryResult:
        return self.results[self.normalize(method)]

    def reset(self, method: Optional[str] = None) -> List[str]:
        """Reset one method (or all when ``method`` is None/"all"); returns the reset keys."""
        if method is None or method.lower() == "all":
            keys = self.methods
        else:
            keys = [self.normalize(method)]
        for key in keys:
            self.results[key] = FieldDiscoveryResult()
        log.info("field_discovery.reset", extra=safe_extra({"methods": keys}))
        return keys

    def update_config(self, method: str, patch: FieldDiscoveryConfigPatch) -> FieldDiscoveryConfig:
        """Overwrite provided lists; raises ValueError (config unchanged) if the result is inconsistent."""
        key = self.normalize(method)
        merged = self.configs[key].model_dump()
        merged.update(patch.model_dump(exclude_none=True))
        updated = FieldDiscoveryConfig.model_validate(merged)
        self.configs[key] = updated
        return updated
