# mockstore/models/discovery.py
from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from ..responses import iso_utc, utc_now

# ─────────────────────────────────────────────────────────────
# Types
# ─────────────────────────────────────────────────────────────
DiscoveryMethod = Literal["post", "put"]
SUPPORTED_METHODS: tuple[str, ...] = ("post", "put")

DiscoveryStatus = Literal["NOT_STARTED", "RUNNING", "COMPLETED"]


class CamelModel(BaseModel):
    """snake_case in Python, camelCase on the wire."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_json(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


# ─────────────────────────────────────────────────────────────
# Configuration
# ─────────────────────────────────────────────────────────────
class FieldDiscoveryConfig(CamelModel):
    documented_required: List[str] = Field(default_factory=list)
    documented_optional: List[str] = Field(default_factory=list)
    potential_undocumented: List[str] = Field(default_factory=list)
    # Ground truth the mock backend enforces (documented + undocumented)
    actual_required: List[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def _actual_covers_documented(self) -> "FieldDiscoveryConfig":
        uncovered = [f for f in self.documented_required if f not in self.actual_required]
        if uncovered:
            raise ValueError(
                f"actualRequired must include every documented required field; missing: {', '.join(uncovered)}"
            )
        return self

    @property
    def undocumented_required(self) -> List[str]:
        return [f for f in self.actual_required if f not in self.documented_required]

    @property
    def documented_fields(self) -> List[str]:
        return [*self.documented_required, *self.documented_optional]

    @property
    def allowed_fields(self) -> List[str]:
        """Fields a write request may carry: documented ones plus the undocumented required ones."""
        out: List[str] = []
        for f in (*self.documented_fields, *self.undocumented_required):
            if f not in out:
                out.append(f)
        return out


class FieldDiscoveryConfigPatch(CamelModel):
    """Lists provided here replace the current ones wholesale; omitted lists stay untouched."""
    documented_required: Optional[List[str]] = None
    documented_optional: Optional[List[str]] = None
    potential_undocumented: Optional[List[str]] = None
    actual_required: Optional[List[str]] = None


# ─────────────────────────────────────────────────────────────
# Simulation / results
# ─────────────────────────────────────────────────────────────
class BackendValidationResult(CamelModel):
    success: bool
    message: str
    error: Optional[Literal["MISSING_REQUIRED_FIELDS"]] = None
    missing_fields: Optional[List[str]] = None


class TestAttempt(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)
    __test__ = False  # not a pytest class

    phase: int = Field(ge=1, le=5)
    description: str
    request_body: Dict[str, Any]
    backend_result: BackendValidationResult
    timestamp: datetime = Field(default_factory=utc_now)


class FieldDiscoveryResult(CamelModel):
    test_sequence: List[TestAttempt] = Field(default_factory=list)
    discovered_undocumented_required: List[str] = Field(default_factory=list)
    discovered_undocumented_optional: List[str] = Field(default_factory=list)
    completed_at: Optional[datetime] = None
    status: DiscoveryStatus = "NOT_STARTED"

    def phase_breakdown(self) -> Dict[str, int]:
        counts = {f"phase{p}": 0 for p in range(1, 6)}
        for attempt in self.test_sequence:
            counts[f"phase{attempt.phase}"] += 1
        return counts

    def summary(self) -> Dict[str, Any]:
        last = self.test_sequence[-1].to_json() if self.test_sequence else None
        return {
            "status": self.status,
            "totalTests": len(self.test_sequence),
            "discoveredUndocumentedRequired": list(self.discovered_undocumented_required),
            "discoveredUndocumentedOptional": list(self.discovered_undocumented_optional),
            "completedAt": iso_utc(self.completed_at) if self.completed_at else None,
            "lastTestResult": last,
        }


# ─────────────────────────────────────────────────────────────
# Inspection endpoint payloads
# ─────────────────────────────────────────────────────────────
class ResetRequest(CamelModel):
    method: Optional[str] = None


class RunDiscoveryRequest(CamelModel):
    method: Optional[str] = None
    test_data: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("test_data", mode="before")
    @classmethod
    def _null_as_empty(cls, v: Any) -> Any:
        return {} if v is None else v


class ConfigUpdateRequest(CamelModel):
    method: Optional[str] = None
    config: FieldDiscoveryConfigPatch = Field(default_factory=FieldDiscoveryConfigPatch)

    @field_validator("config", mode="before")
    @classmethod
    def _null_as_empty(cls, v: Any) -> Any:
        return {} if v is None else v


class SimulateBackendRequest(CamelModel):
    method: Optional[str] = None
    request_body: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("request_body", mode="before")
    @classmethod
    def _null_as_empty(cls, v: Any) -> Any:
        return {} if v is None else v
