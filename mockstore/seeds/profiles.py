# mockstore/seeds/profiles.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

from ..models.discovery import FieldDiscoveryConfig


@dataclass(frozen=True)
class StoreProfile:
    """Static defaults that turn the generic store router into one concrete store."""
    key: str                                   # URL segment, e.g. "foodstore"
    label: str                                 # used in response messages
    configs: Dict[str, FieldDiscoveryConfig]   # per write method
    sample_values: Dict[str, Any]              # fallback values for discovery probes
    patch_creates_missing: bool = True         # PATCH on unknown id: create (True) or 404
    status_reports: bool = False               # mounts /findByStatus and /inventory
    tags: List[str] = field(default_factory=list)


# ─────────────────────────────────────────────────────────────
# Foodstore: brand + lotNumber are enforced but undocumented on POST,
# only brand on PUT.
# ─────────────────────────────────────────────────────────────
_FOOD_POTENTIAL = ["brand", "lotNumber", "producer", "expirationDate", "storageLocation", "inventoryCount"]

FOODSTORE = StoreProfile(
    key="foodstore",
    label="Foodstore",
    configs={
        "post": FieldDiscoveryConfig(
            documented_required=["name", "category"],
            documented_optional=["price", "description"],
            potential_undocumented=_FOOD_POTENTIAL,
            actual_required=["name", "category", "brand", "lotNumber"],
        ),
        "put": FieldDiscoveryConfig(
            documented_required=["name", "category"],
            documented_optional=["price", "description"],
            potential_undocumented=_FOOD_POTENTIAL,
            actual_required=["name", "category", "brand"],
        ),
    },
    sample_values={
        "name": "Test Food",
        "category": "Test Category",
        "price": 10.99,
        "description": "Test description",
        "brand": "Test Brand",
        "lotNumber": "LOT001",
        "producer": "Test Producer",
        "expirationDate": "2025-12-31",
        "storageLocation": "Warehouse A",
        "inventoryCount": 100,
    },
    patch_creates_missing=True,
    tags=["Foodstore"],
)

# ─────────────────────────────────────────────────────────────
# Medstore: same engine, supplier + batchNumber play the undocumented part.
# ─────────────────────────────────────────────────────────────
_MED_POTENTIAL = ["supplier", "batchNumber", "expiryDate", "prescriptionRequired", "storageTemperature", "ndcCode"]

MEDSTORE = StoreProfile(
    key="medstore",
    label="Medstore",
    configs={
        "post": FieldDiscoveryConfig(
            documented_required=["name", "category"],
            documented_optional=["manufacturer", "dosage", "price", "stock", "status"],
            potential_undocumented=_MED_POTENTIAL,
            actual_required=["name", "category", "supplier", "batchNumber"],
        ),
        "put": FieldDiscoveryConfig(
            documented_required=["name", "category"],
            documented_optional=["manufacturer", "dosage", "price", "stock", "status"],
            potential_undocumented=_MED_POTENTIAL,
            actual_required=["name", "category", "supplier"],
        ),
    },
    sample_values={
        "name": "Aspirin",
        "category": "Pain Relief",
        "manufacturer": "PharmaCorp",
        "dosage": "500mg",
        "price": 29.99,
        "stock": 100,
        "status": "available",
        "supplier": "Test Supplier",
        "batchNumber": "BATCH001",
        "expiryDate": "2025-12-31",
        "prescriptionRequired": False,
        "storageTemperature": "2-8C",
        "ndcCode": "0000-0000-00",
    },
    patch_creates_missing=False,
    status_reports=True,
    tags=["Medstore"],
)

ALL_PROFILES: List[StoreProfile] = [FOODSTORE, MEDSTORE]
