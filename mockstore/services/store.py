from __future__ import annotations

from dataclasses import dataclass

from ..dal.discovery_state import DiscoveryState
from ..dal.records import RecordCollection
from ..seeds.profiles import StoreProfile
from .field_discovery import FieldDiscovery


@dataclass
class StoreContext:
    """Everything one store's routes share: its records, discovery state and engine."""
    profile: StoreProfile
    records: RecordCollection
    discovery: DiscoveryState
    engine: FieldDiscovery

    @classmethod
    def from_profile(cls, profile: StoreProfile) -> "StoreContext":
        state = DiscoveryState(profile.configs)
        return cls(
            profile=profile,
            records=RecordCollection(profile.key),
            discovery=state,
            engine=FieldDiscovery(state, profile.sample_values),
        )
