from __future__ import annotations

from typing import Protocol, runtime_checkable, Any, Dict, List, Mapping

ROOMS = "rooms"
GUESTS = "guests"
RESERVATIONS = "reservations"

COLLECTIONS = (ROOMS, GUESTS, RESERVATIONS)


@runtime_checkable
class SnapshotAdapter(Protocol):
    # lifecycle
    def init(self) -> None: ...

    # snapshots
    def save(self, name: str, items: List[Dict[str, Any]]) -> None: ...
    def save_many(self, snapshots: Mapping[str, List[Dict[str, Any]]]) -> None: ...
    def load(self, name: str) -> List[Dict[str, Any]]: ...
