from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict


class RoomCategory(Enum):
    """Oda kategorisi ve gecelik taban fiyatı."""

    STANDARD = 100.0
    DELUXE = 200.0
    SUITE = 350.0

    @property
    def base_rate(self) -> float:
        return self.value

    @property
    def label(self) -> str:
        return self.name.capitalize()


@dataclass
class Room:
    """Otel odası. Numara benzersizdir, oda hiçbir zaman silinmez."""

    number: int
    category: RoomCategory
    capacity: int
    is_available: bool = field(default=True)

    @property
    def nightly_rate(self) -> float:
        return self.category.base_rate

    def to_dict(self) -> Dict[str, Any]:
        return {
            "number": self.number,
            "category": self.category.name,
            "capacity": self.capacity,
            "is_available": self.is_available,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Room:
        return cls(
            number=int(data["number"]),
            category=RoomCategory[data["category"]],
            capacity=int(data["capacity"]),
            is_available=bool(data.get("is_available", True)),
        )

    def __str__(self) -> str:
        return (
            f"Room {self.number} | {self.category.name} | ${self.nightly_rate:.2f}/night"
            f" | Capacity: {self.capacity} | {'Available' if self.is_available else 'Occupied'}"
        )
