from __future__ import annotations

import logging
from typing import List, Optional

from hotelres.adapters.base import SnapshotAdapter, ROOMS
from hotelres.models import Room, RoomCategory

logger = logging.getLogger(__name__)

# (kategori, ilk numara, adet, kapasite)
DEFAULT_INVENTORY = (
    (RoomCategory.STANDARD, 101, 5, 2),
    (RoomCategory.DELUXE, 201, 5, 3),
    (RoomCategory.SUITE, 301, 3, 4),
)


def build_default_rooms() -> List[Room]:
    rooms = []
    for category, first_number, count, capacity in DEFAULT_INVENTORY:
        for offset in range(count):
            rooms.append(Room(number=first_number + offset, category=category, capacity=capacity))
    return rooms


class CatalogService:
    """Sabit oda envanterini ve odaların anlık müsaitlik bilgisini tutar."""

    def __init__(self, adapter: SnapshotAdapter, rooms: Optional[List[Room]] = None):
        self.adapter = adapter
        self.rooms: List[Room] = rooms if rooms is not None else []

    def list_all(self) -> List[Room]:
        return list(self.rooms)

    def list_available(self, category: Optional[RoomCategory] = None) -> List[Room]:
        return [
            room for room in self.rooms
            if room.is_available and (category is None or room.category == category)
        ]

    def count_available(self) -> int:
        return sum(1 for room in self.rooms if room.is_available)

    def get_room(self, number: int) -> Optional[Room]:
        for room in self.rooms:
            if room.number == number:
                return room
        return None

    def set_availability(self, room: Room, available: bool) -> None:
        room.is_available = available

    def snapshot(self) -> List[dict]:
        return [room.to_dict() for room in self.rooms]

    def persist(self) -> None:
        self.adapter.save(ROOMS, self.snapshot())

    def seed_if_empty(self) -> bool:
        """Envanter boşsa varsayılan odaları ekler ve hemen kaydeder."""
        if self.rooms:
            return False
        self.rooms.extend(build_default_rooms())
        self.persist()
        logger.info(f"Hotel rooms initialized successfully ({len(self.rooms)} rooms).")
        return True
