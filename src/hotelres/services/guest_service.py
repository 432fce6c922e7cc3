from __future__ import annotations

import logging
from typing import List, Optional

from pydantic import ValidationError as PydanticValidationError

from hotelres.adapters.base import SnapshotAdapter, GUESTS
from hotelres.exceptions import ValidationError
from hotelres.models import Guest, GuestInput
from hotelres.services.id_generator import IdGenerator

logger = logging.getLogger(__name__)


class GuestService:
    """Misafir dizini. Liste yalnızca sonuna ekleme ile büyür."""

    def __init__(self, adapter: SnapshotAdapter, guests: Optional[List[Guest]] = None,
                 id_generator: Optional[IdGenerator] = None):
        self.adapter = adapter
        self.guests: List[Guest] = guests if guests is not None else []
        self.id_generator = id_generator or IdGenerator("G")

    def list_all(self) -> List[Guest]:
        return list(self.guests)

    def get_guest(self, guest_id: str) -> Optional[Guest]:
        wanted = guest_id.strip().lower()
        for guest in self.guests:
            if guest.guest_id.lower() == wanted:
                return guest
        return None

    def snapshot(self) -> List[dict]:
        return [guest.to_dict() for guest in self.guests]

    def register(self, name: str, email: str, phone: str) -> Guest:
        """Yeni misafiri doğrular, listeye ekler ve kaydeder."""
        try:
            data = GuestInput(name=name, email=email, phone=phone)
        except PydanticValidationError as e:
            message = e.errors()[0]["msg"].removeprefix("Value error, ")
            raise ValidationError(message) from e

        guest = Guest(
            guest_id=self.id_generator.next_id(),
            name=data.name,
            email=data.email,
            phone=data.phone,
        )
        self.guests.append(guest)
        logger.info(f"Guest registered: {guest.guest_id}")
        self.adapter.save(GUESTS, self.snapshot())
        return guest
