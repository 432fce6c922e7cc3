from __future__ import annotations

import logging
from typing import Optional

from hotelres.adapters.base import SnapshotAdapter, ROOMS, GUESTS, RESERVATIONS
from hotelres.models import Guest, Room, Reservation
from hotelres.services.catalog_service import CatalogService
from hotelres.services.guest_service import GuestService
from hotelres.services.ledger_service import LedgerService
from hotelres.services.payment_service import PaymentProcessor

logger = logging.getLogger(__name__)


class HotelSystem:
    """
    Üç koleksiyonu (oda, misafir, rezervasyon) ve adapter'ı sahiplenen durum nesnesi.
    Süreç başında bir kez oluşturulur ve shell'e parametre olarak verilir.
    """

    def __init__(self, adapter: SnapshotAdapter, payment_processor: Optional[PaymentProcessor] = None):
        self.adapter = adapter
        self.catalog = CatalogService(adapter)
        self.guests = GuestService(adapter)
        self.ledger = LedgerService(adapter, self.catalog, payment_processor=payment_processor)

    def load(self) -> None:
        """
        Koleksiyonları yükler, oda listesi boşsa varsayılanları ekler ve
        rezervasyon referanslarını katalogdaki odalara bağlar.
        """
        rooms = self._load_records(ROOMS, Room.from_dict)
        guests = self._load_records(GUESTS, Guest.from_dict)
        self.catalog.rooms[:] = rooms
        self.guests.guests[:] = guests
        self.catalog.seed_if_empty()

        reservations = self._load_records(
            RESERVATIONS,
            lambda data: Reservation.from_dict(
                data,
                resolve_guest=self.guests.get_guest,
                resolve_room=self.catalog.get_room,
            ),
        )
        self.ledger.reservations[:] = reservations

        logger.info(
            f"Loaded {len(rooms)} room(s), {len(guests)} guest(s), {len(reservations)} reservation(s)."
        )
        self._mark_held_rooms()

    def _mark_held_rooms(self) -> None:
        """İptal edilmemiş bir rezervasyonun tuttuğu oda müsait görünemez."""
        changed = False
        for reservation in self.ledger.reservations:
            if reservation.is_cancelled():
                continue
            room = reservation.room
            if room.is_available:
                logger.warning(
                    f"Room {room.number} is held by {reservation.reservation_id}; marking it unavailable."
                )
                self.catalog.set_availability(room, False)
                changed = True
        if changed:
            self.catalog.persist()

    def _load_records(self, name, factory):
        records = []
        for item in self.adapter.load(name):
            if not isinstance(item, dict):
                logger.warning(f"Skipping malformed {name} record: {item!r}")
                continue
            try:
                records.append(factory(item))
            except (AttributeError, KeyError, TypeError, ValueError) as e:
                logger.warning(f"Skipping malformed {name} record: {e}")
        return records
