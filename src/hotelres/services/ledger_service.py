from __future__ import annotations

import logging
from datetime import date
from typing import List, Optional

from hotelres.adapters.base import SnapshotAdapter, RESERVATIONS, ROOMS
from hotelres.services.catalog_service import CatalogService
from hotelres.services.id_generator import IdGenerator
from hotelres.services.payment_service import PaymentProcessor, SimulatedPaymentProcessor
from hotelres.models import Guest, Room, Reservation, ReservationStatus, PaymentMethod, count_nights
from hotelres.exceptions import (
    AlreadyCancelledError,
    AlreadyPaidError,
    InvalidDateRangeError,
    NotFoundError,
    PersistenceError,
    RoomUnavailableError,
)

logger = logging.getLogger(__name__)


class LedgerService:
    """
    Rezervasyon defteri: oluşturma, fiyatlandırma, iptal ve ödeme kurallarını yönetir.
    Her değişiklikten sonra ilgili koleksiyonları adapter üzerinden kaydeder.
    Kayıt hatası PersistenceError olarak yukarı iletilir; bellekteki değişiklik geri alınmaz.
    """

    def __init__(self, adapter: SnapshotAdapter, catalog: CatalogService,
                 reservations: Optional[List[Reservation]] = None,
                 payment_processor: Optional[PaymentProcessor] = None,
                 id_generator: Optional[IdGenerator] = None):
        self.adapter = adapter
        self.catalog = catalog
        self.reservations: List[Reservation] = reservations if reservations is not None else []
        self.payment_processor = payment_processor or SimulatedPaymentProcessor()
        self.id_generator = id_generator or IdGenerator("RES")

    # ------------------------------------
    # Persistence
    # ------------------------------------
    def snapshot(self) -> List[dict]:
        return [reservation.to_dict() for reservation in self.reservations]

    def _persist(self, include_rooms: bool) -> None:
        snapshots = {RESERVATIONS: self.snapshot()}
        if include_rooms:
            snapshots[ROOMS] = self.catalog.snapshot()
        try:
            self.adapter.save_many(snapshots)
        except PersistenceError as e:
            logger.error(f"In-memory ledger state is ahead of storage: {e}")
            raise

    # ------------------------------------
    # Queries
    # ------------------------------------
    def list_all(self) -> List[Reservation]:
        return list(self.reservations)

    def find(self, reservation_id: str) -> Optional[Reservation]:
        """Boşlukları kırpar, büyük/küçük harfe duyarsız tam eşleşme arar."""
        for reservation in self.reservations:
            if reservation.matches_id(reservation_id):
                return reservation
        return None

    def get(self, reservation_id: str) -> Reservation:
        reservation = self.find(reservation_id)
        if reservation is None:
            raise NotFoundError(f"Reservation not found with ID: {reservation_id.strip()}")
        return reservation

    # ------------------------------------
    # Commands
    # ------------------------------------
    def book(self, guest: Guest, room: Room, check_in: date, check_out: date) -> Reservation:
        if check_out <= check_in:
            raise InvalidDateRangeError("Check-out must be after check-in date.")
        if not room.is_available:
            raise RoomUnavailableError(f"Room {room.number} is not available.")

        reservation = Reservation(
            reservation_id=self.id_generator.next_id(),
            guest=guest,
            room=room,
            check_in=check_in,
            check_out=check_out,
            status=ReservationStatus.CONFIRMED,
            total_amount=count_nights(check_in, check_out) * room.category.base_rate,
        )
        self.catalog.set_availability(room, False)
        self.reservations.append(reservation)
        logger.info(
            f"Reservation {reservation.reservation_id} created: room {room.number}, "
            f"{reservation.nights} night(s), ${reservation.total_amount:.2f}"
        )
        self._persist(include_rooms=True)
        return reservation

    def cancel(self, reservation_id: str, confirmed: bool = True) -> Optional[Reservation]:
        """
        Rezervasyonu iptal eder ve odayı tekrar müsait yapar.
        confirmed=False ise hiçbir değişiklik yapılmaz ve None döner.
        """
        reservation = self.get(reservation_id)
        if reservation.is_cancelled():
            raise AlreadyCancelledError("This reservation is already cancelled.")
        if not confirmed:
            logger.info(f"Cancellation of {reservation.reservation_id} aborted by caller.")
            return None

        reservation.status = ReservationStatus.CANCELLED
        self.catalog.set_availability(reservation.room, True)
        logger.info(f"Reservation {reservation.reservation_id} cancelled, room {reservation.room.number} released.")
        self._persist(include_rooms=True)
        return reservation

    def pay(self, reservation_id: str, method: PaymentMethod) -> Reservation:
        reservation = self.get(reservation_id)
        if reservation.is_cancelled():
            raise AlreadyCancelledError("Cannot process payment for cancelled reservation.")
        if reservation.payment_completed:
            raise AlreadyPaidError(
                "Payment already completed for this reservation.",
                amount=reservation.total_amount,
            )

        self.payment_processor.process(reservation, method)
        reservation.payment_completed = True
        reservation.payment_method = method
        logger.info(f"Payment completed for {reservation.reservation_id} via {method.value}.")
        self._persist(include_rooms=False)
        return reservation
