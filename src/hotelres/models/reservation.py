from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Any, Callable, Dict, Optional

from hotelres.models.guest import Guest
from hotelres.models.room import Room


class ReservationStatus(str, Enum):
    # PENDING ve COMPLETED modelde var, fakat hiçbir operasyon bu durumlara geçirmiyor.
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"
    COMPLETED = "COMPLETED"


class PaymentMethod(str, Enum):
    CREDIT_CARD = "Credit Card"
    DEBIT_CARD = "Debit Card"
    CASH = "Cash"


def count_nights(check_in: date, check_out: date) -> int:
    """Tam gün farkı; en az 1 gece."""
    return max(1, (check_out - check_in).days)


@dataclass
class Reservation:
    """Otel Rezervasyon Modeli."""

    # Zorunlu Alanlar
    reservation_id: str
    guest: Guest
    room: Room
    check_in: date
    check_out: date

    # Durum ve Ödeme Bilgileri
    status: ReservationStatus = field(default=ReservationStatus.PENDING)
    total_amount: float = field(default=0.0)
    payment_completed: bool = field(default=False)
    payment_method: Optional[PaymentMethod] = field(default=None)
    created_at: Optional[datetime] = field(default_factory=datetime.now)

    # ------------------------------------
    # Metodlar
    # ------------------------------------

    @property
    def nights(self) -> int:
        return count_nights(self.check_in, self.check_out)

    def is_pending(self) -> bool:
        return self.status == ReservationStatus.PENDING

    def is_confirmed(self) -> bool:
        return self.status == ReservationStatus.CONFIRMED

    def is_cancelled(self) -> bool:
        return self.status == ReservationStatus.CANCELLED

    def is_completed(self) -> bool:
        return self.status == ReservationStatus.COMPLETED

    def matches_id(self, reservation_id: str) -> bool:
        return self.reservation_id.lower() == reservation_id.strip().lower()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "reservation_id": self.reservation_id,
            "guest_id": self.guest.guest_id,
            "room_number": self.room.number,
            "guest": self.guest.to_dict(),
            "room": self.room.to_dict(),
            "check_in": self.check_in.isoformat(),
            "check_out": self.check_out.isoformat(),
            "status": self.status.value,
            "total_amount": self.total_amount,
            "payment_completed": self.payment_completed,
            "payment_method": self.payment_method.value if self.payment_method else None,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }

    @classmethod
    def from_dict(
        cls,
        data: Dict[str, Any],
        resolve_guest: Optional[Callable[[str], Optional[Guest]]] = None,
        resolve_room: Optional[Callable[[int], Optional[Room]]] = None,
    ) -> Reservation:
        """
        Snapshot sözlüğünden rezervasyon üretir. Misafir ve oda referansları
        verilen resolver'larla yüklenmiş kayıtlara bağlanır; bulunamazsa
        snapshot içindeki kopya kullanılır.
        """
        guest = resolve_guest(data["guest_id"]) if resolve_guest else None
        if guest is None:
            guest = Guest.from_dict(data["guest"])

        room = resolve_room(int(data["room_number"])) if resolve_room else None
        if room is None:
            room = Room.from_dict(data["room"])

        created_at = data.get("created_at")
        if created_at and isinstance(created_at, str):
            try:
                created_at = datetime.fromisoformat(created_at)
            except ValueError:
                created_at = None

        method = data.get("payment_method")

        return cls(
            reservation_id=data["reservation_id"],
            guest=guest,
            room=room,
            check_in=date.fromisoformat(data["check_in"]),
            check_out=date.fromisoformat(data["check_out"]),
            status=ReservationStatus(data["status"]),
            total_amount=float(data["total_amount"]),
            payment_completed=bool(data.get("payment_completed", False)),
            payment_method=PaymentMethod(method) if method else None,
            created_at=created_at,
        )

    def __str__(self) -> str:
        return (
            f"Reservation ID: {self.reservation_id}\n"
            f"Guest: {self.guest.name}\n"
            f"Room: {self.room.number} ({self.room.category.name})\n"
            f"Check-in: {self.check_in.isoformat()}\n"
            f"Check-out: {self.check_out.isoformat()}\n"
            f"Total: ${self.total_amount:.2f}\n"
            f"Status: {self.status.value}\n"
            f"Payment: {'Completed' if self.payment_completed else 'Pending'}"
        )
