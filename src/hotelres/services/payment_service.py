from __future__ import annotations

import logging
import time
from typing import Protocol, runtime_checkable

from hotelres.models import PaymentMethod, Reservation

logger = logging.getLogger(__name__)


@runtime_checkable
class PaymentProcessor(Protocol):
    def process(self, reservation: Reservation, method: PaymentMethod) -> None: ...


class SimulatedPaymentProcessor:
    """Gerçek bir ödeme sağlayıcısı yok; sabit bir bekleme ile işlemi simüle eder."""

    def __init__(self, delay_seconds: float = 1.5):
        self.delay_seconds = delay_seconds

    def process(self, reservation: Reservation, method: PaymentMethod) -> None:
        logger.info(
            f"Processing payment of ${reservation.total_amount:.2f} "
            f"for {reservation.reservation_id} via {method.value}"
        )
        if self.delay_seconds > 0:
            time.sleep(self.delay_seconds)
