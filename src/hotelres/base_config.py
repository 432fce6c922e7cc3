"""
Base configuration abstractions for HotelRes.
"""
from __future__ import annotations

from abc import ABC, abstractmethod

from hotelres.adapters.base import SnapshotAdapter
from hotelres.services import HotelSystem, SimulatedPaymentProcessor


class HotelResConfig(ABC):
    """Abstract configuration contract for storage, payment and shell settings."""

    @abstractmethod
    def get_database_url(self) -> str: pass

    @abstractmethod
    def get_payment_delay_seconds(self) -> float: pass

    @abstractmethod
    def create_adapter(self) -> SnapshotAdapter: pass

    def get_hotel_display_name(self) -> str: return "Hotel Reservation System"
    def get_log_level(self) -> str: return "INFO"

    def create_system(self) -> HotelSystem:
        """Adapter ve ödeme işlemcisiyle HotelSystem kurar ve verileri yükler."""
        system = HotelSystem(
            adapter=self.create_adapter(),
            payment_processor=SimulatedPaymentProcessor(self.get_payment_delay_seconds()),
        )
        system.load()
        return system
