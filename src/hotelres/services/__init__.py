from .id_generator import IdGenerator
from .catalog_service import CatalogService
from .guest_service import GuestService
from .payment_service import PaymentProcessor, SimulatedPaymentProcessor
from .ledger_service import LedgerService
from .hotel_service import HotelSystem

__all__ = [
    "IdGenerator",
    "CatalogService",
    "GuestService",
    "PaymentProcessor",
    "SimulatedPaymentProcessor",
    "LedgerService",
    "HotelSystem",
]
