"""Custom exceptions for HotelRes."""
from __future__ import annotations


class HotelResError(Exception):
    """Base exception for all HotelRes errors."""
    pass


class ConfigurationError(HotelResError):
    """Raised when configuration is invalid or missing."""
    pass


class PersistenceError(HotelResError):
    """Raised when a snapshot cannot be written to or read from storage."""
    pass


class ReservationError(HotelResError):
    """Raised when reservation-specific domain errors occur."""
    pass


class ValidationError(ReservationError):
    """Raised for empty required fields, malformed dates or bad selections."""
    pass


class NotFoundError(ReservationError):
    """Raised when no reservation matches the given identifier."""
    pass


class InvalidDateRangeError(ReservationError):
    """Raised when check-out is not strictly after check-in."""
    pass


class RoomUnavailableError(ReservationError):
    """Raised when booking a room that is already held."""
    pass


class AlreadyCancelledError(ReservationError):
    """Raised when cancelling or paying for a cancelled reservation."""
    pass


class AlreadyPaidError(ReservationError):
    """Raised when paying for a reservation whose payment is completed."""

    def __init__(self, message: str, amount: float) -> None:
        super().__init__(message)
        self.amount = amount
