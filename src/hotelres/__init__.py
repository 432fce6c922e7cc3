"""HotelRes - single-user hotel reservation manager"""

__version__ = "0.1.0"

# Exceptions
from .exceptions import (
    HotelResError,
    ConfigurationError,
    PersistenceError,
    ReservationError,
    ValidationError,
    NotFoundError,
    InvalidDateRangeError,
    RoomUnavailableError,
    AlreadyCancelledError,
    AlreadyPaidError,
)

# Models
from .models import (
    Room,
    RoomCategory,
    Guest,
    Reservation,
    ReservationStatus,
    PaymentMethod,
)

# Adapters
from .adapters import SnapshotAdapter, SQLiteSnapshotAdapter, JsonFileSnapshotAdapter

# Services
from .services import HotelSystem, CatalogService, GuestService, LedgerService

# Config
from .base_config import HotelResConfig
from .config import get_config, set_config

__all__ = [
    # Version
    "__version__",

    # Exceptions
    "HotelResError",
    "ConfigurationError",
    "PersistenceError",
    "ReservationError",
    "ValidationError",
    "NotFoundError",
    "InvalidDateRangeError",
    "RoomUnavailableError",
    "AlreadyCancelledError",
    "AlreadyPaidError",

    # Models
    "Room",
    "RoomCategory",
    "Guest",
    "Reservation",
    "ReservationStatus",
    "PaymentMethod",

    # Adapters
    "SnapshotAdapter",
    "SQLiteSnapshotAdapter",
    "JsonFileSnapshotAdapter",

    # Services
    "HotelSystem",
    "CatalogService",
    "GuestService",
    "LedgerService",

    # Config
    "HotelResConfig",
    "get_config",
    "set_config",
]
