from .base import SnapshotAdapter, ROOMS, GUESTS, RESERVATIONS, COLLECTIONS
from .sqlite_adapter import SQLiteSnapshotAdapter
from .json_adapter import JsonFileSnapshotAdapter

__all__ = [
    "SnapshotAdapter",
    "SQLiteSnapshotAdapter",
    "JsonFileSnapshotAdapter",
    "ROOMS",
    "GUESTS",
    "RESERVATIONS",
    "COLLECTIONS",
]
