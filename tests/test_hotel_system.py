"""
Tests for loading and reloading the full hotel state.
"""
from datetime import date

import pytest

from hotelres.adapters import JsonFileSnapshotAdapter
from hotelres.exceptions import RoomUnavailableError
from hotelres.models import PaymentMethod, ReservationStatus
from hotelres.services import HotelSystem, SimulatedPaymentProcessor


def new_system(adapter):
    system = HotelSystem(adapter, payment_processor=SimulatedPaymentProcessor(delay_seconds=0))
    system.load()
    return system


def test_round_trip_restores_equal_data(adapter):
    first = new_system(adapter)
    guest = first.guests.register("John Doe", "john@example.com", "+1234567890")
    booked = first.ledger.book(guest, first.catalog.get_room(203), date(2024, 12, 1), date(2024, 12, 4))
    first.ledger.pay(booked.reservation_id, PaymentMethod.CREDIT_CARD)

    second = new_system(adapter)

    assert second.catalog.list_all() == first.catalog.list_all()
    assert second.guests.list_all() == first.guests.list_all()
    assert second.ledger.list_all() == first.ledger.list_all()

    reloaded = second.ledger.find(booked.reservation_id)
    assert reloaded.total_amount == 600.0
    assert reloaded.payment_method == PaymentMethod.CREDIT_CARD
    assert reloaded.status == ReservationStatus.CONFIRMED


def test_reload_shares_room_and_guest_identity(adapter):
    first = new_system(adapter)
    guest = first.guests.register("John Doe", "john@example.com", "+1234567890")
    booked = first.ledger.book(guest, first.catalog.get_room(101), date(2024, 12, 1), date(2024, 12, 4))

    second = new_system(adapter)
    reloaded = second.ledger.find(booked.reservation_id)

    assert reloaded.room is second.catalog.get_room(101)
    assert reloaded.guest is second.guests.list_all()[0]

    # Yeniden yüklemeden sonra iptal, katalogdaki aynı odayı serbest bırakmalı
    second.ledger.cancel(booked.reservation_id)
    assert second.catalog.get_room(101).is_available is True
    assert new_system(adapter).catalog.get_room(101).is_available is True


def test_missing_reference_falls_back_to_inline_copy(adapter):
    first = new_system(adapter)
    guest = first.guests.register("John Doe", "john@example.com", "+1234567890")
    booked = first.ledger.book(guest, first.catalog.get_room(101), date(2024, 12, 1), date(2024, 12, 2))
    adapter.save("guests", [])

    second = new_system(adapter)

    assert second.ledger.find(booked.reservation_id).guest == guest


def test_malformed_records_are_skipped(adapter):
    adapter.save("rooms", [
        {"number": 101, "category": "STANDARD", "capacity": 2, "is_available": True},
        {"number": 999, "category": "PENTHOUSE", "capacity": 9},
    ])

    system = new_system(adapter)

    assert [room.number for room in system.catalog.list_all()] == [101]


def test_json_adapter_round_trip(tmp_path):
    adapter = JsonFileSnapshotAdapter(f"file://{tmp_path}")
    adapter.init()
    first = new_system(adapter)
    guest = first.guests.register("Jane", "jane@example.com", "555")
    first.ledger.book(guest, first.catalog.get_room(302), date(2025, 6, 1), date(2025, 6, 8))

    second = new_system(adapter)

    assert second.ledger.list_all() == first.ledger.list_all()
    assert second.catalog.count_available() == 12


def test_lost_rooms_snapshot_keeps_held_room_unavailable(adapter):
    first = new_system(adapter)
    guest = first.guests.register("John Doe", "john@example.com", "+1234567890")
    booked = first.ledger.book(guest, first.catalog.get_room(101), date(2024, 12, 1), date(2024, 12, 4))
    adapter.save("rooms", [])

    second = new_system(adapter)
    room_101 = second.catalog.get_room(101)
    reloaded = second.ledger.find(booked.reservation_id)

    assert len(second.catalog.list_all()) == 13
    assert reloaded.room is room_101
    assert room_101.is_available is False
    stored_101 = next(r for r in adapter.load("rooms") if r["number"] == 101)
    assert stored_101["is_available"] is False

    with pytest.raises(RoomUnavailableError):
        second.ledger.book(guest, room_101, date(2025, 1, 1), date(2025, 1, 2))

    second.ledger.cancel(booked.reservation_id)
    assert room_101.is_available is True


def test_cancelled_reservation_does_not_hold_room_after_reload(adapter):
    first = new_system(adapter)
    guest = first.guests.register("John Doe", "john@example.com", "+1234567890")
    booked = first.ledger.book(guest, first.catalog.get_room(102), date(2024, 12, 1), date(2024, 12, 4))
    first.ledger.cancel(booked.reservation_id)
    adapter.save("rooms", [])

    second = new_system(adapter)

    assert second.catalog.get_room(102).is_available is True


@pytest.mark.parametrize("name", ["rooms", "guests", "reservations"])
def test_non_dict_items_are_skipped(adapter, name):
    adapter.save(name, ["garbage", 42, None])

    system = new_system(adapter)

    assert len(system.catalog.list_all()) == 13
    assert system.guests.list_all() == []
    assert system.ledger.list_all() == []


def test_reservation_with_garbage_inline_guest_is_skipped(adapter):
    first = new_system(adapter)
    guest = first.guests.register("John Doe", "john@example.com", "+1234567890")
    first.ledger.book(guest, first.catalog.get_room(101), date(2024, 12, 1), date(2024, 12, 2))
    record = adapter.load("reservations")[0]
    record["guest_id"] = "G-missing"
    record["guest"] = "garbage"
    adapter.save("reservations", [record])

    assert new_system(adapter).ledger.list_all() == []


def test_stored_total_is_not_repriced(adapter):
    first = new_system(adapter)
    guest = first.guests.register("John Doe", "john@example.com", "+1234567890")
    booked = first.ledger.book(guest, first.catalog.get_room(101), date(2024, 12, 1), date(2024, 12, 4))
    record = adapter.load("reservations")[0]
    record["total_amount"] = 0.0
    adapter.save("reservations", [record])

    reloaded = new_system(adapter).ledger.find(booked.reservation_id)

    assert reloaded.total_amount == 0.0
