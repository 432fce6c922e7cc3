"""
Tests for the catalog store, guest directory and id generation.
"""
import pytest

from hotelres.exceptions import ValidationError
from hotelres.models import RoomCategory
from hotelres.services import CatalogService, GuestService, IdGenerator


# ============================================================================
# CatalogService
# ============================================================================

class TestCatalogService:
    """Test suite for the room catalog."""

    def test_seeded_inventory(self, system):
        rooms = system.catalog.list_all()
        numbers = [room.number for room in rooms]

        assert numbers == [101, 102, 103, 104, 105, 201, 202, 203, 204, 205, 301, 302, 303]
        assert all(room.is_available for room in rooms)
        assert {room.capacity for room in rooms if room.category == RoomCategory.SUITE} == {4}

    def test_seeding_persists_immediately(self, system, adapter):
        assert len(adapter.load("rooms")) == 13

    def test_seed_only_when_empty(self, adapter):
        catalog = CatalogService(adapter)
        assert catalog.seed_if_empty() is True
        assert catalog.seed_if_empty() is False
        assert len(catalog.list_all()) == 13

    def test_list_available_filters_by_category(self, system):
        system.catalog.set_availability(system.catalog.get_room(201), False)

        deluxe = system.catalog.list_available(RoomCategory.DELUXE)

        assert [room.number for room in deluxe] == [202, 203, 204, 205]
        assert system.catalog.count_available() == 12

    def test_get_unknown_room(self, system):
        assert system.catalog.get_room(999) is None


# ============================================================================
# GuestService
# ============================================================================

class TestGuestService:
    """Test suite for guest registration."""

    def test_register_trims_and_persists(self, adapter):
        guests = GuestService(adapter)

        guest = guests.register("  Jane Roe ", "jane@example.com ", " 555-0100")

        assert guest.name == "Jane Roe"
        assert guest.email == "jane@example.com"
        assert guest.phone == "555-0100"
        assert guest.guest_id.startswith("G")
        assert adapter.load("guests") == [guest.to_dict()]

    @pytest.mark.parametrize("name,email,phone", [
        ("Jane", "", "555"),
        ("   ", "jane@example.com", "555"),
        ("Jane", "jane@example.com", "\t"),
    ])
    def test_empty_field_is_rejected(self, adapter, name, email, phone):
        guests = GuestService(adapter)

        with pytest.raises(ValidationError) as excinfo:
            guests.register(name, email, phone)

        assert "cannot be empty" in str(excinfo.value)
        assert guests.list_all() == []
        assert adapter.load("guests") == []

    def test_list_keeps_insertion_order(self, adapter):
        guests = GuestService(adapter)
        first = guests.register("A", "a@example.com", "1")
        second = guests.register("B", "b@example.com", "2")

        assert guests.list_all() == [first, second]
        assert guests.get_guest(second.guest_id.lower()) is second


# ============================================================================
# IdGenerator
# ============================================================================

def test_id_generator_is_strictly_increasing():
    ticks = iter([5, 5, 4, 10])
    gen = IdGenerator("RES", clock=lambda: next(ticks))

    assert [gen.next_id() for _ in range(4)] == ["RES5", "RES6", "RES7", "RES10"]
