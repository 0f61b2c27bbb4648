"""
Tests for core/services/hotel_registry.py
Covers: add, find_all, find_by_id, update, partially_update, delete
"""
import pytest
from unittest.mock import MagicMock

from core.domain.hotel import Hotel
from core.domain.interfaces import EntityStore
from core.result import ErrorKind
from core.services.hotel_registry import HotelRegistry
from core.store import InMemoryStore

INVALID_NAME = "Hotel name must be non-null and non-empty"


def _hotel(**overrides):
    values = dict(
        id=1, name="Test Hotel", location="Location", phone="1234567890",
        email="test@example.com", star_rating=5, description="A nice hotel",
        room_count=10, facilities="Wi-Fi, Breakfast",
    )
    values.update(overrides)
    return Hotel(**values)


@pytest.fixture
def hotel():
    return _hotel()


@pytest.fixture
def store():
    return MagicMock(spec=EntityStore)


@pytest.fixture
def registry(store):
    return HotelRegistry(store)


class TestAddHotel:

    def test_add_success(self, registry, store, hotel):
        store.save.return_value = hotel
        result = registry.add(_hotel(id=None))
        assert result.success
        assert result.value.name == "Test Hotel"
        store.save.assert_called_once()

    def test_add_ignores_caller_id(self, registry, store, hotel):
        store.save.return_value = hotel
        registry.add(_hotel(id=42))
        saved_arg = store.save.call_args[0][0]
        assert saved_arg.id is None

    @pytest.mark.parametrize("name", [None, ""])
    def test_add_invalid_name(self, registry, store, name):
        result = registry.add(Hotel(name=name))
        assert result.error_kind == ErrorKind.INVALID_DATA
        assert result.message == INVALID_NAME
        store.save.assert_not_called()


class TestFindHotel:

    def test_find_all(self, registry, store, hotel):
        store.get_all.return_value = [hotel]
        result = registry.find_all()
        assert len(result.value) == 1
        assert result.value[0].name == "Test Hotel"

    def test_find_by_id(self, registry, store, hotel):
        store.get.return_value = hotel
        assert registry.find_by_id(1).value.id == 1

    def test_find_by_id_not_found(self, registry, store):
        store.get.return_value = None
        result = registry.find_by_id(1)
        assert result.error_kind == ErrorKind.NOT_FOUND
        assert result.message == "Hotel with id 1 not found"

    def test_store_failure_is_unexpected(self, registry, store):
        store.get_all.side_effect = RuntimeError("connection lost")
        result = registry.find_all()
        assert result.error_kind == ErrorKind.UNEXPECTED
        assert "connection lost" in result.message


class TestUpdateHotel:

    def test_update_success(self, registry, store, hotel):
        store.get.return_value = hotel
        store.save.side_effect = lambda h: h
        updated = _hotel(id=None, name="Updated Hotel", location="Updated Location",
                         phone="0987654321", star_rating=4)
        result = registry.update(1, updated)
        assert result.value.name == "Updated Hotel"
        assert result.value.id == 1
        store.save.assert_called_once()

    def test_update_is_full_replacement(self, registry, store, hotel):
        store.get.return_value = hotel
        store.save.side_effect = lambda h: h
        result = registry.update(1, Hotel(name="Only Name"))
        assert result.value.location is None
        assert result.value.facilities is None

    def test_update_not_found(self, registry, store, hotel):
        store.get.return_value = None
        result = registry.update(1, hotel)
        assert result.error_kind == ErrorKind.NOT_FOUND
        assert result.message == "Hotel with id 1 not found"
        store.save.assert_not_called()

    @pytest.mark.parametrize("name", [None, ""])
    def test_update_invalid_name(self, registry, store, hotel, name):
        store.get.return_value = hotel
        result = registry.update(1, Hotel(name=name))
        assert result.error_kind == ErrorKind.INVALID_DATA
        assert result.message == INVALID_NAME
        store.save.assert_not_called()


class TestPartiallyUpdateHotel:

    def test_partial_update_success(self, registry, store, hotel):
        store.get.return_value = hotel
        store.save.side_effect = lambda h: h
        result = registry.partially_update(1, {"name": "Partially Updated Hotel"})
        assert result.value.name == "Partially Updated Hotel"
        assert result.value.location == "Location"
        store.save.assert_called_once()

    def test_partial_update_not_found(self, registry, store, hotel):
        store.get.return_value = None
        result = registry.partially_update(1, {"name": "x"})
        assert result.error_kind == ErrorKind.NOT_FOUND
        assert result.message == "Hotel with id 1 not found"
        store.save.assert_not_called()

    @pytest.mark.parametrize("name", [None, ""])
    def test_partial_update_invalid_name(self, registry, store, hotel, name):
        store.get.return_value = hotel
        result = registry.partially_update(1, {"name": name})
        assert result.error_kind == ErrorKind.INVALID_DATA
        assert result.message == INVALID_NAME
        assert hotel.name == "Test Hotel"
        store.save.assert_not_called()

    def test_empty_patch_persists_unchanged(self, registry, store, hotel):
        store.get.return_value = hotel
        store.save.side_effect = lambda h: h
        result = registry.partially_update(1, {})
        assert result.value == hotel
        store.save.assert_called_once_with(hotel)


class TestDeleteHotel:

    def test_delete_success(self, registry, store, hotel):
        store.get.return_value = hotel
        result = registry.delete(1)
        assert result.success
        store.delete.assert_called_once_with(hotel)

    def test_delete_not_found(self, registry, store):
        store.get.return_value = None
        result = registry.delete(1)
        assert result.error_kind == ErrorKind.NOT_FOUND
        assert result.message == "Hotel with id 1 not found"
        store.delete.assert_not_called()


class TestHotelLifecycle:
    """nonexistent → persisted → mutated → deleted"""

    def test_lifecycle_in_memory(self):
        registry = HotelRegistry(InMemoryStore())
        created = registry.add(Hotel(name="Test Hotel")).value
        assert created.id == 1

        registry.partially_update(1, {"star_rating": 3})
        registry.partially_update(1, {"name": ""})
        stored = registry.find_by_id(1).value
        assert stored.name == "Test Hotel"
        assert stored.star_rating == 3

        assert registry.delete(1).success
        assert registry.find_by_id(1).error_kind == ErrorKind.NOT_FOUND
        assert registry.partially_update(1, {}).error_kind == ErrorKind.NOT_FOUND
