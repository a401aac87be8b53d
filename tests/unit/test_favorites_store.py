# -*- coding: utf-8 -*-
"""
Тесты для core/db/favorites_store.py
"""
import pytest

from config.app_config import MAX_FAVORITES
from core.db.favorites_store import FavoritesStore
from core.models.location import Location
from core.utils.error_handler import CapacityExceededError, IndexOutOfBoundsError, InvalidInputError

LONDON = Location("London", "51.5072", "-0.1276")
PARIS = Location("Paris", "48.8588897", "2.3200410")
TOKYO = Location("Tokyo", "35.6828387", "139.7594549")
OSLO = Location("Oslo", "59.9133301", "10.7389701")


def _full_store():
    store = FavoritesStore()
    for location in (LONDON, PARIS, TOKYO):
        store.add(location)
    return store


def test_default_capacity_is_three():
    assert MAX_FAVORITES == 3
    assert FavoritesStore().capacity == 3


def test_add_preserves_insertion_order():
    store = FavoritesStore()
    assert store.is_empty
    store.add(LONDON)
    store.add(PARIS)

    assert store.list() == [LONDON, PARIS]
    assert len(store) == 2
    assert not store.is_full
    print("✅ test_add_preserves_insertion_order passed")


def test_fourth_add_fails_and_list_unchanged():
    store = _full_store()
    assert store.is_full

    with pytest.raises(CapacityExceededError) as exc_info:
        store.add(OSLO)

    assert exc_info.value.capacity == 3
    assert store.list() == [LONDON, PARIS, TOKYO]
    print("✅ test_fourth_add_fails_and_list_unchanged passed")


def test_delete_middle_keeps_order():
    store = _full_store()

    removed = store.delete_at("2")

    assert removed == PARIS
    assert store.list() == [LONDON, TOKYO]
    print("✅ test_delete_middle_keeps_order passed")


@pytest.mark.parametrize("position", ["0", "4", "00", "999"])
def test_delete_out_of_bounds(position):
    store = _full_store()
    with pytest.raises(IndexOutOfBoundsError):
        store.delete_at(position)
    assert len(store) == 3


@pytest.mark.parametrize("position", ["abc", "", "-1", "+2", "1.0", " 1", "2 "])
def test_delete_invalid_input(position):
    store = _full_store()
    with pytest.raises(InvalidInputError):
        store.delete_at(position)
    assert len(store) == 3


def test_delete_from_empty_store_is_out_of_bounds():
    with pytest.raises(IndexOutOfBoundsError):
        FavoritesStore().delete_at("1")


def test_list_returns_a_copy():
    store = _full_store()
    snapshot = store.list()
    snapshot.clear()
    assert len(store) == 3


def test_custom_capacity():
    store = FavoritesStore(capacity=1)
    store.add(LONDON)
    with pytest.raises(CapacityExceededError):
        store.add(PARIS)
    with pytest.raises(ValueError):
        FavoritesStore(capacity=0)


def test_location_is_immutable():
    with pytest.raises(AttributeError):
        LONDON.lat = "0"
    assert LONDON.coordinates == ("51.5072", "-0.1276")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
