"""
ReviewStore against an in-memory Mongo collection.
"""

import pytest

from app.services.review_store import ReviewStore
from app.utilities.errors import StoreUnavailableError, ValidationError


async def test_create_returns_stored_document(store, collection):
    stored = await store.create({"name": "Alice", "rating": 5, "review": "Great!"})

    assert isinstance(stored["_id"], str)
    assert stored["name"] == "Alice"
    assert stored["imageUrl"] == ""
    assert await collection.count_documents({}) == 1


async def test_create_ignores_unknown_fields(store, collection):
    await store.create({"name": "A", "rating": 4, "review": "ok", "admin": True})

    doc = await collection.find_one({"name": "A"})
    assert "admin" not in doc


@pytest.mark.parametrize("rating", [2, 6])
async def test_create_rejects_out_of_range_rating(store, collection, rating):
    with pytest.raises(ValidationError):
        await store.create({"name": "Bob", "rating": rating, "review": "Meh"})
    assert await collection.count_documents({}) == 0


async def test_list_all_empty(store):
    assert await store.list_all() == []


async def test_list_all_keeps_insertion_order(store):
    await store.create({"name": "A", "rating": 3, "review": "first"})
    await store.create({"name": "B", "rating": 4, "review": "second"})

    reviews = await store.list_all()
    assert [r["name"] for r in reviews] == ["A", "B"]
    assert all(isinstance(r["_id"], str) for r in reviews)


async def test_create_store_down(unavailable_collection):
    store = ReviewStore(unavailable_collection)
    with pytest.raises(StoreUnavailableError):
        await store.create({"name": "A", "rating": 5, "review": "ok"})


async def test_create_validates_before_touching_store(unavailable_collection):
    store = ReviewStore(unavailable_collection)
    with pytest.raises(ValidationError):
        await store.create({"name": "A", "rating": 1, "review": "ok"})
    unavailable_collection.insert_one.assert_not_called()


async def test_list_all_store_down(unavailable_collection):
    store = ReviewStore(unavailable_collection)
    with pytest.raises(StoreUnavailableError):
        await store.list_all()
