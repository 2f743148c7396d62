# tests/test_crud.py
import pytest
from scraptrade import crud
from scraptrade.db import Base
from scraptrade.errors import StorageError


def _listing(**overrides):
    data = {"type": "sell", "category": "Copper", "rate": 450.0, "unit": "kg", "city": "Pune"}
    data.update(overrides)
    return data

def test_create_and_get(db):
    obj = crud.create_listing(db, _listing(user_name="A"))
    assert obj.id is not None
    fetched = crud.get_listing(db, obj.id)
    assert fetched.category == "Copper"
    assert fetched.user_name == "A"
    assert fetched.views == 0 and fetched.clicks == 0
    assert fetched.created_at is not None

def test_get_missing_returns_none(db):
    assert crud.get_listing(db, 12345) is None

def test_list_filters(db):
    crud.create_listing(db, _listing(city="Delhi"))
    crud.create_listing(db, _listing(type="buy", category="Iron", city="New Delhi"))
    crud.create_listing(db, _listing(city="Mumbai"))

    assert len(crud.list_listings(db)) == 3
    assert [listing.city for listing in crud.list_listings(db, {"type": "buy"})] == ["New Delhi"]
    assert len(crud.list_listings(db, {"category": "Copper"})) == 2
    assert len(crud.list_listings(db, {"category": "copper"})) == 0
    assert {listing.city for listing in crud.list_listings(db, {"city": "ELH"})} == {"Delhi", "New Delhi"}

def test_city_wildcards_are_literal(db):
    crud.create_listing(db, _listing(city="Delhi"))
    crud.create_listing(db, _listing(city="50% Road_Yard"))

    assert [listing.city for listing in crud.list_listings(db, {"city": "%"})] == ["50% Road_Yard"]
    assert [listing.city for listing in crud.list_listings(db, {"city": "_"})] == ["50% Road_Yard"]
    assert crud.list_listings(db, {"city": "D_lhi"}) == []
    assert crud.list_listings(db, {"city": "\\"}) == []

def test_list_newest_first(db):
    ids = [crud.create_listing(db, _listing(details=str(i))).id for i in range(4)]
    assert [listing.id for listing in crud.list_listings(db)] == list(reversed(ids))

def test_increment_counter(db):
    obj = crud.create_listing(db, _listing())
    assert crud.increment_counter(db, obj.id, "views") == 1
    assert crud.increment_counter(db, obj.id, "views") == 1
    assert crud.increment_counter(db, obj.id, "clicks") == 1
    fetched = crud.get_listing(db, obj.id)
    assert (fetched.views, fetched.clicks) == (2, 1)

def test_increment_unknown_id_hits_nothing(db):
    assert crud.increment_counter(db, 999, "views") == 0

def test_increment_rejects_other_columns(db):
    with pytest.raises(ValueError):
        crud.increment_counter(db, 1, "rate")

def test_storage_failure_raises_storage_error(db, engine):
    Base.metadata.drop_all(bind=engine)
    with pytest.raises(StorageError):
        crud.list_listings(db)
