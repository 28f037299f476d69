"""
Shared pytest fixtures: an in-memory stand-in for the Supabase query builder.
"""
import pytest
from fastapi.testclient import TestClient
from postgrest.exceptions import APIError

from vahaan_api.database import get_store
from vahaan_api.main import app


class FakeResponse:
    def __init__(self, data):
        self.data = data


class FakeQuery:
    """Supports the select/eq/single/execute chain used by the lookup."""

    def __init__(self, store, table_name):
        self.store = store
        self.table_name = table_name
        self.filters = []

    def select(self, columns):
        return self

    def eq(self, column, value):
        self.filters.append((column, value))
        return self

    def single(self):
        return self

    def execute(self):
        self.store.calls.append((self.table_name, tuple(self.filters)))
        if self.store.error is not None:
            raise self.store.error
        rows = [
            row for row in self.store.tables.get(self.table_name, [])
            if all(str(row.get(column)) == str(value) for column, value in self.filters)
        ]
        if len(rows) != 1:
            raise APIError({
                "message": "JSON object requested, multiple (or no) rows returned",
                "code": "PGRST116",
                "details": f"The result contains {len(rows)} rows",
                "hint": None,
            })
        return FakeResponse(rows[0])


class FakeStore:
    def __init__(self, tables=None, error=None):
        self.tables = tables or {}
        self.error = error
        self.calls = []

    def table(self, table_name):
        return FakeQuery(self, table_name)


CAR_ROW = {
    "id": 42,
    "year": 2019,
    "brand": "Honda",
    "model": "City",
    "variant": "VX",
    "fuel_type": "Petrol",
    "kilometers_driven": 45000,
    "sell_price": 650000,
    "seller_location_city": "Pune",
    "transmission": "Manual",
    "photos": {
        "exterior": ["https://cdn.example.com/city-front.jpg", "https://cdn.example.com/city-rear.jpg"],
        "interior": ["https://cdn.example.com/city-seats.jpg"],
    },
}

BIKE_ROW = {
    "id": "b-7",
    "year": 2021,
    "brand": "Royal Enfield",
    "model": "Classic 350",
    "fuel_type": "Petrol",
    "photos": {"dashboard": ["https://cdn.example.com/classic-dash.jpg"]},
}


@pytest.fixture
def store():
    return FakeStore({
        "car_seller_listings": [CAR_ROW],
        "bike_seller_listings": [BIKE_ROW],
    })


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()
