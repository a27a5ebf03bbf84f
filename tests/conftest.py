from __future__ import annotations

import os
from collections.abc import Iterator

os.environ.setdefault("SEED_DATA", "false")

import pytest
from fastapi.testclient import TestClient

from grubdash.main import app
from grubdash.models import Dish, Order
from grubdash.store import get_dish_store, reset_stores
from tests._helpers import make_order


@pytest.fixture(autouse=True)
def stores() -> Iterator[None]:
    """Fresh, empty collections for every test."""
    reset_stores()
    yield
    reset_stores()


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


@pytest.fixture
def dish() -> Dish:
    return get_dish_store().insert(
        Dish(id="d1", name="Pasta", description="Spaghetti", image_url="u", price=12)
    )


@pytest.fixture
def order() -> Order:
    return make_order()
