import asyncio
import json

import pytest
from fastapi.testclient import TestClient
from pydantic import ValidationError as PydanticValidationError

import grubdash.main as main
from grubdash import schemas
from grubdash.core.config import EnvironmentMode, Settings
from grubdash.core.exceptions import ValidationError
from grubdash.main import app
from grubdash.store import get_dish_store


def test_root(client: TestClient) -> None:
    r = client.get("/")

    assert r.status_code == 200
    assert r.json()["dishes"] == "/dishes"


def test_health_reports_collection_sizes(client: TestClient, dish, order) -> None:
    r = client.get("/health")

    assert r.status_code == 200
    data = r.json()
    assert data["status"] == "operational"
    assert data["dishes"] == 1
    assert data["orders"] == 1


def test_unknown_path(client: TestClient) -> None:
    r = client.get("/menus")

    assert r.status_code == 404
    assert r.json() == {"status": 404, "message": "Path not found: /menus"}


def test_method_not_allowed(client: TestClient) -> None:
    r = client.delete("/dishes")

    assert r.status_code == 405
    assert r.json() == {"status": 405, "message": "DELETE not allowed for /dishes"}


def test_lifespan_seeds_empty_stores(monkeypatch) -> None:
    monkeypatch.setattr(main.settings, "seed_data", True)

    with TestClient(app) as client:
        assert len(client.get("/dishes").json()["data"]) == len(get_dish_store()) > 0


def test_lifespan_without_seed(monkeypatch) -> None:
    monkeypatch.setattr(main.settings, "seed_data", False)

    with TestClient(app) as client:
        assert client.get("/dishes").json() == {"data": []}


def test_settings_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("ENV_MODE", "PRODUCTION")
    monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test")
    monkeypatch.setenv("SEED_DATA", "false")

    settings = Settings()

    assert settings.env_mode == EnvironmentMode.PRODUCTION
    assert settings.is_production
    assert settings.cors_origins_list == ["http://a.test", "http://b.test"]
    assert settings.seed_data is False


def test_production_mode_still_seeds_when_enabled(monkeypatch) -> None:
    monkeypatch.setattr(main.settings, "env_mode", EnvironmentMode.PRODUCTION)
    monkeypatch.setattr(main.settings, "seed_data", True)

    with TestClient(app) as client:
        assert len(client.get("/dishes").json()["data"]) > 0
        assert client.get("/").json()["environment"] == "production"


@pytest.mark.parametrize(("debug", "message"), [(True, "boom"), (False, "An unexpected error occurred")])
def test_debug_controls_error_detail(monkeypatch, debug: bool, message: str) -> None:
    monkeypatch.setattr(main.settings, "debug", debug)

    r = asyncio.run(main.global_exception_handler(None, RuntimeError("boom")))

    assert r.status_code == 500
    assert json.loads(r.body) == {"status": 500, "message": message}


def test_resource_error_body_comes_from_the_error() -> None:
    r = asyncio.run(main.resource_error_handler(None, ValidationError("teapot", status_code=418)))

    assert r.status_code == 418
    assert json.loads(r.body) == ValidationError("teapot", status_code=418).to_dict()


def test_dish_schema_keeps_integer_prices() -> None:
    fields = {"id": "d1", "name": "Pasta", "description": "x", "image_url": "u"}

    assert type(schemas.Dish(**fields, price=12).price) is int
    assert schemas.Dish(**fields, price=12.5).price == 12.5
    with pytest.raises(PydanticValidationError):
        schemas.Dish(**fields, price=0)


def test_openapi_document_builds(client: TestClient) -> None:
    r = client.get("/openapi.json")

    assert r.status_code == 200
    assert "/dishes/{dish_id}" in r.json()["paths"]
