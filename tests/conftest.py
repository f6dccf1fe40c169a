"""Shared test fixtures."""

import json

import pytest
from fastapi.testclient import TestClient

from src.config import settings
from src.main import app


def ammo_record(item_id: str, caliber: str, damage: int = 50) -> dict:
    return {"_id": item_id, "_props": {"Caliber": caliber, "Damage": damage}}


def magazine_record(item_id: str, whitelist: list) -> dict:
    return {
        "_id": item_id,
        "_props": {"Cartridges": [{"_props": {"filters": [{"Filter": whitelist}]}}]},
    }


@pytest.fixture()
def scenario_catalog() -> dict:
    """A1, A2 (구경 X), A3 (구경 Y), 탄창 M1 = [A1]"""
    return {
        "A1": ammo_record("A1", "X"),
        "A2": ammo_record("A2", "X"),
        "A3": ammo_record("A3", "Y"),
        "M1": magazine_record("M1", ["A1"]),
    }


@pytest.fixture()
def catalog_file(tmp_path, scenario_catalog):
    path = tmp_path / "items.json"
    path.write_text(json.dumps(scenario_catalog), encoding="utf-8")
    return path


@pytest.fixture()
def client(monkeypatch, catalog_file) -> TestClient:
    """lifespan까지 실행된 TestClient (임시 카탈로그 사용)."""
    monkeypatch.setattr(settings, "CATALOG_PATH", str(catalog_file))
    monkeypatch.setattr(settings, "AMMO_COMPAT_ENABLED", True)
    with TestClient(app) as c:
        yield c
