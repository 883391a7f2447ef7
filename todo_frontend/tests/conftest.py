from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from src.web.main import create_app
from src.web.settings import get_settings
from src.web.store import InMemoryTodoStore


@pytest.fixture()
def store() -> InMemoryTodoStore:
    return InMemoryTodoStore()


@pytest.fixture()
def settings():
    return get_settings()


@pytest.fixture()
def client(store: InMemoryTodoStore, settings) -> TestClient:
    return TestClient(create_app(settings=settings, store=store))
