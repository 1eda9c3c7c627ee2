from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from colorengine import ColorRecord, parse


@pytest.fixture()
def client() -> TestClient:
    from main import app

    return TestClient(app)


@pytest.fixture()
def red() -> ColorRecord:
    return parse("red")


@pytest.fixture()
def invalid() -> ColorRecord:
    return parse("not-a-color")
