"""Shared test fixtures."""
from __future__ import annotations

import math

import pytest
from fastapi.testclient import TestClient

from project_zero.app import create_app
from project_zero.pagination import Paginator


def flatten(paginator: Paginator) -> list:
    return [item for page in paginator.pages for item in page]


def expected_page_count(total: int, size: int) -> int:
    return math.ceil(total / size)


@pytest.fixture
def five_items() -> list[int]:
    return [1, 2, 3, 4, 5]


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app(), raise_server_exceptions=False)
