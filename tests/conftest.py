"""Test fixtures for the order api tests."""

import pytest
from fastapi.testclient import TestClient

from order_api.config import Settings
from order_api.database import create_connection, create_tables
from order_api.main import create_app
from order_api.services import OrderService


@pytest.fixture
def settings(tmp_path):
    """Settings pointing at a throwaway SQLite file."""
    return Settings(db_file=str(tmp_path / "orders.db"), log_level="DEBUG")


@pytest.fixture
def client(settings):
    """Test client with the application lifespan running.

    Yields:
        TestClient: Client bound to a fresh application and empty store.
    """
    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest.fixture
def conn():
    """In-memory database with the order tables created."""
    connection = create_connection(":memory:")
    create_tables(conn=connection)
    yield connection
    connection.close()


@pytest.fixture
def order_service(conn):
    """OrderService backed by the in-memory database."""
    return OrderService(conn)


@pytest.fixture
def alice_order():
    """The sample order body used across the API tests."""
    return {"customerName": "Alice", "items": [{"name": "Widget", "qty": 2}]}
