"""
Pytest configuration and fixtures.

This file provides pytest-specific configuration and fixtures.
For standard test utilities, see tests/__init__.py
"""

import pytest


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "db: marks tests as requiring database (deselect with '-m \"not db\"')"
    )


@pytest.fixture
def db_manager():
    """Fresh, empty store for one test."""
    from tests import make_db_manager

    manager = make_db_manager()
    yield manager
    manager.dispose()


@pytest.fixture
def store(db_manager):
    """EntityStore inside a unit of work that commits at teardown."""
    from database.uow import store_uow

    with store_uow(db_manager) as entity_store:
        yield entity_store


@pytest.fixture
def client():
    """TestClient bound to an app with its own empty store."""
    from fastapi.testclient import TestClient
    from tests import make_test_config
    from web.backend.app import create_app

    app = create_app(make_test_config())
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
