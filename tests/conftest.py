"""Pytest configuration and shared fixtures."""

import pytest
from fastapi.testclient import TestClient

from haci.clients.memory import MemoryClient
from haci.clients.web import WebClient
from haci.main import create_app


@pytest.fixture
def memory_client():
    """Standard-mode in-memory client."""
    return MemoryClient(assign_first_address=False, create_from="pytest")


@pytest.fixture
def first_address_client():
    """In-memory client that hands out the supernet's network address first."""
    return MemoryClient(assign_first_address=True, create_from="pytest")


@pytest.fixture
def roots():
    return {}


@pytest.fixture
def stub_client(roots):
    """TestClient wrapping the RESTWrapper stub app."""
    with TestClient(create_app(roots)) as client:
        yield client


@pytest.fixture
def web_client(stub_client):
    """WebClient talking to the stub app over the TestClient transport."""
    return WebClient(url="http://testserver/", root="test", http_client=stub_client)
