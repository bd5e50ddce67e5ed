"""
Pytest configuration and fixtures for the configuration registry tests.

This module provides shared fixtures and configuration for all tests.
"""
from dataclasses import dataclass

import pytest

import zirv_config.registry as registry_module
from zirv_config.store import ConfigStore


@dataclass
class DummyConfig:
    """A dummy configuration block for testing."""
    port: int
    host: str


@pytest.fixture(autouse=True)
def fresh_registry(monkeypatch):
    """Give every test an uninitialized global registry."""
    monkeypatch.setattr(registry_module, "_global_store", None)
    yield


@pytest.fixture
def store():
    """Provide an empty ConfigStore."""
    return ConfigStore()


@pytest.fixture
def server_store(store):
    """Provide a store with the server block registered."""
    store.register("server", DummyConfig(port=3000, host="0.0.0.0"))
    return store
