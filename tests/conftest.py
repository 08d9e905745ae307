"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import Generator
from typing import Any
from unittest.mock import MagicMock

import pytest
import strawberry

from boardql.graphql.context import build_context
from boardql.store import InMemoryStore


@pytest.fixture
def store() -> InMemoryStore:
    """A store loaded with the demo users and boards."""
    return InMemoryStore.seeded()


@pytest.fixture
def empty_store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def context(store: InMemoryStore) -> dict[str, Any]:
    """GraphQL execution context backed by the seeded store."""
    return build_context(store)


@pytest.fixture
def mock_info(context: dict[str, Any]) -> MagicMock:
    """Create a mock GraphQL info object carrying the seeded store."""
    info = MagicMock(spec=strawberry.Info)
    info.context = context
    return info


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "slow: mark test as slow running")
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "unit: mark test as unit test")
