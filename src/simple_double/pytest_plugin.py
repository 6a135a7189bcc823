"""pytest fixtures that undo mocks at test teardown."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from simple_double.doubles.registry import DEFAULT_REGISTRY, MockRegistry


@pytest.fixture
def mock_registry() -> Iterator[MockRegistry]:
    """Provide an isolated registry restored when the test finishes."""

    registry = MockRegistry()
    yield registry
    registry.restore()


@pytest.fixture
def restore_mocks() -> Iterator[MockRegistry]:
    """Restore everything mocked through the module-level helpers after the test."""

    yield DEFAULT_REGISTRY
    DEFAULT_REGISTRY.restore()
