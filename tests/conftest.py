"""Shared fixtures for the test suite."""

import pytest

import simple_double


@pytest.fixture(autouse=True)
def _restore_default_registry():
    yield
    simple_double.restore()
