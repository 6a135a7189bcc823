"""Spies, stubs and reversible mocks for test code."""

from simple_double.doubles.recorder import Double, spy
from simple_double.doubles.registry import DEFAULT_REGISTRY, MockRegistry, mock, restore
from simple_double.doubles.responses import Stub, stub
from simple_double.doubles.types import CallRecord, MockEntry, ResponseKind, ResponseSpec

__all__ = [
    "DEFAULT_REGISTRY",
    "CallRecord",
    "Double",
    "MockEntry",
    "MockRegistry",
    "ResponseKind",
    "ResponseSpec",
    "Stub",
    "mock",
    "restore",
    "spy",
    "stub",
]
