"""Reversible attribute substitution (mock/restore)."""

from __future__ import annotations

import inspect
from typing import Any

from simple_double.doubles.logging_utils import DEFAULT_LOGGER, LoggingManager
from simple_double.doubles.recorder import Double
from simple_double.doubles.responses import Stub
from simple_double.doubles.types import MockEntry, SubstitutionKind

# Distinguishes ``mock(obj, name)`` from ``mock(obj, name, None)``.
_OMITTED: Any = object()


def _has_own_attribute(target: Any, name: str) -> bool:
    try:
        return name in vars(target)
    except TypeError:
        return hasattr(target, name)


def _own_attribute(target: Any, name: str) -> Any:
    try:
        return vars(target)[name]
    except TypeError:
        return getattr(target, name)


def _describe(target: Any) -> str:
    if isinstance(target, type) or inspect.ismodule(target):
        return target.__name__
    return f"<{type(target).__name__} instance>"


class MockRegistry:
    """Ledger of attribute substitutions that ``restore`` undoes in reverse.

    The registry references targets and original values only while a mock is
    outstanding; ``restore`` drops every reference it held.
    """

    def __init__(self, *, logger: LoggingManager = DEFAULT_LOGGER) -> None:
        self.logger = logger
        self._entries: list[MockEntry] = []

    @property
    def entries(self) -> tuple[MockEntry, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def mock(self, target: Any, name: str, value: Any = _OMITTED) -> Any:
        """Replace ``target.name`` and remember how to put it back.

        A callable ``value`` is installed wrapped in a spy, any other value is
        installed as is. Without ``value`` a stub is installed that falls back
        to the current (possibly inherited) callable until responses are
        queued on it. Returns whatever was installed.
        """
        had_own = _has_own_attribute(target, name)
        original = _own_attribute(target, name) if had_own else None

        replacement, kind = self._build_replacement(target, name, value)
        setattr(target, name, self._installable(target, name, replacement, kind))

        self._entries.append(
            MockEntry(
                target=target,
                name=name,
                had_own_attribute=had_own,
                original_value=original,
                kind=kind,
            )
        )
        self.logger.debug(
            "Mocked %s.%s with %s (own attribute: %s)",
            _describe(target),
            name,
            kind.value,
            had_own,
        )
        return replacement

    def restore(self) -> None:
        """Undo every outstanding mock, most recent first."""
        while self._entries:
            entry = self._entries[-1]
            if entry.had_own_attribute:
                setattr(entry.target, entry.name, entry.original_value)
            elif _has_own_attribute(entry.target, entry.name):
                delattr(entry.target, entry.name)
            self._entries.pop()
            self.logger.debug("Restored %s.%s", _describe(entry.target), entry.name)

    def _build_replacement(self, target: Any, name: str, value: Any) -> tuple[Any, SubstitutionKind]:
        if value is _OMITTED:
            current = getattr(target, name, None)
            fallback = current if callable(current) else None
            return Stub(fallback, name=name), SubstitutionKind.STUB
        if callable(value):
            return Double(value, name=name), SubstitutionKind.SPY
        return value, SubstitutionKind.VALUE

    @staticmethod
    def _installable(target: Any, name: str, replacement: Any, kind: SubstitutionKind) -> Any:
        # Static and class methods must not be re-bound to instances.
        if kind is SubstitutionKind.VALUE or not isinstance(target, type):
            return replacement
        static = inspect.getattr_static(target, name, None)
        if isinstance(static, (staticmethod, classmethod)):
            return staticmethod(replacement)
        return replacement


DEFAULT_REGISTRY = MockRegistry()


def mock(target: Any, name: str, value: Any = _OMITTED) -> Any:
    return DEFAULT_REGISTRY.mock(target, name, value)


def restore() -> None:
    DEFAULT_REGISTRY.restore()
