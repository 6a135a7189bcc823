"""Call recording doubles (spies)."""

from __future__ import annotations

import inspect
import types
from collections.abc import Callable
from typing import Any

from simple_double.doubles.types import _MISSING, CallRecord


def _noop(*args: Any, **kwargs: Any) -> None:  # noqa: ARG001
    return None


class Double:
    """Callable that forwards to ``fn`` and records every invocation.

    A call is appended to ``calls`` only after ``fn`` has run. Errors raised by
    ``fn`` are recorded and re-raised unchanged.
    """

    def __init__(self, fn: Callable[..., Any] | None = None, *, name: str | None = None) -> None:
        self._fn = fn if fn is not None else _noop
        self.name = name or getattr(fn, "__name__", None) or "spy"
        self.calls: list[CallRecord] = []
        # Returned by first_call/last_call before anything was recorded.
        self._placeholder = CallRecord()

    @property
    def call_count(self) -> int:
        return len(self.calls)

    @property
    def called(self) -> bool:
        return self.call_count > 0

    @property
    def first_call(self) -> CallRecord:
        return self.calls[0] if self.calls else self._placeholder

    @property
    def last_call(self) -> CallRecord:
        return self.calls[-1] if self.calls else self._placeholder

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        try:
            result = self._fn(*args, **kwargs)
        except BaseException as exc:
            self._record(args, kwargs, threw=exc)
            raise
        self._record(args, kwargs, returned=result)
        return result

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        # Bind only where the wrapped callable would bind on its own.
        if instance is None or not self._binds_instance():
            return self
        return types.MethodType(self, instance)

    def _binds_instance(self) -> bool:
        if isinstance(self._fn, Double):
            return self._fn._binds_instance()
        return self._fn is not _noop and inspect.isfunction(self._fn)

    def reset(self) -> None:
        """Forget every recorded call."""
        self.calls.clear()

    def _record(
        self,
        args: tuple[Any, ...] | list[Any],
        kwargs: dict[str, Any],
        *,
        returned: Any = _MISSING,
        threw: Any = _MISSING,
    ) -> CallRecord:
        record = CallRecord(tuple(args), dict(kwargs), returned, threw)
        self.calls.append(record)
        return record

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r} calls={self.call_count}>"


def spy(fn: Callable[..., Any] | None = None) -> Double:
    """Wrap ``fn`` (a no-op when omitted) in a call-recording double."""
    return Double(fn)
