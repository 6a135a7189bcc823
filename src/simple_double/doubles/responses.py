"""Stubs answering calls from a queue of canned responses."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from simple_double.doubles.recorder import Double
from simple_double.doubles.types import ResponseKind, ResponseSpec


class Stub(Double):
    """Double whose calls are answered by a position-addressed response queue.

    ``return_with``, ``throw_with`` and ``callback_with`` all append to the same
    queue. Call ``i`` uses entry ``i % n`` while ``loop`` is true and entry
    ``min(i, n - 1)`` otherwise; a callback entry reached past the end of the
    queue with looping off records the call but invokes nothing. While the
    queue is empty the stub behaves like a spy of ``fn`` if one was given, and
    records a value-less call otherwise.
    """

    def __init__(
        self,
        fn: Callable[..., Any] | None = None,
        *,
        name: str | None = None,
        loop: bool = True,
    ) -> None:
        super().__init__(fn, name=name or "stub")
        self._has_fallback = fn is not None
        self.responses: list[ResponseSpec] = []
        self.loop = loop
        self._cursor = 0

    def return_with(self, value: Any) -> Stub:
        self.responses.append(ResponseSpec.returning(value))
        return self

    def throw_with(self, error: BaseException | type[BaseException]) -> Stub:
        # A class is instantiated once so every dispatch raises the same instance.
        if isinstance(error, type) and issubclass(error, BaseException):
            error = error()
        if not isinstance(error, BaseException):
            raise TypeError(f"throw_with() expects an exception instance or class, got {error!r}")
        self.responses.append(ResponseSpec.throwing(error))
        return self

    def callback_with(self, *values: Any) -> Stub:
        self.responses.append(ResponseSpec.calling_back(values))
        return self

    def reset(self) -> None:
        """Forget recorded calls and rewind to the first queued response."""
        super().reset()
        self._cursor = 0

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        index = self._cursor
        try:
            return self._dispatch(index, args, kwargs)
        finally:
            self._cursor = index + 1

    def _dispatch(self, index: int, args: tuple[Any, ...], kwargs: dict[str, Any]) -> Any:
        if not self.responses:
            if self._has_fallback:
                return super().__call__(*args, **kwargs)
            self._record(args, kwargs)
            return None

        count = len(self.responses)
        position = index % count if self.loop else min(index, count - 1)
        response = self.responses[position]

        if response.kind is ResponseKind.RETURN:
            self._record(args, kwargs, returned=response.payload)
            return response.payload

        if response.kind is ResponseKind.THROW:
            error = response.payload
            self._record(args, kwargs, threw=error)
            raise error.with_traceback(None)

        callback = args[-1]
        record = self._record(args[:-1], kwargs)
        if self.loop or index < count:
            try:
                callback(*response.payload)
            except BaseException as exc:
                record.mark_threw(exc)
                raise
        record.mark_returned(None)
        return None


def stub(fn: Callable[..., Any] | None = None) -> Stub:
    """Create a stub; ``fn`` answers calls until a response is queued."""
    return Stub(fn)
