"""Shared dataclasses and enums for spies, stubs and mocks."""

from __future__ import annotations

import dataclasses
import enum
from typing import Any

# Marks an outcome field that has not been produced.
_MISSING: Any = object()


@dataclasses.dataclass(eq=False)
class CallRecord:
    """Arguments and outcome of one invocation of a double.

    ``returned`` and ``threw`` are mutually exclusive and absent until the call
    produced them: reading an absent one raises ``AttributeError``, so
    ``hasattr(record, "returned")`` tells "returned None" apart from "did not
    return".
    """

    args: tuple[Any, ...] = ()
    kwargs: dict[str, Any] = dataclasses.field(default_factory=dict)
    _returned: Any = dataclasses.field(default=_MISSING, repr=False)
    _threw: Any = dataclasses.field(default=_MISSING, repr=False)

    @property
    def returned(self) -> Any:
        if self._returned is _MISSING:
            raise AttributeError("returned")
        return self._returned

    @property
    def threw(self) -> BaseException:
        if self._threw is _MISSING:
            raise AttributeError("threw")
        return self._threw

    @property
    def has_returned(self) -> bool:
        return self._returned is not _MISSING

    @property
    def has_threw(self) -> bool:
        return self._threw is not _MISSING

    def mark_returned(self, value: Any) -> None:
        self._returned = value

    def mark_threw(self, error: BaseException) -> None:
        self._threw = error

    def outcome_label(self) -> str:
        """Short human readable description of the outcome."""
        if self.has_threw:
            return f"raised {self._threw!r}"
        if self.has_returned:
            return f"returned {self._returned!r}"
        return "no value"


class ResponseKind(enum.Enum):
    RETURN = "return"
    THROW = "throw"
    CALLBACK = "callback"


@dataclasses.dataclass(frozen=True)
class ResponseSpec:
    """One queued behavior of a stub."""

    kind: ResponseKind
    payload: Any

    @classmethod
    def returning(cls, value: Any) -> ResponseSpec:
        return cls(ResponseKind.RETURN, value)

    @classmethod
    def throwing(cls, error: BaseException) -> ResponseSpec:
        return cls(ResponseKind.THROW, error)

    @classmethod
    def calling_back(cls, values: tuple[Any, ...]) -> ResponseSpec:
        return cls(ResponseKind.CALLBACK, tuple(values))


class SubstitutionKind(enum.Enum):
    """What ``mock`` installed in place of an attribute."""

    VALUE = "value"
    SPY = "spy"
    STUB = "stub"


@dataclasses.dataclass
class MockEntry:
    """Everything needed to undo one attribute substitution."""

    target: Any
    name: str
    had_own_attribute: bool
    original_value: Any
    kind: SubstitutionKind
