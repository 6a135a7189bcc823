"""Reusable test utilities for the test suite."""


class RecordingLogger:
    """In-memory logger capturing formatted log messages and setup calls."""

    def __init__(self):
        self.messages: list[str] = []
        self.setup_calls: list[bool] = []

    def setup(self, verbose: bool, log_file: str | None = None) -> None:  # noqa: ARG002
        self.setup_calls.append(verbose)

    def log(self, msg: str, *args: object) -> None:
        self.messages.append(msg % args if args else msg)

    def debug(self, msg: str, *args: object) -> None:
        self.messages.append("DEBUG:" + (msg % args if args else msg))


class ProtoKlass:
    """Class whose members are only reachable through instances' class lookup."""

    proto_value = "x"

    def proto_fn(self):
        return "x"

    @staticmethod
    def static_fn(value):
        return f"static {value}"

    @classmethod
    def class_fn(cls, value):
        return f"{cls.__name__} {value}"


class Namespace:
    """Plain object with a handful of own attributes."""

    def __init__(self):
        self.a = "a"
        self.b = "b"
        self.c = "c"
        self.fn_d = lambda: "d"
