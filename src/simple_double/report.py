"""Render the call history of a double as a rich panel for quick review."""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.pretty import pretty_repr
from rich.table import Table
from rich.text import Text

from simple_double.doubles.recorder import Double
from simple_double.doubles.types import CallRecord


def _format_arguments(record: CallRecord) -> str:
    parts = [pretty_repr(arg) for arg in record.args]
    parts.extend(f"{key}={pretty_repr(value)}" for key, value in record.kwargs.items())
    return ", ".join(parts) or "(none)"


def render_call_table(double: Double, title: str | None = None) -> Panel:
    """Build a rich Panel listing every recorded call of ``double``."""

    table = Table("#", "Arguments", "Outcome", expand=True)
    for index, record in enumerate(double.calls):
        table.add_row(str(index), Text(_format_arguments(record)), Text(record.outcome_label()))

    if not double.calls:
        table.add_row("-", "Never called", "")

    subtitle = f"{double.call_count} call" + ("" if double.call_count == 1 else "s")
    return Panel(table, title=title or double.name, subtitle=subtitle)


def print_call_report(double: Double, console: Console | None = None, title: str | None = None) -> None:
    """Render and print the call history of ``double`` to the provided console."""

    output_console = console or Console(force_terminal=False)
    output_console.print(render_call_table(double, title=title))
