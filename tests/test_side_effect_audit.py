"""Guardrails to detect stray output side effects in source files."""

from __future__ import annotations

from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = PROJECT_ROOT / "src" / "simple_double"


def _files_with_pattern(pattern: str) -> set[Path]:
    return {path.relative_to(PROJECT_ROOT) for path in SRC_ROOT.rglob("*.py") if pattern in path.read_text()}


def test_print_calls_limited_to_report_module() -> None:
    """Ensure console output stays inside the report helpers."""

    assert _files_with_pattern("print(") == {Path("src/simple_double/report.py")}


def test_doubles_do_not_log_per_call() -> None:
    """Only the registry logs. Recording and dispatch stay silent."""

    assert _files_with_pattern("logger.") == {
        Path("src/simple_double/doubles/logging_utils.py"),
        Path("src/simple_double/doubles/registry.py"),
    }
