"""Diagnostics helpers and error reporters."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Protocol

from loxscan.diagnostics.diagnostic import Diagnostic


class ErrorReporter(Protocol):
    """Collaborator notified once per lexical error."""

    def error(self, line: int, message: str) -> None: ...


@dataclass(slots=True)
class DiagnosticCollector:
    """Default reporter: records every `(line, message)` report it receives."""

    reports: list[tuple[int, str]] = field(default_factory=list)

    @property
    def had_error(self) -> bool:
        return bool(self.reports)

    def error(self, line: int, message: str) -> None:
        self.reports.append((line, message))

    def reset(self) -> None:
        self.reports.clear()

    def formatted(self) -> list[str]:
        return [format_report(line, message) for line, message in self.reports]


def format_report(line: int, message: str, where: str = "") -> str:
    """Render a report the way the command-line driver prints it."""
    return f"[line {line}] Error{where}: {message}"


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity == "error" for d in diagnostics)
