"""Diagnostics core types."""

from dataclasses import dataclass

from loxscan.diagnostics.codes import DiagnosticSpec, Severity
from loxscan.text import TextRange


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by the scanner."""

    code: str
    message: str
    range: TextRange
    line: int
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None

    @staticmethod
    def from_spec(spec: DiagnosticSpec, range: TextRange, line: int, message: str | None = None) -> "Diagnostic":
        """Build a diagnostic from a code spec, optionally overriding the message."""
        return Diagnostic(
            code=spec.code,
            message=spec.message if message is None else message,
            range=range,
            line=line,
            severity=spec.severity,
            hint=spec.hint,
            category=spec.category,
        )
