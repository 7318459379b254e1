"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


SCANNER_UNEXPECTED_CHARACTER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SCANNER_UNEXPECTED_CHARACTER",
    message="Unexpected character.",
    hint="Remove the character or move it inside a string literal.",
    severity="error",
    category="scanner",
)

SCANNER_UNTERMINATED_STRING: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SCANNER_UNTERMINATED_STRING",
    message="Unterminated string.",
    hint='Close the string with a double quote (`"`).',
    severity="error",
    category="scanner",
)
