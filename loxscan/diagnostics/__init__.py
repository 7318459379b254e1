"""Diagnostics."""

from loxscan.diagnostics.codes import (
    SCANNER_UNEXPECTED_CHARACTER,
    SCANNER_UNTERMINATED_STRING,
    DiagnosticSpec,
    Severity,
)
from loxscan.diagnostics.diagnostic import Diagnostic
from loxscan.diagnostics.report import (
    DiagnosticCollector,
    ErrorReporter,
    format_report,
    has_errors,
)

__all__ = [
    "SCANNER_UNEXPECTED_CHARACTER",
    "SCANNER_UNTERMINATED_STRING",
    "Diagnostic",
    "DiagnosticCollector",
    "DiagnosticSpec",
    "ErrorReporter",
    "Severity",
    "format_report",
    "has_errors",
]
