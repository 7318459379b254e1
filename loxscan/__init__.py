"""Lexical scanner for the Lox scripting language."""

from loxscan.diagnostics import Diagnostic, DiagnosticCollector, ErrorReporter
from loxscan.lexer import KEYWORDS, Scanner, ScannerOptions, StringErrorLine, Token, TokenKind, scan
from loxscan.pipeline import ScanResult, scan_result

__version__ = "0.1.0"

__all__ = [
    "KEYWORDS",
    "Diagnostic",
    "DiagnosticCollector",
    "ErrorReporter",
    "ScanResult",
    "Scanner",
    "ScannerOptions",
    "StringErrorLine",
    "Token",
    "TokenKind",
    "scan",
    "scan_result",
]
