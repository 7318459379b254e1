"""Scan entrypoint and result carrier."""

from __future__ import annotations

from loxscan.diagnostics import ErrorReporter
from loxscan.lexer import Scanner, ScannerOptions
from loxscan.pipeline.result import ScanResult


def scan_result(
    text: str,
    options: ScannerOptions | None = None,
    *,
    reporter: ErrorReporter | None = None,
) -> ScanResult:
    """Scan `text` once and return tokens with their diagnostics."""
    scanner = Scanner(text, reporter, options=options)
    tokens = scanner.scan_tokens()
    return ScanResult(source_text=text, tokens=tokens, diagnostics=scanner.diagnostics)


__all__ = [
    "ScanResult",
    "scan_result",
]
