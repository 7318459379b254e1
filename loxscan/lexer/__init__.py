"""Scanner and token model."""

from loxscan.lexer.options import ScannerOptions, StringErrorLine
from loxscan.lexer.scanner import Scanner, dump_diagnostics, dump_tokens, scan
from loxscan.lexer.tokens import KEYWORDS, LiteralValue, Token, TokenKind, format_literal

__all__ = [
    "KEYWORDS",
    "LiteralValue",
    "Scanner",
    "ScannerOptions",
    "StringErrorLine",
    "Token",
    "TokenKind",
    "dump_diagnostics",
    "dump_tokens",
    "format_literal",
    "scan",
]
