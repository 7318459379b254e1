"""Scan carrier that keeps source, tokens and diagnostics together."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from loxscan.diagnostics import has_errors

if TYPE_CHECKING:
    from loxscan.diagnostics import Diagnostic
    from loxscan.lexer import Token, TokenKind


@dataclass(slots=True)
class ScanResult:
    """Result of one scan, shared by every downstream consumer."""

    source_text: str
    tokens: list[Token]
    diagnostics: list[Diagnostic]

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)

    def token_kinds(self) -> list[TokenKind]:
        return [token.kind for token in self.tokens]
