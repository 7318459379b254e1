"""Scanner tokens."""

from dataclasses import dataclass, field
from enum import IntEnum
from types import MappingProxyType
from typing import Final, Mapping

from loxscan.text import TextRange


class TokenKind(IntEnum):
    # -------------------------
    # Special / sentinels
    # -------------------------
    EOF = 1

    # -------------------------
    # Single-character punctuation
    # -------------------------
    LEFT_PAREN = 10  # (
    RIGHT_PAREN = 11  # )
    LEFT_BRACE = 12  # {
    RIGHT_BRACE = 13  # }
    COMMA = 14  # ,
    DOT = 15  # .
    MINUS = 16  # -
    PLUS = 17  # +
    SEMICOLON = 18  # ;
    STAR = 19  # *

    # -------------------------
    # One or two character operators
    # -------------------------
    BANG = 30  # !
    BANG_EQUAL = 31  # !=
    EQUAL = 32  # =
    EQUAL_EQUAL = 33  # ==
    GREATER = 34  # >
    GREATER_OR_EQUAL = 35  # >=
    LESS = 36  # <
    LESS_OR_EQUAL = 37  # <=
    SLASH = 38  # /

    # -------------------------
    # Identifiers / literals
    # -------------------------
    IDENTIFIER = 50
    STRING = 51
    NUMBER = 52

    # -------------------------
    # Keywords
    # -------------------------
    AND = 70
    CLASS = 71
    ELSE = 72
    FALSE = 73
    FUN = 74
    FOR = 75
    IF = 76
    NIL = 77
    OR = 78
    PRINT = 79
    RETURN = 80
    SUPER = 81
    THIS = 82
    TRUE = 83
    VAR = 84
    WHILE = 85

    @property
    def is_keyword(self) -> bool:
        return TokenKind.AND <= self <= TokenKind.WHILE

    @property
    def is_literal(self) -> bool:
        return self in (TokenKind.IDENTIFIER, TokenKind.STRING, TokenKind.NUMBER)

    @property
    def is_operator(self) -> bool:
        return TokenKind.BANG <= self <= TokenKind.SLASH


KEYWORDS: Final[Mapping[str, TokenKind]] = MappingProxyType(
    {
        "and": TokenKind.AND,
        "class": TokenKind.CLASS,
        "else": TokenKind.ELSE,
        "false": TokenKind.FALSE,
        "fun": TokenKind.FUN,
        "for": TokenKind.FOR,
        "if": TokenKind.IF,
        "nil": TokenKind.NIL,
        "or": TokenKind.OR,
        "print": TokenKind.PRINT,
        "return": TokenKind.RETURN,
        "super": TokenKind.SUPER,
        "this": TokenKind.THIS,
        "true": TokenKind.TRUE,
        "var": TokenKind.VAR,
        "while": TokenKind.WHILE,
    }
)
"""Reserved word spelling -> keyword kind. Read-only, shared by every scanner."""


LiteralValue = float | str | None


@dataclass(frozen=True, slots=True)
class Token:
    """A single scanned token.

    `literal` holds the parsed value of NUMBER (float) and STRING (contents
    between the quotes) tokens and is None for everything else. `range` is the
    token's source extent and does not take part in equality.
    """

    kind: TokenKind
    lexeme: str
    literal: LiteralValue = None
    line: int = 1
    range: TextRange | None = field(default=None, compare=False)

    def __str__(self) -> str:
        if self.literal is None:
            return f"{self.kind.name} {self.lexeme}"
        return f"{self.kind.name} {self.lexeme} {format_literal(self.literal)}"


def format_literal(value: LiteralValue) -> str:
    """Render a literal value; integral numbers drop their `.0`."""
    if value is None:
        return "nil"
    if isinstance(value, float):
        text = repr(value)
        if text.endswith(".0"):
            return text[:-2]
        return text
    return value
