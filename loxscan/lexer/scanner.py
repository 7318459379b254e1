"""Scanner."""

import logging
from types import MappingProxyType
from typing import Final, Mapping

from loxscan.diagnostics import (
    SCANNER_UNEXPECTED_CHARACTER,
    SCANNER_UNTERMINATED_STRING,
    Diagnostic,
    DiagnosticSpec,
    ErrorReporter,
)
from loxscan.lexer.options import ScannerOptions, StringErrorLine
from loxscan.lexer.tokens import KEYWORDS, LiteralValue, Token, TokenKind, format_literal
from loxscan.text import TextRange, slice_text_range

logger = logging.getLogger(__name__)

DIGITS: Final[frozenset[str]] = frozenset("0123456789")
IDENTIFIER_START: Final[frozenset[str]] = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_")
IDENTIFIER_PART: Final[frozenset[str]] = IDENTIFIER_START | DIGITS

SINGLE_CHAR_TOKENS: Final[Mapping[str, TokenKind]] = MappingProxyType(
    {
        "(": TokenKind.LEFT_PAREN,
        ")": TokenKind.RIGHT_PAREN,
        "{": TokenKind.LEFT_BRACE,
        "}": TokenKind.RIGHT_BRACE,
        ",": TokenKind.COMMA,
        ".": TokenKind.DOT,
        "-": TokenKind.MINUS,
        "+": TokenKind.PLUS,
        ";": TokenKind.SEMICOLON,
        "*": TokenKind.STAR,
    }
)

# first char -> (kind without trailing "=", kind with trailing "=")
EQUAL_SUFFIX_TOKENS: Final[Mapping[str, tuple[TokenKind, TokenKind]]] = MappingProxyType(
    {
        "!": (TokenKind.BANG, TokenKind.BANG_EQUAL),
        "=": (TokenKind.EQUAL, TokenKind.EQUAL_EQUAL),
        "<": (TokenKind.LESS, TokenKind.LESS_OR_EQUAL),
        ">": (TokenKind.GREATER, TokenKind.GREATER_OR_EQUAL),
    }
)


class Scanner:
    """Single-pass scanner that turns Lox source text into tokens.

    Lexical errors never abort the scan: each one is recorded as a
    `Diagnostic`, forwarded to the optional reporter, and scanning resumes.
    A scanner is single-use; `scan_tokens()` on a finished scanner returns the
    tokens it already produced.
    """

    def __init__(
        self,
        source: str,
        reporter: ErrorReporter | None = None,
        *,
        options: ScannerOptions | None = None,
    ) -> None:
        self._source = source
        self._reporter = reporter
        self._options = options if options is not None else ScannerOptions()
        self._start = 0
        self._current = 0
        self._line = 1
        self._start_line = 1
        self._tokens: list[Token] = []
        self._diagnostics: list[Diagnostic] = []
        self._finished = False

    @property
    def source(self) -> str:
        """Original source text."""
        return self._source

    @property
    def diagnostics(self) -> list[Diagnostic]:
        """Diagnostics recorded during scanning."""
        return self._diagnostics

    @property
    def line(self) -> int:
        return self._line

    @property
    def position(self) -> int:
        return self._current

    @property
    def is_at_end(self) -> bool:
        return self._current >= len(self._source)

    def scan_tokens(self) -> list[Token]:
        if self._finished:
            return list(self._tokens)

        while not self.is_at_end:
            self._start = self._current
            self._start_line = self._line
            self._scan_token()

        end = len(self._source)
        self._tokens.append(Token(TokenKind.EOF, "", None, self._line, TextRange.empty(end)))
        self._finished = True

        logger.debug(
            "scanned %d tokens over %d lines with %d errors",
            len(self._tokens),
            self._line,
            len(self._diagnostics),
        )
        return list(self._tokens)

    def _scan_token(self) -> None:
        ch = self._advance()

        kind = SINGLE_CHAR_TOKENS.get(ch)
        if kind is not None:
            self._add_token(kind)
            return

        pair = EQUAL_SUFFIX_TOKENS.get(ch)
        if pair is not None:
            single, double = pair
            self._add_token(double if self._match("=") else single)
            return

        match ch:
            case " " | "\r" | "\t":
                pass
            case "\n":
                self._line += 1
            case "/":
                if self._match("/"):
                    self._skip_line_comment()
                else:
                    self._add_token(TokenKind.SLASH)
            case '"':
                self._scan_string()
            case _ if ch in DIGITS:
                self._scan_number()
            case _ if ch in IDENTIFIER_START:
                self._scan_identifier()
            case _:
                self._report(SCANNER_UNEXPECTED_CHARACTER, self._start_line, f"Unexpected character {ch!r}.")

    def _skip_line_comment(self) -> None:
        # Stop before the newline so the main loop counts it.
        while self._peek() != "\n" and not self.is_at_end:
            self._advance()

    def _scan_string(self) -> None:
        while self._peek() != '"' and not self.is_at_end:
            if self._peek() == "\n":
                self._line += 1
            self._advance()

        if self.is_at_end:
            if self._options.unterminated_string_line == StringErrorLine.END:
                line = self._line
            else:
                line = self._start_line
            self._report(SCANNER_UNTERMINATED_STRING, line)
            return

        # Closing quote.
        self._advance()
        contents = TextRange(self._start + 1, self._current - 1)
        self._add_token(TokenKind.STRING, slice_text_range(self._source, contents))

    def _scan_number(self) -> None:
        while self._peek() in DIGITS:
            self._advance()

        if self._peek() == "." and self._peek_next() in DIGITS:
            self._advance()
            while self._peek() in DIGITS:
                self._advance()

        self._add_token(TokenKind.NUMBER, float(slice_text_range(self._source, self._lexeme_range())))

    def _scan_identifier(self) -> None:
        while self._peek() in IDENTIFIER_PART:
            self._advance()

        text = slice_text_range(self._source, self._lexeme_range())
        self._add_token(KEYWORDS.get(text, TokenKind.IDENTIFIER))

    def _add_token(self, kind: TokenKind, literal: LiteralValue = None) -> None:
        range = self._lexeme_range()
        lexeme = slice_text_range(self._source, range)
        self._tokens.append(Token(kind, lexeme, literal, self._start_line, range))

    def _lexeme_range(self) -> TextRange:
        return TextRange(self._start, self._current)

    def _report(self, spec: DiagnosticSpec, line: int, message: str | None = None) -> None:
        diagnostic = Diagnostic.from_spec(spec, self._lexeme_range(), line, message)
        self._diagnostics.append(diagnostic)
        logger.debug("line %d: %s (%s)", line, diagnostic.message, diagnostic.code)
        if self._reporter is not None:
            self._reporter.error(line, diagnostic.message)

    def _advance(self) -> str:
        ch = self._source[self._current]
        self._current += 1
        return ch

    def _match(self, expected: str) -> bool:
        if self.is_at_end or self._source[self._current] != expected:
            return False
        self._current += 1
        return True

    def _peek(self) -> str:
        if self.is_at_end:
            return "\0"
        return self._source[self._current]

    def _peek_next(self) -> str:
        index = self._current + 1
        if index >= len(self._source):
            return "\0"
        return self._source[index]


def scan(
    source: str,
    reporter: ErrorReporter | None = None,
    *,
    options: ScannerOptions | None = None,
) -> list[Token]:
    """Scan `source` into tokens terminated by a single EOF token."""
    return Scanner(source, reporter, options=options).scan_tokens()


def dump_tokens(tokens: list[Token], diagnostics: list[Diagnostic] | None = None) -> None:
    """Print token list with kind, line, range, lexeme and literal for debugging."""
    for i, tok in enumerate(tokens):
        span = tok.range.as_tuple() if tok.range is not None else None
        literal = format_literal(tok.literal) if tok.literal is not None else ""
        print(f"{i:03d} {tok.kind.name:<18} line={tok.line:<4} range={span} lexeme={tok.lexeme!r} {literal}".rstrip())

    if diagnostics:
        print("\nDiagnostics:")
        dump_diagnostics(diagnostics)


def dump_diagnostics(diagnostics: list[Diagnostic]) -> None:
    for d in diagnostics:
        print(f"- {d.severity.upper()} {d.code} line={d.line} range={d.range.as_tuple()} message={d.message}")
