"""Command-line driver: scan a script file or run an interactive prompt."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from loxscan.diagnostics import DiagnosticCollector
from loxscan.lexer import Scanner, Token, dump_tokens

# sysexits.h
EX_USAGE = 64
EX_DATAERR = 65
EX_NOINPUT = 66
# 128 + SIGINT
EX_INTERRUPTED = 130

PROMPT = "> "


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="loxscan", description="Scan Lox source and print its tokens.")
    parser.add_argument("script", nargs="*", help="Script to scan. Starts an interactive prompt when omitted.")
    parser.add_argument("--dump", action="store_true", help="Print a debug table instead of plain token lines.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser


def run(source: str, reporter: DiagnosticCollector, *, dump: bool = False) -> list[Token]:
    """Scan one chunk of source, echo its tokens and print any reported errors."""
    scanner = Scanner(source, reporter)
    tokens = scanner.scan_tokens()
    if dump:
        dump_tokens(tokens, scanner.diagnostics)
    else:
        for token in tokens:
            print(token)
    for line in reporter.formatted():
        print(line, file=sys.stderr)
    return tokens


def run_file(path: Path, *, dump: bool = False) -> int:
    try:
        # Undecodable bytes become U+FFFD and are reported as unexpected characters.
        source = path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        print(f"loxscan: cannot read {path}: {exc.strerror or exc}", file=sys.stderr)
        return EX_NOINPUT

    reporter = DiagnosticCollector()
    run(source, reporter, dump=dump)
    return EX_DATAERR if reporter.had_error else 0


def run_prompt(*, dump: bool = False) -> int:
    reporter = DiagnosticCollector()
    while True:
        print(PROMPT, end="", flush=True)
        try:
            line = sys.stdin.readline()
        except KeyboardInterrupt:
            print()
            return EX_INTERRUPTED
        if not line:
            print()
            return 0
        run(line.removesuffix("\n"), reporter, dump=dump)
        reporter.reset()


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if len(args.script) > 1:
        print("Usage: loxscan [script]", file=sys.stderr)
        return EX_USAGE
    if args.script:
        return run_file(Path(args.script[0]), dump=args.dump)
    return run_prompt(dump=args.dump)
