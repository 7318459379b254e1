"""Scanner configuration options."""

from dataclasses import dataclass
from enum import StrEnum


class StringErrorLine(StrEnum):
    """Which line an unterminated string is reported on."""

    START = "start"
    END = "end"


@dataclass(frozen=True, slots=True)
class ScannerOptions:
    """Knobs that change how errors are reported, never which tokens are produced."""

    unterminated_string_line: StringErrorLine = StringErrorLine.START
