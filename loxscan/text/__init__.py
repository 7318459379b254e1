"""Source text offsets."""

from loxscan.text.text import TextRange, slice_text_range

__all__ = [
    "TextRange",
    "slice_text_range",
]
