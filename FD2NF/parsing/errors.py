"""Typed errors for functional-dependency text parsing.

Every rejection carries a ``ParseErrorKind`` so callers and tests can tell
an unexpected character from an empty attribute or a broken arrow without
matching on message text.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class ParseErrorKind(str, Enum):
    """Why the input was rejected."""
    UNEXPECTED_CHARACTER = "unexpected_character"
    EMPTY_SEGMENT = "empty_segment"
    MISSING_ARROW = "missing_arrow"
    UNEXPECTED_END = "unexpected_end"


class ParseErrorDetail(BaseModel):
    """Where and why parsing stopped."""

    kind: ParseErrorKind = Field(description="Category of the error")
    message: str = Field(description="Human-readable error message")
    position: Optional[int] = Field(None, description="0-based offset of the offending character")
    found: Optional[str] = Field(None, description="Character found at that offset")
    expected: Optional[str] = Field(None, description="What the parser expected instead")

    def format_message(self) -> str:
        parts = [f"Format error: {self.message}"]
        if self.position is not None:
            parts.append(f"at position {self.position}")
        if self.found is not None:
            parts.append(f"found {self.found!r}")
        if self.expected:
            parts.append(f"expected {self.expected}")
        return ", ".join(parts)


class FDParseError(ValueError):
    """Raised when text is not a list of dependencies like ``{a,b}->{c}, {c}->{d}``."""

    def __init__(self, detail: ParseErrorDetail):
        self.detail = detail
        super().__init__(detail.format_message())

    @property
    def kind(self) -> ParseErrorKind:
        return self.detail.kind


def create_parse_error(
    kind: ParseErrorKind,
    message: str,
    position: Optional[int] = None,
    found: Optional[str] = None,
    expected: Optional[str] = None,
) -> FDParseError:
    return FDParseError(
        ParseErrorDetail(kind=kind, message=message, position=position, found=found, expected=expected)
    )
