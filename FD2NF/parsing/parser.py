"""State-machine parser for functional dependencies written as text.

Grammar (whitespace is ignored everywhere, including inside attribute names)::

    input      := [ dependency { "," dependency } [ "," ] ]
    dependency := "{" attributes "}" "->" "{" attributes "}"
    attributes := name { "," name }

Example: ``{a, b}->{c}, {c}->{d}``.
"""

from __future__ import annotations

from enum import Enum, auto
from typing import List

from FD2NF.ir.models.dependency import FDRecord, FunctionalDependency
from FD2NF.utils.logging import get_logger
from .errors import FDParseError, ParseErrorKind, create_parse_error
from .models import ParseResult

logger = get_logger(__name__)


class ParserState(Enum):
    NO_INPUT = auto()
    IN_LHS = auto()
    EXPECT_ARROW = auto()
    IN_ARROW = auto()
    EXPECT_RHS = auto()
    IN_RHS = auto()
    EXPECT_COMMA = auto()


_ACCEPTING = {ParserState.NO_INPUT, ParserState.EXPECT_COMMA}


def parse_records(text: str) -> List[FDRecord]:
    """Parse ``text`` into input records.

    Raises:
        FDParseError: with a ``ParseErrorKind`` describing the first problem found
    """
    state = ParserState.NO_INPUT
    lhs: List[str] = []
    rhs: List[str] = []
    token = ""
    records: List[FDRecord] = []

    for position, char in enumerate(text):
        if char.isspace():
            continue

        if state is ParserState.NO_INPUT:
            if char != "{":
                raise create_parse_error(
                    ParseErrorKind.UNEXPECTED_CHARACTER,
                    "Expected a functional dependency like {a,b}->{c}",
                    position=position, found=char, expected="'{'",
                )
            state = ParserState.IN_LHS

        elif state in (ParserState.IN_LHS, ParserState.IN_RHS):
            side = lhs if state is ParserState.IN_LHS else rhs
            if char in ",}":
                if not token:
                    raise create_parse_error(
                        ParseErrorKind.EMPTY_SEGMENT,
                        "Expected an attribute name between the separators",
                        position=position, found=char, expected="attribute name",
                    )
                side.append(token)
                token = ""
                if char == "}" and state is ParserState.IN_LHS:
                    state = ParserState.EXPECT_ARROW
                elif char == "}":
                    records.append(FDRecord(lhs=lhs, rhs=rhs))
                    logger.debug(f"Parsed dependency {lhs} -> {rhs}")
                    lhs, rhs = [], []
                    state = ParserState.EXPECT_COMMA
            elif char == "{":
                raise create_parse_error(
                    ParseErrorKind.UNEXPECTED_CHARACTER,
                    "Attribute sets cannot be nested",
                    position=position, found=char, expected="attribute name, ',' or '}'",
                )
            else:
                token += char

        elif state is ParserState.EXPECT_ARROW:
            if char != "-":
                raise create_parse_error(
                    ParseErrorKind.MISSING_ARROW,
                    "Expected an arrow -> after the left-hand side",
                    position=position, found=char, expected="'->'",
                )
            state = ParserState.IN_ARROW

        elif state is ParserState.IN_ARROW:
            if char != ">":
                raise create_parse_error(
                    ParseErrorKind.MISSING_ARROW,
                    "Expected an arrow -> after the left-hand side",
                    position=position, found=char, expected="'>'",
                )
            state = ParserState.EXPECT_RHS

        elif state is ParserState.EXPECT_RHS:
            if char != "{":
                raise create_parse_error(
                    ParseErrorKind.UNEXPECTED_CHARACTER,
                    "Expected the right-hand side attribute set",
                    position=position, found=char, expected="'{'",
                )
            state = ParserState.IN_RHS

        elif state is ParserState.EXPECT_COMMA:
            if char != ",":
                raise create_parse_error(
                    ParseErrorKind.UNEXPECTED_CHARACTER,
                    "Only commas and whitespace may separate dependencies",
                    position=position, found=char, expected="','",
                )
            state = ParserState.NO_INPUT

    if state not in _ACCEPTING:
        raise create_parse_error(
            ParseErrorKind.UNEXPECTED_END,
            "Input ended in the middle of a functional dependency",
            position=len(text),
        )

    return records


def parse_dependencies(text: str) -> List[FunctionalDependency]:
    """Parse ``text`` straight into engine dependencies."""
    return [FunctionalDependency.from_record(record) for record in parse_records(text)]


def try_parse_dependencies(text: str) -> ParseResult:
    """Like ``parse_records`` but reports failure in the result instead of raising."""
    try:
        records = parse_records(text)
    except FDParseError as e:
        return ParseResult(success=False, error=e.detail, original_text=text)
    return ParseResult(success=True, dependencies=records, original_text=text)
