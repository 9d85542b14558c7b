"""Text parser for functional dependencies.

- ``parse_records()`` - text -> ``FDRecord`` list (raises ``FDParseError``)
- ``parse_dependencies()`` - text -> engine ``FunctionalDependency`` list
- ``try_parse_dependencies()`` - text -> ``ParseResult`` (never raises)
"""

from .parser import parse_records, parse_dependencies, try_parse_dependencies, ParserState
from .models import ParseResult
from .errors import FDParseError, ParseErrorDetail, ParseErrorKind, create_parse_error

__all__ = [
    "parse_records",
    "parse_dependencies",
    "try_parse_dependencies",
    "ParserState",
    "ParseResult",
    "FDParseError",
    "ParseErrorDetail",
    "ParseErrorKind",
    "create_parse_error",
]
