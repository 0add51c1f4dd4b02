"""Error taxonomy for JSON validation failures."""

from __future__ import annotations

from enum import Enum

from ._tokens import Position
from ._tokens import Token


class ErrorCategory(Enum):
    LEXICAL = "lexical"
    SYNTACTIC = "syntactic"
    STRUCTURAL = "structural"


class ErrorKind(Enum):
    """
    Closed set of reasons a parse attempt can fail.

    Each member maps to its category and a human-readable description used
    as the leading part of the error message.
    """

    # Lexical
    UNEXPECTED_CHARACTER = (ErrorCategory.LEXICAL, "Unexpected character")
    UNTERMINATED_STRING = (ErrorCategory.LEXICAL, "Unterminated string")
    INVALID_ESCAPE = (ErrorCategory.LEXICAL, "Invalid escape character")
    INVALID_UNICODE_ESCAPE = (ErrorCategory.LEXICAL, "Invalid Unicode escape")
    INVALID_CODE_POINT = (ErrorCategory.LEXICAL, "Invalid Unicode code point")
    INVALID_CONTROL_CHARACTER = (
        ErrorCategory.LEXICAL,
        "Invalid control character in string",
    )
    LEADING_ZERO = (ErrorCategory.LEXICAL, "Numbers cannot have leading zeros")
    MALFORMED_NUMBER = (ErrorCategory.LEXICAL, "Malformed number")
    INVALID_LITERAL = (ErrorCategory.LEXICAL, "Invalid literal")

    # Syntactic
    INVALID_ROOT = (
        ErrorCategory.SYNTACTIC,
        "JSON payload should be an object or array",
    )
    TRAILING_TOKENS = (
        ErrorCategory.SYNTACTIC,
        "Unexpected tokens after JSON value",
    )
    UNEXPECTED_TOKEN = (ErrorCategory.SYNTACTIC, "Unexpected token")
    UNEXPECTED_EOF = (ErrorCategory.SYNTACTIC, "Unexpected end of input")
    EXPECTED_KEY = (ErrorCategory.SYNTACTIC, "Expected string key")
    EXPECTED_COLON = (ErrorCategory.SYNTACTIC, "Expected ':'")
    EXPECTED_COMMA_OR_BRACE = (ErrorCategory.SYNTACTIC, "Expected ',' or '}'")
    EXPECTED_COMMA_OR_BRACKET = (
        ErrorCategory.SYNTACTIC,
        "Expected ',' or ']'",
    )

    # Structural
    MAX_DEPTH_EXCEEDED = (
        ErrorCategory.STRUCTURAL,
        "Maximum nesting depth exceeded",
    )

    @property
    def category(self) -> ErrorCategory:
        return self.value[0]

    @property
    def description(self) -> str:
        return self.value[1]


class JSONDecodeError(ValueError):
    """
    Handles JSON validation failures with the failure kind and location.

    Carries the offending token or character and the 1-based line/column
    where it was found, so callers can both display the message and assert
    on the structured fields.
    """

    def __init__(
        self,
        kind: ErrorKind,
        position: Position | None = None,
        offender: Token | str | None = None,
    ) -> None:
        if not isinstance(kind, ErrorKind):
            raise TypeError("kind must be an ErrorKind")

        self.kind = kind
        self.position = position
        self.offender = offender

        self.lineno = position.line if position else None
        self.colno = position.column if position else None

        msg = kind.description
        if offender is not None:
            msg += f": {_describe_offender(offender)}"
        self.msg = msg

        if position is not None:
            super().__init__(f"{msg} at {position}")
        else:
            super().__init__(msg)

    def __reduce__(self) -> tuple[type, tuple[object, ...]]:
        return (type(self), (self.kind, self.position, self.offender))


def _describe_offender(offender: Token | str) -> str:
    if isinstance(offender, Token):
        return str(offender)
    if len(offender) == 1 and not offender.isprintable():
        return f"{offender!r}"
    return f"'{offender}'"
