"""Recursive descent parser turning a token stream into Python values."""

from __future__ import annotations

import logging
import sys
from typing import TypeAlias

from ._errors import ErrorKind
from ._errors import JSONDecodeError
from ._lexer import Tokenizer
from ._profile import ProfileContext
from ._tokens import PositionedToken
from ._tokens import TokenKind

logger = logging.getLogger(__name__)

# Type aliases for domain concepts - recursive definition
JsonValue: TypeAlias = (
    "dict[str, JsonValue] | list[JsonValue] | str | float | bool | None"
)

MAX_DEPTH = 18

LEAF_KINDS = frozenset(
    {TokenKind.STRING, TokenKind.NUMBER, TokenKind.BOOLEAN, TokenKind.NULL}
)


def depth_limit() -> int:
    """Largest max_depth the recursive rules can honor on this interpreter."""
    # Each nesting level costs two frames: the value rule and a container rule
    return sys.getrecursionlimit() // 3


class Parser:
    """
    Recursive descent parser over a one-token lookahead.

    The lookahead is fetched eagerly on construction and refreshed only
    through `advance`. A lexical error in the first token is held back and
    raised by `parse`. A parser is single use: `parse` may be called once.
    """

    def __init__(self, text: str, max_depth: int = MAX_DEPTH) -> None:
        self.tokenizer = Tokenizer(text)
        self.max_depth = max_depth
        self.depth = 0
        self._consumed = False
        self._pending_error: JSONDecodeError | None = None
        self.current_token: PositionedToken | None = None
        try:
            self.advance()
        except JSONDecodeError as e:
            self._pending_error = e

    def advance(self) -> PositionedToken | None:
        """Replaces the lookahead with the next token from the tokenizer."""
        self.current_token = self.tokenizer.next_token()
        return self.current_token

    def _eof(self) -> JSONDecodeError:
        return JSONDecodeError(
            ErrorKind.UNEXPECTED_EOF, self.tokenizer.position
        )

    def _error(
        self, kind: ErrorKind, token: PositionedToken
    ) -> JSONDecodeError:
        return JSONDecodeError(kind, token.position, token.token)

    def _depth_exceeded(self) -> JSONDecodeError:
        token = self.current_token
        return JSONDecodeError(
            ErrorKind.MAX_DEPTH_EXCEEDED,
            token.position if token else self.tokenizer.position,
        )

    def parse(self) -> JsonValue:
        """
        Parses the whole document.

        The root must be an object or array and must be followed by nothing
        but whitespace. Running out of interpreter stack is reported as
        MAX_DEPTH_EXCEEDED at the current token.
        """
        if self._consumed:
            raise RuntimeError("Parser instances are single use")
        self._consumed = True
        if self._pending_error is not None:
            raise self._pending_error

        with ProfileContext("parse", self.tokenizer.length):
            token = self.current_token
            if token is None:
                raise self._eof()

            value: JsonValue
            try:
                if token.kind == TokenKind.LEFT_BRACE:
                    value = self.parse_object()
                elif token.kind == TokenKind.LEFT_BRACKET:
                    value = self.parse_array()
                else:
                    raise self._error(ErrorKind.INVALID_ROOT, token)
            except RecursionError:
                raise self._depth_exceeded() from None

            if self.current_token is not None:
                raise self._error(
                    ErrorKind.TRAILING_TOKENS, self.current_token
                )
            return value

    def parse_value(self) -> JsonValue:
        """Parses a value nested inside an object or array."""
        if self.depth > self.max_depth:
            raise self._depth_exceeded()

        self.depth += 1
        try:
            token = self.current_token
            if token is None:
                raise self._eof()

            if token.kind == TokenKind.LEFT_BRACE:
                return self.parse_object()
            if token.kind == TokenKind.LEFT_BRACKET:
                return self.parse_array()
            if token.kind in LEAF_KINDS:
                self.advance()
                return token.value
            raise self._error(ErrorKind.UNEXPECTED_TOKEN, token)
        finally:
            self.depth -= 1

    def parse_object(self) -> dict[str, JsonValue]:
        """Parses an object; the lookahead is its opening brace."""
        with ProfileContext("parse_object"):
            self.advance()
            obj: dict[str, JsonValue] = {}

            token = self.current_token
            if token is not None and token.kind == TokenKind.RIGHT_BRACE:
                self.advance()
                return obj

            while True:
                if token is None:
                    raise self._eof()
                if token.kind != TokenKind.STRING:
                    raise self._error(ErrorKind.EXPECTED_KEY, token)
                key = str(token.value)

                token = self.advance()
                if token is None:
                    raise self._eof()
                if token.kind != TokenKind.COLON:
                    raise self._error(ErrorKind.EXPECTED_COLON, token)
                self.advance()

                # Duplicate keys overwrite: last write wins
                obj[key] = self.parse_value()

                token = self.current_token
                if token is None:
                    raise self._eof()
                if token.kind == TokenKind.RIGHT_BRACE:
                    self.advance()
                    return obj
                if token.kind != TokenKind.COMMA:
                    raise self._error(
                        ErrorKind.EXPECTED_COMMA_OR_BRACE, token
                    )
                token = self.advance()

    def parse_array(self) -> list[JsonValue]:
        """Parses an array; the lookahead is its opening bracket."""
        with ProfileContext("parse_array"):
            self.advance()
            values: list[JsonValue] = []

            token = self.current_token
            if token is not None and token.kind == TokenKind.RIGHT_BRACKET:
                self.advance()
                return values

            while True:
                values.append(self.parse_value())

                token = self.current_token
                if token is None:
                    raise self._eof()
                if token.kind == TokenKind.RIGHT_BRACKET:
                    self.advance()
                    return values
                if token.kind != TokenKind.COMMA:
                    raise self._error(
                        ErrorKind.EXPECTED_COMMA_OR_BRACKET, token
                    )
                self.advance()


def parse(text: str, max_depth: int = MAX_DEPTH) -> JsonValue:
    """Parses `text` with a fresh parser, logging failures at debug level."""
    try:
        return Parser(text, max_depth).parse()
    except JSONDecodeError as e:
        logger.debug("JSON rejected (%s): %s", e.kind.name, e)
        raise
