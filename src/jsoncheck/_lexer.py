"""Character-level tokenizer producing positioned JSON tokens."""

from __future__ import annotations

import math
from collections.abc import Iterator

from ._errors import ErrorKind
from ._errors import JSONDecodeError
from ._profile import ProfileContext
from ._tokens import STRUCTURAL_KINDS
from ._tokens import Position
from ._tokens import PositionedToken
from ._tokens import Token
from ._tokens import TokenKind

WHITESPACE = frozenset(" \t\n\r")
DIGITS = frozenset("0123456789")
HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

ESCAPES = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}

LITERAL_SUFFIXES = {
    "t": ("rue", Token(TokenKind.BOOLEAN, True)),
    "f": ("alse", Token(TokenKind.BOOLEAN, False)),
    "n": ("ull", Token(TokenKind.NULL)),
}

_CONTROL_LIMIT = 0x20
_SURROGATES = range(0xD800, 0xE000)


class Tokenizer:
    """
    Tokenizes JSON text one token per call.

    Holds a cursor into the text plus the current line and column. The scan
    state is owned by the instance, so a tokenizer is finite and cannot be
    restarted; create a new one per document.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0
        self.length = len(text)
        self.line = 1
        self.column = 1

    def __iter__(self) -> Iterator[PositionedToken]:
        return self

    def __next__(self) -> PositionedToken:
        token = self.next_token()
        if token is None:
            raise StopIteration
        return token

    @property
    def position(self) -> Position:
        """Snapshot of the cursor location."""
        return Position(self.line, self.column)

    def peek(self) -> str | None:
        """Returns current character without advancing."""
        return self.text[self.pos] if self.pos < self.length else None

    def advance(self) -> str | None:
        """Returns current character and moves one column forward."""
        if self.pos >= self.length:
            return None
        char = self.text[self.pos]
        self.pos += 1
        self.column += 1
        return char

    def skip_whitespace(self) -> None:
        while self.pos < self.length and self.text[self.pos] in WHITESPACE:
            if self.text[self.pos] == "\n":
                self.line += 1
                self.column = 1
            else:
                self.column += 1
            self.pos += 1

    def next_token(self) -> PositionedToken | None:
        """
        Scans the next token.

        Returns None once the input is exhausted and raises JSONDecodeError
        on the first lexical error.
        """
        self.skip_whitespace()

        start = self.position
        char = self.advance()
        if char is None:
            return None

        if char in STRUCTURAL_KINDS:
            token = Token(STRUCTURAL_KINDS[char])
        elif char == '"':
            token = self.scan_string(start)
        elif char == "-" or char in DIGITS:
            token = self.scan_number(char, start)
        elif char in LITERAL_SUFFIXES:
            token = self.scan_literal(char)
        else:
            raise JSONDecodeError(ErrorKind.UNEXPECTED_CHARACTER, start, char)

        return PositionedToken(token, start)

    def scan_string(self, start: Position) -> Token:
        """Scans string content after the opening quote."""
        with ProfileContext("scan_string"):
            chars: list[str] = []
            while True:
                here = self.position
                char = self.advance()
                if char is None:
                    raise JSONDecodeError(ErrorKind.UNTERMINATED_STRING, start)
                if char == '"':
                    return Token(TokenKind.STRING, "".join(chars))
                if char == "\\":
                    chars.append(self._scan_escape(start))
                elif ord(char) < _CONTROL_LIMIT:
                    raise JSONDecodeError(
                        ErrorKind.INVALID_CONTROL_CHARACTER, here, char
                    )
                else:
                    chars.append(char)

    def _scan_escape(self, start: Position) -> str:
        here = self.position
        char = self.advance()
        if char is None:
            raise JSONDecodeError(ErrorKind.UNTERMINATED_STRING, start)
        if char in ESCAPES:
            return ESCAPES[char]
        if char == "u":
            return self._scan_unicode_escape()
        raise JSONDecodeError(ErrorKind.INVALID_ESCAPE, here, char)

    def _scan_unicode_escape(self) -> str:
        """Decodes the four hex digits following ``\\u``."""
        start = self.position
        digits = []
        for _ in range(4):
            here = self.position
            char = self.advance()
            if char is None:
                raise JSONDecodeError(
                    ErrorKind.INVALID_UNICODE_ESCAPE,
                    here,
                    "\\u" + "".join(digits),
                )
            if char not in HEX_DIGITS:
                raise JSONDecodeError(
                    ErrorKind.INVALID_UNICODE_ESCAPE,
                    here,
                    "\\u" + "".join(digits) + char,
                )
            digits.append(char)

        hex_digits = "".join(digits)
        code_point = int(hex_digits, 16)
        if code_point in _SURROGATES:
            raise JSONDecodeError(
                ErrorKind.INVALID_CODE_POINT, start, "\\u" + hex_digits
            )
        return chr(code_point)

    def scan_number(self, first_char: str, start: Position) -> Token:
        """Scans a number lexeme starting with `first_char`."""
        with ProfileContext("scan_number"):
            lexeme = [first_char]
            has_decimal = False
            has_exponent = False

            while (char := self.peek()) is not None:
                if char in DIGITS:
                    pass
                elif char == "." and not has_decimal and not has_exponent:
                    has_decimal = True
                elif char in "eE" and not has_exponent:
                    has_exponent = True
                    self.advance()
                    lexeme.append(char)
                    char = self.peek()
                    if char not in ("+", "-"):
                        continue
                else:
                    break
                self.advance()
                lexeme.append(char)

            text = "".join(lexeme)
            unsigned = text.removeprefix("-")
            if unsigned[:1] == "0" and unsigned[1:2] in DIGITS:
                raise JSONDecodeError(ErrorKind.LEADING_ZERO, start, text)

            try:
                number = float(text)
            except ValueError as e:
                raise JSONDecodeError(
                    ErrorKind.MALFORMED_NUMBER, start, text
                ) from e
            if not math.isfinite(number):
                raise JSONDecodeError(ErrorKind.MALFORMED_NUMBER, start, text)

            return Token(TokenKind.NUMBER, number, text)

    def scan_literal(self, first_char: str) -> Token:
        """Matches the fixed suffix of ``true``, ``false`` or ``null``."""
        with ProfileContext("scan_literal"):
            suffix, token = LITERAL_SUFFIXES[first_char]
            for i, expected in enumerate(suffix):
                here = self.position
                char = self.advance()
                if char != expected:
                    seen = first_char + suffix[:i] + (char or "")
                    raise JSONDecodeError(ErrorKind.INVALID_LITERAL, here, seen)
            return token


def tokenize(text: str) -> Iterator[PositionedToken]:
    """Lazily yields every token of `text`."""
    return Tokenizer(text)
