"""Token vocabulary shared by the tokenizer and the parser."""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from enum import Enum


@dataclass(frozen=True)
class Position:
    """1-based line and column of the first character of a token."""

    line: int = 1
    column: int = 1

    def __str__(self) -> str:
        return f"line {self.line}, column {self.column}"


class TokenKind(Enum):
    """
    Closed set of lexical units produced by the tokenizer.

    Structural kinds carry their literal character as the enum value.
    """

    LEFT_BRACE = "{"
    RIGHT_BRACE = "}"
    LEFT_BRACKET = "["
    RIGHT_BRACKET = "]"
    COLON = ":"
    COMMA = ","
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"

    @property
    def is_structural(self) -> bool:
        return self in _STRUCTURAL


_STRUCTURAL = frozenset(
    {
        TokenKind.LEFT_BRACE,
        TokenKind.RIGHT_BRACE,
        TokenKind.LEFT_BRACKET,
        TokenKind.RIGHT_BRACKET,
        TokenKind.COLON,
        TokenKind.COMMA,
    }
)

STRUCTURAL_KINDS: dict[str, TokenKind] = {
    kind.value: kind for kind in _STRUCTURAL
}


@dataclass(frozen=True)
class Token:
    """
    Immutable lexical unit.

    `value` holds the decoded text for STRING, a float for NUMBER, a bool for
    BOOLEAN and None for every other kind. `text` keeps the source lexeme of
    a NUMBER for display and takes no part in equality.
    """

    kind: TokenKind
    value: str | float | bool | None = None
    text: str | None = field(default=None, compare=False)

    def __str__(self) -> str:
        if self.kind.is_structural:
            return f"'{self.kind.value}'"
        if self.kind == TokenKind.STRING:
            return f'string "{self.value}"'
        if self.kind == TokenKind.NUMBER:
            shown = self.text if self.text is not None else repr(self.value)
            return f"number {shown}"
        if self.kind == TokenKind.BOOLEAN:
            return "true" if self.value else "false"
        return "null"


@dataclass(frozen=True)
class PositionedToken:
    """A token paired with the position where it began."""

    token: Token
    position: Position

    @property
    def kind(self) -> TokenKind:
        return self.token.kind

    @property
    def value(self) -> str | float | bool | None:
        return self.token.value
