"""
Strict JSON validator built on a hand-written tokenizer and parser.

Checks that a text conforms to the JSON grammar, requires an object or array
at the root, bounds nesting depth, and returns the parsed value tree as
native Python objects.
"""

from dataclasses import dataclass
from typing import IO
from typing import Any

from ._errors import ErrorCategory
from ._errors import ErrorKind
from ._errors import JSONDecodeError
from ._lexer import Tokenizer
from ._lexer import tokenize
from ._parser import MAX_DEPTH
from ._parser import JsonValue
from ._parser import Parser
from ._parser import depth_limit
from ._parser import parse
from ._profile import HotPathStats
from ._profile import clear_hot_path_stats
from ._profile import get_hot_path_stats
from ._tokens import Position
from ._tokens import PositionedToken
from ._tokens import Token
from ._tokens import TokenKind

__version__ = "0.1.0"


@dataclass(frozen=True)
class ParseConfig:
    """
    Configures validation behavior with immutable settings.

    `max_depth` bounds how many value rules may be entered below the root
    container. It is capped at `depth_limit()`, a third of the interpreter
    recursion limit.
    """

    max_depth: int = MAX_DEPTH

    def __post_init__(self) -> None:
        if not isinstance(self.max_depth, int) or isinstance(
            self.max_depth, bool
        ):
            raise TypeError("max_depth must be an integer")
        if self.max_depth < 0:
            raise ValueError("max_depth must be a non-negative integer")
        if self.max_depth > depth_limit():
            raise ValueError(
                f"max_depth must not exceed {depth_limit()} "
                "with the current recursion limit"
            )


def loads(s: str, **kwargs: Any) -> JsonValue:
    """
    Validates a JSON document and returns its parsed value.

    Raises JSONDecodeError describing the first grammar violation found.
    """
    if not isinstance(s, str):
        raise TypeError(
            f"the JSON object must be str, not {type(s).__name__}"
        )

    config = ParseConfig(**kwargs)
    return parse(s, config.max_depth)


def load(fp: IO[str], **kwargs: Any) -> JsonValue:
    """
    Validates a JSON document read from a file-like object.
    """
    if not hasattr(fp, "read"):
        raise TypeError("fp must have a read() method")

    return loads(fp.read(), **kwargs)


__all__ = [
    "MAX_DEPTH",
    "ErrorCategory",
    "ErrorKind",
    "HotPathStats",
    "JSONDecodeError",
    "JsonValue",
    "ParseConfig",
    "Parser",
    "Position",
    "PositionedToken",
    "Token",
    "TokenKind",
    "Tokenizer",
    "clear_hot_path_stats",
    "depth_limit",
    "get_hot_path_stats",
    "load",
    "loads",
    "tokenize",
]
