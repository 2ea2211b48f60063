"""
Command language scanner

Splits free-form text into typed tokens. Tokens are whitespace delimited:
a word starting with a letter is a keyword, a word starting with an ASCII
digit is an unsigned integer, anything else is rejected.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from penbot.config import NUMBER_MAX, TRACE
from penbot.utils.errors import (
    InvalidCommandParameterError,
    UndefinedCommandError,
    UnexpectedCharacterError,
)

logger = logging.getLogger(__name__)


class TokenKind(Enum):
    MOVE = "MOVE"
    TURN_LEFT = "TURN_LEFT"
    TURN_RIGHT = "TURN_RIGHT"
    DOWN_PEN = "DOWN_PEN"
    UP_PEN = "UP_PEN"
    NUMBER = "NUMBER"


KEYWORDS: dict[str, TokenKind] = {
    "move": TokenKind.MOVE,
    "turn_left": TokenKind.TURN_LEFT,
    "turn_right": TokenKind.TURN_RIGHT,
    "down_pen": TokenKind.DOWN_PEN,
    "up_pen": TokenKind.UP_PEN,
}


@dataclass(frozen=True, repr=False)
class Token:
    """A scanned token; ``value`` is set only for NUMBER tokens."""

    kind: TokenKind
    value: int | None = None

    def __repr__(self) -> str:
        if self.kind is TokenKind.NUMBER:
            return f"Token({self.kind.name}, {self.value})"
        return f"Token({self.kind.name})"


class Scanner:
    """
    Lazy tokenizer over a string.

    The scanner consumes its input as it goes and cannot be rewound. After an
    error the remaining input is in an unspecified position and should not be
    scanned further.
    """

    def __init__(self, text: str):
        self._chars = iter(text)

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            if token is None:
                return
            yield token

    def next_token(self) -> Token | None:
        """
        Scan the next token

        Returns:
            The next Token, or None once the input is exhausted

        Raises:
            UndefinedCommandError: word is not a known keyword
            InvalidCommandParameterError: word starting with a digit is not a valid number
            UnexpectedCharacterError: a word starts with neither a letter nor a digit
        """
        for ch in self._chars:
            if ch.isspace():
                continue
            if ch.isalpha():
                token = self._scan_keyword(ch)
            elif ch.isascii() and ch.isdigit():
                token = self._scan_number(ch)
            else:
                raise UnexpectedCharacterError(ch)
            logger.log(TRACE, "token %r", token)
            return token
        return None

    def _read_word(self, first: str) -> str:
        # Consumes the terminating whitespace character as well
        buffer = [first]
        for ch in self._chars:
            if ch.isspace():
                break
            buffer.append(ch)
        return "".join(buffer)

    def _scan_keyword(self, first: str) -> Token:
        text = self._read_word(first)
        kind = KEYWORDS.get(text)
        if kind is None:
            raise UndefinedCommandError(text)
        return Token(kind)

    def _scan_number(self, first: str) -> Token:
        text = self._read_word(first)
        if not (text.isascii() and text.isdigit()):
            raise InvalidCommandParameterError(text)
        value = int(text)
        if value > NUMBER_MAX:
            raise InvalidCommandParameterError(text)
        return Token(TokenKind.NUMBER, value)
