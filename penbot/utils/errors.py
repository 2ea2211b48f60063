"""
Custom exception types for the penbot command pipeline.
Keep this focused and non-redundant; prefer built-ins where appropriate.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from penbot.language.scanner import Token


class PenbotError(RuntimeError):
    """Base class for every error raised by the robot, commands and language."""


class OutOfBoundsError(PenbotError):
    """A move would leave the representable coordinate range."""

    def __init__(self, message: str = "Out of bounds"):
        super().__init__(message)


class UnexpectedCharacterError(PenbotError):
    """Scanner met a character that is neither a letter, a digit nor whitespace."""

    def __init__(self, char: str):
        self.char = char
        super().__init__(f"Unexpected character: {char}")


class UnexpectedTokenError(PenbotError):
    """Interpreter expected one kind of token and received another."""

    def __init__(self, token: Token):
        self.token = token
        super().__init__(f"Unexpected token: {token!r}")


class InvalidCommandError(PenbotError):
    """A command keyword ended the input before its required argument."""

    def __init__(self, message: str = "Invalid command"):
        super().__init__(message)


class UndefinedCommandError(PenbotError):
    """Scanned keyword text matches no known command."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Undefined command {text}")


class InvalidCommandParameterError(PenbotError):
    """Scanned numeric text is not a valid unsigned integer."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Invalid command parameter {text}")
