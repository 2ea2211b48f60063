"""
Command language interpreter

Assembles the scanner's tokens into a CommandList. Grammar:

    program    := statement*
    statement  := "move" NUMBER
                | "turn_left" NUMBER
                | "turn_right" NUMBER
                | "down_pen"
                | "up_pen"

Interpretation is all-or-nothing: the first error propagates and the commands
built so far are discarded.
"""

from __future__ import annotations

import logging

from penbot.commands import (
    CommandBase,
    CommandList,
    DownPenCommand,
    MoveCommand,
    TurnLeftCommand,
    TurnRightCommand,
    UpPenCommand,
)
from penbot.language.scanner import Scanner, Token, TokenKind
from penbot.utils.errors import InvalidCommandError, UnexpectedTokenError

logger = logging.getLogger(__name__)

# Keywords followed by a NUMBER argument
_ARGUMENT_COMMANDS: dict[TokenKind, type[CommandBase]] = {
    TokenKind.MOVE: MoveCommand,
    TokenKind.TURN_LEFT: TurnLeftCommand,
    TokenKind.TURN_RIGHT: TurnRightCommand,
}

# Keywords that stand alone
_BARE_COMMANDS: dict[TokenKind, type[CommandBase]] = {
    TokenKind.DOWN_PEN: DownPenCommand,
    TokenKind.UP_PEN: UpPenCommand,
}


class Interpreter:
    """Interpreter for one piece of command text."""

    def __init__(self, text: str):
        self.scanner = Scanner(text)

    def interpret(self) -> CommandList:
        """
        Build the command list for the whole input

        Returns:
            CommandList in source order

        Raises:
            UnexpectedTokenError: a token appears where another kind was required
            InvalidCommandError: the input ends before a required argument
            PenbotError: any scanner error, unchanged
        """
        command_list = CommandList()

        while True:
            token = self.scanner.next_token()
            if token is None:
                break
            command_list.add_command(self._command_for(token))

        logger.debug("Interpreted %d commands", len(command_list))
        return command_list

    def _command_for(self, token: Token) -> CommandBase:
        if token.kind in _BARE_COMMANDS:
            return _BARE_COMMANDS[token.kind]()
        if token.kind in _ARGUMENT_COMMANDS:
            return _ARGUMENT_COMMANDS[token.kind](self._expect_number())
        raise UnexpectedTokenError(token)

    def _expect_number(self) -> int:
        token = self.scanner.next_token()
        if token is None:
            raise InvalidCommandError()
        if token.kind is not TokenKind.NUMBER:
            raise UnexpectedTokenError(token)
        return token.value


def interpret(text: str) -> CommandList:
    """Interpret command text into a CommandList."""
    return Interpreter(text).interpret()
