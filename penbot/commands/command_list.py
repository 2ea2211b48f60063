"""
Ordered batch of commands with stack-disciplined execute and rollback.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from penbot.commands.base import CommandBase

if TYPE_CHECKING:
    from penbot.robot import Robot

logger = logging.getLogger(__name__)


class CommandList:
    """
    Ordered sequence of commands; insertion order is execution order.

    ``execute_all`` and ``rollback_all`` are fail-fast: the first error stops
    the batch and propagates unchanged, and commands already applied are not
    compensated. ``rollback_all`` walks the list in reverse, since each
    rollback expects the robot exactly as its own ``execute`` left it.
    """

    __slots__ = ("_commands",)

    def __init__(self, commands: Iterable[CommandBase] = ()) -> None:
        self._commands: list[CommandBase] = []
        for command in commands:
            self.add_command(command)

    def __len__(self) -> int:
        return len(self._commands)

    def __iter__(self) -> Iterator[CommandBase]:
        return iter(self._commands)

    def __getitem__(self, index: int) -> CommandBase:
        return self._commands[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CommandList):
            return NotImplemented
        return self._commands == other._commands

    def __repr__(self) -> str:
        return f"CommandList({self._commands!r})"

    def __str__(self) -> str:
        return " ".join(command.to_text() for command in self._commands)

    @property
    def commands(self) -> tuple[CommandBase, ...]:
        return tuple(self._commands)

    def add_command(self, command: CommandBase) -> None:
        if not isinstance(command, CommandBase):
            raise TypeError(f"Expected a command, got {type(command).__name__}")
        self._commands.append(command)

    def clone(self) -> CommandList:
        return CommandList(command.clone() for command in self._commands)

    def execute_all(self, robot: Robot) -> None:
        logger.debug("Executing %d commands", len(self._commands))
        for command in self._commands:
            command.log_trace("execute state=%s", robot.state)
            command.execute(robot)

    def rollback_all(self, robot: Robot) -> None:
        logger.debug("Rolling back %d commands", len(self._commands))
        for command in reversed(self._commands):
            command.log_trace("rollback state=%s", robot.state)
            command.rollback(robot)
