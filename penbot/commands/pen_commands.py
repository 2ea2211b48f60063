"""
Pen Commands
Contains the commands that lower and raise the drawing pen.

Rollback sets the opposite fixed pen state rather than restoring whatever state
the pen was in before ``execute``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from penbot.commands.base import CommandBase

if TYPE_CHECKING:
    from penbot.robot import Robot


@dataclass(frozen=True)
class DownPenCommand(CommandBase):
    """Lower the pen so that subsequent moves draw."""

    keyword: ClassVar[str] = "down_pen"

    def execute(self, robot: Robot) -> None:
        self.log_debug("Pen down")
        robot.down_pen()

    def rollback(self, robot: Robot) -> None:
        self.log_debug("Rolling back pen down")
        robot.up_pen()


@dataclass(frozen=True)
class UpPenCommand(CommandBase):
    """Raise the pen."""

    keyword: ClassVar[str] = "up_pen"

    def execute(self, robot: Robot) -> None:
        self.log_debug("Pen up")
        robot.up_pen()

    def rollback(self, robot: Robot) -> None:
        self.log_debug("Rolling back pen up")
        robot.down_pen()
