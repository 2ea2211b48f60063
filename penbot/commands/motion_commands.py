"""
Motion Commands
Contains the forward move and the two turn commands
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from penbot.commands.base import CommandBase

if TYPE_CHECKING:
    from penbot.robot import Robot


def normalize_turns(times: int) -> int:
    """Reduce a quarter-turn count to the equivalent count in [0, 3]."""
    return int(times) % 4


@dataclass(frozen=True)
class MoveCommand(CommandBase):
    """
    Move the robot ``distance`` cells along its current heading.

    Rollback turns around, walks the same distance back and turns around again,
    so it only restores the robot when the heading matches the one ``execute``
    left behind.
    """

    keyword: ClassVar[str] = "move"

    distance: int

    def __post_init__(self) -> None:
        if self.distance < 0:
            raise ValueError(f"Move distance must be non-negative, got {self.distance}")

    def execute(self, robot: Robot) -> None:
        self.log_debug("Moving robot %d steps", self.distance)
        for _ in range(self.distance):
            robot.move_forward()

    def rollback(self, robot: Robot) -> None:
        self.log_debug("Rolling back moving robot %d steps", self.distance)
        robot.turn_left()
        robot.turn_left()
        for _ in range(self.distance):
            robot.move_forward()
        robot.turn_left()
        robot.turn_left()

    def to_text(self) -> str:
        return f"{self.keyword} {self.distance}"


@dataclass(frozen=True)
class TurnLeftCommand(CommandBase):
    """Turn left 90 degrees ``times`` times; the count is stored modulo 4."""

    keyword: ClassVar[str] = "turn_left"

    times: int = 1

    def __post_init__(self) -> None:
        object.__setattr__(self, "times", normalize_turns(self.times))

    def execute(self, robot: Robot) -> None:
        self.log_debug("Turning robot left %d times", self.times)
        for _ in range(self.times):
            robot.turn_left()

    def rollback(self, robot: Robot) -> None:
        self.log_debug("Rolling back turning robot left %d times", self.times)
        for _ in range(self.times):
            robot.turn_right()

    def to_text(self) -> str:
        return f"{self.keyword} {self.times}"


@dataclass(frozen=True)
class TurnRightCommand(CommandBase):
    """Turn right 90 degrees ``times`` times; the count is stored modulo 4."""

    keyword: ClassVar[str] = "turn_right"

    times: int = 1

    def __post_init__(self) -> None:
        object.__setattr__(self, "times", normalize_turns(self.times))

    def execute(self, robot: Robot) -> None:
        self.log_debug("Turning robot right %d times", self.times)
        for _ in range(self.times):
            robot.turn_right()

    def rollback(self, robot: Robot) -> None:
        self.log_debug("Rolling back turning robot right %d times", self.times)
        for _ in range(self.times):
            robot.turn_left()

    def to_text(self) -> str:
        return f"{self.keyword} {self.times}"
