"""
Grid robot state and motion primitives.

The robot lives on an integer grid, faces one of four cardinal directions and
carries a pen. It can only move forward, one cell at a time, and turn in place.
Coordinates are bounded by a fixed-width signed integer type (see
``penbot.config.COORD_DTYPE``); stepping past a bound raises instead of wrapping.

State transitions are reported to an optional ``RobotObserver``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

from penbot.config import coord_limits
from penbot.utils.errors import OutOfBoundsError

logger = logging.getLogger(__name__)


class Direction(Enum):
    """Cardinal heading of the robot."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    def __str__(self) -> str:
        return self.value

    def left(self) -> Direction:
        return _LEFT_OF[self]

    def right(self) -> Direction:
        return _RIGHT_OF[self]

    @classmethod
    def parse(cls, text: str) -> Direction:
        """Parse a direction name, case-insensitively."""
        try:
            return cls(text.strip().lower())
        except ValueError:
            raise ValueError(f"Invalid direction: {text}") from None


_LEFT_OF = {
    Direction.UP: Direction.LEFT,
    Direction.LEFT: Direction.DOWN,
    Direction.DOWN: Direction.RIGHT,
    Direction.RIGHT: Direction.UP,
}
_RIGHT_OF = {after: before for before, after in _LEFT_OF.items()}

# (dx, dy) of a single forward step
_STEP = {
    Direction.UP: (0, 1),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, -1),
    Direction.LEFT: (-1, 0),
}


@dataclass(frozen=True)
class RobotState:
    """Immutable snapshot of a robot."""

    x: int
    y: int
    direction: Direction
    drawing: bool


class RobotObserver:
    """
    Diagnostic sink for robot state transitions.

    Every hook is a no-op; subclasses override the ones they care about.
    """

    def on_move(self, x: int, y: int) -> None:
        pass

    def on_draw(self, x: int, y: int) -> None:
        pass

    def on_turn(self, side: str, direction: Direction) -> None:
        pass

    def on_pen(self, drawing: bool) -> None:
        pass


class LoggingObserver(RobotObserver):
    """Reports robot transitions through the logging module at INFO level."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        self.log = log or logger

    def on_move(self, x: int, y: int) -> None:
        self.log.info("Move to forward at (%d, %d)", x, y)

    def on_draw(self, x: int, y: int) -> None:
        self.log.info("Drawing at (%d, %d)", x, y)

    def on_turn(self, side: str, direction: Direction) -> None:
        self.log.info("Turn %s to %s", side, direction)

    def on_pen(self, drawing: bool) -> None:
        self.log.info("Pen down" if drawing else "Pen up")


class Robot:
    """
    A pen-carrying robot on a bounded integer grid.

    Fields are exposed read-only; the robot only changes through
    ``move_forward``, ``turn_left``, ``turn_right``, ``down_pen`` and ``up_pen``.
    """

    __slots__ = ("_x", "_y", "_direction", "_drawing", "_min", "_max", "observer")

    def __init__(
        self,
        x: int = 0,
        y: int = 0,
        direction: Direction = Direction.UP,
        drawing: bool = False,
        *,
        observer: RobotObserver | None = None,
        dtype=None,
    ) -> None:
        """
        Args:
            x: Initial column
            y: Initial row
            direction: Initial heading
            drawing: Whether the pen starts down
            observer: Optional sink for state transitions
            dtype: numpy signed integer type bounding the coordinates

        Raises:
            ValueError: If a coordinate lies outside the dtype range or the
                direction is not a Direction
        """
        self._min, self._max = coord_limits(dtype)
        for name, value in (("x", x), ("y", y)):
            if not self._min <= value <= self._max:
                raise ValueError(
                    f"{name}={value} outside coordinate range [{self._min}, {self._max}]"
                )
        if not isinstance(direction, Direction):
            raise ValueError(f"Invalid direction: {direction!r}")
        self._x = int(x)
        self._y = int(y)
        self._direction = direction
        self._drawing = bool(drawing)
        self.observer = observer

    def __repr__(self) -> str:
        return (
            f"Robot(x={self._x}, y={self._y}, direction={self._direction}, "
            f"drawing={self._drawing})"
        )

    @property
    def x(self) -> int:
        return self._x

    @property
    def y(self) -> int:
        return self._y

    @property
    def direction(self) -> Direction:
        return self._direction

    @property
    def is_drawing(self) -> bool:
        return self._drawing

    @property
    def bounds(self) -> tuple[int, int]:
        """Inclusive (minimum, maximum) for either coordinate."""
        return self._min, self._max

    @property
    def state(self) -> RobotState:
        return RobotState(self._x, self._y, self._direction, self._drawing)

    def get_status(self) -> dict[str, Any]:
        """Get current state as dictionary for status reporting"""
        return {
            "x": self._x,
            "y": self._y,
            "direction": str(self._direction),
            "drawing": self._drawing,
        }

    def move_forward(self) -> None:
        """
        Advance one cell along the current heading.

        Raises:
            OutOfBoundsError: If the robot already sits on the bound it faces;
                the position is left unchanged
        """
        dx, dy = _STEP[self._direction]
        x, y = self._x + dx, self._y + dy
        if not (self._min <= x <= self._max and self._min <= y <= self._max):
            raise OutOfBoundsError()

        self._x, self._y = x, y
        if self.observer is not None:
            self.observer.on_move(x, y)
            if self._drawing:
                self.observer.on_draw(x, y)

    def turn_left(self) -> None:
        self._direction = self._direction.left()
        if self.observer is not None:
            self.observer.on_turn("left", self._direction)

    def turn_right(self) -> None:
        self._direction = self._direction.right()
        if self.observer is not None:
            self.observer.on_turn("right", self._direction)

    def down_pen(self) -> None:
        self._set_pen(True)

    def up_pen(self) -> None:
        self._set_pen(False)

    def _set_pen(self, drawing: bool) -> None:
        # Repeating the current state is a no-op
        if self._drawing == drawing:
            return
        self._drawing = drawing
        if self.observer is not None:
            self.observer.on_pen(drawing)


class RobotBuilder:
    """
    Fluent builder for Robot.

    Usage:
        robot = RobotBuilder().x(5).y(-3).direction(Direction.DOWN).build()
    """

    def __init__(self) -> None:
        self._x = 0
        self._y = 0
        self._direction = Direction.UP
        self._drawing = False
        self._observer: RobotObserver | None = None
        self._dtype = None

    def x(self, x: int) -> RobotBuilder:
        self._x = x
        return self

    def y(self, y: int) -> RobotBuilder:
        self._y = y
        return self

    def direction(self, direction: Direction) -> RobotBuilder:
        self._direction = direction
        return self

    def drawing(self, drawing: bool) -> RobotBuilder:
        self._drawing = drawing
        return self

    def observer(self, observer: RobotObserver | None) -> RobotBuilder:
        self._observer = observer
        return self

    def dtype(self, dtype) -> RobotBuilder:
        self._dtype = dtype
        return self

    def build(self) -> Robot:
        return Robot(
            self._x,
            self._y,
            self._direction,
            self._drawing,
            observer=self._observer,
            dtype=self._dtype,
        )
