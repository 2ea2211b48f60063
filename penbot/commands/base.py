"""
Base abstractions and helpers for command implementations.
"""

from __future__ import annotations

import copy
import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar

from penbot.config import TRACE

if TYPE_CHECKING:
    from penbot.robot import Robot

logger = logging.getLogger(__name__)


class CommandBase(ABC):
    """
    Reversible unit of work over a Robot.

    A command carries only its own configuration and never keeps a reference to
    the robot it runs against, so one instance can be executed and rolled back
    any number of times. ``rollback`` assumes the robot is in the state the
    matching ``execute`` left it in.
    """

    # Command-language keyword, also used as the log prefix
    keyword: ClassVar[str] = ""

    __slots__ = ()

    @property
    def name(self) -> str:
        return self.keyword or type(self).__name__

    # Logging helpers (uniform, include command identity)
    def log_trace(self, msg: str, *args: Any) -> None:
        logger.log(TRACE, "[%s] " + msg, self.name, *args)

    def log_debug(self, msg: str, *args: Any) -> None:
        logger.debug("[%s] " + msg, self.name, *args)

    @abstractmethod
    def execute(self, robot: Robot) -> None:
        """
        Apply the command to the robot.

        Raises:
            PenbotError: On the first failing robot operation; effects applied
                before the failure are kept
        """
        raise NotImplementedError

    @abstractmethod
    def rollback(self, robot: Robot) -> None:
        """Apply the inverse of ``execute`` to the robot."""
        raise NotImplementedError

    def clone(self) -> CommandBase:
        """Independent copy that can be stored and replayed on its own."""
        return copy.copy(self)

    def to_text(self) -> str:
        """Render the command in the command language."""
        return self.keyword
