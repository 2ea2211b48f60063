"""
penbot Python Package

A grid robot driven by reversible commands, either scripted as a CommandList
or written in a small whitespace-delimited command language.

Key components:
- Robot / RobotBuilder: robot state and motion primitives
- CommandList: ordered batch with execute_all / rollback_all
- interpret: turns command text into a CommandList
- PenbotError: base of every error the pipeline raises
"""

from .commands import (
    CommandBase,
    CommandList,
    DownPenCommand,
    MoveCommand,
    TurnLeftCommand,
    TurnRightCommand,
    UpPenCommand,
)
from .language import Interpreter, Scanner, Token, TokenKind, interpret
from .robot import Direction, LoggingObserver, Robot, RobotBuilder, RobotObserver, RobotState
from .utils.errors import (
    InvalidCommandError,
    InvalidCommandParameterError,
    OutOfBoundsError,
    PenbotError,
    UndefinedCommandError,
    UnexpectedCharacterError,
    UnexpectedTokenError,
)

__version__ = "0.1.0"
__all__ = [
    "__version__",
    "Robot",
    "RobotBuilder",
    "RobotState",
    "RobotObserver",
    "LoggingObserver",
    "Direction",
    "CommandBase",
    "CommandList",
    "MoveCommand",
    "TurnLeftCommand",
    "TurnRightCommand",
    "DownPenCommand",
    "UpPenCommand",
    "Interpreter",
    "Scanner",
    "Token",
    "TokenKind",
    "interpret",
    "PenbotError",
    "OutOfBoundsError",
    "UnexpectedCharacterError",
    "UnexpectedTokenError",
    "InvalidCommandError",
    "UndefinedCommandError",
    "InvalidCommandParameterError",
]
