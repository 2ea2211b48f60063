"""
Commands package for penbot.
"""

from penbot.commands.base import CommandBase
from penbot.commands.command_list import CommandList
from penbot.commands.motion_commands import MoveCommand, TurnLeftCommand, TurnRightCommand
from penbot.commands.pen_commands import DownPenCommand, UpPenCommand

__all__ = [
    "CommandBase",
    "CommandList",
    "MoveCommand",
    "TurnLeftCommand",
    "TurnRightCommand",
    "DownPenCommand",
    "UpPenCommand",
]
