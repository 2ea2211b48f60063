"""
Scripted command list quickstart for penbot.
- Builds a CommandList by hand instead of parsing text
- Executes it against a fresh robot, then rolls it back
- Set PENBOT_LOG_LEVEL=DEBUG to see every command and robot transition

Run from the repository root:
    python examples/scripted_commands.py
"""

import logging

from penbot import (
    CommandList,
    DownPenCommand,
    LoggingObserver,
    MoveCommand,
    Robot,
    TurnLeftCommand,
    TurnRightCommand,
    UpPenCommand,
)
from penbot.config import LOG_DATEFMT, LOG_FORMAT, LOG_LEVEL_DEFAULT

logger = logging.getLogger("penbot.examples.scripted_commands")


def build_command_list() -> CommandList:
    return CommandList(
        [
            MoveCommand(1),
            TurnLeftCommand(3),
            MoveCommand(2),
            TurnRightCommand(2),
            MoveCommand(3),
            DownPenCommand(),
            UpPenCommand(),
            MoveCommand(4),
            DownPenCommand(),
        ]
    )


def main() -> None:
    logging.basicConfig(level=LOG_LEVEL_DEFAULT, format=LOG_FORMAT, datefmt=LOG_DATEFMT)

    robot = Robot(observer=LoggingObserver())
    commands = build_command_list()

    print("before:", robot)
    print("program:", commands)
    commands.execute_all(robot)
    print("after execute:", robot)
    commands.rollback_all(robot)
    print("after rollback:", robot)


if __name__ == "__main__":
    main()
