"""
CLI entry point for the penbot-console command.

Runs command-language programs against a single robot, either one program given
with ``-c`` or interactively, one line at a time.
"""

from __future__ import annotations

import argparse
import logging
import sys

from penbot.commands import CommandList
from penbot.config import LOG_DATEFMT, LOG_FORMAT, LOG_LEVEL_DEFAULT, PROMPT, TRACE
from penbot.language import interpret
from penbot.robot import Direction, LoggingObserver, Robot
from penbot.utils.errors import PenbotError

logger = logging.getLogger("penbot.cli.console")


def format_status(robot: Robot) -> str:
    return " ".join(f"{key}={value}" for key, value in robot.get_status().items())


class ConsoleSession:
    """
    Line-oriented driver around one persistent robot.

    Each program line is interpreted and executed as one CommandList. Lines that
    execute cleanly are kept on an undo stack. Lines starting with ``:`` are
    console directives:

        :status   print the robot state
        :undo     roll back the most recent program line
        :quit     leave the session
    """

    def __init__(self, robot: Robot, out=None, err=None) -> None:
        self.robot = robot
        self.history: list[CommandList] = []
        self._out = out
        self._err = err

    def _print(self, text: str) -> None:
        print(text, file=self._out or sys.stdout)

    def _error(self, text: str) -> None:
        print(text, file=self._err or sys.stderr)

    def handle_line(self, line: str) -> bool:
        """
        Process one input line.

        Returns:
            False when the session should end, True otherwise
        """
        text = line.strip()
        if text.startswith(":"):
            return self._directive(text[1:].strip())

        try:
            commands = interpret(text)
            commands.execute_all(self.robot)
        except PenbotError as e:
            self._error(str(e))
            return True

        if len(commands):
            self.history.append(commands)
        return True

    def undo(self) -> None:
        if not self.history:
            self._error("Nothing to undo")
            return
        commands = self.history.pop()
        try:
            commands.rollback_all(self.robot)
        except PenbotError as e:
            self._error(str(e))
            return
        logger.info(f"Rolled back: {commands}")

    def _directive(self, name: str) -> bool:
        if name == "quit":
            return False
        if name == "status":
            self._print(format_status(self.robot))
        elif name == "undo":
            self.undo()
        else:
            self._error(f"Unknown directive :{name}")
        return True

    def run(self) -> int:
        """Prompt loop until EOF or :quit."""
        while True:
            try:
                line = input(PROMPT)
            except EOFError:
                self._print("")
                return 0
            except KeyboardInterrupt:
                logger.info("Shutting down...")
                return 0
            if not self.handle_line(line):
                return 0


def run_once(robot: Robot, text: str, rollback: bool = False) -> int:
    """Execute one program, optionally roll it back, and print the final state."""
    try:
        commands = interpret(text)
        commands.execute_all(robot)
        if rollback:
            commands.rollback_all(robot)
    except PenbotError as e:
        print(e, file=sys.stderr)
        return 1
    print(format_status(robot))
    return 0


def _resolve_log_level(args: argparse.Namespace) -> int:
    if args.log_level:
        if args.log_level == "TRACE":
            return TRACE
        return getattr(logging, args.log_level)
    if args.verbose >= 3:
        return TRACE
    if args.verbose >= 2:
        return logging.DEBUG
    if args.verbose == 1:
        return logging.INFO
    if args.quiet:
        return logging.WARNING
    level = logging.getLevelName(LOG_LEVEL_DEFAULT)
    return level if isinstance(level, int) else logging.WARNING


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="penbot command console")
    parser.add_argument("-c", "--command", help="Run a single program and exit")
    parser.add_argument(
        "--rollback", action="store_true", help="With -c, roll the program back after running it"
    )
    parser.add_argument("--x", type=int, default=0, help="Starting column")
    parser.add_argument("--y", type=int, default=0, help="Starting row")
    parser.add_argument(
        "--direction", type=Direction.parse, default=Direction.UP, help="Starting heading"
    )

    parser.add_argument(
        "-v", "--verbose", action="count", default=0,
        help="Increase verbosity; -v=INFO, -vv=DEBUG, -vvv=TRACE",
    )
    parser.add_argument("-q", "--quiet", action="store_true", help="Enable quiet logging (WARNING level)")
    parser.add_argument(
        "--log-level",
        choices=["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set specific log level",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the console."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=_resolve_log_level(args), format=LOG_FORMAT, datefmt=LOG_DATEFMT)

    try:
        robot = Robot(args.x, args.y, args.direction, observer=LoggingObserver())
    except ValueError as e:
        parser.error(str(e))

    if args.command is not None:
        return run_once(robot, args.command, rollback=args.rollback)
    if args.rollback:
        parser.error("--rollback requires -c/--command")
    return ConsoleSession(robot).run()


def main_entry():
    """Entry point for the penbot-console command."""
    raise SystemExit(main())


if __name__ == "__main__":
    main_entry()
