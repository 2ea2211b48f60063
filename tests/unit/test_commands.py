import logging

import numpy as np
import pytest

from penbot.commands import (
    CommandBase,
    DownPenCommand,
    MoveCommand,
    TurnLeftCommand,
    TurnRightCommand,
    UpPenCommand,
)
from penbot.robot import Direction, Robot, RobotState
from penbot.utils.errors import OutOfBoundsError


def test_move_execute_and_rollback(robot):
    cmd = MoveCommand(3)

    cmd.execute(robot)
    assert (robot.x, robot.y) == (0, 3)

    cmd.rollback(robot)
    assert robot.state == RobotState(0, 0, Direction.UP, False)


def test_move_zero_is_noop(robot):
    cmd = MoveCommand(0)
    cmd.execute(robot)
    cmd.rollback(robot)
    assert robot.state == RobotState(0, 0, Direction.UP, False)


def test_move_rejects_negative_distance():
    with pytest.raises(ValueError):
        MoveCommand(-1)


def test_move_stops_at_first_failure_without_undoing():
    robot = Robot(0, 125, Direction.UP, dtype=np.int8)
    with pytest.raises(OutOfBoundsError):
        MoveCommand(5).execute(robot)
    # Two steps succeeded before the bound
    assert robot.y == 127


def test_move_replay_reproduces_same_delta(robot):
    cmd = MoveCommand(2)
    cmd.execute(robot)
    cmd.execute(robot)
    assert robot.y == 4


def test_turn_left_execute_and_rollback(robot):
    cmd = TurnLeftCommand(1)
    cmd.execute(robot)
    assert robot.direction is Direction.LEFT
    cmd.rollback(robot)
    assert robot.direction is Direction.UP


def test_turn_right_execute_and_rollback(robot):
    cmd = TurnRightCommand(2)
    cmd.execute(robot)
    assert robot.direction is Direction.DOWN
    cmd.rollback(robot)
    assert robot.direction is Direction.UP


@pytest.mark.parametrize("cls", [TurnLeftCommand, TurnRightCommand])
@pytest.mark.parametrize("times", [0, 1, 2, 3, 4, 5, 8, 90, 4_294_967_295])
def test_turns_normalize_mod_four(cls, times):
    cmd = cls(times)
    assert cmd.times == times % 4
    assert cmd == cls(times % 4)

    direct, reduced = Robot(), Robot()
    cmd.execute(direct)
    cls(times % 4).execute(reduced)
    assert direct.direction is reduced.direction


def test_four_left_turns_leave_heading_unchanged(robot):
    for _ in range(4):
        TurnLeftCommand(1).execute(robot)
    assert robot.direction is Direction.UP
    TurnLeftCommand(4).execute(robot)
    assert robot.direction is Direction.UP


def test_down_pen_execute_and_rollback(robot):
    cmd = DownPenCommand()
    cmd.execute(robot)
    assert robot.is_drawing is True
    cmd.rollback(robot)
    assert robot.is_drawing is False


def test_up_pen_execute_and_rollback(robot):
    robot.down_pen()
    cmd = UpPenCommand()
    cmd.execute(robot)
    assert robot.is_drawing is False
    cmd.rollback(robot)
    assert robot.is_drawing is True


def test_pen_rollback_sets_fixed_state_not_prior_state(robot):
    # Pen already down: executing and rolling back DownPen leaves it up
    robot.down_pen()
    cmd = DownPenCommand()
    cmd.execute(robot)
    cmd.rollback(robot)
    assert robot.is_drawing is False


def test_clone_is_equal_and_independent(robot):
    original = MoveCommand(2)
    copy = original.clone()
    assert copy == original
    assert copy is not original

    copy.execute(robot)
    assert robot.y == 2


def test_commands_are_immutable():
    cmd = MoveCommand(2)
    with pytest.raises(AttributeError):
        cmd.distance = 5


def test_to_text():
    assert MoveCommand(10).to_text() == "move 10"
    assert TurnLeftCommand(5).to_text() == "turn_left 1"
    assert TurnRightCommand(3).to_text() == "turn_right 3"
    assert DownPenCommand().to_text() == "down_pen"
    assert UpPenCommand().to_text() == "up_pen"


def test_command_base_is_abstract():
    with pytest.raises(TypeError):
        CommandBase()


def test_commands_log_with_name_prefix(robot, caplog):
    with caplog.at_level(logging.DEBUG, logger="penbot.commands.base"):
        MoveCommand(1).execute(robot)
        TurnRightCommand(1).rollback(robot)
    messages = [r.getMessage() for r in caplog.records]
    assert "[move] Moving robot 1 steps" in messages
    assert "[turn_right] Rolling back turning robot right 1 times" in messages
