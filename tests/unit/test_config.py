import logging

import numpy as np
import pytest

from penbot import config


def test_trace_level_registered():
    assert config.TRACE == 5
    assert logging.getLevelName(config.TRACE) == "TRACE"
    assert hasattr(logging.getLogger("penbot"), "trace")


def test_number_max_is_uint32_max():
    assert config.NUMBER_MAX == 4_294_967_295


def test_coord_limits():
    assert config.coord_limits(np.int8) == (-128, 127)
    assert config.coord_limits(np.int32) == (-(2**31), 2**31 - 1)
    assert config.coord_limits() == config.coord_limits(config.COORD_DTYPE)


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, 32),
        ("16", 16),
        (" 64 ", 64),
        ("12", 32),
        ("wide", 32),
    ],
)
def test_parse_coord_width(monkeypatch, raw, expected):
    if raw is None:
        monkeypatch.delenv("PENBOT_COORD_WIDTH", raising=False)
    else:
        monkeypatch.setenv("PENBOT_COORD_WIDTH", raw)
    assert config._parse_coord_width() == expected
