"""
Central configuration for penbot tunables and shared constants.
"""

import logging
import os

import numpy as np

TRACE: int = 5
logging.addLevelName(TRACE, "TRACE")
# Add Logger.trace if missing
if not hasattr(logging.Logger, "trace"):

    def _trace(self, msg, *args, **kwargs):
        if self.isEnabledFor(TRACE):
            self._log(TRACE, msg, args, **kwargs)

    logging.Logger.trace = _trace  # type: ignore[attr-defined]
    logging.TRACE = TRACE  # type: ignore[attr-defined]

logger = logging.getLogger(__name__)

LOG_LEVEL_DEFAULT: str = os.getenv("PENBOT_LOG_LEVEL", "WARNING").strip().upper()
LOG_FORMAT: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT: str = "%H:%M:%S"

PROMPT: str = os.getenv("PENBOT_PROMPT", "> ")

# Signed integer widths accepted for robot coordinates
_COORD_DTYPES: dict[int, type[np.signedinteger]] = {
    8: np.int8,
    16: np.int16,
    32: np.int32,
    64: np.int64,
}


def _parse_coord_width() -> int:
    raw = os.getenv("PENBOT_COORD_WIDTH")
    if not raw:
        return 32
    try:
        width = int(raw.strip())
    except ValueError:
        logger.warning(f"Ignoring PENBOT_COORD_WIDTH={raw!r}: not an integer")
        return 32
    if width not in _COORD_DTYPES:
        logger.warning(f"Ignoring PENBOT_COORD_WIDTH={width}: expected one of {sorted(_COORD_DTYPES)}")
        return 32
    return width


COORD_WIDTH: int = _parse_coord_width()
COORD_DTYPE: type[np.signedinteger] = _COORD_DTYPES[COORD_WIDTH]

# Largest numeric literal the command language accepts
NUMBER_MAX: int = int(np.iinfo(np.uint32).max)


def coord_limits(dtype=None) -> tuple[int, int]:
    """
    Inclusive coordinate range for a signed integer dtype.

    Args:
        dtype: numpy signed integer type, defaults to COORD_DTYPE

    Returns:
        Tuple of (minimum, maximum)
    """
    info = np.iinfo(COORD_DTYPE if dtype is None else dtype)
    return int(info.min), int(info.max)
