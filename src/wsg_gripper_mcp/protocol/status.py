"""Status codes and system state flags reported by the gripper.

Response frames carry a 16-bit :class:`StatusCode` ahead of their payload,
and GetSystemState returns a 32-bit :class:`StateFlag` word. Both are
decoded by higher layers; this module only holds the vocabulary.
"""

from __future__ import annotations

from enum import IntEnum, IntFlag

from .framing import InvalidArgument


class StatusCode(IntEnum):
    """Result codes returned in device response frames."""

    SUCCESS = 0
    NOT_AVAILABLE = 1
    NO_SENSOR = 2
    NOT_INITIALIZED = 3
    ALREADY_RUNNING = 4
    FEATURE_NOT_SUPPORTED = 5
    INCONSISTENT_DATA = 6
    TIMEOUT = 7
    READ_ERROR = 8
    WRITE_ERROR = 9
    INSUFFICIENT_RESOURCES = 10
    CHECKSUM_ERROR = 11
    NO_PARAM_EXPECTED = 12
    NOT_ENOUGH_PARAMS = 13
    CMD_UNKNOWN = 14
    CMD_FORMAT_ERROR = 15
    ACCESS_DENIED = 16
    ALREADY_OPEN = 17
    CMD_FAILED = 18
    CMD_ABORTED = 19
    INVALID_HANDLE = 20
    NOT_FOUND = 21
    NOT_OPEN = 22
    IO_ERROR = 23
    INVALID_PARAMETER = 24
    INDEX_OUT_OF_BOUNDS = 25
    CMD_PENDING = 26
    OVERRUN = 27
    RANGE_ERROR = 28
    AXIS_BLOCKED = 29
    FILE_EXISTS = 30


class StateFlag(IntFlag):
    """System state bits. Bits 8, 10, 11 and 21-31 are reserved."""

    REFERENCED = 1 << 0
    MOVING = 1 << 1
    BLOCKED_MINUS = 1 << 2
    BLOCKED_PLUS = 1 << 3
    SOFT_LIMIT_MINUS = 1 << 4
    SOFT_LIMIT_PLUS = 1 << 5
    AXIS_STOPPED = 1 << 6
    TARGET_POS_REACHED = 1 << 7
    FORCECNTL_MODE = 1 << 9
    FAST_STOP = 1 << 12
    TEMP_WARNING = 1 << 13
    TEMP_FAULT = 1 << 14
    POWER_FAULT = 1 << 15
    CURR_FAULT = 1 << 16
    FINGER_FAULT = 1 << 17
    CMD_FAILURE = 1 << 18
    SCRIPT_RUNNING = 1 << 19
    SCRIPT_FAILURE = 1 << 20


FAULT_FLAGS = (
    StateFlag.TEMP_FAULT
    | StateFlag.POWER_FAULT
    | StateFlag.CURR_FAULT
    | StateFlag.FINGER_FAULT
    | StateFlag.CMD_FAILURE
    | StateFlag.SCRIPT_FAILURE
)

STATE_WORD_MAX = 0xFFFFFFFF


def _check_word(word: int) -> None:
    if not 0 <= word <= STATE_WORD_MAX:
        raise InvalidArgument(f"State word must be 0-0x{STATE_WORD_MAX:08X}, got {word}")


def status_name(code: int) -> str:
    """Return the name of a status code.

    Raises:
        InvalidArgument: If ``code`` is not a defined status code.
    """
    try:
        return StatusCode(code).name
    except ValueError:
        raise InvalidArgument(f"Unknown status code {code}") from None


def state_flag_names(word: int) -> list[str]:
    """List the defined flags set in a system state word, lowest bit first.

    Reserved bits are ignored.

    Raises:
        InvalidArgument: If ``word`` does not fit in 32 bits.
    """
    _check_word(word)
    return [flag.name for flag in StateFlag if word & flag]


def has_fault(word: int) -> bool:
    """True if any fault bit is set in ``word``.

    Raises:
        InvalidArgument: If ``word`` does not fit in 32 bits.
    """
    _check_word(word)
    return bool(word & FAULT_FLAGS)
