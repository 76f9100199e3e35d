"""Command codes and command builders.

Each command is identified by a single-byte code. The device echoes the
same code in its response frame, so these values are also the keys a
response decoder dispatches on. Values come from the WSG command set
reference and must not be renumbered.
"""

from __future__ import annotations

import logging
from enum import IntEnum

from .framing import InvalidArgument, build_frame, require_octet

logger = logging.getLogger(__name__)


class Command(IntEnum):
    """Command codes."""

    LOOP = 0x06
    DISCONNECT_ANNOUNCE = 0x07
    HOME = 0x20
    PRE_POSITION = 0x21
    STOP = 0x22
    FAST_STOP = 0x23
    ACKNOWLEDGE_FAULT = 0x24
    GRASP = 0x25
    RELEASE = 0x26
    SET_ACCELERATION = 0x30
    GET_ACCELERATION = 0x31
    SET_FORCE_LIMIT = 0x32
    GET_FORCE_LIMIT = 0x33
    SET_SOFT_LIMITS = 0x34
    GET_SOFT_LIMITS = 0x35
    CLEAR_SOFT_LIMITS = 0x36
    TARE_FORCE_SENSOR = 0x38
    GET_SYSTEM_STATE = 0x40
    GET_GRASP_STATE = 0x41
    GET_GRASP_STATISTICS = 0x42
    GET_OPENING_WIDTH = 0x43
    GET_SPEED = 0x44
    GET_FORCE = 0x45
    GET_TEMPERATURE = 0x46
    GET_SYSTEM_INFO = 0x50
    SET_DEVICE_TAG = 0x51
    GET_DEVICE_TAG = 0x52
    GET_SYSTEM_LIMITS = 0x53
    GET_FINGER_INFO = 0x60
    GET_FINGER_FLAGS = 0x61
    FINGER_POWER_CONTROL = 0x62
    GET_FINGER_DATA = 0x63


# Command families, in the order the command set reference lists them
COMMAND_GROUPS: dict[str, tuple[Command, ...]] = {
    "connection": (
        Command.LOOP,
        Command.DISCONNECT_ANNOUNCE,
    ),
    "motion": (
        Command.HOME,
        Command.PRE_POSITION,
        Command.STOP,
        Command.FAST_STOP,
        Command.ACKNOWLEDGE_FAULT,
        Command.GRASP,
        Command.RELEASE,
    ),
    "settings": (
        Command.SET_ACCELERATION,
        Command.GET_ACCELERATION,
        Command.SET_FORCE_LIMIT,
        Command.GET_FORCE_LIMIT,
        Command.SET_SOFT_LIMITS,
        Command.GET_SOFT_LIMITS,
        Command.CLEAR_SOFT_LIMITS,
        Command.TARE_FORCE_SENSOR,
    ),
    "system_state": (
        Command.GET_SYSTEM_STATE,
        Command.GET_GRASP_STATE,
        Command.GET_GRASP_STATISTICS,
        Command.GET_OPENING_WIDTH,
        Command.GET_SPEED,
        Command.GET_FORCE,
        Command.GET_TEMPERATURE,
    ),
    "system": (
        Command.GET_SYSTEM_INFO,
        Command.SET_DEVICE_TAG,
        Command.GET_DEVICE_TAG,
        Command.GET_SYSTEM_LIMITS,
    ),
    "finger": (
        Command.GET_FINGER_INFO,
        Command.GET_FINGER_FLAGS,
        Command.FINGER_POWER_CONTROL,
        Command.GET_FINGER_DATA,
    ),
}


def parse_command_name(text: str) -> int:
    """Resolve a command given by name or numeric literal.

    Names are case-insensitive and accept ``-`` or spaces for ``_``
    (``"pre-position"``). Numeric literals may be decimal or prefixed
    (``"0x25"``); codes outside :class:`Command` are returned as plain ints
    so vendor extensions can still be framed.

    Raises:
        InvalidArgument: If ``text`` is neither a known name nor an integer
            in 0-255.
    """
    key = text.strip().upper().replace("-", "_").replace(" ", "_")
    if key in Command.__members__:
        return Command[key]
    try:
        value = int(text.strip(), 0)
    except ValueError:
        raise InvalidArgument(f"Unknown command '{text}'") from None
    if not 0 <= value <= 0xFF:
        raise InvalidArgument(f"Command must be 0-255, got {value}")
    try:
        return Command(value)
    except ValueError:
        return value


def command_name(command: int) -> str | None:
    """Return the enum name for a command code, or None if it is not defined."""
    try:
        return Command(command).name
    except ValueError:
        return None


def build_command(command: int, payload: bytes = b"") -> bytes:
    """Build the wire frame for a command."""
    frame = build_frame(command, payload)
    logger.debug(
        "Built %s (%d bytes)", command_name(command) or hex(command), len(frame)
    )
    return frame


def build_loop(payload: bytes = b"") -> bytes:
    """Build a Loop command; the device echoes ``payload`` back unchanged."""
    return build_command(Command.LOOP, payload)


def build_disconnect_announce() -> bytes:
    """Build a DisconnectAnnounce command sent before closing the link."""
    return build_command(Command.DISCONNECT_ANNOUNCE)


def build_stop() -> bytes:
    """Build a Stop command."""
    return build_command(Command.STOP)


def build_fast_stop() -> bytes:
    """Build a FastStop command."""
    return build_command(Command.FAST_STOP)


def build_get_system_state() -> bytes:
    """Build a GetSystemState read."""
    return build_command(Command.GET_SYSTEM_STATE)


def build_get_system_info() -> bytes:
    """Build a GetSystemInfo read."""
    return build_command(Command.GET_SYSTEM_INFO)


def build_get_finger_info(finger_index: int) -> bytes:
    """Build a GetFingerInfo read for one finger module.

    Args:
        finger_index: Finger slot 0-255.
    """
    index = require_octet(finger_index, "Finger index")
    return build_command(Command.GET_FINGER_INFO, bytes([index]))
