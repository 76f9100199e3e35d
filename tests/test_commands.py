"""Tests for command codes and command builders."""

import pytest

from wsg_gripper_mcp.protocol.commands import (
    COMMAND_GROUPS,
    Command,
    build_command,
    build_disconnect_announce,
    build_fast_stop,
    build_get_finger_info,
    build_get_system_info,
    build_get_system_state,
    build_loop,
    build_stop,
    command_name,
    parse_command_name,
)
from wsg_gripper_mcp.protocol.framing import InvalidArgument


EXPECTED_COMMANDS = {
    "LOOP": 0x06,
    "DISCONNECT_ANNOUNCE": 0x07,
    "HOME": 0x20,
    "PRE_POSITION": 0x21,
    "STOP": 0x22,
    "FAST_STOP": 0x23,
    "ACKNOWLEDGE_FAULT": 0x24,
    "GRASP": 0x25,
    "RELEASE": 0x26,
    "SET_ACCELERATION": 0x30,
    "GET_ACCELERATION": 0x31,
    "SET_FORCE_LIMIT": 0x32,
    "GET_FORCE_LIMIT": 0x33,
    "SET_SOFT_LIMITS": 0x34,
    "GET_SOFT_LIMITS": 0x35,
    "CLEAR_SOFT_LIMITS": 0x36,
    "TARE_FORCE_SENSOR": 0x38,
    "GET_SYSTEM_STATE": 0x40,
    "GET_GRASP_STATE": 0x41,
    "GET_GRASP_STATISTICS": 0x42,
    "GET_OPENING_WIDTH": 0x43,
    "GET_SPEED": 0x44,
    "GET_FORCE": 0x45,
    "GET_TEMPERATURE": 0x46,
    "GET_SYSTEM_INFO": 0x50,
    "SET_DEVICE_TAG": 0x51,
    "GET_DEVICE_TAG": 0x52,
    "GET_SYSTEM_LIMITS": 0x53,
    "GET_FINGER_INFO": 0x60,
    "GET_FINGER_FLAGS": 0x61,
    "FINGER_POWER_CONTROL": 0x62,
    "GET_FINGER_DATA": 0x63,
}


def test_command_enum_values():
    """Every command code must match the command set reference exactly."""
    assert {cmd.name: cmd.value for cmd in Command} == EXPECTED_COMMANDS


def test_command_groups_cover_every_command():
    grouped = [cmd for cmds in COMMAND_GROUPS.values() for cmd in cmds]
    assert sorted(grouped) == sorted(Command)
    assert len(grouped) == len(set(grouped))


def test_build_command_matches_layout():
    data = build_command(Command.RELEASE, b"\x00\x00\xA0\x41")
    assert data[:6] == b"\xAA\xAA\xAA\x26\x04\x00"
    assert data[6:10] == b"\x00\x00\xA0\x41"
    assert len(data) == 12


def test_build_stop():
    data = build_stop()
    assert data[3] == Command.STOP
    assert data[4:6] == b"\x00\x00"
    assert len(data) == 8


def test_build_fast_stop():
    assert build_fast_stop()[3] == Command.FAST_STOP


def test_build_disconnect_announce():
    assert build_disconnect_announce()[3] == Command.DISCONNECT_ANNOUNCE


def test_build_get_system_state():
    assert build_get_system_state()[3] == Command.GET_SYSTEM_STATE


def test_build_get_system_info():
    assert build_get_system_info()[3] == Command.GET_SYSTEM_INFO


def test_build_loop_carries_payload():
    data = build_loop(b"ping")
    assert data[3] == Command.LOOP
    assert data[6:10] == b"ping"


def test_build_get_finger_info():
    data = build_get_finger_info(1)
    assert data[3] == Command.GET_FINGER_INFO
    assert data[4:7] == b"\x01\x00\x01"


def test_finger_index_bounds():
    with pytest.raises(InvalidArgument):
        build_get_finger_info(256)
    with pytest.raises(InvalidArgument):
        build_get_finger_info(-1)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("grasp", Command.GRASP),
        ("GRASP", Command.GRASP),
        ("pre-position", Command.PRE_POSITION),
        ("get system state", Command.GET_SYSTEM_STATE),
        ("0x25", Command.GRASP),
        ("37", Command.GRASP),
    ],
)
def test_parse_command_name(text, expected):
    assert parse_command_name(text) == expected


def test_parse_command_name_unlisted_code():
    """Codes outside the enum are still valid frame commands."""
    result = parse_command_name("0x99")
    assert result == 0x99
    assert not isinstance(result, Command)


@pytest.mark.parametrize("text", ["squeeze", "0x100", "-1", ""])
def test_parse_command_name_invalid(text):
    with pytest.raises(InvalidArgument):
        parse_command_name(text)


def test_command_name():
    assert command_name(0x25) == "GRASP"
    assert command_name(0x99) is None


@pytest.mark.parametrize("finger_index", ["1", 1.5, True, None])
def test_finger_index_wrong_type(finger_index):
    with pytest.raises(InvalidArgument):
        build_get_finger_info(finger_index)


def test_build_command_unlisted_code():
    """Plain int codes outside the enum are framed like any other."""
    data = build_command(0x99, b"\x01")
    assert data[3] == 0x99
    assert data[4:7] == b"\x01\x00\x01"


def test_build_command_rejects_bool():
    with pytest.raises(InvalidArgument):
        build_command(True)
