"""MCP server entry point for the WSG gripper protocol encoder.

Exposes frame encoding and the protocol vocabulary as tools and resources
via the Model Context Protocol using the official Python MCP SDK with stdio
transport. The server never talks to a gripper; it produces the bytes a
transport would send.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from mcp.server.fastmcp import FastMCP

from .protocol.commands import (
    COMMAND_GROUPS,
    command_name,
    parse_command_name,
)
from .protocol.framing import Frame
from .protocol.status import (
    StateFlag,
    StatusCode,
    has_fault,
    state_flag_names,
    status_name,
)
from .utils.crc import crc16

logger = logging.getLogger(__name__)

SERVER_NAME = "wsg-gripper"

mcp = FastMCP(
    SERVER_NAME,
    instructions="Encode command frames for the Weiss/Schunk WSG gripper protocol",
)


def _parse_hex(text: str) -> bytes:
    """Parse hex text, tolerating spaces, colons and a 0x on each group."""
    groups = text.replace(":", " ").split()
    cleaned = "".join(
        group[2:] if group.lower().startswith("0x") else group for group in groups
    )
    try:
        return bytes.fromhex(cleaned)
    except ValueError:
        raise ValueError(f"Invalid hex data: {text!r}") from None


def _command_catalog() -> dict[str, list[dict[str, str]]]:
    return {
        group: [{"name": cmd.name, "code": f"0x{cmd.value:02X}"} for cmd in commands]
        for group, commands in COMMAND_GROUPS.items()
    }


# ─── ENCODING TOOLS ──────────────────────────────────────────────────

@mcp.tool()
def encode_frame(command: str, payload_hex: str = "") -> dict[str, Any]:
    """Encode a command and payload into a wire frame.

    Args:
        command: Command name (e.g. "grasp", "GET_SYSTEM_STATE") or code
            ("0x25", "37").
        payload_hex: Payload bytes as hex, e.g. "00 00 20 42". Empty for
            commands without arguments.
    """
    try:
        code = parse_command_name(command)
        payload = _parse_hex(payload_hex)
        frame = Frame(code, payload)
    except ValueError as e:
        return {"error": str(e)}

    data = frame.serialize()
    checksum = int.from_bytes(data[-2:], "little")
    logger.info("Encoded %s with %d payload bytes", command_name(code) or hex(code), len(payload))
    return {
        "command": f"0x{frame.command:02X}",
        "command_name": command_name(frame.command),
        "payload_length": len(frame.payload),
        "checksum": f"0x{checksum:04X}",
        "frame_hex": data.hex(" "),
    }


@mcp.tool()
def compute_checksum(data_hex: str) -> dict[str, Any]:
    """Compute the frame CRC-16 over arbitrary bytes.

    Args:
        data_hex: Bytes as hex. The checksum of an empty input is 0xFFFF.
    """
    try:
        data = _parse_hex(data_hex)
    except ValueError as e:
        return {"error": str(e)}
    return {"length": len(data), "checksum": f"0x{crc16(data):04X}"}


# ─── VOCABULARY TOOLS ────────────────────────────────────────────────

@mcp.tool()
def list_commands(group: str | None = None) -> dict[str, Any]:
    """List command codes, grouped by family.

    Args:
        group: Optional family name (connection, motion, settings,
            system_state, system, finger). Lists every family when omitted.
    """
    catalog = _command_catalog()
    if group is None:
        return {"groups": catalog}
    if group not in catalog:
        return {"error": f"Unknown group '{group}'. Valid: {list(catalog)}"}
    return {"groups": {group: catalog[group]}}


@mcp.tool()
def describe_status(code: int) -> dict[str, Any]:
    """Look up the name of a status code from a device response."""
    try:
        return {"code": code, "name": status_name(code)}
    except ValueError as e:
        return {"error": str(e)}


@mcp.tool()
def describe_state_flags(flags: int) -> dict[str, Any]:
    """Decode a 32-bit system state word into flag names.

    Args:
        flags: The state word as returned by GetSystemState.
    """
    try:
        names = state_flag_names(flags)
    except ValueError as e:
        return {"error": str(e)}
    return {
        "flags": f"0x{flags:08X}",
        "set": names,
        "faults": has_fault(flags),
    }


# ─── RESOURCES ───────────────────────────────────────────────────────

@mcp.resource("wsg://catalog/commands")
def resource_command_catalog() -> str:
    """Command codes grouped by family."""
    return json.dumps(_command_catalog(), indent=2)


@mcp.resource("wsg://catalog/status-codes")
def resource_status_codes() -> str:
    """Status codes returned in response frames."""
    return json.dumps({code.name: code.value for code in StatusCode}, indent=2)


@mcp.resource("wsg://catalog/state-flags")
def resource_state_flags() -> str:
    """System state flag bit positions."""
    return json.dumps(
        {flag.name: flag.value.bit_length() - 1 for flag in StateFlag}, indent=2
    )


# ─── ENTRY POINT ─────────────────────────────────────────────────────

def main():
    """Run the MCP server with stdio transport."""
    logging.basicConfig(level=logging.INFO)
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
