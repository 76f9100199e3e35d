"""Command frame builder for the WSG gripper wire protocol.

Frame layout::

    +-----------+---------+---------+------------------+----------+
    | Preamble  | Command | Length  |     Payload      | Checksum |
    | 3 bytes   | 1 byte  | 2 bytes |  variable length |  2 bytes |
    +-----------+---------+---------+------------------+----------+

- Preamble: 0xAA 0xAA 0xAA
- Length: little-endian payload byte count (0-65535)
- Checksum: CRC-16 over preamble + command + length + payload, little-endian

The same layout is used on the serial and the Ethernet link.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..utils.crc import crc16

logger = logging.getLogger(__name__)

PREAMBLE = b"\xAA\xAA\xAA"
HEADER_SIZE = 6  # 3(preamble) + 1(cmd) + 2(length)
CHECKSUM_SIZE = 2
FRAME_OVERHEAD = HEADER_SIZE + CHECKSUM_SIZE
MAX_PAYLOAD_LENGTH = 0xFFFF


class InvalidArgument(ValueError):
    """A command code or payload that cannot be represented in a frame."""


def require_octet(value: object, label: str) -> int:
    """Return ``value`` as a plain int after checking it fits in one byte.

    Raises:
        InvalidArgument: If ``value`` is not an int (bools excluded) in 0-255.
    """
    # bool is an int subclass but never a meaningful octet
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(
            f"{label} must be an integer, got {type(value).__name__}"
        )
    if not 0 <= value <= 0xFF:
        raise InvalidArgument(f"{label} must be 0-255, got {value}")
    return int(value)


def _coerce_command(command: object) -> int:
    return require_octet(command, "Command")


def _coerce_payload(payload: object) -> bytes:
    if isinstance(payload, (int, str)):
        raise InvalidArgument(
            f"Payload must be bytes-like, got {type(payload).__name__}"
        )
    try:
        data = bytes(payload)
    except (TypeError, ValueError) as e:
        raise InvalidArgument(f"Payload is not a sequence of octets: {e}") from e
    if len(data) > MAX_PAYLOAD_LENGTH:
        raise InvalidArgument(
            f"Payload must be at most {MAX_PAYLOAD_LENGTH} bytes, got {len(data)}"
        )
    return data


@dataclass(frozen=True)
class Frame:
    """An outgoing command frame.

    The payload is copied into an immutable ``bytes`` on construction, so
    the caller's buffer may be reused or mutated afterwards.

    Raises:
        InvalidArgument: If the command is not an integer in 0-255, or the
            payload is not bytes-like or longer than 65535 bytes.
    """

    command: int
    payload: bytes = field(default=b"")

    def __post_init__(self) -> None:
        object.__setattr__(self, "command", _coerce_command(self.command))
        object.__setattr__(self, "payload", _coerce_payload(self.payload))

    @property
    def frame_length(self) -> int:
        """Number of bytes :meth:`serialize` produces."""
        return len(self.payload) + FRAME_OVERHEAD

    def serialize(self) -> bytes:
        """Lay out the frame and append its checksum.

        Returns:
            ``len(payload) + 8`` bytes ready to hand to the transport.
        """
        size = len(self.payload)
        header = PREAMBLE + bytes(
            [self.command & 0xFF, size & 0xFF, (size >> 8) & 0xFF]
        )
        body = header + self.payload
        checksum = crc16(body).to_bytes(CHECKSUM_SIZE, "little")
        logger.debug(
            "Serialized frame cmd=0x%02X payload_len=%d crc=%s",
            self.command, size, checksum.hex(),
        )
        return body + checksum

    def __repr__(self) -> str:
        return (
            f"Frame(command=0x{self.command:02X}, "
            f"payload={self.payload.hex(' ') if self.payload else '(empty)'})"
        )


def build_frame(command: int, payload: bytes = b"") -> bytes:
    """Build the wire bytes for a single command.

    Args:
        command: Single-byte command code.
        payload: Command-specific payload bytes.

    Returns:
        The serialized frame.

    Raises:
        InvalidArgument: See :class:`Frame`.
    """
    return Frame(command, payload).serialize()
