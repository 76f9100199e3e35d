"""Protocol layer: frame encoding, command codes, and status vocabulary."""

from .framing import Frame, InvalidArgument, build_frame
from .commands import Command, build_command
from .status import StatusCode, StateFlag
