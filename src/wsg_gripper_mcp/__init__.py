"""Command frame encoder and MCP server for the WSG gripper protocol."""

__version__ = "0.1.0"
