"""MCP server exposing Lens Tracker API functions."""

from .server import run_mcp_server, server

__all__ = ["run_mcp_server", "server"]
