"""MCP (Model Context Protocol) layer for the DecentSampler drum-kit server.

The server and stdio transport live in ``decent_drums.mcp.server`` and
``decent_drums.mcp.stdio_server``; this package only re-exports the tool
registry so ``decent_drums.core.tool_validation`` can look up schemas.
"""
from __future__ import annotations

from decent_drums.mcp.tools import MCP_TOOLS

__all__ = ["MCP_TOOLS"]
