"""
MCP tool definitions for the drum-kit server.

Import from this package for the combined registry, or from the individual
category modules for focused access.
"""

from decent_drums.mcp.tools.kit import KIT_TOOLS
from decent_drums.mcp.tools.controls import CONTROL_TOOLS
from decent_drums.mcp.tools.analysis import ANALYSIS_TOOLS
from decent_drums.mcp.tools.registry import (
    MCP_TOOLS,
    TOOL_CATEGORIES,
    TOOL_NAMES,
    tool_def_by_name,
)

__all__ = [
    "KIT_TOOLS",
    "CONTROL_TOOLS",
    "ANALYSIS_TOOLS",
    "MCP_TOOLS",
    "TOOL_CATEGORIES",
    "TOOL_NAMES",
    "tool_def_by_name",
]
