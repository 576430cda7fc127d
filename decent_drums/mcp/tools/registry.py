"""MCP tool registry: combines all category lists into the master list."""
from __future__ import annotations

from typing import Optional, cast

from decent_drums.contracts.mcp_types import MCPToolDef
from decent_drums.mcp.tools.analysis import ANALYSIS_TOOLS
from decent_drums.mcp.tools.controls import CONTROL_TOOLS
from decent_drums.mcp.tools.kit import KIT_TOOLS

MCP_TOOLS = cast(list[MCPToolDef], KIT_TOOLS + CONTROL_TOOLS + ANALYSIS_TOOLS)

_CATEGORY_LISTS: list[tuple[str, list]] = [
    ("kit", KIT_TOOLS),
    ("controls", CONTROL_TOOLS),
    ("analysis", ANALYSIS_TOOLS),
]

TOOL_CATEGORIES: dict[str, str] = {
    str(tool["name"]): category
    for category, tools in _CATEGORY_LISTS
    for tool in tools
}

_TOOLS_BY_NAME: dict[str, MCPToolDef] = {tool["name"]: tool for tool in MCP_TOOLS}

TOOL_NAMES: frozenset[str] = frozenset(_TOOLS_BY_NAME)


def tool_def_by_name(name: str) -> Optional[MCPToolDef]:
    return _TOOLS_BY_NAME.get(name)
