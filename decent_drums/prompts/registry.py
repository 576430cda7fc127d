"""MCP prompt registry: definitions for ``prompts/list`` and rendering for ``prompts/get``."""
from __future__ import annotations

from typing import Optional

from decent_drums.contracts.mcp_types import MCPPromptDef, MCPPromptResult
from decent_drums.prompts.guidelines import (
    ADVANCED_PRESET_GUIDELINES,
    PRESET_GUIDELINES,
    SIMPLE_PRESET_GUIDELINES,
)

DEFAULT_SAMPLE_DIRECTORY = "the sample folder"

_DIRECTORY_ARGUMENT = {
    "name": "sample_directory",
    "description": "Folder holding the drum samples",
    "required": False,
}

MCP_PROMPTS: list[MCPPromptDef] = [
    {
        "name": "preset_guidelines",
        "description": "General rules for DecentSampler drum presets and the tool workflow",
    },
    {
        "name": "simple_preset",
        "description": "Build a lightweight preset with the basic kit configuration",
        "arguments": [_DIRECTORY_ARGUMENT],
    },
    {
        "name": "advanced_preset",
        "description": "Build a preset with drum controls, round robin and mic routing",
        "arguments": [_DIRECTORY_ARGUMENT],
    },
]

_TEMPLATES: dict[str, str] = {
    "preset_guidelines": PRESET_GUIDELINES,
    "simple_preset": SIMPLE_PRESET_GUIDELINES,
    "advanced_preset": ADVANCED_PRESET_GUIDELINES,
}

_DESCRIPTIONS: dict[str, str] = {p["name"]: p["description"] for p in MCP_PROMPTS}


def render_prompt(name: str, arguments: Optional[dict[str, str]] = None) -> Optional[MCPPromptResult]:
    """Render prompt *name*, or ``None`` when no such prompt exists."""
    template = _TEMPLATES.get(name)
    if template is None:
        return None
    directory = (arguments or {}).get("sample_directory") or DEFAULT_SAMPLE_DIRECTORY
    text = template.format(sample_directory=directory)
    return {
        "description": _DESCRIPTIONS[name],
        "messages": [{"role": "user", "content": {"type": "text", "text": text}}],
    }
