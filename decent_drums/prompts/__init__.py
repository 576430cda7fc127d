"""Preset-building guidance exposed as MCP prompts."""

from decent_drums.prompts.registry import MCP_PROMPTS, render_prompt

__all__ = ["MCP_PROMPTS", "render_prompt"]
