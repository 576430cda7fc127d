"""
Decent Sampler Drums MCP Server

Model Context Protocol server that turns structured drum-kit descriptions
into DecentSampler ``<groups>`` XML. Tool calls are validated, dispatched to
the rule engines in ``decent_drums.core`` and their results returned as text
content blocks.
"""
import asyncio
import json
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional

from decent_drums.contracts.mcp_types import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    METHOD_NOT_FOUND,
    MCPContentBlock,
    MCPPromptDef,
    MCPPromptResult,
    MCPServerInfo,
    MCPToolDef,
)
from decent_drums.core import (
    DrumKitConfigError,
    SchemaMismatchError,
    WavAnalysisError,
    analyze_wav_file,
    collect_sample_mic_configs,
    configure_drum_controls,
    configure_round_robin,
    merge_kit_configs,
    render_drum_kit,
    validate_mic_routing,
)
from decent_drums.core.guards import is_mic_bus_config
from decent_drums.core.tool_validation import validate_tool_call
from decent_drums.mcp.tools import MCP_TOOLS, TOOL_CATEGORIES, TOOL_NAMES
from decent_drums.prompts import MCP_PROMPTS, render_prompt

logger = logging.getLogger(__name__)

ToolHandler = Callable[[dict[str, Any]], Awaitable[str]]


@dataclass
class ToolCallResult:
    """Result of an MCP tool call."""
    success: bool
    content: list[MCPContentBlock]
    is_error: bool = False
    error_code: Optional[int] = None  # JSON-RPC error code for failed calls


def _text(text: str) -> MCPContentBlock:
    return {"type": "text", "text": text}


def _failure(message: str, code: int) -> ToolCallResult:
    return ToolCallResult(
        success=False,
        content=[_text(message)],
        is_error=True,
        error_code=code,
    )


class DecentDrumsMCPServer:
    """
    MCP Server for DecentSampler drum kits.

    This server:
    1. Exposes kit-building tools and preset-guideline prompts via MCP
    2. Validates tool arguments against each tool's input schema
    3. Runs the drum-kit rule engines and XML renderer
    4. Maps rule violations to JSON-RPC error codes
    """

    def __init__(self):
        from decent_drums.config import get_settings
        self._settings = get_settings()
        self.name = self._settings.server_name
        self.version = self._settings.app_version
        self._handlers: dict[str, ToolHandler] = {
            "generate_drum_groups": self._generate_drum_groups,
            "merge_drum_kit_configs": self._merge_drum_kit_configs,
            "configure_drum_controls": self._configure_drum_controls,
            "configure_round_robin": self._configure_round_robin,
            "configure_mic_routing": self._configure_mic_routing,
            "analyze_wav_samples": self._analyze_wav_samples,
        }

    # =========================================================================
    # MCP Protocol Methods
    # =========================================================================

    def get_server_info(self) -> MCPServerInfo:
        """Return MCP server information."""
        return {
            "name": self.name,
            "version": self.version,
            "protocolVersion": self._settings.protocol_version,
            "capabilities": {
                "tools": {},
                "prompts": {},
            },
        }

    def list_tools(self) -> list[MCPToolDef]:
        """List all available MCP tools."""
        return MCP_TOOLS

    def list_prompts(self) -> list[MCPPromptDef]:
        """List the preset-guideline prompts."""
        return MCP_PROMPTS

    def get_prompt(self, name: str, arguments: Optional[dict[str, str]] = None) -> Optional[MCPPromptResult]:
        """Render a prompt by name, or ``None`` if it does not exist."""
        return render_prompt(name, arguments)

    async def call_tool(
        self,
        name: str,
        arguments: dict[str, Any],
    ) -> ToolCallResult:
        """
        Execute an MCP tool call.

        Validates allowlist and schema before execution, then routes to the
        tool's handler. Rule violations come back as failed results carrying
        ``INVALID_PARAMS``; unexpected errors carry ``INTERNAL_ERROR``.
        """
        logger.info(f"MCP tool call: {name} ({TOOL_CATEGORIES.get(name, 'unknown')})")
        logger.debug(f"Arguments: {arguments}")

        validation = validate_tool_call(name, arguments, TOOL_NAMES, sample_root=self._settings.sample_root)
        if not validation.valid:
            logger.warning(f"MCP tool validation failed: {validation.error_message}")
            if name not in TOOL_NAMES:
                return _failure(f"Unknown tool: {name}", METHOD_NOT_FOUND)
            return _failure(validation.error_message, INVALID_PARAMS)

        handler = self._handlers[name]
        try:
            text = await handler(validation.params)
        except DrumKitConfigError as e:
            logger.warning(f"Tool {name} rejected configuration: {e}")
            return _failure(str(e), INVALID_PARAMS)
        except WavAnalysisError as e:
            logger.warning(f"Tool {name} failed WAV analysis: {e}")
            return _failure(str(e), e.code)
        except Exception as e:
            logger.exception(f"Tool call failed: {name}")
            return _failure(f"Error: {e!s}", INTERNAL_ERROR)

        content = [_text(text)]
        if validation.warnings:
            content.append(_text("Warnings:\n" + "\n".join(f"- {w}" for w in validation.warnings)))
        return ToolCallResult(success=True, content=content)

    # =========================================================================
    # Tool Execution
    # =========================================================================

    async def _generate_drum_groups(self, arguments: dict[str, Any]) -> str:
        return render_drum_kit(arguments)

    async def _merge_drum_kit_configs(self, arguments: dict[str, Any]) -> str:
        merged = merge_kit_configs(*arguments["configs"])
        return json.dumps(merged, indent=2)

    async def _configure_drum_controls(self, arguments: dict[str, Any]) -> str:
        fragment = configure_drum_controls({"drums": arguments["drums"]})
        return json.dumps(fragment, indent=2)

    async def _configure_round_robin(self, arguments: dict[str, Any]) -> str:
        directory = arguments.get("directory") or self._settings.sample_root
        config = {key: arguments[key] for key in ("mode", "length", "groups") if key in arguments}
        fragment = configure_round_robin(
            directory,
            config,
            default_root_note=self._settings.default_root_note,
        )
        return json.dumps(fragment, indent=2)

    async def _configure_mic_routing(self, arguments: dict[str, Any]) -> str:
        buses = arguments["micBuses"]
        if not all(is_mic_bus_config(bus) for bus in buses):
            raise DrumKitConfigError("Invalid mic bus configuration")
        pieces = arguments["drumPieces"]
        if not all(isinstance(piece, dict) for piece in pieces):
            raise SchemaMismatchError("Invalid arguments: drumPieces must be objects")

        validate_mic_routing(buses, collect_sample_mic_configs(pieces))
        return json.dumps({"globalSettings": {"micBuses": buses}, "drumPieces": pieces}, indent=2)

    async def _analyze_wav_samples(self, arguments: dict[str, Any]) -> str:
        analyses = await asyncio.gather(
            *(asyncio.to_thread(analyze_wav_file, path) for path in arguments["paths"])
        )
        return json.dumps([a.model_dump(by_alias=True) for a in analyses], indent=2)


# Singleton instance
_server: Optional[DecentDrumsMCPServer] = None


def get_mcp_server() -> DecentDrumsMCPServer:
    """Get the singleton MCP server instance."""
    global _server
    if _server is None:
        _server = DecentDrumsMCPServer()
    return _server
