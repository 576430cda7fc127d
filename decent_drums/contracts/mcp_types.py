"""Typed structures for the MCP protocol layer.

Defines every entity used across tool definitions, the MCP server, and the
stdio JSON-RPC transport.

  Tool definitions    → ``MCPPropertyDef``, ``MCPInputSchema``, ``MCPToolDef``
  Content             → ``MCPContentBlock``
  Prompts             → ``MCPPromptArgument``, ``MCPPromptDef``,
                        ``MCPPromptMessage``, ``MCPPromptResult``
  Server capabilities → ``MCPCapabilities``, ``MCPServerInfo``
  JSON-RPC messages   → ``MCPSuccessResponse``, ``MCPErrorDetail``,
                        ``MCPErrorResponse``, ``MCPResponse``
  Error codes         → ``PARSE_ERROR`` … ``INTERNAL_ERROR``
"""
from __future__ import annotations

from typing import Union

from typing_extensions import Required, TypedDict

from decent_drums.contracts.json_types import JSONObject, JSONValue

# JSON-RPC 2.0 error codes used by the stdio transport.
PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603


# ── Tool schema shapes ────────────────────────────────────────────────────────


class MCPPropertyDef(TypedDict, total=False):
    """JSON Schema definition for a single MCP tool property.

    Covers the subset of JSON Schema used in the drum-kit tool definitions.
    """

    type: Required[str]          # "string", "number", "integer", "boolean", "array", "object"
    description: str
    enum: list[str | int | float]
    minimum: float
    maximum: float
    default: JSONValue
    items: "MCPPropertyDef"
    properties: dict[str, "MCPPropertyDef"]
    required: list[str]
    additionalProperties: "MCPPropertyDef"  # noqa: N815


class MCPInputSchema(TypedDict, total=False):
    """JSON Schema describing an MCP tool's accepted arguments."""

    type: Required[str]
    properties: Required[dict[str, MCPPropertyDef]]
    required: list[str]


class MCPToolDef(TypedDict):
    """Definition of a single MCP tool exposed to LLM clients."""

    name: str
    description: str
    inputSchema: MCPInputSchema  # noqa: N815


class MCPContentBlock(TypedDict):
    """A content block in an MCP tool result (always text here)."""

    type: str
    text: str


# ── Prompt shapes ─────────────────────────────────────────────────────────────


class MCPPromptArgument(TypedDict, total=False):
    name: Required[str]
    description: str
    required: bool


class MCPPromptDef(TypedDict, total=False):
    """Entry in a ``prompts/list`` result."""

    name: Required[str]
    description: Required[str]
    arguments: list[MCPPromptArgument]


class MCPPromptMessage(TypedDict):
    role: str
    content: MCPContentBlock


class MCPPromptResult(TypedDict):
    """Result body for ``prompts/get``."""

    description: str
    messages: list[MCPPromptMessage]


# ── Server capability shapes ──────────────────────────────────────────────────


class MCPCapabilities(TypedDict, total=False):
    """MCP server capabilities advertised during the ``initialize`` handshake."""

    tools: dict[str, JSONValue]
    prompts: dict[str, JSONValue]


class MCPServerInfo(TypedDict):
    """MCP server info returned in ``initialize`` responses and ``get_server_info()``."""

    name: str
    version: str
    protocolVersion: str  # noqa: N815
    capabilities: MCPCapabilities


# ── JSON-RPC 2.0 message shapes ───────────────────────────────────────────────


class MCPSuccessResponse(TypedDict):
    """A JSON-RPC 2.0 success response."""

    jsonrpc: str
    id: str | int | None
    result: JSONObject


class MCPErrorDetail(TypedDict, total=False):
    """The ``error`` object inside a JSON-RPC 2.0 error response."""

    code: Required[int]
    message: Required[str]
    data: JSONValue


class MCPErrorResponse(TypedDict):
    """A JSON-RPC 2.0 error response."""

    jsonrpc: str
    id: str | int | None
    error: MCPErrorDetail


MCPResponse = Union[MCPSuccessResponse, MCPErrorResponse]
"""Discriminated union of all JSON-RPC 2.0 response shapes."""
