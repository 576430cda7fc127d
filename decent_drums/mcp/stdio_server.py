#!/usr/bin/env python3
"""
Decent Sampler Drums MCP Stdio Server

Standalone MCP server that speaks newline-delimited JSON-RPC 2.0 over
stdin/stdout. Register it with any MCP client (Claude Desktop, Cursor, ...).

Usage:
    decent-drums serve
    python -m decent_drums.mcp.stdio_server
"""
from __future__ import annotations

import asyncio
import json
import logging
import sys

from decent_drums.contracts.mcp_types import (
    INVALID_PARAMS,
    METHOD_NOT_FOUND,
    PARSE_ERROR,
    MCPErrorResponse,
    MCPResponse,
)
from decent_drums.logging_setup import configure_logging
from decent_drums.mcp.server import DecentDrumsMCPServer, get_mcp_server

logger = logging.getLogger(__name__)


class StdioMCPServer:
    """MCP server that communicates via stdin/stdout."""

    def __init__(self, mcp: DecentDrumsMCPServer | None = None) -> None:
        self.mcp = mcp or get_mcp_server()

    async def run(self) -> None:
        """Main loop - read from stdin, write to stdout."""
        logger.info("Decent Sampler Drums MCP server running on stdio")

        reader = asyncio.StreamReader()
        protocol = asyncio.StreamReaderProtocol(reader)
        await asyncio.get_running_loop().connect_read_pipe(
            lambda: protocol, sys.stdin
        )

        while True:
            try:
                line = await reader.readline()
                if not line:
                    break
                if not line.strip():
                    continue

                raw = json.loads(line.decode())
                message: dict[str, object] = raw if isinstance(raw, dict) else {}
                response = await self.handle_message(message)

                if response:
                    self.send_response(response)

            except json.JSONDecodeError as e:
                logger.error(f"Invalid JSON: {e}")
                self.send_response(self._error(None, PARSE_ERROR, f"Parse error: {e.msg}"))
            except Exception as e:
                logger.exception(f"Error handling message: {e}")

    def send_response(self, message: MCPResponse) -> None:
        """Send a response via stdout."""
        sys.stdout.write(json.dumps(message) + "\n")
        sys.stdout.flush()

    @staticmethod
    def _error(msg_id: object, code: int, message: str) -> MCPErrorResponse:
        return {
            "jsonrpc": "2.0",
            "id": msg_id,
            "error": {"code": code, "message": message},
        }

    async def handle_message(self, message: dict[str, object]) -> MCPResponse | None:
        """Handle an incoming MCP message."""
        method = str(message.get("method", ""))
        msg_id = message.get("id")
        raw_params = message.get("params")
        params: dict[str, object] = raw_params if isinstance(raw_params, dict) else {}

        logger.debug(f"Received: {method}")

        if method == "initialize":
            info = self.mcp.get_server_info()
            return {
                "jsonrpc": "2.0",
                "id": msg_id,
                "result": {
                    "protocolVersion": info["protocolVersion"],
                    "serverInfo": {"name": info["name"], "version": info["version"]},
                    "capabilities": info["capabilities"],
                }
            }

        elif method == "tools/list":
            return {
                "jsonrpc": "2.0",
                "id": msg_id,
                "result": {
                    "tools": self.mcp.list_tools()
                }
            }

        elif method == "tools/call":
            tool_name = str(params.get("name", ""))
            raw_args = params.get("arguments")
            arguments: dict[str, object] = raw_args if isinstance(raw_args, dict) else {}

            result = await self.mcp.call_tool(tool_name, arguments)
            if result.error_code is not None:
                return self._error(msg_id, result.error_code, result.content[0]["text"])

            return {
                "jsonrpc": "2.0",
                "id": msg_id,
                "result": {
                    "content": result.content,
                    "isError": result.is_error,
                }
            }

        elif method == "prompts/list":
            return {
                "jsonrpc": "2.0",
                "id": msg_id,
                "result": {
                    "prompts": self.mcp.list_prompts()
                }
            }

        elif method == "prompts/get":
            prompt_name = str(params.get("name", ""))
            raw_args = params.get("arguments")
            prompt_args = (
                {str(k): str(v) for k, v in raw_args.items()} if isinstance(raw_args, dict) else {}
            )
            prompt = self.mcp.get_prompt(prompt_name, prompt_args)
            if prompt is None:
                return self._error(msg_id, INVALID_PARAMS, f"Unknown prompt: {prompt_name}")
            return {
                "jsonrpc": "2.0",
                "id": msg_id,
                "result": prompt,
            }

        elif method == "notifications/initialized":
            # Client is ready, no response needed
            logger.info("Client initialized")
            return None

        elif method == "ping":
            return {
                "jsonrpc": "2.0",
                "id": msg_id,
                "result": {}
            }

        else:
            logger.warning(f"Unknown method: {method}")
            return self._error(msg_id, METHOD_NOT_FOUND, f"Method not found: {method}")


async def main() -> None:
    configure_logging()
    server = StdioMCPServer()
    await server.run()


if __name__ == "__main__":
    asyncio.run(main())
