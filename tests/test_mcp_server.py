"""Tests for the MCP server: tool registry, dispatch and error mapping."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Callable

import pytest

from decent_drums.contracts.mcp_types import INTERNAL_ERROR, INVALID_PARAMS, INVALID_REQUEST, METHOD_NOT_FOUND
from decent_drums.mcp.server import DecentDrumsMCPServer, ToolCallResult, get_mcp_server
from decent_drums.mcp.tools import MCP_TOOLS, TOOL_CATEGORIES, TOOL_NAMES


@pytest.fixture
def server() -> DecentDrumsMCPServer:
    return DecentDrumsMCPServer()


def _text(result: ToolCallResult) -> str:
    return result.content[0]["text"]


class TestMCPTools:
    """Tests for MCP tool definitions."""

    def test_all_tools_have_required_fields(self) -> None:
        for tool in MCP_TOOLS:
            assert "name" in tool, f"Tool missing name: {tool}"
            assert "description" in tool, f"Tool {tool['name']} missing description"
            assert "inputSchema" in tool, f"Tool {tool['name']} missing inputSchema"

    def test_tool_categories_complete(self) -> None:
        for tool in MCP_TOOLS:
            assert tool["name"] in TOOL_CATEGORIES, f"Tool {tool['name']} not in TOOL_CATEGORIES"

    def test_tool_names(self) -> None:
        assert TOOL_NAMES == {
            "generate_drum_groups",
            "merge_drum_kit_configs",
            "configure_drum_controls",
            "configure_round_robin",
            "configure_mic_routing",
            "analyze_wav_samples",
        }


class TestMCPServer:
    """Tests for server info and listings."""

    def test_get_server_info(self, server: DecentDrumsMCPServer) -> None:
        info = server.get_server_info()
        assert info["name"] == "decent-sampler-drums"
        assert info["protocolVersion"] == "2024-11-05"
        assert set(info["capabilities"]) == {"tools", "prompts"}

    def test_list_tools(self, server: DecentDrumsMCPServer) -> None:
        assert len(server.list_tools()) == len(MCP_TOOLS)

    def test_list_prompts(self, server: DecentDrumsMCPServer) -> None:
        names = [p["name"] for p in server.list_prompts()]
        assert names == ["preset_guidelines", "simple_preset", "advanced_preset"]

    def test_singleton(self) -> None:
        assert get_mcp_server() is get_mcp_server()


# ---------------------------------------------------------------------------
# Tool calls
# ---------------------------------------------------------------------------

class TestCallTool:

    async def test_unknown_tool(self, server: DecentDrumsMCPServer) -> None:
        result = await server.call_tool("unknown_tool", {})
        assert result.is_error
        assert result.error_code == METHOD_NOT_FOUND
        assert _text(result) == "Unknown tool: unknown_tool"

    async def test_schema_failure_is_invalid_params(self, server: DecentDrumsMCPServer) -> None:
        result = await server.call_tool("generate_drum_groups", {"globalSettings": {}})
        assert result.error_code == INVALID_PARAMS
        assert "drumPieces" in _text(result)

    async def test_generate_drum_groups(self, server: DecentDrumsMCPServer) -> None:
        args = {
            "globalSettings": {},
            "drumPieces": [{"name": "Kick", "rootNote": 36, "samples": [{"path": "samples/kick.wav"}]}],
        }
        result = await server.call_tool("generate_drum_groups", args)
        assert result.success
        assert _text(result) == (
            "<groups>\n"
            '  <group name="Kick" ampVelTrack="1">\n'
            '      <sample path="samples/kick.wav" rootNote="36" loNote="36" hiNote="36" />\n'
            "  </group>\n"
            "</groups>"
        )

    async def test_generate_schema_mismatch(self, server: DecentDrumsMCPServer) -> None:
        args = {"globalSettings": {}, "drumPieces": [{"name": "Kick", "rootNote": "36", "samples": []}]}
        result = await server.call_tool("generate_drum_groups", args)
        assert result.error_code == INVALID_PARAMS
        assert _text(result) == "Invalid arguments: does not match DrumKitConfig schema"

    async def test_warnings_are_appended(self, server: DecentDrumsMCPServer) -> None:
        args = {"globalSettings": {}, "drumPieces": [{"name": "Kick", "rootNote": 130, "samples": [{"path": "k.wav"}]}]}
        result = await server.call_tool("generate_drum_groups", args)
        assert result.success
        assert len(result.content) == 2
        assert result.content[1]["text"].startswith("Warnings:\n- drumPieces[0].rootNote: 130")

    async def test_configure_drum_controls(self, server: DecentDrumsMCPServer) -> None:
        result = await server.call_tool(
            "configure_drum_controls",
            {"drums": [{"name": "Kick", "rootNote": 36, "pitch": {"default": 0, "min": -12, "max": 12}}]},
        )
        fragment = json.loads(_text(result))
        assert fragment["globalSettings"]["drumControls"]["Kick"]["pitch"]["max"] == 12
        assert fragment["drumPieces"] == [{"name": "Kick", "rootNote": 36, "samples": []}]

    async def test_drum_control_rule_violation(self, server: DecentDrumsMCPServer) -> None:
        result = await server.call_tool(
            "configure_drum_controls",
            {"drums": [{"name": "Kick", "rootNote": 36, "pitch": {"default": 13, "max": 12}}]},
        )
        assert result.error_code == INVALID_PARAMS
        assert _text(result) == 'Invalid default pitch for drum "Kick": 13 is above maximum 12'

    async def test_configure_round_robin(self, server: DecentDrumsMCPServer, tmp_path: Path) -> None:
        (tmp_path / "kick_1.wav").write_bytes(b"")
        result = await server.call_tool(
            "configure_round_robin",
            {
                "directory": str(tmp_path),
                "mode": "round_robin",
                "length": 1,
                "groups": [{"name": "Kick", "rootNote": 36, "samples": [{"path": "kick_1.wav", "seqPosition": 1}]}],
            },
        )
        fragment = json.loads(_text(result))
        assert fragment["globalSettings"]["roundRobin"] == {"mode": "round_robin", "length": 1}
        assert fragment["drumPieces"][0]["samples"] == [{"path": "kick_1.wav", "seqPosition": 1}]

    async def test_round_robin_uses_configured_sample_root(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        from decent_drums.config import get_settings

        (tmp_path / "snare.wav").write_bytes(b"")
        monkeypatch.setenv("DECENT_DRUMS_SAMPLE_ROOT", str(tmp_path))
        monkeypatch.setenv("DECENT_DRUMS_DEFAULT_ROOT_NOTE", "38")
        get_settings.cache_clear()

        result = await DecentDrumsMCPServer().call_tool(
            "configure_round_robin",
            {"mode": "always", "groups": [{"name": "Snare", "samples": [{"path": "snare.wav"}]}]},
        )
        assert result.success, _text(result)
        assert json.loads(_text(result))["drumPieces"][0]["rootNote"] == 38

    async def test_round_robin_missing_file(self, server: DecentDrumsMCPServer, tmp_path: Path) -> None:
        result = await server.call_tool(
            "configure_round_robin",
            {"directory": str(tmp_path), "mode": "always", "groups": [{"name": "Kick", "samples": [{"path": "gone.wav"}]}]},
        )
        assert result.error_code == INVALID_PARAMS
        assert _text(result) == "Sample file not found: gone.wav"

    async def test_configure_mic_routing(self, server: DecentDrumsMCPServer, mic_buses: list[dict]) -> None:
        pieces = [{"name": "Kick", "rootNote": 36, "samples": [
            {"path": "k.wav", "micConfig": {"position": "close", "busIndex": 1}},
        ]}]
        result = await server.call_tool("configure_mic_routing", {"micBuses": mic_buses, "drumPieces": pieces})
        assert json.loads(_text(result)) == {"globalSettings": {"micBuses": mic_buses}, "drumPieces": pieces}

    async def test_mic_routing_bad_index(self, server: DecentDrumsMCPServer, mic_buses: list[dict]) -> None:
        pieces = [{"name": "Kick", "rootNote": 36, "samples": [
            {"path": "k.wav", "micConfig": {"position": "roomRight", "busIndex": 4}},
        ]}]
        result = await server.call_tool("configure_mic_routing", {"micBuses": mic_buses, "drumPieces": pieces})
        assert result.error_code == INVALID_PARAMS
        assert _text(result) == "Invalid bus index 4 for mic position roomRight"

    async def test_merge_drum_kit_configs(self, server: DecentDrumsMCPServer, basic_kit: dict) -> None:
        controls = {"globalSettings": {"drumControls": {"Kick": {"pitch": {"default": 1}}}}}
        result = await server.call_tool("merge_drum_kit_configs", {"configs": [basic_kit, controls]})
        merged = json.loads(_text(result))
        assert merged["globalSettings"]["drumControls"] == {"Kick": {"pitch": {"default": 1}}}
        assert len(merged["drumPieces"][0]["samples"]) == 2

    async def test_merge_malformed_drum_controls(self, server: DecentDrumsMCPServer) -> None:
        result = await server.call_tool(
            "merge_drum_kit_configs", {"configs": [{"globalSettings": {"drumControls": []}}]}
        )
        assert result.error_code == INVALID_PARAMS
        assert _text(result) == "Invalid kit fragment: drumControls must map drum names to objects"

    async def test_analyze_wav_samples(self, server: DecentDrumsMCPServer, write_wav: Callable[..., str]) -> None:
        first = write_wav("a.wav", frames=10)
        second = write_wav("b.wav", channels=1, frames=30)
        result = await server.call_tool("analyze_wav_samples", {"paths": [first, second]})
        analyses = json.loads(_text(result))
        assert [a["sampleLength"] for a in analyses] == [10, 30]
        assert analyses[1]["channels"] == 1

    async def test_analyze_invalid_wav(self, server: DecentDrumsMCPServer, tmp_path: Path) -> None:
        bad = tmp_path / "bad.wav"
        bad.write_bytes(b"not a wav")
        result = await server.call_tool("analyze_wav_samples", {"paths": [str(bad)]})
        assert result.error_code == INVALID_REQUEST

    async def test_analyze_missing_wav(self, server: DecentDrumsMCPServer, tmp_path: Path) -> None:
        result = await server.call_tool("analyze_wav_samples", {"paths": [str(tmp_path / "none.wav")]})
        assert result.error_code == INTERNAL_ERROR

    async def test_unexpected_error_is_internal(
        self, server: DecentDrumsMCPServer, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        import decent_drums.mcp.server as server_module

        def _boom(*fragments):
            raise RuntimeError("disk on fire")

        monkeypatch.setattr(server_module, "merge_kit_configs", _boom)
        result = await server.call_tool("merge_drum_kit_configs", {"configs": [{}]})
        assert result.error_code == INTERNAL_ERROR
        assert _text(result) == "Error: disk on fire"
