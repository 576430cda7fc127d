"""Drum control, round-robin and mic-routing MCP tool definitions."""

from decent_drums.mcp.tools._schemas import (
    DRUM_PIECE_SCHEMA,
    ENVELOPE_SCHEMA,
    MIC_BUS_SCHEMA,
    PITCH_SCHEMA,
    ROUND_ROBIN_MODE_SCHEMA,
    ROUND_ROBIN_SETTINGS_SCHEMA,
)

CONTROL_TOOLS = [
    {
        "name": "configure_drum_controls",
        "description": (
            "Validate per-drum pitch and envelope controls and return a kit fragment with "
            "globalSettings.drumControls. The fragment's drum pieces have empty sample lists; "
            "merge it with a kit that has samples before generating XML."
        ),
        "inputSchema": {
            "type": "object",
            "properties": {
                "drums": {
                    "type": "array",
                    "items": {
                        "type": "object",
                        "properties": {
                            "name": {"type": "string"},
                            "rootNote": {"type": "number"},
                            "pitch": PITCH_SCHEMA,
                            "envelope": ENVELOPE_SCHEMA,
                        },
                        "required": ["name", "rootNote"],
                    },
                },
            },
            "required": ["drums"],
        },
    },
    {
        "name": "configure_round_robin",
        "description": (
            "Validate a round-robin setup and return a kit fragment. Unless mode is 'always', every "
            "sample needs a seqPosition at sample, sample-settings or group-settings level; positions "
            "must lie within the configured length. Sample paths are resolved against directory "
            "(or the server's default sample root) and must exist."
        ),
        "inputSchema": {
            "type": "object",
            "properties": {
                "directory": {"type": "string", "description": "Base directory for sample paths"},
                "mode": ROUND_ROBIN_MODE_SCHEMA,
                "length": {"type": "number", "description": "Sequence length; omit to let the sampler detect it"},
                "groups": {
                    "type": "array",
                    "items": {
                        "type": "object",
                        "properties": {
                            "name": {"type": "string"},
                            "rootNote": {"type": "number"},
                            "settings": ROUND_ROBIN_SETTINGS_SCHEMA,
                            "samples": {
                                "type": "array",
                                "items": {
                                    "type": "object",
                                    "properties": {
                                        "path": {"type": "string"},
                                        "seqPosition": {"type": "number"},
                                        "settings": ROUND_ROBIN_SETTINGS_SCHEMA,
                                    },
                                    "required": ["path"],
                                },
                            },
                        },
                        "required": ["name", "samples"],
                    },
                },
            },
            "required": ["mode", "groups"],
        },
    },
    {
        "name": "configure_mic_routing",
        "description": (
            "Validate mic buses and the micConfig of every sample, then return a kit fragment with "
            "globalSettings.micBuses. Output targets must be unique, bus volume defaults must lie "
            "within min/max, and every busIndex must point at a bus."
        ),
        "inputSchema": {
            "type": "object",
            "properties": {
                "micBuses": {"type": "array", "items": MIC_BUS_SCHEMA},
                "drumPieces": {"type": "array", "items": DRUM_PIECE_SCHEMA},
            },
            "required": ["micBuses", "drumPieces"],
        },
    },
]
