"""Kit assembly MCP tool definitions."""

from decent_drums.mcp.tools._schemas import DRUM_PIECE_SCHEMA, GLOBAL_SETTINGS_SCHEMA

KIT_TOOLS = [
    {
        "name": "generate_drum_groups",
        "description": (
            "Generate DecentSampler <groups> XML for a drum kit.\n\n"
            "Accepts a basic kit (drum pieces, samples, optional velocity layers) or an advanced kit "
            "(adds drumControls, roundRobin, micBuses, muting and per-sample sequencing or mic routing). "
            "Always use absolute sample paths. Put every sample of one drum piece, all mic positions "
            "included, in the same piece so they share one group. Samples pair with velocity layers "
            "by position: the first sample gets the first layer, and so on."
        ),
        "inputSchema": {
            "type": "object",
            "properties": {
                "globalSettings": GLOBAL_SETTINGS_SCHEMA,
                "drumPieces": {"type": "array", "items": DRUM_PIECE_SCHEMA},
            },
            "required": ["globalSettings", "drumPieces"],
        },
    },
    {
        "name": "merge_drum_kit_configs",
        "description": (
            "Merge partial kit configurations (from configure_drum_controls, configure_round_robin, "
            "configure_mic_routing or hand-written fragments) into one kit, left to right. "
            "Later fragments override earlier ones; drum pieces are matched by name, and an empty "
            "samples list never replaces existing samples. Pass the result to generate_drum_groups."
        ),
        "inputSchema": {
            "type": "object",
            "properties": {
                "configs": {
                    "type": "array",
                    "items": {"type": "object"},
                    "description": "Kit fragments in merge order",
                },
            },
            "required": ["configs"],
        },
    },
]
