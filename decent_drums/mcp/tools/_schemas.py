"""JSON Schema fragments shared by the kit tool definitions."""

from decent_drums.contracts.kit_types import MIC_POSITIONS, ROUND_ROBIN_MODES

ROUND_ROBIN_MODE_SCHEMA = {
    "type": "string",
    "enum": list(ROUND_ROBIN_MODES),
    "description": "round_robin cycles in order, random avoids repeats, true_random allows them, always plays every sample",
}

VELOCITY_LAYER_SCHEMA = {
    "type": "object",
    "properties": {
        "low": {"type": "number", "description": "Lowest velocity (0-127)"},
        "high": {"type": "number", "description": "Highest velocity (0-127)"},
        "name": {"type": "string"},
    },
    "required": ["low", "high", "name"],
}

PITCH_SCHEMA = {
    "type": "object",
    "properties": {
        "default": {"type": "number", "description": "Default tuning in semitones"},
        "min": {"type": "number"},
        "max": {"type": "number"},
    },
    "required": ["default"],
}

ENVELOPE_SCHEMA = {
    "type": "object",
    "properties": {
        "attack": {"type": "number", "description": "Seconds, >= 0"},
        "decay": {"type": "number", "description": "Seconds, >= 0"},
        "sustain": {"type": "number", "description": "Level 0-1"},
        "release": {"type": "number", "description": "Seconds, >= 0"},
        "attackCurve": {"type": "number", "description": "-100 to 100"},
        "decayCurve": {"type": "number", "description": "-100 to 100"},
        "releaseCurve": {"type": "number", "description": "-100 to 100"},
    },
    "required": ["attack", "decay", "sustain", "release"],
}

MIC_BUS_SCHEMA = {
    "type": "object",
    "properties": {
        "name": {"type": "string", "description": "Bus name, e.g. 'Close Mic' or 'OH L'"},
        "outputTarget": {"type": "string", "description": "e.g. AUX_STEREO_OUTPUT_1; unique per bus"},
        "volume": {
            "type": "object",
            "properties": {
                "default": {"type": "number", "description": "dB"},
                "min": {"type": "number"},
                "max": {"type": "number"},
                "midiCC": {"type": "number", "description": "MIDI CC bound to the bus volume"},
            },
            "required": ["default"],
        },
    },
    "required": ["name", "outputTarget"],
}

MIC_CONFIG_SCHEMA = {
    "type": "object",
    "properties": {
        "position": {"type": "string", "enum": list(MIC_POSITIONS)},
        "busIndex": {"type": "number", "description": "Zero-based index into micBuses"},
        "volume": {"type": "number", "description": "Per-sample output volume"},
    },
    "required": ["position", "busIndex"],
}

SAMPLE_SCHEMA = {
    "type": "object",
    "properties": {
        "path": {"type": "string"},
        "volume": {"type": "string", "description": "e.g. '-6dB'"},
        "seqMode": ROUND_ROBIN_MODE_SCHEMA,
        "seqLength": {"type": "number"},
        "seqPosition": {"type": "number"},
        "micConfig": MIC_CONFIG_SCHEMA,
    },
    "required": ["path"],
}

DRUM_PIECE_SCHEMA = {
    "type": "object",
    "properties": {
        "name": {"type": "string"},
        "rootNote": {"type": "number", "description": "MIDI note (e.g. Kick = 36)"},
        "seqMode": ROUND_ROBIN_MODE_SCHEMA,
        "seqLength": {"type": "number"},
        "seqPosition": {"type": "number"},
        "muting": {
            "type": "object",
            "properties": {
                "tags": {"type": "array", "items": {"type": "string"}},
                "silencedByTags": {"type": "array", "items": {"type": "string"}},
            },
            "required": ["tags", "silencedByTags"],
        },
        "samples": {"type": "array", "items": SAMPLE_SCHEMA},
    },
    "required": ["name", "rootNote", "samples"],
}

GLOBAL_SETTINGS_SCHEMA = {
    "type": "object",
    "properties": {
        "velocityLayers": {"type": "array", "items": VELOCITY_LAYER_SCHEMA},
        "roundRobin": {
            "type": "object",
            "properties": {"mode": ROUND_ROBIN_MODE_SCHEMA, "length": {"type": "number"}},
            "required": ["mode"],
        },
        "drumControls": {
            "type": "object",
            "description": "Drum name -> {pitch?, envelope?}",
            "additionalProperties": {
                "type": "object",
                "properties": {"pitch": PITCH_SCHEMA, "envelope": ENVELOPE_SCHEMA},
            },
        },
        "micBuses": {"type": "array", "items": MIC_BUS_SCHEMA},
    },
}

ROUND_ROBIN_SETTINGS_SCHEMA = {
    "type": "object",
    "properties": {
        "mode": ROUND_ROBIN_MODE_SCHEMA,
        "length": {"type": "number"},
        "seqPosition": {"type": "number"},
    },
    "required": ["mode"],
}
