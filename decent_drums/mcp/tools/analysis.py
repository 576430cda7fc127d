"""Sample analysis MCP tool definitions."""

ANALYSIS_TOOLS = [
    {
        "name": "analyze_wav_samples",
        "description": (
            "Read WAV headers and report sampleLength (frames), sampleRate, channels and bitDepth "
            "for each file. Use absolute paths. Only uncompressed PCM WAV files are supported."
        ),
        "inputSchema": {
            "type": "object",
            "properties": {
                "paths": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": "Absolute paths to WAV files",
                },
            },
            "required": ["paths"],
        },
    },
]
