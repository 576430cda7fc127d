"""Decent Sampler Drums: MCP server for DecentSampler drum-kit presets."""
