"""Pytest configuration and fixtures."""
from __future__ import annotations

import copy
import struct
from pathlib import Path
from typing import Callable

import pytest


def pytest_configure(config):
    """Ensure asyncio_mode is auto so async tests run when pyproject is not in cwd."""
    if hasattr(config.option, "asyncio_mode") and config.option.asyncio_mode is None:
        config.option.asyncio_mode = "auto"


@pytest.fixture(autouse=True)
def _reset_singletons():
    """Reset cached settings and the MCP server singleton between tests."""
    yield
    from decent_drums.config import get_settings
    import decent_drums.mcp.server as server_module

    get_settings.cache_clear()
    server_module._server = None


# ---------------------------------------------------------------------------
# Kit fixtures
# ---------------------------------------------------------------------------

_BASIC_KIT = {
    "globalSettings": {
        "velocityLayers": [
            {"low": 0, "high": 63, "name": "soft"},
            {"low": 64, "high": 127, "name": "hard"},
        ],
    },
    "drumPieces": [
        {
            "name": "Kick",
            "rootNote": 36,
            "samples": [
                {"path": "samples/kick_soft.wav"},
                {"path": "samples/kick_hard.wav", "volume": "-3dB"},
            ],
        },
    ],
}


@pytest.fixture
def basic_kit() -> dict:
    return copy.deepcopy(_BASIC_KIT)


@pytest.fixture
def mic_buses() -> list[dict]:
    return [
        {"name": "Close Mic", "outputTarget": "AUX_STEREO_OUTPUT_1", "volume": {"default": 0}},
        {"name": "OH L", "outputTarget": "AUX_STEREO_OUTPUT_2", "volume": {"default": -3}},
    ]


# ---------------------------------------------------------------------------
# WAV fixtures
# ---------------------------------------------------------------------------

def build_wav(
    *,
    channels: int = 2,
    sample_rate: int = 44100,
    bits: int = 16,
    frames: int = 100,
    audio_format: int = 1,
    extra_chunks: bytes = b"",
    include_fmt: bool = True,
    include_data: bool = True,
) -> bytes:
    """Assemble a RIFF/WAVE byte string with zeroed audio."""
    block_align = channels * bits // 8
    body = b"WAVE"
    if include_fmt:
        body += b"fmt " + struct.pack(
            "<IHHIIHH", 16, audio_format, channels, sample_rate,
            sample_rate * block_align, block_align, bits,
        )
    body += extra_chunks
    if include_data:
        data = b"\x00" * (frames * block_align)
        body += b"data" + struct.pack("<I", len(data)) + data
    return b"RIFF" + struct.pack("<I", len(body)) + body


@pytest.fixture
def write_wav(tmp_path: Path) -> Callable[..., str]:
    """Write a generated WAV under ``tmp_path`` and return its path."""

    def _write(name: str = "sample.wav", **kwargs) -> str:
        path = tmp_path / name
        path.write_bytes(build_wav(**kwargs))
        return str(path)

    return _write
