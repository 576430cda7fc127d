"""Named data shapes shared across the drum-kit tool server."""
from __future__ import annotations

from decent_drums.contracts.json_types import JSONObject, JSONValue
from decent_drums.contracts.kit_types import (
    MIC_POSITIONS,
    ROUND_ROBIN_MODES,
    DrumKitConfig,
    DrumPieceConfig,
    GlobalSettings,
    SampleConfig,
)

__all__ = [
    "JSONObject",
    "JSONValue",
    "MIC_POSITIONS",
    "ROUND_ROBIN_MODES",
    "DrumKitConfig",
    "DrumPieceConfig",
    "GlobalSettings",
    "SampleConfig",
]
