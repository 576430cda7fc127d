"""Per-drum pitch and envelope controls.

``configure_drum_controls`` validates the control metadata for each drum and
shapes it into an advanced kit fragment.  The fragment's drum pieces carry no
samples; callers fill them in afterwards (see ``kit_merge.merge_kit_configs``).
"""
from __future__ import annotations

import logging
from typing import Any

from decent_drums.contracts.kit_types import (
    DrumConfig,
    DrumControlEntry,
    DrumControlsConfig,
    DrumEnvelopeConfig,
    DrumKitConfig,
)
from decent_drums.core.errors import DrumKitConfigError, SchemaMismatchError
from decent_drums.core.guards import (
    ENVELOPE_TIME_FIELDS,
    is_drum_envelope_config,
    is_drum_pitch_config,
    is_number,
)
from decent_drums.core.xml_text import format_value as _fmt

logger = logging.getLogger(__name__)

CURVE_MIN = -100
CURVE_MAX = 100

_CURVES: tuple[tuple[str, str], ...] = (
    ("attackCurve", "attack"),
    ("decayCurve", "decay"),
    ("releaseCurve", "release"),
)


def validate_pitch_settings(drum: DrumConfig) -> None:
    pitch = drum.get("pitch")
    if pitch is None:
        return
    name = drum["name"]
    if not is_drum_pitch_config(pitch):
        raise DrumKitConfigError(f'Invalid pitch configuration for drum "{name}"')

    default = pitch["default"]
    lo = pitch.get("min")
    hi = pitch.get("max")

    if lo is not None and hi is not None and lo > hi:
        raise DrumKitConfigError(
            f'Invalid pitch range for drum "{name}": '
            f"min ({_fmt(lo)}) cannot be greater than max ({_fmt(hi)})"
        )
    if lo is not None and default < lo:
        raise DrumKitConfigError(
            f'Invalid default pitch for drum "{name}": {_fmt(default)} is below minimum {_fmt(lo)}'
        )
    if hi is not None and default > hi:
        raise DrumKitConfigError(
            f'Invalid default pitch for drum "{name}": {_fmt(default)} is above maximum {_fmt(hi)}'
        )


def validate_envelope_settings(drum: DrumConfig) -> None:
    envelope = drum.get("envelope")
    if envelope is None:
        return
    name = drum["name"]
    if not is_drum_envelope_config(envelope):
        raise DrumKitConfigError(f'Invalid envelope configuration for drum "{name}"')

    for field in ENVELOPE_TIME_FIELDS:
        value = envelope[field]
        if value < 0:
            raise DrumKitConfigError(
                f'Invalid {field} time for drum "{name}": {_fmt(value)}. Must be >= 0'
            )

    sustain = envelope["sustain"]
    if sustain < 0 or sustain > 1:
        raise DrumKitConfigError(
            f'Invalid sustain level for drum "{name}": {_fmt(sustain)}. Must be between 0 and 1'
        )

    _validate_curves(name, envelope)


def _validate_curves(name: str, envelope: DrumEnvelopeConfig) -> None:
    for key, label in _CURVES:
        value = envelope.get(key)
        if value is not None and (value < CURVE_MIN or value > CURVE_MAX):
            raise DrumKitConfigError(
                f'Invalid {label} curve for drum "{name}": {_fmt(value)}. '
                f"Must be between {CURVE_MIN} and {CURVE_MAX}"
            )


def _check_drum_shape(drum: Any) -> None:
    if not isinstance(drum, dict) or not isinstance(drum.get("name"), str):
        raise SchemaMismatchError("Invalid drum controls configuration")
    if not is_number(drum.get("rootNote")):
        raise SchemaMismatchError(f'Invalid root note for drum "{drum["name"]}"')


def configure_drum_controls(config: DrumControlsConfig) -> DrumKitConfig:
    """Validate every drum, then build the kit fragment.

    All drums are validated before anything is built, so a failure never
    yields a partial fragment.  Raises ``DrumKitConfigError`` with a message
    naming the drum and the offending value.
    """
    drums = config.get("drums") if isinstance(config, dict) else None
    if not isinstance(drums, list):
        raise SchemaMismatchError("Invalid drum controls configuration")

    for drum in drums:
        _check_drum_shape(drum)
        validate_pitch_settings(drum)
        validate_envelope_settings(drum)

    drum_controls: dict[str, DrumControlEntry] = {}
    for drum in drums:
        entry: DrumControlEntry = {}
        if drum.get("pitch"):
            entry["pitch"] = drum["pitch"]
        if drum.get("envelope"):
            entry["envelope"] = drum["envelope"]
        drum_controls[drum["name"]] = entry

    logger.debug(f"Configured controls for {len(drum_controls)} drum(s)")
    return {
        "globalSettings": {"drumControls": drum_controls},
        "drumPieces": [
            {"name": drum["name"], "rootNote": drum["rootNote"], "samples": []}
            for drum in drums
        ],
    }
