"""Primitive validators for atomic drum-kit config fragments.

Every function here is a total predicate: it accepts any value, never raises,
and returns ``True`` only when required fields are present with the right
primitive type and optional fields, when present, are typed correctly.
Higher-level validators in ``basic_kit`` and ``advanced_kit`` are built from
these.
"""
from __future__ import annotations

from typing import TypeGuard

from decent_drums.contracts.kit_types import (
    MIC_POSITIONS,
    ROUND_ROBIN_MODES,
    DrumEnvelopeConfig,
    DrumMicConfig,
    DrumPitchConfig,
    MicBusConfig,
    MicVolumeConfig,
    MutingConfig,
    RoundRobinSettings,
    VelocityLayer,
)

ENVELOPE_TIME_FIELDS: tuple[str, ...] = ("attack", "decay", "release")
ENVELOPE_CURVE_FIELDS: tuple[str, ...] = ("attackCurve", "decayCurve", "releaseCurve")


def is_number(value: object) -> TypeGuard[int | float]:
    """JSON number check; ``bool`` is an ``int`` subclass but not a number here."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def optional_ok(obj: dict[str, object], key: str, check: type | None = None) -> bool:
    """True when *key* is absent, or present and passes the type check."""
    if key not in obj:
        return True
    value = obj[key]
    if check is None:
        return is_number(value)
    return isinstance(value, check)


def is_round_robin_mode(value: object) -> bool:
    return isinstance(value, str) and value in ROUND_ROBIN_MODES


def is_velocity_layer(value: object) -> TypeGuard[VelocityLayer]:
    return (
        isinstance(value, dict)
        and is_number(value.get("low"))
        and is_number(value.get("high"))
        and isinstance(value.get("name"), str)
    )


def is_drum_pitch_config(value: object) -> TypeGuard[DrumPitchConfig]:
    if not isinstance(value, dict) or not is_number(value.get("default")):
        return False
    return optional_ok(value, "min") and optional_ok(value, "max")


def is_drum_envelope_config(value: object) -> TypeGuard[DrumEnvelopeConfig]:
    if not isinstance(value, dict):
        return False
    if not all(is_number(value.get(key)) for key in ("attack", "decay", "sustain", "release")):
        return False
    return all(optional_ok(value, key) for key in ENVELOPE_CURVE_FIELDS)


def is_mic_volume_config(value: object) -> TypeGuard[MicVolumeConfig]:
    if not isinstance(value, dict) or not is_number(value.get("default")):
        return False
    return all(optional_ok(value, key) for key in ("min", "max", "midiCC"))


def is_mic_bus_config(value: object) -> TypeGuard[MicBusConfig]:
    if not isinstance(value, dict):
        return False
    if not isinstance(value.get("name"), str) or not isinstance(value.get("outputTarget"), str):
        return False
    if "volume" in value and not is_mic_volume_config(value["volume"]):
        return False
    return True


def is_drum_mic_config(value: object) -> TypeGuard[DrumMicConfig]:
    if not isinstance(value, dict):
        return False
    position = value.get("position")
    if not isinstance(position, str) or position not in MIC_POSITIONS:
        return False
    return is_number(value.get("busIndex")) and optional_ok(value, "volume")


def _is_string_list(value: object) -> bool:
    return isinstance(value, list) and all(isinstance(item, str) for item in value)


def is_muting_config(value: object) -> TypeGuard[MutingConfig]:
    return (
        isinstance(value, dict)
        and _is_string_list(value.get("tags"))
        and _is_string_list(value.get("silencedByTags"))
    )


def is_round_robin_settings(value: object) -> TypeGuard[RoundRobinSettings]:
    if not isinstance(value, dict) or not is_round_robin_mode(value.get("mode")):
        return False
    return optional_ok(value, "length") and optional_ok(value, "seqPosition")
