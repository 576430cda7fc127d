"""Advanced drum-kit configuration.

A structural superset of the basic kit: per-drum pitch/envelope controls,
round-robin sequencing, multi-mic bus routing and muting groups.  The
validator re-runs the basic shape checks with extra fields allowed, then
validates each advanced extension independently; any failing sub-check
rejects the whole config.  A config that uses none of the extensions passes
both this validator and ``is_basic_drum_kit_config``.
"""
from __future__ import annotations

import logging
from typing import TypeGuard

from decent_drums.contracts.kit_types import DrumKitConfig
from decent_drums.core.basic_kit import has_kit_shape
from decent_drums.core.errors import SchemaMismatchError
from decent_drums.core.guards import (
    is_drum_envelope_config,
    is_drum_mic_config,
    is_drum_pitch_config,
    is_mic_bus_config,
    is_muting_config,
    is_round_robin_mode,
    optional_ok,
)

logger = logging.getLogger(__name__)


def _sequencing_ok(obj: dict[str, object]) -> bool:
    """Group- or sample-level ``seqMode``/``seqLength``/``seqPosition`` overrides."""
    if "seqMode" in obj and not is_round_robin_mode(obj["seqMode"]):
        return False
    return optional_ok(obj, "seqLength") and optional_ok(obj, "seqPosition")


def _round_robin_ok(round_robin: object) -> bool:
    if not isinstance(round_robin, dict):
        return False
    return is_round_robin_mode(round_robin.get("mode")) and optional_ok(round_robin, "length")


def _drum_controls_ok(drum_controls: object) -> bool:
    if not isinstance(drum_controls, dict):
        return False
    for entry in drum_controls.values():
        if not isinstance(entry, dict):
            return False
        if "pitch" in entry and not is_drum_pitch_config(entry["pitch"]):
            return False
        if "envelope" in entry and not is_drum_envelope_config(entry["envelope"]):
            return False
    return True


def _mic_buses_ok(mic_buses: object) -> bool:
    return isinstance(mic_buses, list) and all(is_mic_bus_config(bus) for bus in mic_buses)


def _sample_ok(sample: dict[str, object]) -> bool:
    if not _sequencing_ok(sample):
        return False
    mic_config = sample.get("micConfig")
    return mic_config is None or is_drum_mic_config(mic_config)


def _piece_ok(piece: dict[str, object]) -> bool:
    if not _sequencing_ok(piece):
        return False
    muting = piece.get("muting")
    if muting is not None and not is_muting_config(muting):
        return False
    return all(_sample_ok(sample) for sample in piece["samples"])


def is_advanced_drum_kit_config(value: object) -> TypeGuard[DrumKitConfig]:
    """True iff *value* is a well-formed kit, advanced features optional."""
    if not has_kit_shape(value, closed=False):
        return False

    global_settings = value["globalSettings"]

    round_robin = global_settings.get("roundRobin")
    if round_robin is not None and not _round_robin_ok(round_robin):
        return False

    drum_controls = global_settings.get("drumControls")
    if drum_controls is not None and not _drum_controls_ok(drum_controls):
        return False

    mic_buses = global_settings.get("micBuses")
    if mic_buses is not None and not _mic_buses_ok(mic_buses):
        return False

    return all(_piece_ok(piece) for piece in value["drumPieces"])


def create_advanced_drum_kit(config: object) -> DrumKitConfig:
    """Return *config* unchanged after checking it is an advanced kit."""
    if not is_advanced_drum_kit_config(config):
        logger.debug("Rejected advanced drum kit config")
        raise SchemaMismatchError("Invalid advanced drum kit configuration")
    return config
