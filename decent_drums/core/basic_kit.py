"""Basic drum-kit configuration: velocity layers, drum pieces, flat sample lists.

The basic shape is the "simple kit" capability ceiling.  Its validator is a
closed-world check: a config that sets any advanced field (drum controls,
round robin, mic buses, muting, per-sample sequencing or mic routing) is not
a basic config, even when everything else about it is well formed.
"""
from __future__ import annotations

import logging
from typing import TypeGuard

from decent_drums.contracts.kit_types import DrumKitConfig
from decent_drums.core.errors import SchemaMismatchError
from decent_drums.core.guards import is_number, is_velocity_layer, optional_ok

logger = logging.getLogger(__name__)

ADVANCED_GLOBAL_KEYS: tuple[str, ...] = ("drumControls", "roundRobin", "micBuses")
ADVANCED_PIECE_KEYS: tuple[str, ...] = ("seqMode", "seqLength", "seqPosition", "muting")
ADVANCED_SAMPLE_KEYS: tuple[str, ...] = ("seqMode", "seqLength", "seqPosition", "micConfig")


def _sets_any(obj: dict[str, object], keys: tuple[str, ...]) -> bool:
    return any(obj.get(key) is not None for key in keys)


def _is_sample_shape(sample: object, *, closed: bool) -> bool:
    if not isinstance(sample, dict) or not isinstance(sample.get("path"), str):
        return False
    if not optional_ok(sample, "volume", str):
        return False
    return not (closed and _sets_any(sample, ADVANCED_SAMPLE_KEYS))


def _is_piece_shape(piece: object, *, closed: bool) -> bool:
    if not isinstance(piece, dict):
        return False
    if not isinstance(piece.get("name"), str) or not is_number(piece.get("rootNote")):
        return False
    samples = piece.get("samples")
    if not isinstance(samples, list):
        return False
    if closed and _sets_any(piece, ADVANCED_PIECE_KEYS):
        return False
    return all(_is_sample_shape(sample, closed=closed) for sample in samples)


def has_kit_shape(value: object, *, closed: bool) -> bool:
    """Structural check shared by the basic and advanced validators.

    With ``closed=True`` any advanced field rejects the value; with
    ``closed=False`` extra fields are tolerated and left for the advanced
    validator to inspect.
    """
    if not isinstance(value, dict):
        return False

    global_settings = value.get("globalSettings")
    if not isinstance(global_settings, dict):
        return False
    if closed and _sets_any(global_settings, ADVANCED_GLOBAL_KEYS):
        return False

    if "velocityLayers" in global_settings:
        layers = global_settings["velocityLayers"]
        if not isinstance(layers, list) or not all(is_velocity_layer(layer) for layer in layers):
            return False

    pieces = value.get("drumPieces")
    if not isinstance(pieces, list):
        return False
    return all(_is_piece_shape(piece, closed=closed) for piece in pieces)


def is_basic_drum_kit_config(value: object) -> TypeGuard[DrumKitConfig]:
    """True iff *value* is a well-formed kit that uses no advanced feature."""
    return has_kit_shape(value, closed=True)


def create_basic_drum_kit(config: object) -> DrumKitConfig:
    """Return *config* unchanged after checking it is a basic kit."""
    if not is_basic_drum_kit_config(config):
        logger.debug("Rejected basic drum kit config")
        raise SchemaMismatchError("Invalid basic drum kit configuration")
    return config
