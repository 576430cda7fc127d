"""Combine partial kit configurations into one.

The rule engines each return a fragment: drum controls with empty sample
lists, round robin with default root notes, mic routing with bus lists.
``merge_kit_configs`` folds fragments left to right.  A later fragment's
explicit values override earlier ones; absent or ``None`` values never do.
"""
from __future__ import annotations

import copy
import logging
from typing import Any, Iterable

from decent_drums.contracts.kit_types import DrumKitConfig
from decent_drums.core.errors import SchemaMismatchError

logger = logging.getLogger(__name__)

_REPLACED_GLOBALS: tuple[str, ...] = ("velocityLayers", "roundRobin", "micBuses")


def _merge_drum_controls(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for drum, entry in update.items():
        if entry is None:
            continue
        current = dict(merged.get(drum) or {})
        for key, value in entry.items():
            if value is not None:
                current[key] = value
        merged[drum] = current
    return merged


def _merge_globals(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in update.items():
        if value is None:
            continue
        if key == "drumControls":
            merged[key] = _merge_drum_controls(merged.get(key) or {}, value)
        else:
            merged[key] = value
    return merged


def _merge_piece(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in update.items():
        if value is None:
            continue
        if key == "samples" and not value:
            continue
        merged[key] = value
    merged.setdefault("samples", [])
    return merged


def _check_fragment(fragment: object) -> dict[str, Any]:
    if not isinstance(fragment, dict):
        raise SchemaMismatchError("Invalid kit fragment: expected an object")
    global_settings = fragment.get("globalSettings")
    if global_settings is not None and not isinstance(global_settings, dict):
        raise SchemaMismatchError("Invalid kit fragment: globalSettings must be an object")
    controls = (global_settings or {}).get("drumControls")
    if controls is not None and not (
        isinstance(controls, dict) and all(e is None or isinstance(e, dict) for e in controls.values())
    ):
        raise SchemaMismatchError("Invalid kit fragment: drumControls must map drum names to objects")
    pieces = fragment.get("drumPieces")
    if pieces is not None:
        if not isinstance(pieces, list) or not all(
            isinstance(p, dict) and isinstance(p.get("name"), str) for p in pieces
        ):
            raise SchemaMismatchError("Invalid kit fragment: every drum piece needs a name")
    return fragment


def merge_kit_configs(*fragments: DrumKitConfig | dict[str, Any]) -> DrumKitConfig:
    """Fold *fragments* into one kit, later fragments taking precedence.

    ``drumControls`` merge per drum and per ``pitch``/``envelope``;
    ``velocityLayers``, ``roundRobin`` and ``micBuses`` are replaced whole.
    Drum pieces are matched by name and keep first-appearance order.  A later
    piece's ``samples`` replace the earlier list only when non-empty, so the
    empty placeholders from ``configure_drum_controls`` never wipe samples.
    Inputs are not mutated.
    """
    global_settings: dict[str, Any] = {}
    pieces: dict[str, dict[str, Any]] = {}

    for fragment in _iter_checked(fragments):
        global_settings = _merge_globals(global_settings, fragment.get("globalSettings") or {})
        for piece in fragment.get("drumPieces") or []:
            name = piece["name"]
            pieces[name] = _merge_piece(pieces.get(name, {}), piece)

    logger.debug(f"Merged {len(fragments)} fragment(s) into {len(pieces)} drum piece(s)")
    return copy.deepcopy({"globalSettings": global_settings, "drumPieces": list(pieces.values())})


def _iter_checked(fragments: Iterable[object]) -> Iterable[dict[str, Any]]:
    for fragment in fragments:
        yield _check_fragment(fragment)
