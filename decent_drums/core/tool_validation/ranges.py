"""Advisory range checks for MIDI values in tool arguments.

The rule engines accept any number for root notes and velocity bounds; the
sampler is the final arbiter.  These checks only produce warnings.
"""

from __future__ import annotations

from typing import Any

from decent_drums.core.guards import is_number
from decent_drums.core.tool_validation.constants import MIDI_NOTE_RANGE, VELOCITY_RANGE


def _out_of_range(value: object, bounds: tuple[int, int]) -> bool:
    return is_number(value) and (value < bounds[0] or value > bounds[1])


def _kit_dicts(params: dict[str, Any]) -> list[dict[str, Any]]:
    """The kit-shaped objects a tool call carries: the params or each merge fragment."""
    configs = params.get("configs")
    if isinstance(configs, list):
        return [c for c in configs if isinstance(c, dict)]
    return [params]


def _root_note_warnings(params: dict[str, Any]) -> list[str]:
    lo, hi = MIDI_NOTE_RANGE
    warnings: list[str] = []
    for kit in _kit_dicts(params):
        for key in ("drumPieces", "groups", "drums"):
            entries = kit.get(key)
            if not isinstance(entries, list):
                continue
            for i, entry in enumerate(entries):
                if isinstance(entry, dict) and _out_of_range(entry.get("rootNote"), MIDI_NOTE_RANGE):
                    warnings.append(
                        f"{key}[{i}].rootNote: {entry['rootNote']} is outside the MIDI note range [{lo}, {hi}]"
                    )
    return warnings


def _velocity_layer_warnings(params: dict[str, Any]) -> list[str]:
    lo, hi = VELOCITY_RANGE
    warnings: list[str] = []
    for kit in _kit_dicts(params):
        global_settings = kit.get("globalSettings")
        if not isinstance(global_settings, dict):
            continue
        layers = global_settings.get("velocityLayers")
        if not isinstance(layers, list):
            continue
        for i, layer in enumerate(layers):
            if not isinstance(layer, dict):
                continue
            low, high = layer.get("low"), layer.get("high")
            for name, value in (("low", low), ("high", high)):
                if _out_of_range(value, VELOCITY_RANGE):
                    warnings.append(
                        f"velocityLayers[{i}].{name}: {value} is outside the velocity range [{lo}, {hi}]"
                    )
            if is_number(low) and is_number(high) and low > high:
                warnings.append(f"velocityLayers[{i}]: low ({low}) is greater than high ({high})")
    return warnings


def _collect_range_warnings(params: dict[str, Any]) -> list[str]:
    """Warnings for root notes and velocity layers outside MIDI ranges."""
    return _root_note_warnings(params) + _velocity_layer_warnings(params)
