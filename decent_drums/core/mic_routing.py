"""Multi-mic bus routing.

Each bus is a named output (``AUX_STEREO_OUTPUT_1`` ...) with an optional
volume control; mic-position samples reference buses by zero-based index and
render as ``output1Target="BUS_<index + 1>"``.
"""
from __future__ import annotations

import logging
from typing import Optional, Sequence

from decent_drums.contracts.kit_types import DrumMicConfig, MicBusConfig
from decent_drums.core.errors import DrumKitConfigError, SchemaMismatchError
from decent_drums.core.guards import is_drum_mic_config, is_mic_bus_config, is_number
from decent_drums.core.xml_text import attr
from decent_drums.core.xml_text import format_value as _fmt

logger = logging.getLogger(__name__)


def _volume_control(bus: MicBusConfig, index: int) -> str:
    volume = bus.get("volume")
    if not volume:
        return ""
    minimum = f'minimum="{_fmt(volume["min"])}"' if volume.get("min") is not None else ""
    maximum = f'maximum="{_fmt(volume["max"])}"' if volume.get("max") is not None else ""
    midi_cc = f'midi_cc="{_fmt(volume["midiCC"])}"' if volume.get("midiCC") is not None else ""
    return (
        f'\n      <control type="float" name="{bus["name"]} Volume" \n'
        f'               default="{_fmt(volume["default"])}"\n'
        f"               {minimum}\n"
        f"               {maximum}\n"
        f"               {midi_cc}>\n"
        f'        <binding type="bus" level="bus" position="{index}" parameter="volume" />\n'
        f"      </control>"
    )


def configure_mic_buses(buses: Sequence[MicBusConfig]) -> str:
    """Render the ``<buses>`` block, one ``<bus>`` per input in input order."""
    if not isinstance(buses, list) or not all(is_mic_bus_config(bus) for bus in buses):
        raise DrumKitConfigError("Invalid mic bus configuration")

    elements = [
        f'    <bus name="{bus["name"]}" output1Target="{bus["outputTarget"]}">'
        f"{_volume_control(bus, index)}\n    </bus>"
        for index, bus in enumerate(buses)
    ]
    return "  <buses>\n" + "\n".join(elements) + "\n  </buses>"


def generate_sample_bus_routing(sample_path: str, bus_index: int, volume: Optional[float] = None) -> str:
    """A ``<sample>`` routed to a bus; note and velocity mapping are not emitted."""
    volume_attr = attr("output1Volume", volume) if volume is not None else ""
    return f'      <sample path="{sample_path}" output1Target="BUS_{_fmt(bus_index + 1)}"{volume_attr} />'


def _validate_bus_configurations(buses: Sequence[MicBusConfig]) -> None:
    seen: set[str] = set()
    for bus in buses:
        target = bus["outputTarget"]
        if target in seen:
            raise DrumKitConfigError(f"Duplicate output target {target} for bus {bus['name']}")
        seen.add(target)

    for bus in buses:
        volume = bus.get("volume")
        if not volume or volume.get("min") is None or volume.get("max") is None:
            continue
        lo, hi, default = volume["min"], volume["max"], volume["default"]
        if lo > hi:
            raise DrumKitConfigError(
                f"Invalid volume range for bus {bus['name']}: min ({_fmt(lo)}) > max ({_fmt(hi)})"
            )
        if default < lo or default > hi:
            raise DrumKitConfigError(
                f"Default volume {_fmt(default)} for bus {bus['name']} "
                f"outside range [{_fmt(lo)}, {_fmt(hi)}]"
            )


def _validate_mic_bindings(buses: Sequence[MicBusConfig], mics: Sequence[DrumMicConfig]) -> None:
    for mic in mics:
        index = mic.get("busIndex")
        if not is_number(index) or index < 0 or index >= len(buses):
            raise DrumKitConfigError(
                f"Invalid bus index {_fmt(index)} for mic position {mic.get('position')}"
            )


def validate_mic_routing(buses: Sequence[MicBusConfig], mics: Sequence[DrumMicConfig]) -> None:
    """Check the bus list, then every mic's bus index.

    Bus problems are always reported ahead of binding problems, so a list
    with both yields the bus error.
    """
    _validate_bus_configurations(buses)
    _validate_mic_bindings(buses, mics)
    logger.debug(f"Mic routing valid: {len(buses)} bus(es), {len(mics)} mic(s)")


def collect_sample_mic_configs(pieces: Sequence[object]) -> list[DrumMicConfig]:
    """Every sample ``micConfig`` across *pieces*, in piece then sample order."""
    mics: list[DrumMicConfig] = []
    for piece in pieces:
        if not isinstance(piece, dict):
            raise SchemaMismatchError("Invalid drum piece: expected an object")
        samples = piece.get("samples") or []
        if not isinstance(samples, list) or not all(isinstance(s, dict) for s in samples):
            raise SchemaMismatchError(f"Invalid samples for drum piece {piece.get('name')}")
        for sample in samples:
            mic_config = sample.get("micConfig")
            if mic_config is None:
                continue
            if not is_drum_mic_config(mic_config):
                raise DrumKitConfigError(f"Invalid mic configuration for sample {sample.get('path')}")
            mics.append(mic_config)
    return mics
