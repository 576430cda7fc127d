"""Render a drum-kit configuration as DecentSampler ``<groups>`` XML.

The output text is a compatibility contract: attribute order, indentation
(two spaces for ``<group>``, six for ``<sample>``), blank lines between groups
and the absence of a trailing newline are compared byte for byte by the
sampler's preset loader and by snapshot tests.

Per piece, group attributes are emitted in this order: muting tags, group
round-robin overrides, ``tuning``, then the envelope.  Samples pair with
velocity layers by position: the Nth sample of a piece gets the Nth layer.
"""
from __future__ import annotations

from decent_drums.contracts.kit_types import (
    DrumControlEntry,
    DrumKitConfig,
    DrumPieceConfig,
    GlobalSettings,
    SampleConfig,
    VelocityLayer,
)
from decent_drums.core.advanced_kit import is_advanced_drum_kit_config
from decent_drums.core.basic_kit import is_basic_drum_kit_config
from decent_drums.core.errors import SchemaMismatchError
from decent_drums.core.guards import ENVELOPE_CURVE_FIELDS
from decent_drums.core.mic_routing import (
    collect_sample_mic_configs,
    configure_mic_buses,
    generate_sample_bus_routing,
    validate_mic_routing,
)
from decent_drums.core.xml_text import attr

_SEQUENCE_KEYS: tuple[str, ...] = ("seqMode", "seqLength", "seqPosition")


def _muting_attrs(piece: DrumPieceConfig) -> str:
    muting = piece.get("muting")
    if not muting:
        return ""
    return (
        attr("tags", ",".join(muting["tags"]))
        + attr("silencedByTags", ",".join(muting["silencedByTags"]))
        + attr("silencingMode", "fast")
    )


def _sequence_attrs(obj: DrumPieceConfig | SampleConfig) -> str:
    # Zero and empty values are treated as unset.
    return "".join(attr(key, obj[key]) for key in _SEQUENCE_KEYS if obj.get(key))


def _global_round_robin_attrs(global_settings: GlobalSettings) -> str:
    round_robin = global_settings.get("roundRobin")
    if not round_robin:
        return ""
    out = attr("seqMode", round_robin["mode"])
    if round_robin.get("length"):
        out += attr("seqLength", round_robin["length"])
    return out


def _envelope_attrs(controls: DrumControlEntry) -> str:
    envelope = controls.get("envelope")
    if not envelope:
        return ""
    out = "".join(attr(key, envelope[key]) for key in ("attack", "decay", "sustain", "release"))
    for key in ENVELOPE_CURVE_FIELDS:
        if envelope.get(key) is not None:
            out += attr(key, envelope[key])
    return out


def _pitch_control(piece_name: str, controls: DrumControlEntry) -> str:
    pitch = controls["pitch"]
    bounds = ""
    if pitch.get("min") is not None:
        bounds += attr("minimum", pitch["min"])
    if pitch.get("max") is not None:
        bounds += attr("maximum", pitch["max"])
    return (
        f'      <control type="pitch" name="{piece_name} Pitch"{attr("default", pitch["default"])}{bounds}>\n'
        '        <binding type="general" level="group" position="0" parameter="groupTuning" />\n'
        "      </control>\n"
    )


def _sample_xml(
    piece: DrumPieceConfig, sample: SampleConfig, index: int, layers: list[VelocityLayer]
) -> str:
    mic_config = sample.get("micConfig")
    if mic_config:
        return generate_sample_bus_routing(sample["path"], mic_config["busIndex"], mic_config.get("volume"))

    volume = attr("volume", sample["volume"]) if sample.get("volume") else ""
    velocity = ""
    if index < len(layers):
        layer = layers[index]
        velocity = attr("loVel", layer["low"]) + attr("hiVel", layer["high"])

    root = piece["rootNote"]
    return (
        f'      <sample path="{sample["path"]}"{volume}'
        f'{attr("rootNote", root)}{attr("loNote", root)}{attr("hiNote", root)}'
        f"{velocity}{_sequence_attrs(sample)} />"
    )


def _group_xml(piece: DrumPieceConfig, global_settings: GlobalSettings) -> str:
    group_attrs = _muting_attrs(piece) + _sequence_attrs(piece)

    envelope_attrs = ""
    pitch_control = ""
    controls = (global_settings.get("drumControls") or {}).get(piece["name"])
    if controls:
        envelope_attrs = _envelope_attrs(controls)
        if controls.get("pitch"):
            group_attrs += attr("tuning", controls["pitch"]["default"])
            pitch_control = _pitch_control(piece["name"], controls)

    layers = global_settings.get("velocityLayers") or []
    samples = [_sample_xml(piece, sample, i, layers) for i, sample in enumerate(piece["samples"])]

    return (
        f'  <group name="{piece["name"]}" ampVelTrack="1"{group_attrs}{envelope_attrs}>\n'
        f"{pitch_control}"
        + "\n".join(samples)
        + "\n  </group>"
    )


def generate_groups_xml(config: DrumKitConfig) -> str:
    """Render *config*; pure, so equal inputs always give identical text."""
    global_settings = config["globalSettings"]

    parts: list[str] = []
    mic_buses = global_settings.get("micBuses")
    if mic_buses:
        parts.append(configure_mic_buses(mic_buses))

    groups = "\n\n".join(_group_xml(piece, global_settings) for piece in config["drumPieces"])
    parts.append(f"<groups{_global_round_robin_attrs(global_settings)}>\n{groups}\n</groups>")
    return "\n\n".join(parts)


def render_drum_kit(value: object) -> str:
    """Validate raw JSON as a kit and render it.

    The advanced interpretation is tried first, then the basic one; a value
    matching neither raises ``SchemaMismatchError``.  When samples route to
    mic buses the routing is checked before anything is rendered.
    """
    config: DrumKitConfig
    if is_advanced_drum_kit_config(value):
        config = value
    elif is_basic_drum_kit_config(value):
        config = value
    else:
        raise SchemaMismatchError("Invalid arguments: does not match DrumKitConfig schema")

    mics = collect_sample_mic_configs(config["drumPieces"])
    if mics:
        validate_mic_routing(config["globalSettings"].get("micBuses") or [], mics)
    return generate_groups_xml(config)
