"""Named shapes for drum-kit configurations.

Configurations are plain JSON dicts end to end; these TypedDicts document the
keys the guards in ``decent_drums.core.guards`` accept.  Keys keep the
camelCase spelling of the wire format because the dicts are never renamed
between the tool call and the XML renderer.

## Entity catalog

Shared:
  RoundRobinMode: "round_robin" | "random" | "true_random" | "always"
  MicPosition: close / overhead / room mic positions
  VelocityLayer: {low, high, name}
  MutingConfig: {tags, silencedByTags}
  RoundRobinConfig: global round-robin default {mode, length?}

Drum controls:
  DrumPitchConfig: {default, min?, max?}
  DrumEnvelopeConfig: ADSR plus optional curves
  DrumControlEntry: {pitch?, envelope?}
  DrumConfig: one drum for ``configure_drum_controls``
  DrumControlsConfig: {drums}

Mic routing:
  MicVolumeConfig: {default, min?, max?, midiCC?}
  MicBusConfig: {name, outputTarget, volume?}
  DrumMicConfig: {position, busIndex, volume?}

Kit:
  SampleConfig: one sample of a drum piece
  DrumPieceConfig: one drum piece (rendered as a <group>)
  GlobalSettings: kit-wide settings
  DrumKitConfig: {globalSettings, drumPieces}

Round-robin builder input:
  RoundRobinSettings, RoundRobinSample, RoundRobinGroup, RoundRobinKitConfig
"""

from __future__ import annotations

from typing import Literal

from typing_extensions import NotRequired, TypedDict

RoundRobinMode = Literal["round_robin", "random", "true_random", "always"]
MicPosition = Literal["close", "overheadLeft", "overheadRight", "roomLeft", "roomRight"]

ROUND_ROBIN_MODES: tuple[str, ...] = ("round_robin", "random", "true_random", "always")
MIC_POSITIONS: tuple[str, ...] = ("close", "overheadLeft", "overheadRight", "roomLeft", "roomRight")


class VelocityLayer(TypedDict):
    low: int
    high: int
    name: str


class MutingConfig(TypedDict):
    """Choke relationship: pieces whose tags appear in ``silencedByTags`` mute this one."""

    tags: list[str]
    silencedByTags: list[str]  # noqa: N815


class RoundRobinConfig(TypedDict):
    mode: RoundRobinMode
    length: NotRequired[int]


class DrumPitchConfig(TypedDict):
    """Pitch control in semitones."""

    default: float
    min: NotRequired[float]
    max: NotRequired[float]


class DrumEnvelopeConfig(TypedDict):
    """Amplitude envelope: times in seconds, sustain 0–1, curves -100–100."""

    attack: float
    decay: float
    sustain: float
    release: float
    attackCurve: NotRequired[float]  # noqa: N815
    decayCurve: NotRequired[float]  # noqa: N815
    releaseCurve: NotRequired[float]  # noqa: N815


class DrumControlEntry(TypedDict, total=False):
    pitch: DrumPitchConfig
    envelope: DrumEnvelopeConfig


class DrumConfig(TypedDict):
    name: str
    rootNote: int  # noqa: N815
    pitch: NotRequired[DrumPitchConfig]
    envelope: NotRequired[DrumEnvelopeConfig]


class DrumControlsConfig(TypedDict):
    drums: list[DrumConfig]


class MicVolumeConfig(TypedDict):
    """Bus volume control in dB, optionally bound to a MIDI CC."""

    default: float
    min: NotRequired[float]
    max: NotRequired[float]
    midiCC: NotRequired[int]  # noqa: N815


class MicBusConfig(TypedDict):
    name: str
    outputTarget: str  # noqa: N815
    volume: NotRequired[MicVolumeConfig]


class DrumMicConfig(TypedDict):
    position: MicPosition
    busIndex: int  # noqa: N815
    volume: NotRequired[float]


class SampleConfig(TypedDict):
    path: str
    volume: NotRequired[str]
    seqMode: NotRequired[RoundRobinMode]  # noqa: N815
    seqLength: NotRequired[int]  # noqa: N815
    seqPosition: NotRequired[int]  # noqa: N815
    micConfig: NotRequired[DrumMicConfig]  # noqa: N815


class DrumPieceConfig(TypedDict):
    name: str
    rootNote: int  # noqa: N815
    seqMode: NotRequired[RoundRobinMode]  # noqa: N815
    seqLength: NotRequired[int]  # noqa: N815
    seqPosition: NotRequired[int]  # noqa: N815
    muting: NotRequired[MutingConfig]
    samples: list[SampleConfig]


class GlobalSettings(TypedDict, total=False):
    velocityLayers: list[VelocityLayer]
    roundRobin: RoundRobinConfig
    drumControls: dict[str, DrumControlEntry]
    micBuses: list[MicBusConfig]


class DrumKitConfig(TypedDict):
    globalSettings: GlobalSettings  # noqa: N815
    drumPieces: list[DrumPieceConfig]  # noqa: N815


class RoundRobinSettings(TypedDict):
    mode: RoundRobinMode
    length: NotRequired[int]
    seqPosition: NotRequired[int]  # noqa: N815


class RoundRobinSample(TypedDict):
    path: str
    seqPosition: NotRequired[int]  # noqa: N815
    settings: NotRequired[RoundRobinSettings]


class RoundRobinGroup(TypedDict):
    name: str
    rootNote: NotRequired[int]  # noqa: N815
    settings: NotRequired[RoundRobinSettings]
    samples: list[RoundRobinSample]


class RoundRobinKitConfig(TypedDict):
    mode: RoundRobinMode
    length: NotRequired[int]
    groups: list[RoundRobinGroup]
