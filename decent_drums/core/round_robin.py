"""Round-robin sequencing for multi-sample drum groups.

Round-robin settings inherit global < group < sample: the most specific
level that sets a value wins.  ``configure_round_robin`` validates sequence
positions and sample files, then shapes the input groups into a kit fragment
whose pieces carry their group-level overrides as ``seqMode``/``seqLength``/
``seqPosition`` attributes.
"""
from __future__ import annotations

import logging
import os
from typing import Callable, Optional

from decent_drums.config import DEFAULT_ROOT_NOTE
from decent_drums.contracts.kit_types import (
    DrumKitConfig,
    DrumPieceConfig,
    RoundRobinConfig,
    RoundRobinGroup,
    RoundRobinKitConfig,
    RoundRobinSample,
    RoundRobinSettings,
    SampleConfig,
)
from decent_drums.core.errors import DrumKitConfigError, SchemaMismatchError
from decent_drums.core.guards import is_number, is_round_robin_mode, is_round_robin_settings
from decent_drums.core.xml_text import format_value as _fmt

logger = logging.getLogger(__name__)

SampleFileChecker = Callable[[str], bool]
"""Synchronous "does a file exist at this path" probe."""


def _first_set(*values: object) -> object:
    for value in values:
        if value is not None:
            return value
    return None


def _settings(obj: RoundRobinGroup | RoundRobinSample) -> RoundRobinSettings | dict:
    return obj.get("settings") or {}


def resolve_seq_position(group: RoundRobinGroup, sample: RoundRobinSample) -> Optional[int]:
    """Sample position, else sample settings, else group settings."""
    return _first_set(
        sample.get("seqPosition"),
        _settings(sample).get("seqPosition"),
        _settings(group).get("seqPosition"),
    )


def resolve_seq_length(
    config: RoundRobinKitConfig, group: RoundRobinGroup, sample: RoundRobinSample
) -> Optional[int]:
    """Most specific configured sequence length, or ``None`` for auto-detect."""
    return _first_set(
        _settings(sample).get("length"),
        _settings(group).get("length"),
        config.get("length"),
    )


def _check_shape(config: object) -> None:
    if not isinstance(config, dict) or not is_round_robin_mode(config.get("mode")):
        raise SchemaMismatchError("Invalid round robin configuration")
    if config.get("length") is not None and not is_number(config["length"]):
        raise SchemaMismatchError("Invalid round robin configuration")
    groups = config.get("groups")
    if not isinstance(groups, list):
        raise SchemaMismatchError("Invalid round robin configuration")
    for group in groups:
        if not isinstance(group, dict) or not isinstance(group.get("name"), str):
            raise SchemaMismatchError("Invalid round robin group")
        if group.get("settings") is not None and not is_round_robin_settings(group["settings"]):
            raise SchemaMismatchError(f"Invalid round robin settings for group {group['name']}")
        if group.get("rootNote") is not None and not is_number(group["rootNote"]):
            raise SchemaMismatchError(f"Invalid root note for group {group['name']}")
        samples = group.get("samples")
        if not isinstance(samples, list):
            raise SchemaMismatchError(f"Invalid samples for group {group['name']}")
        for sample in samples:
            if not isinstance(sample, dict) or not isinstance(sample.get("path"), str):
                raise SchemaMismatchError(f"Invalid sample in group {group['name']}")
            if sample.get("seqPosition") is not None and not is_number(sample["seqPosition"]):
                raise SchemaMismatchError(f"Invalid seqPosition for sample {sample['path']}")
            if sample.get("settings") is not None and not is_round_robin_settings(sample["settings"]):
                raise SchemaMismatchError(f"Invalid round robin settings for sample {sample['path']}")


def _validate_positions(config: RoundRobinKitConfig) -> None:
    mode = config["mode"]
    if mode != "always":
        for group in config["groups"]:
            for sample in group["samples"]:
                if resolve_seq_position(group, sample) is None:
                    raise DrumKitConfigError(
                        f"Sample {sample['path']} needs a seqPosition when mode is {mode}. "
                        "Provide it at sample, group, or global level."
                    )

    for group in config["groups"]:
        for sample in group["samples"]:
            position = resolve_seq_position(group, sample)
            length = resolve_seq_length(config, group, sample)
            if position is None or length is None:
                continue
            if position < 1 or position > length:
                raise DrumKitConfigError(
                    f"Invalid sequence position {_fmt(position)} for sample {sample['path']}. "
                    f"Must be between 1 and {_fmt(length)}"
                )


def _validate_files(base_directory: str, config: RoundRobinKitConfig, file_exists: SampleFileChecker) -> None:
    for group in config["groups"]:
        for sample in group["samples"]:
            full_path = os.path.join(base_directory, sample["path"])
            if not file_exists(full_path):
                logger.warning(f"Round-robin sample missing: {full_path}")
                raise DrumKitConfigError(f"Sample file not found: {sample['path']}")


def _overrides(settings: RoundRobinSettings) -> dict[str, object]:
    out: dict[str, object] = {"seqMode": settings["mode"]}
    if settings.get("length") is not None:
        out["seqLength"] = settings["length"]
    if settings.get("seqPosition") is not None:
        out["seqPosition"] = settings["seqPosition"]
    return out


def _build_sample(sample: RoundRobinSample) -> SampleConfig:
    built: dict[str, object] = {"path": sample["path"]}
    settings = sample.get("settings")
    if settings:
        built.update(_overrides(settings))
    if sample.get("seqPosition") is not None:
        built["seqPosition"] = sample["seqPosition"]
    return built  # type: ignore[return-value]


def _build_piece(group: RoundRobinGroup, default_root_note: int) -> DrumPieceConfig:
    root_note = group.get("rootNote")
    piece: dict[str, object] = {
        "name": group["name"],
        "rootNote": default_root_note if root_note is None else root_note,
    }
    settings = group.get("settings")
    if settings:
        piece.update(_overrides(settings))
    piece["samples"] = [_build_sample(sample) for sample in group["samples"]]
    return piece  # type: ignore[return-value]


def configure_round_robin(
    base_directory: str,
    config: RoundRobinKitConfig,
    file_exists: SampleFileChecker = os.path.exists,
    default_root_note: int = DEFAULT_ROOT_NOTE,
) -> DrumKitConfig:
    """Validate a round-robin setup and build the kit fragment.

    Checks run in a fixed order over every group and sample: missing
    sequence positions (unless the mode is ``always``), positions outside
    ``[1, length]``, then sample files resolved against *base_directory*.
    Files are probed one at a time and the first missing one aborts.
    """
    _check_shape(config)
    _validate_positions(config)
    _validate_files(base_directory, config, file_exists)

    round_robin: RoundRobinConfig = {"mode": config["mode"]}
    if config.get("length") is not None:
        round_robin["length"] = config["length"]

    pieces = [_build_piece(group, default_root_note) for group in config["groups"]]
    logger.debug(f"Configured round robin ({config['mode']}) for {len(pieces)} group(s)")
    return {"globalSettings": {"roundRobin": round_robin}, "drumPieces": pieces}
