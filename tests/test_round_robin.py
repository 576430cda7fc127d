"""Tests for round-robin configuration and settings inheritance."""
from __future__ import annotations

from pathlib import Path

import pytest

from decent_drums.core import DrumKitConfigError, SchemaMismatchError, configure_round_robin
from decent_drums.core.round_robin import resolve_seq_length, resolve_seq_position


@pytest.fixture
def sample_dir(tmp_path: Path) -> str:
    (tmp_path / "valid.wav").write_bytes(b"RIFF")
    return str(tmp_path)


def _group(*samples: dict, **extra) -> dict:
    return {"name": "Kick", "samples": list(samples) or [{"path": "valid.wav"}], **extra}


# ---------------------------------------------------------------------------
# Basic configuration
# ---------------------------------------------------------------------------

class TestBasicConfiguration:

    def test_minimal_configuration(self, sample_dir: str) -> None:
        result = configure_round_robin(sample_dir, {"mode": "always", "groups": [_group()]})

        assert result["globalSettings"]["roundRobin"] == {"mode": "always"}
        piece = result["drumPieces"][0]
        assert piece["name"] == "Kick"
        assert piece["rootNote"] == 60
        assert piece["samples"] == [{"path": "valid.wav"}]

    def test_all_optional_fields(self, sample_dir: str) -> None:
        config = {
            "mode": "round_robin",
            "length": 4,
            "groups": [
                _group(
                    {"path": "valid.wav", "settings": {"mode": "true_random", "length": 3, "seqPosition": 2}},
                    rootNote=36,
                    settings={"mode": "random", "length": 2, "seqPosition": 1},
                ),
            ],
        }
        result = configure_round_robin(sample_dir, config)

        assert result["globalSettings"]["roundRobin"] == {"mode": "round_robin", "length": 4}
        piece = result["drumPieces"][0]
        assert piece["rootNote"] == 36
        assert piece["seqMode"] == "random"
        assert piece["seqLength"] == 2
        assert piece["seqPosition"] == 1
        assert piece["samples"][0] == {
            "path": "valid.wav",
            "seqMode": "true_random",
            "seqLength": 3,
            "seqPosition": 2,
        }

    def test_default_root_note_is_configurable(self, sample_dir: str) -> None:
        result = configure_round_robin(
            sample_dir, {"mode": "always", "groups": [_group()]}, default_root_note=38
        )
        assert result["drumPieces"][0]["rootNote"] == 38

    @pytest.mark.parametrize("mode", ["round_robin", "random", "true_random", "always"])
    def test_each_mode(self, sample_dir: str, mode: str) -> None:
        sample = {"path": "valid.wav"} if mode == "always" else {"path": "valid.wav", "seqPosition": 1}
        config = {"mode": mode, "groups": [_group(sample)]}
        if mode != "always":
            config["length"] = 2

        round_robin = configure_round_robin(sample_dir, config)["globalSettings"]["roundRobin"]
        assert round_robin["mode"] == mode
        if mode != "always":
            assert round_robin["length"] == 2


# ---------------------------------------------------------------------------
# Sequence positions
# ---------------------------------------------------------------------------

class TestSequencePositions:

    def test_position_required_unless_always(self, sample_dir: str) -> None:
        with pytest.raises(DrumKitConfigError) as exc_info:
            configure_round_robin(sample_dir, {"mode": "round_robin", "groups": [_group()]})
        assert str(exc_info.value) == (
            "Sample valid.wav needs a seqPosition when mode is round_robin. "
            "Provide it at sample, group, or global level."
        )

    def test_always_mode_needs_no_position(self, sample_dir: str) -> None:
        configure_round_robin(sample_dir, {"mode": "always", "groups": [_group()]})

    def test_position_out_of_range(self, sample_dir: str) -> None:
        config = {"mode": "round_robin", "length": 2, "groups": [_group({"path": "valid.wav", "seqPosition": 3})]}
        with pytest.raises(DrumKitConfigError) as exc_info:
            configure_round_robin(sample_dir, config)
        assert str(exc_info.value) == (
            "Invalid sequence position 3 for sample valid.wav. Must be between 1 and 2"
        )

    def test_position_below_one(self, sample_dir: str) -> None:
        config = {"mode": "random", "length": 2, "groups": [_group({"path": "valid.wav", "seqPosition": 0})]}
        with pytest.raises(DrumKitConfigError, match="Invalid sequence position 0"):
            configure_round_robin(sample_dir, config)

    def test_group_length_overrides_global(self, sample_dir: str) -> None:
        config = {
            "mode": "round_robin",
            "length": 4,
            "groups": [_group({"path": "valid.wav", "seqPosition": 3}, settings={"mode": "round_robin", "length": 2})],
        }
        with pytest.raises(DrumKitConfigError, match="Must be between 1 and 2"):
            configure_round_robin(sample_dir, config)

    def test_no_length_skips_range_check(self, sample_dir: str) -> None:
        config = {"mode": "round_robin", "groups": [_group({"path": "valid.wav", "seqPosition": 9})]}
        configure_round_robin(sample_dir, config)

    def test_position_checks_precede_file_checks(self, sample_dir: str) -> None:
        config = {"mode": "round_robin", "groups": [_group({"path": "missing.wav"})]}
        with pytest.raises(DrumKitConfigError, match="needs a seqPosition"):
            configure_round_robin(sample_dir, config)


# ---------------------------------------------------------------------------
# Inheritance
# ---------------------------------------------------------------------------

class TestSettingsInheritance:

    def test_inherits_position_from_group_settings(self, sample_dir: str) -> None:
        config = {"mode": "round_robin", "groups": [_group(settings={"mode": "round_robin", "seqPosition": 1})]}
        configure_round_robin(sample_dir, config)

    def test_sample_settings_override_group(self, sample_dir: str) -> None:
        config = {
            "mode": "round_robin",
            "groups": [
                _group(
                    {"path": "valid.wav", "settings": {"mode": "random", "seqPosition": 2}},
                    settings={"mode": "round_robin", "seqPosition": 1},
                ),
            ],
        }
        sample = configure_round_robin(sample_dir, config)["drumPieces"][0]["samples"][0]
        assert sample["path"] == "valid.wav"
        assert sample["seqPosition"] == 2

    def test_sample_position_wins_over_sample_settings(self, sample_dir: str) -> None:
        config = {
            "mode": "round_robin",
            "groups": [_group({"path": "valid.wav", "seqPosition": 3, "settings": {"mode": "random", "seqPosition": 2}})],
        }
        sample = configure_round_robin(sample_dir, config)["drumPieces"][0]["samples"][0]
        assert sample["seqPosition"] == 3

    def test_resolvers(self) -> None:
        group = {"name": "Kick", "settings": {"mode": "random", "seqPosition": 1, "length": 4}, "samples": []}
        bare = {"path": "a.wav"}
        own = {"path": "b.wav", "settings": {"mode": "random", "seqPosition": 2, "length": 3}}

        assert resolve_seq_position(group, bare) == 1
        assert resolve_seq_position(group, own) == 2
        assert resolve_seq_position(group, {**own, "seqPosition": 5}) == 5
        assert resolve_seq_length({"length": 8}, group, own) == 3
        assert resolve_seq_length({"length": 8}, group, bare) == 4
        assert resolve_seq_length({"length": 8}, {"name": "Snare", "samples": []}, bare) == 8
        assert resolve_seq_length({}, {"name": "Snare", "samples": []}, bare) is None


# ---------------------------------------------------------------------------
# Files
# ---------------------------------------------------------------------------

class TestSampleFiles:

    def test_missing_file(self, sample_dir: str) -> None:
        config = {"mode": "always", "groups": [_group({"path": "nonexistent.wav"})]}
        with pytest.raises(DrumKitConfigError) as exc_info:
            configure_round_robin(sample_dir, config)
        assert str(exc_info.value) == "Sample file not found: nonexistent.wav"

    def test_existing_file(self, sample_dir: str) -> None:
        configure_round_robin(sample_dir, {"mode": "always", "groups": [_group()]})

    def test_injected_file_checker(self) -> None:
        probed: list[str] = []

        def exists(path: str) -> bool:
            probed.append(path)
            return True

        configure_round_robin(
            "/kits/acoustic",
            {"mode": "always", "groups": [_group({"path": "kick_1.wav"}, {"path": "kick_2.wav"})]},
            file_exists=exists,
        )
        assert probed == ["/kits/acoustic/kick_1.wav", "/kits/acoustic/kick_2.wav"]

    def test_first_missing_file_aborts(self) -> None:
        probed: list[str] = []

        def exists(path: str) -> bool:
            probed.append(path)
            return False

        with pytest.raises(DrumKitConfigError, match="kick_1.wav"):
            configure_round_robin(
                "/kits",
                {"mode": "always", "groups": [_group({"path": "kick_1.wav"}, {"path": "kick_2.wav"})]},
                file_exists=exists,
            )
        assert len(probed) == 1


# ---------------------------------------------------------------------------
# Shape errors
# ---------------------------------------------------------------------------

class TestShape:

    @pytest.mark.parametrize(
        "config",
        [
            {"mode": "shuffle", "groups": []},
            {"mode": "always"},
            {"mode": "always", "length": "2", "groups": []},
            {"mode": "always", "groups": [{"samples": []}]},
            {"mode": "always", "groups": [{"name": "Kick", "samples": [{"seqPosition": 1}]}]},
            {"mode": "always", "groups": [{"name": "Kick", "settings": {"length": 2}, "samples": []}]},
        ],
    )
    def test_rejects_malformed_config(self, config: dict) -> None:
        with pytest.raises(SchemaMismatchError):
            configure_round_robin("/kits", config, file_exists=lambda _: True)
