"""Drum-kit configuration rules and the DecentSampler XML renderer."""
from decent_drums.core.advanced_kit import create_advanced_drum_kit, is_advanced_drum_kit_config
from decent_drums.core.basic_kit import create_basic_drum_kit, is_basic_drum_kit_config
from decent_drums.core.drum_controls import configure_drum_controls
from decent_drums.core.errors import DrumKitConfigError, SchemaMismatchError, WavAnalysisError
from decent_drums.core.kit_merge import merge_kit_configs
from decent_drums.core.mic_routing import (
    collect_sample_mic_configs,
    configure_mic_buses,
    generate_sample_bus_routing,
    validate_mic_routing,
)
from decent_drums.core.round_robin import SampleFileChecker, configure_round_robin
from decent_drums.core.wav_analysis import WavAnalysis, analyze_wav_file
from decent_drums.core.xml_generation import generate_groups_xml, render_drum_kit

__all__ = [
    "DrumKitConfigError",
    "SampleFileChecker",
    "SchemaMismatchError",
    "WavAnalysis",
    "WavAnalysisError",
    "analyze_wav_file",
    "collect_sample_mic_configs",
    "configure_drum_controls",
    "configure_mic_buses",
    "configure_round_robin",
    "create_advanced_drum_kit",
    "create_basic_drum_kit",
    "generate_groups_xml",
    "generate_sample_bus_routing",
    "is_advanced_drum_kit_config",
    "is_basic_drum_kit_config",
    "merge_kit_configs",
    "render_drum_kit",
    "validate_mic_routing",
]
