"""WAV header analysis for sample metadata.

Reads the RIFF header of a PCM WAV file and reports what a preset needs to
map the sample: frame count (the ``end`` marker), sample rate, channel count
and bit depth.  Only the header and chunk table are parsed; audio data is
never decoded.
"""
from __future__ import annotations

import logging
import math
import pathlib
import struct
from dataclasses import dataclass
from typing import Optional

from decent_drums.core.errors import WavAnalysisError
from decent_drums.models.base import CamelModel

logger = logging.getLogger(__name__)

MIN_WAV_SIZE = 44
PCM_FORMAT = 1

_FMT_LAYOUT = struct.Struct("<HHIIHH")


class WavAnalysis(CamelModel):
    """Sample metadata reported by ``analyze_wav_samples``."""

    path: str
    sample_length: int
    sample_rate: int
    channels: int
    bit_depth: int


@dataclass
class WavHeader:
    """Fields read from the `fmt ` and `data` chunks."""

    audio_format: Optional[int] = None
    channels: int = 0
    sample_rate: int = 0
    bits_per_sample: int = 0
    data_size: Optional[int] = None


# ---------------------------------------------------------------------------
# Header parsing
# ---------------------------------------------------------------------------

def _walk_chunks(buffer: bytes) -> WavHeader:
    """Scan the chunk table after the 12-byte RIFF preamble.

    Chunks other than ``fmt `` and ``data`` (``LIST``, ``JUNK``, ``bext`` ...)
    are skipped.  Chunk bodies are padded to an even length.
    """
    header = WavHeader()
    offset = 12
    while offset + 8 <= len(buffer):
        chunk_id = buffer[offset:offset + 4]
        (chunk_size,) = struct.unpack_from("<I", buffer, offset + 4)
        body = offset + 8

        if chunk_id == b"fmt " and header.audio_format is None and body + _FMT_LAYOUT.size <= len(buffer):
            (
                header.audio_format,
                header.channels,
                header.sample_rate,
                _byte_rate,
                _block_align,
                header.bits_per_sample,
            ) = _FMT_LAYOUT.unpack_from(buffer, body)
        elif chunk_id == b"data":
            header.data_size = chunk_size
            break

        offset = body + chunk_size + (chunk_size & 1)
    return header


def _header_problems(buffer: bytes, header: WavHeader) -> list[str]:
    problems: list[str] = []
    if buffer[0:4] != b"RIFF":
        problems.append("Missing RIFF header")
    if buffer[8:12] != b"WAVE":
        problems.append("Missing WAVE format marker")

    if header.audio_format is None:
        problems.append("Missing fmt chunk")
    else:
        if header.audio_format != PCM_FORMAT:
            problems.append(f"Unsupported audio format: {header.audio_format} (only PCM supported)")
        if header.channels == 0:
            problems.append("Invalid number of channels: 0")
        if header.sample_rate == 0:
            problems.append("Invalid sample rate: 0")
        if header.bits_per_sample == 0:
            problems.append("Invalid bits per sample: 0")

    if not header.data_size:
        problems.append("Missing data chunk")
    return problems


def parse_wav_header(buffer: bytes) -> WavHeader:
    """Parse and validate *buffer*; every problem is reported in one error."""
    if len(buffer) < MIN_WAV_SIZE:
        raise WavAnalysisError.invalid("File too small to be a valid WAV file")

    header = _walk_chunks(buffer)
    problems = _header_problems(buffer, header)
    if problems:
        raise WavAnalysisError.invalid(f"WAV file validation failed: {', '.join(problems)}")
    return header


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def analyze_wav_file(path: str) -> WavAnalysis:
    """Read *path* and return its sample metadata.

    Raises:
        WavAnalysisError: ``INVALID_REQUEST`` for header validation failures,
            ``INTERNAL_ERROR`` when the file cannot be read.
    """
    try:
        buffer = pathlib.Path(path).read_bytes()
    except OSError as exc:
        logger.error(f"❌ WAV analysis error for {path}: {exc}")
        raise WavAnalysisError(f"Failed to analyze WAV file {path}: {exc}") from exc

    header = parse_wav_header(buffer)
    bytes_per_frame = header.bits_per_sample / 8 * header.channels
    sample_length = math.floor(header.data_size / bytes_per_frame + 0.5)

    logger.debug(f"Analyzed {path}: {sample_length} frames @ {header.sample_rate} Hz")
    return WavAnalysis(
        path=path,
        sample_length=sample_length,
        sample_rate=header.sample_rate,
        channels=header.channels,
        bit_depth=header.bits_per_sample,
    )
