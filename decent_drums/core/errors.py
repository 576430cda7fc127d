"""Exception types raised by the drum-kit rule engines."""
from __future__ import annotations

from decent_drums.contracts.mcp_types import INTERNAL_ERROR, INVALID_REQUEST


class DrumKitConfigError(ValueError):
    """A configuration violates a domain rule (pitch range, bus index, ...)."""


class SchemaMismatchError(DrumKitConfigError):
    """A configuration does not have the structure the operation expects."""


class WavAnalysisError(Exception):
    """A WAV file could not be read or failed header validation.

    ``code`` is the JSON-RPC error code the MCP layer reports.
    """

    def __init__(self, message: str, code: int = INTERNAL_ERROR) -> None:
        super().__init__(message)
        self.code = code

    @classmethod
    def invalid(cls, message: str) -> "WavAnalysisError":
        return cls(message, code=INVALID_REQUEST)
