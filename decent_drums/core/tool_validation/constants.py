"""Validation constants: MIDI value ranges shared by the range checks."""

from __future__ import annotations

MIDI_NOTE_RANGE: tuple[int, int] = (0, 127)
VELOCITY_RANGE: tuple[int, int] = (0, 127)
