"""
Tool argument validation for the drum-kit MCP server.

Validates tool calls before execution:
1. Allowlist check
2. JSON schema validation (required params, types)
3. Tool-specific rules
4. MIDI range advisory warnings

Public API:
    validate_tool_call(tool_name, params, allowed_tools, sample_root) -> ValidationResult
"""

from decent_drums.core.tool_validation.models import ValidationError, ValidationResult
from decent_drums.core.tool_validation.constants import MIDI_NOTE_RANGE, VELOCITY_RANGE
from decent_drums.core.tool_validation.schema import _validate_schema, _validate_type
from decent_drums.core.tool_validation.ranges import _collect_range_warnings
from decent_drums.core.tool_validation.specific import _validate_tool_specific
from decent_drums.core.tool_validation.validators import validate_tool_call

__all__ = [
    # Models
    "ValidationError",
    "ValidationResult",
    # Constants
    "MIDI_NOTE_RANGE",
    "VELOCITY_RANGE",
    # Internal helpers (used by tests)
    "_validate_schema",
    "_validate_type",
    "_collect_range_warnings",
    "_validate_tool_specific",
    # Main entrypoint
    "validate_tool_call",
]
