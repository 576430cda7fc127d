"""Main validation entrypoint: validate_tool_call."""

from __future__ import annotations

import logging
from typing import Optional

from decent_drums.contracts.json_types import JSONValue
from decent_drums.core.tool_validation.models import ValidationError, ValidationResult
from decent_drums.core.tool_validation.ranges import _collect_range_warnings
from decent_drums.core.tool_validation.schema import _validate_schema
from decent_drums.core.tool_validation.specific import _validate_tool_specific
from decent_drums.mcp.tools.registry import tool_def_by_name

logger = logging.getLogger(__name__)


def validate_tool_call(
    tool_name: str,
    params: dict[str, JSONValue],
    allowed_tools: set[str] | frozenset[str],
    sample_root: Optional[str] = None,
) -> ValidationResult:
    """
    Validate a tool call before dispatch.

    Steps:
    1. Allowlist check
    2. Schema validation (required params, top-level types, enums)
    3. Tool-specific validation
    4. MIDI range advisory warnings (never block)

    ``sample_root`` is the configured fallback directory for
    ``configure_round_robin``.
    """
    errors: list[ValidationError] = []

    # 1. Allowlist check
    if tool_name not in allowed_tools:
        errors.append(ValidationError(
            field="tool_name",
            message=f"Tool '{tool_name}' is not allowed for this request",
            code="TOOL_NOT_ALLOWED",
        ))
        return ValidationResult(valid=False, tool_name=tool_name, params=params, errors=errors)

    # 2. Schema validation
    tool_def = tool_def_by_name(tool_name)
    if tool_def:
        errors.extend(_validate_schema(params, tool_def))

    # 3. Tool-specific validation
    errors.extend(_validate_tool_specific(tool_name, params, sample_root=sample_root))

    # 4. Range warnings
    warnings = _collect_range_warnings(params)
    for warning in warnings:
        logger.warning(f"⚠️ {tool_name}: {warning}")

    return ValidationResult(
        valid=len(errors) == 0,
        tool_name=tool_name,
        params=params,
        errors=errors,
        warnings=warnings,
    )
