"""JSON schema validation for tool call parameters.

Only the subset the drum-kit tools declare is checked: ``required``,
top-level property ``type`` and ``enum``. Nested shapes are left to the
rule engines, which report them with their own messages.
"""

from __future__ import annotations

from decent_drums.contracts.mcp_types import MCPToolDef
from decent_drums.core.tool_validation.models import ValidationError

_JSON_TYPES: dict[str, type | tuple[type, ...]] = {
    "string": str,
    "integer": int,
    "number": (int, float),
    "boolean": bool,
    "array": list,
    "object": dict,
}


def _validate_type(field: str, value: object, expected_type: str) -> ValidationError | None:
    """Validate a value against an expected JSON Schema type.

    ``bool`` is an ``int`` subclass in Python but never a JSON number.
    Unknown type names pass.
    """
    expected = _JSON_TYPES.get(expected_type)
    if expected is None:
        return None
    numeric = expected_type in ("integer", "number")
    if isinstance(value, expected) and not (numeric and isinstance(value, bool)):
        return None
    return ValidationError(
        field=field,
        message=f"Expected {expected_type}, got {type(value).__name__}",
        code="TYPE_MISMATCH",
    )


def _validate_schema(params: dict[str, object], tool_def: MCPToolDef) -> list[ValidationError]:
    """Validate params against the tool's ``inputSchema``."""
    schema = tool_def.get("inputSchema") or {}
    required = schema.get("required")
    properties = schema.get("properties")
    if not isinstance(properties, dict):
        properties = {}

    errors = [
        ValidationError(
            field=name,
            message=f"Required field '{name}' is missing",
            code="MISSING_REQUIRED",
        )
        for name in (required if isinstance(required, list) else [])
        if name not in params
    ]

    for field, value in params.items():
        prop = properties.get(field)
        if not isinstance(prop, dict) or not isinstance(prop.get("type"), str):
            continue
        type_error = _validate_type(field, value, prop["type"])
        if type_error:
            errors.append(type_error)
            continue
        allowed = prop.get("enum")
        if isinstance(allowed, list) and value not in allowed:
            errors.append(ValidationError(
                field=field,
                message=f"Value '{value}' is not one of {', '.join(map(str, allowed))}",
                code="INVALID_VALUE",
            ))

    return errors
