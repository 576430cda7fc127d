"""Tool-specific validation rules."""

from __future__ import annotations

from typing import Any, Optional

from decent_drums.core.tool_validation.models import ValidationError


def _validate_tool_specific(
    tool_name: str,
    params: dict[str, Any],
    sample_root: Optional[str] = None,
) -> list[ValidationError]:
    """Run tool-specific validation rules."""
    errors: list[ValidationError] = []

    if tool_name == "analyze_wav_samples":
        paths = params.get("paths")
        if isinstance(paths, list):
            if not paths:
                errors.append(ValidationError(
                    field="paths",
                    message="At least one WAV file path is required",
                    code="INVALID_VALUE",
                ))
            for i, path in enumerate(paths):
                if not isinstance(path, str) or not path.strip():
                    errors.append(ValidationError(
                        field=f"paths[{i}]",
                        message="Path must be a non-empty string",
                        code="INVALID_VALUE",
                    ))

    elif tool_name == "configure_round_robin":
        directory = params.get("directory")
        if directory is None and not sample_root:
            errors.append(ValidationError(
                field="directory",
                message="No sample directory given and no default sample root is configured",
                code="INVALID_VALUE",
            ))
        elif directory is not None and not str(directory).strip():
            errors.append(ValidationError(
                field="directory",
                message="Sample directory cannot be empty",
                code="INVALID_VALUE",
            ))

    elif tool_name == "merge_drum_kit_configs":
        configs = params.get("configs")
        if isinstance(configs, list):
            if not configs:
                errors.append(ValidationError(
                    field="configs",
                    message="At least one configuration fragment is required",
                    code="INVALID_VALUE",
                ))
            for i, config in enumerate(configs):
                if not isinstance(config, dict):
                    errors.append(ValidationError(
                        field=f"configs[{i}]",
                        message="Configuration fragment must be an object",
                        code="INVALID_VALUE",
                    ))

    elif tool_name == "configure_drum_controls":
        drums = params.get("drums")
        if isinstance(drums, list):
            names = [d["name"] for d in drums if isinstance(d, dict) and isinstance(d.get("name"), str)]
            seen: set[str] = set()
            for name in names:
                if name in seen:
                    errors.append(ValidationError(
                        field="drums",
                        message=f"Drum '{name}' is configured more than once",
                        code="INVALID_VALUE",
                    ))
                seen.add(name)

    return errors
