"""Dataclass models for tool validation results."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class ValidationError:
    """A single validation error."""

    field: str
    message: str
    code: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


@dataclass
class ValidationResult:
    """Result of tool call validation.

    ``warnings`` never block the call; they are logged and appended to a
    successful tool result.
    """

    valid: bool
    tool_name: str
    params: dict[str, object]
    errors: list[ValidationError]
    warnings: list[str] = field(default_factory=list)

    @property
    def error_message(self) -> str:
        if not self.errors:
            return ""
        return "; ".join(str(e) for e in self.errors)
