"""
Naming - Name Validator

Operation names and field names exposed to MCP clients must match
``^[a-zA-Z0-9_.-]{1,64}$``. Every consumer (tool registration, the lint
check and the pre-publish check) goes through this module.
"""

import re
from dataclasses import dataclass
from typing import Optional

from devops_mcp.exceptions import NameValidationError


MAX_NAME_LENGTH = 64
LONG_FIELD_NAME_THRESHOLD = 32
NAME_PATTERN = re.compile(r"^[a-zA-Z0-9_.-]{1,64}$")

_INVALID_CHARACTERS = (
    "contains invalid characters. Only alphanumeric characters, "
    "underscores, dots, and hyphens are allowed"
)


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a single name."""
    is_valid: bool
    error: Optional[str] = None
    reason: Optional[str] = None

    def __bool__(self) -> bool:
        return self.is_valid


def validate_name(name: str) -> ValidationResult:
    """
    Validate a name against the naming grammar.

    Args:
        name: Candidate operation or field name

    Returns:
        ValidationResult; ``error`` is a full sentence naming the value,
        ``reason`` is the short form used in lint messages
    """
    if len(name) == 0:
        return ValidationResult(
            is_valid=False,
            error="Name cannot be empty",
            reason="name cannot be empty",
        )

    if len(name) > MAX_NAME_LENGTH:
        return ValidationResult(
            is_valid=False,
            error=(
                f"Name '{name}' is {len(name)} characters long, "
                f"maximum allowed is {MAX_NAME_LENGTH}"
            ),
            reason=(
                f"name is {len(name)} characters long, "
                f"maximum allowed is {MAX_NAME_LENGTH}"
            ),
        )

    if not NAME_PATTERN.fullmatch(name):
        return ValidationResult(
            is_valid=False,
            error=f"Name '{name}' {_INVALID_CHARACTERS}",
            reason=f"name {_INVALID_CHARACTERS}",
        )

    return ValidationResult(is_valid=True)


def _prefixed(result: ValidationResult, prefix: str) -> ValidationResult:
    if result.is_valid:
        return result
    return ValidationResult(
        is_valid=False,
        error=result.error.replace("Name", prefix, 1),
        reason=result.reason,
    )


def validate_operation_name(name: str) -> ValidationResult:
    """Validate an operation (tool) name."""
    return _prefixed(validate_name(name), "Operation name")


def validate_field_name(name: str) -> ValidationResult:
    """Validate a field (tool parameter) name."""
    return _prefixed(validate_name(name), "Field name")


def is_long_field_name(name: str) -> bool:
    """Style warning only; never affects validity."""
    return len(name) > LONG_FIELD_NAME_THRESHOLD


def require_valid_operation_name(name: str) -> str:
    """Return ``name`` or raise NameValidationError."""
    result = validate_operation_name(name)
    if not result.is_valid:
        raise NameValidationError(name, result.error)
    return name


def require_valid_field_name(name: str) -> str:
    """Return ``name`` or raise NameValidationError."""
    result = validate_field_name(name)
    if not result.is_valid:
        raise NameValidationError(name, result.error)
    return name
