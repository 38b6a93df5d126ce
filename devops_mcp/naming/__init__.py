"""
Naming Module - Identifier Validation

Naming grammar for operation and field names, plus the extractor, lint and
pre-publish check built on it.
"""

from devops_mcp.naming.validator import (
    MAX_NAME_LENGTH,
    LONG_FIELD_NAME_THRESHOLD,
    NAME_PATTERN,
    ValidationResult,
    validate_name,
    validate_operation_name,
    validate_field_name,
    is_long_field_name,
    require_valid_operation_name,
    require_valid_field_name,
)
from devops_mcp.naming.extractor import extract_operation_names, extract_field_names
from devops_mcp.naming.lint import LintMessage, lint_source

__all__ = [
    "MAX_NAME_LENGTH",
    "LONG_FIELD_NAME_THRESHOLD",
    "NAME_PATTERN",
    "ValidationResult",
    "validate_name",
    "validate_operation_name",
    "validate_field_name",
    "is_long_field_name",
    "require_valid_operation_name",
    "require_valid_field_name",
    "extract_operation_names",
    "extract_field_names",
    "LintMessage",
    "lint_source",
]
