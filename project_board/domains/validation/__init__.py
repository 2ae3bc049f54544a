"""Constraint validation for raw form input."""

from project_board.domains.validation.validator import (
    NumberInput,
    TextInput,
    ValidationResult,
    check,
    coerce_number,
    descriptor_from_mapping,
    validate,
)

__all__ = [
    "NumberInput",
    "TextInput",
    "ValidationResult",
    "check",
    "coerce_number",
    "descriptor_from_mapping",
    "validate",
]
