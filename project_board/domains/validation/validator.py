"""
Constraint validation for form input.

A descriptor pairs a value with the constraints it must satisfy. Text and
numeric values use separate descriptor types, so a length bound can never be
attached to a number (or a numeric bound to text). `descriptor_from_mapping`
accepts the loose `{"value": ..., "minLength": ...}` shape and drops whatever
does not apply to the value's kind.

Validation failure is a normal outcome: `validate` returns a bool and `check`
returns the names of the violated constraints. Neither raises.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from project_board.utils.logger import get_logger

logger = get_logger()

REQUIRED = "required"
MIN_LENGTH = "min_length"
MAX_LENGTH = "max_length"
MIN = "min"
MAX = "max"

_TEXT_KEYS = {
    "required": REQUIRED,
    "minLength": MIN_LENGTH,
    "min_length": MIN_LENGTH,
    "maxLength": MAX_LENGTH,
    "max_length": MAX_LENGTH,
}
_NUMBER_KEYS = {
    "required": REQUIRED,
    "min": MIN,
    "max": MAX,
}


@dataclass(frozen=True)
class TextInput:
    """Text value with optional presence and inclusive length bounds."""

    value: str
    required: bool = False
    min_length: Optional[int] = None
    max_length: Optional[int] = None


@dataclass(frozen=True)
class NumberInput:
    """Numeric value with optional presence and inclusive range bounds. NaN means absent."""

    value: float
    required: bool = False
    min: Optional[float] = None
    max: Optional[float] = None


Descriptor = Union[TextInput, NumberInput]


@dataclass(frozen=True)
class ValidationResult:
    violations: frozenset[str] = frozenset()

    @property
    def is_valid(self) -> bool:
        return not self.violations

    def __bool__(self) -> bool:
        return self.is_valid


def _check_text(d: TextInput) -> set[str]:
    failed: set[str] = set()
    if d.required and not d.value.strip():
        failed.add(REQUIRED)
    if d.min_length is not None and len(d.value) < d.min_length:
        failed.add(MIN_LENGTH)
    if d.max_length is not None and len(d.value) > d.max_length:
        failed.add(MAX_LENGTH)
    return failed


def _check_number(d: NumberInput) -> set[str]:
    failed: set[str] = set()
    # NaN compares false against any bound, so it also fails min/max.
    missing = math.isnan(d.value)
    if d.required and missing:
        failed.add(REQUIRED)
    if d.min is not None and not d.value >= d.min:
        failed.add(MIN)
    if d.max is not None and not d.value <= d.max:
        failed.add(MAX)
    return failed


def check(descriptor: Descriptor) -> ValidationResult:
    """Return the set of constraints the descriptor's value violates."""
    if isinstance(descriptor, TextInput):
        failed = _check_text(descriptor)
    elif isinstance(descriptor, NumberInput):
        failed = _check_number(descriptor)
    else:
        # Unknown descriptor kinds carry no constraints we understand.
        failed = set()
    return ValidationResult(frozenset(failed))


def validate(descriptor: Descriptor) -> bool:
    """True when every constraint present on the descriptor holds."""
    return check(descriptor).is_valid


def _to_float(value: int | float) -> float:
    # Ints beyond float range become signed infinity so bounds still compare.
    try:
        return float(value)
    except OverflowError:
        return math.copysign(math.inf, value)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def coerce_number(raw: Any) -> float:
    """
    Convert raw form input into a headcount-style number.

    Empty, unparseable, non-finite or non-integral input becomes NaN, which
    fails `required`. Numbers pass through (bools are not numbers here).
    """
    if isinstance(raw, bool):
        return math.nan
    if isinstance(raw, (int, float)):
        value = _to_float(raw)
    else:
        text = "" if raw is None else str(raw).strip()
        if not text:
            return math.nan
        try:
            value = float(text)
        except ValueError:
            return math.nan
    if not math.isfinite(value) or not value.is_integer():
        return math.nan
    return value


def descriptor_from_mapping(mapping: Mapping[str, Any]) -> Descriptor:
    """
    Build a typed descriptor from a loose mapping.

    Text values keep `required`, `minLength`/`maxLength`; numeric values keep
    `required`, `min`/`max`. Constraints that do not apply to the value's kind,
    and bounds that are not numbers, are dropped rather than reported.
    """
    value = mapping.get("value", "")
    if _is_number(value):
        allowed, build = _NUMBER_KEYS, NumberInput
        value = _to_float(value)
    else:
        allowed, build = _TEXT_KEYS, TextInput
        value = "" if value is None else str(value)

    kwargs: dict[str, Any] = {}
    skipped = []
    for key, constraint in mapping.items():
        if key == "value" or constraint is None:
            continue
        name = allowed.get(key)
        if name == REQUIRED:
            kwargs[name] = bool(constraint)
        elif name is not None and _is_number(constraint):
            kwargs[name] = constraint
        else:
            skipped.append(key)
    if skipped:
        logger.debug("Skipping constraints %s for %s value", sorted(skipped), build.__name__)
    return build(value, **kwargs)
