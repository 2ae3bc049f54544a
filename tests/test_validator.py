"""
Tests for the constraint validator: text/number descriptors, loose mappings, coercion.
"""

from __future__ import annotations

import math

import pytest

from project_board.domains.validation.validator import (
    NumberInput,
    TextInput,
    check,
    coerce_number,
    descriptor_from_mapping,
    validate,
)


def test_no_constraints_always_valid() -> None:
    """A descriptor without constraints passes regardless of its value."""
    assert validate(TextInput("")) is True
    assert validate(TextInput("   ")) is True
    assert validate(NumberInput(-100.0)) is True
    assert validate(NumberInput(math.nan)) is True


def test_required_text() -> None:
    """required rejects whitespace-only text."""
    assert validate(TextInput("   ", required=True)) is False
    assert validate(TextInput("", required=True)) is False
    assert validate(TextInput("x", required=True)) is True


def test_length_bounds_inclusive() -> None:
    assert validate(TextInput("ab", min_length=3)) is False
    assert validate(TextInput("abc", min_length=3)) is True
    assert validate(TextInput("abc", max_length=2)) is False
    assert validate(TextInput("ab", max_length=2)) is True


def test_number_range_inclusive() -> None:
    assert validate(NumberInput(0, min=1, max=5)) is False
    assert validate(NumberInput(1, min=1, max=5)) is True
    assert validate(NumberInput(3, min=1, max=5)) is True
    assert validate(NumberInput(5, min=1, max=5)) is True
    assert validate(NumberInput(6, min=1, max=5)) is False


def test_required_number_nan_fails() -> None:
    """NaN counts as absent, and fails the range bounds too."""
    r = check(NumberInput(math.nan, required=True, min=1, max=5))
    assert not r
    assert r.violations == {"required", "min", "max"}
    assert validate(NumberInput(0, required=True)) is True


def test_check_reports_only_failed_constraints() -> None:
    r = check(TextInput("  ", required=True, min_length=5, max_length=10))
    assert r.is_valid is False
    assert r.violations == {"required", "min_length"}

    ok = check(TextInput("hello", required=True, min_length=5, max_length=10))
    assert ok.is_valid is True
    assert ok.violations == frozenset()
    assert bool(ok) is True


def test_result_is_conjunction() -> None:
    """validate() equals the AND of each constraint checked on its own."""
    value = "abcd"
    single = [
        TextInput(value, required=True),
        TextInput(value, min_length=3),
        TextInput(value, max_length=3),
    ]
    combined = TextInput(value, required=True, min_length=3, max_length=3)
    assert validate(combined) == all(validate(d) for d in single)
    assert validate(combined) is False


def test_descriptor_from_mapping_text() -> None:
    d = descriptor_from_mapping({"value": "ab", "required": True, "minLength": 3})
    assert isinstance(d, TextInput)
    assert d.min_length == 3
    assert validate(d) is False


def test_descriptor_from_mapping_skips_mismatched_constraints() -> None:
    """Length bounds on numbers and numeric bounds on text are dropped, not errors."""
    num = descriptor_from_mapping({"value": 3, "minLength": 10, "max": 5})
    assert isinstance(num, NumberInput)
    assert num.max == 5
    assert validate(num) is True

    text = descriptor_from_mapping({"value": "abc", "min": 10, "max": 1, "max_length": 5})
    assert isinstance(text, TextInput)
    assert text.max_length == 5
    assert validate(text) is True


def test_descriptor_from_mapping_ignores_none_constraints() -> None:
    d = descriptor_from_mapping({"value": "", "required": None, "minLength": None})
    assert validate(d) is True


@pytest.mark.parametrize("raw", ["", "   ", "abc", "2.5", "inf", "nan", None, True])
def test_coerce_number_unparseable_is_nan(raw: object) -> None:
    assert math.isnan(coerce_number(raw))


@pytest.mark.parametrize("raw,expected", [("3", 3.0), (" 4 ", 4.0), ("2.0", 2.0), (5, 5.0), ("-1", -1.0)])
def test_coerce_number_parses_integers(raw: object, expected: float) -> None:
    assert coerce_number(raw) == expected


def test_unparseable_people_fails_required() -> None:
    assert validate(NumberInput(coerce_number("lots"), required=True)) is False


def test_descriptor_from_mapping_drops_non_numeric_bounds() -> None:
    """A string length bound is dropped instead of breaking the comparison."""
    d = descriptor_from_mapping({"value": "abc", "minLength": "3", "maxLength": 2})
    assert isinstance(d, TextInput)
    assert d.min_length is None
    assert d.max_length == 2
    assert validate(d) is False


def test_descriptor_from_mapping_huge_int_value() -> None:
    """Ints past float range still compare against bounds."""
    too_big = descriptor_from_mapping({"value": 10**400, "required": True, "min": 1, "max": 5})
    assert check(too_big).violations == {"max"}
    too_small = descriptor_from_mapping({"value": -(10**400), "min": 1})
    assert check(too_small).violations == {"min"}
    assert math.isnan(coerce_number(10**400))


@pytest.mark.parametrize(
    "mapping",
    [
        {"value": "abc", "minLength": "3"},
        {"value": "abc", "maxLength": [1, 2]},
        {"value": 3, "min": "1", "max": {"limit": 5}},
        {"value": None, "min": 1, "required": True},
        {"value": 10**400, "max": 5},
        {"value": 2, "min": 10**400},
        {"value": {"nested": [1, 2]}, "minLength": 1, "max": 3},
        {"value": ["a"], "required": True, "maxLength": True},
        {"value": math.nan, "required": True, "min": math.nan},
        {},
    ],
)
def test_loose_mappings_never_raise(mapping: dict) -> None:
    """Whatever the loose mapping holds, validation answers with a bool."""
    assert isinstance(validate(descriptor_from_mapping(mapping)), bool)


@pytest.mark.parametrize("raw", [0, "0", " 0 "])
def test_coerce_number_keeps_zero(raw: object) -> None:
    """Zero is a number, not missing input; only None maps to empty text."""
    assert coerce_number(raw) == 0.0
