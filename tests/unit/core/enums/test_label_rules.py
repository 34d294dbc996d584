"""Unit tests for labelenum.core.enums.label_rules module."""

import pytest

from labelenum.core.enums.label_rules import (
    find_duplicates,
    is_attribute_accessible,
    validate_labels,
)
from labelenum.utils.errors.exceptions import (
    ConstructionError,
    DuplicateLabelError,
    EmptyLabelSetError,
    InvalidLabelError,
    ReservedLabelError,
)


# ---------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------
@pytest.mark.unit
@pytest.mark.parametrize(
    ("label", "expected"),
    [
        ("pending", True),
        ("_private", True),
        ("in-progress", False),
        ("2fa", False),
        ("class", False),
        ("with space", False),
    ],
)
def test_is_attribute_accessible(label, expected):
    """Test identifier and keyword detection."""
    assert is_attribute_accessible(label) is expected


@pytest.mark.unit
def test_find_duplicates_first_seen_order():
    """Test that repeated labels are reported once each, in first-seen order."""
    assert find_duplicates(["b", "a", "b", "c", "a", "b"]) == ["b", "a"]
    assert find_duplicates(["a", "b"]) == []


# ---------------------------------------------------------------------
# validate_labels
# ---------------------------------------------------------------------
@pytest.mark.unit
def test_validate_returns_tuple_in_order():
    """Test that a valid iterable is materialized into an ordered tuple."""
    assert validate_labels(x for x in ["z", "a", "m"]) == ("z", "a", "m")


@pytest.mark.unit
def test_validate_empty():
    """Test that empty input fails before any other check."""
    with pytest.raises(EmptyLabelSetError, match="at least one value"):
        validate_labels([])


@pytest.mark.unit
@pytest.mark.parametrize("position", [0, 1, 2])
def test_validate_duplicates_anywhere(position):
    """Test that a duplicate is detected regardless of its position."""
    labels = ["a", "b", "c"]
    labels.insert(position, "c" if position < 2 else "a")
    with pytest.raises(DuplicateLabelError, match="unique") as exc_info:
        validate_labels(labels)
    assert len(exc_info.value.duplicates) == 1


@pytest.mark.unit
def test_validate_non_string():
    """Test that non-string elements are rejected with their position."""
    with pytest.raises(InvalidLabelError, match="position 1") as exc_info:
        validate_labels(["a", 3, "b"])
    assert exc_info.value.label == 3
    assert exc_info.value.position == 1


@pytest.mark.unit
def test_validate_empty_string():
    """Test that the empty string is not a valid label."""
    with pytest.raises(InvalidLabelError, match="non-empty"):
        validate_labels(["a", ""])


@pytest.mark.unit
def test_validate_type_checked_before_duplicates():
    """Test check order: element type is checked before uniqueness."""
    with pytest.raises(InvalidLabelError):
        validate_labels(["a", "a", None])


@pytest.mark.unit
def test_validate_reserved():
    """Test that reserved names are rejected after the uniqueness check."""
    with pytest.raises(ReservedLabelError, match="'values'") as exc_info:
        validate_labels(["ok", "values"], reserved={"values", "at"})
    assert exc_info.value.reserved == ("values",)

    with pytest.raises(DuplicateLabelError):
        validate_labels(["values", "values"], reserved={"values"})


@pytest.mark.unit
def test_construction_errors_are_value_errors():
    """Test that every construction failure can be caught as ValueError."""
    for exc_type in (
        EmptyLabelSetError,
        DuplicateLabelError,
        InvalidLabelError,
        ReservedLabelError,
    ):
        assert issubclass(exc_type, ConstructionError)
        assert issubclass(exc_type, ValueError)
