"""Validation rules applied to label sequences before an enum is built."""

from __future__ import annotations

import keyword
from typing import TYPE_CHECKING

from labelenum.utils.errors.exceptions import (
    DuplicateLabelError,
    EmptyLabelSetError,
    InvalidLabelError,
    ReservedLabelError,
)

if TYPE_CHECKING:
    from collections.abc import Collection, Iterable


def is_attribute_accessible(label: str) -> bool:
    """Return True if `label` can be written as `obj.label` in source code."""
    return label.isidentifier() and not keyword.iskeyword(label)


def find_duplicates(labels: Iterable[str]) -> list[str]:
    """Return every label occurring more than once, in first-seen order."""
    seen: set[str] = set()
    repeated: dict[str, None] = {}
    for label in labels:
        if label in seen:
            repeated[label] = None
        else:
            seen.add(label)
    return list(repeated)


def validate_labels(
    labels: Iterable[str],
    *,
    reserved: Collection[str] = (),
) -> tuple[str, ...]:
    """
    Materialize and validate an ordered label sequence.

    Description:
        Checks run in a fixed order and the first failure is raised:
        emptiness, element type, empty strings, duplicates, then
        collisions with `reserved` attribute names.

    Args:
        labels (Iterable[str]):
            Ordered labels. Consumed exactly once.
        reserved (Collection[str]):
            Names that labels may not take.

    Returns:
        tuple[str, ...]: The validated labels, order preserved.

    Raises:
        EmptyLabelSetError: If `labels` is empty.
        InvalidLabelError: If an element is not a string or is `""`.
        DuplicateLabelError: If any label repeats.
        ReservedLabelError: If any label is in `reserved`.

    """
    values = tuple(labels)

    if not values:
        raise EmptyLabelSetError

    for i, label in enumerate(values):
        if not isinstance(label, str) or label == "":
            raise InvalidLabelError(label=label, position=i)

    duplicates = find_duplicates(values)
    if duplicates:
        raise DuplicateLabelError(duplicates=duplicates)

    collisions = [label for label in values if label in reserved]
    if collisions:
        raise ReservedLabelError(reserved=collisions)

    return values
