"""Custom exception hierarchy for labelenum."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Sequence


class LabelEnumError(Exception):
    """Base class for all labelenum-specific exceptions."""


class ConstructionError(LabelEnumError, ValueError):
    """Raised when a label sequence cannot be turned into a LabelEnum."""

    def __init__(self, message: str | None = None):
        """Initialize construction error with optional message."""
        if message is None:
            message = "Error constructing enum."
        super().__init__(message)


class EmptyLabelSetError(ConstructionError):
    """Raised when an enum is constructed from zero labels."""

    def __init__(self, message: str | None = None):
        """Initialize empty-label-set error with optional message."""
        if message is None:
            message = "Enum must have at least one value"
        super().__init__(message)


class InvalidLabelError(ConstructionError):
    """
    Raised when a label is not a non-empty string.

    Attributes:
        label (Any): Offending element.
        position (int): Index of the offending element in the input.

    """

    def __init__(self, label: Any, position: int, message: str | None = None):
        """
        Initialize invalid-label error.

        Args:
            label (Any): Offending element.
            position (int): Index of the offending element.
            message (str | None, optional): Custom message override.

        """
        if message is None:
            if isinstance(label, str):
                message = f"Enum labels must be non-empty strings (empty string at position {position})."
            else:
                message = (
                    f"Enum labels must be strings, got {type(label).__name__} "
                    f"{label!r} at position {position}."
                )
        super().__init__(message)
        self.label = label
        self.position = position


class DuplicateLabelError(ConstructionError):
    """
    Raised when the same label occurs more than once.

    Attributes:
        duplicates (tuple[str, ...]): Repeated labels in first-seen order.

    """

    def __init__(self, duplicates: Sequence[str], message: str | None = None):
        """
        Initialize duplicate-label error.

        Args:
            duplicates (Sequence[str]): Labels that occur more than once.
            message (str | None, optional): Custom message override.

        """
        if message is None:
            message = f"Enum values must be unique. Repeated: {', '.join(duplicates)}"
        super().__init__(message)
        self.duplicates = tuple(duplicates)


class ReservedLabelError(ConstructionError):
    """
    Raised when a label would shadow an attribute of the enum itself.

    Attributes:
        reserved (tuple[str, ...]): Offending labels in input order.

    """

    def __init__(self, reserved: Sequence[str], message: str | None = None):
        """
        Initialize reserved-label error.

        Args:
            reserved (Sequence[str]): Labels colliding with enum attributes.
            message (str | None, optional): Custom message override.

        """
        if message is None:
            names = ", ".join(f"'{r}'" for r in reserved)
            message = f"Enum labels collide with reserved attribute names: {names}"
        super().__init__(message)
        self.reserved = tuple(reserved)


class InvalidValueError(LabelEnumError, ValueError):
    """
    Raised when a value is asserted to be a member but is not.

    Attributes:
        value (Any): Rejected value.
        valid (tuple[str, ...]): Labels of the enum, in order.

    """

    def __init__(
        self,
        value: Any,
        valid: Sequence[str],
        message: str | None = None,
    ):
        """
        Initialize invalid-value error.

        Args:
            value (Any): Rejected value.
            valid (Sequence[str]): Full label set of the enum.
            message (str | None, optional): Custom message override.

        """
        if message is None:
            message = (
                f'Invalid enum value: "{value}". Expected one of: {", ".join(valid)}'
            )
        super().__init__(message)
        self.value = value
        self.valid = tuple(valid)


class ImmutableEnumError(LabelEnumError, AttributeError):
    """Raised on any attempt to set or delete an attribute of a LabelEnum."""

    def __init__(self, name: str | None = None, message: str | None = None):
        """
        Initialize immutability error.

        Args:
            name (str | None, optional): Attribute that was targeted.
            message (str | None, optional): Custom message override.

        """
        if message is None:
            message = (
                "LabelEnum is immutable."
                if name is None
                else f"LabelEnum is immutable; cannot modify attribute '{name}'."
            )
        super().__init__(message)


class LabelAccessWarning(UserWarning):
    """Warning emitted when a label cannot be reached with attribute syntax."""
