from labelenum.core.enums.label_enum import LabelEnum, create_enum
from labelenum.utils.errors.exceptions import (
    ConstructionError,
    DuplicateLabelError,
    EmptyLabelSetError,
    ImmutableEnumError,
    InvalidLabelError,
    InvalidValueError,
    LabelAccessWarning,
    LabelEnumError,
    ReservedLabelError,
)
from labelenum.utils.logging.warnings import catch_warnings

__all__ = [
    "ConstructionError",
    "DuplicateLabelError",
    "EmptyLabelSetError",
    "ImmutableEnumError",
    "InvalidLabelError",
    "InvalidValueError",
    "LabelAccessWarning",
    "LabelEnum",
    "LabelEnumError",
    "ReservedLabelError",
    "catch_warnings",
    "create_enum",
]
