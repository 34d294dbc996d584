from labelenum.api import (
    ConstructionError,
    DuplicateLabelError,
    EmptyLabelSetError,
    ImmutableEnumError,
    InvalidLabelError,
    InvalidValueError,
    LabelAccessWarning,
    LabelEnum,
    LabelEnumError,
    ReservedLabelError,
    catch_warnings,
    create_enum,
)

__version__ = "0.1.0"
