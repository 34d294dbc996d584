"""Immutable string enumerations built from an ordered list of labels."""

from __future__ import annotations

import operator
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Generic, TypeGuard, TypeVar

import numpy as np

from labelenum.core.enums.label_rules import is_attribute_accessible, validate_labels
from labelenum.utils.errors.exceptions import (
    ImmutableEnumError,
    InvalidValueError,
    LabelAccessWarning,
)
from labelenum.utils.logging.logger import get_logger
from labelenum.utils.logging.warnings import warn
from labelenum.utils.representation.summary import Summarizable

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

logger = get_logger(name="enums")

T = TypeVar("T", bound=str)

RandomSource = np.random.Generator | int | None


class LabelEnum(Summarizable, Generic[T]):
    """
    Immutable, queryable set of string labels.

    Description:
        Every label `L` is exposed as an attribute whose value is `L` itself
        (`Status.pending == "pending"`), and the full ordered label tuple is
        available as :attr:`values`. Labels that are not valid identifiers
        remain reachable through item access (`Status["in-progress"]`).

        Instances cannot be modified after construction: setting or deleting
        any attribute raises :class:`ImmutableEnumError`.

    Attributes:
        values (tuple[T, ...]): Labels in construction order.

    Example:
        ```python
        Status: LabelEnum[Literal["pending", "active"]] = create_enum(
            ["pending", "active"]
        )
        Status.pending  # "pending"
        Status.assert_(payload["status"])
        ```

    """

    __slots__ = ("_labels", "_positions", "_rng")

    def __init__(self, labels: Iterable[T], *, rng: RandomSource = None):
        """
        Validate `labels` and build the enum.

        Args:
            labels (Iterable[T]):
                Ordered, unique, non-empty string labels.
            rng (np.random.Generator | int | None):
                Random source used by :meth:`random`. An int is used as a seed;
                None creates a freshly seeded generator.

        Raises:
            ConstructionError:
                If `labels` is empty, contains a non-string or empty string,
                contains duplicates, or uses a reserved attribute name.

        """
        values = validate_labels(labels, reserved=_RESERVED_NAMES)
        object.__setattr__(self, "_labels", values)
        object.__setattr__(
            self,
            "_positions",
            MappingProxyType({label: i for i, label in enumerate(values)}),
        )
        object.__setattr__(self, "_rng", np.random.default_rng(rng))

    # ================================================
    # Label access
    # ================================================
    @property
    def values(self) -> tuple[T, ...]:
        """Labels in construction order."""
        return self._labels

    def __getattr__(self, name: str) -> T:
        # Only reached when normal lookup fails, so operations always win.
        try:
            positions = object.__getattribute__(self, "_positions")
        except AttributeError:
            positions = {}
        if name in positions:
            return name
        msg = f"'{type(self).__name__}' has no label or attribute '{name}'"
        raise AttributeError(msg)

    def __getitem__(self, label: Any) -> T:
        return self.assert_(label)

    def __dir__(self) -> list[str]:
        names = set(super().__dir__())
        names.update(label for label in self._labels if is_attribute_accessible(label))
        return sorted(names)

    # ================================================
    # Validation
    # ================================================
    def is_(self, value: Any) -> TypeGuard[T]:
        """
        Check whether `value` is one of this enum's labels.

        Args:
            value (Any): Untrusted input of any type.

        Returns:
            bool: True only if `value` is a string equal to a label.

        """
        return isinstance(value, str) and value in self._positions

    def assert_(self, value: Any) -> T:
        """
        Return `value` if it is a label of this enum.

        Args:
            value (Any): Untrusted input of any type.

        Returns:
            T: `value`, narrowed to the label type.

        Raises:
            InvalidValueError:
                If `value` is not a string or not one of :attr:`values`.

        """
        if self.is_(value):
            return value
        raise InvalidValueError(value=value, valid=self._labels)

    # ================================================
    # Positional access
    # ================================================
    def random(self, rng: RandomSource = None) -> T:
        """
        Return a label drawn uniformly at random.

        Args:
            rng (np.random.Generator | int | None):
                Random source for this draw only. Defaults to the generator
                given at construction.

        Returns:
            T: One of :attr:`values`.

        """
        gen = self._rng if rng is None else np.random.default_rng(rng)
        return self._labels[int(gen.integers(len(self._labels)))]

    def index_of(self, value: Any) -> int:
        """Return the position of `value` in :attr:`values`, or -1 if absent."""
        if not self.is_(value):
            return -1
        return self._positions[value]

    def at(self, index: int) -> T | None:
        """
        Return the label at `index`, counting from the end when negative.

        Args:
            index (int): Position in `[-len(values), len(values) - 1]`.

        Returns:
            T | None: The label, or None when `index` is out of range.

        Raises:
            TypeError: If `index` is not an integer.

        """
        if isinstance(index, bool):
            msg = f"Enum index must be an integer, not {type(index).__name__}."
            raise TypeError(msg)
        i = operator.index(index)
        n = len(self._labels)
        if -n <= i < n:
            return self._labels[i]
        return None

    # ================================================
    # Container protocol
    # ================================================
    def __contains__(self, value: object) -> bool:
        return self.is_(value)

    def __iter__(self) -> Iterator[T]:
        return iter(self._labels)

    def __len__(self) -> int:
        return len(self._labels)

    # ================================================
    # Immutability
    # ================================================
    def __setattr__(self, name: str, value: Any) -> None:
        raise ImmutableEnumError(name=name)

    def __delattr__(self, name: str) -> None:
        raise ImmutableEnumError(name=name)

    def __reduce__(self):
        return (self.__class__, (self._labels,))

    # ================================================
    # Representation
    # ================================================
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LabelEnum):
            return NotImplemented
        return self._labels == other._labels

    def __hash__(self) -> int:
        return hash((LabelEnum, self._labels))

    def __repr__(self) -> str:
        return f"LabelEnum({', '.join(repr(label) for label in self._labels)})"

    def _summary_rows(self) -> list[tuple]:
        return [
            ("n_labels", str(len(self._labels))),
            ("labels", [(str(i), label) for i, label in enumerate(self._labels)]),
        ]


# Labels may not shadow anything defined on the class itself.
_RESERVED_NAMES: frozenset[str] = frozenset(dir(LabelEnum))


def create_enum(labels: Iterable[T], *, rng: RandomSource = None) -> LabelEnum[T]:
    """
    Build a :class:`LabelEnum` from an ordered sequence of unique labels.

    Description:
        Validates `labels` (non-empty, all non-empty strings, no duplicates,
        no names reserved by :class:`LabelEnum`) and returns an immutable
        enum over them. Labels that cannot be written with attribute syntax
        are accepted, and a :class:`LabelAccessWarning` is emitted naming them.

    Args:
        labels (Iterable[T]):
            Ordered labels, e.g. `["pending", "active", "archived"]`.
        rng (np.random.Generator | int | None):
            Random source used by :meth:`LabelEnum.random`.

    Returns:
        LabelEnum[T]: The constructed enum.

    Raises:
        EmptyLabelSetError: If `labels` is empty.
        InvalidLabelError: If a label is not a non-empty string.
        DuplicateLabelError: If a label occurs more than once.
        ReservedLabelError: If a label collides with a LabelEnum attribute.

    """
    enum = LabelEnum(labels, rng=rng)

    hidden = [label for label in enum.values if not is_attribute_accessible(label)]
    if hidden:
        warn(
            f"Labels not accessible as attributes: {', '.join(map(repr, hidden))}",
            category=LabelAccessWarning,
            hints=f"Use item access instead, e.g. `enum[{hidden[0]!r}]`.",
            stacklevel=2,
        )

    logger.debug(msg=f"Created LabelEnum with {len(enum)} labels.", stacklevel=2)
    return enum
