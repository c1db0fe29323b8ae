"""Immutable quantity-plus-identity value objects.

A :class:`Count` pairs a counted value with a numeric quantity.  The quantity is
guarded by a validator predicate; every construction and every transformation
re-runs it, so an invalid count can never exist.  Transformations return new
instances and leave the original untouched.

Examples:
    >>> atlas = create_int_count("Atlas", 2, IntCountOptions(min=0))
    >>> atlas.add(3).count
    5
    >>> atlas.count
    2
    >>> atlas.set(-1)
    Traceback (most recent call last):
    ...
    btechaid.domain.count.CountRangeError: Invalid count -1 for Atlas
"""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from typing import Any, Generic, TypeVar

T = TypeVar("T")

MAX_SAFE_INTEGER = 2**53 - 1
MIN_SAFE_INTEGER = -MAX_SAFE_INTEGER


class CountRangeError(ValueError):
    """Raised when a quantity fails the active count validator."""


def _accept_any(_count: float) -> bool:
    return True


def is_safe_integer(candidate: object) -> bool:
    """Return True for integers representable exactly as a double.

    Integral floats count as integers; ``bool``, infinities, NaN and fractions do not.
    """

    if isinstance(candidate, bool):
        return False
    if isinstance(candidate, int):
        return MIN_SAFE_INTEGER <= candidate <= MAX_SAFE_INTEGER
    if isinstance(candidate, float):
        return (
            math.isfinite(candidate)
            and candidate.is_integer()
            and MIN_SAFE_INTEGER <= candidate <= MAX_SAFE_INTEGER
        )
    return False


@dataclass(frozen=True, slots=True)
class Count(Generic[T]):
    """A counted value.

    Attributes:
        value: The identity being counted.
        count: The quantity.
        stringifier: Renders ``value`` for ``str(count)``.
        validator: Predicate every quantity must satisfy.
    """

    value: T
    count: float = 1
    stringifier: Callable[[T], str] = field(default=str, compare=False, repr=False)
    validator: Callable[[float], bool] = field(default=_accept_any, compare=False, repr=False)

    def __post_init__(self) -> None:
        if not self._accepts(self.count):
            raise CountRangeError(f"Invalid count {self.count!r} for {self}")

    def _accepts(self, candidate: float) -> bool:
        return bool(self.validator(candidate))

    def add(self, delta: float) -> Count[T]:
        """Return a new count with ``delta`` added to the quantity."""
        return self.set(self.count + delta)

    def set(self, new_count: float) -> Count[T]:
        """Return a new count with the same value and ``new_count`` as quantity."""
        return replace(self, count=new_count)

    def value_of(self) -> float:
        return self.count

    def __str__(self) -> str:
        return self.stringifier(self.value)

    def __int__(self) -> int:
        return int(self.count)

    def __float__(self) -> float:
        return float(self.count)

    def __lt__(self, other: Any) -> bool:
        return self.count < _quantity(other)

    def __le__(self, other: Any) -> bool:
        return self.count <= _quantity(other)

    def __gt__(self, other: Any) -> bool:
        return self.count > _quantity(other)

    def __ge__(self, other: Any) -> bool:
        return self.count >= _quantity(other)


def _quantity(other: Any) -> float:
    if isinstance(other, Count):
        return other.count
    return other


@dataclass(frozen=True, slots=True)
class IntCount(Count[T]):
    """A count restricted to safe integers within ``[minimum, maximum]``.

    The custom ``validator`` still applies on top of the integer and range checks.
    """

    minimum: int = MIN_SAFE_INTEGER
    maximum: int = MAX_SAFE_INTEGER

    def __post_init__(self) -> None:
        if is_safe_integer(self.count) and isinstance(self.count, float):
            object.__setattr__(self, "count", int(self.count))
        Count.__post_init__(self)

    def _accepts(self, candidate: float) -> bool:
        return (
            is_safe_integer(candidate)
            and self.minimum <= candidate <= self.maximum
            and bool(self.validator(candidate))
        )


@dataclass(frozen=True, slots=True)
class IntCountOptions(Generic[T]):
    """Options of :func:`create_int_count`.

    ``min`` and ``max`` default to the full safe-integer range.
    """

    stringifier: Callable[[T], str] | None = None
    validator: Callable[[float], bool] | None = None
    min: int | None = None
    max: int | None = None


def create_count(
    value: T,
    count: float = 1,
    stringifier: Callable[[T], str] | None = None,
    validator: Callable[[float], bool] | None = None,
) -> Count[T]:
    """Create a count, raising :class:`CountRangeError` if ``validator(count)`` fails."""

    return Count(
        value,
        count,
        stringifier=stringifier or str,
        validator=validator or _accept_any,
    )


def create_int_count(
    value: T,
    count: float = 1,
    options: IntCountOptions[T] | None = None,
) -> IntCount[T]:
    """Create an integer count with optional range and custom validation."""

    options = options or IntCountOptions()
    return IntCount(
        value,
        count,
        stringifier=options.stringifier or str,
        validator=options.validator or _accept_any,
        minimum=MIN_SAFE_INTEGER if options.min is None else options.min,
        maximum=MAX_SAFE_INTEGER if options.max is None else options.max,
    )
