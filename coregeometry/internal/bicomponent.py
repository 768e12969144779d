from __future__ import annotations

from abc import ABC, abstractmethod
from numbers import Real
from typing import Callable, Iterator, Optional, Sequence, Tuple, TypeVar, Union

import numpy as np

B = TypeVar("B", bound="BiComponent")

Operand = Union["BiComponent", Sequence[float], np.ndarray, float, int]

_RELATIVE_TOLERANCE = np.sqrt(np.finfo(np.float64).eps)
_ABSOLUTE_TOLERANCE = _RELATIVE_TOLERANCE * np.finfo(np.float64).tiny


def ieee_divide(numerator: float, denominator: float) -> float:
    """Float division yielding inf/nan for a zero denominator instead of raising."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.divide(np.float64(numerator), np.float64(denominator)))


def as_xy(point, maybe_y=None) -> Tuple[float, float]:
    if maybe_y is not None:
        return float(point), float(maybe_y)
    if isinstance(point, BiComponent):
        x, y = point.simd2
        return float(x), float(y)
    if isinstance(point, (tuple, list, np.ndarray)) and len(point) == 2:
        return float(point[0]), float(point[1])
    raise TypeError("Expected a two-component value or (x, y) pair")


def _as_operand(value) -> Optional[np.ndarray]:
    if isinstance(value, BiComponent):
        return value.simd2
    if isinstance(value, np.ndarray):
        if value.shape == (2,):
            return value.astype(np.float64)
        if value.shape == ():
            return np.float64(value)
        return None
    if isinstance(value, (tuple, list)):
        if len(value) != 2 or not all(isinstance(v, Real) for v in value):
            return None
        return np.array(value, dtype=np.float64)
    if isinstance(value, Real):
        return np.float64(value)
    return None


class BiComponent(ABC):
    """A geometric value fully described by two scalar axes.

    Subclasses expose their components as a float64 pair through ``simd2``
    and rebuild themselves from one with ``from_simd2``. Everything else
    (arithmetic, clamping, equality, approximate equality) is derived here.

    Operands may be any other two-component value, a raw ``(a, b)`` pair or
    a scalar which is broadcast to both components. Results keep the type
    of the left operand.
    """

    # Keep numpy from broadcasting over us so reflected operators run.
    __array_ufunc__ = None

    @property
    @abstractmethod
    def simd2(self) -> np.ndarray:
        """The components as a float64 array of shape (2,)."""

    @simd2.setter
    @abstractmethod
    def simd2(self, value: np.ndarray) -> None:
        ...

    @classmethod
    @abstractmethod
    def from_simd2(cls: type[B], simd2: np.ndarray) -> B:
        ...

    @classmethod
    def from_pair(cls: type[B], components: Sequence[float]) -> B:
        a, b = components
        return cls.from_simd2(np.array((a, b), dtype=np.float64))

    @classmethod
    def vertical(cls: type[B], value: float) -> B:
        return cls.from_simd2(np.array((0.0, value), dtype=np.float64))

    @classmethod
    def horizontal(cls: type[B], value: float) -> B:
        return cls.from_simd2(np.array((value, 0.0), dtype=np.float64))

    @classmethod
    def zero(cls: type[B]) -> B:
        return cls.from_simd2(np.zeros(2, dtype=np.float64))

    def copy(self: B) -> B:
        return type(self).from_simd2(self.simd2)

    def __iter__(self) -> Iterator[float]:
        return iter(self.simd2.tolist())

    def _apply(
        self: B,
        other: Operand,
        op: Callable[[np.ndarray, np.ndarray], np.ndarray],
        reflected: bool = False,
    ):
        rhs = _as_operand(other)
        if rhs is None:
            return NotImplemented
        lhs = self.simd2
        if reflected:
            lhs, rhs = rhs, lhs
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            return type(self).from_simd2(op(lhs, rhs))

    def __add__(self: B, other: Operand) -> B:
        return self._apply(other, np.add)

    def __radd__(self: B, other: Operand) -> B:
        return self._apply(other, np.add, reflected=True)

    def __sub__(self: B, other: Operand) -> B:
        return self._apply(other, np.subtract)

    def __rsub__(self: B, other: Operand) -> B:
        return self._apply(other, np.subtract, reflected=True)

    def __mul__(self: B, other: Operand) -> B:
        return self._apply(other, np.multiply)

    def __rmul__(self: B, other: Operand) -> B:
        return self._apply(other, np.multiply, reflected=True)

    def __truediv__(self: B, other: Operand) -> B:
        # Zero components divide to inf/nan like plain IEEE floats.
        return self._apply(other, np.divide)

    def __rtruediv__(self: B, other: Operand) -> B:
        return self._apply(other, np.divide, reflected=True)

    def __neg__(self: B) -> B:
        return type(self).from_simd2(-self.simd2)

    def __pos__(self: B) -> B:
        return self.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BiComponent):
            return NotImplemented
        return bool(np.array_equal(self.simd2, other.simd2))

    def clamped(self: B, lower_bound: Operand, upper_bound: Operand) -> B:
        """Component-wise clamp; bounds may be of any two-component type."""
        lower = _as_operand(lower_bound)
        upper = _as_operand(upper_bound)
        if lower is None or upper is None:
            raise TypeError("Clamp bounds must be two-component values, pairs or scalars")
        return type(self).from_simd2(np.minimum(np.maximum(self.simd2, lower), upper))

    def clamp(self, lower_bound: Operand, upper_bound: Operand) -> None:
        self.simd2 = self.clamped(lower_bound, upper_bound).simd2

    def is_approximately_equal(self, other: Operand) -> bool:
        """Compare within a relative tolerance of sqrt(eps), floored near zero.

        Any non-finite difference fails the comparison unless the two values
        are exactly equal.
        """
        rhs = _as_operand(other)
        if rhs is None:
            raise TypeError("Expected a two-component value or (x, y) pair")
        lhs = self.simd2
        rhs = np.broadcast_to(rhs, (2,))
        if np.array_equal(lhs, rhs):
            return True

        with np.errstate(invalid="ignore", over="ignore"):
            delta = np.abs(lhs - rhs)
            scale = np.maximum(np.abs(lhs), np.abs(rhs))
            bound = np.maximum(_ABSOLUTE_TOLERANCE, scale * _RELATIVE_TOLERANCE)
        if not np.all(np.isfinite(delta)):
            return False
        return bool(np.all(delta <= bound))
