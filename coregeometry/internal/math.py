from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from coregeometry.internal.bicomponent import BiComponent, as_xy
from coregeometry.internal.context import DEFAULT_CONTEXT, GeometryContext
from coregeometry.internal.transform import AffineTransform


@dataclass(eq=False)
class Point(BiComponent):
    x: float = 0.0
    y: float = 0.0

    @property
    def simd2(self) -> np.ndarray:
        return np.array((self.x, self.y), dtype=np.float64)

    @simd2.setter
    def simd2(self, value: np.ndarray) -> None:
        self.x, self.y = float(value[0]), float(value[1])

    @classmethod
    def from_simd2(cls, simd2: np.ndarray) -> Point:
        return cls(float(simd2[0]), float(simd2[1]))

    def form_vector(self, other) -> Vector:
        """The vector going from ``self`` to ``other``."""
        x, y = as_xy(other)
        return Vector(x - self.x, y - self.y)

    def translated(self, vector, ty: float = None) -> Point:
        dx, dy = as_xy(vector, ty)
        return Point(self.x + dx, self.y + dy)

    def translate(self, vector, ty: float = None) -> None:
        self.simd2 = self.translated(vector, ty).simd2

    def rotated(self, relative_to, angle: float) -> Point:
        """Rotate around ``relative_to`` by ``angle`` radians.

        Counter-clockwise when y grows upwards, clockwise in flipped spaces.
        """
        cx, cy = as_xy(relative_to)
        transform = AffineTransform.rotation_about(cx, cy, angle)
        return Point.from_simd2(transform.apply(self.simd2)[0])

    def rotate(self, relative_to, angle: float) -> None:
        self.simd2 = self.rotated(relative_to, angle).simd2

    def aligned(self, step: float = 1.0) -> Point:
        """Snap both components to the nearest multiple of ``step``.

        Halves round away from zero.
        """
        with np.errstate(divide="ignore", invalid="ignore"):
            values = self.simd2 / step
            snapped = np.sign(values) * np.floor(np.abs(values) + 0.5)
            return Point.from_simd2(snapped * step)

    def distance_from(self, other) -> float:
        return self.form_vector(other).magnitude


@dataclass(eq=False)
class Vector(BiComponent):
    dx: float = 0.0
    dy: float = 0.0

    @property
    def simd2(self) -> np.ndarray:
        return np.array((self.dx, self.dy), dtype=np.float64)

    @simd2.setter
    def simd2(self, value: np.ndarray) -> None:
        self.dx, self.dy = float(value[0]), float(value[1])

    @classmethod
    def from_simd2(cls, simd2: np.ndarray) -> Vector:
        return cls(float(simd2[0]), float(simd2[1]))

    @property
    def magnitude(self) -> float:
        return float(np.hypot(self.dx, self.dy))

    @property
    def squared_magnitude(self) -> float:
        return self.dx**2 + self.dy**2

    @property
    def direction(self) -> float:
        return float(np.arctan2(self.dy, self.dx))

    @property
    def horizontal_component(self) -> Vector:
        return Vector(self.dx, 0.0)

    @property
    def vertical_component(self) -> Vector:
        return Vector(0.0, self.dy)

    def reversed(self) -> Vector:
        return -self

    def reverse(self) -> None:
        self.simd2 = -self.simd2

    def dot(self, other) -> float:
        dx, dy = as_xy(other)
        return self.dx * dx + self.dy * dy

    def normalized(self) -> Vector:
        mag = self.magnitude
        if mag == 0:
            return Vector(0.0, 0.0)
        return Vector(self.dx / mag, self.dy / mag)


@dataclass(eq=False)
class Size(BiComponent):
    width: float = 0.0
    height: float = 0.0

    @property
    def simd2(self) -> np.ndarray:
        return np.array((self.width, self.height), dtype=np.float64)

    @simd2.setter
    def simd2(self, value: np.ndarray) -> None:
        self.width, self.height = float(value[0]), float(value[1])

    @classmethod
    def from_simd2(cls, simd2: np.ndarray) -> Size:
        return cls(float(simd2[0]), float(simd2[1]))

    @staticmethod
    def square(amount: float) -> Size:
        return Size(amount, amount)

    @property
    def horizontal_component(self) -> Size:
        return Size(self.width, 0.0)

    @property
    def vertical_component(self) -> Size:
        return Size(0.0, self.height)


@dataclass(eq=False)
class UnitPoint(BiComponent):
    """A position relative to a rect, (0, 0) top-leading to (1, 1) bottom-trailing."""

    x: float = 0.0
    y: float = 0.0

    @property
    def simd2(self) -> np.ndarray:
        return np.array((self.x, self.y), dtype=np.float64)

    @simd2.setter
    def simd2(self, value: np.ndarray) -> None:
        self.x, self.y = float(value[0]), float(value[1])

    @classmethod
    def from_simd2(cls, simd2: np.ndarray) -> UnitPoint:
        return cls(float(simd2[0]), float(simd2[1]))

    @staticmethod
    def center() -> UnitPoint:
        return UnitPoint(0.5, 0.5)

    @staticmethod
    def leading() -> UnitPoint:
        return UnitPoint(0.0, 0.5)

    @staticmethod
    def trailing() -> UnitPoint:
        return UnitPoint(1.0, 0.5)

    @staticmethod
    def top() -> UnitPoint:
        return UnitPoint(0.5, 0.0)

    @staticmethod
    def bottom() -> UnitPoint:
        return UnitPoint(0.5, 1.0)

    @staticmethod
    def top_leading() -> UnitPoint:
        return UnitPoint(0.0, 0.0)

    @staticmethod
    def top_trailing() -> UnitPoint:
        return UnitPoint(1.0, 0.0)

    @staticmethod
    def bottom_leading() -> UnitPoint:
        return UnitPoint(0.0, 1.0)

    @staticmethod
    def bottom_trailing() -> UnitPoint:
        return UnitPoint(1.0, 1.0)

    def flipped(self, x: bool = False, y: bool = False) -> UnitPoint:
        return UnitPoint(
            1.0 - self.x if x else self.x,
            1.0 - self.y if y else self.y,
        )

    def resolved(self, context: GeometryContext = DEFAULT_CONTEXT) -> UnitPoint:
        """Map onto min/max rect coordinates for the given host context.

        Leading is max-x under right-to-left layout, and top is max-y unless
        the coordinate system is flipped.
        """
        flip_x = context.is_right_to_left
        flip_y = not context.flipped
        if not (flip_x or flip_y):
            return self.copy()
        return self.flipped(x=flip_x, y=flip_y)
