from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union

import numpy as np

from coregeometry.internal.bicomponent import as_xy, ieee_divide
from coregeometry.internal.context import DEFAULT_CONTEXT, GeometryContext
from coregeometry.internal.edges import RectangleEdge
from coregeometry.internal.enums import AxisAlignment, Orientation, RectBoundary
from coregeometry.internal.math import Point, Size, UnitPoint
from coregeometry.internal.transform import AffineTransform
from coregeometry.shapes.ratio import Ratio

BoundaryPair = Tuple[RectBoundary, RectBoundary]


@dataclass
class Rect:
    """Axis-aligned rectangle given by its origin and a (possibly negative) size.

    Derived points (center, corners, edge centers, boundary pairs, anchors)
    are read/write: assigning one moves the whole rect so that point lands on
    the new value. The size is never changed by these setters.

    Pure transforms return a new rect (``translated``, ``centered_at``,
    ``insetting``...); each has an in-place twin (``translate``,
    ``center_at``, ``inset``...) replacing ``self`` with that result.
    """

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @staticmethod
    def zero() -> Rect:
        return Rect(0.0, 0.0, 0.0, 0.0)

    @staticmethod
    def null() -> Rect:
        return Rect(np.inf, np.inf, 0.0, 0.0)

    @staticmethod
    def infinite() -> Rect:
        return Rect(-np.inf, -np.inf, np.inf, np.inf)

    @staticmethod
    def from_origin(origin, size) -> Rect:
        x, y = as_xy(origin)
        width, height = as_xy(size)
        return Rect(x, y, width, height)

    @staticmethod
    def from_size(size) -> Rect:
        return Rect.from_origin((0.0, 0.0), size)

    @staticmethod
    def from_center(center, size) -> Rect:
        return Rect.from_size(size).centered_at(center)

    @staticmethod
    def from_ratio(ratio: Ratio, max_size: float, center=None) -> Rect:
        """Largest rect of the given ratio fitting in a ``max_size`` square."""
        orientation = ratio.orientation
        if orientation is Orientation.LANDSCAPE:
            size = Size(max_size, max_size / ratio.factor)
        elif orientation is Orientation.PORTRAIT:
            size = Size(max_size * ratio.factor, max_size)
        else:
            size = Size.square(max_size)

        if center is None:
            return Rect.from_size(size)
        return Rect.from_center(center, size)

    def copy(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)

    # Extents

    @property
    def origin(self) -> Point:
        return Point(self.x, self.y)

    @origin.setter
    def origin(self, value) -> None:
        self.x, self.y = as_xy(value)

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    @size.setter
    def size(self, value) -> None:
        self.width, self.height = as_xy(value)

    @property
    def min_x(self) -> float:
        return min(self.x, self.x + self.width)

    @property
    def mid_x(self) -> float:
        return self.x + self.width / 2.0

    @property
    def max_x(self) -> float:
        return max(self.x, self.x + self.width)

    @property
    def min_y(self) -> float:
        return min(self.y, self.y + self.height)

    @property
    def mid_y(self) -> float:
        return self.y + self.height / 2.0

    @property
    def max_y(self) -> float:
        return max(self.y, self.y + self.height)

    @property
    def is_null(self) -> bool:
        return bool(np.isinf(self.x) or np.isinf(self.y)) and not self.is_infinite

    @property
    def is_empty(self) -> bool:
        return self.is_null or self.width == 0 or self.height == 0

    @property
    def is_infinite(self) -> bool:
        return bool(np.isinf(self.width) or np.isinf(self.height))

    # Derived points

    def _move(self, current: Point, target) -> None:
        tx, ty = as_xy(target)
        self.x += tx - current.x
        self.y += ty - current.y

    @property
    def center(self) -> Point:
        return Point(self.mid_x, self.mid_y)

    @center.setter
    def center(self, value) -> None:
        self._move(self.center, value)

    @property
    def min_x_min_y_corner(self) -> Point:
        return Point(self.min_x, self.min_y)

    @min_x_min_y_corner.setter
    def min_x_min_y_corner(self, value) -> None:
        self._move(self.min_x_min_y_corner, value)

    @property
    def min_x_max_y_corner(self) -> Point:
        return Point(self.min_x, self.max_y)

    @min_x_max_y_corner.setter
    def min_x_max_y_corner(self, value) -> None:
        self._move(self.min_x_max_y_corner, value)

    @property
    def max_x_min_y_corner(self) -> Point:
        return Point(self.max_x, self.min_y)

    @max_x_min_y_corner.setter
    def max_x_min_y_corner(self, value) -> None:
        self._move(self.max_x_min_y_corner, value)

    @property
    def max_x_max_y_corner(self) -> Point:
        return Point(self.max_x, self.max_y)

    @max_x_max_y_corner.setter
    def max_x_max_y_corner(self, value) -> None:
        self._move(self.max_x_max_y_corner, value)

    @property
    def min_x_edge_center(self) -> Point:
        return Point(self.min_x, self.mid_y)

    @min_x_edge_center.setter
    def min_x_edge_center(self, value) -> None:
        self._move(self.min_x_edge_center, value)

    @property
    def max_x_edge_center(self) -> Point:
        return Point(self.max_x, self.mid_y)

    @max_x_edge_center.setter
    def max_x_edge_center(self, value) -> None:
        self._move(self.max_x_edge_center, value)

    @property
    def min_y_edge_center(self) -> Point:
        return Point(self.mid_x, self.min_y)

    @min_y_edge_center.setter
    def min_y_edge_center(self, value) -> None:
        self._move(self.min_y_edge_center, value)

    @property
    def max_y_edge_center(self) -> Point:
        return Point(self.mid_x, self.max_y)

    @max_y_edge_center.setter
    def max_y_edge_center(self, value) -> None:
        self._move(self.max_y_edge_center, value)

    def boundary_point(
        self,
        x_bound: RectBoundary = RectBoundary.MID,
        y_bound: RectBoundary = RectBoundary.MID,
    ) -> Point:
        x = {RectBoundary.MIN: self.min_x, RectBoundary.MID: self.mid_x, RectBoundary.MAX: self.max_x}[x_bound]
        y = {RectBoundary.MIN: self.min_y, RectBoundary.MID: self.mid_y, RectBoundary.MAX: self.max_y}[y_bound]
        return Point(x, y)

    def set_boundary_point(self, x_bound: RectBoundary, y_bound: RectBoundary, point) -> None:
        self._move(self.boundary_point(x_bound, y_bound), point)

    def anchor_point(self, anchor: UnitPoint, context: GeometryContext = DEFAULT_CONTEXT) -> Point:
        """Interpolate ``origin + size * anchor`` after resolving the anchor for the host."""
        resolved = anchor.resolved(context)
        return Point.from_simd2(self.origin.simd2 + self.size.simd2 * resolved.simd2)

    def set_anchor_point(self, anchor: UnitPoint, point, context: GeometryContext = DEFAULT_CONTEXT) -> None:
        self._move(self.anchor_point(anchor, context), point)

    @staticmethod
    def _is_boundary_pair(key) -> bool:
        return (
            isinstance(key, tuple)
            and len(key) == 2
            and all(isinstance(bound, RectBoundary) for bound in key)
        )

    def __getitem__(self, key: Union[BoundaryPair, UnitPoint]) -> Point:
        if isinstance(key, UnitPoint):
            return self.anchor_point(key)
        if self._is_boundary_pair(key):
            return self.boundary_point(*key)
        raise TypeError("Expected a (RectBoundary, RectBoundary) pair or a UnitPoint")

    def __setitem__(self, key: Union[BoundaryPair, UnitPoint], value) -> None:
        if isinstance(key, UnitPoint):
            self.set_anchor_point(key, value)
        elif self._is_boundary_pair(key):
            self.set_boundary_point(key[0], key[1], value)
        else:
            raise TypeError("Expected a (RectBoundary, RectBoundary) pair or a UnitPoint")

    # Geometry

    @property
    def ratio(self) -> float:
        return ieee_divide(self.width, self.height)

    @property
    def orientation(self) -> Orientation:
        return Orientation.of_factor(self.ratio)

    @property
    def diagonal(self) -> float:
        return float(np.hypot(self.width, self.height))

    @property
    def max_square(self) -> Rect:
        """The smallest square at the origin containing ``self``'s size."""
        edge = max(self.width, self.height)
        return Rect(0.0, 0.0, edge, edge)

    @property
    def min_square(self) -> Rect:
        """The biggest square at the origin ``self``'s size can contain."""
        edge = min(self.width, self.height)
        return Rect(0.0, 0.0, edge, edge)

    # Centering

    def centered_at(self, point, y: float = None) -> Rect:
        # Empty or infinite sizes would produce a NaN origin.
        if self.is_empty or self.is_infinite:
            return self.copy()
        cx, cy = as_xy(point, y)
        return Rect(cx - self.width / 2.0, cy - self.height / 2.0, self.width, self.height)

    def center_at(self, point, y: float = None) -> None:
        self._assign(self.centered_at(point, y))

    def centered_in(self, rect: Rect) -> Rect:
        return self.centered_at(rect.center)

    def center_in(self, rect: Rect) -> None:
        self._assign(self.centered_in(rect))

    # Alignment

    @staticmethod
    def _aligned_coordinate(
        alignment: AxisAlignment,
        current: float,
        length: float,
        low: float,
        mid: float,
        high: float,
    ) -> float:
        if alignment is AxisAlignment.CENTER:
            return mid - length / 2.0
        if alignment is AxisAlignment.MIN:
            return low
        if alignment is AxisAlignment.MAX:
            return high - length
        return current

    def aligned(
        self,
        relative_to: Rect,
        x_axis: AxisAlignment = AxisAlignment.NONE,
        y_axis: AxisAlignment = AxisAlignment.NONE,
    ) -> Rect:
        x = self._aligned_coordinate(
            x_axis, self.x, self.width, relative_to.min_x, relative_to.mid_x, relative_to.max_x
        )
        y = self._aligned_coordinate(
            y_axis, self.y, self.height, relative_to.min_y, relative_to.mid_y, relative_to.max_y
        )
        return Rect(x, y, self.width, self.height)

    def align(
        self,
        relative_to: Rect,
        x_axis: AxisAlignment = AxisAlignment.NONE,
        y_axis: AxisAlignment = AxisAlignment.NONE,
    ) -> None:
        self._assign(self.aligned(relative_to, x_axis, y_axis))

    def aligning(
        self,
        anchor: UnitPoint,
        to: Rect,
        target_anchor: Optional[UnitPoint] = None,
        context: GeometryContext = DEFAULT_CONTEXT,
    ) -> Rect:
        """Move ``self`` so its ``anchor`` lands on ``to``'s ``target_anchor``.

        ``target_anchor`` defaults to ``anchor``, which aligns matching
        anchors (e.g. both top-leading corners).
        """
        target = to.anchor_point(target_anchor if target_anchor is not None else anchor, context)
        result = self.copy()
        result.set_anchor_point(anchor, target, context)
        return result

    def align_anchor(
        self,
        anchor: UnitPoint,
        to: Rect,
        target_anchor: Optional[UnitPoint] = None,
        context: GeometryContext = DEFAULT_CONTEXT,
    ) -> None:
        self._assign(self.aligning(anchor, to, target_anchor, context))

    def zeroed(self) -> Rect:
        return Rect(0.0, 0.0, self.width, self.height)

    def reset(self) -> None:
        self.x, self.y = 0.0, 0.0

    # Transforms

    def translated(self, vector, ty: float = None) -> Rect:
        dx, dy = as_xy(vector, ty)
        return Rect(self.x + dx, self.y + dy, self.width, self.height)

    def translate(self, vector, ty: float = None) -> None:
        self._assign(self.translated(vector, ty))

    def corners(self) -> np.ndarray:
        return np.array(
            (
                (self.x, self.y),
                (self.x + self.width, self.y),
                (self.x, self.y + self.height),
                (self.x + self.width, self.y + self.height),
            ),
            dtype=np.float64,
        )

    def applying(self, transform: AffineTransform) -> Rect:
        """Bounding box of the four corners mapped through ``transform``.

        Null and infinite rects are returned unchanged.
        """
        if self.is_null or self.is_infinite:
            return self.copy()
        mapped = transform.apply(self.corners())
        low = mapped.min(axis=0)
        high = mapped.max(axis=0)
        return Rect(float(low[0]), float(low[1]), float(high[0] - low[0]), float(high[1] - low[1]))

    def rotated(self, relative_to, angle: float) -> Rect:
        """Rotate the corners around ``relative_to`` by ``angle`` radians and bound them.

        Counter-clockwise when y grows upwards, clockwise in flipped spaces.
        """
        cx, cy = as_xy(relative_to)
        return self.applying(AffineTransform.rotation_about(cx, cy, angle))

    def rotate(self, relative_to, angle: float) -> None:
        self._assign(self.rotated(relative_to, angle))

    def slided(self, relative_to, angle: float) -> Rect:
        """Move the center along its arc around ``relative_to``; the rect keeps its orientation."""
        if self.is_null or self.is_infinite:
            return self.copy()
        return self.centered_at(self.center.rotated(relative_to, angle))

    def slide(self, relative_to, angle: float) -> None:
        self._assign(self.slided(relative_to, angle))

    # Insets

    def insetting(self, edges: RectangleEdge, amount: float) -> Rect:
        """Shrink from each flagged edge by ``amount``; the opposite edges stay put."""
        edges = RectangleEdge.mask_of(edges)
        if not edges:
            return self.copy()

        x, y, width, height = self.x, self.y, self.width, self.height
        if RectangleEdge.MIN_X in edges:
            x += amount
            width -= amount
        if RectangleEdge.MAX_X in edges:
            width -= amount
        if RectangleEdge.MIN_Y in edges:
            y += amount
            height -= amount
        if RectangleEdge.MAX_Y in edges:
            height -= amount
        return Rect(x, y, width, height)

    def inset(self, edges: RectangleEdge, amount: float) -> None:
        self._assign(self.insetting(edges, amount))

    def outsetting(self, edges: RectangleEdge, amount: float) -> Rect:
        return self.insetting(edges, -amount)

    def outset(self, edges: RectangleEdge, amount: float) -> None:
        self._assign(self.outsetting(edges, amount))

    def _assign(self, other: Rect) -> None:
        self.x, self.y, self.width, self.height = other.x, other.y, other.width, other.height

