from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from coregeometry.internal.math import Point


@dataclass
class Slope:
    """Line ``y = m * x + b``."""

    m: float
    b: float

    def y_at(self, x: float) -> float:
        return self.m * x + self.b

    def intersection_point_with(self, other: Slope) -> Optional[Point]:
        # Parallel and coincident lines are not told apart.
        if self.m == other.m:
            return None
        x = (other.b - self.b) / (self.m - other.m)
        return Point(x, self.y_at(x))
