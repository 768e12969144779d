from __future__ import annotations

from dataclasses import dataclass

from coregeometry.internal.bicomponent import ieee_divide
from coregeometry.internal.enums import Orientation


@dataclass
class Ratio:
    """Aspect ratio ``a:b``, e.g. ``Ratio(16, 9)``."""

    a: float
    b: float

    @property
    def factor(self) -> float:
        return ieee_divide(self.a, self.b)

    @property
    def orientation(self) -> Orientation:
        return Orientation.of_factor(self.factor)

    def inverted(self) -> Ratio:
        return Ratio(self.b, self.a)

    def invert(self) -> None:
        self.a, self.b = self.b, self.a
