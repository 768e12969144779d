from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np


@dataclass
class EdgeInsets:
    top: float = 0.0
    leading: float = 0.0
    bottom: float = 0.0
    trailing: float = 0.0

    @property
    def horizontal(self) -> np.ndarray:
        """``(leading, trailing)``"""
        return np.array((self.leading, self.trailing), dtype=np.float64)

    @property
    def vertical(self) -> np.ndarray:
        """``(top, bottom)``"""
        return np.array((self.top, self.bottom), dtype=np.float64)

    @property
    def simd4(self) -> np.ndarray:
        """``(top, leading, bottom, trailing)``"""
        return np.array((self.top, self.leading, self.bottom, self.trailing), dtype=np.float64)

    @staticmethod
    def from_simd4(simd4: Sequence[float]) -> EdgeInsets:
        top, leading, bottom, trailing = (float(v) for v in simd4)
        return EdgeInsets(top, leading, bottom, trailing)

    @staticmethod
    def from_axes(horizontal: Sequence[float], vertical: Sequence[float]) -> EdgeInsets:
        leading, trailing = horizontal
        top, bottom = vertical
        return EdgeInsets(float(top), float(leading), float(bottom), float(trailing))

    @staticmethod
    def symmetric(horizontal: float, vertical: float) -> EdgeInsets:
        return EdgeInsets(vertical, horizontal, vertical, horizontal)

    @staticmethod
    def with_horizontal(horizontal: float, top: float, bottom: float) -> EdgeInsets:
        return EdgeInsets(top, horizontal, bottom, horizontal)

    @staticmethod
    def with_vertical(vertical: float, leading: float, trailing: float) -> EdgeInsets:
        return EdgeInsets(vertical, leading, vertical, trailing)

    @staticmethod
    def all(amount: float) -> EdgeInsets:
        return EdgeInsets(amount, amount, amount, amount)
