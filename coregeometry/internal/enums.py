from __future__ import annotations

from enum import Enum


class Orientation(Enum):
    SQUARE = "square"
    LANDSCAPE = "landscape"
    PORTRAIT = "portrait"

    @classmethod
    def of_factor(cls, factor: float) -> Orientation:
        """Classify a width/height factor; exact comparison against 1.0.

        A NaN factor (0/0) falls through both comparisons and reads as square.
        """
        if factor < 1.0:
            return cls.PORTRAIT
        if factor > 1.0:
            return cls.LANDSCAPE
        return cls.SQUARE


class AxisAlignment(Enum):
    """Per-axis constraint used when aligning a rect against another one."""

    NONE = "none"
    CENTER = "center"
    MIN = "min"
    MAX = "max"


class RectBoundary(Enum):
    MIN = "min"
    MID = "mid"
    MAX = "max"


class LayoutDirection(Enum):
    LEFT_TO_RIGHT = "ltr"
    RIGHT_TO_LEFT = "rtl"
