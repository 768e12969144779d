from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Mapping

from coregeometry.internal.enums import LayoutDirection

log = logging.getLogger(__name__)


class ContextError(ValueError):
    """Raised when a host context description cannot be interpreted."""


@dataclass(frozen=True)
class GeometryContext:
    """Host facts the anchor helpers depend on.

    ``flipped`` tells whether the drawing coordinate system grows downwards
    (top-left origin). Defaults match a host without any UI context:
    left-to-right and not flipped.
    """

    layout_direction: LayoutDirection = LayoutDirection.LEFT_TO_RIGHT
    flipped: bool = False

    _KEYS = ("layout_direction", "flipped")

    @property
    def is_right_to_left(self) -> bool:
        return self.layout_direction is LayoutDirection.RIGHT_TO_LEFT

    def with_flipped(self, flipped: bool = True) -> GeometryContext:
        return replace(self, flipped=bool(flipped))

    def with_layout_direction(self, direction: LayoutDirection | str) -> GeometryContext:
        return replace(self, layout_direction=self._coerce_direction(direction))

    @staticmethod
    def _coerce_direction(value: LayoutDirection | str) -> LayoutDirection:
        if isinstance(value, LayoutDirection):
            return value
        try:
            return LayoutDirection(str(value).lower())
        except ValueError as exc:
            raise ContextError(f"Unknown layout direction '{value}'.") from exc

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> GeometryContext:
        unknown = sorted(set(mapping) - set(cls._KEYS))
        if unknown:
            raise ContextError(f"Unknown context keys: {', '.join(unknown)}")

        direction = cls._coerce_direction(
            mapping.get("layout_direction", LayoutDirection.LEFT_TO_RIGHT)
        )
        flipped = mapping.get("flipped", False)
        if not isinstance(flipped, bool):
            raise ContextError(f"'flipped' must be a bool, got {type(flipped).__name__}")

        context = cls(layout_direction=direction, flipped=flipped)
        log.debug("Geometry context from host mapping: %s", context)
        return context


DEFAULT_CONTEXT = GeometryContext()
