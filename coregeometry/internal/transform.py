from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np


def _identity() -> np.ndarray:
    return np.identity(3, dtype=np.float64)


@dataclass(frozen=True, eq=False)
class AffineTransform:
    """2D affine transform stored as a 3x3 matrix acting on column vectors.

    ``translated_by`` and ``rotated_by`` prepend the new operation, so it is
    applied to points before the existing ones, i.e.
    ``translation(c).rotated_by(a).translated_by(-c)`` rotates around ``c``.
    """

    matrix: np.ndarray = field(default_factory=_identity)

    @staticmethod
    def identity() -> AffineTransform:
        return AffineTransform()

    @staticmethod
    def translation(tx: float, ty: float) -> AffineTransform:
        matrix = _identity()
        matrix[0, 2] = tx
        matrix[1, 2] = ty
        return AffineTransform(matrix)

    @staticmethod
    def rotation(angle: float) -> AffineTransform:
        c, s = np.cos(angle), np.sin(angle)
        matrix = _identity()
        matrix[:2, :2] = ((c, -s), (s, c))
        return AffineTransform(matrix)

    @staticmethod
    def rotation_about(pivot_x: float, pivot_y: float, angle: float) -> AffineTransform:
        return (
            AffineTransform.translation(pivot_x, pivot_y)
            .rotated_by(angle)
            .translated_by(-pivot_x, -pivot_y)
        )

    def concatenating(self, other: AffineTransform) -> AffineTransform:
        """Transform applying ``other`` first, then ``self``."""
        return AffineTransform(self.matrix @ other.matrix)

    def translated_by(self, tx: float, ty: float) -> AffineTransform:
        return self.concatenating(AffineTransform.translation(tx, ty))

    def rotated_by(self, angle: float) -> AffineTransform:
        return self.concatenating(AffineTransform.rotation(angle))

    def apply(self, points: np.ndarray) -> np.ndarray:
        """Map an (n, 2) array of points."""
        points = np.asarray(points, dtype=np.float64).reshape(-1, 2)
        homogeneous = np.hstack((points, np.ones((points.shape[0], 1))))
        # Non-finite coordinates map to inf/nan without warnings.
        with np.errstate(invalid="ignore", over="ignore"):
            return (homogeneous @ self.matrix.T)[:, :2]
