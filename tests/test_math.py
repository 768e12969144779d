import math
import warnings

import pytest

from coregeometry.internal.context import GeometryContext
from coregeometry.internal.enums import LayoutDirection
from coregeometry.internal.math import Point, Size, UnitPoint, Vector


@pytest.fixture
def flipped():
    return GeometryContext(flipped=True)


class TestPoint:

    def test_form_vector(self):
        assert Point(1, 1).form_vector(Point(4, 5)) == Vector(3, 4)

    def test_translated_accepts_vector_pair_or_components(self):
        p = Point(1, 1)
        assert p.translated(Vector(1, 2)) == Point(2, 3)
        assert p.translated((1, 2)) == Point(2, 3)
        assert p.translated(1, 2) == Point(2, 3)
        assert p == Point(1, 1)

    def test_translate_in_place(self):
        p = Point(1, 1)
        p.translate(-1, 4)
        assert p == Point(0, 5)

    def test_rotated_quarter_turn(self):
        p = Point(1, 0).rotated(Point(0, 0), math.pi / 2)
        assert tuple(p) == pytest.approx((0, 1), abs=1e-12)

    def test_rotated_around_pivot(self):
        p = Point(2, 1).rotated((1, 1), math.pi)
        assert tuple(p) == pytest.approx((0, 1), abs=1e-12)

    def test_rotate_in_place(self):
        p = Point(0, 2)
        p.rotate((0, 0), -math.pi / 2)
        assert tuple(p) == pytest.approx((2, 0), abs=1e-12)

    def test_aligned_to_integers(self):
        assert Point(0.7, 1.3).aligned() == Point(1, 1)

    def test_aligned_with_step(self):
        assert Point(0.7, 1.3).aligned(0.5) == Point(0.5, 1.5)

    def test_aligned_halves_go_away_from_zero(self):
        assert Point(-2.5, 2.5).aligned() == Point(-3, 3)

    def test_aligned_with_zero_step_is_nan_without_warnings(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            result = Point(1, 2).aligned(0)
        assert math.isnan(result.x)
        assert math.isnan(result.y)

    def test_distance_from(self):
        assert Point(0, 0).distance_from(Point(3, 4)) == 5


class TestVector:

    def test_magnitude(self):
        v = Vector(3, 4)
        assert v.magnitude == 5
        assert v.squared_magnitude == 25

    def test_direction(self):
        assert Vector(0, 1).direction == pytest.approx(math.pi / 2)
        assert Vector(-1, 0).direction == pytest.approx(math.pi)

    def test_reversed_and_reverse(self):
        v = Vector(1, -2)
        assert v.reversed() == Vector(-1, 2)
        v.reverse()
        assert v == Vector(-1, 2)

    def test_projections(self):
        v = Vector(3, 4)
        assert v.horizontal_component == Vector(3, 0)
        assert v.vertical_component == Vector(0, 4)

    def test_normalized(self):
        assert Vector(3, 4).normalized().is_approximately_equal(Vector(0.6, 0.8))
        assert Vector(0, 0).normalized() == Vector(0, 0)

    def test_dot(self):
        assert Vector(1, 2).dot(Vector(3, 4)) == 11
        assert Vector(1, 0).dot((0, 5)) == 0


class TestSize:

    def test_square(self):
        assert Size.square(3) == Size(3, 3)

    def test_projections(self):
        s = Size(2, 5)
        assert s.horizontal_component == Size(2, 0)
        assert s.vertical_component == Size(0, 5)

    def test_axis_constructors(self):
        assert Size.horizontal(4) == Size(4, 0)
        assert Size.vertical(4) == Size(0, 4)


class TestUnitPoint:

    def test_presets(self):
        assert UnitPoint.center() == UnitPoint(0.5, 0.5)
        assert UnitPoint.top_leading() == UnitPoint(0, 0)
        assert UnitPoint.bottom_trailing() == UnitPoint(1, 1)
        assert UnitPoint.top() == UnitPoint(0.5, 0)
        assert UnitPoint.trailing() == UnitPoint(1, 0.5)

    def test_flipped(self):
        u = UnitPoint(0.25, 0.75)
        assert u.flipped(x=True) == UnitPoint(0.75, 0.75)
        assert u.flipped(y=True) == UnitPoint(0.25, 0.25)
        assert u.flipped() == u

    def test_resolved_default_context_flips_y(self):
        assert UnitPoint.top_leading().resolved() == UnitPoint(0, 1)

    def test_resolved_flipped_context_is_identity(self, flipped):
        assert UnitPoint.top_leading().resolved(flipped) == UnitPoint(0, 0)
        assert UnitPoint(0.2, 0.3).resolved(flipped) == UnitPoint(0.2, 0.3)

    def test_resolved_right_to_left(self, flipped):
        rtl = flipped.with_layout_direction(LayoutDirection.RIGHT_TO_LEFT)
        assert UnitPoint.top_leading().resolved(rtl) == UnitPoint(1, 0)
        unflipped_rtl = rtl.with_flipped(False)
        assert UnitPoint.top_leading().resolved(unflipped_rtl) == UnitPoint(1, 1)

    def test_center_is_fixed_under_every_context(self, flipped):
        rtl = GeometryContext(layout_direction=LayoutDirection.RIGHT_TO_LEFT)
        for context in (GeometryContext(), flipped, rtl):
            assert UnitPoint.center().resolved(context) == UnitPoint.center()
