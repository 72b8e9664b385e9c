"""Unit tests for Interval and AABB, including the slab test."""

import math

import pytest

from core.aabb import AABB, MIN_THICKNESS
from core.interval import EMPTY, INFINITY, UNIVERSE, Interval
from core.ray import Ray
from core.utils import RandomSource, random_vector
from core.vector import Vector3


class TestInterval:
    def test_contains_is_inclusive_surrounds_is_exclusive(self):
        i = Interval(0.0, 1.0)
        assert i.contains(0.0) and i.contains(1.0)
        assert not i.surrounds(0.0) and not i.surrounds(1.0)
        assert i.surrounds(0.5)

    def test_clamp(self):
        i = Interval(-1.0, 2.0)
        assert i.clamp(-5.0) == -1.0
        assert i.clamp(5.0) == 2.0
        assert i.clamp(0.5) == 0.5

    def test_expand_grows_symmetrically(self):
        i = Interval(1.0, 2.0).expand(1.0)
        assert i == Interval(0.5, 2.5)
        assert i.size() >= 1.0

    def test_enclosing(self):
        assert Interval.enclosing(Interval(0, 1), Interval(3, 4)) == Interval(0, 4)
        assert Interval.enclosing(EMPTY, Interval(3, 4)) == Interval(3, 4)

    def test_constants(self):
        assert EMPTY.is_empty()
        assert UNIVERSE.contains(1e300)
        assert UNIVERSE.max == INFINITY


class TestAABBConstruction:
    def test_from_points_orders_corners(self):
        box = AABB.from_points(Vector3(1, 5, -1), Vector3(-1, 2, 3))
        assert box.x == Interval(-1, 1)
        assert box.y == Interval(2, 5)
        assert box.z == Interval(-1, 3)

    def test_flat_box_is_padded(self):
        box = AABB.from_points(Vector3(0, 0, 0), Vector3(1, 1, 0))
        assert box.z.size() >= MIN_THICKNESS
        assert box.z.contains(0.0)
        assert box.x.size() == 1

    def test_empty_box_stays_empty(self):
        assert AABB.EMPTY.is_empty()
        box = AABB.from_points(Vector3(0, 0, 0), Vector3(1, 1, 1))
        union = AABB.surrounding_box(AABB.EMPTY, box)
        assert union.x == box.x and union.y == box.y and union.z == box.z

    def test_corners(self):
        corners = list(AABB.from_points(Vector3(0, 0, 0), Vector3(1, 2, 3)).corners())
        assert len(corners) == 8
        assert Vector3(1, 2, 3) in corners and Vector3(0, 0, 0) in corners


class TestAABBUnion:
    def _random_box(self, rng):
        a = random_vector(rng, -10, 10)
        b = random_vector(rng, -10, 10)
        return AABB.from_points(a, b)

    def test_union_contains_both_boxes(self):
        rng = RandomSource(3)
        for _ in range(50):
            a = self._random_box(rng)
            b = self._random_box(rng)
            u = AABB.surrounding_box(a, b)
            for corner in list(a.corners()) + list(b.corners()):
                assert u.contains_point(corner)

    def test_union_is_commutative_and_associative(self):
        rng = RandomSource(4)
        for _ in range(20):
            a, b, c = (self._random_box(rng) for _ in range(3))
            ab = AABB.surrounding_box(a, b)
            ba = AABB.surrounding_box(b, a)
            left = AABB.surrounding_box(ab, c)
            right = AABB.surrounding_box(a, AABB.surrounding_box(b, c))
            for axis in range(3):
                assert ab.axis_interval(axis) == ba.axis_interval(axis)
                assert left.axis_interval(axis).min == pytest.approx(right.axis_interval(axis).min)
                assert left.axis_interval(axis).max == pytest.approx(right.axis_interval(axis).max)


class TestAABBHit:
    box = AABB.from_points(Vector3(-1, -1, -1), Vector3(1, 1, 1))

    def test_hit_head_on(self):
        ray = Ray(Vector3(0, 0, 5), Vector3(0, 0, -1))
        assert self.box.hit(ray, Interval(0.001, INFINITY))

    def test_miss(self):
        ray = Ray(Vector3(3, 0, 5), Vector3(0, 0, -1))
        assert not self.box.hit(ray, Interval(0.001, INFINITY))

    def test_interval_excludes_box(self):
        ray = Ray(Vector3(0, 0, 5), Vector3(0, 0, -1))
        assert not self.box.hit(ray, Interval(0.001, 3.0))

    def test_box_behind_ray(self):
        ray = Ray(Vector3(0, 0, 5), Vector3(0, 0, 1))
        assert not self.box.hit(ray, Interval(0.001, INFINITY))

    def test_zero_direction_components_use_infinities(self):
        # Axis-aligned rays divide by zero on two axes.
        inside = Ray(Vector3(0.5, 0.5, 5), Vector3(0.0, -0.0, -1))
        outside = Ray(Vector3(1.5, 0.5, 5), Vector3(0.0, 0.0, -1))
        assert self.box.hit(inside, Interval(0.001, INFINITY))
        assert not self.box.hit(outside, Interval(0.001, INFINITY))

    def test_does_not_modify_interval(self):
        ray_t = Interval(0.001, INFINITY)
        self.box.hit(Ray(Vector3(0, 0, 5), Vector3(0, 0, -1)), ray_t)
        assert ray_t == Interval(0.001, math.inf)

    def test_flat_box_hit_edge_on(self):
        flat = AABB.from_points(Vector3(-1, -1, 0), Vector3(1, 1, 0))
        ray = Ray(Vector3(0, 0, 5), Vector3(0, 0, -1))
        assert flat.hit(ray, Interval(0.001, INFINITY))
