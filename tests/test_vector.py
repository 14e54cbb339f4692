# SPDX-FileCopyrightText: 2026 Giovanni MARIANO
#
# SPDX-License-Identifier: MPL-2.0

"""Tests for the vector value type and rays."""

import dataclasses
import math

import pytest

from csgray import DegenerateVectorError, Ray, Vector, cross, dot, magnitude, unitize


class TestVector:
    """Arithmetic and coercion."""

    def test_arithmetic(self):
        a = Vector(1, 2, 3)
        b = Vector(4, 5, 6)
        assert a + b == Vector(5, 7, 9)
        assert b - a == Vector(3, 3, 3)
        assert -a == Vector(-1, -2, -3)
        assert 2 * a == a * 2 == Vector(2, 4, 6)
        assert b / 2 == Vector(2, 2.5, 3)

    def test_unpacks_like_tuple(self):
        x, y, z = Vector(1.0, 2.0, 3.0)
        assert (x, y, z) == (1.0, 2.0, 3.0)
        assert tuple(Vector(1, 2, 3)) == (1, 2, 3)

    def test_of_coerces_sequences(self):
        v = Vector.of([1, 2, 3])
        assert v == Vector(1.0, 2.0, 3.0)
        assert isinstance(v.x, float)
        assert Vector.of(v) is v

    def test_immutable(self):
        v = Vector(1, 2, 3)
        with pytest.raises(dataclasses.FrozenInstanceError):
            v.x = 5


class TestProducts:
    """dot, cross, magnitude, unitize."""

    def test_dot(self):
        assert dot(Vector(1, 2, 3), Vector(4, -5, 6)) == 12

    def test_cross_right_handed(self):
        assert cross(Vector(1, 0, 0), Vector(0, 1, 0)) == Vector(0, 0, 1)
        assert cross(Vector(0, 1, 0), Vector(1, 0, 0)) == Vector(0, 0, -1)

    def test_magnitude(self):
        assert magnitude(Vector(3, 4, 0)) == 5.0

    def test_unitize(self):
        u = unitize(Vector(0, 3, 4))
        assert math.isclose(magnitude(u), 1.0)
        assert u == Vector(0, 0.6, 0.8)

    def test_unitize_zero_raises(self):
        with pytest.raises(DegenerateVectorError):
            unitize(Vector(0, 0, 0))

    def test_degenerate_vector_is_value_error(self):
        with pytest.raises(ValueError):
            unitize(Vector(0, 0, 0))


class TestRay:
    """Ray construction and evaluation."""

    def test_from_direction_unitizes(self):
        ray = Ray.from_direction((0, 0, 0), (0, 0, 5))
        assert ray.direction == Vector(0, 0, 1)
        assert ray.origin == Vector(0, 0, 0)

    def test_from_direction_zero_raises(self):
        with pytest.raises(DegenerateVectorError):
            Ray.from_direction((0, 0, 0), (0, 0, 0))

    def test_at(self):
        ray = Ray.from_direction((1, 1, 1), (1, 0, 0))
        assert ray.at(2.5) == Vector(3.5, 1, 1)

    def test_ray_is_a_value(self):
        ray = Ray.from_direction((0, 0, 0), (1, 0, 0))
        with pytest.raises(dataclasses.FrozenInstanceError):
            ray.origin = Vector(1, 1, 1)
        assert ray == Ray(Vector(0, 0, 0), Vector(1, 0, 0))

    def test_constructor_unitizes_direction(self):
        ray = Ray(Vector(0, 0, 0), Vector(0, 3, 4))
        assert ray.direction.y == pytest.approx(0.6)
        assert ray.direction.z == pytest.approx(0.8)

    def test_constructor_accepts_sequences(self):
        ray = Ray((1, 2, 3), (2, 0, 0))
        assert ray.origin == Vector(1, 2, 3)
        assert ray.direction == Vector(1, 0, 0)

    def test_constructor_zero_direction_raises(self):
        with pytest.raises(DegenerateVectorError):
            Ray(Vector(0, 0, 0), Vector(0, 0, 0))
