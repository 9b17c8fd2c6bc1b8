"""Tests for the geometric primitives."""

import math

import numpy as np
import pytest

from py_sweephull.core.geometry import (
    squared_distance, in_circle, circumradius, circumcenter, pseudo_angle, quicksort
)


class TestDistanceAndCircles:
    """Test distance, in-circle and circumcircle helpers."""

    def test_squared_distance(self):
        assert squared_distance(0, 0, 3, 4) == 25
        assert squared_distance(1.5, -2, 1.5, -2) == 0

    def test_in_circle_inside(self):
        """A point inside the circle of a clockwise triangle is reported."""
        assert in_circle(0, 0, 0, 1, 1, 0, 0.25, 0.25)

    def test_in_circle_outside(self):
        assert not in_circle(0, 0, 0, 1, 1, 0, 2, 2)

    def test_in_circle_on_circle_is_not_inside(self):
        """(1, 1) lies exactly on the circle through the three corners."""
        assert not in_circle(0, 0, 0, 1, 1, 0, 1, 1)

    def test_in_circle_depends_on_winding(self):
        """The same point tested against the counter-clockwise triangle is rejected."""
        assert not in_circle(0, 0, 1, 0, 0, 1, 0.25, 0.25)

    def test_circumradius_right_triangle(self):
        # center (1, 1), radius sqrt(2)
        assert circumradius(0, 0, 2, 0, 0, 2) == pytest.approx(2.0)

    def test_circumradius_collinear_is_infinite(self):
        assert circumradius(0, 0, 1, 1, 2, 2) == math.inf
        assert circumradius(0, 0, 0, 0, 5, 1) == math.inf

    def test_circumcenter(self):
        x, y = circumcenter(0, 0, 2, 0, 0, 2)
        assert x == pytest.approx(1.0)
        assert y == pytest.approx(1.0)

    def test_circumcenter_is_equidistant(self):
        ax, ay, bx, by, cx, cy = 0.3, -1.2, 4.1, 0.7, -2.2, 3.3
        x, y = circumcenter(ax, ay, bx, by, cx, cy)
        r2 = circumradius(ax, ay, bx, by, cx, cy)

        assert squared_distance(x, y, ax, ay) == pytest.approx(r2)
        assert squared_distance(x, y, bx, by) == pytest.approx(r2)
        assert squared_distance(x, y, cx, cy) == pytest.approx(r2)

    def test_circumcenter_collinear_is_nan(self):
        x, y = circumcenter(0, 0, 1, 1, 2, 2)
        assert math.isnan(x)
        assert math.isnan(y)


class TestPseudoAngle:
    """Test the trig-free angle surrogate."""

    def test_axis_values(self):
        assert pseudo_angle(-1, 0) == 0.0
        assert pseudo_angle(0, -1) == 0.25
        assert pseudo_angle(1, 0) == 0.5
        assert pseudo_angle(0, 1) == 0.75

    def test_monotonic_in_angle(self):
        """Increases with atan2 over the open interval (-pi, pi)."""
        angles = np.linspace(-math.pi + 0.01, math.pi - 0.01, 400)
        values = [pseudo_angle(math.cos(a), math.sin(a)) for a in angles]

        assert all(b > a for a, b in zip(values, values[1:]))

    def test_range(self):
        rng = np.random.default_rng(7)
        for dx, dy in rng.normal(size=(200, 2)):
            value = pseudo_angle(dx, dy)
            assert 0.0 <= value < 1.0

    def test_scale_invariant(self):
        assert pseudo_angle(3, 4) == pseudo_angle(30, 40)

    def test_zero_vector(self):
        assert pseudo_angle(0.0, 0.0) == 0.25


class TestQuicksort:
    """Test the index quicksort keyed by an external array."""

    @pytest.mark.parametrize("size", [0, 1, 2, 15, 21, 22, 100, 1000])
    def test_sorts_by_key(self, size):
        rng = np.random.default_rng(size)
        dists = rng.random(size).tolist()
        ids = list(range(size))

        quicksort(ids, dists, 0, size - 1)

        assert sorted(ids) == list(range(size))
        keys = [dists[i] for i in ids]
        assert keys == sorted(dists)

    def test_many_ties(self):
        rng = np.random.default_rng(3)
        dists = rng.integers(0, 5, 500).astype(float).tolist()
        ids = list(range(500))

        quicksort(ids, dists, 0, 499)

        keys = [dists[i] for i in ids]
        assert all(a <= b for a, b in zip(keys, keys[1:]))
        assert sorted(ids) == list(range(500))

    def test_partial_range(self):
        """Positions outside [left, right] are left alone."""
        dists = [float(100 - i) for i in range(100)]
        ids = list(range(100))

        quicksort(ids, dists, 10, 60)

        assert ids[:10] == list(range(10))
        assert ids[61:] == list(range(61, 100))
        assert ids[10:61] == list(range(60, 9, -1))

    @pytest.mark.parametrize("threshold", [1, 5, 20, 1000])
    def test_threshold_does_not_change_order(self, threshold):
        rng = np.random.default_rng(11)
        dists = rng.random(300).tolist()
        ids = list(range(300))

        quicksort(ids, dists, 0, 299, threshold)

        assert ids == sorted(range(300), key=lambda i: dists[i])
