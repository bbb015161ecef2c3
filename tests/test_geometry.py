"""Tests for triad geometry."""

from __future__ import annotations

import math

import pytest

from triad_explorer.core.geometry import Point, Triad, midpoint, root_triad


class TestRootTriad:
    def test_edge_is_fraction_of_short_side(self):
        root = root_triad(200.0, 100.0)
        assert root.p2.x - root.p1.x == pytest.approx(90.0)

    def test_root_is_equilateral(self):
        root = root_triad(400.0, 300.0)
        a, b, c = root.points()
        ab = math.dist(a, b)
        assert math.dist(b, c) == pytest.approx(ab)
        assert math.dist(c, a) == pytest.approx(ab)

    def test_root_is_centred(self):
        root = root_triad(200.0, 100.0)
        assert root.p3.x == pytest.approx(100.0)
        assert (root.p1.y + root.p3.y) / 2.0 == pytest.approx(50.0)
        # Apex at the top, base at the bottom.
        assert root.p3.y < root.p1.y == root.p2.y

    def test_custom_scale(self):
        root = root_triad(100.0, 100.0, scale=0.5)
        assert root.p2.x - root.p1.x == pytest.approx(50.0)


class TestTriadChildren:
    def test_children_keep_parent_corners_in_order(self):
        parent = Triad(Point(0.0, 10.0), Point(10.0, 10.0), Point(5.0, 0.0))
        first, second, third = parent.children()
        assert first.p1 == parent.p1
        assert second.p2 == parent.p2
        assert third.p3 == parent.p3

    def test_children_share_midpoints(self):
        parent = Triad(Point(0.0, 10.0), Point(10.0, 10.0), Point(5.0, 0.0))
        first, second, third = parent.children()
        assert first.p2 == second.p1 == midpoint(parent.p1, parent.p2)
        assert second.p3 == third.p2 == midpoint(parent.p2, parent.p3)
        assert first.p3 == third.p1 == midpoint(parent.p3, parent.p1)

    def test_centroid(self):
        triad = Triad(Point(0.0, 0.0), Point(3.0, 0.0), Point(0.0, 3.0))
        assert triad.centroid() == Point(1.0, 1.0)
