"""
Geometry Profile Tests
======================
Breakpoint values, interpolation, clamping and monotonicity.
"""
import pytest

from peoplegraph.model.geometry import GeometryProfile, profile


class TestBreakpoints:

    @pytest.mark.parametrize("n", [0, 1, 3, 5])
    def test_small_graphs_use_generous_profile(self, n):
        p = profile(n)
        assert p == GeometryProfile(
            node_radius=45, center_radius=55, repulsion_distance=120,
            spread_radius=0.30, font_size=16, center_font_size=22,
        )

    def test_fifteen_people(self):
        p = profile(15)
        assert (p.node_radius, p.center_radius, p.repulsion_distance) == (30, 40, 90)
        assert p.spread_radius == pytest.approx(0.40)
        assert (p.font_size, p.center_font_size) == (12, 18)

    def test_thirty_people(self):
        p = profile(30)
        assert (p.node_radius, p.center_radius, p.repulsion_distance) == (18, 30, 60)
        assert p.spread_radius == pytest.approx(0.50)
        assert (p.font_size, p.center_font_size) == (10, 14)

    @pytest.mark.parametrize("n", [31, 50, 1000])
    def test_large_graphs_are_clamped(self, n):
        assert profile(n) == profile(30)
        assert profile(n).node_radius == 18


class TestInterpolation:

    def test_midpoint_of_first_segment_rounds_half_up(self):
        p = profile(10)
        assert p.node_radius == 38  # 37.5
        assert p.center_radius == 48  # 47.5
        assert p.repulsion_distance == 105
        assert p.spread_radius == pytest.approx(0.35)
        assert p.font_size == 14
        assert p.center_font_size == 20

    def test_second_segment(self):
        p = profile(20)
        assert p.node_radius == 26
        assert p.spread_radius == pytest.approx(0.4 + 0.1 / 3)

    def test_radius_non_increasing(self):
        radii = [profile(n).node_radius for n in range(0, 61)]
        centers = [profile(n).center_radius for n in range(0, 61)]
        assert all(a >= b for a, b in zip(radii, radii[1:]))
        assert all(a >= b for a, b in zip(centers, centers[1:]))

    def test_values_stay_in_range(self):
        for n in range(0, 61):
            p = profile(n)
            assert p.node_radius > 0 and p.center_radius > 0
            assert 0.30 <= p.spread_radius <= 0.50

    def test_derived_distances(self):
        p = profile(5)
        assert p.min_safe_distance == 110
        assert p.edge_target_distance == 165


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        profile(-1)
