"""
Adaptive Geometry
=================
Maps the number of people in the graph to the radii, spacing and font sizes
used by the layout and the renderer.

Small families get generous circles; large extended families shrink and
compress so the picture stays legible. Values are interpolated linearly
between three breakpoints (5, 15 and 30 people) and clamped beyond 30.
"""
from __future__ import annotations

from dataclasses import dataclass

from peoplegraph.config import EDGE_TARGET_PADDING, SAFE_DISTANCE_MARGIN


@dataclass(frozen=True)
class GeometryProfile:
    """Rendering and physics constants for one node count."""
    node_radius: int
    center_radius: int
    repulsion_distance: int
    spread_radius: float  # fraction of min(width, height)
    font_size: int
    center_font_size: int

    def radius_for(self, is_center: bool) -> int:
        return self.center_radius if is_center else self.node_radius

    def font_for(self, is_center: bool) -> int:
        return self.center_font_size if is_center else self.font_size

    @property
    def min_safe_distance(self) -> float:
        """Hard floor on the distance between two node centres."""
        return 2.0 * self.node_radius + SAFE_DISTANCE_MARGIN

    @property
    def edge_target_distance(self) -> float:
        """Rest length of a relationship spring."""
        return 3.0 * self.node_radius + EDGE_TARGET_PADDING


# (node_count, node_radius, center_radius, repulsion_distance, spread_radius, font_size, center_font_size)
_BREAKPOINTS: tuple[tuple[int, float, float, float, float, float, float], ...] = (
    (5, 45, 55, 120, 0.30, 16, 22),
    (15, 30, 40, 90, 0.40, 12, 18),
    (30, 18, 30, 60, 0.50, 10, 14),
)


def _lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def _round(value: float) -> int:
    # Half-up; builtin round() is banker's rounding.
    return int(value + 0.5)


def profile(node_count: int) -> GeometryProfile:
    """
    Geometry profile for a graph with `node_count` people.

    Args:
        node_count: Number of people (the centre node is not counted).

    Returns:
        The interpolated GeometryProfile.

    Raises:
        ValueError: If node_count is negative.
    """
    if node_count < 0:
        raise ValueError(f"node_count must be >= 0, got {node_count}.")

    first = _BREAKPOINTS[0]
    if node_count <= first[0]:
        values = first[1:]
    elif node_count > _BREAKPOINTS[-1][0]:
        values = _BREAKPOINTS[-1][1:]
    else:
        values = first[1:]
        for lower, upper in zip(_BREAKPOINTS[:-1], _BREAKPOINTS[1:]):
            if node_count <= upper[0]:
                ratio = (node_count - lower[0]) / (upper[0] - lower[0])
                values = tuple(_lerp(a, b, ratio) for a, b in zip(lower[1:], upper[1:]))
                break

    node_radius, center_radius, repulsion, spread, font, center_font = values
    return GeometryProfile(
        node_radius=_round(node_radius),
        center_radius=_round(center_radius),
        repulsion_distance=_round(repulsion),
        spread_radius=float(spread),
        font_size=_round(font),
        center_font_size=_round(center_font),
    )
