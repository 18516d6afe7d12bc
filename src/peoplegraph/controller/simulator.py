"""
Force-Directed Layout
=====================
Per-frame force accumulation and integration over the GraphModel's nodes.

Note: This module should be pure Python/NumPy and should NOT import PySide6.

Each tick, every node that is neither the centre nor pinned by a drag feels:
    1. a spring towards the spread circle around the centre,
    2. quadratic repulsion from every node closer than `repulsion_distance`,
       plus an additional linear push below the minimum safe distance,
    3. a spring along every edge touching it (explicit, or the implicit
       centre edge).

Forces are evaluated against the positions at the start of the tick, then
velocities are damped and positions advanced in one pass.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from peoplegraph.config import (
    CENTER_SPRING_K,
    DAMPING,
    EDGE_SPRING_K,
    EMERGENCY_REPULSION_K,
    REPULSION_STRENGTH,
)
from peoplegraph.model.graph import GraphModel

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


class LayoutSimulator:
    """Advances the node positions of a GraphModel one frame at a time."""

    def __init__(self, model: GraphModel) -> None:
        self.model = model
        self.ticks: int = 0

    def step(self) -> float:
        """
        Run one simulation tick.

        Returns:
            The largest distance any node moved during this tick.
        """
        nodes = self.model.nodes
        self.ticks += 1
        if len(nodes) < 2:
            return 0.0

        pos = np.array([(node.x, node.y) for node in nodes], dtype=np.float64)
        vel = np.array([(node.vx, node.vy) for node in nodes], dtype=np.float64)
        free = np.array([not (node.is_center or node.pinned) for node in nodes], dtype=bool)
        if not free.any():
            return 0.0

        index = {node.id: i for i, node in enumerate(nodes)}
        center_index = index[self.model.center.id]

        forces = self._center_spring(pos, center_index)
        forces += self._repulsion(pos)
        forces += self._edge_springs(pos, index)

        new_vel = DAMPING * (vel + forces)
        new_pos = pos + new_vel

        moved = 0.0
        for i, node in enumerate(nodes):
            if not free[i]:
                continue
            node.vx, node.vy = float(new_vel[i, 0]), float(new_vel[i, 1])
            node.x, node.y = float(new_pos[i, 0]), float(new_pos[i, 1])
            moved = max(moved, float(np.hypot(new_vel[i, 0], new_vel[i, 1])))

        logger.debug(f"tick {self.ticks}: max displacement {moved:.4f}")
        return moved

    # ------------------------------------------------------------------------------
    # Force terms
    # ------------------------------------------------------------------------------

    def _center_spring(self, pos: npt.NDArray[np.float64], center_index: int) -> npt.NDArray[np.float64]:
        """Restoring force towards the spread circle (pulls in or pushes out)."""
        offset = pos - pos[center_index]
        dist = np.hypot(offset[:, 0], offset[:, 1])
        target = self.model.spread_distance

        forces = np.zeros_like(pos)
        ok = dist > 0.0
        magnitude = CENTER_SPRING_K * (dist[ok] - target)
        forces[ok] = -(offset[ok] / dist[ok, None]) * magnitude[:, None]
        return forces

    def _repulsion(self, pos: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
        """Pairwise push; coincident pairs are skipped for this tick."""
        geometry = self.model.geometry
        reach = float(geometry.repulsion_distance)
        safe = geometry.min_safe_distance

        diff = pos[:, None, :] - pos[None, :, :]  # (N, N, 2): i minus j
        dist = np.hypot(diff[..., 0], diff[..., 1])
        apart = dist > 0.0
        with np.errstate(divide="ignore", invalid="ignore"):
            unit = np.where(apart[..., None], diff / dist[..., None], 0.0)

        magnitude = np.zeros_like(dist)
        near = apart & (dist < reach)
        magnitude[near] = REPULSION_STRENGTH * ((reach - dist[near]) / reach) ** 2

        # stacks with the quadratic term rather than replacing it
        crowded = apart & (dist < safe)
        magnitude[crowded] += EMERGENCY_REPULSION_K * (safe - dist[crowded])

        return (unit * magnitude[..., None]).sum(axis=1)

    def _edge_springs(self, pos: npt.NDArray[np.float64], index: dict[str, int]) -> npt.NDArray[np.float64]:
        """Springs along explicit and implicit edges, applied to both ends."""
        forces = np.zeros_like(pos)
        edges = self.model.edges()
        if not edges:
            return forces

        a = np.array([index[edge.source.id] for edge in edges], dtype=np.int64)
        b = np.array([index[edge.target.id] for edge in edges], dtype=np.int64)
        offset = pos[b] - pos[a]  # a -> b
        dist = np.hypot(offset[:, 0], offset[:, 1])
        ok = dist > 0.0
        if not ok.any():
            return forces

        a, b, offset, dist = a[ok], b[ok], offset[ok], dist[ok]
        magnitude = EDGE_SPRING_K * (dist - self.model.geometry.edge_target_distance)
        pull = (offset / dist[:, None]) * magnitude[:, None]

        np.add.at(forces, a, pull)
        np.add.at(forces, b, -pull)
        return forces
