"""
Graph Model
===========
Owns the node arena of the relationship graph and the initial layout.

The node set is keyed by stable id (a Person id, or CENTER_ID for the
subject). It is never patched incrementally: any change to the roster, the
relationships or the canvas size goes through `GraphModel.reset`, which
discards every simulated position and re-seeds the circular layout.

Edges are derived on demand:
    - explicit edges come from Relationship records whose both ends resolve,
    - implicit edges join the centre to every person with no explicit
      relationship touching the centre.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence

from peoplegraph.config import SURFACE_HEIGHT, SURFACE_WIDTH
from peoplegraph.model.geometry import GeometryProfile, profile
from peoplegraph.model.people import CENTER_ID, SELF_PERSON, Person, Relationship

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Node:
    """Simulation state of one person on the canvas."""
    id: str
    x: float
    y: float
    person: Person
    vx: float = 0.0
    vy: float = 0.0
    is_center: bool = False
    pinned: bool = False  # held by a drag; the simulator leaves it alone

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id!r}, x={self.x:.1f}, y={self.y:.1f})"

    def distance_to(self, x: float, y: float) -> float:
        return math.hypot(self.x - x, self.y - y)

    def place(self, x: float, y: float) -> None:
        """Set the position directly and kill any momentum."""
        self.x = x
        self.y = y
        self.vx = 0.0
        self.vy = 0.0


@dataclass(frozen=True)
class Edge:
    """A drawable connection between two resolved nodes."""
    source: Node
    target: Node
    label: str
    implicit: bool = False
    relationship: Optional[Relationship] = field(default=None, compare=False)


def _unique_people(people: Iterable[Person]) -> list[Person]:
    seen: set[str] = set()
    unique: list[Person] = []
    for person in people:
        if person.id == CENTER_ID:
            logger.warning(f"Person '{person.name}' uses the reserved id '{CENTER_ID}'; skipped.")
            continue
        if person.id in seen:
            logger.warning(f"Duplicate person id '{person.id}' ({person.name}); keeping the first one.")
            continue
        seen.add(person.id)
        unique.append(person)
    return unique


class GraphModel:
    """The node arena plus the relationship list it was built against."""

    def __init__(self, width: float = SURFACE_WIDTH, height: float = SURFACE_HEIGHT) -> None:
        self.width: float = float(width)
        self.height: float = float(height)
        self.people: list[Person] = []
        self.relationships: list[Relationship] = []
        self.geometry: GeometryProfile = profile(0)
        self.generation: int = 0  # bumped on every reset

        self.center, _ = self.build([], self.width, self.height)
        self._nodes: dict[str, Node] = {CENTER_ID: self.center}

    # ------------------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------------------

    @staticmethod
    def build(
        people: Sequence[Person],
        canvas_width: float,
        canvas_height: float
    ) -> tuple[Node, list[Node]]:
        """
        Seed the circular layout.

        The centre node sits in the middle of the canvas; person `i` of `N` is
        placed at angle `i * 2pi / N` on a circle of radius
        `min(width, height) * spread_radius`. All velocities start at zero.

        Args:
            people: People in input order (assumed to have unique ids).
            canvas_width: Drawing surface width.
            canvas_height: Drawing surface height.

        Returns:
            The centre node and the person nodes in input order.

        Raises:
            ValueError: If the canvas has a non-positive dimension.
        """
        if canvas_width <= 0 or canvas_height <= 0:
            raise ValueError(f"Canvas must be positive, got {canvas_width}x{canvas_height}.")

        cx, cy = canvas_width / 2.0, canvas_height / 2.0
        center = Node(id=CENTER_ID, x=cx, y=cy, person=SELF_PERSON, is_center=True)

        n = len(people)
        if n == 0:
            return center, []

        radius = min(canvas_width, canvas_height) * profile(n).spread_radius
        step = 2.0 * math.pi / n
        nodes = [
            Node(
                id=person.id,
                x=cx + radius * math.cos(i * step),
                y=cy + radius * math.sin(i * step),
                person=person,
            )
            for i, person in enumerate(people)
        ]
        return center, nodes

    def reset(
        self,
        people: Iterable[Person],
        relationships: Iterable[Relationship],
        width: Optional[float] = None,
        height: Optional[float] = None
    ) -> None:
        """Discard all node state and rebuild from scratch."""
        if width is not None:
            self.width = float(width)
        if height is not None:
            self.height = float(height)

        self.people = _unique_people(people)
        self.relationships = list(relationships)
        self.geometry = profile(len(self.people))

        self.center, person_nodes = self.build(self.people, self.width, self.height)
        self._nodes = {CENTER_ID: self.center}
        self._nodes.update((node.id, node) for node in person_nodes)
        self.generation += 1

        dangling = [r.id for r in self.relationships if not self._resolves(r)]
        if dangling:
            logger.warning(f"Ignoring {len(dangling)} relationship(s) with unknown endpoints: {dangling}")

        logger.info(
            f"Graph rebuilt: {len(self.people)} people, {len(self.relationships)} relationships, "
            f"canvas {self.width:g}x{self.height:g}."
        )

    # ------------------------------------------------------------------------------
    # Node access
    # ------------------------------------------------------------------------------

    @property
    def nodes(self) -> list[Node]:
        """All nodes, centre first."""
        return list(self._nodes.values())

    @property
    def person_nodes(self) -> list[Node]:
        return [node for node in self._nodes.values() if not node.is_center]

    def get(self, node_id: str) -> Optional[Node]:
        return self._nodes.get(node_id)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def radius_of(self, node: Node) -> int:
        return self.geometry.radius_for(node.is_center)

    @property
    def spread_distance(self) -> float:
        """Target centre-to-person distance (also the seeding radius)."""
        return min(self.width, self.height) * self.geometry.spread_radius

    # ------------------------------------------------------------------------------
    # Edges
    # ------------------------------------------------------------------------------

    def _resolves(self, relationship: Relationship) -> bool:
        return (
            relationship.person_a_id in self._nodes
            and relationship.person_b_id in self._nodes
            and relationship.person_a_id != relationship.person_b_id
        )

    def explicit_edges(self) -> list[Edge]:
        """Edges backed by relationships; dangling or self-referencing ones are dropped."""
        return [
            Edge(
                source=self._nodes[rel.person_a_id],
                target=self._nodes[rel.person_b_id],
                label=rel.label,
                relationship=rel,
            )
            for rel in self.relationships
            if self._resolves(rel)
        ]

    def implicit_edges(self) -> list[Edge]:
        """Dashed centre links for people without an explicit centre relationship."""
        linked = {
            rel.other_end(CENTER_ID)
            for rel in self.relationships
            if rel.touches(CENTER_ID)
        }
        return [
            Edge(
                source=self.center,
                target=node,
                label=node.person.relationship_to_user or "unknown",
                implicit=True,
            )
            for node in self.person_nodes
            if node.id not in linked
        ]

    def edges(self) -> list[Edge]:
        return self.explicit_edges() + self.implicit_edges()
