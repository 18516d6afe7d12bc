"""
Pointer Interaction
===================
Turns pointer events on the graph surface into drags, clicks and link
requests.

Note: This module should be pure Python and should NOT import PySide6. The
widget forwards display-space coordinates; everything here is mapped into
surface space with the surface/display ratio before hit-testing.

Gestures:
    - press + move: drag the node under the pointer (pinned while held),
    - press + release without moving DRAG_THRESHOLD_PX: click, reported for
      person nodes via `on_node_click`,
    - modifier + press on two nodes: `on_add_relationship(first, second)`.
"""
from __future__ import annotations

import logging
import math
from typing import Callable, Optional

from peoplegraph.config import DRAG_THRESHOLD_PX, SELECTION_CAPACITY
from peoplegraph.model.graph import GraphModel, Node
from peoplegraph.model.people import Person

logger = logging.getLogger(__name__)

NodeClickHandler = Callable[[Person], None]
AddRelationshipHandler = Callable[[str, str], None]


class InteractionController:
    """State machine for one pointer over one GraphModel."""

    def __init__(
        self,
        model: GraphModel,
        on_node_click: Optional[NodeClickHandler] = None,
        on_add_relationship: Optional[AddRelationshipHandler] = None,
    ) -> None:
        self.model = model
        self.on_node_click = on_node_click
        self.on_add_relationship = on_add_relationship

        self._display_width: float = model.width
        self._display_height: float = model.height

        self._held: Optional[Node] = None
        self._press_point: Optional[tuple[float, float]] = None
        self._drag_occurred: bool = False
        self._selection: list[str] = []
        self._generation: int = model.generation

    # ------------------------------------------------------------------------------
    # Coordinate mapping
    # ------------------------------------------------------------------------------

    def set_display_size(self, width: float, height: float) -> None:
        """Size of the box the surface is stretched into, in display pixels."""
        if width <= 0 or height <= 0:
            raise ValueError(f"Display size must be positive, got {width}x{height}.")
        self._display_width = float(width)
        self._display_height = float(height)

    @property
    def scale(self) -> tuple[float, float]:
        """Surface units per display pixel along x and y."""
        return self.model.width / self._display_width, self.model.height / self._display_height

    def to_surface(self, x: float, y: float) -> tuple[float, float]:
        sx, sy = self.scale
        return x * sx, y * sy

    # ------------------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------------------

    @property
    def selection(self) -> tuple[str, ...]:
        return tuple(self._selection)

    @property
    def held_node(self) -> Optional[Node]:
        return self._held

    @property
    def drag_occurred(self) -> bool:
        return self._drag_occurred

    @property
    def linking_enabled(self) -> bool:
        return self.on_add_relationship is not None

    def clear_selection(self) -> None:
        self._selection.clear()

    def reset(self) -> None:
        """Forget any in-flight drag and the selection buffer."""
        if self._held is not None:
            self._held.pinned = False
        self._held = None
        self._press_point = None
        self._drag_occurred = False
        self._selection.clear()
        self._generation = self.model.generation

    def _sync(self) -> None:
        # A rebuild replaced every node; held/selected ids are stale.
        if self._generation != self.model.generation:
            logger.debug("Graph was rebuilt; dropping drag and selection state.")
            self.reset()

    # ------------------------------------------------------------------------------
    # Hit testing
    # ------------------------------------------------------------------------------

    def hit_test(self, x: float, y: float) -> Optional[Node]:
        """
        Node under a surface-space point.

        A point hits a node when it lies within the node's radius (inclusive).
        Where circles overlap the node whose centre is nearest wins.
        """
        best: Optional[Node] = None
        best_distance = math.inf
        for node in self.model.nodes:
            distance = node.distance_to(x, y)
            if distance <= self.model.radius_of(node) and distance < best_distance:
                best, best_distance = node, distance
        return best

    # ------------------------------------------------------------------------------
    # Pointer events (display coordinates)
    # ------------------------------------------------------------------------------

    def pointer_down(self, x: float, y: float, multi_select: bool = False) -> bool:
        """Returns True if the event changed something worth repainting."""
        self._sync()
        self._drag_occurred = False
        sx, sy = self.to_surface(x, y)
        node = self.hit_test(sx, sy)
        if node is None:
            return False

        if multi_select and self.linking_enabled:
            self._toggle_selection(node)
            return True

        self._held = node
        node.pinned = True
        self._press_point = (sx, sy)
        return True

    def pointer_move(self, x: float, y: float) -> bool:
        self._sync()
        if self._held is None or self._press_point is None:
            return False

        sx, sy = self.to_surface(x, y)
        self._held.place(sx, sy)

        if not self._drag_occurred and self._display_distance(self._press_point, (sx, sy)) >= DRAG_THRESHOLD_PX:
            self._drag_occurred = True
            logger.debug(f"Dragging '{self._held.id}'.")
        return True

    def pointer_up(self, x: float, y: float) -> bool:
        self._sync()
        if self._held is None:
            return False
        self._held.pinned = False
        self._held = None
        self._press_point = None
        return True

    def click(self, x: float, y: float, multi_select: bool = False) -> None:
        """Completion of a press/release cycle."""
        self._sync()
        if multi_select:
            return
        if self._drag_occurred:
            self._drag_occurred = False
            return

        node = self.hit_test(*self.to_surface(x, y))
        if node is None or node.is_center:
            return
        logger.info(f"Person clicked: {node.person.name} ({node.id})")
        if self.on_node_click is not None:
            self.on_node_click(node.person)

    def dispose(self) -> None:
        self.reset()
        self.on_node_click = None
        self.on_add_relationship = None

    # ------------------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------------------

    def _display_distance(self, a: tuple[float, float], b: tuple[float, float]) -> float:
        """Distance between two surface points, measured in display pixels."""
        sx, sy = self.scale
        return math.hypot((b[0] - a[0]) / sx, (b[1] - a[1]) / sy)

    def _toggle_selection(self, node: Node) -> None:
        if node.id in self._selection:
            self._selection.remove(node.id)
            return

        self._selection.append(node.id)
        if len(self._selection) < SELECTION_CAPACITY:
            return

        first, second = self._selection
        self._selection.clear()
        logger.info(f"Link requested: {first} <-> {second}")
        if self.on_add_relationship is not None:
            self.on_add_relationship(first, second)
