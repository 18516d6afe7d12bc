"""
Graph Renderer
==============
Paints the current node/edge state onto an immediate-mode drawing surface.

The renderer only reads the model. Any backend that can draw circles, lines
and centred text can host the graph by implementing `DrawingSurface`; the Qt
widget uses a QPainter-backed one, the tests a recording one.
"""
from __future__ import annotations

from typing import Collection, Protocol

from peoplegraph import config
from peoplegraph.model.graph import Edge, GraphModel, Node

EDGE_LABEL_SIZE = 12
IMPLICIT_LABEL_SIZE = 11
MENTION_SIZE = 10
HALO_PADDING = 5
HALO_OPACITY = 0.2


class DrawingSurface(Protocol):
    """Minimal 2D drawing backend, in surface coordinates."""

    def clear(self, color: str) -> None: ...

    def line(
        self, x1: float, y1: float, x2: float, y2: float,
        color: str, width: float, dashed: bool = False
    ) -> None: ...

    def circle(
        self, x: float, y: float, radius: float, fill: str,
        outline: str | None = None, outline_width: float = 0.0, opacity: float = 1.0
    ) -> None: ...

    def text(
        self, x: float, y: float, text: str, color: str, size: float, bold: bool = False
    ) -> None:
        """Draw `text` centred on (x, y)."""
        ...


class Renderer:
    """Draws a GraphModel; holds no state between frames."""

    def draw(
        self,
        surface: DrawingSurface,
        model: GraphModel,
        selection: Collection[str] = ()
    ) -> list[Edge]:
        """
        Paint one frame.

        Args:
            surface: Target surface.
            model: Graph to draw.
            selection: Ids of nodes to highlight with a halo.

        Returns:
            The edges that were drawn (explicit first, then implicit).
        """
        surface.clear(config.COLOR_BACKGROUND)

        explicit = model.explicit_edges()
        implicit = model.implicit_edges()
        for edge in explicit:
            self._draw_edge(surface, edge)
        for edge in implicit:
            self._draw_edge(surface, edge)

        for node in model.nodes:
            self._draw_node(surface, model, node, node.id in selection)

        return explicit + implicit

    @staticmethod
    def _draw_edge(surface: DrawingSurface, edge: Edge) -> None:
        a, b = edge.source, edge.target
        mid_x, mid_y = (a.x + b.x) / 2.0, (a.y + b.y) / 2.0
        if edge.implicit:
            surface.line(a.x, a.y, b.x, b.y, config.COLOR_IMPLICIT_EDGE, 1.0, dashed=True)
            surface.text(mid_x, mid_y, edge.label, config.COLOR_IMPLICIT_LABEL, IMPLICIT_LABEL_SIZE)
        else:
            surface.line(a.x, a.y, b.x, b.y, config.COLOR_EDGE, 2.0)
            surface.text(mid_x, mid_y, edge.label, config.COLOR_EDGE_LABEL, EDGE_LABEL_SIZE)

    @staticmethod
    def _draw_node(surface: DrawingSurface, model: GraphModel, node: Node, selected: bool) -> None:
        geometry = model.geometry
        radius = geometry.radius_for(node.is_center)
        font = geometry.font_for(node.is_center)

        if selected:
            surface.circle(
                node.x, node.y, radius + HALO_PADDING, config.COLOR_SELECTION, opacity=HALO_OPACITY
            )

        fill = config.COLOR_CENTER_FILL if node.is_center else config.COLOR_PERSON_FILL
        surface.circle(node.x, node.y, radius, fill, outline=config.COLOR_NODE_OUTLINE, outline_width=3.0)
        surface.text(node.x, node.y, node.person.initial, config.COLOR_INITIAL, font, bold=True)

        name_y = node.y + radius + max(15.0, geometry.node_radius * 0.4)
        name_size = max(10, round(font * 0.75))
        surface.text(node.x, name_y, node.person.name, config.COLOR_NAME, name_size)

        score = node.person.importance_score
        if not node.is_center and score and score > 0 and geometry.node_radius >= 25:
            surface.text(node.x, name_y + 15.0, f"{score} mentions", config.COLOR_MENTIONS, MENTION_SIZE)
