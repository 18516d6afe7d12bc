"""
People Graph Widget
===================
Qt host for the relationship graph: runs the animation clock, paints every
frame through the Renderer and forwards mouse events to the
InteractionController.

The graph is drawn on a fixed SURFACE_WIDTH x SURFACE_HEIGHT surface that is
stretched (independently in x and y) to the widget's size.
"""
from __future__ import annotations

import logging
from typing import Iterable, Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QMouseEvent, QPainter, QPaintEvent, QResizeEvent
from PySide6.QtWidgets import QFrame, QHBoxLayout, QLabel, QPushButton, QWidget

from peoplegraph.config import SURFACE_HEIGHT, SURFACE_WIDTH
from peoplegraph.controller.clock import QtTickClock, TickClock
from peoplegraph.controller.interaction import InteractionController
from peoplegraph.controller.simulator import LayoutSimulator
from peoplegraph.model.graph import GraphModel
from peoplegraph.model.people import Person, Relationship
from peoplegraph.view.renderer import Renderer
from peoplegraph.view.widgets.painter_surface import PainterSurface

logger = logging.getLogger(__name__)

OVERLAY_STYLE = """
    QFrame#hints { background: rgba(255, 255, 255, 230); border-radius: 8px; }
    QFrame#selectionBadge { background: #3b82f6; border-radius: 8px; }
    QFrame#selectionBadge QLabel { color: white; }
    QFrame#selectionBadge QPushButton { color: white; border: none; background: transparent; }
"""


class PeopleGraphWidget(QWidget):
    """Interactive force-directed view of a person's social network."""
    node_clicked = Signal(object)  # Person
    relationship_requested = Signal(str, str)  # (person_a_id, person_b_id)

    def __init__(self, parent: QWidget | None = None, clock: Optional[TickClock] = None) -> None:
        super().__init__(parent)
        self.setMinimumSize(480, 320)
        self.setStyleSheet(OVERLAY_STYLE)
        self.setCursor(Qt.CursorShape.PointingHandCursor)

        self.model = GraphModel(SURFACE_WIDTH, SURFACE_HEIGHT)
        self.simulator = LayoutSimulator(self.model)
        self.renderer = Renderer()
        self.controller = InteractionController(self.model, on_node_click=self.node_clicked.emit)

        self._build_overlays()

        self.clock = clock or QtTickClock(parent=self)
        self.clock.start(self._on_tick)

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def set_data(self, people: Iterable[Person], relationships: Iterable[Relationship]) -> None:
        """Replace the roster; the layout restarts from the circle."""
        self.model.reset(people, relationships)
        self.controller.reset()
        self._refresh_badge()
        self.update()

    def set_linking_enabled(self, enabled: bool) -> None:
        """Shift-click linking only works while a handler is attached."""
        self.controller.on_add_relationship = self.relationship_requested.emit if enabled else None
        self.controller.clear_selection()
        self._refresh_badge()
        self.update()

    def clear_selection(self) -> None:
        self.controller.clear_selection()
        self._refresh_badge()
        self.update()

    def dispose(self) -> None:
        """Stop the animation and drop all interaction state."""
        self.clock.stop()
        self.controller.dispose()

    # ------------------------------------------------------------------------------
    # Overlays
    # ------------------------------------------------------------------------------

    def _build_overlays(self) -> None:
        self.hints = QFrame(self)
        self.hints.setObjectName("hints")
        hint_label = QLabel(
            self.tr("Click a person to see details")
            + "<br><small>" + self.tr("Shift + click two people to link them") + "</small>"
            + "<br><small>" + self.tr("Drag a person to reposition") + "</small>",
            self.hints,
        )
        hint_layout = QHBoxLayout(self.hints)
        hint_layout.setContentsMargins(12, 6, 12, 6)
        hint_layout.addWidget(hint_label)
        self.hints.adjustSize()
        self.hints.move(16, 16)

        self.badge = QFrame(self)
        self.badge.setObjectName("selectionBadge")
        self.badge_label = QLabel(self.badge)
        cancel = QPushButton(self.tr("Cancel"), self.badge)
        cancel.clicked.connect(self.clear_selection)
        badge_layout = QHBoxLayout(self.badge)
        badge_layout.setContentsMargins(12, 6, 12, 6)
        badge_layout.addWidget(self.badge_label)
        badge_layout.addWidget(cancel)
        self.badge.hide()

    def _refresh_badge(self) -> None:
        count = len(self.controller.selection)
        if count == 0:
            self.badge.hide()
            return
        text = self.tr("{} selected").format(count)
        if count == 1:
            text += " " + self.tr("(pick one more to link)")
        self.badge_label.setText(text)
        self.badge.adjustSize()
        self._place_badge()
        self.badge.show()
        self.badge.raise_()

    def _place_badge(self) -> None:
        self.badge.move(self.width() - self.badge.width() - 16, 16)

    # ------------------------------------------------------------------------------
    # Qt events
    # ------------------------------------------------------------------------------

    def _on_tick(self) -> None:
        self.simulator.step()
        self.update()

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        try:
            painter.scale(self.width() / self.model.width, self.height() / self.model.height)
            surface = PainterSurface(painter, self.model.width, self.model.height)
            self.renderer.draw(surface, self.model, self.controller.selection)
        finally:
            painter.end()

    def resizeEvent(self, event: QResizeEvent) -> None:
        super().resizeEvent(event)
        size = event.size()
        if size.width() > 0 and size.height() > 0:
            self.controller.set_display_size(size.width(), size.height())
        self._place_badge()

    def mousePressEvent(self, event: QMouseEvent) -> None:
        if event.button() != Qt.MouseButton.LeftButton:
            return super().mousePressEvent(event)
        pos = event.position()
        if self.controller.pointer_down(pos.x(), pos.y(), self._shift_held(event)):
            self._refresh_badge()
            self.update()

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        pos = event.position()
        if self.controller.pointer_move(pos.x(), pos.y()):
            self.update()

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        if event.button() != Qt.MouseButton.LeftButton:
            return super().mouseReleaseEvent(event)
        pos = event.position()
        self.controller.pointer_up(pos.x(), pos.y())
        self.controller.click(pos.x(), pos.y(), self._shift_held(event))
        self.update()

    def closeEvent(self, event) -> None:
        self.dispose()
        super().closeEvent(event)

    @staticmethod
    def _shift_held(event: QMouseEvent) -> bool:
        return bool(event.modifiers() & Qt.KeyboardModifier.ShiftModifier)
