"""
Main Application Window
=======================
Hosts the PeopleGraphWidget and wires it to the roster store.

Why is this file needed?
------------------------
1. Routing: Graph gestures (person click, link request) are turned into store
   updates and dialogs here; the widget itself never edits the roster.
2. Feedback loop: Every store change is pushed back into the widget, which
   rebuilds its layout.
"""
import logging
import os

from PySide6.QtWidgets import QFileDialog, QMainWindow, QMessageBox
from PySide6.QtGui import QAction

from peoplegraph.app.application import VISIBLE_APP_NAME
from peoplegraph.app.state import PeopleStore
from peoplegraph.model.io import IOManager, RosterError
from peoplegraph.model.people import Person
from peoplegraph.view.widgets.people_graph import PeopleGraphWidget

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, store: PeopleStore) -> None:
        super().__init__()
        self.store = store
        self.resize(1200, 800)

        self.graph = PeopleGraphWidget(self)
        self.graph.set_linking_enabled(True)
        self.setCentralWidget(self.graph)

        # --- SIGNAL CONNECTIONS ---
        self.graph.node_clicked.connect(self.on_person_clicked)
        self.graph.relationship_requested.connect(self.on_relationship_requested)
        self.store.roster_changed.connect(self.on_roster_changed)

        self._create_actions()
        self._create_menus()
        self.on_roster_changed()

    def _create_actions(self) -> None:
        self.act_open = QAction(self.tr("Open Roster..."), self)
        self.act_open.setShortcut("Ctrl+O")
        self.act_open.triggered.connect(self.on_file_open)

        self.act_save = QAction(self.tr("Save Roster"), self)
        self.act_save.setShortcut("Ctrl+S")
        self.act_save.triggered.connect(self.on_file_save)

        self.act_exit = QAction(self.tr("Exit"), self)
        self.act_exit.triggered.connect(self.close)

    def _create_menus(self) -> None:
        file_menu = self.menuBar().addMenu(self.tr("&File"))
        file_menu.addAction(self.act_open)
        file_menu.addAction(self.act_save)
        file_menu.addSeparator()
        file_menu.addAction(self.act_exit)

    # --- HELPER METHODS ---
    def update_window_title(self) -> None:
        filename = os.path.basename(self.store.filepath) if self.store.filepath else "Untitled"
        title = f"{VISIBLE_APP_NAME} - [{filename}"
        if self.store.is_modified:
            title += "*"
        title += "]"
        self.setWindowTitle(title)

    def on_roster_changed(self) -> None:
        """Any roster change is a full graph rebuild."""
        self.graph.set_data(self.store.people, self.store.relationships)
        self.update_window_title()

    def on_person_clicked(self, person: Person) -> None:
        lines = [f"<b>{person.name}</b>"]
        if person.relationship_to_user:
            lines.append(self.tr("Relationship: {}").format(person.relationship_to_user))
        if person.importance_score:
            lines.append(self.tr("Mentioned {} times").format(person.importance_score))
        QMessageBox.information(self, person.name, "<br>".join(lines))

    def on_relationship_requested(self, person_a_id: str, person_b_id: str) -> None:
        try:
            self.store.add_relationship(person_a_id, person_b_id)
        except ValueError as e:
            QMessageBox.warning(self, self.tr("Cannot link"), str(e))

    # --- FILE SLOTS ---

    def load_file(self, fname: str) -> None:
        people, relationships = IOManager.load_roster(fname)
        self.store.filepath = fname
        self.store.set_roster(people, relationships)

    def on_file_open(self) -> None:
        fname, _ = QFileDialog.getOpenFileName(
            self, self.tr("Open Roster"), "", "JSON Files (*.json)"
        )
        if fname:
            try:
                self.load_file(fname)
            except RosterError as e:
                logger.exception(f"Failed to open roster: {e}")
                QMessageBox.critical(self, self.tr("Error"), self.tr("Could not open file:\n{}").format(e))

    def on_file_save(self) -> None:
        fname = self.store.filepath
        if not fname:
            fname, _ = QFileDialog.getSaveFileName(
                self, self.tr("Save Roster"), "", "JSON Files (*.json)"
            )
            if not fname:
                return
            if not fname.endswith(".json"):
                fname += ".json"
        try:
            IOManager.save_roster(fname, self.store.people, self.store.relationships)
            self.store.filepath = fname
            self.store.is_modified = False
            self.update_window_title()
        except OSError as e:
            QMessageBox.critical(self, self.tr("Error"), self.tr("Could not save file:\n{}").format(e))

    def closeEvent(self, event, /) -> None:
        """Stop the animation before the window goes away."""
        self.graph.dispose()
        event.accept()
