"""
Application Initialization
==========================
This module constructs the Model-View pair and starts the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Instantiates the roster store (PeopleStore).
2. Instantiates the Main Window (View) around it.
3. Loads the bundled sample roster, if present.
"""
import logging
import os
import sys

from peoplegraph.app.application import create_app
from peoplegraph.app.state import PeopleStore
from peoplegraph.config import SAMPLE_ROSTER_PATH
from peoplegraph.logging_config import setup_logging
from peoplegraph.model.io import RosterError
from peoplegraph.view.main_window import MainWindow

logger = logging.getLogger(__name__)


def main() -> None:
    # Pass trace_ticks=True as well to see every simulation tick
    setup_logging(level=logging.INFO)

    app = create_app()

    store = PeopleStore()
    window = MainWindow(store)

    roster = sys.argv[1] if len(sys.argv) > 1 else SAMPLE_ROSTER_PATH
    if os.path.exists(roster):
        try:
            window.load_file(roster)
        except RosterError as e:
            logger.error(f"Could not load roster: {e}")
    else:
        logger.warning(f"Roster not found at {roster}; starting empty.")

    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
