"""
Configuration & Path Management
===============================
This module serves as the central registry for file paths and global constants.

Why is this file needed?
------------------------
1. Abstraction: The physics coefficients, surface size and palette are shared
   by the simulator, the renderer and the widget; they live here once.
2. Deployment: It handles the logic required by PyInstaller (sys._MEIPASS) to
   find assets (sample rosters) when the app is frozen into an .exe.

Exports:
    ASSETS_PATH (str): Absolute path to the assets directory.
    SAMPLE_ROSTER_PATH (str): Absolute path to the bundled demo roster.
"""
import sys
import os
from pathlib import Path


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to resource, works for dev and for PyInstaller.
    """
    if hasattr(sys, '_MEIPASS'):
        base_path: str = getattr(sys, '_MEIPASS')
        return os.path.join(base_path, relative_path)

    # config.py is in src/peoplegraph/
    current_file_path: Path = Path(__file__)
    project_root: Path = current_file_path.parent.parent.parent
    return os.path.join(str(project_root), relative_path)


ASSETS_PATH: str = get_resource_path("assets")
SAMPLE_ROSTER_PATH: str = os.path.join(ASSETS_PATH, "sample_roster.json")

# ---- drawing surface ----
# Internal resolution; the widget stretches it to its own size.
SURFACE_WIDTH: int = 1200
SURFACE_HEIGHT: int = 800

# ---- animation clock ----
TICK_INTERVAL_MS: int = 16

# ---- interaction ----
DRAG_THRESHOLD_PX: float = 5.0
SELECTION_CAPACITY: int = 2

# ---- physics ----
CENTER_SPRING_K: float = 0.01
EDGE_SPRING_K: float = 0.02
REPULSION_STRENGTH: float = 5.0
EMERGENCY_REPULSION_K: float = 0.5
SAFE_DISTANCE_MARGIN: float = 20.0
EDGE_TARGET_PADDING: float = 30.0
DAMPING: float = 0.8

# ---- palette ----
COLOR_BACKGROUND = "#ffffff"
COLOR_CENTER_FILL = "#8b5cf6"
COLOR_PERSON_FILL = "#6366f1"
COLOR_NODE_OUTLINE = "#ffffff"
COLOR_INITIAL = "#ffffff"
COLOR_NAME = "#1f2937"
COLOR_MENTIONS = "#6b7280"
COLOR_EDGE = "#cbd5e1"
COLOR_EDGE_LABEL = "#64748b"
COLOR_IMPLICIT_EDGE = "#e2e8f0"
COLOR_IMPLICIT_LABEL = "#94a3b8"
COLOR_SELECTION = "#3b82f6"
