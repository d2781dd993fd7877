"""
Configuration constants for the PacPath project.

All tunable parameters are defined here. Environment variables override
the defaults where noted; scripts load a project-root .env first.
"""

import os
from pathlib import Path

# =============================================================================
# Path Configuration
# =============================================================================

# Project root is parent of pacpath/
PROJECT_ROOT = Path(__file__).parent.parent

# Maze templates and text graphs used by the scripts
DATA_DIR = PROJECT_ROOT / "data"

# =============================================================================
# Priority Queue Configuration
# =============================================================================

# Re-check heap/index invariants after every mutation (slow, O(n) per call)
CHECK_INVARIANTS = os.environ.get("PACPATH_CHECK_INVARIANTS", "").lower() in ("1", "true", "yes")

# =============================================================================
# Maze Configuration
# =============================================================================

# Weight of an edge between two tiles of equal elevation
BASE_EDGE_WEIGHT = 1.0

# Elevation differences beyond this magnitude are clamped
ELEVATION_CLAMP = 0.25

# Extra weight per unit of (clamped) climb: uphill costs more, downhill less
ELEVATION_SLOPE = 3.0

# Path tiles sit on a lattice of this pitch, offset by LATTICE_OFFSET
LATTICE_PITCH = 3
LATTICE_OFFSET = 2

# Template characters for GameMap.from_template
TILE_CHARS = {"w": "WALL", "p": "PATH", "g": "GHOSTBOX"}

# =============================================================================
# Game Configuration
# =============================================================================

# Maximum ticks before a headless game is considered lost
MAX_STEPS = 500

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
