"""
Configuration constants for the TSP search suite.

All paths, defaults, and tunable limits are defined here.
Tunable values are read from environment variables; scripts load a
project .env file (python-dotenv) before importing this module.
"""

import os
from pathlib import Path

# =============================================================================
# Path Configuration
# =============================================================================

# Project root is parent of tsp_search/
PROJECT_ROOT = Path(__file__).parent.parent

# Data directory (distance matrix files)
DATA_DIR = PROJECT_ROOT / "data"

# Benchmark output directory
RESULTS_DIR = PROJECT_ROOT / "results"

# Recognised distance matrix file formats
MATRIX_FILE_SUFFIXES = (".json", ".msgpack", ".npy")

# =============================================================================
# Problem Defaults
# =============================================================================

# Four-city demonstration problem (optimal tour 0 -> 2 -> 1 -> 3 -> 0, cost 73)
SAMPLE_DISTANCE_MATRIX = [
    [0, 29, 20, 21],
    [29, 0, 15, 17],
    [20, 15, 0, 28],
    [21, 17, 28, 0],
]

DEFAULT_START_CITY = 0

# Solvers run by the driver scripts when none are requested
DEFAULT_SOLVERS = ("bfs", "ucs", "astar")

# =============================================================================
# Search Limits
# =============================================================================

# Stop a search after this many node expansions (0 = unlimited).
# BFS in particular grows factorially; set this when exploring n > 9.
MAX_EXPANSIONS = int(os.environ.get("TSP_MAX_EXPANSIONS", "0")) or None

# Exhaustive enumeration is refused above this many cities
BRUTE_FORCE_MAX_CITIES = 9

# =============================================================================
# Random Matrix Configuration
# =============================================================================

RANDOM_MATRIX_MIN_COST = 1
RANDOM_MATRIX_MAX_COST = 100

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"
