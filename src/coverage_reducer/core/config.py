"""
Coverage Reducer Configuration and Constants

This module centralizes all configuration parameters, constants, and default values
for better maintainability and consistency across the codebase.
"""

import os

# ============================================================================
# Coordinate Reference Systems
# ============================================================================

# Standard geographic system (WGS84 longitude/latitude)
DEFAULT_CRS = "EPSG:4326"

# Default vertical reference: height in metres, positive up
DEFAULT_VERTICAL_UNITS = "m"

# ============================================================================
# Selection Defaults
# ============================================================================

# Reference value for "the surface" on height/depth axes
SURFACE_ELEVATION = 0.0

# Returned by index selectors when no index can be chosen
NOT_FOUND = -1

# ============================================================================
# Dimension Names
# ============================================================================

X_DIM = 'x'
Y_DIM = 'y'
Z_DIM = 'z'
TIME_DIM = 'time'
OBS_DIM = 'obs'
FEATURE_ID_COORD = 'feature_id'

# ============================================================================
# Feature Identity
# ============================================================================

FEATURE_ID_SEPARATOR = ":"

# ============================================================================
# Coordinate Processing
# ============================================================================

DATETIME_PRECISION = "ns"

# ============================================================================
# Logging
# ============================================================================

# Users can override via COVERAGE_REDUCER_LOG_LEVEL environment variable
DEFAULT_LOG_LEVEL = os.environ.get("COVERAGE_REDUCER_LOG_LEVEL", "WARNING")

# Optional log file picked up by setup_logging when none is passed
DEFAULT_LOG_FILE = os.environ.get("COVERAGE_REDUCER_LOG_FILE")

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%dT%H:%M:%S'
