"""Configuration constants for baseline calibration."""

# Calibration session
SAMPLES_REQUIRED = 3  # Reference captures averaged into the baseline

# Persistence
BASELINE_KEY = "BASELINE_RATIO"
DEFAULT_BASELINE = 0.15  # Used whenever no baseline has been stored
DB_NAME = "settings.db"
