"""Baseline calibration for the eye-care engine."""

from calibration.accumulator import CalibrationAccumulator, SessionStatus
from calibration.baseline_store import (
    MemoryStore,
    SQLiteStore,
    load_baseline,
    read_baseline,
    save_baseline,
    has_baseline,
)

__all__ = [
    "CalibrationAccumulator",
    "SessionStatus",
    "MemoryStore",
    "SQLiteStore",
    "load_baseline",
    "read_baseline",
    "save_baseline",
    "has_baseline",
]
