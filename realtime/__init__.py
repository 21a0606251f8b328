"""Realtime integration of the eye-care engine with a frame stream."""

from realtime.controller import CalibrationPhase, EyeProtectionController
from realtime.sample_slot import LatestRatioSlot

__all__ = [
    "CalibrationPhase",
    "EyeProtectionController",
    "LatestRatioSlot",
]
