"""Exceptions raised by the calibration and blur engine."""


class CalibrationError(Exception):
    """Base class for engine errors."""


class InvalidSample(CalibrationError, ValueError):
    """A calibration sample is outside [0, 1] or not a finite number."""


class InvalidInput(CalibrationError, ValueError):
    """A face ratio, baseline or frame geometry is out of range."""


class NotReady(CalibrationError, RuntimeError):
    """The requested operation is not allowed in the current calibration state."""
