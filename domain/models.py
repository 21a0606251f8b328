"""
Domain models for detector output and calibration state.
"""
from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from domain.errors import InvalidInput


@dataclass(frozen=True)
class FaceBox:
    """Face bounding box reported by the detector, in pixels."""
    x1: float
    y1: float
    x2: float
    y2: float

    @property
    def width(self) -> float:
        return max(0.0, float(self.x2) - float(self.x1))

    @property
    def height(self) -> float:
        return max(0.0, float(self.y2) - float(self.y1))

    @property
    def area(self) -> float:
        return self.width * self.height


@dataclass
class CalibrationState:
    """Shared state passed between the accumulator, the mapper and the UI."""
    baseline: float
    is_baseline_set: bool = False
    eye_mode: bool = False
    last_ratio: Optional[float] = None  # None until the first face is seen


def face_ratio(box: FaceBox, frame_width: float, frame_height: float) -> float:
    """
    Compute face area over frame area.

    Args:
        box: Face bounding box (x1, y1, x2, y2)
        frame_width: Width of the analyzed frame
        frame_height: Height of the analyzed frame

    Returns:
        Ratio in [0, 1]; the box is clipped to the frame first
    """
    if not (np.isfinite(frame_width) and np.isfinite(frame_height)):
        raise InvalidInput("Frame size must be finite")
    if frame_width <= 0 or frame_height <= 0:
        raise InvalidInput(f"Frame size must be positive, got {frame_width}x{frame_height}")

    clipped = FaceBox(
        x1=float(np.clip(box.x1, 0, frame_width)),
        y1=float(np.clip(box.y1, 0, frame_height)),
        x2=float(np.clip(box.x2, 0, frame_width)),
        y2=float(np.clip(box.y2, 0, frame_height)),
    )
    frame_area = float(frame_width) * float(frame_height)
    return float(np.clip(clipped.area / frame_area, 0.0, 1.0))


def face_ratio_from_boxes(boxes: Sequence[FaceBox], frame_width: float,
                          frame_height: float) -> Optional[float]:
    """Ratio of the first detected face, or None when no face was found."""
    if not boxes:
        return None
    return face_ratio(boxes[0], frame_width, frame_height)


def validate_unit(value, name: str = "ratio") -> float:
    """Return value as float, raising InvalidInput unless it is finite and in [0, 1]."""
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise InvalidInput(f"{name} must be a number, got {value!r}") from None
    if not np.isfinite(value) or value < 0.0 or value > 1.0:
        raise InvalidInput(f"{name} must be within [0, 1], got {value!r}")
    return value
