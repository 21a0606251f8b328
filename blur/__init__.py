"""Face-ratio to blur mapping for the eye-care engine."""

from blur.config import BlurConfig, BLUR_PRESETS, get_preset
from blur.mapper import BlurState, compute_blur, compute_enhancement, cleared_blur_state
from blur.overlay_state import OverlayTracker

__all__ = [
    "BlurConfig",
    "BLUR_PRESETS",
    "get_preset",
    "BlurState",
    "compute_blur",
    "compute_enhancement",
    "cleared_blur_state",
    "OverlayTracker",
]
