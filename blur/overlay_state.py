"""Tracks what the blur overlay currently shows so redundant updates are skipped."""

import logging
from typing import Optional

import numpy as np

from blur.config import BlurConfig, BLUR_PRESETS, DEFAULT_PRESET, OVERLAY_ALPHA_MAX
from blur.mapper import BlurState

logger = logging.getLogger(__name__)


class OverlayTracker:
    """Remembers the last applied radius and the matching tint alpha."""

    def __init__(self, config: Optional[BlurConfig] = None, alpha_max: float = OVERLAY_ALPHA_MAX):
        self.config = config or BLUR_PRESETS[DEFAULT_PRESET]
        self.alpha_max = float(alpha_max)
        self.current_radius = 0.0
        self.current_alpha = 0

    def overlay_alpha(self, radius: float) -> int:
        """Tint alpha proportional to radius, as an 8-bit channel value."""
        if self.config.radius_max <= 0:
            return 0
        alpha = radius / self.config.radius_max * self.alpha_max
        return int(np.clip(alpha, 0, self.alpha_max))

    def update(self, state: BlurState) -> bool:
        """
        Apply a new blur state.

        Returns:
            True if the overlay must be redrawn, False if the radius is unchanged
        """
        radius = float(np.clip(state.radius, 0.0, self.config.radius_max))
        if radius == self.current_radius:
            return False

        self.current_radius = radius
        self.current_alpha = self.overlay_alpha(radius)
        logger.debug("Overlay update: radius=%.1f, alpha=%d", radius, self.current_alpha)
        return True

    def clear(self) -> bool:
        return self.update(BlurState())
