"""Maps a live face ratio and the user's baseline to a blur radius and alpha."""

import logging
from dataclasses import dataclass, asdict
from typing import Optional

import numpy as np

from blur.config import BlurConfig, BLUR_PRESETS, DEFAULT_PRESET
from domain.errors import InvalidInput
from domain.models import validate_unit

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BlurState:
    """Blur parameters for the renderer."""
    enhancement: float = 0.0
    radius: float = 0.0
    alpha: float = 0.0

    @property
    def is_cleared(self) -> bool:
        return self.radius == 0.0 and self.alpha == 0.0

    def to_dict(self) -> dict:
        return asdict(self)


def cleared_blur_state() -> BlurState:
    """State used while eye mode is off."""
    return BlurState()


def compute_enhancement(ratio: float, baseline: float, max_ratio: float) -> float:
    """
    Normalized distance of ratio above baseline, scaled toward max_ratio.

    When max_ratio does not exceed the baseline the scale is undefined, so any
    ratio at or above the baseline saturates to 1.0 and anything below is 0.0.
    """
    span = max_ratio - baseline
    if span <= 0:
        logger.warning(
            "max_ratio %.4f <= baseline %.4f; using step enhancement", max_ratio, baseline
        )
        return 1.0 if ratio >= baseline else 0.0
    return float(np.clip((ratio - baseline) / span, 0.0, 1.0))


def compute_blur(ratio: float, baseline: float, max_ratio: Optional[float] = None,
                 config: Optional[BlurConfig] = None) -> BlurState:
    """
    Compute blur parameters for one face-ratio sample.

    Args:
        ratio: Current face ratio in [0, 1]
        baseline: Calibrated baseline ratio in [0, 1]
        max_ratio: Ratio at which enhancement reaches 1.0 (default: config.max_ratio)
        config: BlurConfig with radius/alpha ceilings (default: DEFAULT_PRESET)

    Returns:
        BlurState with enhancement, radius and alpha

    Raises:
        InvalidInput: ratio or baseline outside [0, 1]
    """
    ratio = validate_unit(ratio, "ratio")
    baseline = validate_unit(baseline, "baseline")
    if config is None:
        config = BLUR_PRESETS[DEFAULT_PRESET]
    if max_ratio is None:
        max_ratio = config.max_ratio
    try:
        max_ratio = float(max_ratio)
    except (TypeError, ValueError):
        raise InvalidInput(f"max_ratio must be a number, got {max_ratio!r}") from None
    if not np.isfinite(max_ratio):
        raise InvalidInput(f"max_ratio must be finite, got {max_ratio!r}")

    enhancement = compute_enhancement(ratio, baseline, max_ratio)
    radius = enhancement * config.radius_max
    alpha = float(np.clip(enhancement * config.alpha_scale, 0.0, config.alpha_max))

    return BlurState(enhancement=enhancement, radius=float(radius), alpha=alpha)
