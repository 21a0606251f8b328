"""Configuration constants for the face-ratio to blur mapping."""

from dataclasses import dataclass

# Enhancement normalization
MAX_RATIO = 0.7  # Face ratio at which enhancement saturates

# Blur-behind window radius (absolute pixels)
BLUR_BEHIND_RADIUS_MAX = 150.0
BLUR_BEHIND_ALPHA_SCALE = 80.0
BLUR_BEHIND_ALPHA_MAX = 80.0

# Render-effect radius (smaller scale)
RENDER_EFFECT_RADIUS_MAX = 25.0
RENDER_EFFECT_ALPHA_SCALE = 60.0
RENDER_EFFECT_ALPHA_MAX = 60.0

# Overlay tint drawn on top of the blur, derived from the radius
OVERLAY_ALPHA_MAX = 60.0

DEFAULT_PRESET = "blur_behind"


@dataclass(frozen=True)
class BlurConfig:
    """Ceilings for one blur rendering backend."""
    radius_max: float = BLUR_BEHIND_RADIUS_MAX
    alpha_scale: float = BLUR_BEHIND_ALPHA_SCALE
    alpha_max: float = BLUR_BEHIND_ALPHA_MAX
    max_ratio: float = MAX_RATIO

    def __post_init__(self):
        if self.radius_max < 0 or self.alpha_scale < 0 or self.alpha_max < 0:
            raise ValueError("Blur ceilings must be non-negative")


BLUR_PRESETS = {
    "blur_behind": BlurConfig(
        radius_max=BLUR_BEHIND_RADIUS_MAX,
        alpha_scale=BLUR_BEHIND_ALPHA_SCALE,
        alpha_max=BLUR_BEHIND_ALPHA_MAX,
    ),
    "render_effect": BlurConfig(
        radius_max=RENDER_EFFECT_RADIUS_MAX,
        alpha_scale=RENDER_EFFECT_ALPHA_SCALE,
        alpha_max=RENDER_EFFECT_ALPHA_MAX,
    ),
}


def get_preset(name: str = DEFAULT_PRESET) -> BlurConfig:
    """Look up a named preset."""
    try:
        return BLUR_PRESETS[name]
    except KeyError:
        raise ValueError(
            f"Unknown blur preset {name!r}, expected one of {sorted(BLUR_PRESETS)}"
        ) from None
