"""Unit tests for the blur mapper, overlay tracking and face-ratio helpers."""

import numpy as np
import pytest

from blur.config import BlurConfig, BLUR_PRESETS, get_preset, MAX_RATIO
from blur.mapper import compute_blur, compute_enhancement, cleared_blur_state
from blur.overlay_state import OverlayTracker
from domain.errors import InvalidInput
from domain.models import FaceBox, face_ratio, face_ratio_from_boxes

BEHIND = BLUR_PRESETS["blur_behind"]


def test_ratio_at_baseline_is_zero():
    state = compute_blur(0.15, 0.15, max_ratio=0.7)
    assert state.enhancement == 0.0
    assert state.radius == 0.0
    assert state.alpha == 0.0


def test_ratio_at_max_saturates():
    state = compute_blur(0.7, 0.15, max_ratio=0.7)
    assert state.enhancement == pytest.approx(1.0)
    assert state.radius == pytest.approx(BEHIND.radius_max)
    assert state.alpha == pytest.approx(BEHIND.alpha_max)


def test_ratio_below_baseline_clamps():
    state = compute_blur(0.05, 0.15)
    assert state.enhancement == 0.0
    assert state.radius == 0.0


def test_ratio_above_max_clamps():
    state = compute_blur(0.95, 0.15, max_ratio=0.7)
    assert state.enhancement == 1.0
    assert state.radius == BEHIND.radius_max


def test_midpoint_values():
    """Halfway between baseline and max ratio gives half the ceilings."""
    state = compute_blur(0.425, 0.15, max_ratio=0.7)
    assert state.enhancement == pytest.approx(0.5)
    assert state.radius == pytest.approx(75.0)
    assert state.alpha == pytest.approx(40.0)


def test_default_max_ratio():
    assert compute_blur(MAX_RATIO, 0.15) == compute_blur(MAX_RATIO, 0.15, max_ratio=MAX_RATIO)


def test_render_effect_preset():
    config = get_preset("render_effect")
    state = compute_blur(0.7, 0.15, config=config)
    assert state.radius == pytest.approx(25.0)
    assert state.alpha == pytest.approx(60.0)


def test_alpha_capped_below_scale():
    config = BlurConfig(radius_max=100.0, alpha_scale=80.0, alpha_max=30.0)
    state = compute_blur(0.7, 0.15, config=config)
    assert state.alpha == 30.0


def test_unknown_preset():
    with pytest.raises(ValueError):
        get_preset("gaussian")


@pytest.mark.parametrize("baseline,max_ratio", [(0.7, 0.7), (0.8, 0.7), (0.5, 0.2)])
def test_degenerate_scale_is_step(baseline, max_ratio):
    """With max_ratio <= baseline, enhancement is 0 below baseline and 1 at or above."""
    assert compute_enhancement(baseline - 0.01, baseline, max_ratio) == 0.0
    assert compute_enhancement(baseline, baseline, max_ratio) == 1.0
    assert compute_enhancement(min(1.0, baseline + 0.1), baseline, max_ratio) == 1.0


@pytest.mark.parametrize("baseline,max_ratio", [
    (0.0, 0.7), (0.15, 0.7), (0.5, 0.7), (0.7, 0.7), (0.9, 0.7), (0.3, 1.0),
])
def test_monotonic_and_bounded(baseline, max_ratio):
    previous = -1.0
    for ratio in np.linspace(0.0, 1.0, 101):
        state = compute_blur(float(ratio), baseline, max_ratio=max_ratio)
        assert 0.0 <= state.enhancement <= 1.0
        assert 0.0 <= state.radius <= BEHIND.radius_max
        assert 0.0 <= state.alpha <= BEHIND.alpha_max
        assert state.enhancement >= previous, "Enhancement must not decrease with ratio"
        previous = state.enhancement


@pytest.mark.parametrize("ratio,baseline", [
    (-0.1, 0.15), (1.1, 0.15), (0.3, -0.1), (0.3, 1.5), (float("nan"), 0.15), ("x", 0.15),
])
def test_invalid_input(ratio, baseline):
    with pytest.raises(InvalidInput):
        compute_blur(ratio, baseline)


def test_cleared_state():
    state = cleared_blur_state()
    assert state.is_cleared
    assert state.to_dict() == {"enhancement": 0.0, "radius": 0.0, "alpha": 0.0}


def test_overlay_skips_identical_radius():
    tracker = OverlayTracker(BEHIND)
    state = compute_blur(0.7, 0.15)

    assert tracker.update(state), "First non-zero radius should redraw"
    assert not tracker.update(state), "Same radius should not redraw"
    assert tracker.current_radius == pytest.approx(150.0)
    assert tracker.current_alpha == 60

    assert tracker.clear()
    assert tracker.current_alpha == 0
    assert not tracker.clear()


def test_overlay_alpha_proportional():
    tracker = OverlayTracker(BEHIND)
    assert tracker.overlay_alpha(75.0) == 30
    assert tracker.overlay_alpha(500.0) == 60


def test_face_ratio_from_box():
    box = FaceBox(0, 0, 320, 240)
    assert face_ratio(box, 640, 480) == pytest.approx(0.25)


def test_face_ratio_clips_to_frame():
    box = FaceBox(-100, -100, 1000, 1000)
    assert face_ratio(box, 640, 480) == pytest.approx(1.0)


def test_face_ratio_inverted_box_is_zero():
    assert face_ratio(FaceBox(100, 100, 50, 50), 640, 480) == 0.0


def test_face_ratio_bad_frame():
    with pytest.raises(InvalidInput):
        face_ratio(FaceBox(0, 0, 10, 10), 0, 480)


def test_first_face_wins():
    boxes = [FaceBox(0, 0, 64, 48), FaceBox(0, 0, 640, 480)]
    assert face_ratio_from_boxes(boxes, 640, 480) == pytest.approx(0.01)
    assert face_ratio_from_boxes([], 640, 480) is None


@pytest.mark.parametrize("max_ratio", [[1], "high", {"v": 1}, float("inf")])
def test_invalid_max_ratio(max_ratio):
    with pytest.raises(InvalidInput):
        compute_blur(0.3, 0.15, max_ratio=max_ratio)
