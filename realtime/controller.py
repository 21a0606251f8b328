"""Eye-protection state machine tying calibration, blur mapping and eye mode together."""

import logging
from enum import Enum
from typing import Optional

from blur.config import BlurConfig, get_preset
from blur.mapper import BlurState, compute_blur, cleared_blur_state
from blur.overlay_state import OverlayTracker
from calibration.accumulator import CalibrationAccumulator, SessionStatus
from calibration.baseline_store import read_baseline, save_baseline
from calibration.config import SAMPLES_REQUIRED, DEFAULT_BASELINE
from domain.errors import NotReady
from domain.models import CalibrationState, validate_unit

logger = logging.getLogger(__name__)


class CalibrationPhase(Enum):
    """Calibration phase enum."""
    IDLE = "IDLE"
    CALIBRATING = "CALIBRATING"
    CALIBRATED = "CALIBRATED"


class EyeProtectionController:
    """
    Per-frame entry point for the UI.

    Not thread-safe: all calls must come from one thread (or be serialized by
    the caller). Use LatestRatioSlot to hand ratios over from a worker.
    """

    def __init__(self, store, blur_config: Optional[BlurConfig] = None,
                 samples_required: int = SAMPLES_REQUIRED):
        """
        Initialize controller.

        Args:
            store: Key-value store holding the baseline
            blur_config: Blur ceilings (default: the default preset)
            samples_required: Captures needed to calibrate
        """
        self.store = store
        self.blur_config = blur_config or get_preset()
        self.accumulator = CalibrationAccumulator(store, samples_required)
        self.overlay = OverlayTracker(self.blur_config)
        stored = read_baseline(store)
        self.state = CalibrationState(
            baseline=DEFAULT_BASELINE if stored is None else stored,
            is_baseline_set=stored is not None,
        )
        self.blur_state = cleared_blur_state()

        if self.state.is_baseline_set:
            logger.info("Loaded stored baseline %.4f", self.state.baseline)

    @property
    def phase(self) -> CalibrationPhase:
        if self.state.is_baseline_set:
            return CalibrationPhase.CALIBRATED
        if self.accumulator.count > 0:
            return CalibrationPhase.CALIBRATING
        return CalibrationPhase.IDLE

    def on_face_ratio(self, ratio: float) -> BlurState:
        """Handle the face ratio of one analyzed frame."""
        self.state.last_ratio = validate_unit(ratio, "ratio")
        return self._refresh_blur()

    def on_no_face(self) -> BlurState:
        """Handle a frame without a face; the last ratio and blur stay in effect."""
        logger.debug("No face in frame")
        return self.blur_state

    def process_pending(self, slot) -> Optional[BlurState]:
        """Consume the latest ratio from a LatestRatioSlot, if any."""
        ratio = slot.take()
        if ratio is None:
            return None
        return self.on_face_ratio(ratio)

    def _refresh_blur(self) -> BlurState:
        if not self.state.eye_mode or self.state.last_ratio is None:
            new_state = cleared_blur_state()
        else:
            new_state = compute_blur(
                self.state.last_ratio, self.state.baseline, config=self.blur_config
            )
        self.blur_state = new_state
        self.overlay.update(new_state)
        return new_state

    def capture(self) -> SessionStatus:
        """
        Record the current face ratio as a calibration sample.

        Commits and persists the baseline once enough samples exist. If the
        store write fails the samples are kept, and the next capture retries
        the commit without recording another sample.

        Raises:
            NotReady: already calibrated, or no face ratio seen yet
        """
        if self.state.is_baseline_set:
            raise NotReady("Baseline already calibrated; reset before capturing again")
        if self.state.last_ratio is None:
            raise NotReady("No face detected yet; cannot capture a calibration sample")

        if self.accumulator.is_complete():
            status = self.accumulator.status()
        else:
            status = self.accumulator.record_sample(self.state.last_ratio)
        if status.complete:
            baseline = self.accumulator.mean()
            save_baseline(self.store, baseline)
            self.accumulator.commit_baseline()
            self.state.baseline = baseline
            self.state.is_baseline_set = True
            self._refresh_blur()
        return status

    def reset(self):
        """Drop the baseline and return to capturing."""
        self.accumulator.reset()
        self.state.baseline = DEFAULT_BASELINE
        self.state.is_baseline_set = False
        self._refresh_blur()

    def set_eye_mode(self, enabled: bool) -> BlurState:
        self.state.eye_mode = bool(enabled)
        logger.info("Eye mode %s", "enabled" if self.state.eye_mode else "disabled")
        return self._refresh_blur()

    def toggle_eye_mode(self) -> bool:
        self.set_eye_mode(not self.state.eye_mode)
        return self.state.eye_mode

    def snapshot(self) -> dict:
        """Debug overlay values."""
        ratio = self.state.last_ratio
        return {
            "phase": self.phase.value,
            "eye_mode": self.state.eye_mode,
            "face_ratio": ratio,
            "face_ratio_percent": None if ratio is None else int(round(ratio * 100)),
            "baseline": self.state.baseline,
            "baseline_percent": int(round(self.state.baseline * 100)),
            "is_baseline_set": self.state.is_baseline_set,
            "progress": self.accumulator.status().progress_text,
            "blur": self.blur_state.to_dict(),
            "blur_radius": round(self.blur_state.radius, 1),
            "overlay_alpha": self.overlay.current_alpha,
        }
