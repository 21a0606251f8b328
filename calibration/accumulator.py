"""Calibration accumulator: averages reference face ratios into a baseline."""

import logging
from dataclasses import dataclass
from typing import List

import numpy as np

from calibration.config import SAMPLES_REQUIRED
from domain.errors import InvalidSample, NotReady

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionStatus:
    """Progress of the current calibration session."""
    count: int
    complete: bool
    required: int = SAMPLES_REQUIRED

    @property
    def progress_text(self) -> str:
        return f"{self.count}/{self.required}"


class CalibrationAccumulator:
    """Collects face-ratio samples until enough exist to commit a baseline."""

    def __init__(self, store=None, samples_required: int = SAMPLES_REQUIRED):
        """
        Initialize accumulator.

        Args:
            store: Optional key-value store cleared on reset()
            samples_required: Samples needed before commit (default: SAMPLES_REQUIRED)
        """
        if samples_required < 1:
            raise ValueError(f"samples_required must be >= 1, got {samples_required}")
        self.store = store
        self.samples_required = samples_required
        self._samples: List[float] = []

    @property
    def samples(self) -> List[float]:
        return list(self._samples)

    @property
    def count(self) -> int:
        return len(self._samples)

    def status(self) -> SessionStatus:
        return SessionStatus(
            count=self.count,
            complete=self.is_complete(),
            required=self.samples_required,
        )

    def record_sample(self, ratio: float) -> SessionStatus:
        """
        Append a face ratio to the session.

        Args:
            ratio: Face ratio in [0, 1]

        Returns:
            SessionStatus after the sample was recorded

        Raises:
            InvalidSample: ratio is not a finite number in [0, 1]
            NotReady: session already holds every required sample
        """
        try:
            value = float(ratio)
        except (TypeError, ValueError):
            raise InvalidSample(f"Face ratio must be a number, got {ratio!r}") from None
        if not np.isfinite(value) or value < 0.0 or value > 1.0:
            raise InvalidSample(f"Face ratio must be within [0, 1], got {ratio!r}")

        if self.is_complete():
            raise NotReady(
                f"Session already has {self.samples_required} samples; "
                "commit the baseline before recording more"
            )

        self._samples.append(value)
        logger.debug("Recorded calibration sample %.4f (%d/%d)",
                     value, self.count, self.samples_required)
        return self.status()

    def is_complete(self) -> bool:
        return self.count >= self.samples_required

    def mean(self) -> float:
        """
        Mean of a complete session, without clearing it.

        Raises:
            NotReady: fewer than samples_required samples recorded
        """
        if not self.is_complete():
            raise NotReady(
                f"Baseline needs {self.samples_required} samples, have {self.count}"
            )
        return float(np.mean(self._samples))

    def commit_baseline(self) -> float:
        """
        Average the session samples and clear the session.

        Returns:
            Arithmetic mean of the recorded samples

        Raises:
            NotReady: fewer than samples_required samples recorded
        """
        baseline = self.mean()
        logger.info("Computed baseline %.4f from %d samples", baseline, self.count)
        self._samples.clear()
        return baseline

    def reset(self):
        """Clear the session and the persisted baseline."""
        self._samples.clear()
        if self.store is not None:
            self.store.clear()
        logger.info("Calibration reset")
