"""Abstract base effect and the shared envelope arithmetic.

WHY: Fade-in, fade-out, and pan all scale int16 samples by a linear ramp
over a window measured in milliseconds. This base class enforces a
consistent interface so the pipeline and CLI can apply any effect
generically, and keeps the window and scaling math in one place so all
three effects round identically.

HOW: BaseEffect is an ABC with ``name``, ``selector``, and ``apply()``.
affected_frames() converts milliseconds to a frame count clamped to the
audio length. scale() multiplies in float64, divides by the window, and
truncates toward zero back to int16.

RULES:
- affected_frames = int(sample_rate / 1000.0 * ms), at most num_samples // channels
- Scaling is (sample * factor) / window, truncated toward zero
- Effects modify the sample array in place and return nothing
- Negative durations raise ValueError

To add a new effect:
1. Create a new file in effects/
2. Subclass BaseEffect
3. Implement name, selector and apply()
4. Register in EFFECTS in effects/__init__.py
"""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np


def affected_frames(sample_rate: int, milliseconds: int, total_frames: int) -> int:
    """Number of frames covered by *milliseconds* at *sample_rate*.

    Clamped to *total_frames* so an effect never runs past the audio.
    The clamp is decided on integers first, so durations too large for a
    float still resolve.
    """
    if milliseconds * sample_rate > total_frames * 1000:
        return total_frames
    frames = int(sample_rate / 1000.0 * milliseconds)
    return min(frames, total_frames)


def scale(values: np.ndarray, factors: np.ndarray, window: int) -> np.ndarray:
    """Scale int16 *values* by ``factors / window``, truncating toward zero."""
    scaled = values.astype(np.float64) * factors / float(window)
    return scaled.astype(np.int16)


class BaseEffect(ABC):
    """Abstract base for all amplitude effects."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable effect name, e.g. 'Fade-in'."""

    @property
    @abstractmethod
    def selector(self) -> str:
        """Command-line selector token, e.g. '-fin'."""

    @abstractmethod
    def apply(
        self,
        samples: np.ndarray,
        channels: int,
        sample_rate: int,
        milliseconds: int,
    ) -> None:
        """Apply the effect to *samples* in place.

        Args:
            samples: Interleaved int16 samples (a writable view of the
                     sample buffer).
            channels: Samples per frame.
            sample_rate: Frames per second.
            milliseconds: Effect duration.
        """

    @staticmethod
    def _check_duration(milliseconds: int) -> None:
        if milliseconds < 0:
            raise ValueError("Effect duration must be non-negative, got {}".format(milliseconds))
