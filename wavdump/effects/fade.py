"""Fade-in and fade-out effects.

WHY: Abrupt starts and ends click. A linear amplitude ramp over the
first or last N milliseconds removes the click.

HOW: Both effects take the frames inside the window as an
(frames, channels) view and scale every channel of a frame by the same
ramp value: 0, 1, ..., N-1 (over N) for fade-in and N-1, ..., 0 for
fade-out.

RULES:
- A zero duration leaves the samples untouched
- Fade-in: frame 0 becomes silence, frame N-1 keeps (N-1)/N of its amplitude
- Fade-out: the window ends at the last sample; the last frame becomes silence
- Frames outside the window are never touched
"""

from __future__ import annotations

import numpy as np

from wavdump.effects.base import BaseEffect, affected_frames, scale


class FadeInEffect(BaseEffect):
    """Linear fade from silence over the first N milliseconds."""

    @property
    def name(self) -> str:
        return "Fade-in"

    @property
    def selector(self) -> str:
        return "-fin"

    def apply(self, samples, channels, sample_rate, milliseconds):
        self._check_duration(milliseconds)
        if milliseconds == 0:
            return
        window = affected_frames(sample_rate, milliseconds, len(samples) // channels)
        if window <= 0:
            return

        frames = samples[:window * channels].reshape(window, channels)
        ramp = np.arange(window, dtype=np.float64)[:, np.newaxis]
        frames[...] = scale(frames, ramp, window)


class FadeOutEffect(BaseEffect):
    """Linear fade to silence over the last N milliseconds."""

    @property
    def name(self) -> str:
        return "Fade-out"

    @property
    def selector(self) -> str:
        return "-fout"

    def apply(self, samples, channels, sample_rate, milliseconds):
        self._check_duration(milliseconds)
        if milliseconds == 0:
            return
        num_samples = len(samples)
        window = affected_frames(sample_rate, milliseconds, num_samples // channels)
        if window <= 0:
            return

        start = num_samples - window * channels
        frames = samples[start:num_samples].reshape(window, channels)
        ramp = np.arange(window - 1, -1, -1, dtype=np.float64)[:, np.newaxis]
        frames[...] = scale(frames, ramp, window)
