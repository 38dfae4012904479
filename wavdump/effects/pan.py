"""Left-to-right stereo pan effect.

WHY: Sweeps the stereo image from the left speaker to the right one over
the first N milliseconds.

HOW: Inside the window the left channel ramps down ((N-i-1)/N) while the
right channel ramps up (i/N). Every frame after the window is zeroed,
which is how the tool has always rendered a pan; downstream comparisons
depend on that output, so it is kept as is.

RULES:
- Mono input is left untouched, whatever the duration
- Channel 0 is left, channel 1 is right; other channels are not ramped
- Frames from N to the last whole frame are set to zero in every channel
- A zero duration therefore silences the whole stereo payload
"""

from __future__ import annotations

import numpy as np

from wavdump.effects.base import BaseEffect, affected_frames, scale


class PanEffect(BaseEffect):
    """Pan left-to-right over the first N milliseconds."""

    @property
    def name(self) -> str:
        return "Pan"

    @property
    def selector(self) -> str:
        return "-pan"

    def apply(self, samples, channels, sample_rate, milliseconds):
        self._check_duration(milliseconds)
        if channels == 1:
            return
        total_frames = len(samples) // channels
        window = max(0, affected_frames(sample_rate, milliseconds, total_frames))

        frames = samples[:total_frames * channels].reshape(total_frames, channels)
        if window > 0:
            head = frames[:window]
            position = np.arange(window, dtype=np.float64)
            head[:, 0] = scale(head[:, 0], window - position - 1, window)
            head[:, 1] = scale(head[:, 1], position, window)
        frames[window:] = 0
