"""Intermediate representation dataclasses for decoded hex dumps.

WHY: The codec, header parser, effects, and re-encoder all pass the same
few values around: one decoded line, the fields pulled out of the WAV
header, and the reconstructed PCM payload. Giving each a well-typed form
decouples decoding from the effects and from re-encoding.

HOW: Three types form the model:
  HexRecord:    one hex-dump line (address + up to 16 byte values)
  WavHeader:    the four header fields the pipeline needs
  SampleBuffer: the growable payload buffer with its written count

RULES:
- HexRecord characters are always derived from its bytes, never stored
- WavHeader is immutable once the header parser builds it
- SampleBuffer.effective_size is the decoded byte count, which may exceed
  WavHeader.data_size by a trailing partial record
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List

import numpy as np

from wavdump.config import MAX_INITIAL_RESERVE, RECORD_WIDTH
from wavdump.errors import ResourceError

logger = logging.getLogger(__name__)


def to_char(value: int) -> str:
    """Render one byte the way the character column shows it.

    RULES:
    - Printable ASCII (space through tilde) renders as itself
    - Everything else renders as "."
    """
    if 0x20 <= value <= 0x7E:
        return chr(value)
    return "."


@dataclass
class HexRecord:
    """One line of a hex dump.

    WHY: Both the header parser and the sample assembler consume decoded
    lines; the re-encoder produces them. A fresh value per line avoids
    sharing one mutable scratch array across phases.

    RULES:
    - address: unsigned 32-bit line address
    - byte_values: 0 to 16 integers in [0, 255]
    - rendered_chars is derived from byte_values (same length)
    - A record is full iff it holds 16 byte values
    """

    address: int
    byte_values: List[int] = field(default_factory=list)

    @property
    def rendered_chars(self) -> str:
        return "".join(to_char(value) for value in self.byte_values)

    @property
    def is_full(self) -> bool:
        return len(self.byte_values) == RECORD_WIDTH


@dataclass(frozen=True)
class WavHeader:
    """Fields extracted from the three header records.

    RULES:
    - channels, sample_rate: from the fmt chunk (record 2)
    - data_size: declared byte count of the data chunk (record 3)
    - bytes_per_sample: block align, bytes per frame across all channels
    """

    channels: int
    sample_rate: int
    data_size: int
    bytes_per_sample: int

    @property
    def num_samples(self) -> int:
        """Number of 16-bit samples covered by the declared data size."""
        return self.data_size // 2


class SampleBuffer:
    """Growable byte buffer holding the reconstructed PCM payload.

    WHY: The declared data size is only a hint; captures often carry one
    extra record past it. The buffer reserves the declared size up front
    and grows on demand, so no fixed over-allocation factor is needed.

    HOW: A bytearray sized to the reservation plus a separate written
    count. append() writes at the written position and extends the
    bytearray when the reservation runs out. as_samples() exposes the
    first N int16 samples as a writable numpy view for the effects.

    RULES:
    - written_count / effective_size: bytes actually appended
    - capacity: the up-front reservation (the bytearray may grow past it)
    - Allocation failures surface as ResourceError
    """

    def __init__(self, capacity: int = 0) -> None:
        capacity = max(0, min(capacity, MAX_INITIAL_RESERVE))
        try:
            self.data = bytearray(capacity)
        except MemoryError as exc:
            raise ResourceError(
                "Cannot reserve {} bytes for samples".format(capacity)
            ) from exc
        self.capacity = capacity
        self.written_count = 0

    @property
    def effective_size(self) -> int:
        return self.written_count

    def append(self, values: Iterable[int]) -> None:
        """Append byte values at the current written position."""
        chunk = bytes(values)
        end = self.written_count + len(chunk)
        if end > len(self.data):
            self._grow(end)
        self.data[self.written_count:end] = chunk
        self.written_count = end

    def _grow(self, size: int) -> None:
        try:
            self.data.extend(bytes(size - len(self.data)))
        except MemoryError as exc:
            raise ResourceError(
                "Cannot grow sample buffer to {} bytes".format(size)
            ) from exc

    def as_samples(self, count: int) -> np.ndarray:
        """Return the first *count* little-endian int16 samples as a view.

        Writes to the returned array modify the buffer in place. When the
        stream delivered fewer bytes than the header declared, the
        missing tail reads as silence.
        """
        if count <= 0:
            return np.zeros(0, dtype="<i2")
        needed = count * 2
        if needed > len(self.data):
            logger.debug("Padding sample buffer from %d to %d bytes", len(self.data), needed)
            self._grow(needed)
        return np.frombuffer(self.data, dtype="<i2", count=count)

    def __len__(self) -> int:
        return self.written_count

    def __repr__(self) -> str:
        return "SampleBuffer(written={} capacity={})".format(self.written_count, self.capacity)
