"""Shared test fixtures for the wavdump test suite.

WHY: Most test modules need a well-formed hex dump of a small WAV file.
Building the bytes with struct and dumping them with the real record
encoder keeps every fixture consistent with what the tool reads.

HOW: _wav_bytes() packs a canonical 44-byte PCM header in front of a
payload; _dump_bytes() renders any byte string as 16-byte records from a
start address. The builders are exposed as fixtures of the same name,
and further fixtures wrap the common mono and stereo cases.

RULES:
- Header layout: RIFF size WAVE "fmt " (record 1), fmt chunk (record 2),
  block align, bits, "data", data size, first 4 payload bytes (record 3)
- data_size defaults to the payload length but can be overridden
"""

import struct
from typing import List, Optional

import pytest

from wavdump.core.hexline import encode_record


def _wav_bytes(
    payload: bytes,
    channels: int = 1,
    sample_rate: int = 8000,
    bytes_per_sample: Optional[int] = None,
    data_size: Optional[int] = None,
) -> bytes:
    """Build a WAV file image with a canonical 44-byte header."""
    block_align = bytes_per_sample if bytes_per_sample is not None else 2 * channels
    size = len(payload) if data_size is None else data_size
    header = (
        b"RIFF"
        + struct.pack("<I", 36 + size)
        + b"WAVEfmt "
        + struct.pack("<IHHIIHH", 16, 1, channels, sample_rate,
                      sample_rate * block_align, block_align, 16)
        + b"data"
        + struct.pack("<I", size)
    )
    return header + payload


def _dump_bytes(data: bytes, start_address: int = 0) -> str:
    """Render *data* as consecutive hex-dump records."""
    lines: List[str] = []
    for offset in range(0, len(data), 16):
        chunk = list(data[offset:offset + 16])
        lines.append(encode_record(start_address + offset, len(chunk), chunk))
    return "".join(lines)


def _pcm16(values: List[int]) -> bytes:
    """Pack signed 16-bit samples little-endian."""
    return struct.pack("<{}h".format(len(values)), *values)


@pytest.fixture
def wav_bytes():
    """Builder for WAV file images: wav_bytes(payload, channels=1, ...)."""
    return _wav_bytes


@pytest.fixture
def dump_bytes():
    """Builder for hex dumps: dump_bytes(data, start_address=0)."""
    return _dump_bytes


@pytest.fixture
def pcm16():
    """Packer for signed 16-bit little-endian samples."""
    return _pcm16


@pytest.fixture
def mono_payload():
    """40 bytes of mono PCM: 20 samples counting up by 100."""
    return _pcm16([100 * i for i in range(20)])


@pytest.fixture
def mono_dump(mono_payload):
    """Hex dump of a mono 8 kHz WAV holding mono_payload."""
    return _dump_bytes(_wav_bytes(mono_payload))


@pytest.fixture
def stereo_dump():
    """Hex dump of a stereo 44.1 kHz WAV with 16 frames of constant samples."""
    payload = _pcm16([1000, -1000] * 16)
    return _dump_bytes(_wav_bytes(payload, channels=2, sample_rate=44100))
