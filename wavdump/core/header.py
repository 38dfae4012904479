"""WAV header parsing from the first three hex-dump records.

WHY: The effects need the channel count and sample rate, the assembler
and re-encoder need the declared data size, and a dump that is not a
plain PCM WAV must be rejected before any samples are touched.

HOW: Reads exactly three records. Each must be a full 33-token record.
Record 1 carries the RIFF/WAVE/fmt markers, record 2 the channel count
and sample rate, record 3 the block align, the data marker and the data
size. Records 1 and 2 are echoed to the output as soon as they pass;
record 3 is handed back to the caller because the re-encoder emits it
as the first data record.

RULES:
- Record 1: characters 0-3 == "RIFF", 8-15 == "WAVEfmt "
- Record 2: channels = LE16 at bytes 6-7, sample_rate = LE32 at bytes 8-11
- Record 3: characters 4-7 == "data", data_size = LE32 at bytes 8-11,
  bytes_per_sample = LE16 at bytes 0-1
- Any short or mismatched record raises FormatError immediately
- check_supported() rejects frame sizes other than 2 or 4 and zero channels
"""

from __future__ import annotations

import logging
import struct
from typing import Iterator, List, TextIO, Tuple

from wavdump.config import FULL_RECORD_TOKENS, SUPPORTED_BYTES_PER_SAMPLE
from wavdump.core.hexline import encode_record, read_record
from wavdump.core.ir import HexRecord, WavHeader
from wavdump.errors import FormatError

logger = logging.getLogger(__name__)


_LE16 = struct.Struct("<H")
_LE32 = struct.Struct("<I")


def _le16(values: List[int], offset: int) -> int:
    return _LE16.unpack_from(bytes(values), offset)[0]


def _le32(values: List[int], offset: int) -> int:
    return _LE32.unpack_from(bytes(values), offset)[0]


def _read_full(lines: Iterator[str], index: int) -> HexRecord:
    record, tokens = read_record(lines)
    if record is None or tokens != FULL_RECORD_TOKENS:
        raise FormatError(
            "Header record {} is incomplete ({} of {} tokens)".format(
                index, tokens, FULL_RECORD_TOKENS
            )
        )
    return record


def _echo(record: HexRecord, out: TextIO) -> None:
    out.write(encode_record(record.address, len(record.byte_values), record.byte_values))


def check_riff_record(record: HexRecord) -> None:
    """Verify the RIFF and WAVEfmt markers of header record 1."""
    chars = record.rendered_chars
    if chars[0:4] != "RIFF":
        raise FormatError("Header record 1 is missing the RIFF marker")
    if chars[8:16] != "WAVEfmt ":
        raise FormatError("Header record 1 is missing the WAVEfmt marker")


def extract_format(record: HexRecord) -> Tuple[int, int]:
    """Return ``(channels, sample_rate)`` from header record 2."""
    values = record.byte_values
    return _le16(values, 6), _le32(values, 8)


def extract_data(record: HexRecord) -> Tuple[int, int]:
    """Return ``(data_size, bytes_per_sample)`` from header record 3.

    Raises:
        FormatError: If the data chunk marker is missing.
    """
    if record.rendered_chars[4:8] != "data":
        raise FormatError("Header record 3 is missing the data marker")
    values = record.byte_values
    return _le32(values, 8), _le16(values, 0)


def parse_header(lines: Iterator[str], out: TextIO) -> Tuple[WavHeader, HexRecord]:
    """Consume the three header records from *lines*.

    Records 1 and 2 are written to *out* as they are accepted, so a
    failure on a later record leaves the earlier lines in the output.

    Args:
        lines: Iterator over the input dump's lines.
        out: Text stream receiving the echoed header lines.

    Returns:
        ``(header, data_record)`` where ``data_record`` is header record 3,
        the template for the first re-encoded data record.

    Raises:
        FormatError: On any short or mismatched header record.
    """
    riff = _read_full(lines, 1)
    check_riff_record(riff)
    _echo(riff, out)

    fmt = _read_full(lines, 2)
    channels, sample_rate = extract_format(fmt)
    _echo(fmt, out)

    data = _read_full(lines, 3)
    data_size, bytes_per_sample = extract_data(data)

    header = WavHeader(
        channels=channels,
        sample_rate=sample_rate,
        data_size=data_size,
        bytes_per_sample=bytes_per_sample,
    )
    logger.info(
        "Header: %d channel(s), %d Hz, %d data bytes, %d bytes per frame",
        channels, sample_rate, data_size, bytes_per_sample,
    )
    return header, data


def check_supported(header: WavHeader) -> None:
    """Reject headers the effect engine cannot work with.

    Raises:
        FormatError: If bytes_per_sample is not 2 or 4, or channels is 0.
    """
    if header.bytes_per_sample not in SUPPORTED_BYTES_PER_SAMPLE:
        raise FormatError(
            "Unsupported bytes per sample: {} (expected 2 or 4)".format(header.bytes_per_sample)
        )
    if header.channels < 1:
        raise FormatError("Header declares no channels")
