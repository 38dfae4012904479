"""Sample stream assembly from the data records of a hex dump.

WHY: The effects work on a contiguous sample buffer, but the payload
arrives as 16-byte records that may end in a short record, and the
stream often carries one more record than the header declares.

HOW: Seeds the buffer with the four payload bytes stored in header
record 3, then drains records until one is not full. Full records
append all 16 values and scanning continues; the terminating record
appends its recognized values (tokens - 1) and stops.

RULES:
- The first 4 buffer bytes are header record 3's bytes 12-15
- Reading stops at the first record with fewer than 16 byte values,
  including end of input
- effective_size counts every byte appended, even past data_size
"""

from __future__ import annotations

import logging
from typing import Iterator

from wavdump.config import RECORD_WIDTH, SEED_BYTES
from wavdump.core.hexline import read_record
from wavdump.core.ir import HexRecord, SampleBuffer, WavHeader

logger = logging.getLogger(__name__)


def assemble_samples(
    lines: Iterator[str],
    header: WavHeader,
    data_record: HexRecord,
) -> SampleBuffer:
    """Drain the remaining data records into a SampleBuffer.

    Args:
        lines: Iterator positioned just after the three header records.
        header: Parsed header; its data_size sizes the initial reservation.
        data_record: Header record 3, whose last four bytes seed the buffer.

    Returns:
        The filled SampleBuffer. Its effective_size is the number of
        payload bytes actually recovered.
    """
    buffer = SampleBuffer(capacity=header.data_size + RECORD_WIDTH)
    buffer.append(data_record.byte_values[RECORD_WIDTH - SEED_BYTES:])

    records = 0
    while True:
        record, tokens = read_record(lines)
        if record is not None and record.is_full:
            buffer.append(record.byte_values)
            records += 1
            continue
        if record is not None and tokens > 1:
            buffer.append(record.byte_values[:tokens - 1])
            records += 1
        break

    logger.info(
        "Assembled %d data record(s): %d bytes (declared %d)",
        records, buffer.effective_size, header.data_size,
    )
    return buffer
