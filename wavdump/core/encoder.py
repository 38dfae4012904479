"""Re-encoding of the sample buffer into hex-dump records.

WHY: The output must line up with the input dump: the data section
starts at 0x20 with header record 3's layout, every record but the last
carries 16 bytes, and the last record is padded to the fixed column.
Existing consumers compare output byte-for-byte, so the final record's
copy rules are kept exactly as the tool has always produced them.

HOW: The first record reuses header record 3's bytes 0-11 with the
buffer's (possibly modified) first four bytes. The rest of the buffer
is walked 16 bytes at a time. The final record copies at most
data_size - written bytes over the previous record's values and emits
effective_size - written of them.

RULES:
- Addresses: 0x20, then +0x10 per record
- A record is emitted as full only while more than 16 bytes remain
- Final record length = effective_size - written
- Final record copy bound = data_size - written; slots past that bound
  keep the previous record's values
"""

from __future__ import annotations

from typing import Iterator, List

from wavdump.config import ADDRESS_STEP, DATA_START_ADDRESS, RECORD_WIDTH, SEED_BYTES
from wavdump.core.hexline import encode_record
from wavdump.core.ir import HexRecord, SampleBuffer, WavHeader


def encode_samples(
    buffer: SampleBuffer,
    header: WavHeader,
    data_record: HexRecord,
) -> Iterator[str]:
    """Yield the data-section records for *buffer*.

    Args:
        buffer: The assembled (and possibly effect-modified) payload.
        header: Parsed header; data_size bounds the final record's copy.
        data_record: Header record 3, the layout of the first record.

    Yields:
        Record lines including their trailing newline.
    """
    data = buffer.data
    effective_size = buffer.effective_size
    address = DATA_START_ADDRESS

    values: List[int] = list(data_record.byte_values[:RECORD_WIDTH - SEED_BYTES])
    values.extend(data[:SEED_BYTES])
    yield encode_record(address, RECORD_WIDTH, values)

    written = SEED_BYTES
    while written < effective_size:
        address += ADDRESS_STEP
        remaining = effective_size - written
        if remaining > RECORD_WIDTH:
            values = list(data[written:written + RECORD_WIDTH])
            yield encode_record(address, RECORD_WIDTH, values)
            written += RECORD_WIDTH
        else:
            copied = max(0, min(RECORD_WIDTH, header.data_size - written))
            chunk = data[written:written + copied]
            values[:len(chunk)] = chunk
            yield encode_record(address, remaining, values)
            written = effective_size
