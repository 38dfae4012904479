"""Hex-line codec: one hex-dump record to and from text.

WHY: Every other stage sees the dump one record at a time. The decoder
must accept a short final record without complaint and report exactly
how far it got, because callers tell a full record from the end of a
section by that count alone.

HOW: decode_record() is a small tokenizer that behaves like a streaming
scanner: it matches the address, then up to 16 byte tokens, then the
16-character column, and stops at the first token it cannot match. The
returned token count (address + bytes + characters) is 33 for a full
record. encode_record() renders the fixed-width layout, padding missing
byte slots with three spaces so the character column never moves.

RULES:
- Address: 1-8 hex digits followed by ":"; otherwise 0 tokens
- Byte token: one space, two hex digits, then whitespace or end of line
- Characters are only scanned after all 16 byte tokens matched
- Both the one-space layout (this encoder) and the two-space layout
  (xxd -g1) are accepted before the character column
- Blank lines between records are skipped by read_record()
"""

from __future__ import annotations

import re
from typing import Iterator, List, Optional, Sequence, Tuple

from wavdump.config import ADDRESS_MASK, RECORD_WIDTH
from wavdump.core.ir import HexRecord, to_char

_ADDRESS_RE = re.compile(r"\s*([0-9a-fA-F]{1,8}):")
_BYTE_RE = re.compile(r" ([0-9a-fA-F]{2})(?=\s|$)")


def decode_record(line: str) -> Tuple[Optional[HexRecord], int]:
    """Decode one hex-dump line.

    Args:
        line: One line of the dump, with or without its newline.

    Returns:
        ``(record, tokens)``. ``record`` is None when no address could be
        read. For a short record it holds the byte values recognized
        before scanning stopped and ``tokens == 1 + len(byte_values)``.
        A full record with its complete character column gives 33.
    """
    text = line.rstrip("\r\n")

    match = _ADDRESS_RE.match(text)
    if match is None:
        return None, 0
    record = HexRecord(address=int(match.group(1), 16))
    tokens = 1
    pos = match.end()

    for _ in range(RECORD_WIDTH):
        match = _BYTE_RE.match(text, pos)
        if match is None:
            return record, tokens
        record.byte_values.append(int(match.group(1), 16))
        tokens += 1
        pos = match.end()

    # Skip the single separator after the last byte token
    chars = text[pos + 1:]
    if len(chars) >= RECORD_WIDTH:
        chars = chars[-RECORD_WIDTH:]
    else:
        chars = chars.lstrip()
    tokens += len(chars)
    return record, tokens


def read_record(lines: Iterator[str]) -> Tuple[Optional[HexRecord], int]:
    """Decode the next non-blank line from *lines*.

    Returns ``(None, 0)`` at end of input.
    """
    for line in lines:
        if line.strip():
            return decode_record(line)
    return None, 0


def encode_record(address: int, count: int, values: Sequence[int]) -> str:
    """Render one record in the fixed-width hex-dump layout.

    Args:
        address: Line address, rendered as 8 hex digits (modulo 2**32).
        count: Number of byte values to render, 1 through 16.
        values: At least *count* byte values; extra values are ignored.

    Returns:
        The record text including its trailing newline.

    Raises:
        ValueError: If *count* is outside 1..16 or *values* is too short.
    """
    if count <= 0 or count > RECORD_WIDTH:
        raise ValueError("Record length must be 1-{}, got {}".format(RECORD_WIDTH, count))
    if len(values) < count:
        raise ValueError("Record needs {} values, got {}".format(count, len(values)))

    used: List[int] = [values[i] & 0xFF for i in range(count)]
    parts = ["{:08x}: ".format(address & ADDRESS_MASK)]
    parts.extend("{:02x} ".format(value) for value in used)
    # Pad missing slots so the character column stays aligned
    parts.append("   " * (RECORD_WIDTH - count))
    parts.extend(to_char(value) for value in used)
    parts.append("\n")
    return "".join(parts)
