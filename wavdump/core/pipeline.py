"""End-to-end processing of one hex dump.

WHY: The CLI, the tests, and any embedding code need one call that runs
header parsing, sample assembly, an effect, and re-encoding in the right
order against plain text streams.

HOW: parse_header() echoes header records 1 and 2 and returns the
header; assemble_samples() drains the rest of the input; the selected
effect modifies an int16 view of the buffer in place; encode_samples()
writes the data section. Output is written as it is produced.

RULES:
- Effects see data_size // 2 samples (the declared size)
- The re-encoder writes effective_size bytes (the decoded size)
- FormatError / ResourceError propagate to the caller unchanged
"""

from __future__ import annotations

import logging
from typing import Iterable, TextIO

from wavdump.core.assembler import assemble_samples
from wavdump.core.encoder import encode_samples
from wavdump.core.header import check_supported, parse_header
from wavdump.core.ir import WavHeader
from wavdump.effects import EFFECTS

logger = logging.getLogger(__name__)


def process_dump(
    source: Iterable[str],
    out: TextIO,
    effect_key: str,
    milliseconds: int,
) -> WavHeader:
    """Apply one effect to the hex dump read from *source*.

    Args:
        source: Lines of the input dump (a text file or any iterable).
        out: Text stream receiving the output dump.
        effect_key: Key in EFFECTS ("fade_in", "fade_out" or "pan").
        milliseconds: Effect duration, non-negative.

    Returns:
        The parsed WavHeader.

    Raises:
        KeyError: If effect_key is not registered.
        FormatError: If the header cannot be processed.
        ResourceError: If the sample buffer cannot be allocated.
    """
    effect = EFFECTS[effect_key]()
    lines = iter(source)

    header, data_record = parse_header(lines, out)
    check_supported(header)

    buffer = assemble_samples(lines, header, data_record)

    samples = buffer.as_samples(header.num_samples)
    logger.info(
        "Applying %s (%d ms) to %d samples", effect.name, milliseconds, len(samples)
    )
    effect.apply(samples, header.channels, header.sample_rate, milliseconds)
    del samples

    for line in encode_samples(buffer, header, data_record):
        out.write(line)
    return header
