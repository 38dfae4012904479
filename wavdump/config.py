"""Configuration constants and .env loading.

WHY: Centralizes the fixed layout of the hex-dump format and the few
runtime knobs so they are easy to find and override. The record width,
token counts, and data-section address are plain constants, not buried
in the codec.

HOW: python-dotenv loads the .env file on import. Constants are defined
at module level. load_log_level() turns the WAVDUMP_LOG_LEVEL environment
variable into a logging level with a clear error when it is invalid.

RULES:
- A full record is 16 byte values → 33 scanned tokens (address + 16 + 16)
- The re-encoded data section always starts at address 0x20
- Runtime overrides come from the environment, never from code
"""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

# Load .env from the project root (where the script is run from)
load_dotenv()

# ---------------------------------------------------------------------------
# Hex-dump record layout
# ---------------------------------------------------------------------------

RECORD_WIDTH = 16
"""Byte values per hex-dump record."""

FULL_RECORD_TOKENS = 1 + RECORD_WIDTH + RECORD_WIDTH
"""Tokens scanned from a full record: address, 16 bytes, 16 characters."""

ADDRESS_MASK = 0xFFFFFFFF

# ---------------------------------------------------------------------------
# WAV layout
# ---------------------------------------------------------------------------

DATA_START_ADDRESS = 0x20
"""Address of the first re-encoded data record (header record 3)."""

ADDRESS_STEP = 0x10

SEED_BYTES = 4
"""Payload bytes carried in the last four slots of header record 3."""

SUPPORTED_BYTES_PER_SAMPLE = frozenset({2, 4})

INPUT_ENCODING = "latin-1"
"""Input decoding: one character per byte, so any byte in a character
column reads without error and column widths match the raw dump."""

# ---------------------------------------------------------------------------
# Runtime overrides
# ---------------------------------------------------------------------------

DEFAULT_LOG_LEVEL = os.getenv("WAVDUMP_LOG_LEVEL", "WARNING")

MAX_INITIAL_RESERVE = int(os.getenv("WAVDUMP_MAX_INITIAL_RESERVE", str(16 * 1024 * 1024)))
"""Upper bound on the sample buffer's up-front reservation, in bytes."""


def load_log_level(name: str | None = None) -> int:
    """Resolve a logging level name to its numeric value.

    WHY: The log level comes from the environment as free text. A typo
    should fail loudly instead of silently logging nothing.

    HOW: Looks the upper-cased name up in the logging module's level
    table. Falls back to DEFAULT_LOG_LEVEL when no name is given.

    RULES:
    - Accepts DEBUG, INFO, WARNING, ERROR, CRITICAL (any case)
    - Raises ValueError for anything else
    """
    level_name = (name or DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise ValueError(
            "Unknown log level '{}'. Set WAVDUMP_LOG_LEVEL to one of "
            "DEBUG, INFO, WARNING, ERROR, CRITICAL.".format(level_name)
        )
    return level
