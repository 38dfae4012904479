"""Exception types for the wavdump pipeline.

WHY: The CLI maps each failure class to its own message and exit status.
Typed exceptions let it do that without inspecting message text.

HOW: Three small exception classes, each subclassing the closest
built-in so generic handlers still catch them.

RULES:
- Every error is terminal; nothing in the pipeline retries
- UsageError is raised before any stream I/O happens
"""


class UsageError(ValueError):
    """Raised for invalid command-line arguments.

    WHY: Wrong argument count, an unknown effect selector, or a duration
    that is not a non-negative integer must be reported before any input
    is read.

    HOW: Raised by the CLI's argument parser in place of argparse's own
    exit-on-error behavior.
    """


class FormatError(ValueError):
    """Raised when the input dump is not a WAV layout this tool can process.

    WHY: A truncated header record, a missing RIFF/WAVE/data marker, or an
    unsupported frame size means no meaningful output can be produced.

    HOW: Raised by the header parser. Header lines already echoed stay in
    the output.

    RULES:
    - Message names the record (1-3) or the field that failed
    """


class ResourceError(MemoryError):
    """Raised when the sample buffer cannot be allocated or grown."""
