"""wavdump: amplitude effects for hex-dumped WAV files.

WHY: Some capture and teaching workflows only ever see a WAV file as the
text of a hex dump (``00000000: 52 49 46 46 ...  RIFF....``). Editing the
audio means decoding that text back to PCM, touching the samples, and
producing a dump that the same tooling can read again.

HOW: Three-stage pipeline: decode (hex-line codec, header parser, sample
assembler), transform (fade-in, fade-out, pan effects on int16 samples),
encode (re-encoder back to fixed-width hex records). Each stage is
independently testable.

RULES:
- Input and output share one grammar, so runs can be chained
- Only the plain ``RIFF``/``WAVEfmt ``/``data`` PCM layout is supported
- The header records are passed through byte-for-byte
"""

__version__ = "0.1.0"
