"""Core codec, data model and pipeline modules.

WHY: The core package holds everything between the text dump and the
effects: the record codec, the header parser, the sample buffer, and
the re-encoder. Effects only ever see the int16 view it hands them.

HOW: ir.py defines the data structures, hexline.py converts single
records, header.py and assembler.py decode the input, encoder.py writes
the data section back, and pipeline.py runs the stages in order.

RULES:
- Output layout must match the input layout byte for byte
- No effect-specific logic here
"""
