"""Unit tests for the hex-line codec.

WHY: Every stage reads or writes the dump through this codec. A wrong
token count makes the assembler stop early or swallow the character
column; a misaligned record breaks any tool that re-reads the output
with fixed columns.

HOW: Tests cover decoding of full, short, two-space (xxd -g1), and
malformed lines, blank-line skipping in read_record, and the exact
layout produced by encode_record.

RULES:
- A full record decodes to 33 tokens
- A short record decodes to 1 + number of byte values
- The character column of an encoded record always starts at offset 58
"""

import io

import pytest

from wavdump.core.hexline import decode_record, encode_record, read_record
from wavdump.core.ir import HexRecord, to_char

RIFF_LINE_XXD = (
    "00000000: 52 49 46 46 24 08 00 00 57 41 56 45 66 6d 74 20  RIFF$...WAVEfmt \n"
)


class TestDecodeFullRecord:
    """A complete 16-byte line yields 33 tokens."""

    def test_encoded_line_round_trips(self):
        values = list(range(0x30, 0x40))
        record, tokens = decode_record(encode_record(0x40, 16, values))
        assert tokens == 33
        assert record.address == 0x40
        assert record.byte_values == values
        assert record.is_full

    def test_xxd_two_space_layout(self):
        record, tokens = decode_record(RIFF_LINE_XXD)
        assert tokens == 33
        assert record.address == 0
        assert record.rendered_chars == "RIFF$...WAVEfmt "

    def test_character_column_starting_with_space(self):
        values = [0x20] + [0x41] * 15
        line = encode_record(0, 16, values)
        assert line.endswith(": 20 " + "41 " * 15 + " " + "A" * 15 + "\n")
        record, tokens = decode_record(line)
        assert tokens == 33
        assert record.byte_values == values

    def test_uppercase_hex_digits(self):
        line = "0000ABCD: " + "FF " * 16 + "." * 16
        record, tokens = decode_record(line)
        assert tokens == 33
        assert record.address == 0xABCD
        assert record.byte_values == [255] * 16

    def test_missing_character_column(self):
        line = "00000000:" + " 00" * 16
        record, tokens = decode_record(line)
        assert tokens == 17
        assert record.is_full

    def test_short_character_column_counts_what_is_there(self):
        line = "00000000: " + "41 " * 16 + "AAAA"
        record, tokens = decode_record(line)
        assert tokens == 21

    def test_windows_line_ending(self):
        line = encode_record(0x10, 16, [0x61] * 16).replace("\n", "\r\n")
        _, tokens = decode_record(line)
        assert tokens == 33


class TestDecodeShortRecord:
    """A short final line stops at the padding and reports what it matched."""

    def test_five_byte_record(self):
        line = encode_record(0x30, 5, [1, 2, 3, 4, 5])
        record, tokens = decode_record(line)
        assert tokens == 6
        assert record.address == 0x30
        assert record.byte_values == [1, 2, 3, 4, 5]
        assert not record.is_full

    def test_hex_looking_characters_are_not_bytes(self):
        # Characters "abcd" sit after the padding, not at a byte column
        line = encode_record(0x30, 4, [0x61, 0x62, 0x63, 0x64])
        record, tokens = decode_record(line)
        assert tokens == 5
        assert record.byte_values == [0x61, 0x62, 0x63, 0x64]

    def test_fifteen_byte_record(self):
        line = encode_record(0x30, 15, list(range(15)))
        record, tokens = decode_record(line)
        assert tokens == 16
        assert len(record.byte_values) == 15


class TestDecodeMalformed:
    """Malformed input halts scanning; a missing address gives 0 tokens."""

    def test_bad_byte_digit_stops_scan(self):
        record, tokens = decode_record("00000010: 01 02 zz 04 05")
        assert tokens == 3
        assert record.byte_values == [1, 2]

    def test_three_digit_token_stops_scan(self):
        record, tokens = decode_record("00000010: 01 023 04")
        assert tokens == 2
        assert record.byte_values == [1]

    def test_missing_address(self):
        assert decode_record("52 49 46 46") == (None, 0)

    def test_bad_address_digit(self):
        assert decode_record("0000001g: 00 01") == (None, 0)

    def test_text_line(self):
        assert decode_record("hello world") == (None, 0)

    def test_empty_line(self):
        assert decode_record("") == (None, 0)


class TestReadRecord:
    """read_record pulls the next non-blank line from an iterator."""

    def test_skips_blank_lines(self):
        lines = iter(["\n", "   \n", encode_record(0x10, 2, [7, 8])])
        record, tokens = read_record(lines)
        assert tokens == 3
        assert record.byte_values == [7, 8]

    def test_end_of_input(self):
        assert read_record(iter([])) == (None, 0)
        assert read_record(iter(["\n", "\n"])) == (None, 0)

    def test_reads_from_text_stream(self):
        stream = io.StringIO(encode_record(0, 16, [0] * 16) + encode_record(0x10, 1, [9]))
        lines = iter(stream)
        assert read_record(lines)[1] == 33
        assert read_record(lines)[1] == 2
        assert read_record(lines) == (None, 0)


class TestEncodeRecord:
    """encode_record renders the fixed-width layout."""

    def test_full_record(self):
        line = encode_record(0, 16, list(b"RIFF$\x08\x00\x00WAVEfmt "))
        assert line == (
            "00000000: 52 49 46 46 24 08 00 00 57 41 56 45 66 6d 74 20 RIFF$...WAVEfmt \n"
        )

    def test_short_record_is_padded(self):
        line = encode_record(0x30, 5, [0x41, 0x42, 0x00, 0x7E, 0x7F])
        assert line == "00000030: 41 42 00 7e 7f " + " " * 33 + "AB.~.\n"

    @pytest.mark.parametrize("count", [1, 5, 15, 16])
    def test_character_column_is_fixed(self, count):
        line = encode_record(0x20, count, [0x5A] * 16)
        assert line.index("Z") == 58
        assert len(line) == 58 + count + 1

    def test_only_count_values_are_used(self):
        line = encode_record(0, 2, [1, 2, 3, 4])
        assert line.startswith("00000000: 01 02    ")
        assert decode_record(line)[0].byte_values == [1, 2]

    def test_address_wraps_to_32_bits(self):
        assert encode_record(0x100000020, 1, [0]).startswith("00000020: ")

    @pytest.mark.parametrize("count", [0, -1, 17])
    def test_invalid_count_raises(self, count):
        with pytest.raises(ValueError):
            encode_record(0, count, [0] * 17)

    def test_too_few_values_raises(self):
        with pytest.raises(ValueError):
            encode_record(0, 4, [1, 2])


class TestRendering:
    """Printable ASCII renders as itself, everything else as '.'."""

    def test_to_char_boundaries(self):
        assert to_char(0x1F) == "."
        assert to_char(0x20) == " "
        assert to_char(0x7E) == "~"
        assert to_char(0x7F) == "."
        assert to_char(0xFF) == "."

    def test_rendered_chars_match_byte_count(self):
        record = HexRecord(address=0, byte_values=[0x64, 0x61, 0x74, 0x61, 0x00])
        assert record.rendered_chars == "data."
