# tests/core/test_pragma.py
"""
プラグマ処理とデコードコンテキストの単体テスト。
"""
from retro_disasm.common.types import Replacement
from retro_disasm.config.models import DisassemblyOptions
from retro_disasm.core.context import DecodeContext
from retro_disasm.core.output import DisassemblyItem
from retro_disasm.core.pragma import MAX_PRAGMAS, expand_pragmas, format_label, split_pattern


class TestSplitPattern:
    def test_pattern_without_timing(self):
        assert split_pattern("nop", 4) == ("nop", 4, 0)

    def test_pattern_with_timing(self):
        assert split_pattern("ld bc,^W|10", 4) == ("ld bc,^W", 10, 0)

    def test_pattern_with_alternative_timing(self):
        assert split_pattern("jr nz,^r|12/7", 4) == ("jr nz,^r", 12, 7)

    def test_missing_pattern(self):
        assert split_pattern(None, 2) == ("", 2, 0)


class TestExpandPragmas:
    # @intent:test_case_cap 展開回数が上限で打ち切られることを検証します。
    def test_expansion_is_capped(self):
        ctx = DecodeContext(contents=b"")
        item = DisassemblyItem(0, instruction="^a^a^a^a^a^a")
        calls = []

        def expander(ctx, item, pragma):
            calls.append(pragma)
            return Replacement("x")

        expand_pragmas(ctx, item, expander)
        assert len(calls) == MAX_PRAGMAS
        assert item.instruction == "xxxx^a^a"

    def test_trailing_marker_is_left_alone(self):
        ctx = DecodeContext(contents=b"")
        item = DisassemblyItem(0, instruction="ld a,^")
        expand_pragmas(ctx, item, lambda c, i, p: Replacement("never"))
        assert item.instruction == "ld a,^"

    def test_symbol_metadata_from_last_value(self):
        ctx = DecodeContext(contents=b"")
        item = DisassemblyItem(0, instruction="op ^a,^b")
        values = {"a": Replacement("$10", 0x10), "b": Replacement("L0020", 0x20, is_label=True)}
        expand_pragmas(ctx, item, lambda c, i, p: values[p])
        assert item.instruction == "op $10,L0020"
        assert item.symbol_value == 0x20
        assert item.token_position == 7
        assert item.token_length == 5
        assert item.has_label_symbol is True


class TestFormatLabel:
    def test_label_formats(self):
        assert format_label(0x1234, DisassemblyOptions()) == "L1234"
        assert format_label(0x1234, DisassemblyOptions(no_label_prefix=True)) == "$1234"
        assert format_label(0x1234, DisassemblyOptions(decimal_mode=True)) == "L04660"


class TestDecodeContext:
    def test_fetch_outside_buffer(self):
        ctx = DecodeContext(contents=b"\x42", base_address=0x100, offset=0x100)
        assert ctx.fetch() == 0x42
        assert ctx.fetch() == 0
        assert ctx.overflow is True
        assert ctx.offset == 0x101
        assert ctx.opcodes == [0x42]

    def test_fetch_word_little_endian(self):
        ctx = DecodeContext(contents=b"\x34\x12")
        assert ctx.fetch_word() == 0x1234

    def test_peek_does_not_advance(self):
        ctx = DecodeContext(contents=b"\x01\x02")
        assert ctx.peek(1).opcode == 0x02
        assert ctx.offset == 0
        assert ctx.opcodes == []

    def test_byte_at(self):
        ctx = DecodeContext(contents=b"\x01\x02", base_address=0x10)
        assert ctx.byte_at(0x11) == 0x02
        assert ctx.byte_at(0x00) == 0
