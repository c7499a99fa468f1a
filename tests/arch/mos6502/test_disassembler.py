# tests/arch/mos6502/test_disassembler.py
"""
retro_disasm.arch.mos6502.disassemblerモジュールの単体テスト。
"""
import pytest

from retro_disasm.arch.mos6502.disassembler import create_mos6502_disassembler, disassemble
from retro_disasm.config.models import DisassemblyOptions
from retro_disasm.core.section import MemorySection, MemorySectionType

# @intent:test_suite 6502逆アセンブラのアドレッシングモードごとの出力を検証します。

def first_item(data, base_address=0, **options):
    output = disassemble(bytes(data), start_addr=base_address, options=DisassemblyOptions(**options),
                         base_address=base_address)
    return output.items[0]


class TestAddressingModes:
    @pytest.mark.parametrize("data, expected", [
        ([0xEA], "nop"),
        ([0x0A], "asl"),
        ([0xA9, 0x10], "lda #$10"),
        ([0x85, 0x20], "sta $20"),
        ([0xB5, 0x20], "lda $20,x"),
        ([0x96, 0x20], "stx $20,y"),
        ([0x8D, 0x00, 0x80], "sta $8000"),
        ([0xBD, 0x00, 0x80], "lda $8000,x"),
        ([0xBE, 0x00, 0x80], "ldx $8000,y"),
        ([0xA1, 0x20], "lda ($20,x)"),
        ([0xB1, 0x20], "lda ($20),y"),
        ([0x6C, 0x34, 0x12], "jmp ($1234)"),
    ])
    def test_decode(self, data, expected):
        assert first_item(data).instruction == expected

    # @intent:test_case_undocumented 非公式命令もデコードされることを検証します。
    def test_undocumented_opcodes(self):
        assert first_item([0xA7, 0x20]).instruction == "lax $20"
        assert first_item([0x02]).instruction == "jam"


class TestLabels:
    def test_jump_creates_label(self):
        output = disassemble(bytes([0x4C, 0x00, 0xC0]), start_addr=0xC000, base_address=0xC000)
        item = output.get(0xC000)
        assert item.instruction == "jmp LC000"
        assert item.has_label is True
        assert output.labels[0xC000].references == [0xC000]

    def test_subroutine_call(self):
        item = first_item([0x20, 0x00, 0x10])
        assert item.instruction == "jsr L1000"
        assert item.symbol_value == 0x1000

    # @intent:test_case_branch 分岐命令の飛び先が命令の次のアドレスを基準に計算されることを検証します。
    def test_branch_backward(self):
        assert first_item([0xD0, 0xFE]).instruction == "bne L0000"

    def test_branch_with_address_offset(self):
        engine = create_mos6502_disassembler([MemorySection(0x0000, 0x0001)], bytes([0xD0, 0xFE]), address_offset=0x4000)
        output = engine.disassemble()
        item = output.items[0]
        assert (item.address, item.instruction) == (0x4000, "bne L4000")
        assert item.has_label is True
        assert output.labels[0x4000].references == [0x4000]

    def test_branch_forward(self):
        output = disassemble(bytes([0x10, 0x01, 0xEA, 0x60]))
        assert output.items[0].instruction == "bpl L0003"
        assert output.get(0x0003).has_label is True


class TestFormatting:
    def test_decimal_mode(self):
        assert first_item([0xA9, 0x10], decimal_mode=True).instruction == "lda #16"
        assert first_item([0x8D, 0x00, 0x80], decimal_mode=True).instruction == "sta 32768"

    def test_cycles(self):
        assert first_item([0xEA]).tstates == 2
        assert first_item([0xB1, 0x20]).tstates == 5
        assert first_item([0x0A]).tstates == 2

    def test_data_directives(self):
        sections = [
            MemorySection(0x0000, 0x0001, MemorySectionType.BYTE_ARRAY),
            MemorySection(0x0002, 0x0003, MemorySectionType.WORD_ARRAY),
            MemorySection(0x0004, 0x0013, MemorySectionType.SKIP),
        ]
        engine = create_mos6502_disassembler(sections, bytes([0x01, 0x02, 0x34, 0x12] + [0] * 16))
        output = engine.disassemble()
        assert [item.instruction for item in output] == [".byte $01, $02", ".word $1234", ".skip $0010"]

    def test_truncated_operand(self):
        item = first_item([0xAD, 0x00])
        assert item.instruction == "lda $0000"
        assert item.opcodes == [0xAD, 0x00]
