# tests/machines/test_spectrum.py
"""
ZX Spectrum ROM拡張（RST 08h エラー報告、RST 28h 電卓、128K ROMの48K呼び出し）の統合テスト。
"""
import pytest

from retro_disasm.arch.z80.disassembler import create_z80_disassembler
from retro_disasm.config.models import DisassemblyOptions
from retro_disasm.core.section import MemorySection, MemorySectionType
from retro_disasm.machines.calculator import indexed_operation
from retro_disasm.machines.spectrum import (
    SPECTRUM128_PAGES, SPECTRUMP3_PAGES, SpectrumMode, SpectrumRomDisassembler, SpectrumRomFlags,
)


def run(data, rom_pages=None, rom_page=None, sections=None, **options):
    if rom_page is not None:
        options["get_rom_page"] = lambda: rom_page
    if sections is None:
        sections = [MemorySection(0x0000, len(data) - 1)]
    engine = create_z80_disassembler(sections, bytes(data), DisassemblyOptions(**options))
    custom = SpectrumRomDisassembler(rom_pages)
    engine.set_custom_disassembler(custom)
    return engine.disassemble(), custom

def lines(output):
    return [(item.instruction, item.hard_comment) for item in output]

# @intent:test_suite ZX Spectrum ROMの呼び出し規約の解釈を検証します。

class TestReportError:
    # @intent:test_case_rst08 RST 08h の直後のバイトがエラーコードとして出力されることを検証します。
    def test_error_code_after_rst08(self):
        output, custom = run([0xCF, 0x05, 0xC9])
        assert lines(output) == [
            ("rst $08", "(Report error)"),
            (".defb $05", "(error code: $05)"),
            ("ret", None),
        ]
        assert custom.mode == SpectrumMode.IDLE

    def test_error_code_at_end_of_buffer(self):
        output, _ = run([0xCF])
        assert lines(output) == [("rst $08", "(Report error)")]


class TestCalculator:
    def test_simple_calculation(self):
        output, _ = run([0xEF, 0x02, 0x38, 0xC9])
        assert lines(output) == [
            ("rst $28", "(Invoke Calculator)"),
            (".defb $02", "(delete)"),
            (".defb $38", "(end-calc)"),
            ("ret", None),
        ]

    def test_calculator_call_address(self):
        output, _ = run([0xCD, 0x5E, 0x33, 0x38])
        assert lines(output) == [("call L335E", "(Invoke Calculator)"), (".defb $38", "(end-calc)")]

    # @intent:test_case_jump_true 電卓内の相対ジャンプでラベルが生成されることを検証します。
    def test_jump_true_creates_label(self):
        output, _ = run([0xEF, 0x00, 0x02, 0x38, 0x00])
        assert output.items[1].instruction == ".defb $00, $02"
        assert output.items[1].hard_comment == "(jump-true: L0004)"
        assert output.labels[0x0004].references == [0x0001]
        assert output.get(0x0004).instruction == "nop"
        assert output.get(0x0004).has_label is True

    def test_jump_leaves_calculator(self):
        output, custom = run([0xEF, 0x33, 0x00, 0xC9])
        assert lines(output)[1] == (".defb $33, $00", "(jump: L0002)")
        assert output.items[2].instruction == "ret"
        assert custom.mode == SpectrumMode.IDLE

    def test_stk_data_literal(self):
        output, _ = run([0xEF, 0x34, 0x40, 0xB0, 0x00, 0x0A, 0x38])
        assert lines(output)[1:] == [
            (".defb $34", "(stk-data)"),
            (".defb $40, $B0, $00, $0A", "(10.000000)"),
            (".defb $38", "(end-calc)"),
        ]

    def test_series_literals(self):
        output, _ = run([0xEF, 0x86] + [0x31, 0x00] * 6 + [0x38])
        assert len(output) == 9
        assert output.items[1].hard_comment == "(series-06)"
        assert all(item.hard_comment == "(1.000000)" for item in output.items[2:8])
        assert output.items[8].hard_comment == "(end-calc)"

    @pytest.mark.parametrize("code, comment", [
        (0xA1, "(stk-one)"),
        (0xA3, "(stk-pi-half)"),
        (0xC2, "(st-mem-2)"),
        (0xE0, "(get-mem-0)"),
        (0x1F, "(sin)"),
        (0x42, "(calc code: $42)"),
    ])
    def test_operation_names(self, code, comment):
        output, _ = run([0xEF, code, 0x38])
        assert output.items[1].hard_comment == comment

    def test_decimal_mode(self):
        output, _ = run([0xEF, 0x00, 0x02, 0x38, 0x00], decimal_mode=True)
        assert output.items[1].instruction == ".defb 0, 2"

    def test_indexed_operation_out_of_range(self):
        assert indexed_operation(0x3F, 7) == "(calc code: 63/7)"

    # @intent:test_case_custom_section CUSTOMセクション全体が電卓バイトコードとして出力されることを検証します。
    def test_custom_section(self):
        sections = [MemorySection(0x0000, 0x0002, MemorySectionType.CUSTOM)]
        output, _ = run([0x02, 0x04, 0x38], sections=sections)
        assert lines(output) == [
            (".defb $02", "(delete)"),
            (".defb $04", "(multiply)"),
            (".defb $38", "(end-calc)"),
        ]


class TestRomPages:
    # @intent:test_case_rom48_call 128K エディタROMでは RST 28h が48K ROM呼び出しとして扱われることを検証します。
    def test_rom48_call_on_128_editor_page(self):
        output, _ = run([0xEF, 0x5E, 0x33, 0xC9], SPECTRUM128_PAGES, rom_page=0)
        assert lines(output) == [
            ("rst $28", "(Call Spectrum 48 ROM)"),
            (".defw $335E", None),
            ("ret", None),
        ]
        vector = output.items[1]
        assert vector.symbol_value == 0x335E
        assert vector.opcodes == [0x5E, 0x33]
        assert output.labels == {}

    def test_48k_page_of_128_machine(self):
        output, _ = run([0xEF, 0x38], SPECTRUM128_PAGES, rom_page=1)
        assert lines(output)[0] == ("rst $28", "(Invoke Calculator)")

    def test_rst08_is_plain_on_editor_page(self):
        output, _ = run([0xCF, 0x05], SPECTRUM128_PAGES, rom_page=0)
        assert lines(output) == [("rst $08", None), ("dec b", None)]

    def test_unknown_page_has_no_conventions(self):
        output, _ = run([0xCF, 0x05], SPECTRUM128_PAGES, rom_page=5)
        assert lines(output)[0] == ("rst $08", None)

    def test_page_from_address_bank(self):
        output, custom = run([0x00], SPECTRUMP3_PAGES)
        assert custom.flags_for(0x0000) == SpectrumRomFlags.RST28_ROM48_CALL
        assert custom.flags_for(0xC000) == SpectrumRomFlags.SPECTRUM48

    def test_state_reset_between_sections(self):
        sections = [MemorySection(0x0000, 0x0000), MemorySection(0x0001, 0x0002)]
        output, _ = run([0xCF, 0x00, 0xC9], sections=sections)
        assert lines(output) == [("rst $08", "(Report error)"), ("nop", None), ("ret", None)]

    # @intent:test_case_address_offset 拡張が出力するアイテムとラベルにもアドレスオフセットが適用されることを検証します。
    def test_address_offset(self):
        data = [0xCF, 0x05, 0xEF, 0x00, 0x02, 0x38, 0x00]
        engine = create_z80_disassembler(
            [MemorySection(0x0000, len(data) - 1)], bytes(data),
            DisassemblyOptions(get_rom_page=lambda: 0), address_offset=0x8000)
        engine.set_custom_disassembler(SpectrumRomDisassembler())
        output = engine.disassemble()
        assert [item.address for item in output] == [0x8000, 0x8001, 0x8002, 0x8003, 0x8005, 0x8006]
        assert output.items[3].hard_comment == "(jump-true: L8006)"
        assert output.labels[0x8006].references == [0x8003]
        assert output.get(0x8006).has_label is True
