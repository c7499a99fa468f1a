# tests/config/test_builder.py
"""
retro_disasm.config.builderモジュールの単体テスト。
"""
import pytest

from retro_disasm.config.builder import DisassemblerBuilder
from retro_disasm.config.loader import ConfigLoader
from retro_disasm.config.models import ProjectConfig
from retro_disasm.machines.spectrum import SpectrumRomDisassembler
from retro_disasm.machines.z88 import Z88Disassembler

# @intent:test_suite プロジェクト定義からエンジンを組み立てる処理の検証。

class TestDisassemblerBuilder:
    @pytest.fixture
    def builder(self):
        return DisassemblerBuilder()

    def test_default_z80_whole_buffer(self, builder):
        output = builder.run(ProjectConfig(), bytes([0x00, 0xC9]))
        assert [item.instruction for item in output] == ["nop", "ret"]

    def test_mos6502(self, builder):
        config = ProjectConfig(architecture="MOS6502", base_address=0xC000, start=0xC000)
        output = builder.run(config, bytes([0xA9, 0x10, 0x60]))
        assert [item.instruction for item in output] == ["lda #$10", "rts"]

    def test_unsupported_architecture(self, builder):
        with pytest.raises(ValueError, match="Unsupported architecture: MC6800"):
            builder.build(ProjectConfig(architecture="MC6800"), b"\x00")

    def test_unsupported_machine(self, builder):
        with pytest.raises(ValueError, match="Unsupported machine: C64"):
            builder.build(ProjectConfig(machine="C64"), b"\x00")

    @pytest.mark.parametrize("machine, expected", [
        ("SPECTRUM48", SpectrumRomDisassembler),
        ("spectrum128", SpectrumRomDisassembler),
        ("SPECTRUMNEXT", SpectrumRomDisassembler),
        ("Z88", Z88Disassembler),
    ])
    def test_machine_extension(self, builder, machine, expected):
        engine = builder.build(ProjectConfig(machine=machine), b"\x00")
        assert isinstance(engine.custom_disassembler, expected)

    # @intent:test_case_rom_page 設定したROMページが拡張に渡されることを検証します。
    def test_static_rom_page(self, builder):
        config = ProjectConfig(machine="SPECTRUM128", rom_page=0)
        output = builder.run(config, bytes([0xEF, 0x5E, 0x33]))
        assert output.items[0].hard_comment == "(Call Spectrum 48 ROM)"
        assert config.options.get_rom_page is None

    def test_sections_and_comments_from_yaml(self, builder):
        config = ConfigLoader().load_from_string("""
sections:
  - {start: 0, end: 1, type: disassemble}
  - {start: 2, end: 3, type: words}
comments:
  1: back to caller
  2: table
""")
        output = builder.run(config, bytes([0x00, 0xC9, 0x34, 0x12]))
        assert [item.instruction for item in output] == ["nop", "ret", ".defw $1234"]
        assert output.get(0x0001).comment == "back to caller"
        assert output.get(0x0002).comment == "table"

    def test_range_outside_buffer(self, builder):
        config = ProjectConfig(start=0x8000, end=0x8FFF)
        assert builder.run(config, bytes([0x00])) is None
