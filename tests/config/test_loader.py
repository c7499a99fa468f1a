# tests/config/test_loader.py
"""
retro_disasm.config.loaderモジュールの単体テスト。
YAML形式のプロジェクト定義の読み込みを検証します。
"""
import pytest

from retro_disasm.config.loader import ConfigLoader, parse_int
from retro_disasm.core.section import MemorySection, MemorySectionType

# @intent:test_suite プロジェクト定義ローダーの検証。

class TestConfigLoader:
    @pytest.fixture
    def loader(self):
        return ConfigLoader()

    def test_load_full_project(self, loader, tmp_path):
        config_file = tmp_path / "project.yaml"
        config_file.write_text("""
architecture: Z80
machine: spectrum48
base_address: 0x0000
start: "$0000"
end: 0x3FFF
options:
  decimal_mode: true
  no_label_prefix: false
  allow_extended_set: true
  rom_page: 0
sections:
  - {start: 0x0000, end: 0x0FFF, type: DISASSEMBLE}
  - {start: 0x1000, end: "$10FF", type: bytes}
  - {start: 0x1100, end: 0x11FF, type: calculator}
partition_labels: [R0, R0]
comments:
  0x0000: entry point
""")
        config = loader.load_from_file(str(config_file))

        assert config.architecture == "Z80"
        assert config.machine == "SPECTRUM48"
        assert (config.start, config.end) == (0x0000, 0x3FFF)
        assert config.rom_page == 0
        assert config.options.decimal_mode is True
        assert config.options.allow_extended_set is True
        assert config.options.partition_labels == ["R0", "R0"]
        assert config.sections == [
            MemorySection(0x0000, 0x0FFF),
            MemorySection(0x1000, 0x10FF, MemorySectionType.BYTE_ARRAY),
            MemorySection(0x1100, 0x11FF, MemorySectionType.CUSTOM),
        ]
        assert config.comments == {0x0000: "entry point"}

    def test_defaults(self, loader):
        config = loader.load_from_string("{}")
        assert config.architecture == "Z80"
        assert config.machine is None
        assert config.sections == []
        assert config.rom_page is None
        assert config.end == 0xFFFF

    def test_empty_document(self, loader):
        assert loader.load_from_string("").architecture == "Z80"

    # @intent:test_case_arch_alias 6510は6502の別名として扱われることを検証します。
    def test_architecture_alias(self, loader):
        assert loader.load_from_string("architecture: m6510").architecture == "MOS6502"

    def test_unknown_section_type(self, loader):
        with pytest.raises(ValueError, match="Unknown section type"):
            loader.load_from_string("sections: [{start: 0, end: 1, type: sprites}]")

    def test_invalid_integer(self, loader):
        with pytest.raises(ValueError, match="Invalid integer format"):
            loader.load_from_string("base_address: nowhere")

    def test_non_mapping_document(self, loader):
        with pytest.raises(ValueError):
            loader.load_from_string("- just\n- a list\n")


class TestParseInt:
    @pytest.mark.parametrize("value, expected", [
        (42, 42),
        ("0x1F", 0x1F),
        ("0X1f", 0x1F),
        ("$C000", 0xC000),
        ("123", 123),
    ])
    def test_valid(self, value, expected):
        assert parse_int(value) == expected

    @pytest.mark.parametrize("value", ["", "$", "0xZZ", None, True, 1.5])
    def test_invalid(self, value):
        with pytest.raises(ValueError, match="Invalid integer format"):
            parse_int(value)
