# tests/cli/test_disasm.py
"""
retro-disasm コマンドの統合テスト。
"""
import pytest
from click.testing import CliRunner

from retro_disasm import __version__
from retro_disasm.cli.disasm import main

# @intent:test_suite コマンドラインインターフェースの検証。

class TestDisasmCli:
    @pytest.fixture
    def runner(self):
        return CliRunner()

    @pytest.fixture
    def rom(self, tmp_path):
        path = tmp_path / "rom.bin"
        path.write_bytes(bytes([0xC3, 0x03, 0x00, 0xCF, 0x05, 0xC9]))
        return path

    def test_plain_listing(self, runner, rom):
        result = runner.invoke(main, [str(rom)])
        assert result.exit_code == 0
        assert "jp L0003" in result.output
        assert "L0003:" in result.output
        assert "(Report error)" not in result.output

    def test_machine_option(self, runner, rom):
        result = runner.invoke(main, [str(rom), "-m", "spectrum48"])
        assert result.exit_code == 0
        assert "(Report error)" in result.output
        assert "(error code: $05)" in result.output

    def test_no_bytes_and_decimal(self, runner, rom):
        result = runner.invoke(main, [str(rom), "--no-bytes", "--decimal"])
        assert result.exit_code == 0
        assert "  0000  jp L00003" in result.output

    def test_mos6502_with_base_address(self, runner, tmp_path):
        path = tmp_path / "code.bin"
        path.write_bytes(bytes([0xA9, 0x10, 0x60]))
        result = runner.invoke(main, [str(path), "-a", "mos6502", "-b", "0xC000"])
        assert result.exit_code == 0
        assert "C000" in result.output
        assert "lda #$10" in result.output

    # @intent:test_case_config_override コマンドライン引数が設定ファイルの値を上書きすることを検証します。
    def test_config_file_with_override(self, runner, rom, tmp_path):
        config = tmp_path / "project.yaml"
        config.write_text("machine: SPECTRUM48\nsections:\n  - {start: 3, end: 5, type: bytes}\n")
        result = runner.invoke(main, [str(rom), "-c", str(config), "-s", "3"])
        assert result.exit_code == 0
        assert ".defb $CF, $05, $C9" in result.output
        assert "jp" not in result.output

    def test_output_file(self, runner, rom, tmp_path):
        target = tmp_path / "out.asm"
        result = runner.invoke(main, [str(rom), "-o", str(target)])
        assert result.exit_code == 0
        assert result.output == ""
        assert "ret" in target.read_text()

    def test_invalid_address(self, runner, rom):
        result = runner.invoke(main, [str(rom), "-s", "nowhere"])
        assert result.exit_code != 0
        assert "Invalid address" in result.output

    def test_bad_config(self, runner, rom, tmp_path):
        config = tmp_path / "project.yaml"
        config.write_text("architecture: MC6800\n")
        result = runner.invoke(main, [str(rom), "-c", str(config)])
        assert result.exit_code == 1
        assert "Unsupported architecture: MC6800" in result.output

    def test_range_outside_file(self, runner, rom):
        result = runner.invoke(main, [str(rom), "-s", "0x8000"])
        assert result.exit_code == 1
        assert "Nothing to disassemble" in result.output

    def test_version(self, runner):
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output
