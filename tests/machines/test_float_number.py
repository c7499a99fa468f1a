# tests/machines/test_float_number.py
import pytest

from retro_disasm.machines.float_number import FloatNumber

# @intent:test_suite ZX Spectrum浮動小数点形式の変換を検証します。

class TestFloatNumber:
    def test_integer_short_form(self):
        assert FloatNumber.from_bytes([0x00, 0x00, 0x0A, 0x00, 0x00]) == 10.0

    def test_negative_integer_short_form(self):
        assert FloatNumber.from_bytes([0x00, 0xFF, 0x05, 0x00, 0x00]) == -5.0

    def test_full_form(self):
        # 0.5: 指数 0x80, 仮数 0x00000000（暗黙の最上位ビット）
        assert FloatNumber.from_bytes([0x80, 0x00, 0x00, 0x00, 0x00]) == 0.5
        assert FloatNumber.from_bytes([0x81, 0x80, 0x00, 0x00, 0x00]) == -1.0

    def test_invalid_length(self):
        with pytest.raises(ValueError, match="5 bytes"):
            FloatNumber.from_bytes([0x00, 0x00, 0x00])

    # @intent:test_case_compact 電卓の定数テーブルの圧縮形式が正しく展開されることを検証します。
    def test_compact_pi_half(self):
        value = FloatNumber.from_compact_bytes([0xF1, 0x49, 0x0F, 0xDA, 0xA2])
        assert f"{value:.6f}" == "1.570796"

    def test_compact_with_exponent_byte(self):
        assert FloatNumber.from_compact_bytes([0x40, 0xB0, 0x00, 0x01]) == 1.0
        assert FloatNumber.from_compact_bytes([0x40, 0xB0, 0x00, 0x0A]) == 10.0
        assert FloatNumber.from_compact_bytes([0x00, 0xB0, 0x00]) == 0.0

    def test_compact_half(self):
        assert FloatNumber.from_compact_bytes([0x30, 0x00]) == 0.5
