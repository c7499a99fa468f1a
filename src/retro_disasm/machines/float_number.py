# src/retro_disasm/machines/float_number.py
"""
ZX Spectrum 浮動小数点数の変換。

5バイト形式（指数1バイト + 符号付き仮数4バイト）と、電卓の stk-data で使用される圧縮形式を数値に変換します。
"""
from typing import Sequence

# @intent:responsibility ZX Spectrum形式のバイト列を数値に変換します。
class FloatNumber:
    @staticmethod
    def from_bytes(data: Sequence[int]) -> float:
        """
        5バイト形式を数値に変換します。
        先頭バイトが0の場合は整数短縮形式（符号バイト、下位、上位）として扱います。
        """
        if len(data) != 5:
            raise ValueError(f"A float number must be exactly 5 bytes: {len(data)}")

        if data[0] == 0:
            sign = -1 if data[1] == 0xFF else 1
            return float((data[2] + data[3] * 0x100) * sign)

        sign = -1 if data[1] & 0x80 else 1
        mantissa = (((data[1] & 0x7F) | 0x80) << 24) + (data[2] << 16) + (data[3] << 8) + data[4]
        exponent = data[0] - 128 - 32
        return sign * mantissa * 2.0 ** exponent

    @staticmethod
    def from_compact_bytes(data: Sequence[int]) -> float:
        """
        圧縮形式を5バイト形式に展開して変換します。
        先頭バイトの下位6ビットが指数で、0の場合は次のバイトが指数になります。
        指数には0x50を加算し、8ビットで折り返します。
        """
        copy_from = 1
        exponent = data[0] & 0x3F
        if exponent == 0:
            exponent = data[1]
            copy_from = 2
        expanded = [(exponent + 0x50) & 0xFF, 0, 0, 0, 0]
        for index, value in enumerate(data[copy_from:copy_from + 4], start=1):
            expanded[index] = value
        return FloatNumber.from_bytes(expanded)
