# src/retro_disasm/common/conversions.py
"""
数値変換ユーティリティ。
オペランド文字列の生成に必要な16進/10進フォーマットと符号付き変換を提供します。
"""

# @intent:utility_function 8ビット値を符号付き整数（-128..127）に変換します。
def to_sbyte(value: int) -> int:
    value &= 0xFF
    return value - 0x100 if value >= 0x80 else value

# @intent:utility_function 2桁の大文字16進文字列を返します。
def int_to_x2(value: int) -> str:
    return f"{value:02X}"

# @intent:utility_function 4桁の大文字16進文字列を返します。
def int_to_x4(value: int) -> str:
    return f"{value:04X}"

def to_decimal3(value: int) -> str:
    """
    バイト値を3桁ゼロ埋めの10進文字列に変換します。
    """
    return f"{value:03d}"

def to_decimal5(value: int) -> str:
    """
    ワード値を5桁ゼロ埋めの10進文字列に変換します。
    """
    return f"{value:05d}"
