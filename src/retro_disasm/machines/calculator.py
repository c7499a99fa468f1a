# src/retro_disasm/machines/calculator.py
"""
ZX Spectrum 48 ROM の電卓（RST 28h）バイトコードのデコーダ。

RST 28h の直後には電卓命令のバイト列が end-calc まで続きます。
stk-data や series 命令の後には圧縮形式の浮動小数点リテラルが置かれます。
"""
from typing import Dict, List, NamedTuple

from retro_disasm.common.conversions import int_to_x2, int_to_x4, to_sbyte
from retro_disasm.core.custom import DisassemblyApi
from retro_disasm.core.output import DisassemblyItem
from retro_disasm.machines.float_number import FloatNumber

# 電卓命令名。0x3E-0x41 は "|" 区切りで複数の名前を持つ（series, 定数, st-mem, get-mem）。
CALC_OPERATIONS: Dict[int, str] = {
    0x00: "jump-true",
    0x01: "exchange",
    0x02: "delete",
    0x03: "subtract",
    0x04: "multiply",
    0x05: "division",
    0x06: "to-power",
    0x07: "or",
    0x08: "no-&-no",
    0x09: "no-l-eql",
    0x0A: "no-gr-eq",
    0x0B: "nos-neql",
    0x0C: "no-grtr",
    0x0D: "no-less",
    0x0E: "nos-eql",
    0x0F: "addition",
    0x10: "str-&-no",
    0x11: "str-l-eql",
    0x12: "str-gr-eq",
    0x13: "strs-neql",
    0x14: "str-grtr",
    0x15: "str-less",
    0x16: "strs-eql",
    0x17: "strs-add",
    0x18: "val$",
    0x19: "usr-$",
    0x1A: "read-in",
    0x1B: "negate",
    0x1C: "code",
    0x1D: "val",
    0x1E: "len",
    0x1F: "sin",
    0x20: "cos",
    0x21: "tan",
    0x22: "asn",
    0x23: "acs",
    0x24: "atn",
    0x25: "ln",
    0x26: "exp",
    0x27: "int",
    0x28: "sqr",
    0x29: "sgn",
    0x2A: "abs",
    0x2B: "peek",
    0x2C: "in",
    0x2D: "usr-no",
    0x2E: "str$",
    0x2F: "chr$",
    0x30: "not",
    0x31: "duplicate",
    0x32: "n-mod-m",
    0x33: "jump",
    0x34: "stk-data",
    0x35: "dec-jr-nz",
    0x36: "less-0",
    0x37: "greater-0",
    0x38: "end-calc",
    0x39: "get-argt",
    0x3A: "truncate",
    0x3B: "fp-calc-2",
    0x3C: "e-to-fp",
    0x3D: "re-stack",
    0x3E: "series-06|series-08|series-0C",
    0x3F: "stk-zero|stk-one|stk-half|stk-pi-half|stk-ten",
    0x40: "st-mem-0|st-mem-1|st-mem-2|st-mem-3|st-mem-4|st-mem-5",
    0x41: "get-mem-0|get-mem-1|get-mem-2|get-mem-3|get-mem-4|get-mem-5",
}

JUMP_OPERATIONS = (0x00, 0x33, 0x35)
STK_DATA = 0x34
END_CALC = 0x38
JUMP = 0x33
SERIES_OPERATIONS = (0x86, 0x88, 0x8C)

# @intent:data_structure 電卓命令1つのデコード結果。carry_onがFalseなら電卓モードを抜ける。
class CalculatorEntry(NamedTuple):
    item: DisassemblyItem
    carry_on: bool

def _hex(value: int, decimal: bool) -> str:
    return str(value) if decimal else f"${int_to_x2(value)}"

# @intent:utility_function "|" 区切りの命令名からindex番目を取り出します。
def indexed_operation(code: int, index: int) -> str:
    names = CALC_OPERATIONS.get(code, "").split("|")
    if 0 <= index < len(names) and names[index]:
        return f"({names[index]})"
    return f"(calc code: {code}/{index})"

# @intent:responsibility 電卓バイトコードを1エントリずつデコードします。リテラルの残り個数を状態として保持します。
class Rst28Calculator:
    def __init__(self):
        self.series_count = 0

    def reset(self) -> None:
        self.series_count = 0

    # @intent:responsibility カーソル位置の電卓命令（またはリテラル）を読み取り、アイテムを生成します。
    def disassemble_entry(self, api: DisassemblyApi) -> CalculatorEntry:
        decimal = api.decimal_mode
        address = api.item_address(api.get_offset())
        code = api.fetch().opcode
        opcodes: List[int] = [code]
        item = DisassemblyItem(address=address, opcodes=opcodes, instruction=f".defb {_hex(code, decimal)}")

        if self.series_count > 0:
            length = (code >> 6) + 1
            if (code & 0x3F) == 0:
                length += 1
            for _ in range(length):
                opcodes.append(api.fetch().opcode)
            item.instruction = ".defb " + ", ".join(_hex(b, decimal) for b in opcodes)
            item.hard_comment = f"({FloatNumber.from_compact_bytes(opcodes):.6f})"
            self.series_count -= 1
            return CalculatorEntry(item, True)

        carry_on = True
        if code in JUMP_OPERATIONS:
            jump = api.fetch().opcode
            opcodes.append(jump)
            target = api.item_address(api.get_offset() - 1 + to_sbyte(jump))
            api.create_label(target, address)
            item.instruction = f".defb {_hex(code, decimal)}, {_hex(jump, decimal)}"
            item.hard_comment = f"({CALC_OPERATIONS[code]}: L{int_to_x4(target)})"
            carry_on = code != JUMP
        elif code == STK_DATA:
            self.series_count = 1
            item.hard_comment = "(stk-data)"
        elif code == END_CALC:
            item.hard_comment = "(end-calc)"
            carry_on = False
        elif code in SERIES_OPERATIONS:
            self.series_count = code - 0x80
            item.hard_comment = f"(series-0{code - 0x80:X})"
        elif 0xA0 <= code <= 0xA4:
            item.hard_comment = indexed_operation(0x3F, code - 0xA0)
        elif 0xC0 <= code <= 0xC5:
            item.hard_comment = indexed_operation(0x40, code - 0xC0)
        elif 0xE0 <= code <= 0xE5:
            item.hard_comment = indexed_operation(0x41, code - 0xE0)
        else:
            name = CALC_OPERATIONS.get(code, f"calc code: {_hex(code, decimal)}")
            item.hard_comment = f"({name})"
        return CalculatorEntry(item, carry_on)
