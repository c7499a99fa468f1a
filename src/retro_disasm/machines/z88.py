# src/retro_disasm/machines/z88.py
"""
Cambridge Z88 用のカスタム逆アセンブラ。

OZ のシステムコールは RST 命令の直後に呼び出しコードを置く形式のため、
コアデコーダの代わりに before_instruction() で命令全体を読み取ります。

- RST 18h (DF nn): 浮動小数点パッケージ  -> fpp FP_xxx
- RST 20h (E7 nn [mm]): OZ呼び出し       -> oz OS_xxx / GN_xxx / DC_xxx
- RST 28h (EF ll mm hh): 24ビット遠隔呼び出し -> extcall $<24ビットアドレス>
- RST 30h (F7): メモリバインド           -> rst oz_mbp
"""
from typing import List

from retro_disasm.common.conversions import int_to_x2
from retro_disasm.common.types import FetchResult
from retro_disasm.core.custom import CustomDisassembler
from retro_disasm.core.output import DisassemblyItem
from retro_disasm.core.section import MemorySection
from retro_disasm.machines.z88_tables import FPP_APIS, OZ_APIS

RST_FPP = 0xDF
RST_OZ = 0xE7
RST_EXTCALL = 0xEF
RST_OZ_MBP = 0xF7

# 2バイト目を必要とするOZ呼び出しの第1バイト（OS_ / GN_ / DC_）
OZ_TWO_BYTE_CODES = (0x06, 0x09, 0x0C)
OS_POUT = 0x93
UNKNOWN_API = "<unknown>"

# @intent:utility_function 0終端文字列を .defb のオペランドに書式化します。表示可能な文字は引用符で囲みます。
def format_string_bytes(values: List[int]) -> str:
    parts: List[str] = []
    run = ""
    for value in values:
        if 32 <= value <= 127:
            run += chr(value)
            continue
        if run:
            parts.append(f'"{run}"')
            run = ""
        parts.append(f"${int_to_x2(value)}")
    if run:
        parts.append(f'"{run}"')
    return ", ".join(parts)

# @intent:responsibility Cambridge Z88 の RST 呼び出し規約を解釈するカスタム逆アセンブラ。状態を持ちません。
class Z88Disassembler(CustomDisassembler):
    def start_section_disassembly(self, section: MemorySection) -> None:
        pass

    def before_instruction(self, peek_result: FetchResult) -> bool:
        if peek_result.overflow:
            return False
        opcode = peek_result.opcode
        if opcode == RST_FPP:
            self._fpp_call(peek_result)
        elif opcode == RST_OZ:
            self._oz_call(peek_result)
        elif opcode == RST_EXTCALL:
            self._extcall(peek_result)
        elif opcode == RST_OZ_MBP:
            self.api.fetch()
            self._add(peek_result, [opcode], "rst oz_mbp")
        else:
            return False
        return True

    def after_instruction(self, item: DisassemblyItem) -> None:
        pass

    def _add(self, peek_result: FetchResult, opcodes: List[int], instruction: str,
             is_continuation: bool = False) -> None:
        self.api.add_disassembly_item(DisassemblyItem(
            address=self.api.item_address(peek_result.offset),
            opcodes=opcodes,
            instruction=instruction,
            partition=peek_result.partition_label,
            is_continuation=is_continuation,
        ))

    def _fpp_call(self, peek_result: FetchResult) -> None:
        self.api.fetch()
        code = self.api.fetch().opcode
        self._add(peek_result, [RST_FPP, code], f"fpp {FPP_APIS.get(code, UNKNOWN_API)}")

    def _oz_call(self, peek_result: FetchResult) -> None:
        self.api.fetch()
        code = self.api.fetch().opcode
        opcodes = [RST_OZ, code]
        if code in OZ_TWO_BYTE_CODES:
            high = self.api.fetch().opcode
            opcodes.append(high)
            code = (high << 8) + code
        self._add(peek_result, opcodes, f"oz {OZ_APIS.get(code, UNKNOWN_API)}")
        if code == OS_POUT:
            self._inline_string(peek_result)

    # @intent:responsibility OS_POUT の直後に置かれた0終端文字列を読み取ります。
    def _inline_string(self, peek_result: FetchResult) -> None:
        values: List[int] = []
        while True:
            fetched = self.api.fetch()
            if fetched.overflow:
                break
            values.append(fetched.opcode)
            if fetched.opcode == 0:
                break
        if not values:
            return
        self._add(peek_result, values, ".defb " + format_string_bytes(values), is_continuation=True)

    def _extcall(self, peek_result: FetchResult) -> None:
        self.api.fetch()
        low = self.api.fetch().opcode
        middle = self.api.fetch().opcode
        high = self.api.fetch().opcode
        target = (high << 16) | (middle << 8) | low
        self._add(peek_result, [RST_EXTCALL, low, middle, high], f"extcall ${target:x}")
