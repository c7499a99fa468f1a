# src/retro_disasm/core/pragma.py
"""
プラグマ処理。

命令パターン文字列（例: "ld b,^B|7"）のタイミング部分を分離し、
"^<文字>" の位置にオペランドを展開する共通ループと、オペランドの書式化関数を提供します。
文字ごとの意味はCPUファミリーごとの展開関数が決定します。
"""
from typing import Callable, Optional, Tuple

from retro_disasm.common.conversions import int_to_x2, int_to_x4, to_decimal5
from retro_disasm.common.types import Replacement
from retro_disasm.config.models import DisassemblyOptions
from retro_disasm.core.context import DecodeContext
from retro_disasm.core.output import DisassemblyItem

PRAGMA_MARKER = "^"
MAX_PRAGMAS = 4

PragmaExpander = Callable[[DecodeContext, DisassemblyItem, str], Replacement]

# @intent:responsibility "pattern|t1/t2" 形式の文字列をパターンとタイミングに分解します。
def split_pattern(op_info: Optional[str], default_timing: int) -> Tuple[str, int, int]:
    """
    (パターン, タイミング, 代替タイミング) を返します。
    タイミングが省略されている場合はdefault_timingと0を返します。
    """
    parts = (op_info or "").split("|")
    pattern = parts[0]
    timing = default_timing
    timing2 = 0
    if len(parts) > 1:
        numbers = parts[1].split("/")
        timing = int(numbers[0])
        if len(numbers) > 1:
            timing2 = int(numbers[1])
    return pattern, timing, timing2

# @intent:responsibility パターン内のプラグマを左から順に展開し、アイテムのテキストとシンボル情報を設定します。
# @intent:pre-condition itemのinstructionにはタイミング部分を除いたパターンが設定されていること。
def expand_pragmas(ctx: DecodeContext, item: DisassemblyItem, expander: PragmaExpander) -> None:
    count = 0
    while count < MAX_PRAGMAS:
        instruction = item.instruction
        index = instruction.find(PRAGMA_MARKER)
        if index < 0 or index + 1 >= len(instruction):
            break
        count += 1
        replacement = expander(ctx, item, instruction[index + 1])
        if replacement.is_label:
            item.has_label_symbol = True
        if replacement.symbol_value is not None and replacement.text:
            item.token_position = index
            item.token_length = len(replacement.text)
            item.has_symbol = True
            item.symbol_value = replacement.symbol_value
        item.instruction = instruction[:index] + replacement.text + instruction[index + 2:]

# @intent:utility_function 8ビット値を "$xx" または10進で書式化します。
def format_byte(value: int, options: DisassemblyOptions) -> str:
    return str(value) if options.decimal_mode else f"${int_to_x2(value)}"

# @intent:utility_function 16ビット値を "$xxxx" または10進で書式化します。
def format_word(value: int, options: DisassemblyOptions) -> str:
    return str(value) if options.decimal_mode else f"${int_to_x4(value)}"

# @intent:utility_function 生成ラベルの表記（"L1234" / "$1234" / "L04660"）を返します。
def format_label(address: int, options: DisassemblyOptions) -> str:
    prefix = "$" if options.no_label_prefix else "L"
    return prefix + (to_decimal5(address) if options.decimal_mode else int_to_x4(address))

# @intent:responsibility ラベルを登録し、ラベル参照としての置換結果を返します。
def label_replacement(ctx: DecodeContext, address: int) -> Replacement:
    address &= 0xFFFF
    ctx.output.create_label(address, (ctx.op_offset + ctx.address_offset) & 0xFFFF)
    return Replacement(format_label(address, ctx.options), address, is_label=True)
