# src/retro_disasm/arch/mos6502/disassembler.py
"""
MOS 6502 逆アセンブラ。
"""
from typing import Iterable, Optional, Sequence, Tuple

from retro_disasm.arch.mos6502.tables import OPCODE_MAP
from retro_disasm.common.conversions import int_to_x2, int_to_x4, to_sbyte
from retro_disasm.common.types import Replacement
from retro_disasm.config.models import DisassemblyOptions
from retro_disasm.core.context import DecodeContext
from retro_disasm.core.engine import DisassemblyEngine, InstructionSet
from retro_disasm.core.output import DisassemblyItem, DisassemblyOutput
from retro_disasm.core.pragma import format_byte, label_replacement
from retro_disasm.core.section import MemorySection

DEFAULT_CYCLES = 2

# @intent:responsibility 1バイトのオペコードを読み取り、パターンを返します。プレフィックスは存在しません。
def decode_mos6502(ctx: DecodeContext) -> Tuple[Optional[str], int]:
    ctx.opcode = ctx.fetch()
    return OPCODE_MAP.get(ctx.opcode), DEFAULT_CYCLES

# @intent:utility_function ゼロページ値をインデックス付き/間接形式で書式化します。
def _zero_page(value: int, decimal: bool, template: str) -> str:
    return template.format(str(value) if decimal else f"${int_to_x2(value)}")

def _absolute(value: int, decimal: bool, template: str) -> str:
    return template.format(str(value) if decimal else f"${int_to_x4(value)}")

# ゼロページ（1バイト）オペランドの書式
ZERO_PAGE_FORMATS = {
    "Z": "{}",
    "X": "{},x",
    "Y": "{},y",
    "N": "({},x)",
    "M": "({}),y",
}

# 絶対アドレス（2バイト）オペランドの書式
ABSOLUTE_FORMATS = {
    "A": "{}",
    "U": "{},x",
    "V": "{},y",
    "P": "({})",
}

# @intent:responsibility 6502のプラグマ1つを展開します。
def expand_mos6502_pragma(ctx: DecodeContext, item: DisassemblyItem, pragma: str) -> Replacement:
    options = ctx.options
    if pragma == "I":
        value = ctx.fetch()
        return Replacement("#" + format_byte(value, options), value)
    if pragma in ZERO_PAGE_FORMATS:
        value = ctx.fetch()
        return Replacement(_zero_page(value, options.decimal_mode, ZERO_PAGE_FORMATS[pragma]), value)
    if pragma in ABSOLUTE_FORMATS:
        value = ctx.fetch_word()
        return Replacement(_absolute(value, options.decimal_mode, ABSOLUTE_FORMATS[pragma]), value)
    if pragma == "J":
        return label_replacement(ctx, ctx.fetch_word())
    if pragma == "R":
        distance = ctx.fetch()
        return label_replacement(ctx, ctx.address_offset + ctx.op_offset + 2 + to_sbyte(distance))
    return Replacement("")

MOS6502_INSTRUCTION_SET = InstructionSet(
    name="MOS6502",
    decode=decode_mos6502,
    expand_pragma=expand_mos6502_pragma,
    default_instruction="???",
    byte_directive=".byte",
    word_directive=".word",
)

# @intent:responsibility 6502用の逆アセンブルエンジンを生成します。
def create_mos6502_disassembler(
    sections: Iterable[MemorySection],
    contents: Sequence[int],
    options: Optional[DisassemblyOptions] = None,
    **kwargs,
) -> DisassemblyEngine:
    return DisassemblyEngine(MOS6502_INSTRUCTION_SET, sections, contents, options, **kwargs)

# @intent:responsibility 指定されたメモリ範囲を逆アセンブルする。
def disassemble(
    contents: Sequence[int],
    start_addr: int = 0x0000,
    options: Optional[DisassemblyOptions] = None,
    base_address: int = 0,
) -> Optional[DisassemblyOutput]:
    """
    メモリを解析し、DisassemblyOutputを返す。
    """
    end_addr = base_address + len(contents) - 1
    engine = create_mos6502_disassembler(
        [MemorySection(base_address, end_addr)], contents, options, base_address=base_address)
    return engine.disassemble(start_addr, end_addr)
