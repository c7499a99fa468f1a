"""
Z80逆アセンブラモジュール。

メモリ上のバイナリデータを解析し、Z80アセンブリ言語のニーモニック形式に変換します。
CB/DD/ED/FDプレフィックス（DD CB / FD CB の二重プレフィックスを含む）を解決してパターンを選び、
プラグマを展開して命令テキストを生成します。
"""
from typing import Iterable, Optional, Sequence, Tuple

from retro_disasm.arch.z80.next_registers import NEXT_REGISTERS
from retro_disasm.arch.z80.tables import (
    EXTENDED_INSTRUCTIONS, INDEXED_INSTRUCTIONS, Q8_REGISTERS, SHIFT_OPERATIONS,
    STANDARD_INSTRUCTIONS, Z80N_ONLY_OPCODES,
)
from retro_disasm.common.conversions import int_to_x2, to_sbyte
from retro_disasm.common.types import Replacement
from retro_disasm.config.models import DisassemblyOptions
from retro_disasm.core.context import DecodeContext
from retro_disasm.core.engine import DisassemblyEngine, InstructionSet
from retro_disasm.core.output import DisassemblyItem, DisassemblyOutput
from retro_disasm.core.pragma import format_byte, format_word, label_replacement
from retro_disasm.core.section import MemorySection

PREFIX_TSTATES = 4

# @intent:responsibility カーソル位置からプレフィックスを解決し、(パターン, 既定Tステート) を返します。
def decode_z80(ctx: DecodeContext) -> Tuple[Optional[str], int]:
    """
    1命令分のオペコードバイトを読み取り、対応するパターン文字列を選択します。
    未定義のオペコードはNoneまたは "nop" を返し、エラーにはしません。
    """
    tstates = 4
    ctx.opcode = ctx.fetch()
    if ctx.opcode == 0xED:
        tstates += PREFIX_TSTATES
        ctx.opcode = ctx.fetch()
        if not ctx.options.allow_extended_set and ctx.opcode in Z80N_ONLY_OPCODES:
            return "nop", tstates
        return EXTENDED_INSTRUCTIONS.get(ctx.opcode, "nop"), tstates

    if ctx.opcode == 0xCB:
        tstates += PREFIX_TSTATES
        ctx.opcode = ctx.fetch()
        return _bit_operation(ctx.opcode, "^s"), tstates

    if ctx.opcode in (0xDD, 0xFD):
        tstates += PREFIX_TSTATES
        ctx.index_mode = 1 if ctx.opcode == 0xDD else 2
        ctx.opcode = ctx.fetch()
        if ctx.opcode == 0xCB:
            tstates += PREFIX_TSTATES
        return _decode_indexed(ctx), tstates

    return STANDARD_INSTRUCTIONS.get(ctx.opcode), tstates

# @intent:utility_function CBプレフィックス命令のパターンを組み立てます。
def _bit_operation(opcode: int, operand: str) -> str:
    if opcode < 0x40:
        return f"{SHIFT_OPERATIONS[opcode >> 3]} {operand}"
    if opcode < 0x80:
        return f"bit ^b,{operand}"
    if opcode < 0xC0:
        return f"res ^b,{operand}"
    return f"set ^b,{operand}"

# @intent:responsibility DD/FDプレフィックス命令のパターンを選択します。必要に応じて変位バイトを読み取ります。
def _decode_indexed(ctx: DecodeContext) -> Optional[str]:
    if ctx.opcode != 0xCB:
        pattern = INDEXED_INSTRUCTIONS.get(ctx.opcode) or STANDARD_INSTRUCTIONS.get(ctx.opcode)
        if pattern and "^D" in pattern:
            ctx.displacement = ctx.fetch()
        return pattern

    # DD CB d op: 変位はオペコードより前に置かれる
    ctx.displacement = ctx.fetch()
    ctx.opcode = ctx.fetch()
    pattern = _bit_operation(ctx.opcode, "(^X^D)")
    if ctx.opcode >= 0x40 and ctx.opcode < 0x80:
        return pattern
    if (ctx.opcode & 0x07) != 0x06:
        pattern += ",^s"
    return pattern

# @intent:responsibility Z80のプラグマ1つを展開します。
def expand_z80_pragma(ctx: DecodeContext, item: DisassemblyItem, pragma: str) -> Replacement:
    options = ctx.options
    if pragma == "b":
        return Replacement(str((ctx.opcode & 0x38) >> 3))
    if pragma == "r":
        distance = ctx.fetch()
        return label_replacement(ctx, ctx.address_offset + ctx.op_offset + 2 + to_sbyte(distance))
    if pragma == "R":
        return Replacement(format_byte(ctx.opcode - 0xC7, options))
    if pragma == "L":
        return label_replacement(ctx, ctx.fetch_word())
    if pragma == "s":
        return Replacement(Q8_REGISTERS[ctx.opcode & 0x07])
    if pragma == "B":
        value = ctx.fetch()
        return Replacement(format_byte(value, options), value)
    if pragma == "N":
        value = ctx.fetch()
        description = NEXT_REGISTERS.get(value)
        if description:
            item.hard_comment = description
        return Replacement(format_byte(value, options))
    if pragma == "W":
        value = ctx.fetch_word()
        return Replacement(format_word(value, options), value)
    if pragma == "w":
        # ビッグエンディアン（push nn）
        high = ctx.fetch()
        value = (high << 8) | ctx.fetch()
        return Replacement(format_word(value, options), value)
    if pragma == "X":
        return Replacement("ix" if ctx.index_mode == 1 else "iy")
    if pragma == "l":
        return Replacement("xl" if ctx.index_mode == 1 else "yl")
    if pragma == "h":
        return Replacement("xh" if ctx.index_mode == 1 else "yh")
    if pragma == "D":
        return Replacement(_format_displacement(ctx.displacement, options))
    return Replacement("")

def _format_displacement(displacement: Optional[int], options: DisassemblyOptions) -> str:
    if not displacement:
        return ""
    if to_sbyte(displacement) < 0:
        distance = 0x100 - displacement
        return f"-{distance}" if options.decimal_mode else f"-${int_to_x2(distance)}"
    return f"+{displacement}" if options.decimal_mode else f"+${int_to_x2(displacement)}"

Z80_INSTRUCTION_SET = InstructionSet(
    name="Z80",
    decode=decode_z80,
    expand_pragma=expand_z80_pragma,
    default_instruction="nop",
    byte_directive=".defb",
    word_directive=".defw",
)

# @intent:responsibility Z80用の逆アセンブルエンジンを生成します。
def create_z80_disassembler(
    sections: Iterable[MemorySection],
    contents: Sequence[int],
    options: Optional[DisassemblyOptions] = None,
    **kwargs,
) -> DisassemblyEngine:
    return DisassemblyEngine(Z80_INSTRUCTION_SET, sections, contents, options, **kwargs)

# @intent:responsibility バッファ全体を1つのDISASSEMBLEセクションとして逆アセンブルします。
def disassemble(
    contents: Sequence[int],
    start_addr: int = 0x0000,
    options: Optional[DisassemblyOptions] = None,
    base_address: int = 0,
) -> Optional[DisassemblyOutput]:
    """
    contentsをbase_addressから配置されたメモリとみなし、start_addrから末尾までを逆アセンブルします。
    """
    end_addr = base_address + len(contents) - 1
    engine = create_z80_disassembler(
        [MemorySection(base_address, end_addr)], contents, options, base_address=base_address)
    return engine.disassemble(start_addr, end_addr)
