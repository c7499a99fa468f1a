# src/retro_disasm/report/listing.py
"""
逆アセンブル出力をテキストのリスティングに整形します。

ラベル付きのアイテムの前にラベル行を出力し、続いてアドレス、オペコード、命令、コメントを1行に並べます。
"""
from typing import List, Optional

from retro_disasm.common.conversions import int_to_x4, to_decimal5
from retro_disasm.core.output import DisassemblyItem, DisassemblyOutput

OPCODE_COLUMN_WIDTH = 12
INSTRUCTION_COLUMN_WIDTH = 24

# @intent:responsibility DisassemblyOutputを人が読むリスティング行に変換します。
class ListingFormatter:
    def __init__(self, show_opcodes: bool = True, label_prefix: str = "L", decimal_mode: bool = False):
        self.show_opcodes = show_opcodes
        self.label_prefix = label_prefix
        self.decimal_mode = decimal_mode

    def format(self, output: DisassemblyOutput) -> List[str]:
        lines: List[str] = []
        for item in output:
            if not item.is_continuation and (item.has_label or item.address in output.labels):
                lines.append(f"{self.label(item.address)}:")
            lines.append(self.format_item(item))
        return lines

    # @intent:utility_function 命令中のラベル参照と同じ表記でラベル名を返します。
    def label(self, address: int) -> str:
        return self.label_prefix + (to_decimal5(address) if self.decimal_mode else int_to_x4(address))

    def render(self, output: DisassemblyOutput) -> str:
        return "\n".join(self.format(output)) + "\n"

    # @intent:utility_function アイテム1つを1行に整形します。
    def format_item(self, item: DisassemblyItem) -> str:
        line = f"  {int_to_x4(item.address)}  "
        if self.show_opcodes:
            line += item.opcode_hex().ljust(OPCODE_COLUMN_WIDTH) + " "
        comment = self._comment_of(item)
        if comment:
            line += item.instruction.ljust(INSTRUCTION_COLUMN_WIDTH) + f" ; {comment}"
        else:
            line += item.instruction
        return line.rstrip()

    def _comment_of(self, item: DisassemblyItem) -> Optional[str]:
        parts = [text for text in (item.hard_comment, item.comment) if text]
        return " ".join(parts) if parts else None
