# src/retro_disasm/core/context.py
"""
デコードコンテキスト。

カーソル位置、消費したバイト列、オーバーフローフラグ、インデックスモードなど、
1命令のデコード中に変化する状態を明示的な値として保持します。
"""
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from retro_disasm.common.types import FetchResult
from retro_disasm.config.models import DisassemblyOptions
from retro_disasm.core.output import DisassemblyOutput

# @intent:responsibility バッファ上のカーソルとデコード中の一時状態を保持します。
# @intent:rationale デコード関数群がこの値を受け渡すことで、各ステップを単独でテスト可能にします。
@dataclass
class DecodeContext:
    contents: Sequence[int]
    output: DisassemblyOutput = field(default_factory=DisassemblyOutput)
    options: DisassemblyOptions = field(default_factory=DisassemblyOptions)
    base_address: int = 0
    address_offset: int = 0
    offset: int = 0 # 次に読み取るアドレス
    op_offset: int = 0 # 現在の命令の先頭アドレス
    opcodes: List[int] = field(default_factory=list)
    overflow: bool = False
    opcode: int = 0
    index_mode: int = 0 # 0: なし, 1: IX, 2: IY
    displacement: Optional[int] = None

    @property
    def end_address(self) -> int:
        return self.base_address + len(self.contents) - 1

    # @intent:responsibility 新しい命令のデコードを開始するために一時状態を初期化します。
    def begin_instruction(self) -> None:
        self.op_offset = self.offset
        self.opcodes = []
        self.displacement = None
        self.index_mode = 0

    # @intent:responsibility カーソル位置の1バイトを読み取り、カーソルを進めます。
    def fetch(self) -> int:
        """
        1バイト読み取ります。
        バッファ範囲外の場合はoverflowを設定して0を返し、カーソルは進めません。
        """
        index = self.offset - self.base_address
        if index < 0 or index >= len(self.contents):
            self.overflow = True
            return 0
        value = self.contents[index]
        self.opcodes.append(value)
        self.offset += 1
        return value

    # @intent:responsibility リトルエンディアンで16ビット値を読み取ります。
    def fetch_word(self) -> int:
        low = self.fetch()
        high = self.fetch()
        return ((high << 8) | low) & 0xFFFF

    # @intent:responsibility カーソルを進めずに先読みします。
    def peek(self, ahead: int = 0) -> FetchResult:
        offset = self.offset + ahead
        index = offset - self.base_address
        overflow = index < 0 or index >= len(self.contents)
        opcode = 0 if overflow else self.contents[index]
        return FetchResult(offset, overflow, opcode, self.partition_of(offset))

    # @intent:utility_function アドレスの値をバッファから読みます。範囲外は0。
    def byte_at(self, address: int) -> int:
        index = address - self.base_address
        if 0 <= index < len(self.contents):
            return self.contents[index]
        return 0

    # @intent:utility_function 8Kパーティション単位のラベルを返します。
    def partition_of(self, address: int) -> Optional[str]:
        labels = self.options.partition_labels
        if not labels:
            return None
        index = (address & 0xFFFF) >> 13
        return labels[index] if index < len(labels) else None
