# retro_disasm/core/engine.py
"""
Core Layer (逆アセンブルエンジン)

このモジュールは、CPUファミリーに依存しない逆アセンブルパスの駆動を提供します。
オペコード表の参照とプラグマ展開はInstructionSetとして渡され、エンジンはそれらを呼び出すだけです。
"""
import logging
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Sequence, Tuple, Union

from retro_disasm.common.conversions import int_to_x2, int_to_x4, to_decimal3
from retro_disasm.common.types import FetchResult
from retro_disasm.config.models import DisassemblyOptions
from retro_disasm.core.context import DecodeContext
from retro_disasm.core.custom import CustomDisassembler, DisassemblyApi
from retro_disasm.core.output import DisassemblyItem, DisassemblyLabel, DisassemblyOutput
from retro_disasm.core.pragma import PragmaExpander, expand_pragmas, split_pattern
from retro_disasm.core.section import MemoryMap, MemorySection, MemorySectionType

logger = logging.getLogger(__name__)

# 協調的なyieldを行う間隔（処理アイテム数）
DISASSEMBLER_BATCH = 100

# (タイミング付きパターン文字列, 既定タイミング) を返すデコード関数
OpcodeDecoder = Callable[[DecodeContext], Tuple[Optional[str], int]]

# @intent:data_structure CPUファミリーごとの能力の集合（オペコード表の参照、プラグマ展開、アドレス幅、データ疑似命令）。
@dataclass(frozen=True) # 不変データ構造
class InstructionSet:
    name: str
    decode: OpcodeDecoder
    expand_pragma: PragmaExpander
    default_instruction: str = "nop" # 未定義オペコードの命令テキスト
    byte_directive: str = ".defb"
    word_directive: str = ".defw"
    skip_directive: str = ".skip"
    address_mask: int = 0xFFFF

# @intent:responsibility 拡張に公開するAPIをエンジンの状態に結び付けます。
class _EngineApi(DisassemblyApi):
    def __init__(self, engine: "DisassemblyEngine"):
        self._engine = engine

    @property
    def decimal_mode(self) -> bool:
        return self._engine.options.decimal_mode

    def get_memory_contents(self) -> Sequence[int]:
        return self._engine.contents

    def get_offset(self) -> int:
        return self._engine.context.offset

    def get_address_offset(self) -> int:
        return self._engine.context.address_offset

    def fetch(self) -> FetchResult:
        ctx = self._engine.context
        address = ctx.offset
        opcode = ctx.fetch()
        return FetchResult(address, ctx.overflow, opcode, ctx.partition_of(address))

    def peek(self, ahead: int = 0) -> FetchResult:
        return self._engine.context.peek(ahead)

    def add_disassembly_item(self, item: DisassemblyItem) -> None:
        self._engine.output.add_item(item)

    def create_label(self, address: int, referring_address: Optional[int] = None) -> DisassemblyLabel:
        return self._engine.output.create_label(address & 0xFFFF, referring_address)

    def get_rom_page(self) -> int:
        return self._engine.options.rom_page()

# @intent:responsibility メモリマップに従ってバッファを逆アセンブルし、DisassemblyOutputを生成します。
class DisassemblyEngine:
    """
    CPUファミリーに依存しない逆アセンブルエンジン。
    1回のdisassemble()呼び出しごとに新しい出力を生成します。
    """
    # @intent:pre-condition `contents`はbase_addressから始まるメモリ内容であること。
    def __init__(
        self,
        instruction_set: InstructionSet,
        memory_map: Union[MemoryMap, Iterable[MemorySection]],
        contents: Sequence[int],
        options: Optional[DisassemblyOptions] = None,
        base_address: int = 0,
        address_offset: int = 0,
        yield_callback: Optional[Callable[[int], None]] = None,
    ):
        self.instruction_set = instruction_set
        self.memory_map = memory_map if isinstance(memory_map, MemoryMap) else MemoryMap(list(memory_map))
        self.contents = contents
        self.options = options or DisassemblyOptions()
        self.base_address = base_address
        self.address_offset = address_offset
        self.yield_callback = yield_callback
        self._custom: Optional[CustomDisassembler] = None
        self._processed = 0
        self.output = DisassemblyOutput()
        self.context = self._create_context()

    def _create_context(self) -> DecodeContext:
        return DecodeContext(
            contents=self.contents,
            output=self.output,
            options=self.options,
            base_address=self.base_address,
            address_offset=self.address_offset,
        )

    # @intent:responsibility カスタム逆アセンブラを登録し、APIを渡します。
    def set_custom_disassembler(self, custom: CustomDisassembler) -> None:
        if not isinstance(custom, CustomDisassembler):
            raise TypeError(f"Custom disassembler must implement CustomDisassembler: {custom!r}")
        self._custom = custom
        custom.set_disassembly_api(_EngineApi(self))

    @property
    def custom_disassembler(self) -> Optional[CustomDisassembler]:
        return self._custom

    # @intent:responsibility 指定範囲（両端を含む）を逆アセンブルします。範囲がバッファ外ならNoneを返します。
    def disassemble(self, start_address: int = 0x0000, end_address: int = 0xFFFF) -> Optional[DisassemblyOutput]:
        """
        登録された全セクションと要求範囲の共通部分を、セクションの種別に従って処理します。
        """
        self.output = DisassemblyOutput()
        self.context = self._create_context()
        self._processed = 0
        if not self.contents:
            return None

        max_address = min(self.base_address + len(self.contents) - 1, self.instruction_set.address_mask)
        start_address = max(start_address, self.base_address)
        end_address = min(end_address, max_address)
        if start_address > end_address:
            logger.debug("Requested range is outside of the buffer")
            return None
        ref_section = MemorySection(start_address, end_address)

        for section in self.memory_map:
            part = section.intersect(ref_section)
            if part is None:
                continue
            logger.debug("%s section %04X-%04X", part.section_type.value, part.start_address, part.end_address)
            if part.section_type == MemorySectionType.DISASSEMBLE:
                self._disassemble_section(part)
            elif part.section_type == MemorySectionType.BYTE_ARRAY:
                self._generate_byte_array(part)
            elif part.section_type == MemorySectionType.WORD_ARRAY:
                self._generate_word_array(part)
            elif part.section_type == MemorySectionType.SKIP:
                self._generate_skip_output(part)
            elif part.section_type == MemorySectionType.CUSTOM:
                self._generate_custom_output(part)
        # データセクションへのジャンプ先にもラベルフラグを立てる
        self.output.label_fixup()
        return self.output

    def _disassemble_section(self, section: MemorySection) -> None:
        ctx = self.context
        if self._custom:
            self._custom.start_section_disassembly(section)
        ctx.offset = section.start_address
        ctx.overflow = False
        while ctx.offset <= section.end_address and not ctx.overflow:
            self._allow_yield()
            if self._custom_takes_step():
                continue
            item = self.decode_operation()
            self.output.add_item(item)
            if self._custom:
                self._custom.after_instruction(item)
        self.output.label_fixup()

    # @intent:responsibility 拡張に次のステップを処理させます。カーソルを進めない拡張は無視します。
    def _custom_takes_step(self) -> bool:
        if self._custom is None:
            return False
        ctx = self.context
        before = ctx.offset
        handled = self._custom.before_instruction(ctx.peek())
        if handled and ctx.offset == before and not ctx.overflow:
            logger.warning("Custom disassembler handled %04X without consuming bytes", before)
            return False
        return handled

    # @intent:responsibility カーソル位置の1命令をデコードしてアイテムを返します。
    def decode_operation(self) -> DisassemblyItem:
        ctx = self.context
        iset = self.instruction_set
        ctx.begin_instruction()
        address = ctx.offset & iset.address_mask
        op_info, default_timing = iset.decode(ctx)
        pattern, timing, timing2 = split_pattern(op_info, default_timing)
        item = DisassemblyItem(
            address=(address + ctx.address_offset) & iset.address_mask,
            partition=ctx.partition_of(address),
            instruction=pattern or iset.default_instruction,
            tstates=timing,
            tstates2=timing2,
        )
        if pattern:
            expand_pragmas(ctx, item, iset.expand_pragma)
        item.opcodes = list(ctx.opcodes)
        return item

    def _generate_byte_array(self, section: MemorySection) -> None:
        length = section.length
        for i in range(0, length, 8):
            address = section.start_address + i
            values = [self.context.byte_at(address + j) for j in range(min(8, length - i))]
            texts = [to_decimal3(v) if self.options.decimal_mode else f"${int_to_x2(v)}" for v in values]
            self._add_data_item(address, values, f"{self.instruction_set.byte_directive} " + ", ".join(texts))

    def _generate_word_array(self, section: MemorySection) -> None:
        length = section.length
        for i in range(0, length - 1, 8):
            address = section.start_address + i
            values: List[int] = []
            words: List[str] = []
            for j in range(0, 8, 2):
                if i + j + 1 >= length:
                    break
                low = self.context.byte_at(address + j)
                high = self.context.byte_at(address + j + 1)
                value = (high << 8) | low
                values.extend((low, high))
                words.append(str(value) if self.options.decimal_mode else f"${int_to_x4(value)}")
            self._add_data_item(address, values, f"{self.instruction_set.word_directive} " + ", ".join(words))
        if length % 2 == 1:
            self._generate_byte_array(MemorySection(section.end_address, section.end_address))

    def _generate_skip_output(self, section: MemorySection) -> None:
        length = section.length
        text = str(length) if self.options.decimal_mode else f"${int_to_x4(length)}"
        self._add_data_item(section.start_address, [], f"{self.instruction_set.skip_directive} {text}")

    def _generate_custom_output(self, section: MemorySection) -> None:
        if self._custom:
            self.context.offset = section.start_address
            self.context.overflow = False
            if self._custom.disassemble_custom_section(section):
                self.output.label_fixup()
                return
        self._generate_byte_array(section)

    def _add_data_item(self, address: int, values: List[int], instruction: str) -> None:
        self._allow_yield()
        mask = self.instruction_set.address_mask
        address &= mask
        self.output.add_item(DisassemblyItem(
            address=(address + self.address_offset) & mask,
            opcodes=values,
            instruction=instruction,
            partition=self.context.partition_of(address),
        ))

    # @intent:responsibility 一定数のアイテムごとにホストへ制御を渡します。結果には影響しません。
    def _allow_yield(self) -> None:
        self._processed += 1
        if self.yield_callback and self._processed % DISASSEMBLER_BATCH == 0:
            self.yield_callback(self._processed)
