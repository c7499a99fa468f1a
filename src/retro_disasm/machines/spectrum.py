# src/retro_disasm/machines/spectrum.py
"""
ZX Spectrum ROM用のカスタム逆アセンブラ。

ROMの呼び出し規約（RST 08h のエラーコード、RST 28h の電卓バイトコード、
128K ROM の RST 28h による48K ROM呼び出しベクタ）を命令ではなくデータとして出力します。
どの規約が有効かは、アクティブなROMページごとのフラグで決まります。
"""
import logging
from enum import Enum, Flag
from typing import Dict, Optional

from retro_disasm.common.conversions import int_to_x2, int_to_x4
from retro_disasm.common.types import FetchResult
from retro_disasm.core.custom import CustomDisassembler
from retro_disasm.core.output import DisassemblyItem
from retro_disasm.core.section import MemorySection
from retro_disasm.machines.calculator import Rst28Calculator

logger = logging.getLogger(__name__)

# @intent:data_structure ROMページごとに有効な呼び出し規約。
class SpectrumRomFlags(Flag):
    NONE = 0
    RST08_ERROR = 0x01
    RST28_CALCULATOR = 0x02
    RST28_ROM48_CALL = 0x04
    SPECTRUM48 = RST08_ERROR | RST28_CALCULATOR

# @intent:data_structure 直前の命令によって決まる、次のバイト列の解釈。
class SpectrumMode(Enum):
    IDLE = "IDLE"
    REPORT_ERROR = "REPORT_ERROR"
    CALCULATOR = "CALCULATOR"
    ROM48_CALL = "ROM48_CALL"

RST08 = [0xCF]
RST28 = [0xEF]
CALCULATOR_CALLS = ([0xCD, 0x5E, 0x33], [0xCD, 0x62, 0x33]) # call $335E / call $3362

SPECTRUM48_PAGES: Dict[int, SpectrumRomFlags] = {0: SpectrumRomFlags.SPECTRUM48}
SPECTRUM128_PAGES: Dict[int, SpectrumRomFlags] = {
    0: SpectrumRomFlags.RST28_ROM48_CALL,
    1: SpectrumRomFlags.SPECTRUM48,
}
SPECTRUMP3_PAGES: Dict[int, SpectrumRomFlags] = {
    0: SpectrumRomFlags.RST28_ROM48_CALL,
    1: SpectrumRomFlags.RST28_ROM48_CALL,
    2: SpectrumRomFlags.RST28_ROM48_CALL,
    3: SpectrumRomFlags.SPECTRUM48,
}
SPECTRUMNEXT_PAGES = dict(SPECTRUMP3_PAGES)

# @intent:responsibility ZX Spectrum ROMの呼び出し規約を解釈するカスタム逆アセンブラ。
class SpectrumRomDisassembler(CustomDisassembler):
    """
    after_instruction() で呼び出し規約に当たる命令を検出してモードを切り替え、
    次の before_instruction() でそのモードに従ってバイトを消費します。
    """
    def __init__(self, rom_pages: Optional[Dict[int, SpectrumRomFlags]] = None):
        super().__init__()
        self.rom_pages = dict(SPECTRUM48_PAGES if rom_pages is None else rom_pages)
        self.mode = SpectrumMode.IDLE
        self.calculator = Rst28Calculator()

    # @intent:responsibility アクティブなROMページのフラグを返します。ページ不明時はアドレスの16Kバンクで判断します。
    def flags_for(self, address: int) -> SpectrumRomFlags:
        page = self.api.get_rom_page()
        if page < 0:
            page = (address & 0xFFFF) >> 14
        return self.rom_pages.get(page, SpectrumRomFlags.NONE)

    def start_section_disassembly(self, section: MemorySection) -> None:
        self._enter(SpectrumMode.IDLE)
        self.calculator.reset()

    def before_instruction(self, peek_result: FetchResult) -> bool:
        if self.mode == SpectrumMode.IDLE or peek_result.overflow:
            return False
        if self.mode == SpectrumMode.REPORT_ERROR:
            self._report_error()
        elif self.mode == SpectrumMode.CALCULATOR:
            self._calculator_entry()
        elif self.mode == SpectrumMode.ROM48_CALL:
            self._rom48_call()
        return True

    def after_instruction(self, item: DisassemblyItem) -> None:
        flags = self.flags_for(item.address)
        if flags == SpectrumRomFlags.NONE:
            return
        if SpectrumRomFlags.RST08_ERROR in flags and item.opcodes == RST08:
            item.hard_comment = "(Report error)"
            self._enter(SpectrumMode.REPORT_ERROR)
        elif SpectrumRomFlags.RST28_CALCULATOR in flags and (
                item.opcodes == RST28 or item.opcodes in CALCULATOR_CALLS):
            item.hard_comment = "(Invoke Calculator)"
            self.calculator.reset()
            self._enter(SpectrumMode.CALCULATOR)
        elif SpectrumRomFlags.RST28_ROM48_CALL in flags and item.opcodes == RST28:
            item.hard_comment = "(Call Spectrum 48 ROM)"
            self._enter(SpectrumMode.ROM48_CALL)

    # @intent:responsibility CUSTOMセクションを電卓バイトコードとして出力します。
    def disassemble_custom_section(self, section: MemorySection) -> bool:
        self.calculator.reset()
        while self.api.get_offset() <= section.end_address and not self.api.peek().overflow:
            entry = self.calculator.disassemble_entry(self.api)
            self.api.add_disassembly_item(entry.item)
        return True

    def _enter(self, mode: SpectrumMode) -> None:
        if mode != self.mode:
            logger.debug("Spectrum mode %s -> %s", self.mode.value, mode.value)
        self.mode = mode

    def _report_error(self) -> None:
        fetched = self.api.fetch()
        code = fetched.opcode
        self.api.add_disassembly_item(DisassemblyItem(
            address=self.api.item_address(fetched.offset),
            opcodes=[code],
            instruction=f".defb ${int_to_x2(code)}",
            hard_comment=f"(error code: ${int_to_x2(code)})",
        ))
        self._enter(SpectrumMode.IDLE)

    def _calculator_entry(self) -> None:
        entry = self.calculator.disassemble_entry(self.api)
        self.api.add_disassembly_item(entry.item)
        if not entry.carry_on:
            self._enter(SpectrumMode.IDLE)

    def _rom48_call(self) -> None:
        low = self.api.fetch()
        high = self.api.fetch()
        target = (high.opcode << 8) | low.opcode
        self.api.add_disassembly_item(DisassemblyItem(
            address=self.api.item_address(low.offset),
            opcodes=[low.opcode, high.opcode],
            instruction=f".defw ${int_to_x4(target)}",
            has_symbol=True,
            symbol_value=target,
        ))
        self._enter(SpectrumMode.IDLE)
