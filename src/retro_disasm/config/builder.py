import logging
from dataclasses import replace
from typing import Callable, Dict, List, Optional, Sequence

from retro_disasm.arch.mos6502.disassembler import MOS6502_INSTRUCTION_SET
from retro_disasm.arch.z80.disassembler import Z80_INSTRUCTION_SET
from retro_disasm.core.custom import CustomDisassembler
from retro_disasm.core.engine import DisassemblyEngine, InstructionSet
from retro_disasm.core.output import DisassemblyOutput
from retro_disasm.core.section import MemorySection
from retro_disasm.machines.spectrum import (
    SPECTRUM128_PAGES, SPECTRUM48_PAGES, SPECTRUMNEXT_PAGES, SPECTRUMP3_PAGES, SpectrumRomDisassembler,
)
from retro_disasm.machines.z88 import Z88Disassembler
from .models import ProjectConfig

logger = logging.getLogger(__name__)

INSTRUCTION_SETS: Dict[str, InstructionSet] = {
    "Z80": Z80_INSTRUCTION_SET,
    "MOS6502": MOS6502_INSTRUCTION_SET,
    "M6510": MOS6502_INSTRUCTION_SET,
}

MACHINES: Dict[str, Callable[[], CustomDisassembler]] = {
    "SPECTRUM48": lambda: SpectrumRomDisassembler(SPECTRUM48_PAGES),
    "SPECTRUM128": lambda: SpectrumRomDisassembler(SPECTRUM128_PAGES),
    "SPECTRUMP3": lambda: SpectrumRomDisassembler(SPECTRUMP3_PAGES),
    "SPECTRUMNEXT": lambda: SpectrumRomDisassembler(SPECTRUMNEXT_PAGES),
    "Z88": Z88Disassembler,
}

# @intent:responsibility プロジェクト定義（Config）に基づいて、命令セット、メモリマップ、マシン拡張を組み合わせたエンジンを生成します。
class DisassemblerBuilder:
    def build(self, config: ProjectConfig, contents: Sequence[int]) -> DisassemblyEngine:
        instruction_set = INSTRUCTION_SETS.get(config.architecture.upper())
        if instruction_set is None:
            raise ValueError(f"Unsupported architecture: {config.architecture}")

        custom: Optional[CustomDisassembler] = None
        if config.machine:
            factory = MACHINES.get(config.machine.upper())
            if factory is None:
                raise ValueError(f"Unsupported machine: {config.machine}")
            custom = factory()

        options = config.options
        if config.rom_page is not None:
            page = config.rom_page
            options = replace(options, get_rom_page=lambda: page)

        engine = DisassemblyEngine(
            instruction_set,
            self._sections_for(config, contents),
            contents,
            options,
            base_address=config.base_address,
            address_offset=config.address_offset,
        )
        if custom is not None:
            engine.set_custom_disassembler(custom)
        logger.debug("Built %s engine (machine: %s)", instruction_set.name, config.machine or "none")
        return engine

    # @intent:responsibility エンジンを生成して逆アセンブルを実行し、ソースコメントを適用します。
    def run(self, config: ProjectConfig, contents: Sequence[int]) -> Optional[DisassemblyOutput]:
        output = self.build(config, contents).disassemble(config.start, config.end)
        if output is not None:
            self.apply_comments(output, config.comments)
        return output

    def apply_comments(self, output: DisassemblyOutput, comments: Dict[int, str]) -> None:
        for address, text in comments.items():
            item = output.get(address & 0xFFFF)
            if item is not None:
                item.comment = text

    def _sections_for(self, config: ProjectConfig, contents: Sequence[int]) -> List[MemorySection]:
        if config.sections:
            return list(config.sections)
        # セクション未指定時はバッファ全体を逆アセンブル
        return [MemorySection(config.base_address, config.base_address + max(len(contents), 1) - 1)]
