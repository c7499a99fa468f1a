from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from retro_disasm.core.section import MemorySection

@dataclass
class DisassemblyOptions:
    decimal_mode: bool = False
    no_label_prefix: bool = False
    allow_extended_set: bool = False # Z80のみ: ZX Spectrum Next拡張命令を許可
    get_rom_page: Optional[Callable[[], int]] = None
    partition_labels: Optional[List[str]] = None # 8Kパーティションごとのラベル

    def rom_page(self) -> int:
        if self.get_rom_page is None:
            return -1
        return self.get_rom_page()

@dataclass
class ProjectConfig:
    architecture: str = "Z80" # "Z80", "MOS6502"
    machine: Optional[str] = None # "SPECTRUM48", "SPECTRUM128", "SPECTRUMP3", "SPECTRUMNEXT", "Z88"
    base_address: int = 0x0000
    address_offset: int = 0
    start: int = 0x0000
    end: int = 0xFFFF
    rom_page: Optional[int] = None
    options: DisassemblyOptions = field(default_factory=DisassemblyOptions)
    sections: List[MemorySection] = field(default_factory=list)
    comments: Dict[int, str] = field(default_factory=dict)
