import yaml
from typing import Any, Dict, List, Optional
from retro_disasm.core.section import MemorySection, MemorySectionType
from .models import DisassemblyOptions, ProjectConfig

# セクション種別の別名（小文字で比較）
SECTION_TYPE_ALIASES: Dict[str, MemorySectionType] = {
    "disassemble": MemorySectionType.DISASSEMBLE,
    "code": MemorySectionType.DISASSEMBLE,
    "byte_array": MemorySectionType.BYTE_ARRAY,
    "bytes": MemorySectionType.BYTE_ARRAY,
    "word_array": MemorySectionType.WORD_ARRAY,
    "words": MemorySectionType.WORD_ARRAY,
    "skip": MemorySectionType.SKIP,
    "custom": MemorySectionType.CUSTOM,
    "calculator": MemorySectionType.CUSTOM,
}

ARCHITECTURE_ALIASES = {"M6510": "MOS6502", "6502": "MOS6502", "6510": "MOS6502"}

# @intent:utility_function 整数、"0x"形式、"$"形式、10進文字列を整数に変換します。
def parse_int(value: Any) -> int:
    if isinstance(value, bool):
        raise ValueError(f"Invalid integer format: {value}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            if text.lower().startswith("0x"):
                return int(text, 16)
            if text.startswith("$"):
                return int(text[1:], 16)
            return int(text)
        except ValueError:
            pass
    raise ValueError(f"Invalid integer format: {value}")

# @intent:responsibility YAML形式の逆アセンブルプロジェクト定義を読み込み、ProjectConfigを生成します。
class ConfigLoader:
    def load_from_file(self, path: str) -> ProjectConfig:
        with open(path, 'r') as f:
            data = yaml.safe_load(f)
        return self._parse_config(data or {})

    def load_from_string(self, text: str) -> ProjectConfig:
        return self._parse_config(yaml.safe_load(text) or {})

    def _parse_config(self, data: Dict[str, Any]) -> ProjectConfig:
        if not isinstance(data, dict):
            raise ValueError(f"Configuration must be a mapping: {data!r}")

        arch = str(data.get("architecture", "Z80")).upper()
        arch = ARCHITECTURE_ALIASES.get(arch, arch)
        machine = data.get("machine")

        # Parse options
        options_data = data.get("options", {}) or {}
        options = DisassemblyOptions(
            decimal_mode=bool(options_data.get("decimal_mode", False)),
            no_label_prefix=bool(options_data.get("no_label_prefix", False)),
            allow_extended_set=bool(options_data.get("allow_extended_set", False)),
            partition_labels=self._parse_partitions(data.get("partition_labels")),
        )
        rom_page = options_data.get("rom_page")

        # Parse sections
        sections: List[MemorySection] = []
        for section_data in data.get("sections", []) or []:
            sections.append(MemorySection(
                self._parse_int(section_data.get("start")),
                self._parse_int(section_data.get("end")),
                self._parse_section_type(section_data.get("type", "DISASSEMBLE")),
            ))

        comments = {
            self._parse_int(address): str(text)
            for address, text in (data.get("comments", {}) or {}).items()
        }

        return ProjectConfig(
            architecture=arch,
            machine=str(machine).upper() if machine else None,
            base_address=self._parse_int(data.get("base_address", 0)),
            address_offset=self._parse_int(data.get("address_offset", 0)),
            start=self._parse_int(data.get("start", 0)),
            end=self._parse_int(data.get("end", 0xFFFF)),
            rom_page=None if rom_page is None else self._parse_int(rom_page),
            options=options,
            sections=sections,
            comments=comments,
        )

    def _parse_section_type(self, value: Any) -> MemorySectionType:
        section_type = SECTION_TYPE_ALIASES.get(str(value).lower())
        if section_type is None:
            raise ValueError(f"Unknown section type: {value}")
        return section_type

    def _parse_partitions(self, value: Any) -> Optional[List[str]]:
        if value is None:
            return None
        return [str(label) for label in value]

    def _parse_int(self, value: Any) -> int:
        return parse_int(value)
