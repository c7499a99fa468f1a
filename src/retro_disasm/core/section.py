# src/retro_disasm/core/section.py
"""
メモリセクションモデル

逆アセンブル対象のアドレス範囲と、その範囲の扱い方（命令として解析、データとして出力、スキップなど）を定義します。
MemoryMapは重なりのない昇順のセクション列を保持し、挿入時に重なりを自動的に解決します。
"""
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional

ADDRESS_MASK = 0xFFFF

# @intent:data_structure セクションの扱い方を表す列挙型。
class MemorySectionType(Enum):
    DISASSEMBLE = "DISASSEMBLE"
    BYTE_ARRAY = "BYTE_ARRAY"
    WORD_ARRAY = "WORD_ARRAY"
    SKIP = "SKIP"
    CUSTOM = "CUSTOM"

# @intent:responsibility 開始・終了アドレス（両端を含む）と種別を持つアドレス範囲を表現します。
@dataclass
class MemorySection:
    """
    連続したアドレス範囲。
    アドレスは16ビットに丸められ、開始 > 終了で生成された場合は入れ替えられます。
    """
    start_address: int
    end_address: int
    section_type: MemorySectionType = MemorySectionType.DISASSEMBLE

    def __post_init__(self):
        self.start_address &= ADDRESS_MASK
        self.end_address &= ADDRESS_MASK
        if self.start_address > self.end_address:
            self.start_address, self.end_address = self.end_address, self.start_address

    @property
    def length(self) -> int:
        return self.end_address - self.start_address + 1

    # @intent:responsibility 2つのセクションのアドレス範囲が重なるかを判定します。
    def overlaps(self, other: "MemorySection") -> bool:
        return other.start_address <= self.end_address and other.end_address >= self.start_address

    # @intent:responsibility アドレス範囲と種別が同一かを判定します。
    def same_section(self, other: "MemorySection") -> bool:
        return self == other

    # @intent:responsibility 2つのセクションの共通部分を返します。重なりがなければNone。
    def intersect(self, other: "MemorySection") -> Optional["MemorySection"]:
        """
        共通部分のセクションを返します。
        種別は問い合わせ側（self）のものを引き継ぎます。
        """
        if not self.overlaps(other):
            return None
        return MemorySection(
            max(self.start_address, other.start_address),
            min(self.end_address, other.end_address),
            self.section_type,
        )

# @intent:responsibility 重なりのないセクションを開始アドレスの昇順で保持します。
class MemoryMap:
    """
    メモリマップ。
    add()で挿入されたセクションは既存セクションより優先され、重なった部分は既存側から切り取られます。
    """
    def __init__(self, sections: Optional[List[MemorySection]] = None):
        self._sections: List[MemorySection] = []
        for section in sections or []:
            self.add(section)

    @property
    def sections(self) -> List[MemorySection]:
        return list(self._sections)

    def __iter__(self) -> Iterator[MemorySection]:
        return iter(list(self._sections))

    def __len__(self) -> int:
        return len(self._sections)

    def __getitem__(self, index: int) -> MemorySection:
        return self._sections[index]

    # @intent:responsibility 新しいセクションを挿入し、既存セクションとの重なりを解決します。
    # @intent:rationale 既存のリストを直接書き換えず、新しいリストを組み立ててから差し替えます。
    def add(self, section: MemorySection) -> None:
        """
        セクションを挿入します。
        新セクションより前から始まる既存セクションは直前で切り詰め、はみ出した末尾は別セクションとして残します。
        新セクション以降から始まる既存セクションは、完全に含まれていれば削除し、そうでなければ開始を新セクションの直後へずらします。
        """
        result: List[MemorySection] = []
        for existing in self._sections:
            if not existing.overlaps(section):
                result.append(existing)
                continue
            if existing.start_address < section.start_address:
                result.append(MemorySection(
                    existing.start_address, section.start_address - 1, existing.section_type))
            if existing.end_address > section.end_address:
                result.append(MemorySection(
                    section.end_address + 1, existing.end_address, existing.section_type))
        result.append(section)
        result.sort(key=lambda s: s.start_address)
        self._sections = result

    # @intent:responsibility 別のメモリマップのセクションをオフセット付きで取り込みます。
    def merge(self, other: "MemoryMap", offset: int = 0) -> None:
        for section in other:
            self.add(MemorySection(
                section.start_address + offset,
                section.end_address + offset,
                section.section_type,
            ))

    # @intent:responsibility 隣接するDISASSEMBLEセクションを1つに結合します。
    def normalize(self) -> None:
        result: List[MemorySection] = []
        for section in self._sections:
            if result:
                last = result[-1]
                if (last.section_type == MemorySectionType.DISASSEMBLE
                        and section.section_type == MemorySectionType.DISASSEMBLE
                        and last.end_address + 1 == section.start_address):
                    result[-1] = MemorySection(last.start_address, section.end_address, last.section_type)
                    continue
            result.append(MemorySection(section.start_address, section.end_address, section.section_type))
        self._sections = result
