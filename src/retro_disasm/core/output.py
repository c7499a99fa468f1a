# retro_disasm/core/output.py
"""
逆アセンブル結果

このモジュールは、1回の逆アセンブルパスで生成される出力（命令アイテムの列、アドレス索引、ラベル表）を定義します。
UIやレポート生成器への情報提供を責務とします。
"""
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional


# @intent:responsibility デコードされた1命令、またはデータ行・スキップ行を記録します。
@dataclass
class DisassemblyItem:
    """
    逆アセンブル出力の1行を表すデータクラス。
    ラベル修正（label fixup）でhas_labelが設定される以外は生成後に変更されません。
    """
    address: int
    opcodes: List[int] = field(default_factory=list) # 消費した生バイト列
    instruction: str = "" # 例: "ld bc,$1234"
    partition: Optional[str] = None
    has_label: bool = False
    has_symbol: bool = False
    has_label_symbol: bool = False
    symbol_value: Optional[int] = None
    token_position: Optional[int] = None # instruction内でのシンボル文字列の開始位置
    token_length: Optional[int] = None
    is_continuation: bool = False # 同一アドレスに続く補助行
    hard_comment: Optional[str] = None # マシン固有の注釈
    comment: Optional[str] = None # ソースコメント
    tstates: int = 0
    tstates2: int = 0

    @property
    def last_address(self) -> int:
        return (self.address + max(len(self.opcodes), 1) - 1) & 0xFFFF

    # @intent:utility_function 生バイト列を "CD 5E 33" 形式の文字列で返します。
    def opcode_hex(self) -> str:
        return " ".join(f"{b:02X}" for b in self.opcodes)

# @intent:responsibility ラベルとそれを参照する命令アドレスの一覧を保持します。
@dataclass
class DisassemblyLabel:
    address: int
    references: List[int] = field(default_factory=list) # 追加順を保持

# @intent:responsibility 1パス分の出力（アイテム列、アドレス索引、ラベル表）を管理します。
class DisassemblyOutput:
    """
    逆アセンブル出力。
    同一アドレスに複数のアイテムが追加された場合、索引は最後に追加されたアイテムを指します。
    """
    def __init__(self):
        self._items: List[DisassemblyItem] = []
        self._item_by_address: Dict[int, DisassemblyItem] = {}
        self._labels: Dict[int, DisassemblyLabel] = {}

    @property
    def items(self) -> List[DisassemblyItem]:
        return self._items

    @property
    def labels(self) -> Dict[int, DisassemblyLabel]:
        return self._labels

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[DisassemblyItem]:
        return iter(self._items)

    # @intent:responsibility アイテムを末尾に追加し、アドレスで索引付けします。
    def add_item(self, item: DisassemblyItem) -> None:
        self._items.append(item)
        self._item_by_address[item.address] = item

    # @intent:responsibility アドレスに対応するアイテムを返します。
    def get(self, address: int) -> Optional[DisassemblyItem]:
        return self._item_by_address.get(address)

    # @intent:responsibility ラベルを作成（既存なら再利用）し、参照元アドレスを記録します。
    def create_label(self, address: int, referring_address: Optional[int] = None) -> DisassemblyLabel:
        """
        ラベルを取得または作成します。
        referring_addressが指定された場合は、0であっても参照リストに追加します。
        """
        label = self._labels.get(address)
        if label is None:
            label = DisassemblyLabel(address)
            self._labels[address] = label
        if referring_address is not None:
            label.references.append(referring_address)
        return label

    # @intent:responsibility ラベル表のアドレスに一致するアイテムへhas_labelを設定します。
    def label_fixup(self) -> None:
        for address in self._labels:
            item = self._item_by_address.get(address)
            if item is not None:
                item.has_label = True
