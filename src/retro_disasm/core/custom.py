# retro_disasm/core/custom.py
"""
カスタム逆アセンブル拡張

マシン固有の呼び出し規約（ROMのエラー報告、電卓バイトコードなど）をデコーダに組み込むためのプロトコルを定義します。
拡張はDisassemblyApiを通じてのみエンジンにアクセスし、コアデコーダと同じプリミティブを使用します。
"""
from abc import ABC, abstractmethod
from typing import Optional, Sequence

from retro_disasm.common.types import FetchResult
from retro_disasm.core.output import DisassemblyItem, DisassemblyLabel
from retro_disasm.core.section import MemorySection

# @intent:responsibility エンジンが拡張に公開する操作の集合を定義します。
class DisassemblyApi(ABC):
    """
    拡張から利用できるエンジン操作。
    """
    @property
    @abstractmethod
    def decimal_mode(self) -> bool:
        pass

    @abstractmethod
    def get_memory_contents(self) -> Sequence[int]:
        pass

    @abstractmethod
    def get_offset(self) -> int:
        pass

    @abstractmethod
    def get_address_offset(self) -> int:
        """
        出力アイテムのアドレスに加算されるオフセットを返します。
        """
        pass

    # @intent:utility_function バッファ上のオフセットを出力アイテムのアドレスに変換します。
    def item_address(self, offset: int) -> int:
        return (offset + self.get_address_offset()) & 0xFFFF

    @abstractmethod
    def fetch(self) -> FetchResult:
        """
        1バイトを消費して返します。
        """
        pass

    @abstractmethod
    def peek(self, ahead: int = 0) -> FetchResult:
        """
        カーソルを進めずにahead先のバイトを返します。
        """
        pass

    @abstractmethod
    def add_disassembly_item(self, item: DisassemblyItem) -> None:
        pass

    @abstractmethod
    def create_label(self, address: int, referring_address: Optional[int] = None) -> DisassemblyLabel:
        pass

    @abstractmethod
    def get_rom_page(self) -> int:
        """
        現在アクティブなROMページを返します。不明な場合は-1。
        """
        pass

# @intent:responsibility マシン固有の逆アセンブル拡張が実装する能力の集合を定義します。
class CustomDisassembler(ABC):
    """
    カスタム逆アセンブラの基底クラス。
    1回のパスの間だけ状態を保持し、同時に複数のパスで共有してはいけません。
    """
    def __init__(self):
        self._api: Optional[DisassemblyApi] = None

    @property
    def api(self) -> DisassemblyApi:
        if self._api is None:
            raise RuntimeError("Disassembly API is not attached")
        return self._api

    # @intent:responsibility エンジンがAPIを渡します。
    def set_disassembly_api(self, api: DisassemblyApi) -> None:
        self._api = api

    # @intent:responsibility セクション開始時にパスごとの状態をリセットします。
    @abstractmethod
    def start_section_disassembly(self, section: MemorySection) -> None:
        pass

    # @intent:responsibility 次の命令を自分で処理する場合はバイトを消費してTrueを返します。
    @abstractmethod
    def before_instruction(self, peek_result: FetchResult) -> bool:
        pass

    # @intent:responsibility コアデコーダが生成したアイテムを調べ、次のステップのための状態を更新します。
    @abstractmethod
    def after_instruction(self, item: DisassemblyItem) -> None:
        pass

    # @intent:responsibility CUSTOM種別のセクションを出力します。処理しない場合はFalseを返します。
    def disassemble_custom_section(self, section: MemorySection) -> bool:
        return False
