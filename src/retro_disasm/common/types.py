"""
共通の型定義を提供するモジュール。
デコーダ、拡張、レポートなど複数のレイヤーで使用される値オブジェクトを定義します。
"""
from typing import NamedTuple, Optional


# @intent:data_structure 1バイト読み取り（fetch/peek）の結果。拡張APIが受け取る。
class FetchResult(NamedTuple):
    offset: int
    overflow: bool
    opcode: int
    partition_label: Optional[str] = None

# @intent:data_structure プラグマ展開の結果。symbol_valueがNoneの場合はシンボル情報を持たない。
class Replacement(NamedTuple):
    text: str
    symbol_value: Optional[int] = None
    is_label: bool = False
