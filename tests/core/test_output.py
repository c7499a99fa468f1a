# tests/core/test_output.py
"""
retro_disasm.core.outputモジュールの単体テスト。
"""
from retro_disasm.core.output import DisassemblyItem, DisassemblyOutput

# @intent:test_suite 逆アセンブル出力（アイテム列、索引、ラベル表）の検証。

class TestDisassemblyOutput:
    def test_items_keep_insertion_order(self):
        output = DisassemblyOutput()
        output.add_item(DisassemblyItem(0x0002, [0xC9], "ret"))
        output.add_item(DisassemblyItem(0x0000, [0x00], "nop"))
        assert [item.address for item in output] == [0x0002, 0x0000]
        assert len(output) == 2

    # @intent:test_case_last_write_wins 同一アドレスの索引は最後に追加したアイテムを指すことを検証します。
    def test_index_is_last_write_wins(self):
        output = DisassemblyOutput()
        first = DisassemblyItem(0x1000, [0xE7, 0x93], "oz OS_POUT")
        second = DisassemblyItem(0x1000, [0x41, 0x00], '.defb "A", $00', is_continuation=True)
        output.add_item(first)
        output.add_item(second)
        assert output.get(0x1000) is second
        assert len(output.items) == 2

    def test_get_unknown_address(self):
        assert DisassemblyOutput().get(0x1234) is None

    # @intent:test_case_create_label ラベルは再利用され、参照元アドレス（0を含む）が追加順に記録されることを検証します。
    def test_create_label_records_references(self):
        output = DisassemblyOutput()
        label = output.create_label(0x0010, 0x0000)
        again = output.create_label(0x0010, 0x0020)
        assert label is again
        assert label.references == [0x0000, 0x0020]

    def test_create_label_without_reference(self):
        output = DisassemblyOutput()
        label = output.create_label(0x0010)
        assert label.references == []
        assert 0x0010 in output.labels

    # @intent:test_case_label_fixup ラベルのアドレスに一致するアイテムのみhas_labelが設定されることを検証します。
    def test_label_fixup(self):
        output = DisassemblyOutput()
        output.add_item(DisassemblyItem(0x0000, [0x00], "nop"))
        output.add_item(DisassemblyItem(0x0001, [0xC9], "ret"))
        output.create_label(0x0001, 0x0000)
        output.create_label(0x0005, 0x0000)
        output.label_fixup()
        assert output.get(0x0000).has_label is False
        assert output.get(0x0001).has_label is True


class TestDisassemblyItem:
    def test_opcode_hex(self):
        item = DisassemblyItem(0x0000, [0xCD, 0x5E, 0x33], "call $335E")
        assert item.opcode_hex() == "CD 5E 33"
        assert item.last_address == 0x0002

    def test_last_address_without_bytes(self):
        assert DisassemblyItem(0x0010, [], ".skip $0010").last_address == 0x0010
