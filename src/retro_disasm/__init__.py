"""
retro_disasm - Z80 / 6502 向けの再ターゲット可能な逆アセンブラ。
"""
__version__ = "0.1.0"
