# -*- coding: utf-8 -*-
"""
sudoku_solver.grid パッケージ

盤面（グリッド）に関する処理をまとめたサブパッケージです。
- board.py : 9x9 盤面の保持と書き換え（commit / clear）
- parser.py : テキストや DataFrame から内部表現への変換
- slot_extractor.py : 空きマスからのスロットの抽出
"""
