# -*- coding: utf-8 -*-
"""
sudoku_solver.csp パッケージ

数独の CSP（制約充足問題）を解く処理をまとめています。

- domains.py : スロットごとのドメイン（候補数字集合）の計算と、スロット集合の管理
- search.py  : MRV + バックトラックによる深さ優先探索
"""
