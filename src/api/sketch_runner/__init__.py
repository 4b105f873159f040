"""
内部ヘルパ群（API 非公開）。

どこで: `api.sketch_runner`
何を: `api.sketch` の補助（純粋関数/初期化ヘルパ/駆動 Tickable）を分離し、
      `run_epicycles` 本体を薄く保つための内部モジュール群。
"""

from __future__ import annotations

__all__: list[str] = []
